"""Utilities for reconstructing paths from predecessor mappings."""

from __future__ import annotations

from typing import Hashable, List, Mapping, Optional, Set, TypeVar

from .exceptions import InputError

V = TypeVar("V", bound=Hashable)


def reconstruct_path(
    predecessors: Mapping[V, Optional[V]],
    source: V,
    target: V,
) -> List[V]:
    """Return the path from ``source`` to ``target`` using a predecessor mapping.

    Args:
        predecessors: Predecessor of each vertex, ``None`` for the source and
            for vertices that were never reached.
        source: Source vertex.
        target: Target vertex.

    Returns:
        Vertices from source to target (inclusive). Returns an empty list if
        no path exists.

    Raises:
        InputError: If ``source`` or ``target`` has no entry in ``predecessors``.
    """
    if source not in predecessors or target not in predecessors:
        raise InputError("source/target not present in predecessor mapping.")
    if source == target:
        return [source]

    # Walk backwards from target to source
    chain: List[V] = []
    cur: Optional[V] = target
    seen: Set[V] = set()
    while cur is not None:
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        if cur in seen:
            break
        seen.add(cur)
        cur = predecessors.get(cur)

    return []  # unreachable


__all__ = ["reconstruct_path"]
