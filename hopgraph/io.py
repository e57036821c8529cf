"""Edge-list input/output for unweighted directed graphs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Dict, Hashable, List, Optional, Tuple, Union

from .exceptions import GraphFormatError, InputError
from .graph import Graph

Key = Union[int, str]
Parsed = Tuple[List[Key], List[Tuple[Key, Key]]]


def parse_key(raw: object) -> Key:
    """Turn a raw token into a vertex key, preferring ``int``."""
    if isinstance(raw, bool):
        raise GraphFormatError(f"invalid vertex key {raw!r}")
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not text:
        raise GraphFormatError("empty vertex key")
    try:
        return int(text)
    except ValueError:
        return text


def _check_key(v: Hashable, fmt: str) -> None:
    """Reject keys that would not read back as the same vertex."""
    if isinstance(v, bool) or not isinstance(v, (int, str)):
        raise GraphFormatError(f"cannot write vertex {v!r} as {fmt}: keys must be int or str")
    if isinstance(v, str):
        if not v or v != v.strip() or parse_key(v) != v:
            raise GraphFormatError(f"cannot write vertex {v!r} as {fmt}: it would read back as {v.strip()!r}")
        if fmt == "csv" and (v.startswith("#") or any(c in v for c in ",\t\n\r")):
            raise GraphFormatError(f"cannot write vertex {v!r} as csv: separator or comment character")


def _read_csv(path: Path) -> Parsed:
    """Read ``u,v`` rows; a row with a single column declares a vertex.

    Lines starting with ``#`` and blank lines are skipped. Tabs are accepted
    as separators.

    Raises:
        GraphFormatError: If a row has more than two columns or the file
            declares nothing.
    """
    vertices: List[Key] = []
    edges: List[Tuple[Key, Key]] = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row or row.startswith("#"):
                continue
            parts = [p.strip() for p in row.replace("\t", ",").split(",")]
            if len(parts) == 1:
                vertices.append(parse_key(parts[0]))
            elif len(parts) == 2:
                edges.append((parse_key(parts[0]), parse_key(parts[1])))
            else:
                raise GraphFormatError(f"{path}:{lineno}: expected 'u,v' or 'v', got {row!r}")
    if not vertices and not edges:
        raise GraphFormatError("no vertices or edges parsed from file")
    return vertices, edges


def _write_csv(path: Path, G: Graph[Hashable]) -> None:
    for v in G.get_vertices():
        _check_key(v, "csv")
    with path.open("w", encoding="utf-8") as fh:
        fh.write("# u,v\n")
        for v in G.get_vertices():
            if G.degree(v) == 0:
                fh.write(f"{v}\n")
        for u, v in G.edges():
            fh.write(f"{u},{v}\n")


def _read_jsonl(path: Path) -> Parsed:
    """Read one JSON object per line: ``{"u": .., "v": ..}`` or ``{"vertex": ..}``.

    Raises:
        GraphFormatError: If a line is not valid JSON, lacks the expected
            keys, or the file declares nothing.
    """
    vertices: List[Key] = []
    edges: List[Tuple[Key, Key]] = []
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            try:
                obj = json.loads(row)
            except json.JSONDecodeError as exc:
                raise GraphFormatError(f"{path}:{lineno}: {exc.msg}") from exc
            if not isinstance(obj, dict):
                raise GraphFormatError(f"{path}:{lineno}: expected a JSON object")
            if "vertex" in obj:
                vertices.append(parse_key(obj["vertex"]))
            elif "u" in obj and "v" in obj:
                edges.append((parse_key(obj["u"]), parse_key(obj["v"])))
            else:
                raise GraphFormatError(f"{path}:{lineno}: expected keys 'u' and 'v' or 'vertex'")
    if not vertices and not edges:
        raise GraphFormatError("no vertices or edges parsed from file")
    return vertices, edges


def _write_jsonl(path: Path, G: Graph[Hashable]) -> None:
    for v in G.get_vertices():
        _check_key(v, "jsonl")
    with path.open("w", encoding="utf-8") as fh:
        for v in G.get_vertices():
            if G.degree(v) == 0:
                fh.write(json.dumps({"vertex": v}) + "\n")
        for u, v in G.edges():
            fh.write(json.dumps({"u": u, "v": v}) + "\n")


_FMT_READERS: Dict[str, Callable[[Path], Parsed]] = {
    "csv": _read_csv,
    "jsonl": _read_jsonl,
}

_FMT_WRITERS: Dict[str, Callable[[Path, Graph[Hashable]], None]] = {
    "csv": _write_csv,
    "jsonl": _write_jsonl,
}


def _detect_format(path: Path) -> Optional[str]:
    ext = path.suffix.lower()
    if ext in {".csv", ".tsv"}:
        return "csv"
    if ext in {".jsonl", ".json"}:
        return "jsonl"
    return None


def read_graph(path: str, fmt: Optional[str] = None) -> Graph[Key]:
    """Read a graph from an edge-list file.

    Args:
        path: The path to the graph file.
        fmt: ``"csv"`` or ``"jsonl"``. If None, the format is detected from
            the extension.

    Returns:
        The graph. Vertex lines are added first, then edge endpoints in
        file order.

    Raises:
        GraphFormatError: If the format is unknown or the file is malformed.
        InputError: If the file cannot be opened.
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_READERS:
        raise GraphFormatError(f"unknown graph format for {path}")
    try:
        vertices, edges = _FMT_READERS[fmt](p)
    except UnicodeDecodeError as exc:
        raise GraphFormatError(f"{path}: not UTF-8 text ({exc.reason} at byte {exc.start})") from exc
    except OSError as exc:
        raise InputError(f"cannot read {path}: {exc.strerror or exc}") from exc
    return Graph.from_edges(edges, vertices=vertices)


def write_graph(G: Graph[Hashable], path: str, fmt: Optional[str] = None) -> None:
    """Write ``G`` as an edge list; isolated vertices get a line of their own.

    Raises:
        GraphFormatError: If the format is unknown or a vertex key cannot be
            represented in it.
        InputError: If the file cannot be written.
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_WRITERS:
        raise GraphFormatError(f"unknown graph format for {path}")
    try:
        _FMT_WRITERS[fmt](p, G)
    except OSError as exc:
        raise InputError(f"cannot write {path}: {exc.strerror or exc}") from exc


__all__ = ["parse_key", "read_graph", "write_graph"]
