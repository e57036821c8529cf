import json
import xml.etree.ElementTree as ET

from hopgraph import Graph, single_source_paths
from hopgraph.export import export_tree_graphml, export_tree_json, to_networkx, tree_edges


def _tree():
    g = Graph.from_edges([(1, 2), (1, 3), (2, 4), (3, 4)], vertices=[1, 2, 3, 4, 5])
    return g, single_source_paths(g, 1)


def test_tree_edges():
    _, tree = _tree()
    assert sorted(tree_edges(tree)) == [(1, 2), (1, 3), (2, 4)]


def test_export_tree_json():
    _, tree = _tree()
    data = json.loads(export_tree_json(tree))
    assert data["source"] == 1
    assert [n["id"] for n in data["nodes"]] == [1, 2, 3, 4]
    assert {"source": 2, "target": 4} in data["edges"]
    assert len(data["edges"]) == 3


def test_export_tree_graphml_is_well_formed():
    _, tree = _tree()
    root = ET.fromstring(export_tree_graphml(tree))
    ns = "{http://graphml.graphdrawing.org/xmlns}"
    nodes = root.findall(f".//{ns}node")
    edges = root.findall(f".//{ns}edge")
    assert [n.attrib["id"] for n in nodes] == ["1", "2", "3", "4"]
    assert len(edges) == 3


def test_to_networkx_copies_vertices_and_edges():
    g, _ = _tree()
    G = to_networkx(g)
    assert G.is_directed()
    assert G.number_of_nodes() == 5
    assert G.number_of_edges() == 4
    assert G.has_edge(2, 4) and not G.has_edge(4, 2)
