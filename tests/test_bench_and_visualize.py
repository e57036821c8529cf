import pytest

from hopgraph import Graph, single_source_paths
from hopgraph.bench import main as bench_main
from hopgraph.bench import run_once


def test_run_once_cross_checks():
    res = run_once(25, 70, seed=2)
    assert res.n == 25
    assert res.m == 70
    assert res.backends_agree
    assert res.matches_networkx


def test_bench_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "bench.csv"
    bench_main(["--sizes", "8,12", "--trials", "2", "--out-csv", str(out)])
    lines = out.read_text().splitlines()
    assert lines[0].startswith("n,m,trial")
    assert len(lines) == 3
    assert "yes" in capsys.readouterr().out


def test_draw_graph_highlights_path():
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    from hopgraph.visualize import draw_graph

    g = Graph.from_edges([(1, 2), (2, 3), (1, 3)])
    path = single_source_paths(g, 1).path_to(3)
    ax = draw_graph(g, path=path, layout="circular", title="demo")
    assert ax.get_title() == "demo"
    with pytest.raises(ValueError):
        draw_graph(g, layout="hexagonal")
    matplotlib.pyplot.close("all")
