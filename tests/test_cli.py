from __future__ import annotations

from pathlib import Path

import pytest

from sgraph import cli
from sgraph.io import load_matrix_yaml
from sgraph.sparse.matrix import matrix_entries

DIAMOND_YAML = "0: [1, 2]\n1: [3]\n2: [3]\n3: []\n"


def test_cli_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main([])
    assert exc.value.code == 0
    assert "usage" in capsys.readouterr().out


def test_cli_generate_text(capsys) -> None:
    cli.main(["generate", "--size", "3", "--density", "1", "--seed", "1"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert [line.split(":")[0] for line in lines] == ["0", "1", "2"]
    assert all(line.count("(") == 3 for line in lines)


def test_cli_generate_yaml_is_loadable(capsys) -> None:
    cli.main(
        ["generate", "-n", "4", "-d", "1", "-s", "3", "--shape", "diagonal", "--yaml"]
    )
    m = load_matrix_yaml(capsys.readouterr().out)
    assert m.indices() == (0, 1, 2, 3)
    assert matrix_entries(m) == 4


def test_cli_generate_invalid_density_exits(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["generate", "--size", "3", "--density", "2"])
    assert exc.value.code == 1
    assert "ERROR" in capsys.readouterr().out


def test_cli_reach_layers_shortest_and_paths(tmp_path: Path, capsys) -> None:
    graph = tmp_path / "diamond.yaml"
    graph.write_text(DIAMOND_YAML)

    cli.main(["reach", str(graph), "--start", "0", "--target", "3", "--paths"])
    out = capsys.readouterr().out
    assert "layer 0: 0" in out
    assert "layer 1: 1, 2" in out
    assert "layer 2: 3" in out
    assert "(3 | 1)" in out
    assert "disjoint paths: 1" in out
    assert "0 -> 1 -> 3" in out


def test_cli_reach_unreachable_target(tmp_path: Path, capsys) -> None:
    graph = tmp_path / "diamond.yaml"
    graph.write_text(DIAMOND_YAML)

    cli.main(["--quiet", "reach", str(graph), "--start", "3", "--target", "0"])
    assert "shortest: unreachable" in capsys.readouterr().out


def test_cli_reach_missing_file_exits(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(["reach", str(tmp_path / "nope.yaml"), "--start", "0"])
    assert exc.value.code == 1


def test_cli_reach_invalid_file_exits(tmp_path: Path, capsys) -> None:
    graph = tmp_path / "bad.yaml"
    graph.write_text("0: 5\n")
    with pytest.raises(SystemExit) as exc:
        cli.main(["reach", str(graph), "--start", "0"])
    assert exc.value.code == 1
    assert "Invalid graph file" in capsys.readouterr().out


def test_cli_reach_broken_yaml_exits(tmp_path: Path, capsys) -> None:
    graph = tmp_path / "broken.yaml"
    graph.write_text("0: [1, 2\n")
    with pytest.raises(SystemExit) as exc:
        cli.main(["reach", str(graph), "--start", "0"])
    assert exc.value.code == 1
    assert "Invalid YAML" in capsys.readouterr().out


@pytest.mark.parametrize(
    "vertex_args",
    [["--start", "-1"], ["--start", "0", "--target", "3", "-2"]],
)
def test_cli_reach_negative_vertex_exits(tmp_path: Path, capsys, vertex_args) -> None:
    graph = tmp_path / "diamond.yaml"
    graph.write_text(DIAMOND_YAML)
    with pytest.raises(SystemExit) as exc:
        cli.main(["reach", str(graph), *vertex_args])
    assert exc.value.code == 1
    assert "non-negative" in capsys.readouterr().out
