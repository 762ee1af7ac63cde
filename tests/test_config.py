from pathlib import Path

import pytest

from config import EdgeConfig, GraphConfig, build_graph, load_config, parse_config
from errors import CapacityExceeded, ConfigError


def test_load_config_reads_graph_description(tmp_path: Path):
    cfg_path = tmp_path / "graph.yml"
    cfg_path.write_text(
        """
capacity: 8
reset_after_depth_first: true
log_level: debug
start: B
nodes: [A, B, C]
edges:
  - [A, B, 1]
  - [B, C, 2]
"""
    )

    cfg = load_config(cfg_path)

    assert cfg.capacity == 8
    assert cfg.reset_after_depth_first is True
    assert cfg.log_level == "DEBUG"
    assert cfg.start == "B"
    assert cfg.nodes == ("A", "B", "C")
    assert cfg.edges == (EdgeConfig("A", "B", 1), EdgeConfig("B", "C", 2))


def test_empty_document_gives_defaults(tmp_path: Path):
    cfg_path = tmp_path / "empty.yml"
    cfg_path.write_text("")

    assert load_config(cfg_path) == GraphConfig()


def test_sample_config_ships_with_repo(project_root: Path):
    cfg = load_config(project_root / "graphs" / "sample.yml")
    graph, rejected = build_graph(cfg)

    assert rejected == []
    assert graph.minimum_spanning_tree("A") == "A : A-B B-C C-D "


@pytest.mark.parametrize(
    "data",
    [
        ["A", "B"],
        {"capacity": -1},
        {"capacity": "ten"},
        {"edges": [["A", "B"]]},
        {"edges": [["A", "B", "heavy"]]},
        {"log_level": "LOUD"},
        {"nodes": 5},
        {"nodes": "ABC"},
        {"edges": 3},
        {"edges": [["A", "B", 1.9]]},
        {"reset_after_depth_first": "false"},
        {"reset_after_depth_first": 1},
    ],
)
def test_parse_config_rejects_malformed_documents(data):
    with pytest.raises(ConfigError):
        parse_config(data)


def test_load_config_rejects_invalid_yaml(tmp_path: Path):
    cfg_path = tmp_path / "broken.yml"
    cfg_path.write_text("nodes: [A, B\n")

    with pytest.raises(ConfigError):
        load_config(cfg_path)


def test_build_graph_reports_rejected_edges():
    cfg = parse_config(
        {
            "nodes": ["A", "B"],
            "edges": [["A", "B", 3], ["A", "A", 1], ["A", "Q", 2]],
        }
    )

    graph, rejected = build_graph(cfg)

    assert graph.weight("A", "B") == 3
    assert rejected == [EdgeConfig("A", "A", 1), EdgeConfig("A", "Q", 2)]


def test_build_graph_propagates_capacity_errors():
    cfg = parse_config({"capacity": 1, "nodes": ["A", "B"]})

    with pytest.raises(CapacityExceeded):
        build_graph(cfg)
