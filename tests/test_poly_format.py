import logging
from pathlib import Path

import pytest

from roadnav.domain.errors import GraphFormatError, GraphIOError
from roadnav.domain.models import Node, RawEdge, RawNetwork
from roadnav.io.poly_format import format_poly, parse_poly, read_poly

DATA_DIR = Path(__file__).resolve().parent / "data"


def test_read_square_file():
    network = read_poly(DATA_DIR / "square.poly")

    assert [(n.id, n.x, n.y) for n in network.nodes] == [
        (0, 0.0, 0.0),
        (1, 1.0, 0.0),
        (2, 1.0, 1.0),
        (3, 0.0, 1.0),
    ]
    assert network.edges == [
        RawEdge(0, 1, False),
        RawEdge(1, 2, False),
        RawEdge(2, 3, True),
    ]
    assert network.source.endswith("square.poly")


def test_sparse_file_ids_become_dense():
    text = "2 2 0 1\n10 0.5 0.5\n20 1.5 2.5 7 7\n1 1\n0 20 10 0\n0\n"

    network = parse_poly(text)

    assert [n.id for n in network.nodes] == [0, 1]
    assert [n.external_id for n in network.nodes] == [10, 20]
    assert network.edges == [RawEdge(1, 0, False)]


def test_malformed_lines_are_skipped_with_warning(caplog):
    text = "3 2 0 1\n0 0 0\n1 1\n2 2 2\n2 1\n0 0 2\n1 0 2 1\n0\n"

    with caplog.at_level(logging.WARNING):
        network = parse_poly(text)

    assert [n.external_id for n in network.nodes] == [0, 2]
    assert network.edges == [RawEdge(0, 1, True)]
    assert "Skipping malformed vertex line" in caplog.text
    assert "Skipping malformed edge line" in caplog.text


def test_edge_with_unknown_endpoint_is_skipped(caplog):
    text = "1 2 0 1\n0 0 0\n1 1\n0 0 5 0\n0\n"

    with caplog.at_level(logging.WARNING):
        network = parse_poly(text)

    assert network.edges == []
    assert "unknown endpoint" in caplog.text


def test_duplicate_vertex_id_keeps_first(caplog):
    text = "2 2 0 1\n0 0 0\n0 9 9\n0 1\n0\n"

    with caplog.at_level(logging.WARNING):
        network = parse_poly(text)

    assert len(network.nodes) == 1
    assert network.nodes[0].x == 0.0
    assert "duplicate" in caplog.text


def test_missing_trailer_only_warns(caplog):
    text = "1 2 0 1\n0 0 0\n0 1\n"

    with caplog.at_level(logging.WARNING):
        network = parse_poly(text)

    assert len(network.nodes) == 1
    assert "Missing terminal 0 line" in caplog.text


def test_blank_lines_are_ignored():
    text = "\n1 2 0 1\n\n0 3 4\n\n0 1\n0\n\n"

    network = parse_poly(text)

    assert network.nodes[0].x == 3.0


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "vertex header"),
        ("2 2 0\n", "Malformed vertex header"),
        ("x 2 0 1\n", "Invalid vertex count"),
        ("3 2 0 1\n0 0 0\n1 1 1\n", "vertex 3 of 3"),
        ("1 2 0 1\n0 0 0\n", "edge header"),
        ("1 2 0 1\n0 0 0\n2\n", "Malformed edge header"),
        ("-1 2 0 1\n0\n0\n", "Negative vertex count"),
        ("1 2 0 1\n0 0 0\n-2 1\n0\n", "Negative edge count"),
        ("1 2 0 1\n0 0 0\n2 1\n0 0 0 0\n", "edge 2 of 2"),
        ("1 2 0 1\n0 abc 0\n0 1\n0\n", "Invalid x coordinate"),
        ("1 2 0 1\n0 0 0\n1 1\n0 0 zero 0\n0\n", "Invalid edge target"),
    ],
)
def test_fatal_format_errors(text, message):
    with pytest.raises(GraphFormatError) as excinfo:
        parse_poly(text, source="bad.poly")

    assert message in str(excinfo.value)
    assert excinfo.value.file_path == "bad.poly"


def test_format_error_reports_line_number():
    with pytest.raises(GraphFormatError) as excinfo:
        parse_poly("1 2 0 1\n0 0 nope\n0 1\n0\n")

    assert excinfo.value.line_number == 2


def test_missing_file_is_io_error(tmp_path):
    with pytest.raises(GraphIOError) as excinfo:
        read_poly(tmp_path / "missing.poly")

    assert not isinstance(excinfo.value, GraphFormatError)
    assert excinfo.value.file_path.endswith("missing.poly")


def test_format_poly_layout():
    network = RawNetwork(
        nodes=[Node(0, 20.5, 10.25), Node(1, 21.0, 11.0)],
        edges=[RawEdge(0, 1, False), RawEdge(1, 0, True)],
    )

    assert format_poly(network) == (
        "2\t2\t0\t1\n"
        "0\t20.500000\t10.250000\n"
        "1\t21.000000\t11.000000\n"
        "2\t1\n"
        "0\t0\t1\t0\n"
        "1\t1\t0\t1\n"
        "0\n"
    )
