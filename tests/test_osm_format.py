import logging
from pathlib import Path

import pytest

from roadnav.domain.errors import GraphFormatError, GraphIOError
from roadnav.domain.models import RawEdge
from roadnav.io.osm_format import parse_osm, read_osm

DATA_DIR = Path(__file__).resolve().parent / "data"


def test_read_town_nodes_in_document_order():
    network = read_osm(DATA_DIR / "town.osm")

    assert [n.external_id for n in network.nodes] == [1, 2, 3, 4, 5, 6]
    assert [n.id for n in network.nodes] == [0, 1, 2, 3, 4, 5]
    # x = lon, y = lat
    assert (network.nodes[0].x, network.nodes[0].y) == (20.0, 10.0)
    assert (network.nodes[5].x, network.nodes[5].y) == (22.0, 9.0)


def test_read_town_highway_edges():
    network = read_osm(DATA_DIR / "town.osm")

    assert network.edges == [
        RawEdge(1, 0, False),
        RawEdge(0, 3, False),
        RawEdge(3, 4, False),
        RawEdge(2, 0, False),
        RawEdge(3, 5, False),
        RawEdge(5, 4, True),
    ]


def test_unresolved_reference_and_short_way_warn(caplog):
    with caplog.at_level(logging.WARNING):
        read_osm(DATA_DIR / "town.osm")

    assert "unknown node reference" in caplog.text
    assert "fewer than two nodes" in caplog.text


def test_oneway_variants():
    text = """<osm>
      <node id="1" lat="0" lon="0"/>
      <node id="2" lat="0" lon="1"/>
      <node id="3" lat="0" lon="2"/>
      <way id="1"><nd ref="1"/><nd ref="2"/>
        <tag k="highway" v="primary"/><tag k="oneway" v="true"/></way>
      <way id="2"><nd ref="2"/><nd ref="3"/>
        <tag k="highway" v="primary"/><tag k="oneway" v="no"/></way>
    </osm>"""

    network = parse_osm(text)

    assert network.edges == [RawEdge(0, 1, True), RawEdge(1, 2, False)]


def test_ways_without_highway_tag_are_ignored():
    text = """<osm>
      <node id="1" lat="0" lon="0"/>
      <node id="2" lat="0" lon="1"/>
      <way id="1"><nd ref="1"/><nd ref="2"/><tag k="waterway" v="river"/></way>
    </osm>"""

    network = parse_osm(text)

    assert len(network.nodes) == 2
    assert network.edges == []


def test_namespaced_document():
    text = """<osm xmlns="http://www.openstreetmap.org/osm/0.6">
      <node id="1" lat="0" lon="0"/>
      <node id="2" lat="0" lon="1"/>
      <way id="1"><nd ref="1"/><nd ref="2"/><tag k="highway" v="primary"/></way>
    </osm>"""

    network = parse_osm(text)

    assert network.edges == [RawEdge(0, 1, False)]


def test_max_nodes_caps_registration(caplog):
    text = """<osm>
      <node id="1" lat="0" lon="0"/>
      <node id="2" lat="0" lon="1"/>
      <node id="3" lat="0" lon="2"/>
      <way id="1"><nd ref="1"/><nd ref="2"/><nd ref="3"/>
        <tag k="highway" v="primary"/></way>
    </osm>"""

    with caplog.at_level(logging.WARNING):
        network = parse_osm(text, max_nodes=2)

    assert [n.external_id for n in network.nodes] == [1, 2]
    assert network.edges == [RawEdge(0, 1, False)]
    assert "Node limit reached" in caplog.text


def test_nodes_past_the_cap_are_not_validated():
    text = """<osm>
      <node id="1" lat="0" lon="0"/>
      <node id="2" lat="0" lon="1"/>
      <node id="3" lat="north" lon="2"/>
      <way id="1"><nd ref="1"/><nd ref="2"/><tag k="highway" v="primary"/></way>
    </osm>"""

    network = parse_osm(text, max_nodes=2)

    assert [n.external_id for n in network.nodes] == [1, 2]
    assert network.edges == [RawEdge(0, 1, False)]


def test_unknown_references_warn_once_per_way(caplog):
    text = """<osm>
      <node id="1" lat="0" lon="0"/>
      <node id="2" lat="0" lon="1"/>
      <node id="3" lat="0" lon="2"/>
      <node id="4" lat="0" lon="3"/>
      <way id="1"><nd ref="1"/><nd ref="2"/><nd ref="3"/><nd ref="4"/>
        <tag k="highway" v="primary"/></way>
    </osm>"""

    with caplog.at_level(logging.WARNING):
        network = parse_osm(text, max_nodes=2)

    assert network.edges == [RawEdge(0, 1, False)]
    records = [r for r in caplog.records if "unknown node references" in r.getMessage()]
    assert len(records) == 1
    assert records[0].skipped == 2


def test_malformed_xml_is_format_error():
    with pytest.raises(GraphFormatError):
        parse_osm("<osm><node id='1'></osm>", source="broken.osm")


@pytest.mark.parametrize(
    "node",
    [
        '<node id="1" lon="0"/>',
        '<node id="1" lat="north" lon="0"/>',
        '<node lat="0" lon="0"/>',
    ],
)
def test_invalid_node_is_format_error(node):
    with pytest.raises(GraphFormatError):
        parse_osm(f"<osm>{node}</osm>")


def test_missing_file_is_io_error(tmp_path):
    with pytest.raises(GraphIOError):
        read_osm(tmp_path / "nowhere.osm")


def test_reading_twice_shares_no_state():
    first = read_osm(DATA_DIR / "town.osm")
    second = read_osm(DATA_DIR / "town.osm")

    assert [n.id for n in second.nodes] == [n.id for n in first.nodes]
    assert second.edges == first.edges
    assert second.nodes[0] is not first.nodes[0]
