import pytest

from bridgecut.io import (
    iter_records,
    load_graph,
    load_records,
    parse_record,
    parse_records,
)


def test_parse_record_basic():
    assert parse_record("jqt: rhn xhk nvd") == ("jqt", ["rhn", "xhk", "nvd"])


def test_parse_record_tolerates_extra_whitespace():
    assert parse_record("  a :   b\tc  ") == ("a", ["b", "c"])


def test_parse_record_without_neighbors():
    assert parse_record("a:") == ("a", [])


def test_parse_record_missing_separator():
    with pytest.raises(ValueError, match="Line 4: missing ':'"):
        parse_record("a b c", line_no=4)


def test_parse_record_empty_label():
    with pytest.raises(ValueError, match="empty node label"):
        parse_record(": b c")


def test_iter_records_skips_blank_and_comments():
    lines = ["# comment", "", "a: b", "   ", "b: c"]
    assert list(iter_records(lines)) == [("a", ["b"]), ("b", ["c"])]


def test_parse_records_reports_line_number():
    with pytest.raises(ValueError, match="Line 2"):
        parse_records("a: b\nb c\n")


def test_load_records(data_dir):
    records = load_records(data_dir / "example.txt")
    assert len(records) == 13
    assert records[0] == ("jqt", ["rhn", "xhk", "nvd"])


def test_load_records_malformed(data_dir):
    with pytest.raises(ValueError, match="missing ':'"):
        load_records(data_dir / "malformed.txt")


def test_load_records_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_records(tmp_path / "nope.txt")


def test_load_graph(data_dir):
    graph, node_map = load_graph(data_dir / "example.txt")
    assert graph.num_nodes() == 15
    assert graph.num_edges() == 33
    assert len(node_map) == 15
    graph.check_symmetry()
