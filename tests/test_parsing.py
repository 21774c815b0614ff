"""Tests for comma-separated input parsing."""

from workflow_replicator.parsing import parse_comma_list


class TestParseCommaList:
    def test_trims_and_unquotes(self):
        assert parse_comma_list("a, b ,'c'") == ["a", "b", "c"]

    def test_removes_quotes_anywhere(self):
        assert parse_comma_list('"ci.yml", re"lease.yml') == ["ci.yml", "release.yml"]

    def test_keeps_order_and_duplicates(self):
        assert parse_comma_list("b,a,b") == ["b", "a", "b"]

    def test_trailing_comma_yields_empty_entry(self):
        assert parse_comma_list("a,") == ["a", ""]

    def test_single_value(self):
        assert parse_comma_list("only") == ["only"]
