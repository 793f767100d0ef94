"""
Tests for line classification and field scanning.
"""

from lnxconfig.config.lexer import (
    FieldType,
    ScanPattern,
    field,
    first_token,
    iter_directive_lines,
)
from lnxconfig.config.parser import INTERFACE, NEIGHBOR, RIP_ADVERTISE_TO, ROUTE


def test_first_token() -> None:
    assert first_token("interface if0") == "interface"
    assert first_token("   routing rip") == "routing"
    assert first_token("") is None
    assert first_token("   \t") is None


def test_iter_directive_lines_skips_comments_and_blanks() -> None:
    lines = [
        "# comment\n",
        "\n",
        "routing rip\n",
        "   \n",
        "foo bar # not a comment\n",
    ]

    result = list(iter_directive_lines(lines))

    assert [(d.number, d.keyword) for d in result] == [(3, "routing"), (5, "foo")]
    assert result[0].text == "routing rip"


def test_indented_hash_is_not_a_comment() -> None:
    result = list(iter_directive_lines(["  # indented\n"]))

    assert len(result) == 1
    assert result[0].keyword == "#"


def test_interface_pattern_full_match() -> None:
    tokens = INTERFACE.scan("interface if0 10.0.0.2/24 127.0.0.1:5001", line=7)

    assert INTERFACE.arity == 5
    assert [t.value for t in tokens] == ["if0", "10.0.0.2", "24", "127.0.0.1", "5001"]
    assert [t.type for t in tokens] == [
        FieldType.WORD,
        FieldType.ADDRESS,
        FieldType.PREFIX,
        FieldType.ADDRESS,
        FieldType.INTEGER,
    ]
    assert all(t.line == 7 for t in tokens)
    assert tokens[0].column == 11


def test_interface_pattern_stops_at_first_mismatch() -> None:
    tokens = INTERFACE.scan("interface if0 bad")

    # name and the address text match, the '/' does not
    assert [t.value for t in tokens] == ["if0", "bad"]


def test_prefix_reads_at_most_two_digits() -> None:
    tokens = ROUTE.scan("route 10.0.0.0/245 via 10.0.0.1")

    assert [t.value for t in tokens] == ["10.0.0.0", "24"]


def test_neighbor_ifname_stops_at_hash() -> None:
    tokens = NEIGHBOR.scan("neighbor 10.2.0.3 at 127.0.0.1:5003 via if0# thing")

    assert len(tokens) == NEIGHBOR.arity
    assert tokens[-1].value == "if0"


def test_trailing_text_is_ignored() -> None:
    tokens = RIP_ADVERTISE_TO.scan("rip advertise-to 10.0.0.1 extra stuff")

    assert [t.value for t in tokens] == ["10.0.0.1"]


def test_keyword_mismatch_yields_nothing() -> None:
    assert ROUTE.scan("routing rip") == ()


def test_custom_pattern() -> None:
    pattern = ScanPattern("link", (field(FieldType.WORD), "to", field(FieldType.INTEGER)))

    assert pattern.arity == 2
    assert [t.value for t in pattern.scan("link a to 3")] == ["a", "3"]
    assert [t.value for t in pattern.scan("link a from 3")] == ["a"]
