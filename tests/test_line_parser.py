# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
from __future__ import annotations

import pytest

from models import LineError, PortRecord
from services import line_parser
from services.line_parser import parse_lines, parse_port_line, tokenize_line


def test_tokenize_keeps_quoted_label_together() -> None:
    assert tokenize_line('1 "Server A" #07c uplink to core') == [
        "1",
        '"Server A"',
        "#07c",
        "uplink",
        "to",
        "core",
    ]


def test_tokenize_preserves_escaped_quotes_inside_span() -> None:
    tokens = tokenize_line(r'4 "say \"hi\"" #fff x')
    assert tokens == ["4", r'"say \"hi\""', "#fff", "x"]


def test_tokenize_unterminated_quote_falls_back_to_bare_runs() -> None:
    assert tokenize_line('5 "open quote label') == ["5", '"open', "quote", "label"]


def test_tokenize_quote_inside_bare_token_does_not_open_span() -> None:
    assert tokenize_line('7 ab"cd ef" gh') == ["7", 'ab"cd', 'ef"', "gh"]


def test_tokenize_closing_quote_ends_token() -> None:
    assert tokenize_line('"ab"cd') == ['"ab"', "cd"]


def test_tokenize_collapses_mixed_whitespace() -> None:
    assert tokenize_line("  9\tlabel   \t comment  ") == ["9", "label", "comment"]


@pytest.mark.parametrize(
    "line",
    [
        '1 "Server A" #07c uplink to core',
        r'2 "a \"b\" c" plain',
        '3 "x"y z',
        '4 "unterminated label here',
        "5    spaced\t\ttabs",
    ],
)
def test_tokenize_is_idempotent_on_rejoined_tokens(line: str) -> None:
    tokens = tokenize_line(line)
    assert tokenize_line(" ".join(tokens)) == tokens


def test_scenario_a_record_with_color_and_comment() -> None:
    records, errors = parse_lines('1 "Server A" #07c uplink to core')
    assert errors == []
    assert records == {
        1: PortRecord(port=1, label="Server A", color="#07c", comment="uplink to core")
    }


def test_scenario_b_label_only() -> None:
    records, errors = parse_lines("3 eth0")
    assert errors == []
    assert records[3] == PortRecord(port=3, label="eth0", color=None, comment="")


def test_comment_without_color_starts_at_third_token() -> None:
    record = parse_port_line(tokenize_line("8 desk-12 blue cable to desk"))
    assert record is not None
    assert record.color is None
    assert record.comment == "blue cable to desk"


def test_color_only_detected_in_third_position() -> None:
    record = parse_port_line(tokenize_line("8 desk comment #abc"))
    assert record is not None
    assert record.color is None
    assert record.comment == "comment #abc"


def test_comment_quotes_are_trimmed() -> None:
    records, _ = parse_lines('3 "Printer" "second floor"')
    assert records[3].label == "Printer"
    assert records[3].comment == "second floor"


def test_empty_quoted_label_becomes_placeholder() -> None:
    records, _ = parse_lines('6 "" #abc spare')
    assert records[6].label == "?"
    assert records[6].color == "#abc"
    assert records[6].comment == "spare"


def test_single_quoted_label_is_trimmed() -> None:
    records, _ = parse_lines("6 'core' x")
    assert records[6].label == "core"


def test_parser_does_not_escape_html() -> None:
    records, _ = parse_lines("1 <b>x</b> a & b")
    assert records[1].label == "<b>x</b>"
    assert records[1].comment == "a & b"


def test_scenario_c_comment_and_blank_lines_are_skipped() -> None:
    records, errors = parse_lines("\n\nabc not a port\n# heading\n   \n")
    assert records == {}
    assert errors == []


def test_port_without_label_is_ignored() -> None:
    records, errors = parse_lines("7\n8 ok")
    assert list(records) == [8]
    assert errors == []


def test_leading_whitespace_before_port_is_accepted() -> None:
    records, _ = parse_lines("   4 foo")
    assert records[4].label == "foo"


def test_port_number_uses_leading_digits() -> None:
    records, _ = parse_lines("12a label")
    assert list(records) == [12]


def test_last_line_wins_for_duplicate_port() -> None:
    records, errors = parse_lines('2 first #111 old\n2 "second" #222 new comment')
    assert errors == []
    assert records[2] == PortRecord(port=2, label="second", color="#222", comment="new comment")
    assert len(records) == 1


def test_crlf_content_is_accepted() -> None:
    records, _ = parse_lines("1 a x\r\n2 b\r\n\r\n")
    assert records[1].comment == "x"
    assert records[2].label == "b"


def test_fixture_content(sample_content: str) -> None:
    records, errors = parse_lines(sample_content)
    assert sorted(records) == [1, 2, 3]
    assert errors == []


def test_well_formed_digit_lines_never_produce_errors() -> None:
    lines = [
        "1 a",
        '2 "b c" #fff d',
        "3 'e' f g h",
        '4 "unterminated',
        "5 x #notacolor",
        "6\tt",
    ]
    _, errors = parse_lines("\n".join(lines))
    assert errors == []


def test_lines_without_fields_are_reported_and_scan_continues(monkeypatch) -> None:
    calls = {"n": 0}
    real_tokenize = line_parser.tokenize_line

    def flaky_tokenize(line: str) -> list[str]:
        calls["n"] += 1
        if calls["n"] == 1:
            return []
        return real_tokenize(line)

    monkeypatch.setattr(line_parser, "tokenize_line", flaky_tokenize)
    records, errors = parse_lines("# header\n1 broken\n2 fine")
    assert errors == [LineError(line_no=2, line_text="1 broken")]
    assert list(records) == [2]


def test_empty_content_yields_nothing() -> None:
    assert parse_lines("") == ({}, [])
    assert parse_lines("\n\n  \n") == ({}, [])
