# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Line parser turning panel content into port records.

Each content line describes one port::

    <port> <label or "quoted label"> [#color] [comment ...]

Lines that do not start with a port number are treated as comments and
skipped. HTML escaping is left to the renderer so records stay plain text.
"""

from __future__ import annotations

import logging
import re

from models import PLACEHOLDER_LABEL, LineError, PortRecord

logger = logging.getLogger(__name__)

QUOTE_CHARS = "\"'"

_PORT_LINE = re.compile(r"^\s*(\d+)")
_TRAILING_NEWLINES = re.compile(r"[\r\n]*$")
_LEADING_BLANKS = re.compile(r"^\s*[\r\n]*")


def _scan_quoted(line: str, start: int) -> int | None:
    """Return the index just past the closing quote, or None if unterminated."""
    i = start + 1
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch == '"':
            return i + 1
        i += 1
    return None


def tokenize_line(line: str) -> list[str]:
    """Split a line on whitespace, keeping double-quoted spans together.

    Quote characters and escapes are preserved in the returned tokens. A quote
    only opens a span at the start of a token; an unterminated quote is read
    as an ordinary run of non-whitespace.
    """
    tokens: list[str] = []
    i = 0
    n = len(line)
    while i < n:
        if line[i].isspace():
            i += 1
            continue
        if line[i] == '"':
            end = _scan_quoted(line, i)
            if end is not None:
                tokens.append(line[i:end])
                i = end
                continue
        start = i
        while i < n and not line[i].isspace():
            i += 1
        tokens.append(line[start:i])
    return tokens


def _strip_content(text: str) -> str:
    text = _TRAILING_NEWLINES.sub("", text, count=1)
    return _LEADING_BLANKS.sub("", text, count=1)


def parse_port_line(tokens: list[str]) -> PortRecord | None:
    """Build a record from the tokens of one line.

    Returns None for lines carrying only a port number.
    """
    if len(tokens) < 2:
        return None
    match = _PORT_LINE.match(tokens[0])
    if not match:
        return None
    port = int(match.group(1))
    label = tokens[1].strip(QUOTE_CHARS) or PLACEHOLDER_LABEL

    # The color is optional and only recognised in third position.
    color = None
    rest = tokens[2:]
    if rest and rest[0].startswith("#"):
        color = rest[0]
        rest = rest[1:]
    comment = " ".join(rest).strip(QUOTE_CHARS)
    return PortRecord(port=port, label=label, color=color, comment=comment)


def parse_lines(text: str) -> tuple[dict[int, PortRecord], list[LineError]]:
    records: dict[int, PortRecord] = {}
    errors: list[LineError] = []
    content = _strip_content(text)
    if not content.strip():
        logger.info("panel content is empty")
        return records, errors

    for line_no, raw in enumerate(content.split("\n"), start=1):
        line = raw.rstrip("\r")
        if not _PORT_LINE.match(line):
            continue
        tokens = tokenize_line(line)
        if not tokens:
            logger.debug("line %d: no fields found in %r", line_no, line)
            errors.append(LineError(line_no=line_no, line_text=line))
            continue
        record = parse_port_line(tokens)
        if record is None:
            logger.debug("line %d: port without label ignored", line_no)
            continue
        if record.port in records:
            logger.debug("line %d: port %d redefined", line_no, record.port)
        records[record.port] = record

    logger.info("parsed %d port record(s), %d error(s)", len(records), len(errors))
    return records, errors
