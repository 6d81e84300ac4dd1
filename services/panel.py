# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""End-to-end panel build: options, content lines, and layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from models import LineError, PanelConfig, PanelDocument, PanelLayout, PortRecord
from services.layout import layout_panel
from services.line_parser import parse_lines
from services.options import parse_panel_options

logger = logging.getLogger(__name__)


@dataclass
class PanelResult:
    config: PanelConfig
    records: dict[int, PortRecord]
    errors: list[LineError]
    layout: PanelLayout


def resolve_config(document: PanelDocument) -> PanelConfig:
    if document.options is not None:
        return parse_panel_options(document.options)
    return document.explicit_config()


def build_panel(document: PanelDocument) -> PanelResult:
    config = resolve_config(document)
    records, errors = parse_lines(document.content)
    layout = layout_panel(config, records)
    logger.info(
        "built panel %r: %d slot(s), %d documented, %d line error(s)",
        config.name,
        len(layout.slots),
        sum(1 for slot in layout.slots if slot.documented),
        len(errors),
    )
    return PanelResult(config=config, records=records, errors=errors, layout=layout)
