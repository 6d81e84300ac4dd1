# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Deterministic layout engine mapping panel slots onto the diagram canvas."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from models import (
    PLACEHOLDER_LABEL,
    UNDOCUMENTED_COMMENT,
    PanelConfig,
    PanelLayout,
    PortPlacement,
    PortRecord,
    PortSlot,
)

logger = logging.getLogger(__name__)

# Geometry of the rendered panel, in SVG user units.
BASE_OFFSET_X = 100
BASE_OFFSET_Y = 20
PORT_PITCH_X = 46
ROW_PITCH_Y = 66
GROUP_GAP_X = 30
RIGHT_MARGIN = 60

UNDOCUMENTED_COLOR = "#FFFFFF"


def canvas_size(config: PanelConfig) -> tuple[int, int]:
    width = (
        BASE_OFFSET_X
        + config.ports_per_row * PORT_PITCH_X
        + config.group_count * GROUP_GAP_X
        + RIGHT_MARGIN
    )
    height = BASE_OFFSET_Y + config.rows * ROW_PITCH_Y
    return width, height


def row_slot_count(row: int, ports_per_row: int, ports: int) -> int:
    return max(0, min(ports_per_row, ports - row * ports_per_row))


def port_numbering(
    mode: int, row: int, position: int, ports_per_row: int, ports: int | None = None
) -> int:
    """Return the port number printed at ``position`` of ``row``.

    Mode 0 numbers left to right, then wraps to the next row. Modes 1 and 2
    number a pair of rows alternately, the way switches label their upper and
    lower jacks; mode 1 starts in the upper row, mode 2 in the lower row.
    ``ports`` limits the panel so partially filled rows still produce the
    numbers 1..ports; when omitted all rows are full.
    """
    if mode == 0:
        return row * ports_per_row + position + 1
    if mode not in (1, 2):
        raise ValueError(f"unsupported switch mode: {mode!r}")
    if ports is None:
        ports = (row + 2) * ports_per_row

    upper_row = row - row % 2
    base = upper_row * ports_per_row
    upper_count = row_slot_count(upper_row, ports_per_row, ports)
    lower_count = row_slot_count(upper_row + 1, ports_per_row, ports)

    leads = (row == upper_row) == (mode == 1)
    if leads:
        other_count = lower_count if row == upper_row else upper_count
        return base + position + min(position, other_count) + 1
    lead_count = upper_count if row != upper_row else lower_count
    return base + position + min(position + 1, lead_count) + 1


def place(config: PanelConfig, row: int, position: int) -> PortPlacement:
    group = position // config.group_size
    port = port_numbering(
        config.switch_mode, row, position, config.ports_per_row, config.ports
    )
    return PortPlacement(
        port=port,
        row=row,
        position=position,
        group=group,
        x=BASE_OFFSET_X + position * PORT_PITCH_X + group * GROUP_GAP_X,
        y=BASE_OFFSET_Y + row * ROW_PITCH_Y,
    )


def resolve_record(port: int, record: PortRecord | None) -> PortRecord:
    if record is None:
        return PortRecord(
            port=port,
            label=PLACEHOLDER_LABEL,
            color=UNDOCUMENTED_COLOR,
            comment=UNDOCUMENTED_COMMENT,
        )
    if record.label in ("", PLACEHOLDER_LABEL) and not record.comment:
        return record.model_copy(
            update={"label": PLACEHOLDER_LABEL, "comment": UNDOCUMENTED_COMMENT}
        )
    return record


def layout_panel(config: PanelConfig, records: Mapping[int, PortRecord]) -> PanelLayout:
    """Place every slot 1..ports and pair it with its resolved record.

    Slots are returned in ascending port order whatever the numbering mode.
    ``records`` is only read.
    """
    ports_per_row = config.ports_per_row
    placements: list[PortPlacement] = []
    for row in range(config.rows):
        for position in range(row_slot_count(row, ports_per_row, config.ports)):
            placements.append(place(config, row, position))
    placements.sort(key=lambda p: p.port)

    slots = [
        PortSlot(
            placement=p,
            record=resolve_record(p.port, records.get(p.port)),
            documented=p.port in records,
        )
        for p in placements
    ]
    outside = sorted(port for port in records if not 1 <= port <= config.ports)
    if outside:
        logger.info("%s: records outside 1..%d not drawn: %s", config.name, config.ports, outside)

    width, height = canvas_size(config)
    return PanelLayout(config=config, slots=slots, canvas_width=width, canvas_height=height)
