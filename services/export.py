# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Export helpers for the ports CSV and the layout JSON."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Mapping
from typing import Any

from models import PanelLayout, PortRecord

PORT_COLUMNS = ["Port", "Label", "Comment"]


def ports_csv(records: Mapping[int, PortRecord]) -> str:
    """CSV of the documented ports only, every value quoted."""
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerow(PORT_COLUMNS)
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for record in records.values():
        writer.writerow([record.port, record.label, record.comment])
    return buf.getvalue()


def layout_rows(layout: PanelLayout) -> list[dict[str, Any]]:
    return [
        {
            **slot.placement.model_dump(),
            "documented": slot.documented,
            "label": slot.record.label,
            "color": slot.record.color,
            "comment": slot.record.comment,
        }
        for slot in layout.slots
    ]


def layout_json(layout: PanelLayout) -> str:
    payload = {
        "config": layout.config.model_dump(by_alias=True),
        "canvas": {
            "width": layout.canvas_width,
            "height": layout.canvas_height,
            "rotated": layout.rotated,
            "view_width": layout.view_width,
            "view_height": layout.view_height,
            "transform": layout.transform,
        },
        "slots": layout_rows(layout),
    }
    return json.dumps(payload, ensure_ascii=False, indent=2, default=str)
