# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Parser for panel tag options such as ``name="Core A" ports=24 rows=1``."""

from __future__ import annotations

import logging
import re
from typing import Any

from models import PanelConfig

logger = logging.getLogger(__name__)

_OPTION_TOKEN = re.compile(r'\w*?="(?:\\.|[^\\"])*"|\S+')

NUMERIC_OPTIONS = {
    "ports": "ports",
    "rows": "rows",
    "groups": "group_size",
    "rotate": "rotate",
    "switch": "switch_mode",
}


def split_options(optstr: str) -> list[str]:
    return _OPTION_TOKEN.findall(optstr)


def parse_panel_options(optstr: str) -> PanelConfig:
    """Resolve an option string into a validated PanelConfig.

    Unknown keys and non-numeric values are ignored, leaving the defaults in
    place. Out-of-range numbers are rejected by PanelConfig validation.
    """
    values: dict[str, Any] = {}
    for token in split_options(optstr.strip()):
        key, sep, raw = token.partition("=")
        if not sep or not raw:
            logger.debug("ignoring option token %r", token)
            continue
        if key == "name":
            values["name"] = raw.strip("\"'")
            continue
        field = NUMERIC_OPTIONS.get(key)
        digits = re.match(r"\d+", raw)
        if field is None or digits is None:
            logger.debug("ignoring option %r", token)
            continue
        number = int(digits.group(0))
        values[field] = bool(number) if field == "rotate" else number
    return PanelConfig(**values)
