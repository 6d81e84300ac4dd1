# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Panel configuration, port records, and layout models for patchpanel."""

from __future__ import annotations

from math import ceil
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_PANEL_NAME = "Patch Panel"
PLACEHOLDER_LABEL = "?"
UNDOCUMENTED_COMMENT = "This port has not been documented."
SUPPORTED_SWITCH_MODES = {0, 1, 2}


class PanelConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    name: str = DEFAULT_PANEL_NAME
    ports: int = Field(default=48, gt=0)
    rows: int = Field(default=2, gt=0)
    group_size: int = Field(default=6, gt=0, alias="groups")
    rotate: bool = False
    switch_mode: Literal[0, 1, 2] = Field(default=0, alias="switch")

    @property
    def ports_per_row(self) -> int:
        return ceil(self.ports / self.rows)

    @property
    def group_count(self) -> int:
        return ceil(self.ports_per_row / self.group_size)


class PortRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    port: int
    label: str = PLACEHOLDER_LABEL
    color: str | None = None
    comment: str = ""


class LineError(BaseModel):
    """A content line that could not be split into any field."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    line_no: int
    line_text: str


class PortPlacement(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    port: int
    row: int
    position: int
    group: int
    x: int
    y: int


class PortSlot(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    placement: PortPlacement
    record: PortRecord
    documented: bool

    @property
    def port(self) -> int:
        return self.placement.port


class PanelLayout(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    config: PanelConfig
    slots: list[PortSlot]
    canvas_width: int
    canvas_height: int

    @property
    def rotated(self) -> bool:
        return self.config.rotate

    @property
    def view_width(self) -> int:
        return self.canvas_height if self.rotated else self.canvas_width

    @property
    def view_height(self) -> int:
        return self.canvas_width if self.rotated else self.canvas_height

    @property
    def transform(self) -> str:
        """SVG transform turning the pre-rotation canvas 90 degrees clockwise."""
        if not self.rotated:
            return ""
        return f"translate({self.canvas_height} 0) rotate(90)"

    def rotate_point(self, x: float, y: float) -> tuple[float, float]:
        if not self.rotated:
            return (x, y)
        return (self.canvas_height - y, x)


class PanelDocument(BaseModel):
    """An uploaded panel: tag attributes plus the port description lines."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    options: str | None = None
    name: str | None = None
    ports: int | None = Field(default=None, gt=0)
    rows: int | None = Field(default=None, gt=0)
    group_size: int | None = Field(default=None, gt=0, alias="groups")
    rotate: bool | None = None
    switch_mode: Literal[0, 1, 2] | None = Field(default=None, alias="switch")
    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def coerce_content(cls, value: object) -> object:
        if value is None:
            return ""
        return value

    @model_validator(mode="after")
    def validate_options_exclusive(self) -> "PanelDocument":
        if self.options is not None and any(
            getattr(self, field) is not None
            for field in ("name", "ports", "rows", "group_size", "rotate", "switch_mode")
        ):
            raise ValueError("options string and explicit panel fields are mutually exclusive")
        return self

    def explicit_config(self) -> PanelConfig:
        values = {
            field: getattr(self, field)
            for field in ("name", "ports", "rows", "group_size", "rotate", "switch_mode")
            if getattr(self, field) is not None
        }
        return PanelConfig(**values)
