# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
from __future__ import annotations

import xml.etree.ElementTree as ET

from models import LineError, PanelConfig, PortRecord
from services.export import ports_csv
from services.layout import layout_panel
from services.line_parser import parse_lines
from services.render_svg import (
    port_caption,
    port_fill_color,
    render_panel_html,
    render_panel_svg,
)

SVG_NS = "{http://www.w3.org/2000/svg}"


def _ports(svg: str) -> list[ET.Element]:
    root = ET.fromstring(svg)
    return [el for el in root.iter(f"{SVG_NS}svg") if el.get("data-port")]


def test_panel_svg_has_one_port_per_slot() -> None:
    records, _ = parse_lines('1 "Server A" #07c uplink to core')
    svg = render_panel_svg(layout_panel(PanelConfig(ports=4, rows=1), records))
    ports = _ports(svg)
    assert [p.get("data-port") for p in ports] == ["1", "2", "3", "4"]
    assert (ports[0].get("x"), ports[0].get("y")) == ("100", "20")
    assert "Server A" in svg
    assert "This port has not been documented." in ports[1].get("data-caption")


def test_panel_svg_dimensions_follow_layout() -> None:
    layout = layout_panel(PanelConfig(ports=12, rows=2), {})
    root = ET.fromstring(render_panel_svg(layout))
    assert root.get("width") == str(layout.canvas_width)
    assert root.get("height") == str(layout.canvas_height)
    assert root.get("viewBox") == f"0 0 {layout.canvas_width} {layout.canvas_height}"


def test_rotated_panel_wraps_content_in_transform() -> None:
    layout = layout_panel(PanelConfig(ports=12, rows=2, rotate=True), {})
    root = ET.fromstring(render_panel_svg(layout))
    assert root.get("width") == str(layout.canvas_height)
    assert root.get("height") == str(layout.canvas_width)
    groups = [g for g in root.iter(f"{SVG_NS}g") if g.get("transform")]
    assert groups[0].get("transform") == layout.transform


def test_label_and_name_are_escaped() -> None:
    records, _ = parse_lines("1 <b>x</b> a&b")
    svg = render_panel_svg(layout_panel(PanelConfig(name="R&D <lab>", ports=2, rows=1), records))
    assert "<b>x</b>" not in svg
    assert "&lt;b&gt;x&lt;/b&gt;" in svg
    assert "R&amp;D &lt;lab&gt;" in svg
    ET.fromstring(svg)


def test_caption_contains_name_port_label_and_comment() -> None:
    caption = port_caption(
        PanelConfig(name="Core"), PortRecord(port=3, label="eth0", comment="to <srv>")
    )
    assert "Core Port 3" in caption
    assert "<td>eth0</td>" in caption
    assert "to &lt;srv&gt;" in caption


def test_fill_color_falls_back_to_default_gray() -> None:
    assert port_fill_color(PortRecord(port=1, color="#07c")) == "#07c"
    assert port_fill_color(PortRecord(port=1, color="#A0B1C2")) == "#A0B1C2"
    assert port_fill_color(PortRecord(port=1, color="#nothex")) == "#CCCCCC"
    assert port_fill_color(PortRecord(port=1)) == "#CCCCCC"


def test_html_lists_line_errors_and_csv_toggle() -> None:
    records, _ = parse_lines('1 "Server A" #07c uplink to core')
    layout = layout_panel(PanelConfig(ports=4, rows=1), records)
    errors = [LineError(line_no=3, line_text="7 <bad>")]
    html = render_panel_html(layout, ports_csv(records), errors, dom_id="abc")
    assert "Syntax error on line 3" in html
    assert "7 &lt;bad&gt;" in html
    assert 'id="csv_abc"' in html
    assert "&quot;Server A&quot;" in html
    assert 'id="patchpanel_tooltip"' in html
    assert html.index("Syntax error") < html.index("<svg")
