# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""SVG and HTML rendering for patch panel layouts."""

from __future__ import annotations

import re
from html import escape

from models import LineError, PanelConfig, PanelLayout, PortRecord, PortSlot

DEFAULT_PORT_COLOR = "#CCCCCC"
CHASSIS_COLOR = "#000000"
TOOLTIP_ID = "patchpanel_tooltip"

PORT_WIDTH = 40
PORT_HEIGHT = 134
HOLE_WIDTH = 30
HOLE_HEIGHT = 17.6
HOLE_MARGIN = 20

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

_PIN_XS = (54, 66, 78, 90, 102, 114, 126, 138)

TOOLTIP_SCRIPT = (
    '<script type="text/ecmascript"><![CDATA['
    "function patchpanel_show_tooltip(evt, text){"
    f"var tip=document.getElementById('{TOOLTIP_ID}');"
    "if(!tip){return;}"
    "tip.innerHTML=text;"
    "tip.style.left=(evt.clientX+10)+'px';"
    "tip.style.top=(evt.clientY+10)+'px';"
    "tip.style.display='block';}"
    "function patchpanel_hide_tooltip(){"
    f"var tip=document.getElementById('{TOOLTIP_ID}');"
    "if(tip){tip.style.display='none';}}"
    "]]></script>"
)

TOGGLE_SCRIPT = (
    "<script>"
    "function patchpanel_toggle_vis(el, mode){"
    "el.style.display=(el.style.display==='none')?mode:'none';"
    "return el.style.display!=='none';}"
    "</script>"
)


def port_fill_color(record: PortRecord) -> str:
    if record.color and _HEX_COLOR.match(record.color):
        return record.color
    return DEFAULT_PORT_COLOR


def port_caption(config: PanelConfig, record: PortRecord) -> str:
    """HTML shown in the tooltip when hovering a port."""
    return (
        f"<div class='title'>{escape(config.name)} Port {record.port}</div>"
        "<div class='content'><table>"
        f"<tr><th>Label:</th><td>{escape(record.label)}</td></tr>"
        f"<tr><th>Comment:</th><td>{escape(record.comment)}</td></tr>"
        "</table></div>"
    )


def _render_port(config: PanelConfig, slot: PortSlot) -> str:
    placement = slot.placement
    record = slot.record
    caption = escape(port_caption(config, record), quote=True)
    # The handler argument is a JS string literal inside an attribute.
    js_caption = caption.replace("\\", "\\\\").replace("&#x27;", "\\&#x27;")
    pins = "".join(
        f'<rect x="{px}" y="132.16" width="6" height="18" fill="#ffff00"/>' for px in _PIN_XS
    )
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" x="{placement.x}" y="{placement.y}" '
        f'width="{PORT_WIDTH}" height="{PORT_HEIGHT}" viewBox="0 0 200 270" '
        'preserveAspectRatio="xMinYMin meet" class="ethernet" '
        f'data-port="{placement.port}" data-row="{placement.row}" '
        f'data-position="{placement.position}" data-caption="{caption}">'
        f"<title>{escape(config.name)} Port {record.port}: {escape(record.label)}</title>"
        f"<g onmousemove=\"patchpanel_show_tooltip(evt, '{js_caption}')\" "
        'onmouseout="patchpanel_hide_tooltip()">'
        '<rect width="200" height="100" x="-1" y="0" stroke-width="5" stroke="#000000" '
        'fill="#ffffff" ry="21" rx="21"/>'
        '<text x="100" y="72" text-anchor="middle" font-family="sans-serif" '
        f'font-size="58" font-weight="bold" fill="#000">{escape(record.label)}</text>'
        f'<rect width="200" height="170" x="-1" y="100.22" fill="{port_fill_color(record)}"/>'
        '<rect x="24" y="130.16" width="150" height="90" fill="#000000"/>'
        '<rect x="59" y="219.16" width="80" height="16" fill="#000000"/>'
        '<rect x="74" y="234.16" width="50" height="16" fill="#000000"/>'
        f"{pins}"
        '<text x="100" y="200" text-anchor="middle" font-family="sans-serif" '
        f'font-size="55" fill="#ffffff">{placement.port}</text>'
        "</g></svg>"
    )


def render_panel_svg(layout: PanelLayout) -> str:
    config = layout.config
    width = layout.canvas_width
    height = layout.canvas_height
    right_hole_x = width - HOLE_MARGIN - HOLE_WIDTH
    bottom_hole_y = height - HOLE_MARGIN - HOLE_HEIGHT

    parts = [
        f'<rect fill="{CHASSIS_COLOR}" width="{width}" height="{height}" x="0" y="0" rx="30" ry="30"/>',
    ]
    for hx, hy in (
        (HOLE_MARGIN, HOLE_MARGIN),
        (right_hole_x, HOLE_MARGIN),
        (HOLE_MARGIN, bottom_hole_y),
        (right_hole_x, bottom_hole_y),
    ):
        parts.append(
            f'<rect fill="#fff" x="{hx}" y="{hy:g}" width="{HOLE_WIDTH}" height="{HOLE_HEIGHT}" ry="9"/>'
        )
    parts.append(
        f'<text transform="rotate(-90 80,{height / 2:g})" text-anchor="middle" font-size="12" '
        f'fill="#fff" x="80" y="{height / 2:g}">{escape(config.name)}</text>'
    )
    parts.extend(_render_port(config, slot) for slot in layout.slots)

    body = "".join(parts)
    if layout.transform:
        body = f'<g transform="{layout.transform}">{body}</g>'
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{layout.view_width}" '
        f'height="{layout.view_height}" viewBox="0 0 {layout.view_width} {layout.view_height}" '
        f'class="patchpanel">{TOOLTIP_SCRIPT}{body}</svg>'
    )


def render_line_errors(errors: list[LineError]) -> str:
    return "".join(
        f'<div class="patchpanel_error">Syntax error on line {err.line_no}: '
        f'<pre style="color:red">{escape(err.line_text)}</pre></div>'
        for err in errors
    )


def render_panel_html(
    layout: PanelLayout, csv_text: str, errors: list[LineError], dom_id: str
) -> str:
    """Wrap the panel SVG with diagnostics, the tooltip div and the CSV toggle."""
    csv_id = f"csv_{dom_id}"
    toggle = (
        "this.innerHTML = patchpanel_toggle_vis("
        f"document.getElementById('{csv_id}'),'block')?'Hide CSV &uarr;':'Show CSV &darr;';"
    )
    return (
        f"{render_line_errors(errors)}"
        f'<div id="{TOOLTIP_ID}" class="patchpanel_tooltip" style="display:none;position:fixed;"></div>'
        '<div class="patchpanel" style="display:block;line-height:0;overflow-x:auto;'
        'overflow-y:hidden;width:100%;">'
        f'<div style="height:{layout.view_height}px;width:{layout.view_width}px;">'
        f"{render_panel_svg(layout)}"
        "</div></div>"
        f"{TOGGLE_SCRIPT}"
        f'<div class="patchpanel_csv"><span onclick="{toggle}">Show CSV &darr;</span></div>'
        f'<pre style="display:none;" id="{csv_id}">{escape(csv_text)}</pre>'
    )
