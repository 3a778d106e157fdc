"""
canvas.py — SVG Structure Renderer
===================================
Pure rendering functions: values + Frame → SVG string.

    render_array(values, frame)                  sorting / searching bars
    render_linked_list(elements, frame, doubly)  boxes joined by arrows
    render_stack(elements, highlighted, ...)     vertical, top at the top
    render_queue(elements, highlighted, ...)     horizontal, front on the left

Design decisions:
  - NO mutation.  Every function is stateless: the caller passes in the
    values and the Frame and gets back a string.
  - State-based coloring is a dict lookup: Frame.state_of(i) → hex color.
  - Cell geometry shrinks with the element count so 15 cells still fit.
"""

from html import escape
from typing import Any, Dict, List, Optional, Sequence

from engine.highlight import Frame


# ---------------------------------------------------------------------------
# Visual Config: color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 320
    bg:     str = "#0d1117"

    # cell colors (state → fill)
    cell_colors: Dict[str, str] = {
        "idle":      "#1c2128",   # dark grey
        "comparing": "#0ea5e9",   # cyan blue
        "swapped":   "#f97316",   # orange
        "current":   "#06b6d4",   # bright teal
        "found":     "#10b981",   # emerald green
        "marked":    "#a855f7",   # purple: top, front, rear
    }

    # cell
    cell_size:          int = 52
    cell_gap:           int = 12
    cell_stroke:        str = "#30363d"
    cell_stroke_width:  int = 2
    label_color:        str = "#e6edf3"
    label_size:         int = 14
    label_weight:       str = "600"
    index_color:        str = "#7d8590"
    index_size:         int = 11

    # links
    link_color:         str = "#30363d"
    link_width:         int = 2
    arrow_size:         int = 8

    # empty state
    empty_text:         str = "#484f58"


CONFIG = CanvasConfig()

FONT = "'DM Sans', sans-serif"
MONO = "'JetBrains Mono', monospace"


# ---------------------------------------------------------------------------
# Arrays (sorting / searching)
# ---------------------------------------------------------------------------
def render_array(
    values: Sequence[int],
    frame: Optional[Frame] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Bars scaled to the largest value, value label above, index below.
    The frame's array snapshot wins over ``values`` when it has one.
    """
    if frame is not None and frame.array is not None:
        values = frame.array
    if not values:
        return _empty("No array yet", config)

    n = len(values)
    gap = config.cell_gap
    bar_w = min(config.cell_size, (config.width - 40 - gap * (n - 1)) // n)
    total_w = n * bar_w + (n - 1) * gap
    x0 = (config.width - total_w) // 2
    top = 40
    base = config.height - 40
    peak = max(max(abs(v) for v in values), 1)

    parts = [_open(config)]
    if frame is not None and frame.search_range is not None:
        left, right = frame.search_range
        if 0 <= left <= right < n:
            rx = x0 + left * (bar_w + gap) - 4
            rw = (right - left + 1) * (bar_w + gap) - gap + 8
            parts.append(
                f'<rect class="range" x="{rx}" y="{top - 8}" width="{rw}" height="{base - top + 16}" '
                f'fill="none" stroke="{config.cell_colors["comparing"]}" stroke-dasharray="4 4" rx="6"/>'
            )

    for i, value in enumerate(values):
        state = frame.state_of(i) if frame is not None else "idle"
        fill = config.cell_colors.get(state, config.cell_colors["idle"])
        h = max(int((base - top) * abs(value) / peak), 4)
        x = x0 + i * (bar_w + gap)
        y = base - h
        cx = x + bar_w / 2
        parts.append(
            f'<g class="cell {state}" data-index="{i}">'
            f'<rect x="{x}" y="{y}" width="{bar_w}" height="{h}" rx="4" fill="{fill}" '
            f'stroke="{config.cell_stroke}" stroke-width="{config.cell_stroke_width}"/>'
            f'<text x="{cx}" y="{y - 6}" text-anchor="middle" font-size="{config.label_size}" '
            f'font-family="{FONT}" font-weight="{config.label_weight}" fill="{config.label_color}">{value}</text>'
            f'<text x="{cx}" y="{base + 18}" text-anchor="middle" font-size="{config.index_size}" '
            f'font-family="{MONO}" fill="{config.index_color}">{i}</text>'
            f'</g>'
        )
    parts.append("</svg>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Linked list
# ---------------------------------------------------------------------------
def render_linked_list(
    elements: Sequence[Any],
    frame: Optional[Frame] = None,
    doubly: bool = False,
    highlighted_index: Optional[int] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    if not elements:
        return _empty("List is empty", config)

    size = config.cell_size
    gap = config.cell_gap * 3
    n = len(elements)
    total_w = n * size + (n - 1) * gap
    scale = min(1.0, (config.width - 40) / total_w)
    x0 = max((config.width - total_w * scale) / 2, 20)
    y = config.height / 2 - size / 2

    parts = [_open(config), f'<g transform="translate({x0},{y}) scale({scale})">']
    for i, element in enumerate(elements):
        x = i * (size + gap)
        state = _cell_state(i, frame, highlighted_index)
        parts.append(_box(x, 0, element, state, config))
        if i == 0:
            parts.append(_caption(x + size / 2, size + 20, "HEAD", config))
        if i == n - 1:
            parts.append(_caption(x + size / 2, size + 20 + (14 if n == 1 else 0), "TAIL", config))
        if i < n - 1:
            parts.append(_arrow(x + size, size / 2 - (4 if doubly else 0), x + size + gap,
                                size / 2 - (4 if doubly else 0), config))
            if doubly:
                parts.append(_arrow(x + size + gap, size / 2 + 4, x + size, size / 2 + 4, config))
    parts.append(_caption(n * (size + gap) - gap / 2, size / 2 + 4, "NULL", config))
    parts.append("</g></svg>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Stack / Queue
# ---------------------------------------------------------------------------
def render_stack(
    elements: Sequence[Any],
    highlighted_index: Optional[int] = None,
    max_size: Optional[int] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """Last element on top.  A static stack shows its empty slots."""
    slots = max(len(elements), max_size or 0)
    if slots == 0:
        return _empty("Stack is empty", config)

    size = config.cell_size
    step = min(size + 6, (config.height - 40) / slots)
    box_h = step - 6
    x = config.width / 2 - size
    parts = [_open(config)]
    for slot in range(slots):
        y = config.height - 20 - (slot + 1) * step
        if slot < len(elements):
            state = "marked" if slot == len(elements) - 1 else "idle"
            if highlighted_index == slot:
                state = "current"
            parts.append(_box(x, y, elements[slot], state, config, width=size * 2, height=box_h))
            if slot == len(elements) - 1:
                parts.append(_caption(x + size * 2 + 30, y + box_h / 2 + 4, "TOP", config))
        else:
            parts.append(_slot(x, y, size * 2, box_h, config))
    parts.append("</svg>")
    return "\n".join(parts)


def render_queue(
    elements: Sequence[Any],
    highlighted_index: Optional[int] = None,
    max_size: Optional[int] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """First element on the left (front), last on the right (rear)."""
    slots = max(len(elements), max_size or 0)
    if slots == 0:
        return _empty("Queue is empty", config)

    gap = config.cell_gap
    size = min(config.cell_size, (config.width - 40 - gap * (slots - 1)) // slots)
    total_w = slots * size + (slots - 1) * gap
    x0 = (config.width - total_w) // 2
    y = config.height / 2 - size / 2
    parts = [_open(config)]
    last = len(elements) - 1
    for slot in range(slots):
        x = x0 + slot * (size + gap)
        if slot <= last:
            state = "marked" if slot in (0, last) else "idle"
            if highlighted_index == slot:
                state = "current"
            parts.append(_box(x, y, elements[slot], state, config, width=size, height=size))
            if slot == 0:
                parts.append(_caption(x + size / 2, y - 12, "FRONT", config))
            if slot == last:
                parts.append(_caption(x + size / 2, y + size + 20, "REAR", config))
        else:
            parts.append(_slot(x, y, size, size, config))
    parts.append("</svg>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Pieces
# ---------------------------------------------------------------------------
def _cell_state(i: int, frame: Optional[Frame], highlighted_index: Optional[int]) -> str:
    if frame is not None:
        state = frame.state_of(i)
        if state != "idle":
            return state
    if highlighted_index == i:
        return "marked"
    return "idle"


def _open(config: CanvasConfig) -> str:
    return (
        f'<svg width="100%" height="{config.height}" viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">'
    )


def _empty(text: str, config: CanvasConfig) -> str:
    return "\n".join([
        _open(config),
        f'<text x="{config.width / 2}" y="{config.height / 2}" text-anchor="middle" '
        f'font-size="15" font-family="{FONT}" fill="{config.empty_text}">{escape(text)}</text>',
        "</svg>",
    ])


def _box(x: float, y: float, value: Any, state: str, config: CanvasConfig,
         width: Optional[float] = None, height: Optional[float] = None) -> str:
    w = width or config.cell_size
    h = height or config.cell_size
    fill = config.cell_colors.get(state, config.cell_colors["idle"])
    return (
        f'<g class="cell {state}">'
        f'<rect x="{x}" y="{y}" width="{w}" height="{h}" rx="6" fill="{fill}" '
        f'stroke="{config.cell_stroke}" stroke-width="{config.cell_stroke_width}"/>'
        f'<text x="{x + w / 2}" y="{y + h / 2 + 5}" text-anchor="middle" font-size="{config.label_size}" '
        f'font-family="{FONT}" font-weight="{config.label_weight}" fill="{config.label_color}">'
        f'{escape(str(value))}</text>'
        f'</g>'
    )


def _slot(x: float, y: float, w: float, h: float, config: CanvasConfig) -> str:
    return (
        f'<rect class="slot" x="{x}" y="{y}" width="{w}" height="{h}" rx="6" fill="none" '
        f'stroke="{config.cell_stroke}" stroke-dasharray="4 4"/>'
    )


def _caption(x: float, y: float, text: str, config: CanvasConfig) -> str:
    return (
        f'<text x="{x}" y="{y}" text-anchor="middle" font-size="{config.index_size}" '
        f'font-family="{MONO}" font-weight="700" fill="{config.index_color}">{text}</text>'
    )


def _arrow(x1: float, y1: float, x2: float, y2: float, config: CanvasConfig) -> str:
    """Line with an arrowhead at (x2, y2); horizontal only."""
    s = config.arrow_size
    d = 1 if x2 > x1 else -1
    tip = x2 - d * 2
    return (
        f'<line x1="{x1 + d * 2}" y1="{y1}" x2="{tip - d * s}" y2="{y2}" '
        f'stroke="{config.link_color}" stroke-width="{config.link_width}"/>'
        f'<polygon points="{tip},{y2} {tip - d * s},{y2 - s / 2} {tip - d * s},{y2 + s / 2}" '
        f'fill="{config.link_color}"/>'
    )


def legend(states: List[str] = None, config: CanvasConfig = CONFIG) -> str:
    """Small HTML legend: one swatch per state."""
    states = states or ["idle", "comparing", "swapped", "current", "found"]
    items = "".join(
        f'<span class="legend-item"><span class="swatch" style="background:{config.cell_colors[s]}"></span>'
        f'{s.title()}</span>'
        for s in states
    )
    return f'<div class="legend">{items}</div>'
