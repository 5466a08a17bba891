from __future__ import annotations

import io
import json
from dataclasses import dataclass
from pathlib import Path
from typing import List, Protocol, Tuple

from reportlab.lib import colors
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas


class DrawingBackend(Protocol):
    """Drawing primitives in millimetres, origin top-left, Y growing downward."""

    def set_font_size(self, size: float) -> None: ...

    def set_font_weight(self, weight: str) -> None: ...

    def set_text_color(self, color: str) -> None: ...

    def draw_text(self, text: str, x: float, y: float) -> None: ...

    def set_stroke_color(self, color: str) -> None: ...

    def set_stroke_width(self, width: float) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def draw_filled_circle(self, x: float, y: float, radius: float) -> None: ...

    def start_new_page(self) -> None: ...

    def export(self, path: Path) -> None: ...


def _hex(value: str, default=colors.black) -> colors.Color:
    if not value:
        return default
    return colors.HexColor("#" + str(value).lstrip("#"))


class ReportLabBackend:
    def __init__(self, page_size_mm: Tuple[float, float], style: dict) -> None:
        self._buffer = io.BytesIO()
        self._page_w = page_size_mm[0] * mm
        self._page_h = page_size_mm[1] * mm
        self._canv = canvas.Canvas(self._buffer, pagesize=(self._page_w, self._page_h), invariant=1)
        self._font_regular = str(style.get("font_name", "Helvetica"))
        self._font_bold = str(style.get("font_name_bold", "Helvetica-Bold"))
        self._font_size = 10.0
        self._font_weight = "normal"
        self._stroke = colors.black
        self._fill = colors.black
        self._line_width = 1.0
        self._apply_font()

    def _apply_font(self) -> None:
        name = self._font_bold if self._font_weight == "bold" else self._font_regular
        self._canv.setFont(name, self._font_size)

    def _point(self, x: float, y: float) -> Tuple[float, float]:
        return x * mm, self._page_h - y * mm

    def set_font_size(self, size: float) -> None:
        self._font_size = float(size)
        self._apply_font()

    def set_font_weight(self, weight: str) -> None:
        self._font_weight = weight
        self._apply_font()

    def set_text_color(self, color: str) -> None:
        self._fill = _hex(color)
        self._canv.setFillColor(self._fill)

    def draw_text(self, text: str, x: float, y: float) -> None:
        px, py = self._point(x, y)
        self._canv.drawString(px, py, text)

    def set_stroke_color(self, color: str) -> None:
        self._stroke = _hex(color)
        self._canv.setStrokeColor(self._stroke)

    def set_stroke_width(self, width: float) -> None:
        self._line_width = width * mm
        self._canv.setLineWidth(self._line_width)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        px1, py1 = self._point(x1, y1)
        px2, py2 = self._point(x2, y2)
        self._canv.line(px1, py1, px2, py2)

    def draw_filled_circle(self, x: float, y: float, radius: float) -> None:
        # dots take the stroke colour so a dotted rule matches a solid one
        px, py = self._point(x, y)
        self._canv.saveState()
        self._canv.setFillColor(self._stroke)
        self._canv.circle(px, py, radius * mm, stroke=0, fill=1)
        self._canv.restoreState()

    def start_new_page(self) -> None:
        self._canv.showPage()
        # showPage resets the graphics state
        self._apply_font()
        self._canv.setStrokeColor(self._stroke)
        self._canv.setFillColor(self._fill)
        self._canv.setLineWidth(self._line_width)

    def export(self, path: Path) -> None:
        self._canv.save()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self._buffer.getvalue())


@dataclass(frozen=True)
class DrawOp:
    op: str
    args: tuple


class RecordingBackend:
    """Keeps every drawing call as a :class:`DrawOp`, grouped by page."""

    def __init__(self) -> None:
        self.pages: List[List[DrawOp]] = [[]]

    def _record(self, op: str, *args) -> None:
        self.pages[-1].append(DrawOp(op, tuple(args)))

    @property
    def page_count(self) -> int:
        if len(self.pages) == 1 and not self.pages[0]:
            return 0
        return len(self.pages)

    def ops(self, name: str, page: int | None = None) -> List[DrawOp]:
        source = self.pages if page is None else [self.pages[page]]
        return [item for ops in source for item in ops if item.op == name]

    def texts(self, page: int) -> List[str]:
        return [item.args[0] for item in self.ops("draw_text", page)]

    def set_font_size(self, size: float) -> None:
        self._record("set_font_size", size)

    def set_font_weight(self, weight: str) -> None:
        self._record("set_font_weight", weight)

    def set_text_color(self, color: str) -> None:
        self._record("set_text_color", color)

    def draw_text(self, text: str, x: float, y: float) -> None:
        self._record("draw_text", text, x, y)

    def set_stroke_color(self, color: str) -> None:
        self._record("set_stroke_color", color)

    def set_stroke_width(self, width: float) -> None:
        self._record("set_stroke_width", width)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._record("draw_line", x1, y1, x2, y2)

    def draw_filled_circle(self, x: float, y: float, radius: float) -> None:
        self._record("draw_filled_circle", x, y, radius)

    def start_new_page(self) -> None:
        self.pages.append([])

    def export(self, path: Path) -> None:
        payload = [[[item.op, list(item.args)] for item in ops] for ops in self.pages]
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
