"""
Text labels.

Label text supports a small markup: ``x^2`` and ``x_i`` raise or lower the
next character, ``^{...}`` and ``_{...}`` a whole group, and a backslash
escapes one of ``\\ ^ _ { }``. Newlines start a new line.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, QSizeF
from PySide6.QtGui import QColor, QFont, QFontMetricsF

from gral import config
from gral.graphics.drawable import Drawable, DrawingContext
from gral.util.tokenizer import POP_STATE, Rule, StatefulTokenizer

TEXT = "text"
SUPERSCRIPT = "superscript"
SUBSCRIPT = "subscript"
MARKUP = "markup"

SCRIPT_SCALE = 0.7


class LabelMarkupTokenizer(StatefulTokenizer):
    """Splits label text into plain, superscript and subscript runs."""

    def __init__(self) -> None:
        super().__init__()
        self.put_rules(
            Rule(r"\\([\\^_{}])", TEXT),
            Rule(r"\^\{", MARKUP, "superscript"),
            Rule(r"_\{", MARKUP, "subscript"),
            Rule(r"\^(.)", SUPERSCRIPT),
            Rule(r"_(.)", SUBSCRIPT),
            Rule(r"[^\\^_]+", TEXT),
            Rule(r".", TEXT),
        )
        for state, token_type in (("superscript", SUPERSCRIPT), ("subscript", SUBSCRIPT)):
            self.put_rules(
                Rule(r"\\([\\^_{}])", token_type),
                Rule(r"\}", MARKUP, POP_STATE),
                Rule(r"[^}\\]+", token_type),
                Rule(r".", token_type),
                state=state,
            )
        for token_type in (TEXT, SUPERSCRIPT, SUBSCRIPT):
            self.add_joined_type(token_type)
        self.add_ignored_type(MARKUP)


_TOKENIZER = LabelMarkupTokenizer()


@dataclass
class TextRun:
    text: str
    kind: str


def parse_markup(text: str) -> list[list[TextRun]]:
    """Return the text runs of every line of `text`."""
    return [
        [TextRun(token.content, token.type) for token in _TOKENIZER.tokenize(line)]
        for line in text.split("\n")
    ]


class Label(Drawable):
    """A drawable that paints (optionally rotated) text aligned in its bounds."""

    def __init__(
        self,
        text: str = "",
        font: Optional[QFont] = None,
        color: Optional[QColor] = None,
        alignment_x: float = 0.5,
        alignment_y: float = 0.5,
        rotation: float = 0.0,
    ) -> None:
        super().__init__()
        if font is None:
            font = QFont(config.DEFAULT_FONT_FAMILY)
            font.setPointSizeF(config.DEFAULT_FONT_SIZE)
        self.font = font
        self.color = color if color is not None else QColor(*config.DEFAULT_FOREGROUND)
        self.alignment_x = alignment_x
        self.alignment_y = alignment_y
        self.rotation = rotation
        self._text = ""
        self._lines: list[list[TextRun]] = []
        self.text = text

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value or ""
        self._lines = parse_markup(self._text) if self._text else []

    # ---- metrics ----

    def _script_font(self) -> QFont:
        font = QFont(self.font)
        font.setPointSizeF(self.font.pointSizeF() * SCRIPT_SCALE)
        return font

    def _run_width(self, run: TextRun) -> float:
        font = self.font if run.kind == TEXT else self._script_font()
        return QFontMetricsF(font).horizontalAdvance(run.text)

    def text_size(self) -> QSizeF:
        """Size of the unrotated text block."""
        if not self._lines:
            return QSizeF(0.0, 0.0)
        line_height = QFontMetricsF(self.font).height()
        width = max(sum(self._run_width(run) for run in line) for line in self._lines)
        return QSizeF(width, line_height * len(self._lines))

    @property
    def preferred_size(self) -> QSizeF:
        size = self.text_size()
        if self.rotation % 180.0 == 0.0:
            return size
        rad = math.radians(self.rotation)
        cos_a, sin_a = abs(math.cos(rad)), abs(math.sin(rad))
        return QSizeF(
            size.width() * cos_a + size.height() * sin_a,
            size.width() * sin_a + size.height() * cos_a,
        )

    # ---- painting ----

    def draw(self, context: DrawingContext) -> None:
        if not self._lines:
            return
        painter = context.painter
        bounds = self.bounds
        size = self.text_size()
        metrics = QFontMetricsF(self.font)

        painter.save()
        try:
            painter.setPen(self.color)
            # Rotate around the aligned anchor point inside the bounds
            outer = self.preferred_size
            cx = bounds.x() + self.alignment_x * (bounds.width() - outer.width()) + outer.width() / 2.0
            cy = bounds.y() + self.alignment_y * (bounds.height() - outer.height()) + outer.height() / 2.0
            painter.translate(cx, cy)
            if self.rotation:
                painter.rotate(-self.rotation)
            block = QRectF(-size.width() / 2.0, -size.height() / 2.0, size.width(), size.height())

            y = block.y() + metrics.ascent()
            for line in self._lines:
                line_width = sum(self._run_width(run) for run in line)
                x = block.x() + self.alignment_x * (block.width() - line_width)
                for run in line:
                    if run.kind == TEXT:
                        painter.setFont(self.font)
                        painter.drawText(QPointF(x, y), run.text)
                    else:
                        painter.setFont(self._script_font())
                        shift = -0.4 * metrics.ascent() if run.kind == SUPERSCRIPT else 0.25 * metrics.ascent()
                        painter.drawText(QPointF(x, y + shift), run.text)
                    x += self._run_width(run)
                y += metrics.height()
        finally:
            painter.restore()
