"""Small helpers for emitting SVG markup as text."""

from __future__ import annotations

import sys
from typing import TextIO

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _fmt(value: object) -> str:
    """Render a value the way a default-precision stream would: floats use %g."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def attribute(name: str, value: object, unit: str = "") -> str:
    """Return ``name="value unit" `` with a trailing space."""
    return f'{name}="{_fmt(value)}{unit}" '


def element_start(name: str) -> str:
    return f"\t<{name} "


def element_end(name: str) -> str:
    return f"</{name}>\n"


def empty_element_end() -> str:
    return "/>\n"


def translate(x: object, y: object) -> str:
    return f"translate({_fmt(x)},{_fmt(y)})"


def point(x: object, y: object) -> str:
    """Return one ``x,y `` entry of a polygon point list."""
    return f"{_fmt(x)},{_fmt(y)} "


class SvgWriter:
    """Writes an SVG document to a text stream; the closing tag is added on close."""

    def __init__(
        self,
        stream: TextIO,
        width: float,
        height: float,
        fill_background: bool = False,
        view_box: bool = False,
        center: bool = True,
    ) -> None:
        self._stream = stream
        self._closed = False
        self.width = width
        self.height = height
        self.write(
            "<svg "
            + attribute("width", width)
            + attribute("height", height)
            + attribute("xmlns", SVG_NAMESPACE)
            + attribute("version", "1.1")
        )
        if center:
            x, y = -width / 2, -height / 2
        else:
            x, y = 0, 0
        if view_box:
            self.write(f'viewBox="{_fmt(x)} {_fmt(y)} {_fmt(width)} {_fmt(height)}" ')
        self.write(">\n")
        if fill_background:
            self.write(
                f'<rect x="{_fmt(x)}" y="{_fmt(y)}" width="{_fmt(width)}" '
                f'height="{_fmt(height)}" fill="black"/>'
            )

    def write(self, text: object) -> SvgWriter:
        """Append text, or a number formatted like the attribute helpers do."""
        if self._closed:
            raise ValueError("write to a closed SVG document")
        self._stream.write(text if isinstance(text, str) else _fmt(text))
        return self

    def close(self) -> None:
        """Write the closing tag once; the underlying stream stays open."""
        if not self._closed:
            self._stream.write("</svg>")
            self._closed = True

    def __enter__(self) -> SvgWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class Limits:
    """Tracks the lowest and highest value seen and picks round tick steps."""

    def __init__(self) -> None:
        self.low = sys.float_info.max
        self.high = -sys.float_info.max

    def add(self, value: float) -> None:
        if self.low > value:
            self.low = value
        if self.high < value:
            self.high = value

    def tick_step(self, span: float) -> float:
        """Round ``span`` to a step of 0.5, 1 or 2 times a power of ten."""
        if not span > 0:
            raise ValueError(f"span must be positive, got {span}")
        exponent = 1.0
        while span >= 2:
            span /= 10
            exponent *= 10
        while span < 2:
            span *= 10
            exponent /= 10
        if span <= 5:
            return exponent * 0.5
        if span <= 10:
            return exponent
        return exponent * 2