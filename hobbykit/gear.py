"""Gear wheel and rack outlines written as SVG polygons."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, replace
from typing import TextIO

from hobbykit.svg import SvgWriter, element_start, point

DEFAULT_OUTPUT = "gear.svg"
RACK_BEND = 0.6

_NORMAL = {
    "radius": 300.0,
    "top_step": 3,
    "bottom_step": 2,
    "curve_step": 6,
    "cogs": 12,
    "bend": 0.4,
    "top": 5.0,
    "bottom": 13.0,
    "curve": 5.0,
}

_INVERTED = {
    "radius": 500.0,
    "top_step": 4,
    "bottom_step": 3,
    "curve_step": 6,
    "cogs": 20,
    "bend": 0.2,
    "top": 6.0,
    "bottom": 2.0,
    "curve": 7.0,
}

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _atof(text: str) -> float:
    """Parse the leading number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _atol(text: str) -> int:
    """Parse the leading integer of ``text``; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _truncate(value: float) -> int:
    return int(value) if math.isfinite(value) else 0


@dataclass(frozen=True)
class PointF:
    """A 2D point with float coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: PointF) -> PointF:
        return PointF(self.x + other.x, self.y + other.y)

    def __sub__(self, other: PointF) -> PointF:
        return PointF(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> PointF:
        return PointF(self.x * scale, self.y * scale)

    def rotate(self, angle: float) -> PointF:
        """Rotate counter-clockwise around the origin by ``angle`` degrees."""
        ph = math.radians(angle)
        cos, sin = math.cos(ph), math.sin(ph)
        return PointF(self.x * cos - self.y * sin, self.y * cos + self.x * sin)

    def split(self, other: PointF, pos: float) -> PointF:
        """The point at fraction ``pos`` of the way from this point to ``other``."""
        return (other - self) * pos + self

    def length(self) -> float:
        return math.hypot(self.x, self.y)


@dataclass(frozen=True)
class GearOptions:
    """Command-line options of the gear generator, before derived adjustments."""

    output: str = DEFAULT_OUTPUT
    fill_background: bool = False
    view_box: bool = False
    radius: float = _NORMAL["radius"]
    depth: float = 80.0
    zoom: float = 200.0
    cogs: int = _NORMAL["cogs"]
    length: int = 0
    rack_width: float = 1.2
    top: float = _NORMAL["top"]
    bottom: float = _NORMAL["bottom"]
    curve: float = _NORMAL["curve"]
    top_step: int = _NORMAL["top_step"]
    bottom_step: int = _NORMAL["bottom_step"]
    curve_step: int = _NORMAL["curve_step"]
    bend: float = _NORMAL["bend"]
    bend_explicit: bool = False
    help_requested: bool = False


def usage(program: str) -> str:
    """The help text listing every option."""
    lines = [
        f"{program} ( scorpion file coder )",
        "",
        "params:",
        "-o - output filename",
        "-f - enable fill background",
        "-v - set viewbox",
        "-i - inverted wheel",
        "-r - radius",
        "-d - depth",
        "-c - cogs",
        "-l - linear( rack )",
        "-w - rack width increase",
        "-z - zoom",
        "-gt - graphical ratio of top",
        "-gb - graphical ratio of bottom",
        "-gc - graphical ratio of curve",
        "-st - step for top",
        "-sb - step for bottom",
        "-sc - step for curve",
        "-b - bend ratio ( float )",
        "-h - this help",
    ]
    return "\n".join(lines) + "\n"


def parse_args(argv: Sequence[str]) -> GearOptions:
    """Parse options (program name excluded).

    An option is only honoured when some argument follows it, even when it
    takes no value; unknown options are ignored.
    """
    values: dict[str, object] = {}
    index = 0
    count = len(argv)
    while index < count:
        arg = argv[index]
        if not arg.startswith("-") or index + 1 >= count or len(arg) < 2:
            index += 1
            continue
        key = arg[1]

        def take() -> str:
            nonlocal index
            index += 1
            return argv[index]

        if key == "o":
            values["output"] = take()
        elif key == "f":
            values["fill_background"] = True
        elif key == "v":
            values["view_box"] = True
        elif key == "i":
            values.update(_INVERTED)
        elif key == "r":
            values["radius"] = _atof(take())
        elif key == "d":
            values["depth"] = _atof(take())
        elif key == "c":
            cogs = _atol(take())
            if cogs >= 1:
                values["cogs"] = cogs
        elif key == "z":
            values["zoom"] = _atof(take())
        elif key == "g" and len(arg) == 3:
            field = {"-gt": "top", "-gb": "bottom", "-gc": "curve"}.get(arg)
            if field:
                ratio = _truncate(_atof(take()))
                if ratio >= 1:
                    values[field] = float(ratio)
        elif key == "s" and len(arg) == 3:
            field = {"-st": "top_step", "-sb": "bottom_step", "-sc": "curve_step"}.get(arg)
            if field:
                steps = _atol(take())
                if steps >= 1:
                    values[field] = steps
        elif key == "b":
            values["bend"] = _atof(take())
            values["bend_explicit"] = True
        elif key == "l":
            values["length"] = _atol(take())
        elif key == "w":
            values["rack_width"] = _atof(take())
        elif key == "h":
            values["help_requested"] = True
        index += 1
    if not values.get("output", DEFAULT_OUTPUT):
        values["output"] = DEFAULT_OUTPUT
    return GearOptions(**values)


def _effective(options: GearOptions) -> GearOptions:
    """Apply the derived adjustments: rack radius and bend, or wheel ratios."""
    if options.cogs < 1:
        raise ValueError(f"cogs must be at least 1, got {options.cogs}")
    if options.radius == 0:
        raise ValueError("radius must not be zero")
    if options.length:
        resolved = replace(
            options,
            radius=options.radius + options.depth * options.rack_width,
            bend=options.bend if options.bend_explicit else RACK_BEND,
        )
    else:
        resolved = replace(
            options,
            top=options.top * (options.radius + options.depth / 2) / options.radius,
            bottom=options.bottom * (options.radius + options.depth - 2) / options.radius,
        )
    return replace(
        resolved,
        top_step=max(resolved.top_step, 2),
        bottom_step=max(resolved.bottom_step, 2),
        curve_step=max(resolved.curve_step, 2),
    )


def _flank(base: PointF, angle: float, fog: float, rb: float) -> PointF:
    a = (base - PointF(0, rb)).rotate(-angle * fog)
    a = (a + PointF(0, -2 * rb)).rotate(2 * angle * fog)
    a = a - PointF(0, rb)
    return a.split(PointF(0, 0), 1 - fog)


def _cog_profile(o: GearOptions) -> Callable[[float], Iterator[tuple[float, PointF]]]:
    """Build a generator of (turn fraction, local tooth point) for one cog."""
    total = _truncate(o.top + 2 * o.curve + o.bottom)
    if total <= 0:
        raise ValueError("top, curve and bottom ratios must add up to at least 1")
    step = 1.0 / o.cogs
    top_ph = step * o.top
    curve_ph = step * o.curve
    bottom_ph = step * o.bottom
    curve_angle = 360 * curve_ph / total
    g1 = top_ph
    g2 = g1 + curve_ph
    g3 = g2 + bottom_ph
    g4 = g3 + curve_ph
    if g4 == 0:
        raise ValueError("tooth phases must not add up to zero")

    rb = o.radius * o.bend
    base = PointF(0, o.depth)
    ao = ((base + PointF(0, rb)).rotate(2 * curve_angle) - PointF(0, -2 * rb)).rotate(
        -curve_angle
    ) + PointF(0, rb)
    ai = ((base + PointF(0, rb)).rotate(-2 * curve_angle) - PointF(0, -2 * rb)).rotate(
        curve_angle
    ) + PointF(0, rb)

    sections: list[tuple[int, float, float, Callable[[float], PointF]]] = [
        (o.top_step - 1, 0.0, g1, lambda sub: PointF(0, o.depth)),
        (o.curve_step - 1, g1, g2 - g1, lambda sub: _flank(ai, curve_angle, 1 - sub, rb)),
        (o.bottom_step - 1, g2, g3 - g2, lambda sub: PointF(0, 0)),
        (o.curve_step - 1, g3, g4 - g3, lambda sub: _flank(ao, -curve_angle, sub, rb)),
    ]

    def profile(phase: float) -> Iterator[tuple[float, PointF]]:
        for count, start, span, shape in sections:
            for i in range(count):
                sub = i / count
                turn = phase + start / g4 / o.cogs + sub * span / g4 / o.cogs
                yield turn, shape(sub)

    return profile


def _outline(o: GearOptions) -> list[PointF]:
    profile = _cog_profile(o)
    points: list[PointF] = []
    if not o.length:
        for c in range(o.cogs):
            for turn, local in profile(c / o.cogs):
                placed = PointF(local.x, local.y + o.radius).rotate(360 * turn)
                points.append(placed * o.zoom)
        return points

    circumference = 2 * math.pi * o.radius
    points.append(PointF(0.0, 0.0))
    for lap in range(o.length):
        for c in range(o.cogs):
            for turn, local in profile(c / o.cogs):
                placed = PointF(local.x + circumference * (lap + turn), local.y + o.depth)
                points.append(placed * o.zoom)
    end = PointF(circumference * o.length, 2 * o.depth) * o.zoom
    points.append(end)
    points.append(PointF(end.x, 0.0))
    return points


def gear_outline(options: GearOptions) -> list[PointF]:
    """Polygon points of the wheel, or of the rack when ``length`` is set, zoomed."""
    return _outline(_effective(options))


def write_gear(options: GearOptions, stream: TextIO) -> None:
    """Write the complete SVG document for ``options`` to ``stream``."""
    o = _effective(options)
    if o.length:
        width = o.length * o.radius * 2 * math.pi * o.zoom
        height = 2 * o.depth * o.zoom
    else:
        width = height = 2 * (o.radius + o.depth) * o.zoom
    writer = SvgWriter(
        stream, float(width), float(height), o.fill_background, o.view_box, not o.length
    )
    with writer:
        writer.write('<g id="gear">')
        writer.write(element_start('polygon points="'))
        for p in _outline(o):
            writer.write(point(p.x, p.y))
        writer.write('" fill="white" />')
        writer.write("</g>")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    options = parse_args(args)
    if options.help_requested:
        sys.stderr.write(usage("gear"))
    with open(options.output, "w", encoding="utf-8") as stream:
        write_gear(options, stream)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())