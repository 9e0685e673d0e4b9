"""Cubic Hermite and Bezier segment evaluation with tangent conversion."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


def hermite(x: float, y0: float, t0: float, t1: float, y1: float) -> float:
    """Hermite segment from y0 to y1 with end tangents t0 and t1."""
    return (((y1 - y0) * (3.0 - 2.0 * x) - t0 - (t0 - t1) * (1.0 - x)) * x + t0) * x + y0


def hermite_x1(x: float, y0: float, t0: float, t1: float, y1: float) -> float:
    """X-form Hermite: t0 and t1 are the outer neighbour points."""
    c0 = y0
    c1 = 0.5 * (y1 - t0)
    c2 = t0 - 2.5 * y0 + 2.0 * y1 - 0.5 * t1
    c3 = 1.5 * (y0 - y1) + 0.5 * (t1 - t0)
    return ((c3 * x + c2) * x + c1) * x + c0


def hermite_x2(x: float, y0: float, t0: float, t1: float, y1: float) -> float:
    """X-form Hermite with a cheaper second coefficient."""
    c0 = y0
    c1 = 0.5 * (y1 - t0)
    c3 = 1.5 * (y0 - y1) + 0.5 * (t1 - t0)
    c2 = t0 - y0 + c1 - c3
    return ((c3 * x + c2) * x + c1) * x + c0


def hermite_x3(x: float, y0: float, t0: float, t1: float, y1: float) -> float:
    """X-form Hermite sharing a common subexpression."""
    c0 = y0
    c1 = 0.5 * (y1 - t0)
    t0my1 = t0 - y0
    c3 = (y0 - y1) + 0.5 * (t1 - t0my1 - y1)
    c2 = t0my1 + c1 - c3
    return ((c3 * x + c2) * x + c1) * x + c0


def hermite_x4(x: float, y0: float, t0: float, t1: float, y1: float) -> float:
    """X-form Hermite with the fewest operations."""
    c = (y1 - t0) * 0.5
    v = y0 - y1
    w = c + v
    a = w + v + (t1 - y0) * 0.5
    b_neg = w + a
    return ((a * x) - b_neg) * x * x + c * x + y0


def spline(x: float, y0: float, t0: float, t1: float, y1: float) -> float:
    """Cubic Bezier segment with control points t0 and t1."""
    nx = 1.0 - x
    return y0 * nx * nx * nx + x * (t0 * 3.0 * nx * nx + x * (t1 * 3.0 * nx + x * y1))


@dataclass(frozen=True)
class TangentConverter:
    """A segment stored in one form, readable as any of the three tangent forms."""

    y0: float
    ta: float
    tb: float
    y1: float

    @classmethod
    def from_hermite(cls, y0: float, t0: float, t1: float, y1: float) -> TangentConverter:
        return cls(y0, t0 * 2, t1 * 2, y1)

    @classmethod
    def from_xform_hermite(cls, y0: float, t0: float, t1: float, y1: float) -> TangentConverter:
        return cls(y0, y1 - t0, y0 - t1, y1)

    @classmethod
    def from_spline(cls, y0: float, t0: float, t1: float, y1: float) -> TangentConverter:
        return cls(y0, (t0 - y0) * 6.0, (t1 - y1) * 6.0, y1)

    def hermite_tangents(self) -> tuple[float, float]:
        return self.ta / 2, self.tb / 2

    def xform_hermite_tangents(self) -> tuple[float, float]:
        return self.y1 - self.ta, self.y0 - self.tb

    def spline_tangents(self) -> tuple[float, float]:
        return self.ta / 6.0 + self.y0, self.tb / 6.0 + self.y1


Curve = Callable[[float, float, float, float, float], float]


def _table(title: str, curve: Curve, y0: float, t0: float, t1: float, y1: float,
           count: int, denom: float) -> None:
    print(f"- {title} - t0 : {t0:1.3f} || t1 : {t1:1.3f} ")
    for k in range(count):
        pos = k / denom
        print(f"{pos:1.3f} : {curve(pos, y0, t0, t1, y1):1.3f}")


def main(argv: list[str] | None = None) -> int:
    """Print interpolation tables for 4, 3 and 2 reference points and tangent conversions."""
    scl = 3
    fx = [0.0, 1 / 3, 2 / 3, 1.0]
    fx3 = [0.0, 0.5, 1.0]
    fx2 = [0.0, 1.0]

    count4, denom4 = 4 * scl - scl + 1, 3 * scl
    t0 = (fx[3] * 2 - fx[2] * 9 + fx[1] * 18 - fx[0] * 11) / 2
    t1 = (fx[0] * 2 - fx[1] * 9 + fx[2] * 18 - fx[3] * 11) / 2
    _table("hermite", hermite, fx[0], t0, t1, fx[3], count4, denom4)
    t0 = -fx[3] + fx[2] * 9 - fx[1] * 18 + fx[0] * 11
    t1 = -fx[0] + fx[1] * 9 - fx[2] * 18 + fx[3] * 11
    _table("x-form hermite", hermite_x4, fx[0], t0, t1, fx[3], count4, denom4)
    t0 = (fx[3] * 2 - fx[2] * 9 + fx[1] * 18 - fx[0] * 5) / 6
    t1 = (fx[0] * 2 - fx[1] * 9 + fx[2] * 18 - fx[3] * 5) / 6
    _table("spline", spline, fx[0], t0, t1, fx[3], count4, denom4)

    count3, denom3 = 3 * scl - scl + 1, 2 * scl
    t0 = -fx3[2] + fx3[1] * 4 - fx3[0] * 3
    t1 = -fx3[0] + fx3[1] * 4 - fx3[2] * 3
    _table("hermite", hermite, fx3[0], t0, t1, fx3[2], count3, denom3)
    t0 = fx3[2] * 3 - fx3[1] * 8 + fx3[0] * 6
    t1 = fx3[0] * 3 - fx3[1] * 8 + fx3[2] * 6
    _table("x-form hermite", hermite_x4, fx3[0], t0, t1, fx3[2], count3, denom3)
    t0 = (-fx3[2] + fx3[1] * 4) / 3
    t1 = (-fx3[0] + fx3[1] * 4) / 3
    _table("spline", spline, fx3[0], t0, t1, fx3[2], count3, denom3)

    count2, denom2 = 2 * scl - scl + 1, scl
    t0 = fx2[1] - fx2[0]
    t1 = fx2[0] - fx2[1]
    _table("hermite", hermite, fx2[0], t0, t1, fx2[1], count2, denom2)
    t0 = -fx2[1] + 2 * fx2[0]
    t1 = -fx2[0] + 2 * fx2[1]
    _table("x-form hermite", hermite_x4, fx2[0], t0, t1, fx2[1], count2, denom2)
    t0 = (fx2[1] + 2 * fx2[0]) / 3
    t1 = (fx2[0] + 2 * fx2[1]) / 3
    _table("spline", spline, fx2[0], t0, t1, fx2[1], count2, denom2)

    print("-TangentConverter-")
    y0, y1 = 1.0, 4.0
    factories = (
        ("hermite", TangentConverter.from_hermite),
        ("x-form hermite", TangentConverter.from_xform_hermite),
        ("spline", TangentConverter.from_spline),
    )
    for label, factory in factories:
        print(f"-input:{label}-")
        converter = factory(y0, 2.0, 3.0, y1)
        for k in range(count2):
            pos = k / scl
            h = hermite(pos, y0, *converter.hermite_tangents(), y1)
            xf = hermite_x4(pos, y0, *converter.xform_hermite_tangents(), y1)
            sp = spline(pos, y0, *converter.spline_tangents(), y1)
            print(f"{pos:1.3f} : {h:1.3f} {xf:1.3f} {sp:1.3f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())