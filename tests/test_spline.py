import pytest

from hobbykit.spline import (
    TangentConverter,
    hermite,
    hermite_x1,
    hermite_x2,
    hermite_x3,
    hermite_x4,
    main,
    spline,
)

SEGMENTS = [
    (0.0, 1.0, -2.0, 5.0),
    (222.0, 333.0, -533.0, 111.0),
    (1.0, 2.0, 3.0, 4.0),
    (-3.5, 0.25, 7.0, 2.0),
]
XS = [0.0, 0.1, 0.25, 0.5, 0.8, 1.0]


@pytest.mark.parametrize("curve", [hermite, hermite_x1, hermite_x2, hermite_x3, hermite_x4, spline])
@pytest.mark.parametrize("segment", SEGMENTS)
def test_curves_hit_end_points(curve, segment):
    y0, t0, t1, y1 = segment
    assert curve(0.0, y0, t0, t1, y1) == pytest.approx(y0)
    assert curve(1.0, y0, t0, t1, y1) == pytest.approx(y1)


@pytest.mark.parametrize("segment", SEGMENTS)
@pytest.mark.parametrize("x", XS)
def test_xform_variants_agree(segment, x):
    y0, t0, t1, y1 = segment
    reference = hermite_x1(x, y0, t0, t1, y1)
    for curve in (hermite_x2, hermite_x3, hermite_x4):
        assert curve(x, y0, t0, t1, y1) == pytest.approx(reference, rel=1e-9, abs=1e-9)


@pytest.mark.parametrize(
    "factory, reader",
    [
        (TangentConverter.from_hermite, TangentConverter.hermite_tangents),
        (TangentConverter.from_xform_hermite, TangentConverter.xform_hermite_tangents),
        (TangentConverter.from_spline, TangentConverter.spline_tangents),
    ],
)
@pytest.mark.parametrize("segment", SEGMENTS)
def test_converter_round_trip(factory, reader, segment):
    y0, t0, t1, y1 = segment
    result = reader(factory(y0, t0, t1, y1))
    assert result == pytest.approx((t0, t1))


@pytest.mark.parametrize(
    "factory",
    [TangentConverter.from_hermite, TangentConverter.from_xform_hermite, TangentConverter.from_spline],
)
@pytest.mark.parametrize("segment", SEGMENTS)
@pytest.mark.parametrize("x", XS)
def test_converted_forms_describe_same_curve(factory, segment, x):
    y0, t0, t1, y1 = segment
    conv = factory(y0, t0, t1, y1)
    h = hermite(x, y0, *conv.hermite_tangents(), y1)
    xf = hermite_x4(x, y0, *conv.xform_hermite_tangents(), y1)
    sp = spline(x, y0, *conv.spline_tangents(), y1)
    assert xf == pytest.approx(h, rel=1e-9, abs=1e-9)
    assert sp == pytest.approx(h, rel=1e-9, abs=1e-9)


def test_main_reproduces_linear_data(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    before, after = out.split("-TangentConverter-\n")
    rows = [line for line in before.splitlines() if not line.startswith("- ")]
    assert rows
    for row in rows:
        pos, value = row.split(" : ")
        assert pos == value


def test_main_converter_rows_agree(capsys):
    main([])
    out = capsys.readouterr().out
    after = out.split("-TangentConverter-\n")[1]
    rows = [line for line in after.splitlines() if " : " in line]
    assert rows
    for row in rows:
        values = row.split(" : ")[1].split()
        assert len(set(values)) == 1
    assert after.count("-input:") == 3