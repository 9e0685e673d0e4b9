import io
import math

import pytest

from hobbykit.gear import (
    GearOptions,
    PointF,
    gear_outline,
    main,
    parse_args,
    usage,
    write_gear,
)


def _points_text(svg_text):
    start = svg_text.index('points="') + len('points="')
    end = svg_text.index('" fill="white"')
    return svg_text[start:end].split()


def test_point_arithmetic():
    a = PointF(1.0, 2.0)
    b = PointF(3.0, 5.0)
    assert a + b == PointF(4.0, 7.0)
    assert b - a == PointF(2.0, 3.0)
    assert a * 2 == PointF(2.0, 4.0)


def test_point_rotate_quarter_turn():
    r = PointF(1.0, 0.0).rotate(90)
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)


def test_point_rotate_round_trip():
    p = PointF(3.5, -2.25)
    back = p.rotate(37).rotate(-37)
    assert back.x == pytest.approx(p.x)
    assert back.y == pytest.approx(p.y)


def test_point_split_and_length():
    a = PointF(0.0, 0.0)
    b = PointF(4.0, 8.0)
    assert a.split(b, 0.5) == PointF(2.0, 4.0)
    assert a.split(b, 0.0) == a
    assert PointF(3.0, 4.0).length() == pytest.approx(5.0)


def test_parse_defaults():
    options = parse_args([])
    assert options == GearOptions()
    assert options.output == "gear.svg"
    assert options.cogs == 12


def test_parse_inverted_wheel():
    options = parse_args(["-i", "x"])
    assert options.radius == 500
    assert options.cogs == 20
    assert options.bend == 0.2
    assert (options.top_step, options.bottom_step, options.curve_step) == (4, 3, 6)


def test_flag_needs_following_argument():
    assert parse_args(["-f"]).fill_background is False
    options = parse_args(["-f", "-v", "x"])
    assert options.fill_background and options.view_box


def test_parse_values():
    options = parse_args(["-o", "out.svg", "-r", "12abc", "-c", "7", "-b", "0.3", "-l", "2"])
    assert options.output == "out.svg"
    assert options.radius == 12.0
    assert options.cogs == 7
    assert options.bend == 0.3 and options.bend_explicit
    assert options.length == 2


def test_parse_rejects_small_counts():
    options = parse_args(["-c", "0", "-st", "0", "-gt", "0.5", "-c", "abc"])
    assert options.cogs == 12
    assert options.top_step == 3
    assert options.top == 5.0


def test_parse_ratio_is_truncated():
    assert parse_args(["-gt", "2.7"]).top == 2.0
    assert parse_args(["-sc", "9"]).curve_step == 9


def test_parse_help_flag_and_usage():
    assert parse_args(["-h", "x"]).help_requested
    text = usage("gear")
    assert text.startswith("gear ( scorpion file coder )")
    assert "-h - this help" in text


def _small_wheel(cogs=6):
    return GearOptions(cogs=cogs, top_step=2, bottom_step=2, curve_step=2)


def test_wheel_point_count():
    assert len(gear_outline(_small_wheel(6))) == 4 * 6


def test_wheel_top_and_bottom_radii():
    options = _small_wheel(6)
    points = gear_outline(options)
    for c in range(options.cogs):
        top = points[4 * c]
        bottom = points[4 * c + 2]
        assert top.length() == pytest.approx(options.zoom * (options.radius + options.depth))
        assert bottom.length() == pytest.approx(options.zoom * options.radius)


def test_wheel_first_point_is_on_y_axis():
    options = GearOptions()
    first = gear_outline(options)[0]
    assert first.x == pytest.approx(0.0, abs=1e-9)
    assert first.y == pytest.approx(options.zoom * (options.radius + options.depth))


def test_wheel_rotational_symmetry():
    options = GearOptions(cogs=5)
    points = gear_outline(options)
    per_cog = len(points) // options.cogs
    for c in range(1, options.cogs):
        for k in range(per_cog):
            turned = points[c * per_cog + k].rotate(-360 * c / options.cogs)
            assert turned.x == pytest.approx(points[k].x, abs=1e-3)
            assert turned.y == pytest.approx(points[k].y, abs=1e-3)


def test_rack_outline_ends():
    options = GearOptions(length=2, cogs=4)
    points = gear_outline(options)
    assert points[0] == PointF(0.0, 0.0)
    assert points[-1].x == pytest.approx(points[-2].x)
    assert points[-1].y == 0.0
    assert points[-2].y == pytest.approx(2 * options.depth * options.zoom)
    xs = [p.x for p in points[1:-2]]
    assert all(0 <= x <= points[-1].x for x in xs)


def test_invalid_options_raise():
    with pytest.raises(ValueError):
        gear_outline(GearOptions(cogs=0))
    with pytest.raises(ValueError):
        gear_outline(GearOptions(radius=0))


def test_write_gear_document():
    options = GearOptions(cogs=3, fill_background=True, view_box=True)
    stream = io.StringIO()
    write_gear(options, stream)
    text = stream.getvalue()
    assert text.startswith("<svg ")
    assert text.endswith("</g></svg>")
    assert '<g id="gear">\t<polygon points=" ' in text
    assert 'viewBox="-' in text
    assert 'fill="black"' in text
    assert len(_points_text(text)) == len(gear_outline(options))


def test_write_rack_is_not_centered():
    options = GearOptions(length=1, cogs=2, view_box=True)
    stream = io.StringIO()
    write_gear(options, stream)
    text = stream.getvalue()
    assert 'viewBox="0 0 ' in text
    assert _points_text(text)[0] == "0,0"
    assert len(_points_text(text)) == len(gear_outline(options))


def test_points_parse_back():
    options = _small_wheel(4)
    stream = io.StringIO()
    write_gear(options, stream)
    parsed = [tuple(map(float, item.split(","))) for item in _points_text(stream.getvalue())]
    for (x, y), expected in zip(parsed, gear_outline(options)):
        assert math.isclose(x, expected.x, rel_tol=1e-5, abs_tol=1e-3)
        assert math.isclose(y, expected.y, rel_tol=1e-5, abs_tol=1e-3)


def test_main_writes_file(tmp_path):
    target = tmp_path / "wheel.svg"
    assert main(["-o", str(target), "-c", "3"]) == 0
    text = target.read_text(encoding="utf-8")
    assert text.startswith("<svg ")
    assert text.endswith("</svg>")


def test_main_help_goes_to_stderr(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-h", "-c", "2"]) == 0
    assert "-o - output filename" in capsys.readouterr().err
    assert (tmp_path / "gear.svg").read_text(encoding="utf-8").endswith("</svg>")