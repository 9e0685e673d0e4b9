import io
import math
import sys

import pytest

from hobbykit.svg import (
    SVG_NAMESPACE,
    Limits,
    SvgWriter,
    attribute,
    element_end,
    element_start,
    empty_element_end,
    point,
    translate,
)


def test_attribute_with_unit_and_string():
    assert attribute("stroke", "red") == 'stroke="red" '
    assert attribute("width", 3, "px") == 'width="3px" '


def test_attribute_formats_whole_float_without_decimals():
    assert attribute("height", 200.0) == 'height="200" '


def test_element_helpers():
    assert element_start("polygon") == "\t<polygon "
    assert element_end("g") == "</g>\n"
    assert empty_element_end() == "/>\n"


def test_translate_and_point():
    assert translate(1, 2) == "translate(1,2)"
    assert point(1.5, -2) == "1.5,-2 "


def test_writer_header_and_closing_tag():
    buffer = io.StringIO()
    with SvgWriter(buffer, 200.0, 100.0) as svg:
        svg.write("<g/>")
    text = buffer.getvalue()
    assert text.startswith('<svg width="200" height="100" ')
    assert f'xmlns="{SVG_NAMESPACE}" ' in text
    assert 'version="1.1" ' in text
    assert text.endswith("<g/></svg>")
    assert "viewBox" not in text
    assert "<rect" not in text


def test_centered_view_box_and_background():
    buffer = io.StringIO()
    with SvgWriter(buffer, 200.0, 100.0, fill_background=True, view_box=True, center=True):
        pass
    text = buffer.getvalue()
    assert 'viewBox="-100 -50 200 100" >\n' in text
    assert '<rect x="-100" y="-50" width="200" height="100" fill="black"/>' in text


def test_uncentered_view_box_starts_at_origin():
    buffer = io.StringIO()
    with SvgWriter(buffer, 40.0, 20.0, fill_background=True, view_box=True, center=False):
        pass
    text = buffer.getvalue()
    assert 'viewBox="0 0 40 20" ' in text
    assert '<rect x="0" y="0" width="40" height="20" fill="black"/>' in text


def test_write_number_and_close_once():
    buffer = io.StringIO()
    svg = SvgWriter(buffer, 10.0, 10.0)
    svg.write(2.5)
    svg.close()
    svg.close()
    text = buffer.getvalue()
    assert text.endswith(">\n2.5</svg>")
    assert text.count("</svg>") == 1
    with pytest.raises(ValueError):
        svg.write("more")


def test_limits_track_extremes():
    limits = Limits()
    assert limits.low == sys.float_info.max
    assert limits.high == -sys.float_info.max
    for value in (3.0, -7.5, 12.0, 0.0):
        limits.add(value)
    assert limits.low == -7.5
    assert limits.high == 12.0


def test_tick_step_pins():
    limits = Limits()
    assert limits.tick_step(3) == 0.5
    assert limits.tick_step(8) == 1


@pytest.mark.parametrize("span", [0.0023, 0.7, 3.0, 14.0, 61.0, 999.0, 123456.0])
def test_tick_step_is_round(span):
    step = Limits().tick_step(span)
    mantissa = step / 10 ** math.floor(math.log10(step))
    assert any(math.isclose(mantissa, m) for m in (1.0, 2.0, 5.0))
    assert span / 20 <= step <= span


@pytest.mark.parametrize("span", [0.0, -1.0])
def test_tick_step_rejects_non_positive(span):
    with pytest.raises(ValueError):
        Limits().tick_step(span)