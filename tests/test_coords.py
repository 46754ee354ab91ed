import math

import pytest

from mandelview.coords import View, complex_to_pixel, pixel_to_complex
from mandelview.errors import ConfigError

WIDTH, HEIGHT = 960, 720


@pytest.fixture
def view():
    return View(center=complex(-0.3, 0.0), scale=275.0)


def test_defaults():
    v = View()
    assert v.center == complex(-0.3, 0.0)
    assert v.scale == 275.0


def test_viewport_center_maps_to_view_center(view):
    assert pixel_to_complex(WIDTH / 2, HEIGHT / 2, view, WIDTH, HEIGHT) == pytest.approx(view.center)


def test_top_left_corner(view):
    c = pixel_to_complex(0, 0, view, WIDTH, HEIGHT)
    assert c.real == pytest.approx((0 - 480 - 82.5) / 275)
    assert c.imag == pytest.approx(-360 / 275)


def test_rows_grow_downward_into_positive_imaginary(view):
    upper = pixel_to_complex(100, 10, view, WIDTH, HEIGHT)
    lower = pixel_to_complex(100, 20, view, WIDTH, HEIGHT)
    assert lower.imag - upper.imag == pytest.approx(10 / 275)
    assert lower.real == upper.real


@pytest.mark.parametrize("x, y", [(0, 0), (959, 719), (480, 360), (123.25, 456.75), (1, 718)])
def test_round_trip(view, x, y):
    c = pixel_to_complex(x, y, view, WIDTH, HEIGHT)
    px, py = complex_to_pixel(c, view, WIDTH, HEIGHT)
    assert px == pytest.approx(x, abs=1e-9)
    assert py == pytest.approx(y, abs=1e-9)


def test_round_trip_deep_zoom():
    view = View(center=complex(-0.743643887, 0.131825904), scale=275.0 * 2 ** 30)
    c = pixel_to_complex(17, 700, view, WIDTH, HEIGHT)
    px, py = complex_to_pixel(c, view, WIDTH, HEIGHT)
    assert px == pytest.approx(17, abs=1e-3)
    assert py == pytest.approx(700, abs=1e-3)


def test_click_at_center_keeps_center_and_doubles_scale(view):
    zoomed = view.zoom_at(480, 360, WIDTH, HEIGHT)
    assert zoomed.center == pytest.approx(view.center)
    assert zoomed.scale == 550


def test_click_uses_scale_before_zoom(view):
    zoomed = view.zoom_at(0, 0, WIDTH, HEIGHT)
    assert zoomed.center == pytest.approx(pixel_to_complex(0, 0, view, WIDTH, HEIGHT))
    assert zoomed.scale == 2 * view.scale
    # The clicked point is now in the middle of the viewport
    assert complex_to_pixel(zoomed.center, zoomed, WIDTH, HEIGHT) == pytest.approx((480, 360))


def test_view_is_immutable(view):
    with pytest.raises(AttributeError):
        view.scale = 10


@pytest.mark.parametrize("scale", [0, -1.0, math.inf, math.nan])
def test_bad_scale_rejected(scale):
    with pytest.raises(ConfigError):
        View(center=0j, scale=scale)


def test_non_finite_center_rejected():
    with pytest.raises(ConfigError):
        View(center=complex(math.nan, 0.0), scale=1.0)


def test_center_accepts_real_numbers():
    assert View(center=-1, scale=2).center == complex(-1, 0)
