import pytest

from ipcosd.osd_common import WEB_VIEW_RECT_H, WEB_VIEW_RECT_W
from ipcosd.osd_geometry import scale_position, scale_rates, shift_to_fit, shrink_to_fit


def test_scale_rates_map_normalized_to_video():
    x_rate, y_rate = scale_rates(1920, 1080, WEB_VIEW_RECT_W, WEB_VIEW_RECT_H)
    assert x_rate * WEB_VIEW_RECT_W == pytest.approx(1920)
    assert y_rate * WEB_VIEW_RECT_H == pytest.approx(1080)


def test_scale_rates_rejects_zero():
    with pytest.raises(ValueError):
        scale_rates(1920, 1080, 0, 480)
    with pytest.raises(ValueError):
        scale_rates(1920, 1080, 704, 0)


def test_scale_position_identity_on_aligned_value():
    assert scale_position(1920, 1.0) == 1920
    assert scale_position(0, 2.5) == 0


@pytest.mark.parametrize("value", [1, 15, 17, 100, 333, 703])
@pytest.mark.parametrize("rate", [1.0, 1920 / 704, 0.5])
def test_scale_position_is_aligned_upper_bound(value, rate):
    result = scale_position(value, rate)
    scaled = int(value * rate)
    assert result % 16 == 0
    assert scaled <= result < scaled + 16


def test_scale_position_truncates_before_aligning():
    assert scale_position(16, 1.0) == scale_position(16, 1.05)


@pytest.mark.parametrize(
    "origin,size,limit", [(0, 64, 48), (100, 300, 320), (16, 32, 1000), (0, 0, 0)]
)
def test_shrink_to_fit_invariants(origin, size, limit):
    result = shrink_to_fit(origin, size, limit)
    assert origin + result <= limit or result == size
    assert (size - result) % 16 == 0
    assert result <= size
    if result != size:
        assert origin + result + 16 > limit


def test_shrink_to_fit_leaves_fitting_size():
    assert shrink_to_fit(16, 32, 1000) == 32


@pytest.mark.parametrize(
    "origin,size,limit", [(1900, 64, 1920), (500, 200, 640), (0, 16, 1920)]
)
def test_shift_to_fit_invariants(origin, size, limit):
    result = shift_to_fit(origin, size, limit)
    assert result + size <= limit
    assert (origin - result) % 16 == 0
    assert result <= origin
    if result != origin:
        assert result + size + 16 > limit


def test_shift_to_fit_can_go_negative():
    assert shift_to_fit(0, 100, 50) < 0