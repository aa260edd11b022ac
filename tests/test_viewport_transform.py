"""
Tests for ViewportTransform zoom/pan state.

Covers:
- Step zoom and clamping at both bounds
- Zoom anchored to the cursor (single and repeated steps)
- Absolute pan and reset
- Toolbar queries (percent, can_zoom_in/out)
- Independent instances
"""
import math
import pytest

from models.transform import ScreenPoint, ViewTransform
from services.viewport_transform import ViewportTransform
from services.viewer_settings import ViewerSettings
from utils.coordinate_transforms import screen_to_content


@pytest.fixture
def viewport():
    return ViewportTransform()


# ══════════════════════════════════════════════════════════════════════════
# Step zoom
# ══════════════════════════════════════════════════════════════════════════

class TestStepZoom:

    def test_starts_at_identity(self, viewport):
        assert viewport.transform == ViewTransform(1.0, 0.0, 0.0)

    def test_three_zoom_ins(self, viewport):
        for _ in range(3):
            viewport.zoom_in()
        assert viewport.scale == pytest.approx(1.728)
        assert viewport.scale < viewport.max_scale

    def test_zoom_out_divides(self, viewport):
        viewport.zoom_out()
        assert viewport.scale == pytest.approx(1 / 1.2)

    def test_zoom_in_never_exceeds_max(self, viewport):
        for _ in range(50):
            viewport.zoom_in()
        assert viewport.scale == viewport.max_scale == 4.0

    def test_zoom_out_never_below_min(self, viewport):
        for _ in range(50):
            viewport.zoom_out()
        assert viewport.scale == viewport.min_scale == 0.5

    def test_zoom_at_bound_is_noop(self, viewport):
        viewport.set_scale(4.0)
        viewport.zoom_in()
        assert viewport.scale == 4.0

    def test_set_scale_clamps(self, viewport):
        viewport.set_scale(100)
        assert viewport.scale == 4.0
        viewport.set_scale(0.01)
        assert viewport.scale == 0.5

    def test_step_zoom_keeps_translation(self, viewport):
        viewport.pan(12.0, -8.0)
        viewport.zoom_in()
        assert (viewport.translate_x, viewport.translate_y) == (12.0, -8.0)

    def test_from_settings(self):
        settings = ViewerSettings(min_scale=0.25, max_scale=8.0, zoom_step_factor=2.0)
        viewport = ViewportTransform.from_settings(settings)
        viewport.zoom_in()
        assert viewport.scale == 2.0
        for _ in range(5):
            viewport.zoom_out()
        assert viewport.scale == 0.25


# ══════════════════════════════════════════════════════════════════════════
# Cursor-anchored zoom
# ══════════════════════════════════════════════════════════════════════════

class TestZoomToPoint:

    def _content_under(self, viewport, point, rect, frame):
        return screen_to_content(point, rect, viewport.transform, frame)

    @pytest.mark.parametrize("factor", [1.05, 0.95, 1.2, 2.0, 0.6])
    def test_point_under_cursor_stays_put(self, viewport, offset_rect, reference_frame, factor):
        viewport.pan(-40.0, 25.0)
        viewport.set_scale(1.5)
        cursor = ScreenPoint(512.0, 333.0)
        before = self._content_under(viewport, cursor, offset_rect, reference_frame)

        assert viewport.zoom_to_point(cursor, offset_rect, factor)

        after = self._content_under(viewport, cursor, offset_rect, reference_frame)
        assert after.x == pytest.approx(before.x)
        assert after.y == pytest.approx(before.y)

    def test_repeated_wheel_steps_do_not_drift(self, viewport, offset_rect, reference_frame):
        cursor = ScreenPoint(700.5, 120.25)
        before = self._content_under(viewport, cursor, offset_rect, reference_frame)
        for _ in range(40):
            viewport.zoom_to_point(cursor, offset_rect, 1.05)
        for _ in range(25):
            viewport.zoom_to_point(cursor, offset_rect, 0.95)
        after = self._content_under(viewport, cursor, offset_rect, reference_frame)
        assert after.x == pytest.approx(before.x, abs=1e-6)
        assert after.y == pytest.approx(before.y, abs=1e-6)

    def test_anchor_holds_when_clamped_partway(self, viewport, full_rect, reference_frame):
        """A step that hits MAX_SCALE still anchors at the cursor"""
        viewport.set_scale(3.9)
        cursor = ScreenPoint(100.0, 500.0)
        before = self._content_under(viewport, cursor, full_rect, reference_frame)
        assert viewport.zoom_to_point(cursor, full_rect, 1.2)
        assert viewport.scale == 4.0
        after = self._content_under(viewport, cursor, full_rect, reference_frame)
        assert after.x == pytest.approx(before.x)
        assert after.y == pytest.approx(before.y)

    def test_noop_at_bound(self, viewport, full_rect):
        viewport.set_scale(4.0)
        viewport.pan(10.0, 10.0)
        assert not viewport.zoom_to_point(ScreenPoint(50, 50), full_rect, 1.5)
        assert viewport.transform == ViewTransform(4.0, 10.0, 10.0)

    def test_zoom_at_origin_keeps_translation_zero(self, viewport, full_rect):
        viewport.zoom_to_point(ScreenPoint(0, 0), full_rect, 2.0)
        assert viewport.transform == ViewTransform(2.0, 0.0, 0.0)

    def test_zoom_at_center(self, viewport, full_rect):
        viewport.zoom_to_point(ScreenPoint(400, 300), full_rect, 2.0)
        assert viewport.transform == ViewTransform(2.0, -400.0, -300.0)

    @pytest.mark.parametrize("factor", [0.0, -1.0, math.inf, math.nan])
    def test_bad_factor_ignored(self, viewport, full_rect, factor):
        assert not viewport.zoom_to_point(ScreenPoint(10, 10), full_rect, factor)
        assert viewport.transform == ViewTransform.identity()


# ══════════════════════════════════════════════════════════════════════════
# Pan / reset / queries
# ══════════════════════════════════════════════════════════════════════════

class TestPanAndReset:

    def test_pan_is_absolute(self, viewport):
        viewport.pan(10.0, 20.0)
        viewport.pan(10.0, 20.0)
        assert tuple(viewport.transform.translate) == (10.0, 20.0)

    def test_pan_is_unclamped(self, viewport):
        viewport.pan(-10000.0, 99999.0)
        assert (viewport.translate_x, viewport.translate_y) == (-10000.0, 99999.0)

    def test_reset(self, viewport, full_rect):
        viewport.zoom_to_point(ScreenPoint(123, 45), full_rect, 2.0)
        viewport.pan(5.0, 6.0)
        viewport.reset()
        assert viewport.transform == ViewTransform.identity()

    def test_zoom_percent(self, viewport):
        assert viewport.zoom_percent == 100
        viewport.zoom_in()
        assert viewport.zoom_percent == 120
        viewport.zoom_in()
        assert viewport.zoom_percent == 144

    def test_can_zoom_flags(self, viewport):
        assert viewport.can_zoom_in and viewport.can_zoom_out
        viewport.set_scale(4.0)
        assert not viewport.can_zoom_in
        assert viewport.can_zoom_out
        viewport.set_scale(0.5)
        assert viewport.can_zoom_in
        assert not viewport.can_zoom_out

    def test_instances_are_independent(self, full_rect):
        inline = ViewportTransform()
        full_view = ViewportTransform()
        full_view.zoom_to_point(ScreenPoint(200, 200), full_rect, 3.0)
        full_view.pan(1.0, 2.0)
        assert inline.transform == ViewTransform.identity()
