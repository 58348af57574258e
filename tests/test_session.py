"""Tests for the interactive session controller."""

import pytest
import numpy as np
import matplotlib.pyplot as plt
from structlog.testing import capture_logs
from pixel_voronoi.config import ConfigurationError, get_palette
from pixel_voronoi.core.buffer import BACKGROUND_COLOR
from pixel_voronoi.core.markers import MARKER_COLOR
from pixel_voronoi.core.metrics import DistanceMetric
from pixel_voronoi.core.palette import Palette
from pixel_voronoi.core.partition import assign_owners
from pixel_voronoi.core.seeds import MAX_SEEDS, MIN_SEEDS
from pixel_voronoi.core.session import Command, Params, VoronoiSession


@pytest.fixture
def palette():
    return Palette.from_hex(get_palette("default"))


def make_session(palette, n=5, width=60, height=40, metric=DistanceMetric.EUCLIDEAN, **kwargs):
    params = Params(width=width, height=height, n=n, metric=metric)
    return VoronoiSession(params, palette, rng=np.random.default_rng(7), **kwargs)


def assert_markers_visible(session):
    r = session.params.radius
    for seed in session.seeds:
        assert np.all(session.buffer.grid[seed.y:seed.y + r, seed.x:seed.x + r] == MARKER_COLOR)


class TestSessionSetup:
    """Test construction and the initial recompute."""

    def test_initial_frame(self, palette):
        session = make_session(palette)

        assert len(session.seeds) == 5
        assert session.generation == 1
        assert session.running
        assert session.buffer.pixels.shape == (60 * 40,)
        assert not np.any(session.buffer.pixels == BACKGROUND_COLOR)
        assert_markers_visible(session)

    def test_metric_name_accepted(self, palette):
        session = make_session(palette, metric="manhattan")
        assert session.params.metric is DistanceMetric.MANHATTAN

    @pytest.mark.parametrize("kwargs", [
        dict(width=10, height=40),
        dict(width=60, height=9),
        dict(width=0, height=40),
        dict(n=0),
        dict(n=101),
        dict(metric="chebyshev"),
    ])
    def test_invalid_params(self, palette, kwargs):
        with pytest.raises(ConfigurationError):
            make_session(palette, **kwargs)


class TestSeedCountCommands:
    """Test clamped seed count changes."""

    def test_increase(self, palette):
        session = make_session(palette)
        assert session.increase_seed_count()
        assert session.params.n == 6
        assert len(session.seeds) == 6
        assert session.generation == 2
        assert_markers_visible(session)

    def test_decrease(self, palette):
        session = make_session(palette)
        assert session.decrease_seed_count()
        assert session.params.n == 4
        assert len(session.seeds) == 4

    def test_decrease_at_minimum_is_noop(self, palette):
        session = make_session(palette, n=MIN_SEEDS)
        seeds = list(session.seeds)
        pixels = session.buffer.pixels.copy()

        for _ in range(3):
            assert not session.decrease_seed_count()

        assert session.params.n == MIN_SEEDS
        assert session.seeds == seeds
        assert session.generation == 1
        np.testing.assert_array_equal(session.buffer.pixels, pixels)

    def test_increase_at_maximum_is_noop(self, palette):
        session = make_session(palette, n=MAX_SEEDS)
        assert not session.increase_seed_count()
        assert not session.increase_seed_count()
        assert session.params.n == MAX_SEEDS
        assert len(session.seeds) == MAX_SEEDS

    def test_clamping_over_long_sequence(self, palette):
        session = make_session(palette, n=98, width=24, height=24)
        for _ in range(5):
            session.handle(Command.INCREASE_SEEDS)
            assert MIN_SEEDS <= session.params.n <= MAX_SEEDS
        assert session.params.n == MAX_SEEDS


class TestRegenerate:
    """Test reseeding."""

    def test_regenerate_keeps_count(self, palette):
        session = make_session(palette)
        old_seeds = list(session.seeds)
        session.regenerate()

        assert len(session.seeds) == 5
        assert session.generation == 2
        assert session.seeds != old_seeds
        assert [s.color for s in session.seeds] == [s.color for s in old_seeds]
        assert_markers_visible(session)


class TestMetricSwitch:
    """Test switching metric without reseeding."""

    def test_seeds_unchanged(self, palette):
        session = make_session(palette, n=8)
        seeds = list(session.seeds)
        session.set_metric(DistanceMetric.MANHATTAN)

        assert session.seeds == seeds
        assert session.generation == 1
        assert session.params.metric is DistanceMetric.MANHATTAN
        np.testing.assert_array_equal(
            session.owners, assign_owners(seeds, DistanceMetric.MANHATTAN, 60, 40)
        )
        assert_markers_visible(session)

    def test_pixels_change_only_where_owners_change(self, palette):
        session = make_session(palette, n=8)
        eu_pixels = session.buffer.pixels.copy()
        eu_owners = session.owners.ravel().copy()

        session.handle(Command.SELECT_MANHATTAN)
        man_pixels = session.buffer.pixels
        man_owners = session.owners.ravel()

        changed_pixels = eu_pixels != man_pixels
        changed_owners = eu_owners != man_owners
        assert not np.any(changed_pixels & ~changed_owners)

    def test_switch_back_restores_frame(self, palette):
        session = make_session(palette, n=8)
        pixels = session.buffer.pixels.copy()
        session.handle(Command.SELECT_MANHATTAN)
        session.handle(Command.SELECT_EUCLIDEAN)
        np.testing.assert_array_equal(session.buffer.pixels, pixels)

    def test_revision_advances(self, palette):
        session = make_session(palette)
        revision = session.revision
        session.set_metric("manhattan")
        assert session.revision == revision + 1


class TestCommands:
    """Test command dispatch and side outputs."""

    def test_exit(self, palette):
        session = make_session(palette)
        session.handle(Command.EXIT)
        assert not session.running

    def test_regenerate_command(self, palette):
        session = make_session(palette)
        session.handle(Command.REGENERATE)
        assert session.generation == 2

    def test_snapshot(self, palette, tmp_path):
        session = make_session(palette, snapshot_dir=tmp_path)
        session.handle(Command.SNAPSHOT)
        path = next(tmp_path.glob("*.png"))

        assert path.exists()
        image = plt.imread(path)
        assert image.shape[:2] == (40, 60)

    def test_snapshot_explicit_directory(self, palette, tmp_path):
        session = make_session(palette)
        path = session.snapshot(tmp_path / "shots")
        assert path.parent == tmp_path / "shots"
        assert path.suffix == ".png"

    def test_cell_areas(self, palette):
        session = make_session(palette)
        areas = session.cell_areas()
        assert len(areas) == 5
        assert areas.sum() == 60 * 40

    def test_frame_budget_warning(self, palette):
        with capture_logs() as logs:
            make_session(palette, frame_budget_ms=0.0)
        assert any(log["event"] == "Recompute exceeded frame budget" for log in logs)
