import random

import pytest
from PySide6.QtCore import QPointF, QRectF, QSizeF

from layout_demos.layouts.layout_protocol import Anchor, LayoutCache, ProposedSize
from layout_demos.layouts.waterfall_layout import WaterfallGeometry, WaterfallLayout
from layout_demos.utils.settings import DEFAULT_SETTINGS


class FakeSubview:
    def __init__(self, height):
        self.height = height
        self.size_calls = []
        self.placements = []

    def size_that_fits(self, proposal):
        self.size_calls.append(proposal)
        return QSizeF(proposal.width or 0, self.height)

    def place(self, at, anchor, proposal):
        self.placements.append((at, anchor, proposal))


def test_three_items_in_two_columns():
    subviews = [FakeSubview(10), FakeSubview(20), FakeSubview(30)]
    geometry = WaterfallLayout(column=2, spacing=0).calculate_geometry(
        subviews, ProposedSize(100, None))

    assert geometry.column_width == 50
    assert geometry.origins == [QPointF(0, 0), QPointF(50, 0), QPointF(0, 10)]
    assert geometry.columns == [0, 1, 0]
    assert geometry.column_heights == [40, 20]
    assert geometry.height == 40
    # Items are measured at the column width with an open height
    assert subviews[0].size_calls == [ProposedSize(50, None)]


def test_ties_go_to_lowest_column():
    subviews = [FakeSubview(10), FakeSubview(10), FakeSubview(10), FakeSubview(10)]
    geometry = WaterfallLayout(column=3).calculate_geometry(subviews, ProposedSize(90, None))

    assert geometry.columns == [0, 1, 2, 0]


def test_spacing_shifts_columns():
    subviews = [FakeSubview(5), FakeSubview(5), FakeSubview(5)]
    geometry = WaterfallLayout(column=3, spacing=10).calculate_geometry(
        subviews, ProposedSize(320, None))

    assert geometry.column_width == 100
    assert [origin.x() for origin in geometry.origins] == [0, 110, 220]


@pytest.mark.parametrize("columns", [1, 2, 3, 5])
def test_every_item_lands_in_exactly_one_column(columns):
    rng = random.Random(columns)
    subviews = [FakeSubview(rng.randint(20, 200)) for _ in range(40)]
    geometry = WaterfallLayout(column=columns).calculate_geometry(
        subviews, ProposedSize(500, None))

    assert len(geometry.columns) == len(subviews)
    assert all(0 <= column < columns for column in geometry.columns)
    for column in range(columns):
        total = sum(s.height for s, c in zip(subviews, geometry.columns) if c == column)
        assert geometry.column_heights[column] == total
    assert geometry.height == max(geometry.column_heights)


def test_missing_width_or_items_gives_empty_geometry():
    layout = WaterfallLayout()
    assert layout.calculate_geometry([FakeSubview(10)], ProposedSize.UNSPECIFIED) == WaterfallGeometry()
    assert layout.calculate_geometry([], ProposedSize(100, None)) == WaterfallGeometry()

    cache = LayoutCache()
    assert layout.size_that_fits(ProposedSize.UNSPECIFIED, [FakeSubview(10)], cache) == QSizeF(0, 0)


def test_size_reports_proposed_width_and_tallest_column():
    subviews = [FakeSubview(10), FakeSubview(20), FakeSubview(30)]
    size = WaterfallLayout().size_that_fits(ProposedSize(100, None), subviews, LayoutCache())

    assert size == QSizeF(100, 40)


def test_place_reuses_geometry_for_same_proposal():
    subviews = [FakeSubview(10), FakeSubview(20), FakeSubview(30)]
    layout = WaterfallLayout()
    cache = LayoutCache(layout.make_cache(subviews))
    proposal = ProposedSize(100, None)

    layout.size_that_fits(proposal, subviews, cache)
    cached = cache.data
    layout.place_subviews(QRectF(8, 16, 100, 40), proposal, subviews, cache)

    assert cache.data is cached
    assert [len(s.size_calls) for s in subviews] == [1, 1, 1]
    assert [s.placements[0][0] for s in subviews] == [
        QPointF(8, 16), QPointF(58, 16), QPointF(8, 26)]
    for subview in subviews:
        _, anchor, placement_proposal = subview.placements[0]
        assert anchor is Anchor.TOP_LEADING
        assert placement_proposal == ProposedSize(50, None)


def test_place_recomputes_for_new_proposal():
    subviews = [FakeSubview(10), FakeSubview(20)]
    layout = WaterfallLayout()
    cache = LayoutCache()

    layout.size_that_fits(ProposedSize(100, None), subviews, cache)
    layout.place_subviews(QRectF(0, 0, 200, 40), ProposedSize(200, None), subviews, cache)

    assert cache.proposal == ProposedSize(200, None)
    assert cache.data.column_width == 100
    assert [s.placements[0][0] for s in subviews] == [QPointF(0, 0), QPointF(100, 0)]


def test_zero_columns_is_rejected():
    with pytest.raises(ValueError):
        WaterfallLayout(column=0)


def test_default_spacing_setting_matches_layout_default():
    assert DEFAULT_SETTINGS['waterfall_spacing'] == WaterfallLayout().spacing == 0
