from PySide6.QtCore import QRectF, QSizeF

from layout_demos.layouts.equal_width_hstack import EqualWidthCache, EqualWidthHStack
from layout_demos.layouts.layout_protocol import Anchor, LayoutCache, ProposedSize, ViewSpacing


class FakeSubview:
    def __init__(self, width, height, spacing=None):
        self.ideal = QSizeF(width, height)
        self.spacing = spacing or ViewSpacing()
        self.size_calls = []
        self.placements = []

    def size_that_fits(self, proposal):
        self.size_calls.append(proposal)
        return QSizeF(self.ideal)

    def place(self, at, anchor, proposal):
        self.placements.append((at, anchor, proposal))


def _run_pass(subviews, bounds=QRectF(0, 0, 300, 40)):
    layout = EqualWidthHStack()
    cache = LayoutCache(layout.make_cache(subviews))
    size = layout.size_that_fits(ProposedSize.UNSPECIFIED, subviews, cache)
    layout.place_subviews(bounds, ProposedSize.UNSPECIFIED, subviews, cache)
    return size, cache


def test_cache_takes_componentwise_max_and_pairwise_spacing():
    subviews = [
        FakeSubview(40, 30, ViewSpacing(leading=4, trailing=6)),
        FakeSubview(90, 10, ViewSpacing(leading=12, trailing=2)),
        FakeSubview(20, 20, ViewSpacing(leading=1, trailing=50)),
    ]
    cache = EqualWidthHStack().make_cache(subviews)

    assert cache.max_size == QSizeF(90, 30)
    # max(trailing of left, leading of right); nothing after the last one
    assert cache.spacing == [12, 2, 0]
    assert cache.total_spacing == 14
    assert all(s.size_calls == [ProposedSize.UNSPECIFIED] for s in subviews)


def test_size_is_max_width_times_count_plus_spacing():
    subviews = [FakeSubview(40, 30), FakeSubview(90, 10), FakeSubview(20, 20)]
    size, cache = _run_pass(subviews)

    assert size.width() == 90 * 3 + cache.data.total_spacing
    assert size.height() == 30


def test_size_does_not_remeasure_subviews():
    subviews = [FakeSubview(40, 30), FakeSubview(90, 10)]
    layout = EqualWidthHStack()
    cache = LayoutCache(layout.make_cache(subviews))
    layout.size_that_fits(ProposedSize(500, 100), subviews, cache)
    layout.size_that_fits(ProposedSize(10, 10), subviews, cache)

    assert [len(s.size_calls) for s in subviews] == [1, 1]


def test_placement_centers_each_subview_in_equal_slots():
    subviews = [
        FakeSubview(40, 30, ViewSpacing(trailing=10, leading=10)),
        FakeSubview(90, 10, ViewSpacing(trailing=5, leading=10)),
        FakeSubview(20, 20, ViewSpacing(trailing=5, leading=0)),
    ]
    _run_pass(subviews, bounds=QRectF(100, 50, 300, 40))

    centers = [s.placements[0][0] for s in subviews]
    assert [c.x() for c in centers] == [145, 245, 340]
    assert all(c.y() == 70 for c in centers)
    for subview in subviews:
        _, anchor, proposal = subview.placements[0]
        assert anchor is Anchor.CENTER
        # Every subview is offered the widest width
        assert proposal == ProposedSize(90, 30)


def test_negative_spacing_is_passed_through():
    subviews = [
        FakeSubview(10, 10, ViewSpacing(trailing=-4, leading=-6)),
        FakeSubview(10, 10, ViewSpacing(trailing=-4, leading=-6)),
    ]
    size, cache = _run_pass(subviews)

    assert cache.data.spacing == [-4, 0]
    assert size.width() == 16


def test_empty_stack_has_zero_size_and_no_placements():
    layout = EqualWidthHStack()
    cache = LayoutCache(layout.make_cache([]))

    assert cache.data == EqualWidthCache(max_size=QSizeF(0, 0), spacing=[], total_spacing=0)
    assert layout.size_that_fits(ProposedSize.UNSPECIFIED, [], cache) == QSizeF(0, 0)
    layout.place_subviews(QRectF(0, 0, 10, 10), ProposedSize.UNSPECIFIED, [], cache)


def test_missing_cache_is_built_on_demand():
    subviews = [FakeSubview(40, 30), FakeSubview(60, 20)]
    layout = EqualWidthHStack()
    cache = LayoutCache()

    size = layout.size_that_fits(ProposedSize.UNSPECIFIED, subviews, cache)

    assert isinstance(cache.data, EqualWidthCache)
    assert size == QSizeF(60 * 2 + 8, 30)
