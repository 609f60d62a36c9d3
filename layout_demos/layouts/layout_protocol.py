"""Shared vocabulary for custom layout passes.

A layout pass runs in three steps driven by a host container:
``make_cache`` once per set of subviews, then ``size_that_fits`` for each
size proposal, then ``place_subviews`` with the final bounds. The cache
object is handed by reference through all three steps.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Protocol, Sequence

from PySide6.QtCore import QPointF, QRectF, QSizeF, Qt

DEFAULT_EDGE_SPACING = 8.0


@dataclass(frozen=True)
class ProposedSize:
    """A size suggestion from the parent. ``None`` means unspecified."""

    width: float | None = None
    height: float | None = None

    UNSPECIFIED: ClassVar[ProposedSize]


ProposedSize.UNSPECIFIED = ProposedSize()


class Anchor(Enum):
    """Point of a subview's frame that sits on the placement point."""

    CENTER = 'center'
    TOP_LEADING = 'top_leading'

    def origin_for(self, at: QPointF, size: QSizeF) -> QPointF:
        if self is Anchor.CENTER:
            return QPointF(at.x() - size.width() / 2, at.y() - size.height() / 2)
        return QPointF(at)


@dataclass(frozen=True)
class ViewSpacing:
    """Preferred spacing a subview wants around each of its edges."""

    leading: float = DEFAULT_EDGE_SPACING
    trailing: float = DEFAULT_EDGE_SPACING
    top: float = DEFAULT_EDGE_SPACING
    bottom: float = DEFAULT_EDGE_SPACING

    def distance(self, next_spacing: ViewSpacing,
                 orientation: Qt.Orientation = Qt.Orientation.Horizontal) -> float:
        """Preferred gap between this subview and the one after it."""
        if orientation == Qt.Orientation.Vertical:
            return max(self.bottom, next_spacing.top)
        return max(self.trailing, next_spacing.leading)


class Subview(Protocol):
    """Anything a custom layout can measure and position."""

    spacing: ViewSpacing

    def size_that_fits(self, proposal: ProposedSize) -> QSizeF:
        ...

    def place(self, at: QPointF, anchor: Anchor, proposal: ProposedSize) -> None:
        ...


class LayoutCache:
    """Per-pass scratch storage owned by exactly one host."""

    def __init__(self, data=None):
        self.data = data
        # Proposal the current data was computed for (if it depends on one)
        self.proposal: ProposedSize | None = None

    def reset(self, data=None):
        self.data = data
        self.proposal = None

    def is_valid_for(self, proposal: ProposedSize) -> bool:
        return self.data is not None and self.proposal == proposal


class CustomLayout:
    """Base class for layout algorithms run by a host container."""

    name = 'CustomLayout'
    # Width-driven layouts are measured with a width-only proposal
    height_for_width = False

    def make_cache(self, subviews: Sequence[Subview]):
        return None

    def update_cache(self, cache: LayoutCache, subviews: Sequence[Subview]):
        cache.reset(self.make_cache(subviews))

    def size_that_fits(self, proposal: ProposedSize, subviews: Sequence[Subview],
                       cache: LayoutCache) -> QSizeF:
        raise NotImplementedError

    def place_subviews(self, bounds: QRectF, proposal: ProposedSize,
                       subviews: Sequence[Subview], cache: LayoutCache):
        raise NotImplementedError
