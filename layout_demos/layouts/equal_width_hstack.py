"""Horizontal stack whose children all get the width of the widest child."""

from dataclasses import dataclass, field
from typing import Sequence

from PySide6.QtCore import QPointF, QRectF, QSizeF, Qt

from layout_demos.layouts.layout_protocol import (Anchor, CustomLayout, LayoutCache,
                                                  ProposedSize, Subview)


@dataclass
class EqualWidthCache:
    """Sizing results shared by ``size_that_fits`` and ``place_subviews``."""
    max_size: QSizeF = field(default_factory=lambda: QSizeF(0, 0))
    spacing: list[float] = field(default_factory=list)
    total_spacing: float = 0.0


class EqualWidthHStack(CustomLayout):
    """An HStack whose children have equal widths to the widest child."""

    name = 'EqualWidthHStack'

    def make_cache(self, subviews: Sequence[Subview]) -> EqualWidthCache:
        # Largest ideal size of the subviews
        max_width = 0.0
        max_height = 0.0
        for subview in subviews:
            size = subview.size_that_fits(ProposedSize.UNSPECIFIED)
            max_width = max(max_width, size.width())
            max_height = max(max_height, size.height())

        # Preferred gap to the next subview; the last one has nothing after it
        spacing = []
        for index, subview in enumerate(subviews):
            if index < len(subviews) - 1:
                spacing.append(subview.spacing.distance(
                    subviews[index + 1].spacing, Qt.Orientation.Horizontal))
            else:
                spacing.append(0.0)

        return EqualWidthCache(
            max_size=QSizeF(max_width, max_height),
            spacing=spacing,
            total_spacing=sum(spacing),
        )

    def _cache_data(self, subviews: Sequence[Subview], cache: LayoutCache) -> EqualWidthCache:
        if not isinstance(cache.data, EqualWidthCache):
            self.update_cache(cache, subviews)
        return cache.data

    def size_that_fits(self, proposal: ProposedSize, subviews: Sequence[Subview],
                       cache: LayoutCache) -> QSizeF:
        data = self._cache_data(subviews, cache)
        return QSizeF(
            data.max_size.width() * len(subviews) + data.total_spacing,
            data.max_size.height(),
        )

    def place_subviews(self, bounds: QRectF, proposal: ProposedSize,
                       subviews: Sequence[Subview], cache: LayoutCache):
        if not subviews:
            return

        data = self._cache_data(subviews, cache)
        max_size = data.max_size

        placement_proposal = ProposedSize(max_size.width(), max_size.height())
        next_x = bounds.left() + max_size.width() / 2

        for index, subview in enumerate(subviews):
            subview.place(
                QPointF(next_x, bounds.center().y()),
                Anchor.CENTER,
                placement_proposal,
            )
            next_x += max_size.width() + data.spacing[index]
