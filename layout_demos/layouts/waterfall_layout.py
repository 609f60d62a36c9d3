"""Waterfall (masonry) layout calculator."""

from dataclasses import dataclass, field
from typing import Sequence

from PySide6.QtCore import QPointF, QRectF, QSizeF

from layout_demos.layouts.layout_protocol import (Anchor, CustomLayout, LayoutCache,
                                                  ProposedSize, Subview)


@dataclass
class WaterfallGeometry:
    """Positions computed for one (subviews, proposal) pair."""
    origins: list[QPointF] = field(default_factory=list)
    columns: list[int] = field(default_factory=list)
    column_width: float = 0.0
    column_heights: list[float] = field(default_factory=list)
    height: float = 0.0


class WaterfallLayout(CustomLayout):
    """
    A vertical multi-column layout that places subviews sequentially into
    the column with the minimum height.
    """

    name = 'WaterfallLayout'
    height_for_width = True

    def __init__(self, column: int = 2, spacing: float = 0):
        """
        Args:
            column: Number of columns, at least 1
            spacing: Gap between columns in pixels
        """
        if column < 1:
            raise ValueError(f'WaterfallLayout needs at least one column, got {column}')
        self.column = int(column)
        self.spacing = spacing

    def calculate_geometry(self, subviews: Sequence[Subview],
                           proposal: ProposedSize) -> WaterfallGeometry:
        width = proposal.width
        if width is None or not subviews:
            return WaterfallGeometry()

        # Width and leading x coordinate of each column
        column_width = (width - (self.column - 1) * self.spacing) / self.column
        column_x = [index * (column_width + self.spacing) for index in range(self.column)]

        column_heights = [0.0] * self.column
        origins = []
        columns = []
        max_height = 0.0

        item_proposal = ProposedSize(column_width, None)
        for subview in subviews:
            height = subview.size_that_fits(item_proposal).height()
            # min() keeps the first minimum, so ties go to the leftmost column
            shortest_col = min(range(self.column), key=lambda i: column_heights[i])

            origins.append(QPointF(column_x[shortest_col], column_heights[shortest_col]))
            columns.append(shortest_col)
            column_heights[shortest_col] += height

            max_height = max(max_height, column_heights[shortest_col])

        return WaterfallGeometry(
            origins=origins,
            columns=columns,
            column_width=column_width,
            column_heights=column_heights,
            height=max_height,
        )

    def make_cache(self, subviews: Sequence[Subview]):
        # Geometry depends on the proposal, which is unknown here
        return None

    def size_that_fits(self, proposal: ProposedSize, subviews: Sequence[Subview],
                       cache: LayoutCache) -> QSizeF:
        geometry = self.calculate_geometry(subviews, proposal)

        # Kept for place_subviews() as long as the proposal stays the same
        cache.data = geometry
        cache.proposal = proposal

        if not geometry.origins:
            return QSizeF(0, 0)
        return QSizeF(proposal.width or 0, geometry.height)

    def place_subviews(self, bounds: QRectF, proposal: ProposedSize,
                       subviews: Sequence[Subview], cache: LayoutCache):
        if cache.is_valid_for(proposal) and isinstance(cache.data, WaterfallGeometry):
            geometry = cache.data
        else:
            geometry = self.calculate_geometry(subviews, proposal)
            cache.data = geometry
            cache.proposal = proposal

        placement_proposal = ProposedSize(geometry.column_width, None)
        for subview, origin in zip(subviews, geometry.origins):
            # The bounds' origin is not always (0, 0)
            subview.place(
                QPointF(bounds.left() + origin.x(), bounds.top() + origin.y()),
                Anchor.TOP_LEADING,
                placement_proposal,
            )
