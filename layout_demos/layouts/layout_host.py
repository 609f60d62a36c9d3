"""Qt container that runs a CustomLayout over its child items."""

from __future__ import annotations

from PySide6.QtCore import QPointF, QRect, QRectF, QSize, QSizeF, Qt
from PySide6.QtWidgets import QLayout, QLayoutItem, QWidget

from layout_demos.layouts.layout_protocol import (Anchor, CustomLayout, LayoutCache,
                                                  ProposedSize, ViewSpacing)
from layout_demos.utils.trace import log_flow

# Width used for the size hint of width-driven layouts before the first resize
DEFAULT_HINT_WIDTH = 480


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class LayoutItemSubview:
    """Adapts a QLayoutItem to the Subview protocol."""

    def __init__(self, item: QLayoutItem, spacing: ViewSpacing | None = None):
        self.item = item
        self.spacing = spacing or ViewSpacing()

    def size_that_fits(self, proposal: ProposedSize) -> QSizeF:
        hint = self.item.sizeHint()
        min_size = self.item.minimumSize()
        max_size = self.item.maximumSize()

        width = hint.width() if proposal.width is None else proposal.width
        width = _clamp(width, min_size.width(), max_size.width())

        if proposal.height is not None:
            height = proposal.height
        elif proposal.width is not None and self.item.hasHeightForWidth():
            height = self.item.heightForWidth(int(width))
        else:
            height = hint.height()
        height = _clamp(height, min_size.height(), max_size.height())
        return QSizeF(width, height)

    def place(self, at: QPointF, anchor: Anchor, proposal: ProposedSize):
        size = self.size_that_fits(proposal)
        origin = anchor.origin_for(at, size)
        self.item.setGeometry(QRectF(origin, size).toRect())


class CustomLayoutHost(QLayout):
    """
    QLayout that hands geometry decisions to a CustomLayout.

    The host owns one LayoutCache. It is rebuilt whenever the item set
    changes (Qt calls invalidate() for that) and otherwise handed untouched
    to the algorithm on every sizing and placement call.
    """

    def __init__(self, algorithm: CustomLayout, parent: QWidget | None = None):
        super().__init__()
        self._algorithm = algorithm
        self._items: list[QLayoutItem] = []
        self._cache = LayoutCache()
        self._cache_dirty = True
        self._cached_count = 0
        self.subview_spacing = ViewSpacing()
        self.setContentsMargins(0, 0, 0, 0)
        # setLayout() can call back into invalidate(), so attach last
        if parent is not None:
            parent.setLayout(self)

    @property
    def algorithm(self) -> CustomLayout:
        return self._algorithm

    def set_algorithm(self, algorithm: CustomLayout):
        self._algorithm = algorithm
        self.invalidate()

    @property
    def cache(self) -> LayoutCache:
        return self._cache

    # QLayout item management

    def addItem(self, item: QLayoutItem):
        self._items.append(item)
        self.invalidate()

    def count(self) -> int:
        return len(self._items)

    def itemAt(self, index: int):
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def takeAt(self, index: int):
        if 0 <= index < len(self._items):
            item = self._items.pop(index)
            self.invalidate()
            return item
        return None

    def clear(self):
        """Remove and delete every child widget."""
        while self._items:
            item = self._items.pop()
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self.invalidate()

    def invalidate(self):
        self._cache_dirty = True
        super().invalidate()

    # Layout pass

    def _subviews(self) -> list[LayoutItemSubview]:
        subviews = [LayoutItemSubview(item, self.subview_spacing)
                    for item in self._items if not item.isEmpty()]
        # Showing or hiding a child changes the set without an invalidate()
        if self._cache_dirty or len(subviews) != self._cached_count:
            self._algorithm.update_cache(self._cache, subviews)
            self._cache_dirty = False
            self._cached_count = len(subviews)
            log_flow(self._algorithm.name, f"Cache rebuilt for {len(subviews)} subviews")
        return subviews

    def _margin_size(self) -> QSize:
        margins = self.contentsMargins()
        return QSize(margins.left() + margins.right(), margins.top() + margins.bottom())

    def _proposal_for(self, width: float | None, height: float | None) -> ProposedSize:
        if self._algorithm.height_for_width:
            return ProposedSize(width, None)
        return ProposedSize(width, height)

    def _fitting_size(self, proposal: ProposedSize) -> QSize:
        size = self._algorithm.size_that_fits(proposal, self._subviews(), self._cache)
        return size.toSize() + self._margin_size()

    def hasHeightForWidth(self) -> bool:
        return self._algorithm.height_for_width

    def heightForWidth(self, width: int) -> int:
        inner_width = max(0, width - self._margin_size().width())
        return self._fitting_size(ProposedSize(inner_width, None)).height()

    def sizeHint(self) -> QSize:
        if self._algorithm.height_for_width:
            width = self.geometry().width() if self.geometry().isValid() else DEFAULT_HINT_WIDTH
            return QSize(width, self.heightForWidth(width))
        return self._fitting_size(ProposedSize.UNSPECIFIED)

    def minimumSize(self) -> QSize:
        if self._algorithm.height_for_width:
            return self._margin_size()
        return self.sizeHint()

    def expandingDirections(self):
        return Qt.Orientation(0)

    def setGeometry(self, rect: QRect):
        super().setGeometry(rect)
        bounds = QRectF(self.contentsRect())
        proposal = self._proposal_for(bounds.width(), bounds.height())
        subviews = self._subviews()
        log_flow(self._algorithm.name,
                 f"Placing {len(subviews)} subviews in {bounds.width():.0f}x{bounds.height():.0f}",
                 throttle_key=f"place:{id(self)}", every_s=1.0)
        self._algorithm.place_subviews(bounds, proposal, subviews, self._cache)
