import os

import pytest
from PySide6.QtCore import QRect, QSize
from PySide6.QtWidgets import QApplication, QWidget

from layout_demos.layouts.equal_width_hstack import EqualWidthHStack
from layout_demos.layouts.layout_host import CustomLayoutHost, LayoutItemSubview
from layout_demos.layouts.layout_protocol import ProposedSize
from layout_demos.layouts.waterfall_layout import WaterfallLayout


@pytest.fixture(scope="module")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance() or QApplication([])
    yield app


class HintWidget(QWidget):
    def __init__(self, hint: QSize, parent=None):
        super().__init__(parent)
        self._hint = hint

    def sizeHint(self):
        return self._hint


def _tile(height):
    tile = HintWidget(QSize(10, height))
    tile.setFixedHeight(height)
    return tile


def test_equal_width_host_sizes_and_places_children(qapp):
    container = QWidget()
    host = CustomLayoutHost(EqualWidthHStack(), container)
    first = HintWidget(QSize(100, 30))
    second = HintWidget(QSize(40, 20))
    host.addWidget(first)
    host.addWidget(second)
    container.show()

    assert host.count() == 2
    assert host.sizeHint() == QSize(100 * 2 + 8, 30)

    host.setGeometry(QRect(0, 0, 208, 30))
    assert first.geometry() == QRect(0, 0, 100, 30)
    assert second.geometry() == QRect(108, 0, 100, 30)
    container.close()


def test_item_changes_rebuild_cache(qapp):
    container = QWidget()
    host = CustomLayoutHost(EqualWidthHStack(), container)
    host.addWidget(HintWidget(QSize(50, 10)))
    container.show()
    host.sizeHint()
    assert len(host.cache.data.spacing) == 1

    added = HintWidget(QSize(80, 10))
    host.addWidget(added)
    # Children added after show() are only shown by a queued call
    added.show()
    host.sizeHint()
    assert len(host.cache.data.spacing) == 2
    assert host.cache.data.max_size.width() == 80

    item = host.takeAt(0)
    assert item is not None
    host.sizeHint()
    assert len(host.cache.data.spacing) == 1
    assert host.takeAt(5) is None
    container.close()


def test_waterfall_host_uses_height_for_width(qapp):
    container = QWidget()
    host = CustomLayoutHost(WaterfallLayout(column=2), container)
    tiles = [_tile(10), _tile(20), _tile(30)]
    for tile in tiles:
        host.addWidget(tile)
    container.show()

    assert host.hasHeightForWidth()
    assert host.heightForWidth(100) == 40
    assert host.cache.proposal == ProposedSize(100, None)

    host.setGeometry(QRect(0, 0, 100, 40))
    assert [tile.geometry() for tile in tiles] == [
        QRect(0, 0, 50, 10), QRect(50, 0, 50, 20), QRect(0, 10, 50, 30)]

    host.set_algorithm(WaterfallLayout(column=3))
    assert host.heightForWidth(90) == 30
    container.close()


def test_subview_adapter_measures_fixed_height_items(qapp):
    container = QWidget()
    host = CustomLayoutHost(WaterfallLayout(), container)
    host.addWidget(_tile(42))
    subview = LayoutItemSubview(host.itemAt(0))

    size = subview.size_that_fits(ProposedSize(120, None))
    assert size.width() == 120
    assert size.height() == 42
