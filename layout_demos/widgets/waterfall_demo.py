import random

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (QComboBox, QFrame, QLabel, QPushButton, QScrollArea,
                               QVBoxLayout, QWidget)

from layout_demos.layouts.layout_host import CustomLayoutHost
from layout_demos.layouts.waterfall_layout import WaterfallLayout
from layout_demos.utils.settings import get_setting, set_setting
from layout_demos.widgets.demo_page import CUSTOM_LAYOUTS_SESSION_URL, DemoPage

MIN_TILE_HEIGHT = 20
MAX_TILE_HEIGHT = 200
COLUMN_CHOICES = range(1, 6)


def generate_random_heights(count: int, rng: random.Random | None = None) -> list[int]:
    rng = rng or random
    return [rng.randint(MIN_TILE_HEIGHT, MAX_TILE_HEIGHT) for _ in range(count)]


class WaterfallTile(QFrame):
    """Orange outlined box with a fixed height showing its index."""

    def __init__(self, index: int, height: int, parent=None):
        super().__init__(parent)
        self.index = index
        self.setFrameShape(QFrame.Shape.Box)
        self.setStyleSheet('WaterfallTile { border: 1px solid orange; }')
        self.setFixedHeight(height)
        self.setMinimumWidth(0)

        label = QLabel(f'<b>{index}</b>', self)
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(label)


class WaterfallDemo(DemoPage):
    title = 'Waterfall Layout'
    session_url = CUSTOM_LAYOUTS_SESSION_URL

    def __init__(self, parent=None):
        super().__init__(parent)
        self.item_count = get_setting('waterfall_item_count', int)
        self.random_heights = generate_random_heights(self.item_count)
        columns = get_setting('waterfall_columns', int)
        if columns not in COLUMN_CHOICES:
            columns = 3

        self.column_picker = QComboBox(self)
        self.column_picker.setToolTip('Column Number')
        for column in COLUMN_CHOICES:
            self.column_picker.addItem(str(column), column)
        self.column_picker.setCurrentIndex(self.column_picker.findData(columns))
        self.column_picker.currentIndexChanged.connect(self.column_picker_changed)
        self.toolbar.addWidget(self.column_picker)

        randomize_button = QPushButton('Randomize', self)
        randomize_button.clicked.connect(self.randomize)
        self.toolbar.addWidget(randomize_button)
        self.add_link_action()

        self.tiles_widget = QWidget()
        self.waterfall_layout = CustomLayoutHost(
            WaterfallLayout(column=columns, spacing=get_setting('waterfall_spacing', float)),
            self.tiles_widget)
        self.populate_tiles()

        scroll_area = QScrollArea(self)
        scroll_area.setWidgetResizable(True)
        scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll_area.setWidget(self.tiles_widget)
        self.content_layout.addWidget(scroll_area)

    def populate_tiles(self):
        self.waterfall_layout.clear()
        for index, height in enumerate(self.random_heights):
            self.waterfall_layout.addWidget(WaterfallTile(index, height))

    @Slot()
    def column_picker_changed(self):
        columns = self.column_picker.currentData()
        algorithm = self.waterfall_layout.algorithm
        self.waterfall_layout.set_algorithm(WaterfallLayout(column=columns, spacing=algorithm.spacing))
        set_setting('waterfall_columns', columns)

    @Slot()
    def randomize(self):
        self.random_heights = generate_random_heights(self.item_count)
        self.populate_tiles()
