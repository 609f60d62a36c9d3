from enum import Enum

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (QApplication, QListWidget, QListWidgetItem, QMainWindow,
                               QSplitter, QStackedWidget)

from layout_demos.utils.icons import app_icon
from layout_demos.utils.settings import DEFAULT_SETTINGS, get_setting, set_setting, settings
from layout_demos.widgets.chart_demo import InteractiveChartDemo
from layout_demos.widgets.equal_width_demo import EqualWidthDemo
from layout_demos.widgets.waterfall_demo import WaterfallDemo


class DemoType(Enum):
    WATERFALL = 'waterfall'
    EQUAL_WIDTH = 'equalWidth'
    INTERACTIVE_CHART = 'interactiveChart'

    @property
    def description(self) -> str:
        return {
            DemoType.WATERFALL: 'WaterfallLayout',
            DemoType.EQUAL_WIDTH: 'EqualWidthHStack',
            DemoType.INTERACTIVE_CHART: 'InteractiveWeatherChart',
        }[self]

    @classmethod
    def from_setting(cls, value) -> 'DemoType':
        try:
            return cls(value)
        except ValueError:
            return cls(DEFAULT_SETTINGS['selected_demo'])


# Page factory for each entry of the navigation list
DEMO_PAGES = {
    DemoType.WATERFALL: WaterfallDemo,
    DemoType.EQUAL_WIDTH: EqualWidthDemo,
    DemoType.INTERACTIVE_CHART: InteractiveChartDemo,
}


class MainWindow(QMainWindow):
    def __init__(self, app: QApplication):
        super().__init__()
        self.app = app
        self.setWindowTitle('Layout Demos')
        self.setWindowIcon(app_icon())
        self.set_font_size()

        self.demo_list = QListWidget()
        self.demo_stack = QStackedWidget()
        self.pages = {}
        for demo_type in DemoType:
            item = QListWidgetItem(demo_type.description)
            item.setData(Qt.ItemDataRole.UserRole, demo_type.value)
            self.demo_list.addItem(item)
            page = DEMO_PAGES[demo_type]()
            self.pages[demo_type] = page
            self.demo_stack.addWidget(page)
        self.demo_list.currentRowChanged.connect(self.select_demo_row)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(self.demo_list)
        splitter.addWidget(self.demo_stack)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([200, 800])
        self.setCentralWidget(splitter)
        self.restore()

    def set_font_size(self):
        font = self.app.font()
        font.setPointSize(get_setting('font_size', int))
        self.app.setFont(font)

    @Slot(int)
    def select_demo_row(self, row: int):
        if row < 0:
            return
        demo_type = list(DemoType)[row]
        self.demo_stack.setCurrentWidget(self.pages[demo_type])
        set_setting('selected_demo', demo_type.value)

    def select_demo(self, demo_type: DemoType):
        self.demo_list.setCurrentRow(list(DemoType).index(demo_type))

    def closeEvent(self, event: QCloseEvent):
        """Save the window geometry before closing."""
        settings.setValue('geometry', self.saveGeometry())
        super().closeEvent(event)

    def restore(self):
        # Restore the window geometry and the last selected demo.
        if settings.contains('geometry'):
            self.restoreGeometry(settings.value('geometry', type=bytes))
        else:
            self.resize(1000, 700)
        self.select_demo(DemoType.from_setting(get_setting('selected_demo', str)))
