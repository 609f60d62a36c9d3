from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QSizePolicy, QWidget

from layout_demos.layouts.equal_width_hstack import EqualWidthHStack
from layout_demos.layouts.layout_host import CustomLayoutHost
from layout_demos.widgets.demo_page import CUSTOM_LAYOUTS_SESSION_URL, DemoPage

LABEL_STYLE = 'background-color: orange; border-radius: 5px; padding: 2px 4px;'


def create_orange_label(text: str, parent=None) -> QLabel:
    label = QLabel(text, parent)
    label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    label.setStyleSheet(LABEL_STYLE)
    # Let the label grow to whatever width the stack proposes
    label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
    return label


class EqualWidthDemo(DemoPage):
    title = 'Equal Width HStack'
    session_url = CUSTOM_LAYOUTS_SESSION_URL

    def __init__(self, parent=None):
        super().__init__(parent)
        self.add_link_action()

        self.stack_widget = QWidget(self)
        self.stack_layout = CustomLayoutHost(EqualWidthHStack(), self.stack_widget)
        for text in ('Short Text', 'Long.............. Text'):
            self.stack_layout.addWidget(create_orange_label(text))

        self.content_layout.addStretch(1)
        self.content_layout.addWidget(self.stack_widget, alignment=Qt.AlignmentFlag.AlignCenter)
        self.content_layout.addStretch(1)
