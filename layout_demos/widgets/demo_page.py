"""Common frame for the demo pages: a toolbar above the demo content."""

from PySide6.QtCore import QUrl
from PySide6.QtGui import QAction, QDesktopServices
from PySide6.QtWidgets import QLabel, QToolBar, QVBoxLayout, QWidget

from layout_demos.utils.icons import link_icon

CUSTOM_LAYOUTS_SESSION_URL = 'https://developer.apple.com/videos/play/wwdc2022/10056/'
SWIFT_CHARTS_SESSION_URL = 'https://developer.apple.com/videos/play/wwdc2022/10137/'


class DemoPage(QWidget):
    """Page with a title, a toolbar and a content area filled by subclasses."""

    title = 'Demo'
    session_url: str | None = None

    def __init__(self, parent=None):
        super().__init__(parent)
        self.toolbar = QToolBar(self)
        self.toolbar.setMovable(False)
        title_label = QLabel(f'<b>{self.title}</b>')
        title_label.setContentsMargins(6, 0, 12, 0)
        self.toolbar.addWidget(title_label)

        self.content_layout = QVBoxLayout()
        self.content_layout.setContentsMargins(16, 16, 16, 16)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self.toolbar)
        layout.addLayout(self.content_layout, stretch=1)

    def add_link_action(self):
        """Append a toolbar button that opens the related session video."""
        if not self.session_url:
            return None
        action = QAction(link_icon(), 'Open session video', self)
        action.triggered.connect(
            lambda: QDesktopServices.openUrl(QUrl(self.session_url)))
        self.toolbar.addAction(action)
        return action
