from PySide6.QtCore import QRect, QRectF, Qt
from PySide6.QtGui import QColor, QIcon, QPainter, QPainterPath, QPen, QPixmap


def create_link_icon(color: QColor) -> QPixmap:
    """Create a QPixmap with two interlocked chain links."""
    try:
        pixmap = QPixmap(32, 32)
        if pixmap.isNull():
            return QPixmap()

        pixmap.fill(QColor('transparent'))

        painter = QPainter(pixmap)
        if not painter.isActive():
            return pixmap

        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(QPen(color, 3))
        painter.setBrush(Qt.BrushStyle.NoBrush)

        # Two rounded links rotated by 45 degrees around the center
        painter.translate(16, 16)
        painter.rotate(-45)
        painter.drawRoundedRect(QRectF(-13, -5, 15, 10), 5, 5)
        painter.drawRoundedRect(QRectF(-2, -5, 15, 10), 5, 5)
        painter.end()

        return pixmap
    except Exception:
        return QPixmap()


def create_app_icon() -> QPixmap:
    """Create the window icon: three columns of uneven tiles."""
    try:
        pixmap = QPixmap(32, 32)
        if pixmap.isNull():
            return QPixmap()

        pixmap.fill(QColor('transparent'))

        painter = QPainter(pixmap)
        if not painter.isActive():
            return pixmap

        painter.setPen(QPen(QColor(255, 140, 0), 2))
        for rect in (QRect(2, 2, 8, 12), QRect(2, 16, 8, 14),
                     QRect(12, 2, 8, 20), QRect(12, 24, 8, 6),
                     QRect(22, 2, 8, 8), QRect(22, 12, 8, 18)):
            painter.drawRect(rect)
        painter.end()

        return pixmap
    except Exception:
        return QPixmap()


def link_icon() -> QIcon:
    return QIcon(create_link_icon(QColor(255, 140, 0)))


def app_icon() -> QIcon:
    return QIcon(create_app_icon())
