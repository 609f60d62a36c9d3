"""Weather chart that shows details for the hour under the pointer."""

from PySide6.QtCore import QPointF, QRectF, Qt, Signal
from PySide6.QtGui import (QBrush, QColor, QFont, QLinearGradient, QMouseEvent, QPainter,
                           QPainterPath, QPen)
from PySide6.QtWidgets import QSizePolicy, QWidget

from layout_demos.charts.chart_interaction import (TIME_DOMAIN, Y_AXIS_STRIDE, ChartSelection,
                                                   annotation_on_trailing_side,
                                                   calculate_y_axis_domain)
from layout_demos.models.weather_data import WeatherSample
from layout_demos.utils.trace import log_flow

X_AXIS_STRIDE = 4
HINT_TEXT = 'Hover or press to get detail weather of specific time'


def catmull_rom_path(points: list[QPointF]) -> QPainterPath:
    """Smooth path through all points (Catmull-Rom converted to cubic Beziers)."""
    path = QPainterPath()
    if not points:
        return path
    path.moveTo(points[0])
    for i in range(len(points) - 1):
        p0 = points[i - 1] if i > 0 else points[i]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[i + 2] if i + 2 < len(points) else p2
        control1 = p1 + (p2 - p0) * (1 / 6)
        control2 = p2 - (p3 - p1) * (1 / 6)
        path.cubicTo(control1, control2, p2)
    return path


class InteractiveWeatherChart(QWidget):
    """
    A chart that can be interacted with by hovering or by pressing and
    dragging, like the charts in a weather app.
    """

    selection_changed = Signal(object)  # Selected hour or None

    def __init__(self, samples: list[WeatherSample], current_time: int = 10, parent=None):
        super().__init__(parent)
        self.samples = list(samples)
        self._samples_by_time = {sample.time: sample for sample in self.samples}
        self.current_time = current_time
        self.selection = ChartSelection()
        self.y_domain = calculate_y_axis_domain(self.samples)
        self.plot_margins = (40, 12, 12, 28)  # left, top, right, bottom

        self.setMouseTracking(True)
        self.setMinimumSize(320, 220)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    # Coordinate mapping

    def plot_area(self) -> QRectF:
        left, top, right, bottom = self.plot_margins
        return QRectF(self.rect()).adjusted(left, top, -right, -bottom)

    def value_at_x(self, x: float) -> float | None:
        """Convert an x position relative to the plot area into an hour."""
        width = self.plot_area().width()
        if width <= 0:
            return None
        start, end = TIME_DOMAIN
        return start + x / width * (end - start)

    def x_for_time(self, time: float) -> float:
        plot = self.plot_area()
        start, end = TIME_DOMAIN
        return plot.left() + (time - start) / (end - start) * plot.width()

    def y_for_temperature(self, temperature: float) -> float:
        plot = self.plot_area()
        lower, upper = self.y_domain
        if upper == lower:
            return plot.bottom()
        return plot.bottom() - (temperature - lower) / (upper - lower) * plot.height()

    # Pointer events

    def _apply_selection_change(self, previous: int | None):
        if self.selection.selected_time != previous:
            log_flow('CHART', f'Selected time {previous} -> {self.selection.selected_time}')
            self.selection_changed.emit(self.selection.selected_time)
            self.update()

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            previous = self.selection.selected_time
            self.selection.handle_drag_changed(
                event.position(), self.plot_area().topLeft(), self.value_at_x)
            self._apply_selection_change(previous)
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent):
        previous = self.selection.selected_time
        if event.buttons() & Qt.MouseButton.LeftButton:
            self.selection.handle_drag_changed(
                event.position(), self.plot_area().topLeft(), self.value_at_x)
        else:
            self.selection.handle_hover(
                event.position(), self.plot_area().topLeft(), self.value_at_x)
        self._apply_selection_change(previous)
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() == Qt.MouseButton.LeftButton:
            previous = self.selection.selected_time
            self.selection.handle_drag_ended()
            self._apply_selection_change(previous)
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event):
        previous = self.selection.selected_time
        self.selection.handle_hover_ended()
        self._apply_selection_change(previous)
        super().leaveEvent(event)

    # Painting

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        plot = self.plot_area()

        self._draw_axes(painter, plot)
        self._draw_current_time(painter, plot)
        self._draw_series(painter, plot)

        selected_time = self.selection.visible_time()
        if selected_time is not None and selected_time in self._samples_by_time:
            self._draw_selection(painter, plot, self._samples_by_time[selected_time])
        elif self.selection.selected_time is None:
            painter.setPen(self.palette().text().color())
            font = QFont(self.font())
            font.setWeight(QFont.Weight.Medium)
            painter.setFont(font)
            painter.drawText(QRectF(plot.left() + 12, plot.top() + 12, 140, 80),
                             Qt.TextFlag.TextWordWrap, HINT_TEXT)
        painter.end()

    def _draw_axes(self, painter: QPainter, plot: QRectF):
        grid_pen = QPen(self.palette().mid().color(), 1, Qt.PenStyle.DotLine)
        text_color = self.palette().text().color()

        lower, upper = self.y_domain
        for temperature in range(lower, upper + 1, Y_AXIS_STRIDE):
            y = self.y_for_temperature(temperature)
            painter.setPen(grid_pen)
            painter.drawLine(QPointF(plot.left(), y), QPointF(plot.right(), y))
            painter.setPen(text_color)
            painter.drawText(QRectF(0, y - 8, plot.left() - 6, 16),
                             Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter,
                             str(temperature))

        start, end = TIME_DOMAIN
        for time in range(start, end + 1, X_AXIS_STRIDE):
            x = self.x_for_time(time)
            painter.setPen(grid_pen)
            painter.drawLine(QPointF(x, plot.top()), QPointF(x, plot.bottom()))
            painter.setPen(text_color)
            painter.drawText(QRectF(x - 16, plot.bottom() + 4, 32, 20),
                             Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
                             str(time))

    def _draw_current_time(self, painter: QPainter, plot: QRectF):
        if self.current_time <= 0:
            return
        x = self.x_for_time(self.current_time)
        # Fade out the passed time
        painter.fillRect(QRectF(plot.left(), plot.top(), x - plot.left(), plot.height()),
                         QColor(0, 0, 0, 51))
        rule_color = QColor(self.palette().text().color())
        rule_color.setAlphaF(0.7)
        painter.setPen(QPen(rule_color, 1))
        painter.drawLine(QPointF(x, plot.top()), QPointF(x, plot.bottom()))

    def _draw_series(self, painter: QPainter, plot: QRectF):
        if not self.samples:
            return
        points = [QPointF(self.x_for_time(sample.time), self.y_for_temperature(sample.temperature))
                  for sample in self.samples]

        gradient = QLinearGradient(0, plot.bottom(), 0, plot.top())
        gradient.setColorAt(0.0, QColor('teal'))
        gradient.setColorAt(1.0, QColor('yellow'))

        line = catmull_rom_path(points)
        area = QPainterPath(line)
        baseline = self.y_for_temperature(self.y_domain[0])
        area.lineTo(points[-1].x(), baseline)
        area.lineTo(points[0].x(), baseline)
        area.closeSubpath()

        painter.save()
        painter.setOpacity(0.4)
        painter.fillPath(area, QBrush(gradient))
        painter.restore()

        pen = QPen(QBrush(gradient), 5)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(line)

    def _draw_selection(self, painter: QPainter, plot: QRectF, sample: WeatherSample):
        x = self.x_for_time(sample.time)
        y = self.y_for_temperature(sample.temperature)
        secondary = QColor(self.palette().text().color())
        secondary.setAlphaF(0.6)

        painter.setPen(QPen(secondary, 1))
        painter.drawLine(QPointF(x, plot.top()), QPointF(x, plot.bottom()))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(secondary)
        painter.drawEllipse(QPointF(x, y), 8, 8)

        font = QFont(self.font())
        font.setPointSizeF(font.pointSizeF() * 1.8)
        font.setWeight(QFont.Weight.Medium)
        painter.setFont(font)
        painter.setPen(self.palette().text().color())
        text = f'{sample.weather.glyph} {sample.temperature}°'
        width = painter.fontMetrics().horizontalAdvance(text) + 24
        height = painter.fontMetrics().height() + 16
        if annotation_on_trailing_side(sample.time):
            label_rect = QRectF(x + 4, plot.top(), width, height)
            alignment = Qt.AlignmentFlag.AlignLeft
        else:
            label_rect = QRectF(x - 4 - width, plot.top(), width, height)
            alignment = Qt.AlignmentFlag.AlignRight
        painter.drawText(label_rect.adjusted(12, 8, -12, -8),
                         alignment | Qt.AlignmentFlag.AlignVCenter, text)
