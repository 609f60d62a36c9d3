"""Pure logic behind the interactive weather chart.

Maps pointer positions inside the plot area to an hour of the day and
derives the Y axis range the chart is drawn with.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable

from PySide6.QtCore import QPointF

from layout_demos.models.weather_data import WeatherSample

# Hours covered by the sample set
TIME_DOMAIN = (0, 24)
# Y axis ticks are drawn every 6 degrees
Y_AXIS_STRIDE = 6
# Range used when there are no samples
DEFAULT_TEMPERATURE_RANGE = (0, 35)

ValueAtX = Callable[[float], 'float | None']


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer; .5 goes away from zero (10.5 -> 11, -2.5 -> -3)."""
    magnitude = abs(value)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return int(math.copysign(rounded, value))


def _truncated_remainder(value: int, divisor: int) -> int:
    # Remainder keeps the sign of the dividend (-5 rem 6 == -5)
    return int(math.fmod(value, divisor))


def _truncated_divide(value: int, divisor: int) -> int:
    return int(value / divisor)


def calculate_y_axis_domain(samples: Iterable[WeatherSample]) -> tuple[int, int]:
    """
    Calculate the Y axis domain so that the plot is padded and both ends
    land on an axis tick.

    Args:
        samples: Weather samples to fit

    Returns:
        (lower, upper) temperature bounds
    """
    temperatures = [sample.temperature for sample in samples]
    min_temperature = min(temperatures, default=DEFAULT_TEMPERATURE_RANGE[0])
    max_temperature = max(temperatures, default=DEFAULT_TEMPERATURE_RANGE[1])
    interval = max_temperature - min_temperature

    # Pad the plot
    lower = min_temperature - _truncated_divide(interval, 2)
    upper = max_temperature + _truncated_divide(interval, 4)

    # Align to 6N to fit with the axis
    lower -= _truncated_remainder(lower, Y_AXIS_STRIDE)
    upper += Y_AXIS_STRIDE - _truncated_remainder(upper, Y_AXIS_STRIDE)
    return lower, upper


def annotation_on_trailing_side(selected_time: int) -> bool:
    """Annotations for the first half of the day sit right of the rule."""
    return selected_time <= (TIME_DOMAIN[0] + TIME_DOMAIN[1]) // 2


class ChartSelection:
    """Tracks the hour selected by hovering or dragging over the plot."""

    def __init__(self):
        self.selected_time: int | None = None
        self.is_pressing = False

    def _select_at(self, point: QPointF, plot_origin: QPointF, value_at_x: ValueAtX) -> bool:
        current_x = point.x() - plot_origin.x()
        value = value_at_x(current_x)
        if value is None:
            return False
        self.selected_time = round_half_away_from_zero(value)
        return True

    def handle_hover(self, point: QPointF, plot_origin: QPointF, value_at_x: ValueAtX) -> bool:
        """Hover moved inside the chart. Ignored while a drag is running."""
        if self.is_pressing:
            return False
        return self._select_at(point, plot_origin, value_at_x)

    def handle_drag_changed(self, point: QPointF, plot_origin: QPointF,
                            value_at_x: ValueAtX) -> bool:
        self.is_pressing = True
        return self._select_at(point, plot_origin, value_at_x)

    def handle_hover_ended(self):
        self.selected_time = None

    def handle_drag_ended(self):
        self.selected_time = None
        self.is_pressing = False

    def visible_time(self, domain: tuple[int, int] = TIME_DOMAIN) -> int | None:
        """Selected hour if it can be shown, otherwise None."""
        if self.selected_time is None:
            return None
        if domain[0] <= self.selected_time <= domain[1]:
            return self.selected_time
        return None
