from pathlib import Path

from layout_demos.models.weather_data import load_weather_samples
from layout_demos.utils.settings import get_setting
from layout_demos.widgets.demo_page import SWIFT_CHARTS_SESSION_URL, DemoPage
from layout_demos.widgets.interactive_weather_chart import InteractiveWeatherChart


class InteractiveChartDemo(DemoPage):
    title = 'Interactive Chart'
    session_url = SWIFT_CHARTS_SESSION_URL

    def __init__(self, parent=None):
        super().__init__(parent)
        self.add_link_action()

        data_path = get_setting('weather_data_path', str)
        samples = load_weather_samples(Path(data_path) if data_path else None)
        self.chart = InteractiveWeatherChart(
            samples, current_time=get_setting('chart_current_time', int), parent=self)
        self.content_layout.addWidget(self.chart)
