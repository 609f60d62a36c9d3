from PySide6.QtCore import QSettings, Signal

# Defaults for settings that are accessed from multiple places.
DEFAULT_SETTINGS = {
    'font_size': 13,
    'selected_demo': 'waterfall',
    'waterfall_columns': 3,
    # Gap between columns in pixels
    'waterfall_spacing': 0,
    'waterfall_item_count': 100,
    'chart_current_time': 10,
    'weather_data_path': '',  # Empty = bundled resources/weather_preview.yaml
    'minimal_trace_logs': True,  # Only WARNING traces when enabled
}


class Settings(QSettings):
    # Signal that shows that the setting with the given string was changes
    change = Signal(str, object, name='settingsChanged')

    def __init__(self):
        super().__init__('layout-demos', 'layout-demos')

    def setValue(self, key, value):
        super().setValue(key, value)
        self.change.emit(key, value)

# Common shared instance to ensure the Signal is also shared
settings = Settings()


def get_setting(key: str, type=None):
    """Read a setting, falling back to its entry in DEFAULT_SETTINGS."""
    default = DEFAULT_SETTINGS.get(key)
    if type is None and default is not None:
        type = default.__class__
    if type is None:
        return settings.value(key, defaultValue=default)
    return settings.value(key, defaultValue=default, type=type)


def set_setting(key: str, value):
    settings.setValue(key, value)
