"""Hourly weather samples plotted by the interactive chart."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import yaml

WEATHER_PREVIEW_PATH = Path(__file__).resolve().parent.parent / 'resources' / 'weather_preview.yaml'


class Weather(Enum):
    SUNNY = 'sunny'
    RAINY = 'rainy'
    THUNDER = 'thunder'
    CLOUDY = 'cloudy'

    @property
    def glyph(self) -> str:
        """Text symbol used in chart annotations."""
        return {
            Weather.SUNNY: '☀',
            Weather.RAINY: '☔',
            Weather.THUNDER: '⚡',
            Weather.CLOUDY: '☁',
        }[self]


@dataclass(frozen=True)
class WeatherSample:
    temperature: int
    weather: Weather
    time: int


def _preview_records() -> list[tuple[int, str]]:
    # (temperature, weather) for hours 0..24
    return [
        (21, 'thunder'), (20, 'thunder'), (19, 'cloudy'), (19, 'cloudy'),
        (18, 'cloudy'), (19, 'thunder'), (19, 'cloudy'), (20, 'cloudy'),
        (21, 'sunny'), (23, 'sunny'), (25, 'sunny'), (26, 'sunny'),
        (27, 'sunny'), (28, 'sunny'), (29, 'sunny'), (29, 'sunny'),
        (30, 'sunny'), (29, 'sunny'), (28, 'sunny'), (27, 'sunny'),
        (26, 'sunny'), (25, 'sunny'), (24, 'cloudy'), (23, 'cloudy'),
        (23, 'cloudy'),
    ]


def builtin_preview_samples() -> list[WeatherSample]:
    return [WeatherSample(temperature=temperature, weather=Weather(weather), time=time)
            for time, (temperature, weather) in enumerate(_preview_records())]


def parse_samples(records: list) -> list[WeatherSample]:
    """
    Build samples from plain records and order them by time.

    Raises:
        ValueError: If records is not a list, or a record is missing a field
            or has an unknown weather
    """
    if not isinstance(records, list):
        raise ValueError(f'Expected a list of samples, got {type(records).__name__}')
    samples = []
    for position, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f'Record {position} is not a mapping')
        try:
            samples.append(WeatherSample(
                temperature=int(record['temperature']),
                weather=Weather(str(record['weather']).lower()),
                time=int(record['time']),
            ))
        except KeyError as e:
            raise ValueError(f'Record {position} is missing {e}') from e
        except (TypeError, ValueError) as e:
            raise ValueError(f'Record {position} is invalid: {e}') from e
    samples.sort(key=lambda sample: sample.time)
    return samples


def load_weather_samples(path: Path | None = None) -> list[WeatherSample]:
    """
    Load samples from a YAML file with a top-level ``samples`` list.

    Falls back to the built-in preview samples if the file cannot be used.
    """
    path = Path(path) if path else WEATHER_PREVIEW_PATH
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        if not data or not isinstance(data, dict) or not data.get('samples'):
            print(f"[DATA] No samples in {path.name}, using built-in preview data")
            return builtin_preview_samples()
        return parse_samples(data['samples'])
    except yaml.YAMLError as e:
        print(f"[DATA] YAML parse error in {path.name}: {e}")
    except FileNotFoundError:
        print(f"[DATA] Weather data file not found: {path}")
    except ValueError as e:
        print(f"[DATA] Invalid weather data in {path.name}: {e}")
    except OSError as e:
        print(f"[DATA] Could not read weather data {path}: {e}")
    except Exception as e:
        print(f"[DATA] Error loading weather data {path.name}: {e}")
    return builtin_preview_samples()
