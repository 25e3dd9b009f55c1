import requests
from django.conf import settings

from woot_irrigation_backend.exceptions import InvalidCoordinatesException, WeatherProviderUnavailableException, \
    WeatherProviderNotConfiguredException
from woot_irrigation_backend.utils import WeatherObservation, get_logger

logger = get_logger()


class WeatherProvider:
    provider_id: str = None

    def build_request(self, latitude: float, longitude: float) -> tuple[str, dict]:
        raise NotImplementedError

    def parse(self, raw: dict) -> WeatherObservation:
        raise NotImplementedError

    def fetch(self, latitude: float, longitude: float) -> WeatherObservation:
        """
        One request, no retry. Any failure aborts the recommendation.
        """
        url, params = self.build_request(latitude, longitude)
        try:
            response = requests.get(url, params=params, timeout=settings.WEATHER_REQUEST_TIMEOUT)
        except requests.exceptions.RequestException as e:
            logger.error(f"Weather fetch from {self.provider_id} failed: {e}")
            raise WeatherProviderUnavailableException(f"Failed to fetch weather: {e}")

        if response.status_code == 400:
            logger.warning(f"{self.provider_id} rejected the coordinates: {response.text}")
            raise InvalidCoordinatesException(f"Invalid coordinates: lat={latitude} lon={longitude}")

        if not response.ok:
            logger.error(f"Weather fetch from {self.provider_id} failed. HTTP {response.status_code}: {response.text}")
            raise WeatherProviderUnavailableException(f"Failed to fetch weather. HTTP {response.status_code}")

        try:
            return self.parse(response.json())
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Unexpected weather payload from {self.provider_id}: {e}")
            raise WeatherProviderUnavailableException("Failed to fetch weather: unexpected response.")


class OpenWeatherMapProvider(WeatherProvider):
    provider_id = 'openweathermap'

    def build_request(self, latitude, longitude):
        api_key = settings.OPENWEATHER_API_KEY
        if not api_key:
            raise WeatherProviderNotConfiguredException("OpenWeather API key not configured")
        return settings.OPENWEATHER_URL, {
            'lat': latitude,
            'lon': longitude,
            'units': 'metric',
            'appid': api_key,
        }

    def parse(self, raw):
        main = raw['main']
        rain = raw.get('rain') or {}
        sun = raw.get('sys') or {}
        return WeatherObservation(
            temperature=float(main['temp']),
            relative_humidity=float(main['humidity']),
            recent_rainfall=float(rain.get('1h', 0)),
            sunrise=sun.get('sunrise'),
            sunset=sun.get('sunset'),
        )


class OpenMeteoProvider(WeatherProvider):
    provider_id = 'open-meteo'

    def build_request(self, latitude, longitude):
        return settings.OPEN_METEO_URL, {
            'latitude': latitude,
            'longitude': longitude,
            'current': 'temperature_2m,relative_humidity_2m,rain',
            'daily': 'sunrise,sunset',
            'timezone': 'auto',
            'forecast_days': 1,
        }

    def parse(self, raw):
        current = raw['current']
        daily = raw.get('daily') or {}
        sunrise = daily.get('sunrise') or [None]
        sunset = daily.get('sunset') or [None]
        return WeatherObservation(
            temperature=float(current['temperature_2m']),
            relative_humidity=float(current['relative_humidity_2m']),
            recent_rainfall=float(current.get('rain') or 0),
            sunrise=sunrise[0],
            sunset=sunset[0],
        )


WEATHER_PROVIDERS = {
    provider.provider_id: provider for provider in (OpenWeatherMapProvider, OpenMeteoProvider)
}


def get_weather_provider(provider_id: str = None) -> WeatherProvider:
    provider_id = provider_id or settings.WEATHER_PROVIDER
    if provider_id not in WEATHER_PROVIDERS:
        raise WeatherProviderNotConfiguredException(f"Unknown weather provider '{provider_id}'.")
    return WEATHER_PROVIDERS[provider_id]()


def fetch_current_weather(latitude: float, longitude: float) -> WeatherObservation:
    provider = get_weather_provider()
    logger.debug(f"Fetching current weather from {provider.provider_id}.")
    return provider.fetch(latitude, longitude)
