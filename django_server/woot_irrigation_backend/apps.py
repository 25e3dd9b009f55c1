from django.apps import AppConfig

from woot_irrigation_backend.utils import get_logger


class WootIrrigationBackendConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'woot_irrigation_backend'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.log = get_logger()

    def ready(self):
        """
        Check that the configured weather provider is known before serving requests.
        """
        from django.conf import settings
        from woot_irrigation_backend.services.weather_services import WEATHER_PROVIDERS

        if settings.WEATHER_PROVIDER not in WEATHER_PROVIDERS:
            self.log.error(f"Unknown weather provider '{settings.WEATHER_PROVIDER}', "
                           f"available: {', '.join(WEATHER_PROVIDERS)}")
        elif settings.WEATHER_PROVIDER == 'openweathermap' and not settings.OPENWEATHER_API_KEY:
            self.log.warning("OPENWEATHER_API_KEY is not set, water recommendations will fail.")
