from .custom_exceptions import NotFoundException, InvalidInputException, InvalidCoordinatesException, \
    WeatherProviderUnavailableException, WeatherProviderNotConfiguredException
