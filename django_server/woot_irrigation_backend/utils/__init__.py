from .enum_util import ListableEnum
from .logging_utils import get_logger
from .irrigation_estimator import WeatherObservation, PlantProfile, IrrigationParameters, WateringSchedule, \
    IrrigationInputError, estimate, validate_estimator_inputs
from .plant_catalog import PLANT_CATALOG, CatalogEntry, DroughtTolerance, SoilType, get_catalog_plant, \
    list_catalog_plants
