from dataclasses import dataclass

from woot_irrigation_backend.exceptions import InvalidInputException
from woot_irrigation_backend.utils import WeatherObservation, PlantProfile, WateringSchedule, IrrigationParameters, \
    IrrigationInputError, estimate, validate_estimator_inputs, get_logger
from .gardener_services import get_gardener_by_id
from .garden_plant_services import get_active_plant
from .weather_services import fetch_current_weather

logger = get_logger()


@dataclass(frozen=True)
class WaterRecommendation:
    schedule: WateringSchedule
    weather: WeatherObservation
    plant: PlantProfile


def check_irrigation_parameters(params: IrrigationParameters):
    if params.flow_rate <= 0 or params.area_size <= 0:
        raise InvalidInputException(
            "Irrigation parameters are not configured. Please enter a valid flow rate and area size in the settings."
        )


def get_water_recommendation(gardener_id, latitude: float, longitude: float, plant_id=None) -> WaterRecommendation:
    """
    Computes today's watering recommendation for a gardener at the given coordinates.
    Inputs are validated before the estimator is called; weather errors propagate to the caller.
    """
    gardener = get_gardener_by_id(gardener_id)
    plant = get_active_plant(gardener_id, plant_id).as_profile()
    params = gardener.irrigation_parameters()
    check_irrigation_parameters(params)

    weather = fetch_current_weather(latitude, longitude)

    try:
        validate_estimator_inputs(weather, params)
    except IrrigationInputError as e:
        logger.warning(f"Cannot estimate irrigation demand: {e}", extra={'resource_id': gardener.id})
        raise InvalidInputException(str(e))

    schedule = estimate(weather, plant, params)
    logger.info(
        f"Recommendation for '{plant.name}': {'WATER' if schedule.should_water else 'SKIP'} "
        f"({schedule.duration:.2f} min, {schedule.water_volume:.2f} L)",
        extra={'resource_id': gardener.id}
    )
    return WaterRecommendation(schedule=schedule, weather=weather, plant=plant)
