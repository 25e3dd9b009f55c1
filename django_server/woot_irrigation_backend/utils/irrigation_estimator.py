"""
Daily irrigation demand estimate.

    ET0  = K * (T + 10) * (100 / (100 - RH))        reference evapotranspiration
    ETc  = Kc * ET0                                  crop evapotranspiration
    Wnet = max(0, ETc - rainfall)                    net requirement, 1 mm over 1 m² = 1 L
    V    = Wnet * area                               liters for the whole garden
    t    = V / flow_rate                             minutes

Watering is only recommended when Wnet exceeds WATERING_THRESHOLD. Savings are reported against a traditional fixed
schedule of TRADITIONAL_WATERING_MINUTES per day at the same flow rate.

The formula is a simplified stand-in for the Hargreaves/Penman family and K has not been calibrated: under common
weather it yields an ETc well below the threshold, so "skip" is the usual outcome.

estimate() never raises. Degenerate inputs (humidity of 100 %, zero flow rate) produce inf/nan the way float
division does in IEEE arithmetic; call validate_estimator_inputs() at the boundary to reject them instead.
"""
import math
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Any, Optional

K_CONSTANT = 0.0023
WATERING_THRESHOLD = 0.5  # L/m²
TRADITIONAL_WATERING_MINUTES = 30
OPTIMAL_WATERING_TIME = '6:00 AM'


class IrrigationInputError(ValueError):
    pass


@dataclass(frozen=True)
class WeatherObservation:
    temperature: float  # °C
    relative_humidity: float  # %
    recent_rainfall: float  # mm
    sunrise: Optional[Any] = None
    sunset: Optional[Any] = None


@dataclass(frozen=True)
class PlantProfile:
    name: str
    soil_type: str
    moisture_range: str
    drought_tolerance: str
    crop_coefficient: float


@dataclass(frozen=True)
class IrrigationParameters:
    flow_rate: float  # L/min
    area_size: float  # m²


@dataclass(frozen=True)
class WateringSchedule:
    duration: float  # minutes
    water_volume: float  # liters
    should_water: bool
    reasoning: str
    water_savings: int  # percent
    optimal_time: str


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _round_half_up(value: float):
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def _non_finite_text(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    return 'Infinity' if value > 0 else '-Infinity'


def _to_fixed(value: float, digits: int) -> str:
    """
    Fixed-point text rounding half up on the exact binary value: 0.25 -> '0.3', 1.005 -> '1.00'.
    """
    if not math.isfinite(value):
        return _non_finite_text(value)
    # wide enough for every finite float
    context = Context(prec=400)
    return str(Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP, context=context))


def _format_number(value: float) -> str:
    """Integral floats are shown without a decimal point: 25.0 -> '25', 1.15 -> '1.15'."""
    if isinstance(value, float) and not math.isfinite(value):
        return _non_finite_text(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def reference_evapotranspiration(temperature: float, relative_humidity: float) -> float:
    temperature_factor = temperature + 10
    humidity_factor = _divide(100, 100 - relative_humidity)
    return K_CONSTANT * temperature_factor * humidity_factor


def crop_evapotranspiration(crop_coefficient: float, et0: float) -> float:
    return crop_coefficient * et0


def net_water_requirement(etc: float, rainfall: float) -> float:
    net = etc - rainfall
    if math.isnan(net):
        return net
    return max(0.0, net)


def should_water(net_requirement: float) -> bool:
    return net_requirement > WATERING_THRESHOLD


def water_savings(flow_rate: float, actual_water_used: float):
    traditional_water_used = flow_rate * TRADITIONAL_WATERING_MINUTES
    savings = _round_half_up(_divide(traditional_water_used - actual_water_used, traditional_water_used) * 100)
    if math.isnan(savings):
        return savings
    return max(0, savings)


def build_reasoning(weather: WeatherObservation, plant: PlantProfile, params: IrrigationParameters,
                    etc: float, net_requirement: float, water: bool) -> str:
    rainfall = _to_fixed(weather.recent_rainfall, 1)
    need = _to_fixed(etc, 2)
    if water:
        return (
            f"Based on current conditions ({_format_number(weather.temperature)}°C, "
            f"{_format_number(weather.relative_humidity)}% humidity) and {plant.name} water requirements "
            f"(crop coefficient: {_format_number(plant.crop_coefficient)}), your plants need {need} L/m² today. "
            f"With {rainfall}mm predicted rainfall, the net requirement is "
            f"{_to_fixed(net_requirement, 2)} L/m² for your {_format_number(params.area_size)}m² garden."
        )
    return (
        f"Great news! The predicted rainfall of {rainfall}mm will provide sufficient water for "
        f"your {plant.name} plants today. The calculated water need was {need} L/m², which will be met by "
        f"natural precipitation."
    )


def estimate(weather: WeatherObservation, plant: PlantProfile, params: IrrigationParameters) -> WateringSchedule:
    et0 = reference_evapotranspiration(weather.temperature, weather.relative_humidity)
    etc = crop_evapotranspiration(plant.crop_coefficient, et0)
    net_requirement = net_water_requirement(etc, weather.recent_rainfall)

    total_water_needed = net_requirement * params.area_size
    duration = _divide(total_water_needed, params.flow_rate)
    water = should_water(net_requirement)

    actual_water_used = total_water_needed if water else 0

    return WateringSchedule(
        duration=duration if water else 0.0,
        water_volume=total_water_needed if water else 0.0,
        should_water=water,
        reasoning=build_reasoning(weather, plant, params, etc, net_requirement, water),
        water_savings=water_savings(params.flow_rate, actual_water_used),
        optimal_time=OPTIMAL_WATERING_TIME,
    )


def validate_estimator_inputs(weather: WeatherObservation, params: IrrigationParameters) -> None:
    """
    Rejects inputs for which estimate() would divide by zero or produce meaningless figures.
    :raises IrrigationInputError: with a user facing message
    """
    values = {
        'temperature': weather.temperature,
        'humidity': weather.relative_humidity,
        'rainfall': weather.recent_rainfall,
        'flow rate': params.flow_rate,
        'area size': params.area_size,
    }
    for name, value in values.items():
        if value is None or not math.isfinite(value):
            raise IrrigationInputError(f"The {name} must be a finite number.")

    if weather.relative_humidity >= 100:
        raise IrrigationInputError("Relative humidity must be below 100%.")
    if weather.relative_humidity < 0:
        raise IrrigationInputError("Relative humidity must not be negative.")
    if weather.recent_rainfall < 0:
        raise IrrigationInputError("Rainfall must not be negative.")
    if params.flow_rate <= 0:
        raise IrrigationInputError("Flow rate must be greater than 0.")
    if params.area_size <= 0:
        raise IrrigationInputError("Area size must be greater than 0.")
