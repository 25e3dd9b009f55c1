import math

import pytest

from woot_irrigation_backend.utils import WeatherObservation, PlantProfile, IrrigationParameters, estimate, \
    validate_estimator_inputs, IrrigationInputError
from woot_irrigation_backend.utils.irrigation_estimator import reference_evapotranspiration, \
    crop_evapotranspiration, net_water_requirement, should_water, water_savings, WATERING_THRESHOLD, _to_fixed

LETTUCE = PlantProfile('Lettuce', 'Sandy Loam', '60-75%', 'Low', 1.0)
TOMATO = PlantProfile('Tomato', 'Loamy', '60-80%', 'Low', 1.15)
GARDEN = IrrigationParameters(flow_rate=5, area_size=10)


def test_mild_weather_skips_watering():
    schedule = estimate(WeatherObservation(25, 50, 0), LETTUCE, GARDEN)

    assert schedule.should_water is False
    assert schedule.duration == 0
    assert schedule.water_volume == 0
    assert schedule.water_savings == 100
    assert schedule.optimal_time == '6:00 AM'


def test_mild_weather_reasoning():
    schedule = estimate(WeatherObservation(25, 50, 0), LETTUCE, GARDEN)

    assert schedule.reasoning == (
        "Great news! The predicted rainfall of 0.0mm will provide sufficient water for your Lettuce plants today. "
        "The calculated water need was 0.16 L/m², which will be met by natural precipitation."
    )


def test_warm_dry_weather_still_skips_tomato():
    et0 = reference_evapotranspiration(30, 40)
    assert et0 == pytest.approx(0.0023 * 40 * (100 / 60))
    assert crop_evapotranspiration(1.15, et0) == pytest.approx(0.1763, abs=1e-4)

    schedule = estimate(WeatherObservation(30, 40, 0), TOMATO, GARDEN)
    assert schedule.should_water is False


def test_hot_humid_weather_waters():
    schedule = estimate(WeatherObservation(30, 95, 0), LETTUCE, GARDEN)

    assert schedule.should_water is True
    assert schedule.duration == pytest.approx(3.68)
    assert schedule.water_volume == pytest.approx(18.4)
    assert schedule.water_savings == 88
    assert schedule.optimal_time == '6:00 AM'


def test_watering_reasoning():
    schedule = estimate(WeatherObservation(30, 95, 0), LETTUCE, GARDEN)

    assert schedule.reasoning == (
        "Based on current conditions (30°C, 95% humidity) and Lettuce water requirements (crop coefficient: 1), "
        "your plants need 1.84 L/m² today. With 0.0mm predicted rainfall, the net requirement is 1.84 L/m² "
        "for your 10m² garden."
    )


def test_reasoning_keeps_fractional_values():
    schedule = estimate(WeatherObservation(30.5, 95, 0.3), TOMATO, IrrigationParameters(5, 12.5))

    assert "(30.5°C, 95% humidity)" in schedule.reasoning
    assert "(crop coefficient: 1.15)" in schedule.reasoning
    assert "With 0.3mm predicted rainfall" in schedule.reasoning
    assert "for your 12.5m² garden." in schedule.reasoning


def test_volume_is_duration_times_flow_rate():
    params = IrrigationParameters(flow_rate=3.5, area_size=27)
    schedule = estimate(WeatherObservation(33, 95, 1.2), TOMATO, params)

    assert schedule.should_water is True
    assert schedule.water_volume == pytest.approx(schedule.duration * params.flow_rate)


def test_area_does_not_change_the_decision():
    weather = WeatherObservation(28, 90, 0.4)
    decisions = {estimate(weather, LETTUCE, IrrigationParameters(5, area)).should_water for area in (1, 10, 500)}

    assert len(decisions) == 1


def test_rain_covers_the_demand():
    schedule = estimate(WeatherObservation(30, 95, 5), LETTUCE, GARDEN)

    assert schedule.should_water is False
    assert schedule.duration == 0
    assert schedule.water_volume == 0
    assert "The predicted rainfall of 5.0mm" in schedule.reasoning


def test_net_requirement_is_never_negative():
    assert net_water_requirement(0.2, 10) == 0
    assert net_water_requirement(2.0, 0.5) == pytest.approx(1.5)


def test_threshold_is_exclusive():
    assert should_water(WATERING_THRESHOLD) is False
    assert should_water(WATERING_THRESHOLD + 1e-9) is True

    etc = crop_evapotranspiration(1.0, reference_evapotranspiration(30, 95))
    at_threshold = estimate(WeatherObservation(30, 95, etc - 0.5), LETTUCE, GARDEN)
    above_threshold = estimate(WeatherObservation(30, 95, etc - 0.51), LETTUCE, GARDEN)

    assert at_threshold.should_water is False
    assert above_threshold.should_water is True


@pytest.mark.parametrize("lower, higher", [(10, 20), (20, 35), (-5, 0)])
def test_et0_grows_with_temperature(lower, higher):
    assert reference_evapotranspiration(lower, 60) < reference_evapotranspiration(higher, 60)


@pytest.mark.parametrize("lower, higher", [(0, 30), (30, 80), (80, 99)])
def test_et0_grows_with_humidity(lower, higher):
    assert reference_evapotranspiration(25, lower) < reference_evapotranspiration(25, higher)


def never_increases(values):
    return all(later <= earlier for earlier, later in zip(values, values[1:]))


def test_more_rain_never_increases_the_need():
    needs = [net_water_requirement(1.84, rain) for rain in (0, 0.5, 1, 2, 10)]

    assert never_increases(needs)


def test_more_rain_never_increases_duration_or_volume():
    schedules = [estimate(WeatherObservation(30, 95, rain), LETTUCE, GARDEN)
                 for rain in (0, 0.25, 0.5, 1, 1.25, 1.34, 1.5, 2, 10)]

    assert schedules[0].should_water is True
    assert schedules[-1].should_water is False
    assert never_increases([schedule.duration for schedule in schedules])
    assert never_increases([schedule.water_volume for schedule in schedules])


def test_savings_are_clamped_at_zero():
    schedule = estimate(WeatherObservation(30, 95, 0), LETTUCE, IrrigationParameters(flow_rate=5, area_size=100))

    assert schedule.water_volume == pytest.approx(184)
    assert schedule.water_savings == 0


def test_savings_round_half_up():
    # 15 / 120 * 100 = 12.5
    assert water_savings(4, 105) == 13
    assert water_savings(4, 45) == 63
    assert water_savings(5, 0) == 100


@pytest.mark.parametrize("temperature, humidity, rain, area", [
    (30, 95, 0, 10),
    (45, 10, 0, 10),
    (35, 97, 0.3, 60),
    (0, 0, 20, 1),
])
def test_savings_stay_in_range(temperature, humidity, rain, area):
    schedule = estimate(WeatherObservation(temperature, humidity, rain), TOMATO, IrrigationParameters(5, area))

    assert 0 <= schedule.water_savings <= 100


def test_full_humidity_does_not_raise():
    schedule = estimate(WeatherObservation(25, 100, 0), LETTUCE, GARDEN)

    assert schedule.should_water is True
    assert math.isinf(schedule.duration)
    assert math.isinf(schedule.water_volume)
    assert schedule.water_savings == 0


def test_zero_flow_rate_does_not_raise():
    schedule = estimate(WeatherObservation(30, 95, 0), LETTUCE, IrrigationParameters(flow_rate=0, area_size=10))

    assert schedule.should_water is True
    assert math.isinf(schedule.duration)
    assert schedule.water_volume == pytest.approx(18.4)


def test_validation_accepts_regular_inputs():
    validate_estimator_inputs(WeatherObservation(25, 50, 0), GARDEN)


@pytest.mark.parametrize("weather, params, message", [
    (WeatherObservation(25, 100, 0), GARDEN, "Relative humidity must be below 100%."),
    (WeatherObservation(25, -1, 0), GARDEN, "Relative humidity must not be negative."),
    (WeatherObservation(25, 50, -0.1), GARDEN, "Rainfall must not be negative."),
    (WeatherObservation(25, 50, 0), IrrigationParameters(0, 10), "Flow rate must be greater than 0."),
    (WeatherObservation(25, 50, 0), IrrigationParameters(5, 0), "Area size must be greater than 0."),
    (WeatherObservation(math.nan, 50, 0), GARDEN, "The temperature must be a finite number."),
    (WeatherObservation(25, 50, 0), IrrigationParameters(math.inf, 10), "The flow rate must be a finite number."),
])
def test_validation_rejects_degenerate_inputs(weather, params, message):
    with pytest.raises(IrrigationInputError) as exc_info:
        validate_estimator_inputs(weather, params)

    assert str(exc_info.value) == message


def test_higher_crop_coefficient_needs_more_water():
    weather = WeatherObservation(30, 95, 0.5)
    schedules = [estimate(weather, PlantProfile('Plant', 'Loamy', '', 'Low', kc), GARDEN)
                 for kc in (0.35, 0.65, 1.0, 1.15)]
    durations = [schedule.duration for schedule in schedules]
    volumes = [schedule.water_volume for schedule in schedules]

    assert durations == sorted(durations)
    assert volumes == sorted(volumes)


def test_quarter_millimetre_rain_rounds_half_up():
    skip = estimate(WeatherObservation(25, 50, 0.25), LETTUCE, GARDEN)
    water = estimate(WeatherObservation(30, 95, 0.25), LETTUCE, GARDEN)

    assert "The predicted rainfall of 0.3mm" in skip.reasoning
    assert "With 0.3mm predicted rainfall, the net requirement is 1.59 L/m²" in water.reasoning


@pytest.mark.parametrize("value, digits, text", [
    (0.25, 1, '0.3'),
    (1.25, 1, '1.3'),
    (0.125, 2, '0.13'),
    (1.005, 2, '1.00'),
    (0, 1, '0.0'),
    (1.84, 2, '1.84'),
    (math.inf, 2, 'Infinity'),
    (-math.inf, 2, '-Infinity'),
    (math.nan, 1, 'NaN'),
])
def test_to_fixed(value, digits, text):
    assert _to_fixed(value, digits) == text


def test_non_finite_figures_in_reasoning():
    schedule = estimate(WeatherObservation(25, 100, 0), LETTUCE, GARDEN)

    assert "your plants need Infinity L/m² today" in schedule.reasoning
    assert "the net requirement is Infinity L/m²" in schedule.reasoning
