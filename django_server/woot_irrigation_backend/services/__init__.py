from .gardener_services import register_gardener, authenticate_gardener, is_own_profile, get_gardener_by_id, \
    update_gardener
from .garden_plant_services import get_catalog_entries, get_catalog_entry, add_plant, get_plants, remove_plant, \
    get_active_plant
from .weather_services import fetch_current_weather, get_weather_provider
from .water_recommendation_services import get_water_recommendation, WaterRecommendation
from .log_message_services import write_log_message, get_log_messages_by_amount
from .onboarding_flow import Screen, OnboardingEvent, OnboardingState, InvalidTransition, transition, next_screen
