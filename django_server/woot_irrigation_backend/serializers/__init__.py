from .garden_plant_serializer import GardenPlantSerializer, PlantProfileSerializer, CatalogPlantSerializer
from .gardener_serializer import GardenerSerializer
from .watering_schedule_serializer import WateringScheduleSerializer, WeatherSummarySerializer, \
    CoordinatesSerializer, WaterRecommendationSerializer
from .log_message_serializer import LogMessageSerializer
