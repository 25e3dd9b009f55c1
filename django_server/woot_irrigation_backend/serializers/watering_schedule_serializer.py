from rest_framework import serializers

from woot_irrigation_backend.utils import WateringSchedule
from .garden_plant_serializer import PlantProfileSerializer


class WateringScheduleSerializer(serializers.Serializer):
    duration = serializers.FloatField(min_value=0)
    waterVolume = serializers.FloatField(source='water_volume', min_value=0)
    shouldWater = serializers.BooleanField(source='should_water')
    reasoning = serializers.CharField(trim_whitespace=False)
    waterSavings = serializers.IntegerField(source='water_savings', min_value=0, max_value=100)
    optimalTime = serializers.CharField(source='optimal_time')

    def create(self, validated_data) -> WateringSchedule:
        return WateringSchedule(**validated_data)


class WeatherSummarySerializer(serializers.Serializer):
    temp = serializers.FloatField(source='temperature')
    humidity = serializers.FloatField(source='relative_humidity')
    rain = serializers.FloatField(source='recent_rainfall')
    sunrise = serializers.ReadOnlyField()
    sunset = serializers.ReadOnlyField()


class CoordinatesSerializer(serializers.Serializer):
    lat = serializers.FloatField(min_value=-90, max_value=90)
    lon = serializers.FloatField(min_value=-180, max_value=180)
    plantId = serializers.UUIDField(required=False)


class WaterRecommendationSerializer(serializers.Serializer):
    recommendation = serializers.SerializerMethodField()
    reason = serializers.CharField(source='schedule.reasoning')
    duration = serializers.FloatField(source='schedule.duration')
    waterVolume = serializers.FloatField(source='schedule.water_volume')
    shouldWater = serializers.BooleanField(source='schedule.should_water')
    reasoning = serializers.CharField(source='schedule.reasoning')
    waterSavings = serializers.IntegerField(source='schedule.water_savings')
    optimalTime = serializers.CharField(source='schedule.optimal_time')
    plant = PlantProfileSerializer()
    weatherSummary = WeatherSummarySerializer(source='weather')

    def get_recommendation(self, obj) -> str:
        return 'WATER' if obj.schedule.should_water else 'SKIP'
