from rest_framework import serializers

from woot_irrigation_backend.models import GardenPlant
from woot_irrigation_backend.utils import DroughtTolerance, SoilType


class GardenPlantSerializer(serializers.ModelSerializer):
    soilType = serializers.ChoiceField(choices=SoilType.as_choices(), required=False, allow_blank=True)
    droughtTolerance = serializers.ChoiceField(choices=DroughtTolerance.as_choices(), required=False, allow_blank=True)

    class Meta:
        model = GardenPlant
        read_only_fields = ('id', 'catalogId', 'addedAt')
        fields = ['id', 'catalogId', 'name', 'soilType', 'moistureRange', 'droughtTolerance', 'cropCoefficient',
                  'addedAt']

    def validate_cropCoefficient(self, value):
        if value <= 0:
            raise serializers.ValidationError("Crop coefficient must be greater than 0.")
        return value


class PlantProfileSerializer(serializers.Serializer):
    name = serializers.CharField()
    soilType = serializers.CharField(source='soil_type')
    moistureRange = serializers.CharField(source='moisture_range')
    droughtTolerance = serializers.CharField(source='drought_tolerance')
    cropCoefficient = serializers.FloatField(source='crop_coefficient')


class CatalogPlantSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField(source='profile.name')
    soilType = serializers.CharField(source='profile.soil_type')
    moistureRange = serializers.CharField(source='profile.moisture_range')
    droughtTolerance = serializers.CharField(source='profile.drought_tolerance')
    cropCoefficient = serializers.FloatField(source='profile.crop_coefficient')
