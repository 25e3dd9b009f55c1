from rest_framework import serializers

from woot_irrigation_backend.models import Gardener
from woot_irrigation_backend.utils import SoilType
from .garden_plant_serializer import GardenPlantSerializer


class GardenerSerializer(serializers.ModelSerializer):
    soilType = serializers.ChoiceField(choices=SoilType.as_choices(), required=False, allow_blank=True)
    plants = GardenPlantSerializer(many=True, read_only=True)

    class Meta:
        model = Gardener
        read_only_fields = ('id', 'createdAt')
        fields = ('id', 'name', 'email', 'location', 'soilType', 'flowRate', 'areaSize', 'plants', 'createdAt')

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Please enter your name.")
        return value.strip()

    def validate_flowRate(self, value):
        if value <= 0:
            raise serializers.ValidationError("Please enter a valid flow rate.")
        return value

    def validate_areaSize(self, value):
        if value <= 0:
            raise serializers.ValidationError("Please enter a valid area size.")
        return value

    def update(self, instance, validated_data):
        if 'email' in validated_data:
            validated_data['username'] = validated_data['email']
        return super().update(instance, validated_data)
