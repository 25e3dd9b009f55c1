import uuid

from django.db import models
from django.utils import timezone

from woot_irrigation_backend.utils import PlantProfile
from .gardener import Gardener


class GardenPlant(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    gardener = models.ForeignKey(Gardener, related_name='plants', on_delete=models.CASCADE)
    catalogId = models.CharField(max_length=16, blank=True, null=True)
    name = models.CharField(max_length=256)
    soilType = models.CharField(max_length=32, blank=True, default='')
    moistureRange = models.CharField(max_length=32, blank=True, default='')
    droughtTolerance = models.CharField(max_length=16, blank=True, default='')
    cropCoefficient = models.FloatField()
    addedAt = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['addedAt']

    def as_profile(self) -> PlantProfile:
        return PlantProfile(
            name=self.name,
            soil_type=self.soilType,
            moisture_range=self.moistureRange,
            drought_tolerance=self.droughtTolerance,
            crop_coefficient=self.cropCoefficient,
        )

    def __str__(self):
        return f"{self.gardener.email}: {self.name} (Kc {self.cropCoefficient})"
