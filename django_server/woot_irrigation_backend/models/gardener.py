import uuid

from django.db import models
from django.contrib.auth.models import AbstractUser

from woot_irrigation_backend.utils import IrrigationParameters


class Gardener(AbstractUser):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=256)
    email = models.EmailField(unique=True)
    location = models.CharField(max_length=256, blank=True, default='')
    soilType = models.CharField(max_length=32, blank=True, default='')
    flowRate = models.FloatField(default=0)
    areaSize = models.FloatField(default=0)
    createdAt = models.DateTimeField(auto_now_add=True)
    updatedAt = models.DateTimeField(auto_now=True)

    def irrigation_parameters(self) -> IrrigationParameters:
        return IrrigationParameters(flow_rate=self.flowRate, area_size=self.areaSize)

    def __str__(self):
        return f"{self.email} {self.name} - {self.location}"
