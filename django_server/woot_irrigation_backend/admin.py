from django.contrib import admin

from woot_irrigation_backend.models import Gardener, GardenPlant, LogMessage

admin.site.register(Gardener)
admin.site.register(GardenPlant)
admin.site.register(LogMessage)
