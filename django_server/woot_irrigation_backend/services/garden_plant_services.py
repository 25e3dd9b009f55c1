from django.db.models import QuerySet

from woot_irrigation_backend.exceptions import NotFoundException, InvalidInputException
from woot_irrigation_backend.models import GardenPlant
from woot_irrigation_backend.serializers import GardenPlantSerializer
from woot_irrigation_backend.utils import get_logger, get_catalog_plant, list_catalog_plants, CatalogEntry
from .gardener_services import get_gardener_by_id

logger = get_logger()


def get_catalog_entries() -> list[CatalogEntry]:
    return list_catalog_plants()


def get_catalog_entry(catalog_id: str) -> CatalogEntry:
    profile = get_catalog_plant(catalog_id)
    if profile is None:
        raise NotFoundException(f'Plant with id: {catalog_id} is not in the catalog.')
    return CatalogEntry(str(catalog_id), profile)


def add_plant(gardener_id, data) -> GardenPlant:
    """
    Appends a plant to the gardener's plant list.
    Either {"catalogId": "<id>"} selects a catalog plant by value, or the full plant properties are given.
    """
    gardener = get_gardener_by_id(gardener_id)

    catalog_id = data.get('catalogId')
    if catalog_id not in (None, ''):
        profile = get_catalog_entry(catalog_id).profile
        plant_data = {
            'name': profile.name,
            'soilType': profile.soil_type,
            'moistureRange': profile.moisture_range,
            'droughtTolerance': profile.drought_tolerance,
            'cropCoefficient': profile.crop_coefficient,
        }
    else:
        plant_data = data

    serializer = GardenPlantSerializer(data=plant_data)
    serializer.is_valid(raise_exception=True)
    plant = serializer.save(gardener=gardener, catalogId=str(catalog_id) if catalog_id not in (None, '') else None)

    logger.info(f"Plant '{plant.name}' added for gardener '{gardener.name}'.", extra={'resource_id': gardener.id})
    return plant


def get_plants(gardener_id) -> QuerySet[GardenPlant]:
    return GardenPlant.objects.filter(gardener_id=gardener_id).order_by('addedAt')


def remove_plant(gardener_id, plant_id):
    plant = GardenPlant.objects.filter(gardener_id=gardener_id, id=plant_id).first()
    if plant is None:
        raise NotFoundException(f'Plant with id: {plant_id} was not found.')
    plant.delete()
    logger.info(f"Plant '{plant.name}' removed.", extra={'resource_id': gardener_id})


def get_active_plant(gardener_id, plant_id=None) -> GardenPlant:
    """
    The plant a recommendation is computed for: the requested one, otherwise the most recently added.
    """
    plants = get_plants(gardener_id)
    if plant_id is not None:
        plant = plants.filter(id=plant_id).first()
        if plant is None:
            raise NotFoundException(f'Plant with id: {plant_id} was not found.')
        return plant

    plant = plants.last()
    if plant is None:
        raise InvalidInputException("No plant selected. Please add a plant first.")
    return plant
