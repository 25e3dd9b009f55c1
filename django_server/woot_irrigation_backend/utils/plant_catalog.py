from types import MappingProxyType
from typing import NamedTuple, Optional

from woot_irrigation_backend.utils.enum_util import ListableEnum
from woot_irrigation_backend.utils.irrigation_estimator import PlantProfile


class DroughtTolerance(ListableEnum):
    Low = 'Low'
    Medium = 'Medium'
    High = 'High'


class SoilType(ListableEnum):
    Sandy = 'Sandy'
    Clay = 'Clay'
    Loamy = 'Loamy'
    SandyLoam = 'Sandy Loam'
    Silty = 'Silty'
    Peaty = 'Peaty'


class CatalogEntry(NamedTuple):
    id: str
    profile: PlantProfile


PLANT_CATALOG = MappingProxyType({
    '1': PlantProfile('Tomato', SoilType.Loamy.value, '60-80%', DroughtTolerance.Low.value, 1.15),
    '2': PlantProfile('Basil', SoilType.Loamy.value, '50-70%', DroughtTolerance.Low.value, 0.95),
    '3': PlantProfile('Rose', SoilType.Loamy.value, '40-60%', DroughtTolerance.Medium.value, 0.85),
    '4': PlantProfile('Lettuce', SoilType.SandyLoam.value, '60-75%', DroughtTolerance.Low.value, 1.0),
    '5': PlantProfile('Cucumber', SoilType.Loamy.value, '65-80%', DroughtTolerance.Low.value, 1.05),
    '6': PlantProfile('Pepper', SoilType.SandyLoam.value, '50-70%', DroughtTolerance.Medium.value, 1.0),
    '7': PlantProfile('Lavender', SoilType.Sandy.value, '30-50%', DroughtTolerance.High.value, 0.65),
    '8': PlantProfile('Strawberry', SoilType.Loamy.value, '55-70%', DroughtTolerance.Low.value, 0.85),
    '9': PlantProfile('Carrot', SoilType.SandyLoam.value, '50-65%', DroughtTolerance.Medium.value, 0.95),
    '10': PlantProfile('Succulent', SoilType.Sandy.value, '20-40%', DroughtTolerance.High.value, 0.35),
})


def get_catalog_plant(catalog_id: str) -> Optional[PlantProfile]:
    return PLANT_CATALOG.get(str(catalog_id))


def list_catalog_plants() -> list[CatalogEntry]:
    return [
        CatalogEntry(catalog_id, profile)
        for catalog_id, profile in sorted(PLANT_CATALOG.items(), key=lambda item: int(item[0]))
    ]
