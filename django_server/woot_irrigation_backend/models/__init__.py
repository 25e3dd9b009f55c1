from .gardener import Gardener
from .garden_plant import GardenPlant
from .log_message import LogMessage
