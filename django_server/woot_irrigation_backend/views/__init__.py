from .auth_views import register_view, login_view, logout_view
from .gardener_views import GardenerView
from .garden_plant_views import GardenPlantView, delete_plant, get_plant_catalog, get_catalog_plant
from .water_recommendation_views import get_water_recommendation_view
from .log_views import get_log_messages
from .utility_views import get_root, get_api_test
