from django.urls import path

from woot_irrigation_backend.views import (
    register_view,
    login_view,
    logout_view,
    GardenerView,
    GardenPlantView,
    delete_plant,
    get_plant_catalog,
    get_catalog_plant,
    get_water_recommendation_view,
    get_log_messages,
    get_api_test,
)

urlpatterns = [
    path('test', get_api_test, name='get_api_test'),

    path('register', register_view, name='register_view'),
    path('login', login_view, name='login_view'),
    path('logout', logout_view, name='logout_view'),

    path('plants', get_plant_catalog, name='get_plant_catalog'),
    path('plants/<str:catalog_id>', get_catalog_plant, name='get_catalog_plant'),

    path('users/<uuid:user_id>', GardenerView.as_view(), name='gardener_operations'),
    path('users/<uuid:user_id>/plants', GardenPlantView.as_view(), name='garden_plant_operations'),
    path('users/<uuid:user_id>/plants/<uuid:plant_id>', delete_plant, name='delete_plant'),
    path('users/<uuid:user_id>/water-recommendation', get_water_recommendation_view, name='get_water_recommendation'),

    path('log_messages/<uuid:resource_id>', get_log_messages, name='get_log_messages'),
]
