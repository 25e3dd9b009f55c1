from django.contrib import admin
from django.urls import path, include

from woot_irrigation_backend.views import get_root

urlpatterns = [
    path('', get_root, name='get_root'),
    path('admin/', admin.site.urls),
    path('api/', include('woot_irrigation_backend.urls')),
]
