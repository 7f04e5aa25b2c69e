# client_tracker/urls.py
from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path('admin/', admin.site.urls),
    # Tutaj podpinamy nasze aplikacje:
    path('auth/', include('apps.core.urls')),
    path('goals/', include('apps.goals.urls')),
    path('clients/', include('apps.clients.urls')),
    path('stats/', include('apps.stats.urls')),
]
