from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    path('', include('Referentiel.urls')),
    path('', include('Contribuable.urls')),
    path('', include('Parcelle.urls')),
    path('', include('authentification.urls')),
]
