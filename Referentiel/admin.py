from django.contrib import admin
from .models import RefCommune, RefQuartier, RefAvenue, RefZoneType, RefTypeActivite


@admin.register(RefCommune, RefQuartier, RefAvenue, RefZoneType, RefTypeActivite)
class RefAdmin(admin.ModelAdmin):
    list_display = ("id", "libelle")
    search_fields = ("libelle",)
    ordering = ("id",)
