from django.contrib import admin
from .models import Parcelle, Batiment, Personne


class BatimentInline(admin.TabularInline):
    model = Batiment
    extra = 0


class PersonneInline(admin.TabularInline):
    model = Personne
    extra = 0


@admin.register(Parcelle)
class ParcelleAdmin(admin.ModelAdmin):
    list_display = ("id", "code_parcelle", "reference_cadastrale", "commune", "quartier",
                    "statut_parcelle", "created_at")
    search_fields = ("code_parcelle", "reference_cadastrale", "numero_parcelle")
    list_filter = ("statut_parcelle", "commune")
    inlines = [BatimentInline, PersonneInline]
