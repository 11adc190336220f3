from django.contrib import admin
from .models import Contribuable, Document


class DocumentInline(admin.TabularInline):
    model = Document
    extra = 0
    readonly_fields = ("url",)


@admin.register(Contribuable)
class ContribuableAdmin(admin.ModelAdmin):
    list_display = ("id", "type_contribuable", "nom", "raison_sociale", "telephone1",
                    "origine_fiche", "ref_commune", "cree_par", "created_at")
    search_fields = ("nif", "nom", "post_nom", "prenom", "raison_sociale", "telephone1")
    list_filter = ("type_contribuable", "origine_fiche", "ref_commune")
    inlines = [DocumentInline]
