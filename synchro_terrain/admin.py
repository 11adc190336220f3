from django.contrib import admin, messages

from .auth_client import AuthenticationError
from .models import ContribuableLocal, ParcelleLocal, BatimentLocal, PersonneLocal
from .services import exporter_contribuables, exporter_parcelles


def _rapporter(modeladmin, request, res):
    if res.success:
        modeladmin.message_user(request, f"Export terminé : {res.synced_count} fiche(s) envoyée(s).", messages.SUCCESS)
    else:
        modeladmin.message_user(
            request,
            f"Export interrompu après {res.synced_count} fiche(s) : {res.failed_count} en échec ({res.error}).",
            messages.ERROR,
        )


class SyncAdminMixin:
    list_filter = ("sync_status",)
    readonly_fields = ("sync_status", "sync_error", "sync_attempts", "last_sync_at", "created_at", "updated_at")
    actions = ["exporter_maintenant"]
    exporter = None

    @admin.action(description="Exporter maintenant toutes les fiches en attente")
    def exporter_maintenant(self, request, queryset):
        try:
            res = self.exporter()
        except AuthenticationError as e:
            self.message_user(request, f"Connexion au serveur central impossible : {e}", messages.ERROR)
            return
        _rapporter(self, request, res)


@admin.register(ContribuableLocal)
class ContribuableLocalAdmin(SyncAdminMixin, admin.ModelAdmin):
    list_display = ("id", "type_contribuable", "nom", "raison_sociale", "telephone1",
                    "sync_status", "sync_attempts", "last_sync_at", "created_at")
    search_fields = ("nom", "prenom", "raison_sociale", "telephone1", "nif")
    exporter = staticmethod(exporter_contribuables)


class BatimentLocalInline(admin.TabularInline):
    model = BatimentLocal
    extra = 0


class PersonneLocalInline(admin.StackedInline):
    model = PersonneLocal
    extra = 0


@admin.register(ParcelleLocal)
class ParcelleLocalAdmin(SyncAdminMixin, admin.ModelAdmin):
    list_display = ("id", "code_parcelle", "numero_parcelle", "statut_parcelle",
                    "sync_status", "sync_attempts", "last_sync_at", "created_at")
    search_fields = ("code_parcelle", "numero_parcelle", "reference_cadastrale")
    inlines = [BatimentLocalInline, PersonneLocalInline]
    exporter = staticmethod(exporter_parcelles)
