# synchro_terrain/datasources.py
import logging
import os

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from .models import FicheSynchronisable, ContribuableLocal, ParcelleLocal

logger = logging.getLogger(__name__)


class LocalDatasource:
    """Accès aux fiches non synchronisées d'une table du poste."""
    model = None

    def _non_synchronisees(self):
        return self.model.objects.exclude(sync_status=FicheSynchronisable.SYNCHRONISE)

    def fetch_unsynced(self, limit: int = 20) -> list:
        # les fiches en échec restent éligibles : elles repartent au prochain export
        return list(self._non_synchronisees().order_by("created_at", "id")[:limit])

    def count_unsynced(self) -> int:
        return self._non_synchronisees().count()

    def mark_synced(self, ids) -> int:
        if not ids:
            return 0
        return self.model.objects.filter(pk__in=ids).update(
            sync_status=FicheSynchronisable.SYNCHRONISE,
            sync_error=None,
            last_sync_at=timezone.now(),
        )

    def mark_failed(self, ids, error: str) -> int:
        if not ids:
            return 0
        return self.model.objects.filter(pk__in=ids).update(
            sync_status=FicheSynchronisable.ECHEC,
            sync_error=error,
            sync_attempts=F("sync_attempts") + 1,
            last_sync_at=timezone.now(),
        )

    def delete_exported(self, fiches) -> int:
        ids = [f.pk for f in fiches if f.pk is not None]
        if not ids:
            return 0
        deleted, _ = self.model.objects.filter(pk__in=ids).delete()
        return deleted


class ContribuableLocalDatasource(LocalDatasource):
    model = ContribuableLocal

    def delete_exported(self, fiches) -> int:
        """Supprime les fiches exportées puis leurs photos sur le poste."""
        photos = [p for f in fiches for p in (f.pieces_identite or [])]
        with transaction.atomic():
            deleted = super().delete_exported(fiches)
        for chemin in photos:
            try:
                os.remove(chemin)
            except FileNotFoundError:
                pass
            except OSError as e:
                logger.warning(f"Photo {chemin} non supprimée: {e}")
        return deleted


class ParcelleLocalDatasource(LocalDatasource):
    model = ParcelleLocal

    def fetch_unsynced(self, limit: int = 20) -> list:
        return list(
            self._non_synchronisees()
            .select_related("personne")
            .prefetch_related("batiments")
            .order_by("created_at", "id")[:limit]
        )
