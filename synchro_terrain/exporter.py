# synchro_terrain/exporter.py
import logging
from dataclasses import dataclass
from typing import Optional

from django.conf import settings

from .datasources import ContribuableLocalDatasource, ParcelleLocalDatasource
from .encoder import encode_contribuables, encode_parcelles
from .transfer import TransferClient, TransferError

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    success: bool
    synced_count: int = 0
    failed_count: int = 0
    error: Optional[str] = None
    retryable: bool = False

    def as_dict(self):
        return {
            "success": self.success,
            "synced": self.synced_count,
            "failed": self.failed_count,
            "error": self.error,
            "retryable": self.retryable,
        }


class Exporter:
    """
    Vide une table locale vers le serveur central, page par page.

    Une page acceptée (HTTP 200) est supprimée du poste (ou marquée
    synchronisée si purge=False) et la page suivante est envoyée.
    Tout autre statut, ou une TransferError, marque la page en échec et
    arrête l'export : les pages suivantes attendent le prochain passage.
    """
    datasource_class = None
    endpoint = None
    libelle = "fiches"

    def __init__(self, client: TransferClient = None, datasource=None, purge: bool = True):
        self.client = client or TransferClient()
        self.datasource = datasource or self.datasource_class()
        self.purge = purge

    def _decouper(self, page):
        return page

    def _envoyer(self, page):
        raise NotImplementedError

    def export_all(self, chunk_size: int = None) -> ExportResult:
        chunk_size = chunk_size or settings.RECENSEMENT_EXPORT_CHUNK_SIZE
        if chunk_size < 1:
            raise ValueError("chunk_size doit être >= 1")

        synced, numero = 0, 0
        while True:
            page = self.datasource.fetch_unsynced(chunk_size)
            if not page:
                break
            page = self._decouper(page)
            numero += 1
            ids = [f.pk for f in page]

            try:
                r = self._envoyer(page)
            except TransferError as e:
                self.datasource.mark_failed(ids, str(e))
                logger.error(f"Export {self.libelle} page {numero}: {len(ids)} en échec ({e})")
                return ExportResult(False, synced, len(ids), str(e), retryable=True)
            except Exception as e:
                # erreur locale (encodage, lecture) : la page passe en échec, l'export s'arrête
                erreur = f"Erreur locale: {e}"
                self.datasource.mark_failed(ids, erreur)
                logger.exception(f"Export {self.libelle} page {numero}: {len(ids)} en échec")
                return ExportResult(False, synced, len(ids), erreur, retryable=False)

            if r.status_code != 200:
                erreur = f"HTTP {r.status_code}: {r.text[:500]}"
                self.datasource.mark_failed(ids, erreur)
                logger.error(f"Export {self.libelle} page {numero}: {len(ids)} rejeté(s) ({erreur})")
                return ExportResult(False, synced, len(ids), erreur, retryable=False)

            if self.purge:
                self.datasource.delete_exported(page)
            else:
                self.datasource.mark_synced(ids)
            synced += len(ids)
            logger.info(f"Export {self.libelle} page {numero}: {len(ids)} envoyé(s) ({synced} au total)")

        if numero:
            logger.info(f"Export {self.libelle} terminé: {synced} synchronisé(s) en {numero} page(s)")
        return ExportResult(True, synced, 0, None)


class ContribuableExporter(Exporter):
    datasource_class = ContribuableLocalDatasource
    endpoint = "contribuables/batch"
    libelle = "contribuables"

    def _decouper(self, page):
        # un lot = un seul auteur (partie `creePar`) ; la suite part au tour suivant
        auteur = page[0].cree_par
        meme_auteur = []
        for f in page:
            if f.cree_par != auteur:
                break
            meme_auteur.append(f)
        return meme_auteur

    def _envoyer(self, page):
        envelope = encode_contribuables(
            [f.to_dto() for f in page],
            [f.pieces_identite or [] for f in page],
            cree_par=page[0].cree_par,
        )
        return self.client.post_multipart(self.endpoint, envelope.as_multipart())


class ParcelleExporter(Exporter):
    datasource_class = ParcelleLocalDatasource
    endpoint = "parcelles/batch"
    libelle = "parcelles"

    def _envoyer(self, page):
        return self.client.post_json(self.endpoint, encode_parcelles([p.to_dto() for p in page]))
