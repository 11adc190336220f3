# synchro_terrain/tasks.py
import logging

from celery import shared_task

from .services import exporter_contribuables, exporter_parcelles, synchroniser_referentiels

logger = logging.getLogger(__name__)


@shared_task
def export_contribuables_task(chunk_size=None):
    res = exporter_contribuables(chunk_size)
    if not res.success:
        logger.warning(f"Export contribuables incomplet: {res.error}")
    return res.as_dict()


@shared_task
def export_parcelles_task(chunk_size=None):
    res = exporter_parcelles(chunk_size)
    if not res.success:
        logger.warning(f"Export parcelles incomplet: {res.error}")
    return res.as_dict()


@shared_task
def sync_referentiels_task():
    res = synchroniser_referentiels()
    return {"success": res.success, "message": res.message, "counts": res.counts}
