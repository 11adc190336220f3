# Referentiel/models.py
from django.db import models


class RefBase(models.Model):
    """Ligne de table de référence : identifiant + libellé."""
    id = models.AutoField(primary_key=True)
    libelle = models.CharField(max_length=255, null=False, blank=False)

    class Meta:
        abstract = True
        ordering = ("id",)

    def __str__(self):
        return self.libelle


class RefCommune(RefBase):
    class Meta(RefBase.Meta):
        db_table = "ref_commune"
        verbose_name = "Commune"
        verbose_name_plural = "Communes"


class RefQuartier(RefBase):
    class Meta(RefBase.Meta):
        db_table = "ref_quartier"
        verbose_name = "Quartier"
        verbose_name_plural = "Quartiers"


class RefAvenue(RefBase):
    class Meta(RefBase.Meta):
        db_table = "ref_avenue"
        verbose_name = "Avenue"
        verbose_name_plural = "Avenues"


class RefZoneType(RefBase):
    class Meta(RefBase.Meta):
        db_table = "ref_zone_type"
        verbose_name = "Type de zone"
        verbose_name_plural = "Types de zone"


class RefTypeActivite(RefBase):
    class Meta(RefBase.Meta):
        db_table = "ref_type_activite"
        verbose_name = "Type d'activité"
        verbose_name_plural = "Types d'activité"


# clé du payload /reftypes/all -> modèle
REFERENTIELS = {
    "zoneTypes": RefZoneType,
    "avenues": RefAvenue,
    "quartiers": RefQuartier,
    "communes": RefCommune,
    "typeActivites": RefTypeActivite,
}
