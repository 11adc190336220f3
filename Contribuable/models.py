from django.db import models
from Referentiel.models import RefTypeActivite, RefZoneType, RefAvenue, RefQuartier, RefCommune


class Contribuable(models.Model):
    id = models.AutoField(primary_key=True)
    nif = models.CharField(max_length=100, null=True, blank=True)
    type_nif = models.CharField(max_length=50, null=True, blank=True)
    type_contribuable = models.CharField(max_length=50, null=False, blank=False)
    nom = models.CharField(max_length=255, null=True, blank=True)
    post_nom = models.CharField(max_length=255, null=True, blank=True)
    prenom = models.CharField(max_length=255, null=True, blank=True)
    raison_sociale = models.CharField(max_length=255, null=True, blank=True)
    telephone1 = models.CharField(max_length=50, null=False, blank=False)
    telephone2 = models.CharField(max_length=50, null=True, blank=True)
    email = models.CharField(max_length=255, null=True, blank=True)
    rue = models.CharField(max_length=255, null=True, blank=True)
    numero_parcelle = models.CharField(max_length=100, null=True, blank=True)
    origine_fiche = models.CharField(max_length=50, null=False, blank=False)
    statut = models.IntegerField(null=True, blank=True)
    gps_latitude = models.FloatField(null=True, blank=True)
    gps_longitude = models.FloatField(null=True, blank=True)
    piece_identite_url = models.TextField(null=True, blank=True)
    date_inscription = models.DateTimeField(null=True, blank=True)
    date_maj = models.DateTimeField(null=True, blank=True)
    forme_juridique = models.CharField(max_length=50, null=True, blank=True)
    numero_rccm = models.CharField(max_length=100, null=True, blank=True)

    # Références (clé brute, pas de lecture préalable de la table)
    ref_type_activite = models.ForeignKey(RefTypeActivite, on_delete=models.PROTECT, null=True, blank=True, related_name="contribuables")
    ref_zone_type = models.ForeignKey(RefZoneType, on_delete=models.PROTECT, null=True, blank=True, related_name="contribuables")
    ref_avenue = models.ForeignKey(RefAvenue, on_delete=models.PROTECT, null=True, blank=True, related_name="contribuables")
    ref_quartier = models.ForeignKey(RefQuartier, on_delete=models.PROTECT, null=True, blank=True, related_name="contribuables")
    ref_commune = models.ForeignKey(RefCommune, on_delete=models.PROTECT, null=True, blank=True, related_name="contribuables")

    # Horodatage serveur
    created_at = models.DateTimeField(null=True, blank=True)
    cree_par = models.CharField(max_length=150, null=False, blank=False)
    maj_par = models.CharField(max_length=150, null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "contribuables"
        ordering = ["id"]
        verbose_name = "Contribuable"
        verbose_name_plural = "Contribuables"

    def __str__(self):
        nom = self.raison_sociale or " ".join(x for x in (self.nom, self.post_nom, self.prenom) if x)
        return f"{nom or 'Contribuable'} ({self.telephone1})"


class Document(models.Model):
    """Pièce jointe stockée dans le répertoire d'upload ; appartient à un seul contribuable."""
    id = models.AutoField(primary_key=True)
    contribuable = models.ForeignKey(Contribuable, on_delete=models.CASCADE, related_name="documents")
    url = models.TextField(null=True, blank=True)

    class Meta:
        db_table = "document"
        verbose_name = "Document"
        verbose_name_plural = "Documents"

    def __str__(self):
        return self.url or f"Document {self.pk}"
