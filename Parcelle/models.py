from django.db import models
from Referentiel.models import RefCommune, RefQuartier, RefAvenue


class Parcelle(models.Model):
    id = models.AutoField(primary_key=True)
    code_parcelle = models.CharField(max_length=100, null=True, blank=True)
    reference_cadastrale = models.CharField(max_length=100, null=True, blank=True)
    commune = models.ForeignKey(RefCommune, on_delete=models.PROTECT, null=True, blank=True, related_name="parcelles")
    quartier = models.ForeignKey(RefQuartier, on_delete=models.PROTECT, null=True, blank=True, related_name="parcelles")
    rue_avenue = models.ForeignKey(RefAvenue, on_delete=models.PROTECT, null=True, blank=True, related_name="parcelles")
    numero_adresse = models.CharField(max_length=50, null=True, blank=True)
    rue = models.CharField(max_length=255, null=True, blank=True)
    numero_parcelle = models.CharField(max_length=100, null=True, blank=True)
    superficie_m2 = models.FloatField(null=True, blank=True)
    gps_lat = models.FloatField(null=True, blank=True)
    gps_lon = models.FloatField(null=True, blank=True)
    statut_parcelle = models.CharField(max_length=50, null=False, blank=False)
    date_creation = models.DateTimeField(null=True, blank=True)
    date_mise_a_jour = models.DateTimeField(null=True, blank=True)
    source_donnee = models.CharField(max_length=100, null=True, blank=True)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "parcelles"
        ordering = ["id"]
        verbose_name = "Parcelle"
        verbose_name_plural = "Parcelles"

    def __str__(self):
        return self.code_parcelle or self.numero_parcelle or f"Parcelle {self.pk}"


class Batiment(models.Model):
    id = models.AutoField(primary_key=True)
    parcelle = models.ForeignKey(Parcelle, on_delete=models.CASCADE, related_name="batiments")
    type_batiment = models.CharField(max_length=50, null=False, blank=False)
    nombre_etages = models.IntegerField(null=True, blank=True)
    annee_construction = models.IntegerField(null=True, blank=True)
    surface_batie_m2 = models.FloatField(null=True, blank=True)
    usage_principal = models.CharField(max_length=50, null=False, blank=False)
    statut_batiment = models.CharField(max_length=50, null=False, blank=False)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "batiments"
        verbose_name = "Bâtiment"
        verbose_name_plural = "Bâtiments"

    def __str__(self):
        return f"{self.type_batiment} - {self.parcelle}"


class Personne(models.Model):
    id = models.AutoField(primary_key=True)
    parcelle = models.ForeignKey(Parcelle, on_delete=models.CASCADE, related_name="personnes")
    type_personne = models.CharField(max_length=50, null=False, blank=False)
    nom_raison_sociale = models.CharField(max_length=255, null=True, blank=True)
    nif = models.CharField(max_length=100, null=True, blank=True)
    contact = models.CharField(max_length=100, null=True, blank=True)
    adresse_postale = models.CharField(max_length=255, null=True, blank=True)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "personnes"
        verbose_name = "Personne"
        verbose_name_plural = "Personnes"

    def __str__(self):
        return self.nom_raison_sociale or self.type_personne
