# synchro_terrain/models.py
# Fiches saisies hors-ligne sur le poste, en attente d'export vers le serveur central.
from django.db import models
from django.utils import timezone


class FicheSynchronisable(models.Model):
    EN_ATTENTE, SYNCHRONISE, ECHEC = 0, 1, 2
    SYNC_STATUS_CHOICES = [(EN_ATTENTE, "En attente"), (SYNCHRONISE, "Synchronisé"), (ECHEC, "Échec")]

    sync_status = models.PositiveSmallIntegerField(choices=SYNC_STATUS_CHOICES, default=EN_ATTENTE, db_index=True)
    sync_error = models.TextField(null=True, blank=True)
    sync_attempts = models.PositiveIntegerField(default=0)
    last_sync_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ("created_at", "id")


def _sans_vides(dto: dict) -> dict:
    return {k: v for k, v in dto.items() if v is not None}


class ContribuableLocal(FicheSynchronisable):
    nif = models.CharField(max_length=100, null=True, blank=True)
    type_nif = models.CharField(max_length=50, null=True, blank=True)
    type_contribuable = models.CharField(max_length=50)
    nom = models.CharField(max_length=255, null=True, blank=True)
    post_nom = models.CharField(max_length=255, null=True, blank=True)
    prenom = models.CharField(max_length=255, null=True, blank=True)
    raison_sociale = models.CharField(max_length=255, null=True, blank=True)
    telephone1 = models.CharField(max_length=50)
    telephone2 = models.CharField(max_length=50, null=True, blank=True)
    email = models.CharField(max_length=255, null=True, blank=True)
    rue = models.CharField(max_length=255, null=True, blank=True)
    numero_parcelle = models.CharField(max_length=100, null=True, blank=True)
    origine_fiche = models.CharField(max_length=50)
    statut = models.IntegerField(null=True, blank=True)
    gps_latitude = models.FloatField(null=True, blank=True)
    gps_longitude = models.FloatField(null=True, blank=True)
    pieces_identite = models.JSONField(default=list, blank=True)  # chemins locaux des photos
    date_inscription = models.DateTimeField(null=True, blank=True)
    date_maj = models.DateTimeField(null=True, blank=True)
    forme_juridique = models.CharField(max_length=50, null=True, blank=True)
    numero_rccm = models.CharField(max_length=100, null=True, blank=True)
    cree_par = models.CharField(max_length=150, default="mobile")

    # ids des tables de référence locales (remplacées en bloc à chaque synchro)
    activite_id = models.IntegerField(null=True, blank=True)
    zone_id = models.IntegerField(null=True, blank=True)
    avenue_id = models.IntegerField(null=True, blank=True)
    quartier_id = models.IntegerField(null=True, blank=True)
    commune_id = models.IntegerField(null=True, blank=True)

    class Meta(FicheSynchronisable.Meta):
        verbose_name = "Contribuable (poste)"
        verbose_name_plural = "Contribuables (poste)"

    def __str__(self):
        return f"{self.nom or self.raison_sociale or 'Contribuable'} ({self.telephone1})"

    def to_dto(self) -> dict:
        dto = {
            "typeContribuable": self.type_contribuable,
            "telephone1": self.telephone1,
            "origineFiche": self.origine_fiche,
        }
        dto.update(_sans_vides({
            "nif": self.nif,
            "typeNif": self.type_nif,
            "nom": self.nom,
            "postNom": self.post_nom,
            "prenom": self.prenom,
            "raisonSociale": self.raison_sociale,
            "telephone2": self.telephone2,
            "email": self.email,
            "rue": self.rue,
            "numeroParcelle": self.numero_parcelle,
            "statut": self.statut,
            "gpsLatitude": self.gps_latitude,
            "gpsLongitude": self.gps_longitude,
            "dateInscription": self.date_inscription,
            "dateMaj": self.date_maj,
            "formeJuridique": self.forme_juridique,
            "numeroRccm": self.numero_rccm,
            "refTypeActivite": self.activite_id,
            "refZoneType": self.zone_id,
            "refAvenue": self.avenue_id,
            "refQuartier": self.quartier_id,
            "refCommune": self.commune_id,
        }))
        return dto


class ParcelleLocal(FicheSynchronisable):
    STATUT_CHOICES = [
        ("active", "Active"),
        ("fusionnée", "Fusionnée"),
        ("subdivisée", "Subdivisée"),
        ("archivée", "Archivée"),
    ]

    code_parcelle = models.CharField(max_length=100, null=True, blank=True)
    reference_cadastrale = models.CharField(max_length=100, null=True, blank=True)
    numero_adresse = models.CharField(max_length=50, null=True, blank=True)
    rue = models.CharField(max_length=255, null=True, blank=True)
    numero_parcelle = models.CharField(max_length=100, null=True, blank=True)
    superficie_m2 = models.FloatField(null=True, blank=True)
    gps_lat = models.FloatField(null=True, blank=True)
    gps_lon = models.FloatField(null=True, blank=True)
    statut_parcelle = models.CharField(max_length=50, choices=STATUT_CHOICES, default="active")
    source_donnee = models.CharField(max_length=100, null=True, blank=True)
    commune_id = models.IntegerField(null=True, blank=True)
    quartier_id = models.IntegerField(null=True, blank=True)
    avenue_id = models.IntegerField(null=True, blank=True)

    class Meta(FicheSynchronisable.Meta):
        verbose_name = "Parcelle (poste)"
        verbose_name_plural = "Parcelles (poste)"

    def __str__(self):
        return self.code_parcelle or self.numero_parcelle or f"Parcelle {self.pk}"

    def to_dto(self) -> dict:
        dto = {"statutParcelle": self.statut_parcelle}
        dto.update(_sans_vides({
            "codeParcelle": self.code_parcelle,
            "referenceCadastrale": self.reference_cadastrale,
            "numeroAdresse": self.numero_adresse,
            "rue": self.rue,
            "numeroParcelle": self.numero_parcelle,
            "superficieM2": self.superficie_m2,
            "gpsLat": self.gps_lat,
            "gpsLon": self.gps_lon,
            "sourceDonnee": self.source_donnee,
            "commune": self.commune_id,
            "quartier": self.quartier_id,
            "rueAvenue": self.avenue_id,
        }))
        dto["batiments"] = [b.to_dto() for b in self.batiments.all()]
        try:
            dto["personnes"] = [self.personne.to_dto()]
        except PersonneLocal.DoesNotExist:
            dto["personnes"] = []
        return dto


class BatimentLocal(models.Model):
    TYPE_CHOICES = [
        ("maison", "Maison"), ("immeuble", "Immeuble"), ("entrepôt", "Entrepôt"),
        ("commerce", "Commerce"), ("bureau", "Bureau"), ("autre", "Autre"),
    ]
    USAGE_CHOICES = [
        ("résidentiel", "Résidentiel"), ("commercial", "Commercial"),
        ("mixte", "Mixte"), ("autre", "Autre"),
    ]

    parcelle = models.ForeignKey(ParcelleLocal, on_delete=models.CASCADE, related_name="batiments")
    type_batiment = models.CharField(max_length=50, choices=TYPE_CHOICES, default="autre")
    nombre_etages = models.IntegerField(null=True, blank=True)
    annee_construction = models.IntegerField(null=True, blank=True)
    surface_batie_m2 = models.FloatField(null=True, blank=True)
    usage_principal = models.CharField(max_length=50, choices=USAGE_CHOICES, default="autre")
    statut_batiment = models.CharField(max_length=50, default="en_usage")
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ("id",)

    def to_dto(self) -> dict:
        dto = {
            "typeBatiment": self.type_batiment,
            "usagePrincipal": self.usage_principal,
            "statutBatiment": self.statut_batiment,
        }
        dto.update(_sans_vides({
            "nombreEtages": self.nombre_etages,
            "anneeConstruction": self.annee_construction,
            "surfaceBatieM2": self.surface_batie_m2,
        }))
        return dto


class PersonneLocal(models.Model):
    parcelle = models.OneToOneField(ParcelleLocal, on_delete=models.CASCADE, related_name="personne")
    type_personne = models.CharField(max_length=50)
    nom_raison_sociale = models.CharField(max_length=255, null=True, blank=True)
    nif = models.CharField(max_length=100, null=True, blank=True)
    contact = models.CharField(max_length=100, null=True, blank=True)
    adresse_postale = models.CharField(max_length=255, null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    def to_dto(self) -> dict:
        dto = {"typePersonne": self.type_personne}
        dto.update(_sans_vides({
            "nomRaisonSociale": self.nom_raison_sociale,
            "nif": self.nif,
            "contact": self.contact,
            "adressePostale": self.adresse_postale,
        }))
        return dto
