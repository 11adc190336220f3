from rest_framework import serializers


class ContribuableDtoSerializer(serializers.Serializer):
    """Forme JSON d'un contribuable telle qu'envoyée par le poste de saisie (camelCase)."""
    nif = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    typeNif = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    typeContribuable = serializers.CharField()
    nom = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    postNom = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    prenom = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    raisonSociale = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    telephone1 = serializers.CharField()
    telephone2 = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    email = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    rue = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    numeroParcelle = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    origineFiche = serializers.CharField()
    statut = serializers.IntegerField(required=False, allow_null=True)
    gpsLatitude = serializers.FloatField(required=False, allow_null=True)
    gpsLongitude = serializers.FloatField(required=False, allow_null=True)
    pieceIdentiteUrl = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    dateInscription = serializers.DateTimeField(required=False, allow_null=True)
    dateMaj = serializers.DateTimeField(required=False, allow_null=True)
    formeJuridique = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    numeroRccm = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    refTypeActivite = serializers.IntegerField(required=False, allow_null=True)
    refZoneType = serializers.IntegerField(required=False, allow_null=True)
    refAvenue = serializers.IntegerField(required=False, allow_null=True)
    refQuartier = serializers.IntegerField(required=False, allow_null=True)
    refCommune = serializers.IntegerField(required=False, allow_null=True)
