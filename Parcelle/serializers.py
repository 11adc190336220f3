from rest_framework import serializers


class BatimentDtoSerializer(serializers.Serializer):
    typeBatiment = serializers.CharField()
    nombreEtages = serializers.IntegerField(required=False, allow_null=True)
    anneeConstruction = serializers.IntegerField(required=False, allow_null=True)
    surfaceBatieM2 = serializers.FloatField(required=False, allow_null=True)
    usagePrincipal = serializers.CharField()
    statutBatiment = serializers.CharField()


class PersonneDtoSerializer(serializers.Serializer):
    typePersonne = serializers.CharField()
    nomRaisonSociale = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    nif = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    contact = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    adressePostale = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class ParcelleDtoSerializer(serializers.Serializer):
    codeParcelle = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    referenceCadastrale = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    numeroAdresse = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    rue = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    numeroParcelle = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    superficieM2 = serializers.FloatField(required=False, allow_null=True)
    gpsLat = serializers.FloatField(required=False, allow_null=True)
    gpsLon = serializers.FloatField(required=False, allow_null=True)
    statutParcelle = serializers.CharField()
    sourceDonnee = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    # identifiants de référence
    commune = serializers.IntegerField(required=False, allow_null=True)
    quartier = serializers.IntegerField(required=False, allow_null=True)
    rueAvenue = serializers.IntegerField(required=False, allow_null=True)
    # enfants
    batiments = BatimentDtoSerializer(many=True, required=False, allow_null=True)
    personnes = PersonneDtoSerializer(many=True, required=False, allow_null=True)
