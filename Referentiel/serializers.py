from rest_framework import serializers
from .models import RefCommune, RefQuartier, RefAvenue, RefZoneType, RefTypeActivite


class RefCommuneSerializer(serializers.ModelSerializer):
    class Meta:
        model = RefCommune
        fields = ['id', 'libelle']


class RefQuartierSerializer(serializers.ModelSerializer):
    class Meta:
        model = RefQuartier
        fields = ['id', 'libelle']


class RefAvenueSerializer(serializers.ModelSerializer):
    class Meta:
        model = RefAvenue
        fields = ['id', 'libelle']


class RefZoneTypeSerializer(serializers.ModelSerializer):
    class Meta:
        model = RefZoneType
        fields = ['id', 'libelle']


class RefTypeActiviteSerializer(serializers.ModelSerializer):
    class Meta:
        model = RefTypeActivite
        fields = ['id', 'libelle']
