from rest_framework.decorators import api_view
from rest_framework.response import Response
from .models import RefCommune, RefQuartier, RefAvenue, RefZoneType, RefTypeActivite
from .serializers import (
    RefCommuneSerializer,
    RefQuartierSerializer,
    RefAvenueSerializer,
    RefZoneTypeSerializer,
    RefTypeActiviteSerializer,
)


@api_view(['GET'])
def get_all_refs(request):
    """Toutes les tables de référence, en un seul payload (pull du poste de saisie)."""
    return Response({
        'zoneTypes': RefZoneTypeSerializer(RefZoneType.objects.order_by('id'), many=True).data,
        'avenues': RefAvenueSerializer(RefAvenue.objects.order_by('id'), many=True).data,
        'quartiers': RefQuartierSerializer(RefQuartier.objects.order_by('id'), many=True).data,
        'communes': RefCommuneSerializer(RefCommune.objects.order_by('id'), many=True).data,
        'typeActivites': RefTypeActiviteSerializer(RefTypeActivite.objects.order_by('id'), many=True).data,
    })


@api_view(['GET'])
def get_all_types_activite(request):
    activites = RefTypeActivite.objects.order_by('id')
    serializer = RefTypeActiviteSerializer(activites, many=True)
    return Response(serializer.data)
