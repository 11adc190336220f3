import logging

from django.contrib.auth import authenticate, get_user_model
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .serializers import LoginSerializer

logger = logging.getLogger(__name__)


def _utilisateur_par_email(email: str):
    User = get_user_model()
    user = User.objects.filter(email__iexact=email, is_active=True).order_by("id").first()
    if user is None:
        # les agents peuvent aussi se connecter avec leur nom d'utilisateur
        user = User.objects.filter(username=email, is_active=True).first()
    return user


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login(request):
    """{email, password} -> {token} ; le jeton est créé à la première connexion."""
    serializer = LoginSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    email = serializer.validated_data["email"]
    password = serializer.validated_data["password"]

    candidat = _utilisateur_par_email(email)
    user = None
    if candidat is not None:
        user = authenticate(request, username=candidat.get_username(), password=password)

    if user is None:
        logger.info(f"Échec de connexion pour {email}")
        return Response({"detail": "Identifiants invalides."}, status=status.HTTP_401_UNAUTHORIZED)

    token, _ = Token.objects.get_or_create(user=user)
    return Response({"token": token.key})
