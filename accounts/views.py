"""
Authentication views (session based).

- POST /api/register/ - create the farm owner account and log in
- POST /api/login/ - log in
- POST /api/logout/ - log out
- GET /api/user/ - the logged in farm owner
"""

import logging

from django.contrib.auth import authenticate, login, logout
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import LoginSerializer, UserRegistrationSerializer, UserSerializer
from .services import FarmRegistrationService

logger = logging.getLogger(__name__)


class UserRegistrationView(APIView):
    """
    API endpoint for user registration.
    No authentication required.
    """
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = FarmRegistrationService.register(**serializer.validated_data)
        login(request, user, backend='django.contrib.auth.backends.ModelBackend')

        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """
    API endpoint for session login.
    """
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request,
            username=serializer.validated_data['username'],
            password=serializer.validated_data['password'],
        )
        if user is None:
            logger.warning(f"Failed login for {serializer.validated_data['username']}")
            return Response(
                {'message': 'Usuário ou senha inválidos'},
                status=status.HTTP_401_UNAUTHORIZED
            )

        login(request, user)
        return Response(UserSerializer(user).data)


class LogoutView(APIView):
    """
    API endpoint for logout.
    """
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        logout(request)
        return Response({'message': 'Logout realizado com sucesso'})


class CurrentUserView(APIView):
    """
    API endpoint for the logged in user.
    Requires authentication.
    """
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)
