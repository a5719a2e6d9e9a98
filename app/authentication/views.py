import logging

from django.conf import settings
from django.core.cache import cache

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.token_blacklist.models import OutstandingToken
from rest_framework_simplejwt.tokens import RefreshToken

from authentication.serializers import LoginSerializer, RegisterSerializer, UserSerializer
from utils import api_response

logger = logging.getLogger(__name__)


class RateLimiter:
    @staticmethod
    def is_rate_limited(key, limit=3):
        failures = cache.get(key, 0)
        return failures >= limit

    @staticmethod
    def increment_failures(key, timeout=300):
        failures = cache.get(key, 0)
        cache.set(key, failures + 1, timeout=timeout)

    @staticmethod
    def reset_attempts(key):
        cache.delete(key)


def set_token_cookie(response, key, value):
    response.set_cookie(
        key=key,
        value=value,
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite=settings.AUTH_COOKIE_SAMESITE,
    )


class RegisterView(APIView):
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        if serializer.is_valid():
            user = serializer.save()
            logger.info("Registered user %s", user.id)
            return api_response(status.HTTP_201_CREATED, "User registered successfully")
        return api_response(status.HTTP_400_BAD_REQUEST, "Validation error", serializer.errors)

class LoginView(APIView):
    def post(self, request):
        key = f"login_attempts_{request.data.get('username_or_email')}"
        if RateLimiter.is_rate_limited(key):
            return api_response(status.HTTP_429_TOO_MANY_REQUESTS, "Too many login attempts. Try again later.")

        serializer = LoginSerializer(data=request.data)
        if serializer.is_valid():
            RateLimiter.reset_attempts(key)
            user = serializer.validated_data['user']

            # drop tokens from earlier sessions
            OutstandingToken.objects.filter(user=user).delete()

            refresh = RefreshToken.for_user(user)

            response = api_response(status.HTTP_200_OK, "Login successful", {
                'user_id': user.id,
                'username': user.username,
            })
            set_token_cookie(response, 'refresh_token', str(refresh))
            set_token_cookie(response, 'access_token', str(refresh.access_token))
            return response

        RateLimiter.increment_failures(key)
        logger.warning("Failed login attempt for %s", request.data.get('username_or_email'))
        return api_response(status.HTTP_400_BAD_REQUEST, "Invalid credentials", serializer.errors)

class LogoutView(APIView):
    def post(self, request):
        refresh_token = request.COOKIES.get('refresh_token')
        if not refresh_token:
            return api_response(status.HTTP_400_BAD_REQUEST, "No refresh token found")

        try:
            refresh = RefreshToken(refresh_token)
            refresh.blacklist()
        except TokenError as e:
            return api_response(status.HTTP_400_BAD_REQUEST, "Error blacklisting token", str(e))

        response = api_response(status.HTTP_200_OK, "Logout successful")
        response.delete_cookie('refresh_token', path='/', domain=None)
        response.delete_cookie('access_token', path='/', domain=None)
        return response

class CookieTokenRefreshView(APIView):
    def post(self, request):
        refresh_token = request.COOKIES.get('refresh_token')
        if not refresh_token:
            return api_response(status.HTTP_400_BAD_REQUEST, "No refresh token found")

        try:
            refresh = RefreshToken(refresh_token)
            access_token = str(refresh.access_token)
        except TokenError:
            return api_response(status.HTTP_400_BAD_REQUEST, "Invalid refresh token")

        response = api_response(status.HTTP_200_OK, "Token refreshed")
        set_token_cookie(response, 'access_token', access_token)
        return response

class UserInfoView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = UserSerializer(request.user)
        data = dict(serializer.data, user_id=request.user.id)
        return api_response(status.HTTP_200_OK, "User info retrieved successfully", data)
