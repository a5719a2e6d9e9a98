import logging

from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed

logger = logging.getLogger(__name__)


class CookieJWTAuthentication(JWTAuthentication):
    """
    JWT authentication that reads the access token from the ``access_token``
    cookie set at login, falling back to the Authorization header.
    """

    def authenticate(self, request):
        token = request.COOKIES.get('access_token')
        if not token:
            return super().authenticate(request)

        try:
            validated_token = self.get_validated_token(token)
        except AuthenticationFailed as e:
            logger.warning("Rejected access token cookie: %s", e)
            raise AuthenticationFailed(f'Token validation failed: {str(e)}')

        try:
            user = self.get_user(validated_token)
            return user, validated_token
        except AuthenticationFailed as e:
            raise AuthenticationFailed(f'Error retrieving user: {str(e)}')
