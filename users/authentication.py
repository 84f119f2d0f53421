import logging

from rest_framework import exceptions
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError

logger = logging.getLogger(__name__)


class BearerTokenAuthentication(JWTAuthentication):
    """
    Resolve ``Authorization: Bearer <token>`` to a user before any view runs.

    Token verification is delegated to simplejwt. Requests without a token
    fall through unauthenticated so the ``IsAuthenticated`` permission can
    reject them; malformed or expired tokens are rejected right here.
    """

    www_authenticate_realm = 'api'

    def authenticate(self, request):
        header = self.get_header(request)
        if header is None:
            return None

        try:
            raw_token = self.get_raw_token(header)
            if raw_token is None:
                return None
            validated_token = self.get_validated_token(raw_token)
            user = self.get_user(validated_token)
        except (InvalidToken, TokenError, exceptions.AuthenticationFailed) as e:
            logger.warning(f"Invalid token error: {e}")
            raise exceptions.AuthenticationFailed('Unauthorized: Invalid token.')

        return user, validated_token
