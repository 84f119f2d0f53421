import logging

from rest_framework import viewsets, views, status
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from referral_backend.exceptions import first_error_message

from . import actions
from .exceptions import ReferralError
from .serializers import LevelInfoSerializer

logger = logging.getLogger(__name__)


def run_action(user, action_name, payload):
    """Run one command and turn its outcome into the API response shape."""
    try:
        message = actions.dispatch(user, action_name, payload)
    except ValidationError as e:
        reason = first_error_message(e.detail)
        logger.warning(f"FAILURE ('{action_name}'): User {user.pk}. Reason: {reason}")
        return Response({'success': False, 'error': reason}, status=status.HTTP_400_BAD_REQUEST)
    except ReferralError as e:
        logger.warning(f"FAILURE ('{action_name}'): User {user.pk}. Reason: {e.reason}")
        return Response({'success': False, 'error': e.reason}, status=status.HTTP_400_BAD_REQUEST)
    except Exception:
        logger.exception(f"FAILURE ('{action_name}'): User {user.pk}. Unexpected error")
        return Response(
            {'success': False, 'error': 'An internal error occurred.'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    return Response({'success': True, 'message': message}, status=status.HTTP_200_OK)


class ActionView(views.APIView):
    """Single entry point: POST {"action": <name>, "data": {...}}."""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        body = request.data if isinstance(request.data, dict) else {}
        action_name = body.get('action')
        if not action_name:
            return Response({'success': False, 'error': 'No action specified.'}, status=status.HTTP_400_BAD_REQUEST)

        logger.info(f"Action received: '{action_name}' for User: {request.user.pk}")
        payload = body.get('data')
        if payload is not None and not isinstance(payload, dict):
            return Response({'success': False, 'error': 'data must be an object.'}, status=status.HTTP_400_BAD_REQUEST)
        return run_action(request.user, action_name, payload)


class MLMViewSet(viewsets.ViewSet):
    permission_classes = [IsAuthenticated]

    @action(detail=False, methods=['post'])
    def activate(self, request):
        return run_action(request.user, 'ACTIVATE_ACCOUNT', request.data)

    @action(detail=False, methods=['post'])
    def upgrade(self, request):
        return run_action(request.user, 'UPGRADE_USER_LEVEL', request.data)

    @action(detail=False, methods=['get'])
    def levels(self, request):
        serializer = LevelInfoSerializer(LevelInfoSerializer.rows(), many=True)
        return Response(serializer.data)
