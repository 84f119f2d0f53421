import logging

from rest_framework.exceptions import NotAuthenticated
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def first_error_message(detail):
    """Flatten a DRF error detail (dict / list / string) to its first message."""
    if isinstance(detail, dict):
        if 'non_field_errors' in detail:
            return first_error_message(detail['non_field_errors'])
        for value in detail.values():
            return first_error_message(value)
        return ''
    if isinstance(detail, (list, tuple)):
        return first_error_message(detail[0]) if detail else ''
    return str(detail)


def api_exception_handler(exc, context):
    """Render every DRF error as {'success': False, 'error': <message>}."""
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, NotAuthenticated):
        message = 'Unauthorized: No token provided.'
    else:
        message = first_error_message(response.data)

    response.data = {'success': False, 'error': message}
    if response.status_code >= 500:
        logger.error(f"API error in {context.get('view').__class__.__name__}: {exc}")
    return response
