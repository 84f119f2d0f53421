"""
Transactional access to user records.

``run_in_transaction`` is the only way the payout code touches balances. It
hands the wrapped function a ``TransactionContext`` that locks every record
it reads and queues every write, then applies the queued writes in one go
when the function returns. Reading after a write has been queued is an
error, so all reads of a transaction happen before any of its writes.
"""
import logging
import time

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import OperationalError, transaction
from django.db.models import F

from .exceptions import TransactionConflict, TransactionOrderError

logger = logging.getLogger(__name__)

RETRY_BACKOFF_SECONDS = 0.05


class TransactionContext:
    def __init__(self):
        self._writes = []

    def get(self, user_id):
        """Fetch and lock a user record. Returns None when it does not exist."""
        if self._writes:
            raise TransactionOrderError(
                f"Read of user {user_id} issued after a write in the same transaction"
            )
        if user_id is None:
            return None
        User = get_user_model()
        return User.objects.select_for_update().filter(pk=user_id).first()

    def increment(self, user_id, amount, **fields):
        """Queue ``coins += amount`` (plus optional plain field updates)."""
        self._writes.append(('increment', user_id, amount, fields))

    def create(self, instance):
        """Queue a new model instance to be saved with the other writes."""
        self._writes.append(('create', None, None, instance))

    def on_commit(self, func):
        transaction.on_commit(func)

    def flush(self):
        User = get_user_model()
        writes, self._writes = self._writes, []
        for kind, user_id, amount, payload in writes:
            if kind == 'create':
                payload.save()
                continue

            fields = dict(payload)
            if kind == 'increment':
                fields['coins'] = F('coins') + amount

            updated = User.objects.filter(pk=user_id).update(**fields)
            if not updated:
                logger.warning(f"User {user_id} not found while applying {kind}. Write skipped.")


def run_in_transaction(func, attempts=None):
    """
    Call ``func(ctx)`` inside one database transaction and return its result.

    Lock conflicts and serialization failures surface from the database as
    ``OperationalError``; the whole function is re-run on a fresh transaction
    until ``attempts`` runs out. Business exceptions raised by ``func`` roll
    the transaction back and propagate unchanged.
    """
    attempts = attempts or settings.TRANSACTION_MAX_ATTEMPTS

    for attempt in range(1, attempts + 1):
        try:
            with transaction.atomic():
                ctx = TransactionContext()
                result = func(ctx)
                ctx.flush()
            return result
        except OperationalError as e:
            if attempt >= attempts:
                logger.error(f"Transaction failed after {attempt} attempts: {e}")
                raise TransactionConflict(
                    "The request could not be completed due to concurrent activity. Please try again."
                ) from e
            logger.warning(f"Transaction conflict (attempt {attempt}/{attempts}): {e}. Retrying.")
            time.sleep(RETRY_BACKOFF_SECONDS * attempt)
