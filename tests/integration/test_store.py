"""
Integration tests for the transactional store adapter.

Tests cover:
- Reads-before-writes ordering guard
- Queued writes applied on success, discarded on failure
- Retry on database conflicts
"""

from decimal import Decimal

import pytest
from django.db import OperationalError

from mlm.exceptions import TransactionConflict, TransactionOrderError
from mlm.store import TransactionContext, run_in_transaction


@pytest.mark.django_db
class TestTransactionContext:
    """Test queued reads and writes."""

    def test_read_after_write_rejected(self, make_user):
        user = make_user("5")
        ctx = TransactionContext()
        ctx.increment(user.pk, Decimal("1"))

        with pytest.raises(TransactionOrderError):
            ctx.get(user.pk)

    def test_get_missing_returns_none(self, db):
        ctx = TransactionContext()
        assert ctx.get(987654) is None
        assert ctx.get(None) is None

    def test_writes_applied_on_return(self, make_user, balance):
        user = make_user("5")

        def work(ctx):
            found = ctx.get(user.pk)
            ctx.increment(found.pk, Decimal("2.5"), name="Karim")
            # Not applied yet
            assert balance(user) == Decimal("5")
            return "done"

        assert run_in_transaction(work) == "done"
        user.refresh_from_db()
        assert user.coins == Decimal("7.5")
        assert user.name == "Karim"

    def test_increment_with_fields(self, make_user):
        user = make_user("10")

        run_in_transaction(lambda ctx: ctx.increment(user.pk, Decimal("-6"), status="active", account_level=1))

        user.refresh_from_db()
        assert user.coins == Decimal("4")
        assert user.status == "active"
        assert user.account_level == 1

    def test_exception_discards_writes(self, make_user, balance):
        user = make_user("5")

        def work(ctx):
            ctx.get(user.pk)
            ctx.increment(user.pk, Decimal("100"))
            raise ValueError("rejected")

        with pytest.raises(ValueError):
            run_in_transaction(work)

        assert balance(user) == Decimal("5")


@pytest.mark.django_db
class TestRetry:
    """Test retry of conflicting transactions."""

    def test_retries_until_success(self, make_user, balance, no_sleep):
        user = make_user("5")
        calls = {'n': 0}

        def work(ctx):
            calls['n'] += 1
            ctx.get(user.pk)
            if calls['n'] < 3:
                raise OperationalError("database is locked")
            ctx.increment(user.pk, Decimal("1"))

        run_in_transaction(work, attempts=5)

        assert calls['n'] == 3
        # Only the successful attempt's write is applied
        assert balance(user) == Decimal("6")

    def test_gives_up_after_attempts(self, make_user, balance, no_sleep):
        user = make_user("5")
        calls = {'n': 0}

        def work(ctx):
            calls['n'] += 1
            ctx.increment(user.pk, Decimal("1"))
            raise OperationalError("deadlock detected")

        with pytest.raises(TransactionConflict):
            run_in_transaction(work, attempts=2)

        assert calls['n'] == 2
        assert balance(user) == Decimal("5")

    def test_default_attempts_from_settings(self, settings, db, no_sleep):
        settings.TRANSACTION_MAX_ATTEMPTS = 4
        calls = {'n': 0}

        def work(ctx):
            calls['n'] += 1
            raise OperationalError("serialization failure")

        with pytest.raises(TransactionConflict):
            run_in_transaction(work)

        assert calls['n'] == 4

    def test_business_errors_not_retried(self, db, no_sleep):
        calls = {'n': 0}

        def work(ctx):
            calls['n'] += 1
            raise KeyError("nope")

        with pytest.raises(KeyError):
            run_in_transaction(work)

        assert calls['n'] == 1
