from decimal import Decimal

from .models import Transaction


class LedgerService:
    """Builds ledger rows for a payout. Rows are saved by the caller's transaction."""

    @staticmethod
    def debit(user_id, amount, level, transaction_type):
        return Transaction(
            user_id=user_id,
            amount=-Decimal(amount),
            transaction_type=transaction_type,
            level=level,
            source_user_id=user_id,
            description=f"{transaction_type.title()} to Level {level}",
        )

    @staticmethod
    def admin_fee(admin_id, amount, level, source_user_id):
        return Transaction(
            user_id=admin_id,
            amount=Decimal(amount),
            transaction_type='ADMIN_FEE',
            level=level,
            source_user_id=source_user_id,
            description=f"Admin share from user {source_user_id} (Level {level})",
        )

    @staticmethod
    def commission(user_id, amount, level, generation, source_user_id):
        return Transaction(
            user_id=user_id,
            amount=Decimal(amount),
            transaction_type='REFERRAL_COMMISSION',
            level=level,
            generation=generation,
            source_user_id=source_user_id,
            description=f"Commission from user {source_user_id} (Level {level}, generation {generation})",
        )
