import logging

from django.conf import settings
from django.contrib.auth import get_user_model

from wallet.services import LedgerService

from .exceptions import AlreadyActive, InsufficientFunds, InvalidLevel, UserNotFound
from .rules import MAX_LEVEL, MAX_REFERRAL_DEPTH, get_distribution_rule, get_level_cost, is_known_level
from .store import run_in_transaction

logger = logging.getLogger(__name__)

User = get_user_model()


class PayoutService:
    @staticmethod
    def distribute(ctx, spending_user_id, rule, level=None):
        """
        Pay out ``rule`` for a purchase made by ``spending_user_id``.

        Credits the configured admin account with ``rule.admin_share`` and
        walks the spender's referral chain, crediting the i-th ancestor with
        ``rule.upline_shares[i]``. The walk stops at the first referrer that
        does not exist. Cycles are not detected: a member met twice is
        credited twice, and depth is bounded by ``MAX_REFERRAL_DEPTH``.

        Every record is read before the first credit is queued. Returns False
        when there is no rule to apply.
        """
        if rule is None:
            logger.warning(f"Distribution rule is undefined for user {spending_user_id}. Skipping coin distribution.")
            return False

        # Reads
        admin = None
        admin_id = settings.REFERRAL_ADMIN_USER_ID
        if admin_id and rule.admin_share > 0:
            admin = ctx.get(admin_id)
            if admin is None:
                logger.error(f"Admin user {admin_id} not found. Admin share skipped.")

        spending_user = ctx.get(spending_user_id)
        current_referrer_id = spending_user.referrer_id if spending_user else None

        upline = []
        for share in rule.upline_shares[:MAX_REFERRAL_DEPTH]:
            if not current_referrer_id:
                break
            referrer = ctx.get(current_referrer_id)
            if referrer is None:
                logger.warning(f"Referrer with ID {current_referrer_id} not found in chain. Stopping distribution.")
                break
            upline.append((referrer.pk, share))
            current_referrer_id = referrer.referrer_id

        # Writes
        if admin is not None:
            ctx.increment(admin.pk, rule.admin_share)
            if level is not None:
                ctx.create(LedgerService.admin_fee(admin.pk, rule.admin_share, level, spending_user_id))

        for generation, (referrer_id, share) in enumerate(upline, 1):
            ctx.increment(referrer_id, share)
            if level is not None:
                ctx.create(LedgerService.commission(referrer_id, share, level, generation, spending_user_id))

        return True


class LevelService:
    @staticmethod
    def activate(user_id, level):
        """Activate an inactive account at ``level``, paying the level's cost."""
        if not is_known_level(level):
            raise InvalidLevel("A valid level (1-10) must be provided.")
        cost = get_level_cost(level)

        def _activate(ctx):
            user = ctx.get(user_id)
            if user is None:
                raise UserNotFound("Your user profile was not found.")
            if user.is_level_active:
                raise AlreadyActive("Account is already active.")
            if user.coins < cost:
                raise InsufficientFunds(cost)

            # Payout reads must precede any queued write
            PayoutService.distribute(ctx, user.pk, get_distribution_rule(level), level)

            ctx.increment(user.pk, -cost, status=User.STATUS_ACTIVE, account_level=level)
            ctx.create(LedgerService.debit(user.pk, cost, level, 'ACTIVATION'))
            ctx.on_commit(lambda: logger.info(f"SUCCESS: User {user_id} activated to level {level}."))

        run_in_transaction(_activate)
        return "Account activated successfully!"

    @staticmethod
    def upgrade(user_id, target_level):
        """Move an account to a strictly higher level, paying the full cost of that level."""
        if not is_known_level(target_level) or target_level <= 1 or target_level > MAX_LEVEL:
            raise InvalidLevel("Invalid target level provided.")
        cost = get_level_cost(target_level)

        def _upgrade(ctx):
            user = ctx.get(user_id)
            if user is None:
                raise UserNotFound("User profile not found.")
            if target_level <= (user.account_level or 0):
                raise InvalidLevel("You can only upgrade to a higher level.")
            if user.coins < cost:
                raise InsufficientFunds(cost)

            PayoutService.distribute(ctx, user.pk, get_distribution_rule(target_level), target_level)

            ctx.increment(user.pk, -cost, account_level=target_level)
            ctx.create(LedgerService.debit(user.pk, cost, target_level, 'UPGRADE'))
            ctx.on_commit(lambda: logger.info(f"SUCCESS: User {user_id} upgraded to level {target_level}."))

        run_in_transaction(_upgrade)
        return "Level upgraded successfully!"
