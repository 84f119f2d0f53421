"""
Static level pricing and payout tables.

Every activation or upgrade to level N costs ``LEVEL_COSTS[N]`` coins. The
cost is paid out as ``DISTRIBUTION_RULES[N]``: a fixed admin share plus one
share per upline generation (index 0 = direct referrer).
"""
from dataclasses import dataclass
from decimal import Decimal

MAX_REFERRAL_DEPTH = 10
MIN_LEVEL = 1
MAX_LEVEL = 10


@dataclass(frozen=True)
class DistributionRule:
    admin_share: Decimal
    upline_shares: tuple

    @property
    def total(self):
        return self.admin_share + sum(self.upline_shares, Decimal('0'))


def _rule(admin, *refs):
    return DistributionRule(
        admin_share=Decimal(str(admin)),
        upline_shares=tuple(Decimal(str(r)) for r in refs),
    )


LEVEL_COSTS = {
    1: Decimal('6'),
    2: Decimal('12'),
    3: Decimal('25'),
    4: Decimal('40'),
    5: Decimal('50'),
    6: Decimal('65'),
    7: Decimal('80'),
    8: Decimal('100'),
    9: Decimal('125'),
    10: Decimal('160'),
}

DISTRIBUTION_RULES = {
    1: _rule(3, 2, 0.5, 0.5),
    2: _rule(6, 4, 1, 1),
    3: _rule(12, 8, 2, 2, 1),
    4: _rule(17, 12, 4, 3, 2, 1),
    5: _rule(23, 17, 4, 3, 2, 1),
    6: _rule(30, 25, 4, 3, 2, 1),
    7: _rule(36, 30, 5, 4, 3, 2),
    8: _rule(50, 35, 5, 4, 3, 2, 1),
    9: _rule(70, 40, 5, 4, 3, 2, 1),
    10: _rule(56, 50, 10, 9, 8, 7, 6, 5, 4, 3, 2),
}


def is_known_level(level):
    # bool is an int subclass; True must not pass as level 1
    if isinstance(level, bool) or not isinstance(level, int):
        return False
    return level in LEVEL_COSTS


def get_level_cost(level):
    """Cost of a level, or None when the level is unknown."""
    if not is_known_level(level):
        return None
    return LEVEL_COSTS[level]


def get_distribution_rule(level):
    if not is_known_level(level):
        return None
    return DISTRIBUTION_RULES.get(level)


def overpaying_levels():
    """Levels whose payouts add up to more than the level costs."""
    return [
        level for level, rule in sorted(DISTRIBUTION_RULES.items())
        if rule.total > LEVEL_COSTS.get(level, Decimal('0'))
    ]
