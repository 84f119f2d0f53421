"""
Print the level price list with what each level pays out.
Usage: python manage.py check_payout_rules [--strict]
"""
from django.core.management.base import BaseCommand, CommandError

from mlm.rules import DISTRIBUTION_RULES, LEVEL_COSTS, MAX_REFERRAL_DEPTH, overpaying_levels


class Command(BaseCommand):
    help = 'Check that no level pays out more coins than it costs'

    def add_arguments(self, parser):
        parser.add_argument(
            '--strict',
            action='store_true',
            help='Exit with an error when a level pays out more than it costs',
        )

    def handle(self, *args, **options):
        for level in sorted(LEVEL_COSTS):
            cost = LEVEL_COSTS[level]
            rule = DISTRIBUTION_RULES.get(level)
            if rule is None:
                self.stdout.write(self.style.WARNING(f"Level {level}: cost {cost}, no distribution rule"))
                continue

            payout = rule.total
            line = (
                f"Level {level}: cost {cost}, admin {rule.admin_share}, "
                f"upline {len(rule.upline_shares)} generations, total {payout}"
            )
            if payout > cost or len(rule.upline_shares) > MAX_REFERRAL_DEPTH:
                self.stdout.write(self.style.WARNING(line))
            else:
                self.stdout.write(self.style.SUCCESS(line))

        overpaying = overpaying_levels()
        if overpaying and options['strict']:
            raise CommandError(f"Levels paying out more than they cost: {overpaying}")
