"""Tests for the check_payout_rules management command."""

from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from mlm import rules


def run_check(*args):
    out = StringIO()
    call_command("check_payout_rules", *args, stdout=out)
    return out.getvalue()


class TestCheckPayoutRules:
    """Test rule table report."""

    def test_lists_every_level(self):
        output = run_check()

        for level in range(1, 11):
            assert f"Level {level}: cost {rules.LEVEL_COSTS[level]}" in output
        assert "upline 10 generations, total 160" in output

    def test_strict_passes_for_shipped_tables(self):
        run_check("--strict")

    def test_strict_fails_on_overpaying_level(self, monkeypatch):
        monkeypatch.setitem(
            rules.DISTRIBUTION_RULES, 1,
            rules.DistributionRule(admin_share=Decimal("5"), upline_shares=(Decimal("5"),)),
        )

        with pytest.raises(CommandError, match=r"\[1\]"):
            run_check("--strict")

    def test_non_strict_only_reports(self, monkeypatch):
        monkeypatch.setitem(
            rules.DISTRIBUTION_RULES, 2,
            rules.DistributionRule(admin_share=Decimal("50"), upline_shares=()),
        )

        output = run_check()

        assert "Level 2: cost 12, admin 50, upline 0 generations, total 50" in output
