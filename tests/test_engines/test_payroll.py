"""Tests for payroll (FICA) and state SDI/PFML evaluation."""

from decimal import Decimal

import pytest

from grossup.engines.payroll import compute_payroll_tax, compute_sdi_tax
from grossup.models.enums import FilingStatus


class TestSocialSecurity:
    def test_below_wage_base(self, synthetic_rates):
        r = compute_payroll_tax(Decimal("50000"), FilingStatus.SINGLE, synthetic_rates.fica)
        assert r.social_security_tax == Decimal("3100")

    def test_capped_at_wage_base(self, synthetic_rates):
        """$150k wages, $100k base -> 6.2% x $100k = $6,200."""
        r = compute_payroll_tax(Decimal("150000"), FilingStatus.SINGLE, synthetic_rates.fica)
        assert r.social_security_tax == Decimal("6200")

    def test_negative_income_clamped(self, synthetic_rates):
        r = compute_payroll_tax(Decimal("-1000"), FilingStatus.SINGLE, synthetic_rates.fica)
        assert r.social_security_tax == Decimal("0")
        assert r.medicare_tax == Decimal("0")
        assert r.total == Decimal("0")


class TestMedicare:
    def test_base_rate_only(self, synthetic_rates):
        r = compute_payroll_tax(Decimal("150000"), FilingStatus.SINGLE, synthetic_rates.fica)
        assert r.medicare_tax == Decimal("2175")

    def test_at_threshold_exactly(self, synthetic_rates):
        r = compute_payroll_tax(Decimal("200000"), FilingStatus.SINGLE, synthetic_rates.fica)
        assert r.medicare_tax == Decimal("2900")

    def test_single_above_threshold(self, synthetic_rates):
        """$250k: 1.45% x 250k + 0.9% x 50k = $3,625 + $450."""
        r = compute_payroll_tax(Decimal("250000"), FilingStatus.SINGLE, synthetic_rates.fica)
        assert r.medicare_tax == Decimal("4075")

    def test_mfj_threshold(self, synthetic_rates):
        r = compute_payroll_tax(Decimal("250000"), FilingStatus.MFJ, synthetic_rates.fica)
        assert r.medicare_tax == Decimal("3625")

    def test_mfs_threshold(self, synthetic_rates):
        """MFS threshold is $125k: $150k -> $2,175 + 0.9% x $25k."""
        r = compute_payroll_tax(Decimal("150000"), FilingStatus.MFS, synthetic_rates.fica)
        assert r.medicare_tax == Decimal("2400")

    def test_total(self, synthetic_rates):
        r = compute_payroll_tax(Decimal("150000"), FilingStatus.SINGLE, synthetic_rates.fica)
        assert r.total == Decimal("8375")

    def test_monotonic(self, synthetic_rates):
        for status in FilingStatus:
            prev = Decimal("0")
            for step in range(0, 50):
                r = compute_payroll_tax(Decimal(step * 10000), status, synthetic_rates.fica)
                assert r.total >= prev
                prev = r.total


class TestSDI:
    def test_no_policy(self, synthetic_rates):
        assert compute_sdi_tax(Decimal("100000"), "ZZ", synthetic_rates.sdi) == Decimal("0")

    def test_flat_weekly_ignores_income(self, synthetic_rates):
        """$0.60/week x 52 = $31.20 whatever the wage."""
        for income in ("0", "10000", "1000000"):
            assert compute_sdi_tax(Decimal(income), "BB", synthetic_rates.sdi) == Decimal("31.20")

    def test_percentage_uncapped(self, synthetic_rates):
        assert compute_sdi_tax(Decimal("200000"), "CC", synthetic_rates.sdi) == Decimal("2000")

    def test_percentage_below_caps(self, synthetic_rates):
        assert compute_sdi_tax(Decimal("30000"), "AA", synthetic_rates.sdi) == Decimal("300")

    def test_contribution_cap(self, synthetic_rates):
        """$45k x 1% = $450, clamped to the $400 contribution cap."""
        assert compute_sdi_tax(Decimal("45000"), "AA", synthetic_rates.sdi) == Decimal("400")

    def test_wage_and_contribution_cap(self, synthetic_rates):
        assert compute_sdi_tax(Decimal("80000"), "AA", synthetic_rates.sdi) == Decimal("400")

    def test_wage_cap_only(self, synthetic_rates):
        assert compute_sdi_tax(Decimal("30000"), "DD", synthetic_rates.sdi) == Decimal("300")
        assert compute_sdi_tax(Decimal("80000"), "DD", synthetic_rates.sdi) == Decimal("500")

    def test_negative_income(self, synthetic_rates):
        assert compute_sdi_tax(Decimal("-500"), "CC", synthetic_rates.sdi) == Decimal("0")


class TestBundled2025Payroll:
    def test_social_security_wage_base(self, rates_2025):
        r = compute_payroll_tax(Decimal("500000"), FilingStatus.SINGLE, rates_2025.fica)
        # 6.2% x $176,100
        assert r.social_security_tax == Decimal("10918.2")

    @pytest.mark.parametrize("state", ["CA", "NJ", "WA", "RI"])
    def test_percentage_states_positive(self, rates_2025, state):
        assert compute_sdi_tax(Decimal("100000"), state, rates_2025.sdi) > 0

    def test_ny_flat_weekly(self, rates_2025):
        assert compute_sdi_tax(Decimal("100000"), "NY", rates_2025.sdi) == Decimal("31.20")

    def test_tx_no_sdi(self, rates_2025):
        assert compute_sdi_tax(Decimal("100000"), "TX", rates_2025.sdi) == Decimal("0")
