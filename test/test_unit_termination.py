# Test type: Unit Test
# Validation to be executed: Validates termination settlement — day count,
#   13th-salary and vacation proration, notice/FGTS fine per termination type,
#   and that only salary balance + 13th is taxed.
# Command: pytest test/test_unit_termination.py -v

"""Unit tests for cltcalc.services.termination_service module."""

from datetime import date, datetime

import pytest

from cltcalc.models.schemas import TerminationType
from cltcalc.services.termination_service import (
    calculate_termination,
    days_worked,
    indemnities,
    thirteenth_months,
    vacation_months,
)


class TestDaysWorked:

    def test_dates(self, employment_period):
        assert days_worked(*employment_period) == 536

    def test_reversed_is_absolute(self):
        assert days_worked(date(2024, 8, 10), date(2024, 3, 10)) == 153

    def test_datetime_fraction_rounds_up(self):
        assert days_worked(datetime(2024, 1, 1), datetime(2024, 1, 2, 6)) == 2


class TestThirteenthMonths:
    """Calendar-month proration of the 13th salary."""

    def test_same_year_mid_month_both_ends(self):
        assert thirteenth_months(date(2024, 3, 10), date(2024, 8, 10)) == 5

    def test_same_year_late_start_late_end(self):
        assert thirteenth_months(date(2024, 3, 20), date(2024, 8, 20)) == 5

    def test_same_year_full_months(self):
        assert thirteenth_months(date(2024, 3, 1), date(2024, 8, 31)) == 6

    def test_same_year_fifteenth_counts(self):
        assert thirteenth_months(date(2024, 3, 15), date(2024, 8, 15)) == 6

    def test_across_years(self):
        assert thirteenth_months(date(2023, 1, 1), date(2024, 6, 20)) == 6
        assert thirteenth_months(date(2023, 1, 1), date(2024, 6, 14)) == 5

    def test_early_january_exit_clamps_to_zero(self):
        assert thirteenth_months(date(2023, 5, 1), date(2024, 1, 5)) == 0

    def test_reversed_range_clamps_to_zero(self):
        assert thirteenth_months(date(2024, 8, 10), date(2024, 3, 10)) == 0


class TestVacationMonths:
    """Elapsed 30-day units, a 15+ day remainder counts, mod 12."""

    @pytest.mark.parametrize(
        "days, expected",
        [(0, 0), (14, 0), (15, 1), (30, 1), (44, 1), (45, 2), (536, 6), (359, 0), (365, 0), (374, 0), (380, 1)],
    )
    def test_counts(self, days, expected):
        assert vacation_months(days) == expected


class TestIndemnities:

    def test_without_just_cause(self):
        assert indemnities(TerminationType.WITHOUT_JUST_CAUSE, 3000, 5000) == (3000, pytest.approx(2000))

    def test_mutual_agreement(self):
        assert indemnities(TerminationType.MUTUAL_AGREEMENT, 3000, 5000) == (1500, pytest.approx(1000))

    @pytest.mark.parametrize(
        "kind", [TerminationType.JUST_CAUSE, TerminationType.EMPLOYEE_RESIGNATION]
    )
    def test_no_indemnity(self, kind):
        assert indemnities(kind, 3000, 5000) == (0.0, 0.0)


class TestCalculateTermination:

    def test_without_just_cause(self, employment_period):
        result = calculate_termination(
            3000, *employment_period, TerminationType.WITHOUT_JUST_CAUSE, fgts_balance=5000
        )
        assert result.salaryBalance == pytest.approx(2000)
        assert result.proportionalThirteenth == pytest.approx(1500)
        assert result.proportionalVacation == pytest.approx(1500)
        assert result.vacationOneThird == pytest.approx(500)
        assert result.noticePeriod == 3000
        assert result.fgtsFine == pytest.approx(2000)
        assert result.grossTotal == pytest.approx(10_500)
        # taxed on 3 500
        assert result.inss == pytest.approx(318.8184)
        assert result.irrf == pytest.approx(95.73724)
        assert result.netTotal == pytest.approx(10_085.44436)

    def test_just_cause(self, employment_period):
        result = calculate_termination(
            3000, *employment_period, TerminationType.JUST_CAUSE, fgts_balance=5000
        )
        assert result.noticePeriod == 0
        assert result.fgtsFine == 0
        assert result.grossTotal == pytest.approx(5500)

    def test_resignation(self, employment_period):
        result = calculate_termination(
            3000, *employment_period, TerminationType.EMPLOYEE_RESIGNATION, fgts_balance=5000
        )
        assert result.noticePeriod == 0
        assert result.fgtsFine == 0

    def test_mutual_agreement(self, employment_period):
        result = calculate_termination(
            3000, *employment_period, TerminationType.MUTUAL_AGREEMENT, fgts_balance=5000
        )
        assert result.noticePeriod == pytest.approx(1500)
        assert result.fgtsFine == pytest.approx(1000)
        assert result.grossTotal == pytest.approx(7000)

    def test_taxes_ignore_indemnities(self, employment_period):
        a = calculate_termination(3000, *employment_period, TerminationType.JUST_CAUSE)
        b = calculate_termination(
            3000, *employment_period, TerminationType.WITHOUT_JUST_CAUSE, fgts_balance=90_000
        )
        assert a.inss == b.inss
        assert a.irrf == b.irrf

    def test_unused_vacation_untaxed(self, employment_period):
        base = calculate_termination(3000, *employment_period, TerminationType.JUST_CAUSE)
        more = calculate_termination(
            3000, *employment_period, TerminationType.JUST_CAUSE, unused_vacation_days=10
        )
        assert more.proportionalVacation - base.proportionalVacation == pytest.approx(1000)
        assert more.vacationOneThird - base.vacationOneThird == pytest.approx(1000 / 3)
        assert more.inss == base.inss
        assert more.netTotal - base.netTotal == pytest.approx(4000 / 3)

    def test_bonuses_join_base(self, employment_period):
        result = calculate_termination(
            2500, *employment_period, TerminationType.WITHOUT_JUST_CAUSE, bonuses=500
        )
        assert result.noticePeriod == 3000

    def test_portuguese_alias(self, employment_period):
        result = calculate_termination(3000, *employment_period, "comum-acordo", fgts_balance=5000)
        assert result.fgtsFine == pytest.approx(1000)

    def test_net_is_gross_minus_taxes(self, employment_period):
        result = calculate_termination(
            7200, *employment_period, TerminationType.MUTUAL_AGREEMENT, fgts_balance=12_000
        )
        assert result.netTotal == pytest.approx(result.grossTotal - result.inss - result.irrf)
