"""Termination settlement (rescisão).

Components:
    Salary balance      (base / 30) × day-of-month of the end date
    13th proportional   (base / 12) × calendar months worked this year
    Vacation proportional (base / 12) × elapsed 30-day units (mod 12) + 1/3
    Unused vacation     (base / 30) × unused days + 1/3
    Notice period       by termination type
    FGTS fine           by termination type, on the FGTS balance

INSS/IRRF are levied on salary balance + 13th only, with no dependents.

The two month counts are kept separate: the 13th uses calendar fields of
the start/end dates, vacation uses elapsed days.  Reversed date ranges are
not normalised; the day count is absolute, the calendar count is not.
"""

from __future__ import annotations
import math
from datetime import date
from typing import Tuple
from cltcalc.config import settings
from cltcalc.models.schemas import TerminationResult, TerminationType
from cltcalc.services.tax_service import calculate_inss, calculate_irrf
from cltcalc.services.vacation_service import one_third

# A month counts when at least this many days of it were worked
_FRACTION_DAYS = 15


def days_worked(start_date: date, end_date: date) -> int:
    """Whole days between the two dates, absolute, rounded up."""
    delta = abs(end_date - start_date)
    return math.ceil(delta.total_seconds() / 86400)


def thirteenth_months(start_date: date, end_date: date) -> int:
    """Months of 13th salary earned in the termination year.

    Same year: months between the two dates, +1 if hired on or before the
    15th, −1 if leaving before the 15th.  Across years: months up to the
    end date, counting the last month only from the 15th on.
    """
    if end_date.year == start_date.year:
        months = end_date.month - start_date.month
        if start_date.day <= _FRACTION_DAYS:
            months += 1
        if end_date.day < _FRACTION_DAYS:
            months -= 1
    else:
        months = end_date.month if end_date.day >= _FRACTION_DAYS else end_date.month - 1
    return max(0, months)


def vacation_months(total_days: int) -> int:
    """Twelfths of proportional vacation: one per 30 days, 15+ leftover days count."""
    months, remaining = divmod(total_days, settings.DAYS_PER_MONTH)
    if remaining >= _FRACTION_DAYS:
        months += 1
    return months % settings.MONTHS_PER_YEAR


def indemnities(
    termination_type: TerminationType,
    base: float,
    fgts_balance: float,
) -> Tuple[float, float]:
    """Return ``(notice_period, fgts_fine)`` for the termination type."""
    if termination_type is TerminationType.WITHOUT_JUST_CAUSE:
        return base, fgts_balance * settings.FGTS_FINE_WITHOUT_CAUSE
    if termination_type is TerminationType.MUTUAL_AGREEMENT:
        return (
            base * settings.NOTICE_MUTUAL_AGREEMENT,
            fgts_balance * settings.FGTS_FINE_MUTUAL_AGREEMENT,
        )
    # Just cause and resignation: no indemnified notice, no fine
    return 0.0, 0.0


def calculate_termination(
    salary: float,
    start_date: date,
    end_date: date,
    termination_type: TerminationType,
    fgts_balance: float = 0.0,
    unused_vacation_days: float = 0,
    bonuses: float = 0.0,
) -> TerminationResult:
    """Full severance settlement.

    Accepts ``date`` or ``datetime`` values (both of the same kind).
    """
    termination_type = TerminationType(termination_type)
    base = salary + bonuses
    monthly_twelfth = base / settings.MONTHS_PER_YEAR
    daily_rate = base / settings.DAYS_PER_MONTH

    salary_balance = daily_rate * end_date.day
    proportional_thirteenth = monthly_twelfth * thirteenth_months(start_date, end_date)

    proportional_vacation = monthly_twelfth * vacation_months(days_worked(start_date, end_date))
    vacation_third = one_third(proportional_vacation)

    unused_value = daily_rate * unused_vacation_days
    unused_third = one_third(unused_value)

    notice_period, fgts_fine = indemnities(termination_type, base, fgts_balance)

    gross_total = (
        salary_balance
        + proportional_thirteenth
        + proportional_vacation
        + vacation_third
        + unused_value
        + unused_third
        + notice_period
        + fgts_fine
    )

    taxable = salary_balance + proportional_thirteenth
    inss = calculate_inss(taxable)
    irrf = calculate_irrf(taxable, inss)

    return TerminationResult(
        salaryBalance=salary_balance,
        proportionalThirteenth=proportional_thirteenth,
        proportionalVacation=proportional_vacation + unused_value,
        vacationOneThird=vacation_third + unused_third,
        noticePeriod=notice_period,
        fgtsFine=fgts_fine,
        grossTotal=gross_total,
        inss=inss,
        irrf=irrf,
        netTotal=gross_total - inss - irrf,
    )
