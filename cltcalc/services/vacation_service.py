"""Vacation settlement (férias).

    daily      = (salary + bonuses) / 30
    vacation   = daily × days            + 1/3 constitutional bonus
    unused     = daily × unused days     + 1/3   (expired periods, untaxed)
    abono      = daily × 10              + 1/3   (only when selling 10 days, untaxed)

INSS and IRRF are levied on the current-period vacation + 1/3 only.
"""

from __future__ import annotations
from cltcalc.config import settings
from cltcalc.models.schemas import VacationResult
from cltcalc.services.tax_service import calculate_inss, calculate_irrf


def one_third(amount: float) -> float:
    """Constitutional 1/3 bonus on *amount*."""
    return amount / 3


def calculate_vacation(
    salary: float,
    days: int = 30,
    sell_ten_days: bool = False,
    dependents: int = 0,
    unused_vacation_days: float = 0,
    bonuses: float = 0.0,
) -> VacationResult:
    base = salary + bonuses
    daily_rate = base / settings.DAYS_PER_MONTH

    vacation_value = daily_rate * days
    vacation_third = one_third(vacation_value)

    unused_value = daily_rate * unused_vacation_days
    unused_third = one_third(unused_value)

    abono = 0.0
    abono_third = 0.0
    if sell_ten_days:
        abono = daily_rate * settings.SOLD_VACATION_DAYS
        abono_third = one_third(abono)

    current_gross = vacation_value + vacation_third
    inss = calculate_inss(current_gross)
    irrf = calculate_irrf(current_gross, inss, dependents)

    untaxed = unused_value + unused_third + abono + abono_third

    return VacationResult(
        baseSalary=base,
        vacationValue=vacation_value + unused_value,
        oneThirdBonus=vacation_third + unused_third,
        grossTotal=current_gross + untaxed,
        inss=inss,
        irrf=irrf,
        netTotal=(current_gross - inss - irrf) + untaxed,
        abonoPecuniario=abono,
        abonoOneThird=abono_third,
    )
