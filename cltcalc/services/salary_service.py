"""Monthly salary settlement: gross → INSS → IRRF → net, plus FGTS."""

from __future__ import annotations
from cltcalc.config import settings
from cltcalc.models.schemas import SalaryResult
from cltcalc.services.tax_service import calculate_inss, calculate_irrf


def calculate_salary(
    gross_salary: float,
    dependents: int = 0,
    other_discounts: float = 0.0,
) -> SalaryResult:
    """Net pay for one month.

    net = gross − INSS − IRRF − other discounts.  FGTS is the employer's
    deposit and is reported but not deducted.
    """
    inss = calculate_inss(gross_salary)
    irrf = calculate_irrf(gross_salary, inss, dependents)
    fgts = gross_salary * settings.FGTS_RATE
    net_salary = gross_salary - inss - irrf - other_discounts

    return SalaryResult(
        grossSalary=gross_salary,
        inss=inss,
        irrf=irrf,
        netSalary=net_salary,
        fgts=fgts,
        discounts=inss + irrf + other_discounts,
    )
