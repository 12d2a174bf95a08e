"""Pydantic request / response schemas for the payroll engine and API.

Result records are fixed-shape: fields that only matter for some inputs
(abono, notice period, FGTS fine) are always present and default to 0.
"""

from __future__ import annotations
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

# ── Termination type ─────────────────────────────────────────────────────

_PT_ALIASES = {
    "sem-justa-causa": "without-just-cause",
    "com-justa-causa": "just-cause",
    "pedido-demissao": "employee-resignation",
    "comum-acordo": "mutual-agreement",
}


class TerminationType(str, Enum):
    """How the employment contract ended; selects notice / FGTS fine policy."""
    WITHOUT_JUST_CAUSE = "without-just-cause"
    JUST_CAUSE = "just-cause"
    EMPLOYEE_RESIGNATION = "employee-resignation"
    MUTUAL_AGREEMENT = "mutual-agreement"

    @classmethod
    def _missing_(cls, value):
        # Accept the Portuguese codes used on payroll forms
        if isinstance(value, str):
            alias = _PT_ALIASES.get(value.strip().lower())
            if alias is not None:
                return cls(alias)
        return None


# ── Engine results ───────────────────────────────────────────────────────

class SalaryResult(BaseModel):
    """Monthly net-pay breakdown."""
    grossSalary: float
    inss: float = Field(..., description="Social-security contribution")
    irrf: float = Field(..., description="Income tax withheld at source")
    netSalary: float
    fgts: float = Field(..., description="Employer FGTS deposit (8% of gross)")
    discounts: float = Field(..., description="inss + irrf + other discounts")


class VacationResult(BaseModel):
    """Vacation settlement.

    ``vacationValue`` and ``oneThirdBonus`` include the unused/expired days
    being paid out; only the current-period part is taxed.
    """
    baseSalary: float
    vacationValue: float
    oneThirdBonus: float
    grossTotal: float
    inss: float
    irrf: float
    netTotal: float
    abonoPecuniario: float = 0.0
    abonoOneThird: float = 0.0


class OvertimeResult(BaseModel):
    hourlyRate: float
    overtimeRate: float = Field(..., description="Hourly rate with surcharge applied")
    overtimeValue: float
    totalValue: float


class TerminationResult(BaseModel):
    """Severance settlement.

    ``proportionalVacation`` and ``vacationOneThird`` include the unused
    vacation payout.  INSS/IRRF are levied on salary balance + 13th only.
    """
    salaryBalance: float
    proportionalThirteenth: float
    proportionalVacation: float
    vacationOneThird: float
    noticePeriod: float = 0.0
    fgtsFine: float = 0.0
    grossTotal: float
    inss: float
    irrf: float
    netTotal: float


# ── 1. Salary  (/salary) ─────────────────────────────────────────────────

class SalaryRequest(BaseModel):
    grossSalary: float = Field(..., ge=0, description="Monthly gross salary in BRL")
    dependents: int = Field(0, ge=0, description="IRRF dependents")
    otherDiscounts: float = Field(0, ge=0, description="Other payroll deductions")
    bonuses: float = Field(0, ge=0, description="Bonuses added to the gross salary")


# ── 2. Overtime  (/overtime) ─────────────────────────────────────────────

class OvertimeRequest(BaseModel):
    salary: float = Field(..., ge=0)
    monthlyHours: float = Field(..., gt=0, description="Contracted hours per month (e.g. 220)")
    overtimeHours: float = Field(..., ge=0)
    percentage: float = Field(50, ge=0, description="Surcharge: 50 on weekdays, 100 on Sundays/holidays")


# ── 3. Vacation  (/vacation) ─────────────────────────────────────────────

class VacationRequest(BaseModel):
    salary: float = Field(..., ge=0)
    days: int = Field(30, ge=1, le=30, description="Rest days taken in the current period")
    sellTenDays: bool = Field(False, description="Cash out 10 days (abono pecuniário)")
    dependents: int = Field(0, ge=0)
    unusedVacationDays: float = Field(0, ge=0, description="Expired vacation days being paid")
    bonuses: float = Field(0, ge=0)


# ── 4. Termination  (/termination) ───────────────────────────────────────

class TerminationRequest(BaseModel):
    salary: float = Field(..., ge=0)
    startDate: str = Field(..., description="Hiring date (YYYY-MM-DD or DD/MM/YYYY)")
    endDate: str = Field(..., description="Termination date (YYYY-MM-DD or DD/MM/YYYY)")
    type: str = Field(TerminationType.WITHOUT_JUST_CAUSE.value, description="Termination type")
    fgtsBalance: float = Field(0, ge=0)
    unusedVacationDays: float = Field(0, ge=0)
    bonuses: float = Field(0, ge=0)


# ── 5. Tables  (/tables) ─────────────────────────────────────────────────

class BracketOut(BaseModel):
    upTo: Optional[float] = Field(..., description="Inclusive upper bound; null for the open top tier")
    rate: float
    floor: float = Field(..., description="Amount the rate is applied above")
    offset: float = Field(..., description="Added after applying the rate (negative = deduction)")


class TablesResponse(BaseModel):
    inss: List[BracketOut]
    irrf: List[BracketOut]
    dependentDeduction: float
    fgtsRate: float


# ── 6. Performance Report  (/performance) ────────────────────────────────

class PerformanceResponse(BaseModel):
    time: str = Field(..., description="Last response time (HH:mm:ss.SSS)")
    memory: str = Field(..., description="Current memory usage (e.g. '123.45 MB')")
    threads: int = Field(..., description="Number of active threads")
