"""Routers for the CLT settlement endpoints:
    POST  /clt/v1/salary
    POST  /clt/v1/overtime
    POST  /clt/v1/vacation
    POST  /clt/v1/termination
    GET   /clt/v1/tables
"""

from __future__ import annotations
import logging
import math
from typing import Optional, Sequence
from fastapi import APIRouter, HTTPException
from cltcalc.config import settings
from cltcalc.models.schemas import (
    BracketOut,
    OvertimeRequest,
    OvertimeResult,
    SalaryRequest,
    SalaryResult,
    TablesResponse,
    TerminationRequest,
    TerminationResult,
    TerminationType,
    VacationRequest,
    VacationResult,
)
from cltcalc.services.overtime_service import calculate_overtime
from cltcalc.services.salary_service import calculate_salary
from cltcalc.services.tax_service import IRRF_TABLE, INSS_TABLE, Bracket
from cltcalc.services.termination_service import calculate_termination
from cltcalc.services.vacation_service import calculate_vacation
from cltcalc.utils.helpers import parse_date

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/clt/v1",
    tags=["Payroll"],
)

# ── 1. Monthly salary ────────────────────────────────────────────────────

@router.post(
    "/salary",
    response_model=SalaryResult,
    summary="Net monthly salary after INSS and IRRF",
)
async def salary(body: SalaryRequest) -> SalaryResult:
    """Bonuses are added to the gross salary before withholding."""
    gross = body.grossSalary + body.bonuses
    logger.debug("Salary settlement: gross=%s dependents=%s", gross, body.dependents)
    return calculate_salary(gross, body.dependents, body.otherDiscounts)


# ── 2. Overtime ──────────────────────────────────────────────────────────

@router.post(
    "/overtime",
    response_model=OvertimeResult,
    summary="Overtime pay at a percentage surcharge",
)
async def overtime(body: OvertimeRequest) -> OvertimeResult:
    logger.debug(
        "Overtime: salary=%s hours=%s/%s pct=%s",
        body.salary, body.overtimeHours, body.monthlyHours, body.percentage,
    )
    return calculate_overtime(
        salary=body.salary,
        monthly_hours=body.monthlyHours,
        overtime_hours=body.overtimeHours,
        percentage=body.percentage,
    )


# ── 3. Vacation ──────────────────────────────────────────────────────────

@router.post(
    "/vacation",
    response_model=VacationResult,
    summary="Vacation settlement with 1/3 bonus and optional abono",
)
async def vacation(body: VacationRequest) -> VacationResult:
    """Only the current-period vacation + 1/3 is taxed; expired days and the
    sold 10 days are paid on top, untaxed.
    """
    logger.debug(
        "Vacation: salary=%s days=%s sell=%s unused=%s",
        body.salary, body.days, body.sellTenDays, body.unusedVacationDays,
    )
    return calculate_vacation(
        salary=body.salary,
        days=body.days,
        sell_ten_days=body.sellTenDays,
        dependents=body.dependents,
        unused_vacation_days=body.unusedVacationDays,
        bonuses=body.bonuses,
    )


# ── 4. Termination ───────────────────────────────────────────────────────

@router.post(
    "/termination",
    response_model=TerminationResult,
    summary="Severance settlement by termination type",
)
async def termination(body: TerminationRequest) -> TerminationResult:
    """Salary balance, proportional 13th and vacation, notice period and
    FGTS fine.  Accepts the Portuguese type codes as aliases.
    """
    try:
        start = parse_date(body.startDate)
        end = parse_date(body.endDate)
        termination_type = TerminationType(body.type)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    logger.debug(
        "Termination: salary=%s %s → %s type=%s",
        body.salary, start, end, termination_type.value,
    )
    return calculate_termination(
        salary=body.salary,
        start_date=start,
        end_date=end,
        termination_type=termination_type,
        fgts_balance=body.fgtsBalance,
        unused_vacation_days=body.unusedVacationDays,
        bonuses=body.bonuses,
    )


# ── 5. Tables ────────────────────────────────────────────────────────────

def _brackets_out(table: Sequence[Bracket]) -> list[BracketOut]:
    out: list[BracketOut] = []
    for b in table:
        up_to: Optional[float] = None if math.isinf(b.upper) else b.upper
        out.append(BracketOut(upTo=up_to, rate=b.rate, floor=b.floor, offset=b.offset))
    return out


@router.get(
    "/tables",
    response_model=TablesResponse,
    summary="Embedded 2024/2025 INSS and IRRF tables",
)
async def tables() -> TablesResponse:
    return TablesResponse(
        inss=_brackets_out(INSS_TABLE),
        irrf=_brackets_out(IRRF_TABLE),
        dependentDeduction=settings.DEPENDENT_DEDUCTION,
        fgtsRate=settings.FGTS_RATE,
    )
