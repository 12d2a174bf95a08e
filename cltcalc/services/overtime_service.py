"""Overtime pay.

hourly   = salary / monthly hours
overtime = hourly × (1 + percentage / 100) × overtime hours
"""

from __future__ import annotations
from cltcalc.config import settings
from cltcalc.models.schemas import OvertimeResult


def calculate_overtime(
    salary: float,
    monthly_hours: float,
    overtime_hours: float,
    percentage: float = settings.DEFAULT_OVERTIME_PERCENTAGE,
) -> OvertimeResult:
    """Value of *overtime_hours* at a *percentage* surcharge.

    *monthly_hours* must be positive; the caller guarantees it.
    """
    hourly_rate = salary / monthly_hours
    overtime_rate = hourly_rate * (1 + percentage / 100)
    overtime_value = overtime_rate * overtime_hours

    return OvertimeResult(
        hourlyRate=hourly_rate,
        overtimeRate=overtime_rate,
        overtimeValue=overtime_value,
        totalValue=overtime_value,
    )
