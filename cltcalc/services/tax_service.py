"""Brazilian payroll withholding: INSS and IRRF (2024/2025 tables).

Both tables are progressive and evaluated by the same routine: pick the
first tier whose inclusive upper bound is >= the base (the top tier is
open-ended) and return ``(base − floor) × rate + offset``.

INSS (stepped form, capped):
    ≤ 1 412,00   → base × 7.5 %
    ≤ 2 666,68   → (base − 1 412,00) × 9 %  + 105,90
    ≤ 4 000,03   → (base − 2 666,68) × 12 % + 218,82
    ≤ 7 786,02   → (base − 4 000,03) × 14 % + 378,82
    above        → 908,85 (ceiling)

IRRF (rate minus deduction, on base − INSS − 189,59 per dependent):
    ≤ 2 259,20   → 0
    ≤ 2 826,65   → base × 7.5 %  − 169,44
    ≤ 3 751,05   → base × 15 %   − 381,44
    ≤ 4 664,68   → base × 22.5 % − 662,77
    above        → base × 27.5 % − 896,00

The IRRF tiers are deliberately not floored at zero: the lower edge of the
second tier prices slightly negative, exactly as the official formula does.
"""

from __future__ import annotations
from typing import NamedTuple, Sequence
from cltcalc.config import settings


class Bracket(NamedTuple):
    upper: float     # inclusive; inf for the top tier
    rate: float
    floor: float     # rate applies to (base − floor)
    offset: float    # added after the rate


INF = float("inf")

# The INSS offsets are written as the sum of the previous tiers' maxima
INSS_TABLE: tuple[Bracket, ...] = (
    Bracket(1412.00, 0.075, 0.0, 0.0),
    Bracket(2666.68, 0.09, 1412.00, 105.9),
    Bracket(4000.03, 0.12, 2666.68, 105.9 + 112.92),
    Bracket(7786.02, 0.14, 4000.03, 105.9 + 112.92 + 160.00),
    Bracket(INF, 0.0, 0.0, 908.85),
)

IRRF_TABLE: tuple[Bracket, ...] = (
    Bracket(2259.20, 0.0, 0.0, 0.0),
    Bracket(2826.65, 0.075, 0.0, -169.44),
    Bracket(3751.05, 0.15, 0.0, -381.44),
    Bracket(4664.68, 0.225, 0.0, -662.77),
    Bracket(INF, 0.275, 0.0, -896.00),
)


def find_bracket(base: float, table: Sequence[Bracket]) -> Bracket:
    """Return the lowest tier whose upper bound is >= *base*.

    Ties on a boundary resolve to the lower (cheaper) tier.  The last tier
    always matches.
    """
    for bracket in table:
        if base <= bracket.upper:
            return bracket
    return table[-1]


def evaluate_progressive(base: float, table: Sequence[Bracket]) -> float:
    """Apply a progressive table to *base*."""
    bracket = find_bracket(base, table)
    if bracket.rate == 0.0:
        return bracket.offset
    return (base - bracket.floor) * bracket.rate + bracket.offset


def calculate_inss(base: float) -> float:
    """Social-security contribution on *base*, capped at the ceiling."""
    return evaluate_progressive(base, INSS_TABLE)


def irrf_taxable_base(base: float, inss: float, dependents: int = 0) -> float:
    """Gross minus INSS minus the flat per-dependent allowance.  May be negative."""
    return base - inss - (dependents * settings.DEPENDENT_DEDUCTION)


def calculate_irrf(base: float, inss: float, dependents: int = 0) -> float:
    """Income tax withheld on *base* after INSS and dependent allowances.

    Parameters
    ----------
    base:
        Pre-deduction amount (gross salary, vacation pay, ...).
    inss:
        Contribution already computed for the same base.
    dependents:
        Number of declared dependents.

    Returns
    -------
    float
        The tax, unrounded.
    """
    taxable = irrf_taxable_base(base, inss, dependents)
    return evaluate_progressive(taxable, IRRF_TABLE)
