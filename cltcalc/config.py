"""Application configuration loaded from environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    """Centralized application settings."""

    # Server
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "8000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Statutory constants (2024/2025).  Not env-overridable: the legal
    # formulas have to reproduce exactly.
    FGTS_RATE: float = 0.08
    DEPENDENT_DEDUCTION: float = 189.59   # IRRF allowance per dependent
    DAYS_PER_MONTH: int = 30              # commercial month
    MONTHS_PER_YEAR: int = 12
    SOLD_VACATION_DAYS: int = 10          # abono pecuniário
    DEFAULT_OVERTIME_PERCENTAGE: float = 50.0

    # Termination penalties on the FGTS balance
    FGTS_FINE_WITHOUT_CAUSE: float = 0.40
    FGTS_FINE_MUTUAL_AGREEMENT: float = 0.20
    NOTICE_MUTUAL_AGREEMENT: float = 0.5  # fraction of base salary


settings = Settings()
