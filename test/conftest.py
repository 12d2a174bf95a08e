# Test type: Configuration
# Validation to be executed: Shared fixtures for all test modules
# Command: pytest test/ -v (this file is auto-loaded by pytest)

"""Shared pytest fixtures for the CLT payroll calculator test suite."""

from __future__ import annotations

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from cltcalc.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    """Async HTTP client bound to the FastAPI app (no real server needed)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


# ── Sample data fixtures ─────────────────────────────────────────────────

@pytest.fixture
def employment_period():
    """Hired 2023-01-01, dismissed 2024-06-20 (536 days)."""
    return date(2023, 1, 1), date(2024, 6, 20)


@pytest.fixture
def termination_body():
    """HTTP body matching ``employment_period`` at a 3 000 salary."""
    return {
        "salary": 3000,
        "startDate": "2023-01-01",
        "endDate": "2024-06-20",
        "type": "without-just-cause",
        "fgtsBalance": 5000,
    }
