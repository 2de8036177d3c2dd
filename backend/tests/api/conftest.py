"""API test infrastructure: async httpx client against the ASGI app."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def app():
    from app.core.deps import get_catalog
    from app.main import create_app

    application = create_app()
    get_catalog.cache_clear()

    yield application

    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------

@pytest.fixture
def base_body() -> dict:
    """5,000 kWh electricity at 0.20 with 4 %/yr over 3 years."""
    return {
        "start_year": 2024,
        "horizon_years": 3,
        "line_items": [
            {
                "energy_carrier": "electricity",
                "annual_consumption_kwh": "5000",
                "base_unit_price": "0,20",
            },
        ],
        "escalation_rates": {"electricity": 4},
    }


@pytest.fixture
def comparison_body(base_body: dict) -> dict:
    """Base bill plus a cheaper alternative using less electricity."""
    return {
        **base_body,
        "alternative": {
            "line_items": [
                {
                    "energy_carrier": "electricity",
                    "annual_consumption_kwh": 4000,
                    "base_unit_price": 0.20,
                },
            ],
        },
    }
