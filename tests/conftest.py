"""
Pytest configuration and fixtures for LabelSense tests.
"""

import sys
from pathlib import Path
from typing import AsyncGenerator, List

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from labelsense.api.main import create_app
from labelsense.api.dependencies import Settings, get_settings
from labelsense.core.types import RawFragment


# =============================================================================
# Test Settings
# =============================================================================

def get_test_settings() -> Settings:
    """Return settings configured for testing."""
    return Settings(environment="test", debug=True)


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest_asyncio.fixture(scope="function")
async def app():
    """Create FastAPI application for testing."""
    application = create_app(settings=get_test_settings())

    # Override dependencies
    application.dependency_overrides[get_settings] = get_test_settings

    yield application

    application.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Provide async HTTP client for API tests."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# =============================================================================
# OCR Fragment Fixtures
# =============================================================================

@pytest.fixture
def bilingual_label_fragments() -> List[RawFragment]:
    """Vietnamese/English chips label, fragments in engine (not reading) order."""
    return [
        RawFragment("Energy: 536 kcal", 0.88, 0.40, 0.60),
        RawFragment("Potato, sunflower oil, salt", 0.93, 0.70, 0.305),
        RawFragment("Thành phần: khoai tây, dầu, muối", 0.91, 0.50, 0.10),
        RawFragment("Ingredients:", 0.95, 0.20, 0.30),
        RawFragment("Contains: may contain traces of milk", 0.85, 0.50, 0.45),
        RawFragment("Nutrition Facts", 0.90, 0.30, 0.55),
        RawFragment("smudge", 0.20, 0.90, 0.90),
    ]


@pytest.fixture
def front_fragments() -> List[RawFragment]:
    """Front of a crisps pack."""
    return [
        RawFragment("Lay's", 0.45, 0.50, 0.10),
        RawFragment("Classic Salted", 0.80, 0.50, 0.16),
        RawFragment("Net Wt 52g", 0.70, 0.80, 0.85),
        RawFragment("₫12,000", 0.35, 0.15, 0.90),
    ]


@pytest.fixture
def fragment_payload():
    """Convert fragments to their JSON request form."""
    def _payload(fragments: List[RawFragment]) -> list:
        return [
            {
                "text": f.text,
                "confidence": f.confidence,
                "center_x": f.center_x,
                "center_y": f.center_y,
            }
            for f in fragments
        ]
    return _payload
