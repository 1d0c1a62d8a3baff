"""
spl_bankrun_py Test Configuration
=================================
Shared fixtures and pytest markers for the test suite.
"""

import os
import sys

import pytest
import pytest_asyncio
from solders.bankrun import start
from solders.keypair import Keypair

# Make the package importable without an install
sys.path.insert(
    0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "py")
)

from tests.mocks import FakeBanksClient  # noqa: E402


# ============================================================================
# PYTEST MARKERS
# ============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: runs against a real bankrun validator"
    )


# ============================================================================
# SHARED FIXTURES
# ============================================================================

@pytest.fixture
def payer() -> Keypair:
    return Keypair()


@pytest.fixture
def fake_banks_client() -> FakeBanksClient:
    """Banks client double that records every processed transaction."""
    return FakeBanksClient()


@pytest_asyncio.fixture
async def bankrun_context():
    """A fresh in-process validator with the SPL programs loaded."""
    return await start()
