"""
Shared pytest configuration for all tests.
Sets up the test environment and common fixtures.
"""
import os
import sys
from pathlib import Path

import pytest

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

# Load test environment variables before any imports
from dotenv import load_dotenv

# Load test-specific environment variables
test_env_path = Path(__file__).parent.parent.parent / ".env.test"
if test_env_path.exists():
    load_dotenv(test_env_path, override=True)
else:
    # Fallback to hardcoded test values if .env.test doesn't exist
    os.environ["LOG_LEVEL"] = "DEBUG"
    os.environ["OMIT_ABSENT_FIELDS"] = "true"

from compass.models.location import Location, LocationReading
from compass.models.pin import Pin


@pytest.fixture
def sample_document():
    """Pin document as returned by the store."""
    return {
        "location": {"lat": 1.0, "lng": 2.0},
        "_id": "abc123",
        "pinId": None,
        "createdAt": "2021-04-09T00:00:00Z",
        "__v": 3
    }


@pytest.fixture
def full_pin():
    """Pin with every field present."""
    return Pin(
        location=Location(lat=43.6532, lng=-79.3832),
        id="606fb2c1e4b0a1f3c8d2e911",
        pin_id="pin-7",
        created_at="2021-04-09T14:22:10.512Z",
        version=0
    )


@pytest.fixture
def make_reading():
    """Factory for numbered location readings."""
    def _make(i: int) -> LocationReading:
        return LocationReading(
            latitude=(i % 180) - 90.0,
            longitude=(i % 360) - 180.0,
            horizontal_accuracy=5.0,
            speed=float(i)
        )
    return _make
