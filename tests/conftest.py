"""Shared fixtures for the pivot_tools test suite."""

import sys
import os
import pytest

# Ensure the package root is importable
PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PACKAGE_ROOT not in sys.path:
    sys.path.insert(0, PACKAGE_ROOT)

from tests.mocks.harmony import FakeHostSession


# ---------------------------------------------------------------------------
# Cel sequences
# ---------------------------------------------------------------------------

@pytest.fixture
def abcbd_cels():
    """Frames 1..5 exposing A, B, C, B, D."""
    return ["A", "B", "C", "B", "D"]


# ---------------------------------------------------------------------------
# Mock host
# ---------------------------------------------------------------------------

@pytest.fixture
def session(abcbd_cels):
    """Square-unit fake host for the A, B, C, B, D scene, pivots (0,0) -> (3,0)."""
    return FakeHostSession(
        cels=abcbd_cels,
        pivots={1: (0.0, 0.0), 5: (3.0, 0.0)},
        aspect_ratio=(1.0, 1.0),
    )


@pytest.fixture
def make_session():
    """Factory for FakeHostSession with custom settings."""
    return FakeHostSession
