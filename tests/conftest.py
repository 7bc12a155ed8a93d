"""
Pytest configuration for vireo tests.

Provides:
- Hypothesis profiles for property-based tests (select with HYPOTHESIS_PROFILE)
- Shared fixtures: a fresh program registry per test
"""

import os
import pytest

from hypothesis import settings

from vireo.program_registry import clear_registry

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# print_blob=True makes failures easy to reproduce.
# Omitting database= keeps the default .hypothesis/ example cache.

settings.register_profile(
    "default",
    print_blob=True,
    derandomize=False,
)

settings.register_profile(
    "ci",
    print_blob=True,
    derandomize=True,
    max_examples=200,
)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def clean_registry():
    """Empty the program registry before and after a test."""
    clear_registry()
    yield
    clear_registry()
