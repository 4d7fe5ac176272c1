"""
Global pytest configuration and fixtures for jeopardy board tests

Provides:
- Test markers
- A styling-free blessed terminal
"""

import io

import pytest
from blessed import Terminal


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom settings"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "tui: Terminal interface tests")


# ============================================================================
# Terminal Fixture
# ============================================================================

@pytest.fixture
def term():
    """Terminal writing to a buffer, with styling off"""
    return Terminal(stream=io.StringIO(), force_styling=None)
