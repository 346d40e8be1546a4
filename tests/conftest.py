"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures and configuration shared by every test package.
"""

import logging

import pytest

from bjadvisor.blackjack.decision_logger import decision_logger


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "strategy: mark test as testing strategy decisions"
    )
    config.addinivalue_line(
        "markers", "counting: mark test as testing the Hi-Lo count"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )


@pytest.fixture(autouse=True)
def reset_decision_logger():
    """Start every test with an empty decision history at the default level."""
    original_level = decision_logger.logger.level
    decision_logger.clear_history()
    yield
    decision_logger.clear_history()
    decision_logger.logger.setLevel(original_level)


@pytest.fixture
def capture_decisions():
    """Fixture to capture decision logs for a test."""
    decision_logger.logger.setLevel(logging.DEBUG)
    return decision_logger
