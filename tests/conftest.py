"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging(monkeypatch):
    """Keep checker logging quiet and configuration at its defaults."""
    monkeypatch.setenv('RELCHECK_LOG_LEVEL', 'WARNING')
    monkeypatch.delenv('RELCHECK_SEED', raising=False)
    monkeypatch.delenv('RELCHECK_FUSED_POLL_MARGIN', raising=False)

    logging.getLogger().setLevel(logging.WARNING)
    logging.getLogger('relcheck').setLevel(logging.WARNING)
