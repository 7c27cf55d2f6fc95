"""Shared test fixtures for refinance."""

import tempfile
from datetime import date

import pytest
from loguru import logger

from refinance.financial.models import LoanSpec

TODAY = date(2026, 10, 18)


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def fresh_loan():
    """300k, 30 years at 6.5%, starting this month, paying standard P&I plus 400 escrow."""
    return LoanSpec(
        principal=300_000,
        term_years=30,
        annual_rate_percent=6.5,
        start_date=TODAY,
        monthly_payment=2_296.20,
        escrow=400,
    )


@pytest.fixture
def log_messages():
    """Capture loguru records at WARNING and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(str(msg)), level="WARNING", format="{level} {message}")
    yield messages
    logger.remove(handler_id)
