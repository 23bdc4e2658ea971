"""Shared test fixtures."""

from datetime import date
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from postprep.domain.services import FrontmatterSynthesizer
from postprep.ports.dates import ClockPort, VersionControlPort

FIXTURES = Path(__file__).parent / "fixtures"
SAMPLE_POST = FIXTURES / "posts" / "functional-interfaces-over-utility-classes.md"


@pytest.fixture
def sample_post_path() -> Path:
    return SAMPLE_POST


@pytest.fixture
def mock_vcs() -> MagicMock:
    """Mock version-control port with no history."""
    mock = MagicMock(spec=VersionControlPort)
    mock.last_modified.return_value = None
    return mock


@pytest.fixture
def mock_clock() -> MagicMock:
    """Mock clock fixed at 2026-03-01."""
    mock = MagicMock(spec=ClockPort)
    mock.today.return_value = date(2026, 3, 1)
    return mock


@pytest.fixture
def synthesizer(mock_vcs: MagicMock, mock_clock: MagicMock) -> FrontmatterSynthesizer:
    return FrontmatterSynthesizer(vcs=mock_vcs, clock=mock_clock)
