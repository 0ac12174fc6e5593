"""Global pytest fixtures for backport."""

import logging

import pytest

from backport import charsets


@pytest.fixture
def debug_records(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records emitted by the backport loggers."""
    caplog.set_level(logging.DEBUG, logger="backport")
    return caplog


@pytest.fixture(params=["ISO_8859_1", "UTF_8"])
def charset(request: pytest.FixtureRequest) -> charsets.Charset:
    """Parametrize over the two pre-resolved charset constants."""
    return getattr(charsets, request.param)
