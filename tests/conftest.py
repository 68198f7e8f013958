"""Shared pytest fixtures for beanwire tests."""

from __future__ import annotations

import logging

import pytest

from beanwire.container import Container
from beanwire.registry import BeanRegistry
from beanwire.settings import BeanwireSettings


@pytest.fixture()
def settings() -> BeanwireSettings:
    """Settings that leave logging configuration to pytest."""
    return BeanwireSettings(configure_logging=False)


@pytest.fixture()
def registry() -> BeanRegistry:
    return BeanRegistry()


@pytest.fixture()
def container(settings: BeanwireSettings, registry: BeanRegistry) -> Container:
    """Container sharing the ``registry`` fixture."""
    return Container(settings, registry=registry)


@pytest.fixture()
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture every ``beanwire`` record down to DEBUG."""
    caplog.set_level(logging.DEBUG, logger="beanwire")
    return caplog
