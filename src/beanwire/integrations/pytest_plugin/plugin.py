from __future__ import annotations

from collections.abc import Iterator

import pytest

from beanwire.container import Container
from beanwire.settings import BeanwireSettings


@pytest.fixture()
def beanwire_settings() -> BeanwireSettings:
    """Settings used by ``beanwire_container``.

    Logging configuration is left to pytest so ``caplog`` sees every record.
    Override this fixture to change the scanner configuration for a test module.
    """
    return BeanwireSettings(configure_logging=False)


@pytest.fixture()
def beanwire_container(beanwire_settings: BeanwireSettings) -> Iterator[Container]:
    """Create a per-test container and close it when the test ends.

    Yields:
        A new ``Container`` instance with an empty registry.

    """
    with Container(beanwire_settings) as container:
        yield container
