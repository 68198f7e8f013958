from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class BeanwireSettings(BaseSettings):
    """Container configuration read from ``BEANWIRE_*`` environment variables.

    Examples:
        .. code-block:: bash

            BEANWIRE_LOG_LEVEL=DEBUG python -m app.main

    """

    model_config = SettingsConfigDict(env_prefix="BEANWIRE_", frozen=True)

    log_level: str = "INFO"
    """Level of the ``beanwire`` logger. ``DEBUG`` shows every resolution and injection."""

    log_format: str = "%(levelname)s %(name)s: %(message)s"

    configure_logging: bool = True
    """Attach a stderr handler to the ``beanwire`` logger when a container is created."""

    ignored_directories: tuple[str, ...] = ("__pycache__",)
    """Directory names the package scanner never enters."""


__all__ = ["BeanwireSettings"]
