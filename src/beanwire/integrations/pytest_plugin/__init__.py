from beanwire.integrations.pytest_plugin.plugin import beanwire_container, beanwire_settings

__all__ = ["beanwire_container", "beanwire_settings"]
