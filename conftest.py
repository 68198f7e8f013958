pytest_plugins = ["beanwire.integrations.pytest_plugin"]
