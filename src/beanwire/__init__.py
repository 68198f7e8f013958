from beanwire.container import Container, generate_bean_name
from beanwire.container_context import ContainerContext, container_context, get_bean, run
from beanwire.exceptions import (
    BeanwireBeanCreationError,
    BeanwireDependencyNotFoundError,
    BeanwireError,
    BeanwireInvalidMetadataError,
    BeanwireNoSuitableConstructorError,
    BeanwireScanError,
)
from beanwire.markers import Inject, component, inject
from beanwire.registry import BeanRegistry
from beanwire.scanner import DiscoveryStrategy, PackageScanner
from beanwire.settings import BeanwireSettings

__all__ = [
    "BeanRegistry",
    "BeanwireBeanCreationError",
    "BeanwireDependencyNotFoundError",
    "BeanwireError",
    "BeanwireInvalidMetadataError",
    "BeanwireNoSuitableConstructorError",
    "BeanwireScanError",
    "BeanwireSettings",
    "Container",
    "ContainerContext",
    "DiscoveryStrategy",
    "Inject",
    "PackageScanner",
    "component",
    "container_context",
    "generate_bean_name",
    "get_bean",
    "inject",
    "run",
]
