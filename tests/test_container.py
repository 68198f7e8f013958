"""End-to-end tests of the scan, classify and register pipeline."""

from __future__ import annotations

import logging
from typing import Any

import pytest

import tests.fixtures.broken_app as broken_app
import tests.fixtures.constructor_app as constructor_app
import tests.fixtures.duplicate_app as duplicate_app
import tests.fixtures.empty_app as empty_app
from beanwire.container import Container, generate_bean_name
from beanwire.markers import Inject, inject
from beanwire.registry import BeanRegistry
from beanwire.settings import BeanwireSettings
from tests.fixtures.chain_app.service_a import ServiceA
from tests.fixtures.chain_app.service_b import ServiceB
from tests.fixtures.chain_app.service_c import ServiceC
from tests.fixtures.demo_app.components.user_component import UserComponent
from tests.fixtures.demo_app.main import Main


class FixedDiscovery:
    """Discovery strategy returning a fixed set of classes."""

    def __init__(self, *components: type[Any]) -> None:
        self.components = set(components)
        self.roots: list[Any] = []

    def discover(self, root: Any) -> set[type[Any]]:
        self.roots.append(root)
        return self.components


class FailingDiscovery:
    def discover(self, root: Any) -> set[type[Any]]:
        msg = "disk unavailable"
        raise OSError(msg)


class MissingAttributeReference:
    dependency: Inject["logging.NoSuchThing"]  # type: ignore[name-defined]


class MalformedReference:
    dependency: Inject["not valid ("]  # type: ignore[name-defined]


class Standalone:
    pass


class Unregistered:
    pass


class WithDefault:
    @inject
    def __init__(self, dependency: Unregistered = None) -> None:  # type: ignore[assignment]
        self.dependency = dependency


class TestDemoApplication:
    def test_user_component_receives_registered_services(self, container: Container) -> None:
        container.run(Main)

        user_component = container.get_bean("UserComponent")
        assert isinstance(user_component, UserComponent)
        assert user_component.database_service is container.get_bean("DatabaseService")
        assert user_component.email_service is container.get_bean("EmailService")
        assert user_component.logging_service is container.get_bean("LoggingService")

    def test_registered_beans_are_usable(self, container: Container) -> None:
        container.run(Main)

        user_component = container.get_bean("UserComponent")
        user_component.perform_all_operations()

        assert container.get_bean("DatabaseService").saved == ["user information"]
        assert container.get_bean("EmailService").sent == ["SENT"]

    def test_every_component_is_registered_once(self, container: Container) -> None:
        container.run(Main)

        assert sorted(container.bean_names()) == [
            "DatabaseService",
            "EmailService",
            "LoggingService",
            "UserComponent",
        ]

    def test_running_twice_keeps_first_instances(self, container: Container) -> None:
        container.run(Main)
        first = container.get_bean("UserComponent")

        container.run(Main)

        assert container.get_bean("UserComponent") is first
        assert len(container.bean_names()) == 4

    def test_discovery_and_registry_are_logged(self, container: Container, debug_logs: pytest.LogCaptureFixture) -> None:
        container.run(Main)

        assert "Found components:" in debug_logs.text
        assert "tests.fixtures.demo_app.components.user_component.UserComponent" in debug_logs.text
        assert "Registered beans:" in debug_logs.text
        assert "- UserComponent (tests.fixtures.demo_app.components.user_component.UserComponent)" in debug_logs.text
        assert "Injected dependency into field: database_service" in debug_logs.text

    def test_unknown_bean_name_returns_none(self, container: Container) -> None:
        container.run(Main)

        assert container.get_bean("PaymentService") is None


def test_package_without_components_yields_empty_registry(container: Container) -> None:
    container.run(empty_app)

    assert container.bean_names() == []


def test_broken_module_does_not_prevent_other_components(container: Container) -> None:
    container.run(broken_app)

    assert container.bean_names() == ["HealthyService"]


class TestMetadataFailures:
    @pytest.mark.parametrize("broken", [MissingAttributeReference, MalformedReference])
    def test_unreadable_annotation_skips_only_that_component(
        self,
        container: Container,
        caplog: pytest.LogCaptureFixture,
        broken: type[Any],
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="beanwire"):
            container.create_and_register_beans([broken, Standalone])

        assert container.bean_names() == ["Standalone"]
        assert f"Failed to read metadata of class: {broken.__module__}.{broken.__qualname__}" in caplog.text

    def test_default_value_does_not_stand_in_for_missing_bean(
        self,
        container: Container,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="beanwire"):
            container.create_and_register_beans([WithDefault])

        assert container.get_bean("WithDefault") is None
        assert "Dependency not found for constructor parameter 'dependency'" in caplog.text


def test_run_swallows_pipeline_errors(container: Container, caplog: pytest.LogCaptureFixture) -> None:
    container.discovery = FailingDiscovery()

    with caplog.at_level(logging.ERROR, logger="beanwire"):
        container.run(Main)

    assert container.bean_names() == []
    assert "Error starting container: disk unavailable" in caplog.text
    assert caplog.records[-1].exc_info is not None


def test_run_with_top_level_module_logs_scan_error(container: Container, caplog: pytest.LogCaptureFixture) -> None:
    class Script:
        pass

    Script.__module__ = "beanwire_missing_module"

    with caplog.at_level(logging.ERROR, logger="beanwire"):
        container.run(Script)

    assert "Error starting container: Cannot determine the module" in caplog.text


def test_custom_discovery_strategy_is_used(settings: BeanwireSettings) -> None:
    discovery = FixedDiscovery(ServiceC)
    container = Container(settings, discovery=discovery)

    container.run(Main)

    assert discovery.roots == [Main]
    assert container.bean_names() == ["ServiceC"]


class TestDependencyChains:
    def test_two_level_chain_is_resolved(self, container: Container) -> None:
        container.create_and_register_beans([ServiceB, ServiceC])

        service_b = container.get_bean("ServiceB")
        assert service_b.service_c is container.get_bean("ServiceC")

    def test_three_level_chain_fails_when_consumer_precedes_its_dependency(
        self,
        container: Container,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="beanwire"):
            container.create_and_register_beans([ServiceA, ServiceB, ServiceC])

        assert container.get_bean("ServiceA") is None
        assert isinstance(container.get_bean("ServiceB"), ServiceB)
        assert isinstance(container.get_bean("ServiceC"), ServiceC)
        assert "Dependency not found for field 'service_b'" in caplog.text
        assert "Failed to create bean for class: tests.fixtures.chain_app.service_a.ServiceA" in caplog.text

    def test_three_level_chain_succeeds_only_when_encounter_order_allows(self, container: Container) -> None:
        container.create_and_register_beans([ServiceB, ServiceA, ServiceC])

        service_a = container.get_bean("ServiceA")
        assert service_a.service_b is container.get_bean("ServiceB")
        assert service_a.service_b.service_c is container.get_bean("ServiceC")

    def test_scanned_three_level_chain_depends_on_set_order(self, container: Container) -> None:
        import tests.fixtures.chain_app as chain_app

        container.run(chain_app)

        assert isinstance(container.get_bean("ServiceC"), ServiceC)
        assert isinstance(container.get_bean("ServiceB"), ServiceB)
        service_a = container.get_bean("ServiceA")
        if service_a is not None:
            assert service_a.service_b is container.get_bean("ServiceB")


class TestDuplicateNames:
    def test_same_simple_name_in_two_packages_keeps_one_bean(
        self,
        container: Container,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="beanwire"):
            container.run(duplicate_app)

        report = container.get_bean("Report")
        assert report.department in {"billing", "shipping"}
        assert container.bean_names() == ["Report"]
        assert "Bean with name 'Report' already exists" in caplog.text

    def test_first_registration_wins(self, container: Container, registry: BeanRegistry) -> None:
        original = ServiceC()
        registry.register("ServiceC", original)

        created = container.create_and_register_bean(ServiceC)

        assert isinstance(created, ServiceC)
        assert created is not original
        assert container.get_bean("ServiceC") is original


class TestConstructorInjection:
    def test_constructor_app_registers_what_it_can(self, container: Container) -> None:
        container.run(constructor_app)

        assert sorted(container.bean_names()) == ["AuditTrail", "Clock", "Metrics", "Repository"]

    def test_injected_init_receives_clock(self, container: Container) -> None:
        container.run(constructor_app)

        repository = container.get_bean("Repository")
        assert repository.clock is container.get_bean("Clock")
        assert repository.metrics is container.get_bean("Metrics")

    def test_alternative_constructor_is_used(self, container: Container) -> None:
        container.run(constructor_app)

        audit_trail = container.get_bean("AuditTrail")
        assert audit_trail.clock is container.get_bean("Clock")
        assert audit_trail.started_at == 42

    def test_abstract_and_unconstructible_components_are_reported(
        self,
        container: Container,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="beanwire"):
            container.run(constructor_app)

        assert "Skipping non-concrete class: tests.fixtures.constructor_app.repository.BaseStore" in caplog.text
        assert "No suitable constructor found for class: Cache" in caplog.text
        assert container.get_bean("Cache") is None
        assert container.get_bean("BaseStore") is None


def test_create_and_register_bean_returns_none_on_failure(container: Container) -> None:
    assert container.create_and_register_bean(ServiceA) is None
    assert container.get_bean("ServiceA") is None


def test_close_empties_registry(settings: BeanwireSettings) -> None:
    with Container(settings) as container:
        container.run(Main)
        assert container.get_bean("UserComponent") is not None

    assert container.get_bean("UserComponent") is None
    assert container.bean_names() == []


def test_generate_bean_name_uses_simple_class_name() -> None:
    assert generate_bean_name(UserComponent) == "UserComponent"
