#!/usr/bin/env python3
"""
Test script to verify the singleton pattern implementation.

This script tests:
1. Singleton instance creation and uniqueness for all three variants
2. Thread safety of the synchronized and double-checked variants
3. Eager construction at class definition
4. Configuration management
5. Connection management
6. Service manager functionality

Run it with pytest, or directly to get a readable report.
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from creational.core.config_manager import ConfigManager, config_manager
from creational.core.connection_manager import ConnectionManager, get_connection_manager
from creational.core.patterns.singleton import (
    DoubleCheckedSingleton,
    DoubleCheckedSingletonMeta,
    EagerSingleton,
    Singleton,
    SingletonMeta,
)
from creational.core.service_manager import ServiceManager, service_manager


class SlowSynchronized(Singleton):
    constructions = 0

    def _setup(self):
        time.sleep(0.01)
        type(self).constructions += 1


class SlowDoubleChecked(DoubleCheckedSingleton):
    constructions = 0

    def _setup(self):
        time.sleep(0.01)
        type(self).constructions += 1


def _call_concurrently(accessor, workers=16):
    barrier = threading.Barrier(workers)

    def call():
        barrier.wait()
        return accessor()

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(call) for _ in range(workers)]
        return [future.result() for future in futures]


def test_singleton_uniqueness():
    """Test that singletons return the same instance."""
    config1 = ConfigManager.get_instance()
    config2 = ConfigManager()
    assert config1 is config2 is config_manager, "ConfigManager instances are not the same!"

    connection1 = ConnectionManager.get_instance()
    connection2 = ConnectionManager()
    assert connection1 is connection2 is get_connection_manager(), "ConnectionManager instances are not the same!"

    service1 = ServiceManager.get_instance()
    service2 = ServiceManager()
    assert service1 is service2 is service_manager, "ServiceManager instances are not the same!"


def test_constructor_arguments_after_first_call_are_ignored():
    class Counter(metaclass=SingletonMeta):
        def __init__(self, value):
            self.value = value

    first = Counter(1)
    second = Counter(2)
    assert first is second
    assert second.value == 1, "Second constructor call must not re-initialize the instance"


def test_each_class_gets_its_own_instance():
    class First(metaclass=DoubleCheckedSingletonMeta):
        pass

    class Second(metaclass=DoubleCheckedSingletonMeta):
        pass

    assert First() is First()
    assert First() is not Second()


def test_synchronized_singleton_thread_safety():
    instances = _call_concurrently(SlowSynchronized.get_instance)

    assert len(set(id(instance) for instance in instances)) == 1, "Synchronized singleton not thread-safe"
    assert SlowSynchronized.constructions == 1


def test_double_checked_singleton_thread_safety():
    instances = _call_concurrently(SlowDoubleChecked.get_instance)

    assert len(set(id(instance) for instance in instances)) == 1, "Double-checked singleton not thread-safe"
    assert SlowDoubleChecked.constructions == 1


def test_thread_safety_of_managers():
    """Test thread safety of the application managers."""
    instances = {"config": [], "connection": [], "service": []}

    def create_instances():
        instances["config"].append(ConfigManager.get_instance())
        instances["connection"].append(ConnectionManager.get_instance())
        instances["service"].append(ServiceManager.get_instance())

    with ThreadPoolExecutor(max_workers=10) as executor:
        futures = [executor.submit(create_instances) for _ in range(20)]
        for future in futures:
            future.result()

    for name, created in instances.items():
        assert len(set(id(instance) for instance in created)) == 1, f"{name} not thread-safe"


def test_eager_singleton_is_built_at_class_definition():
    created = []

    class Eager(EagerSingleton):
        def _setup(self):
            created.append(self)

    assert len(created) == 1, "Eager singleton must exist before the first accessor call"
    assert Eager() is created[0]
    assert Eager.get_instance() is created[0]
    assert len(created) == 1


def test_eager_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        EagerSingleton()


def test_reset_reruns_setup_on_same_instance():
    class Resettable(Singleton):
        setups = 0

        def _setup(self):
            type(self).setups += 1

    instance = Resettable()
    instance.reset()
    assert Resettable.setups == 2
    assert Resettable() is instance


def test_config_manager():
    """Test ConfigManager functionality."""
    settings = config_manager.settings
    assert settings is not None, "Settings not accessible"

    assert config_manager.get_database_url(), "Database URL not available"
    assert isinstance(config_manager.is_debug_mode(), bool), "Debug mode not boolean"

    catalog_settings = config_manager.get_catalog_settings()
    assert "docs_title" in catalog_settings, "Catalog settings incomplete"


def test_config_manager_reload(monkeypatch):
    monkeypatch.setenv("DOCS_TITLE", "Patterns Handbook")
    try:
        config_manager.reload_settings()
        assert config_manager.get_catalog_settings()["docs_title"] == "Patterns Handbook"
    finally:
        monkeypatch.delenv("DOCS_TITLE")
        config_manager.reload_settings()


def test_connection_manager():
    """Test ConnectionManager functionality."""
    connection = get_connection_manager()

    assert connection.engine is not None, "Engine not accessible"
    assert connection.check_connection() is True, "Connection check failed"

    info = connection.get_connection_info()
    assert isinstance(info, dict), "Connection info not a dictionary"
    assert info["status"] == "initialized", "Connection info missing status"


def test_service_manager():
    """Test ServiceManager functionality."""
    service = service_manager
    service.initialize()

    assert service.has_service("config"), "Config service not registered"
    assert service.has_service("connection"), "Connection service not registered"
    assert service.has_service("prototypes"), "Prototype registry not registered"

    assert service.get_config_manager() is config_manager
    assert service.get_connection_manager() is ConnectionManager.get_instance()

    services = service.list_services()
    assert {"config", "connection", "prototypes"} <= set(services)

    test_service = {"test": "data"}
    service.register_service("test_service", test_service)
    assert service.has_service("test_service"), "Custom service not registered"
    assert service.get_service("test_service") == test_service, "Custom service not retrieved correctly"
    assert service.unregister_service("test_service") is True
    assert not service.has_service("test_service"), "Custom service not unregistered"
    assert service.unregister_service("test_service") is False

    status = service.get_application_status()
    assert status["initialized"] is True
    assert status["prototypes_registered"] >= 2
    assert status["application_healthy"] is True


def test_service_manager_initialize_is_idempotent():
    service_manager.initialize()
    registry = service_manager.get_prototype_registry()
    service_manager.initialize()
    assert service_manager.get_prototype_registry() is registry


def main():
    """Run all tests."""
    print("🔍 Testing Singleton Pattern Implementation")
    print("=" * 50)

    try:
        test_singleton_uniqueness()
        test_constructor_arguments_after_first_call_are_ignored()
        test_each_class_gets_its_own_instance()
        test_synchronized_singleton_thread_safety()
        test_double_checked_singleton_thread_safety()
        test_thread_safety_of_managers()
        test_eager_singleton_is_built_at_class_definition()
        test_eager_base_cannot_be_instantiated()
        test_reset_reruns_setup_on_same_instance()
        test_config_manager()
        with pytest.MonkeyPatch.context() as monkeypatch:
            test_config_manager_reload(monkeypatch)
        test_connection_manager()
        test_service_manager()
        test_service_manager_initialize_is_idempotent()

        print("\n" + "=" * 50)
        print("🎉 All tests passed! Singleton pattern implementation is working correctly.")

    except Exception as e:
        print(f"\n❌ Test failed: {e}")
        import traceback
        traceback.print_exc()
        return False

    return True


if __name__ == "__main__":
    success = main()
    exit(0 if success else 1)
