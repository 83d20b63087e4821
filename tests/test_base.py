import threading
import time

import pytest

from exlibs.base import Singleton


class Registry(Singleton):
    created = 0

    def __init__(self):
        type(self).created += 1
        self.items = []


class SlowService(Singleton):
    created = 0

    def __init__(self):
        time.sleep(0.01)
        type(self).created += 1


class OtherService(Singleton):
    pass


def _get(kind):
    return Singleton.get_instance.__func__(kind)


@pytest.fixture(autouse=True)
def _clean_singletons():
    for kind in (Registry, SlowService, OtherService):
        kind.destroy_instance()
    Registry.created = 0
    SlowService.created = 0
    yield
    for kind in (Registry, SlowService, OtherService):
        kind.destroy_instance()


def test_get_instance_returns_same_object():
    first = Singleton.get_instance.__func__(Registry)
    second = Singleton.get_instance.__func__(Registry)
    assert first is second
    assert isinstance(first, Registry)
    assert Registry.created == 1


def test_state_is_shared_through_instance():
    Singleton.get_instance.__func__(Registry).items.append("x")
    assert Singleton.get_instance.__func__(Registry).items == ["x"]


def test_destroy_instance_allows_fresh_instance():
    first = Singleton.get_instance.__func__(Registry)
    Singleton.destroy_instance.__func__(Registry)
    second = Singleton.get_instance.__func__(Registry)
    assert first is not second
    assert Registry.created == 2


def test_destroy_without_instance_is_harmless():
    Singleton.destroy_instance.__func__(Registry)
    first = Singleton.get_instance.__func__(Registry)
    assert first is Singleton.get_instance.__func__(Registry)
    assert Registry.created == 1


def test_subclasses_have_separate_instances():
    registry = Singleton.get_instance.__func__(Registry)
    other = Singleton.get_instance.__func__(OtherService)
    assert registry is not other
    assert isinstance(other, OtherService)
    assert not isinstance(other, Registry)


def test_concurrent_creation_builds_one_instance():
    results = []
    lock = threading.Lock()

    def worker():
        instance = Singleton.get_instance.__func__(SlowService)
        with lock:
            results.append(instance)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert SlowService.created == 1
    assert len(results) == 8
    assert all(item is results[0] for item in results)
    assert Singleton.get_instance.__func__(SlowService) is results[0]