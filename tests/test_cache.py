from datetime import timedelta

from eve_anchor.cache import Cache
from eve_anchor.resource import CelestialResource


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def celestial_resource(amount):
    return (
        CelestialResource(
            key="test_key",
            planet_id=1,
            resource_type_id=1,
            init_output=1.0,
            richness_index=1,
            richness_value=1,
        ),
        amount,
    )


def test_cache_set_and_get():
    cache = Cache(timedelta(seconds=60))
    value = [celestial_resource(1.0)]
    cache.set("test_key", value)
    assert cache.get("test_key") == value


def test_cache_expired():
    clock = FakeClock()
    cache = Cache(1, clock=clock)
    cache.set("test_key", [celestial_resource(1.0)])
    clock.now += 2
    assert cache.get("test_key") is None


def test_cache_not_expired():
    clock = FakeClock()
    cache = Cache(60, clock=clock)
    value = [celestial_resource(1.0)]
    cache.set("test_key", value)
    clock.now += 1
    assert cache.get("test_key") == value


def test_cache_overwrite():
    cache = Cache(60)
    first = [celestial_resource(1.0)]
    second = [celestial_resource(2.0)]
    cache.set("test_key", first)
    cache.set("test_key", second)
    assert cache.get("test_key") == second


def test_cache_error_value():
    cache = Cache(60)
    cache.set("test_key", "error")
    assert cache.get("test_key") == "error"


def test_cache_missing_key():
    cache = Cache(60)
    assert cache.get("absent") is None