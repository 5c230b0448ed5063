import unittest

from app.cache_store.memory import InMemoryCacheStore
from app.models import Forecast


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def _forecast(temp: float = 1.0) -> Forecast:
    return Forecast.from_series(1.0, 2.0, ["2024-01-01T00:00"], [temp])


class TestInMemoryCacheStore(unittest.TestCase):
    def test_get_missing_returns_none(self):
        store = InMemoryCacheStore()
        self.assertIsNone(store.get("weather:nowhere"))

    def test_set_then_get_within_ttl(self):
        clock = FakeClock()
        store = InMemoryCacheStore(clock=clock)
        store.set("weather:oslo", _forecast(), 900)
        clock.now += 899
        self.assertEqual(store.get("weather:oslo"), _forecast())

    def test_expired_entry_is_absent(self):
        clock = FakeClock()
        store = InMemoryCacheStore(clock=clock)
        store.set("weather:oslo", _forecast(), 900)
        clock.now += 900
        self.assertIsNone(store.get("weather:oslo"))
        self.assertNotIn("weather:oslo", store._entries)

    def test_set_overwrites_and_restarts_ttl(self):
        clock = FakeClock()
        store = InMemoryCacheStore(clock=clock)
        store.set("weather:oslo", _forecast(1.0), 10)
        clock.now += 8
        store.set("weather:oslo", _forecast(2.0), 10)
        clock.now += 8
        self.assertEqual(store.get("weather:oslo").temperatures, (2.0,))

    def test_clear(self):
        store = InMemoryCacheStore()
        store.set("a", _forecast(), 10)
        store.clear()
        self.assertIsNone(store.get("a"))


if __name__ == "__main__":
    unittest.main()
