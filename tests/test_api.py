import unittest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from app.errors import CacheUnavailableError, CityNotFoundError, UpstreamUnavailableError
from app.main import app as fastapi_app
from app.models import Forecast


def _forecast(hours: int = 48) -> Forecast:
    times = [f"2024-01-{1 + h // 24:02d}T{h % 24:02d}:00" for h in range(hours)]
    return Forecast.from_series(48.85, 2.35, times, [10.0 + h for h in range(hours)])


class TestApi(unittest.TestCase):
    def setUp(self):
        import app.api as api_mod

        self.api_mod = api_mod
        self._orig_service = api_mod.FORECAST_SERVICE
        self._orig_render = api_mod.render_temperature_chart
        self.service = MagicMock()
        self.service.get_forecast_by_city.return_value = _forecast()
        api_mod.FORECAST_SERVICE = self.service
        self.client = TestClient(fastapi_app, raise_server_exceptions=False)

    def tearDown(self):
        self.api_mod.FORECAST_SERVICE = self._orig_service
        self.api_mod.render_temperature_chart = self._orig_render

    def test_weather_page_200(self):
        resp = self.client.get("/weather", params={"city": "  Paris "})
        self.assertEqual(resp.status_code, 200)
        self.assertIn("text/html", resp.headers["content-type"])
        self.assertIn("/weather/graph?city=paris", resp.text)
        self.service.get_forecast_by_city.assert_not_called()

    def test_weather_page_requires_city(self):
        for params in ({}, {"city": "   "}):
            resp = self.client.get("/weather", params=params)
            self.assertEqual(resp.status_code, 400)
            self.assertIn("text/html", resp.headers["content-type"])

    def test_graph_returns_png_for_normalized_city(self):
        resp = self.client.get("/weather/graph", params={"city": "  Paris "})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["content-type"], "image/png")
        self.assertTrue(resp.content.startswith(b"\x89PNG"))
        self.service.get_forecast_by_city.assert_called_once_with("paris")

    def test_graph_plots_first_24_hours(self):
        captured = {}

        def fake_render(labels, temperatures):
            captured["labels"] = list(labels)
            captured["temperatures"] = list(temperatures)
            return b"png"

        self.api_mod.render_temperature_chart = fake_render
        resp = self.client.get("/weather/graph", params={"city": "paris"})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(captured["labels"]), 24)
        self.assertEqual(captured["labels"][0], "00:00")
        self.assertEqual(captured["temperatures"][-1], 33.0)

    def test_graph_requires_city(self):
        resp = self.client.get("/weather/graph")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"message": "City parameter is required"})

    def test_graph_city_not_found_404(self):
        self.service.get_forecast_by_city.side_effect = CityNotFoundError("atlantis")
        resp = self.client.get("/weather/graph", params={"city": "Atlantis"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"message": "City not found: atlantis"})

    def test_graph_upstream_unavailable_503(self):
        self.service.get_forecast_by_city.side_effect = UpstreamUnavailableError()
        resp = self.client.get("/weather/graph", params={"city": "paris"})
        self.assertEqual(resp.status_code, 503)
        self.assertEqual(resp.json(), {"message": "A required external service is currently unavailable."})

    def test_graph_cache_error_maps_to_503(self):
        self.service.get_forecast_by_city.side_effect = CacheUnavailableError()
        resp = self.client.get("/weather/graph", params={"city": "paris"})
        self.assertEqual(resp.status_code, 503)

    def test_unexpected_error_500(self):
        self.service.get_forecast_by_city.side_effect = RuntimeError("boom")
        resp = self.client.get("/weather/graph", params={"city": "paris"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"message": "Internal Server Error"})


if __name__ == "__main__":
    unittest.main()
