import unittest

from app.pages import render_bad_request_page, render_weather_page


class TestPages(unittest.TestCase):
    def test_page_links_chart_for_city(self):
        html = render_weather_page("new york")
        self.assertIn("<title>Weather in New york</title>", html)
        self.assertIn('src="/weather/graph?city=new%20york"', html)

    def test_page_escapes_markup(self):
        html = render_weather_page("<script>")
        self.assertNotIn("<script>", html)
        self.assertIn("&lt;script&gt;", html)

    def test_bad_request_page(self):
        self.assertIn("400 Bad Request", render_bad_request_page())


if __name__ == "__main__":
    unittest.main()
