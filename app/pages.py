"""HTML page for a city's forecast."""
from html import escape
from urllib.parse import quote


def render_weather_page(city: str) -> str:
    """Return a page that embeds the temperature chart for ``city``."""
    display = escape(city[:1].upper() + city[1:])
    graph_url = f"/weather/graph?city={quote(city)}"
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Weather in {display}</title>
    <style> body {{ font-family: sans-serif; text-align: center; margin-top: 50px; }} </style>
</head>
<body>
    <h1>Weather forecast for {display}</h1>
    <img src="{escape(graph_url)}" alt="Temperature chart for {escape(city)}">
</body>
</html>
"""


def render_bad_request_page() -> str:
    return '<h1>400 Bad Request: "city" query parameter is required.</h1>'
