"""PNG rendering of hourly temperature charts."""
from __future__ import annotations

import datetime as dt
import io
from typing import List, Sequence

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="charts")

CHART_WIDTH_PX = 800
CHART_HEIGHT_PX = 400
CHART_DPI = 100
LINE_COLOR = (75 / 255, 192 / 255, 192 / 255)


def format_hour_labels(times: Sequence[str]) -> List[str]:
    """Turn ISO-like timestamps into "HH:MM" axis labels."""
    labels: List[str] = []
    for t in times:
        try:
            labels.append(dt.datetime.fromisoformat(t).strftime("%H:%M"))
        except ValueError:
            logger.debug("Unparseable timestamp; using raw label", extra={"time": t})
            labels.append(t)
    return labels


def render_temperature_chart(labels: Sequence[str], temperatures: Sequence[float]) -> bytes:
    """Render a line chart of temperatures and return it as PNG bytes."""
    # Figure + Agg canvas directly, so no pyplot global state is shared between threads.
    fig = Figure(
        figsize=(CHART_WIDTH_PX / CHART_DPI, CHART_HEIGHT_PX / CHART_DPI),
        dpi=CHART_DPI,
        facecolor="white",
    )
    canvas = FigureCanvasAgg(fig)
    ax = fig.add_subplot(1, 1, 1)
    positions = list(range(len(temperatures)))
    ax.plot(
        positions,
        list(temperatures),
        color=LINE_COLOR,
        linewidth=2,
        label=f"Temperature (°C) for the next {len(temperatures)}h",
    )
    ax.set_xticks(positions)
    ax.set_xticklabels(list(labels), rotation=45, ha="right", fontsize=8)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper left")
    fig.tight_layout()

    buf = io.BytesIO()
    canvas.print_png(buf)
    return buf.getvalue()
