"""
Location report: type/count aggregate rendered as a pie chart image.
"""

import logging
import os

from reportlab.graphics import renderPM
from reportlab.graphics.charts.piecharts import Pie
from reportlab.graphics.shapes import Drawing, String
from sqlalchemy import text

from .extensions import db

logger = logging.getLogger(__name__)

CHART_FILE_NAME = "pieChart.jpeg"
CHART_TITLE = "Location Report"
CHART_SIZE = 300
RENDER_BACKEND = "rlPyCairo"

TYPE_COUNT_QUERY = text("SELECT type, COUNT(*) FROM vendor GROUP BY type")


def find_type_and_type_count():
    """[(type, count), ...] straight from the vendor table."""
    return [(row[0], row[1]) for row in db.session.execute(TYPE_COUNT_QUERY)]


def build_pie_chart(data, size=CHART_SIZE):
    drawing = Drawing(size, size)
    drawing.add(String(size / 2, size - 20, CHART_TITLE, textAnchor="middle", fontSize=14))

    if not data:
        drawing.add(String(size / 2, size / 2, "No data", textAnchor="middle"))
        return drawing

    pie = Pie()
    pie.x = size * 0.15
    pie.y = size * 0.1
    pie.width = pie.height = size * 0.7
    pie.data = [float(count) for _, count in data]
    pie.labels = [str(key) for key, _ in data]
    pie.slices.strokeWidth = 0.5
    drawing.add(pie)
    return drawing


def generate_pie_chart(path, data):
    """Write <path>/pieChart.jpeg. I/O and rendering errors propagate."""
    os.makedirs(path, exist_ok=True)
    file_path = os.path.join(path, CHART_FILE_NAME)
    drawing = build_pie_chart(data)
    renderPM.drawToFile(drawing, file_path, fmt="JPG", backend=RENDER_BACKEND)
    logger.info("Wrote pie chart with %d slices to %s", len(data), file_path)
    return file_path
