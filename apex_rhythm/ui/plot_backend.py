"""
Interactive Chart Backend — neon glow rhythm curve.

Uses PySide6.QtCharts for a live, hoverable chart. The rhythm curve is drawn
as a glowing line with a gradient fill; each peak gets a dot that shows its
time window and score on hover. The optimal peak is highlighted.
"""

from __future__ import annotations

import logging
from typing import List

from PySide6.QtCore import Qt, QPointF, QMargins
from PySide6.QtGui import QColor, QPen, QBrush, QFont, QPainter, QCursor
from PySide6.QtWidgets import QToolTip
from PySide6.QtCharts import (
    QChart, QChartView, QLineSeries, QScatterSeries, QAreaSeries, QValueAxis,
)

from apex_rhythm.core.clock import MINUTES_PER_HOUR, format_clock_time
from apex_rhythm.core.models import ScheduleResult
from apex_rhythm.services.curve import build_curve_points, normalize

logger = logging.getLogger(__name__)

# ── Palette ──────────────────────────────────────────────────────────────────
BG        = QColor("#0a0a0a")
GRID_CLR  = QColor("#1a1a1a")
MUTED     = QColor("#888888")
DIM       = QColor("#555555")

CYAN = "#00d9ff"
PINK = "#ff0080"


def _base_chart(title: str = "") -> QChart:
    """Create a styled chart on the dark background."""
    chart = QChart()
    chart.setBackgroundBrush(QBrush(BG))
    chart.setBackgroundRoundness(0)
    chart.setMargins(QMargins(8, 8, 8, 8))

    if title:
        chart.setTitle(title)
        font = QFont("Arial", 10)
        font.setWeight(QFont.Weight.Bold)
        chart.setTitleFont(font)
        chart.setTitleBrush(QBrush(MUTED))

    chart.legend().setVisible(False)
    chart.setAnimationOptions(QChart.AnimationOption.SeriesAnimations)
    chart.setAnimationDuration(400)
    return chart


def _value_axis(label: str = "", visible_grid: bool = True) -> QValueAxis:
    axis = QValueAxis()
    axis.setLabelsColor(DIM)
    axis.setLabelsFont(QFont("Arial", 8))
    axis.setGridLineColor(GRID_CLR)
    axis.setGridLineVisible(visible_grid)
    axis.setLineVisible(False)
    axis.setMinorGridLineVisible(False)
    axis.setTitleText(label)
    axis.setTitleBrush(QBrush(DIM))
    axis.setTitleFont(QFont("Arial", 8))
    return axis


def _glow_line(chart: QChart, points: list, color_hex: str,
               x_axis, y_axis, width: float = 2.5) -> None:
    """Add a glowing line: 3 faded layers + 1 bright core."""
    color = QColor(color_hex)

    for glow_w, alpha in [(width * 5, 15), (width * 3, 35), (width * 1.8, 70)]:
        glow = QLineSeries()
        for p in points:
            glow.append(p)
        glow_color = QColor(color)
        glow_color.setAlpha(alpha)
        pen = QPen(glow_color, glow_w)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        glow.setPen(pen)
        chart.addSeries(glow)
        glow.attachAxis(x_axis)
        glow.attachAxis(y_axis)

    core = QLineSeries()
    for p in points:
        core.append(p)
    pen = QPen(color, width)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    core.setPen(pen)
    chart.addSeries(core)
    core.attachAxis(x_axis)
    core.attachAxis(y_axis)


def _glow_area(chart: QChart, points: list,
               color_hex: str, x_axis, y_axis) -> None:
    """Gradient fill under the curve.

    Upper/lower series are parented to the chart so Python doesn't GC them
    while QAreaSeries still holds C++ pointers to them.
    """
    upper = QLineSeries(chart)
    lower = QLineSeries(chart)
    for p in points:
        upper.append(p)
        lower.append(p.x(), 0)

    area = QAreaSeries(upper, lower)
    fill = QColor(color_hex)
    fill.setAlpha(30)
    area.setBrush(QBrush(fill))
    area.setPen(QPen(Qt.PenStyle.NoPen))
    chart.addSeries(area)
    area.attachAxis(x_axis)
    area.attachAxis(y_axis)


def _hover_dots(chart: QChart, points: list, color_hex: str,
                x_axis, y_axis, labels: List[str],
                size: float = 8) -> QScatterSeries:
    """Scatter dots with a glow halo that show a label on hover."""
    color = QColor(color_hex)

    halo = QScatterSeries()
    halo.setMarkerSize(size * 2)
    halo_color = QColor(color)
    halo_color.setAlpha(40)
    halo.setColor(halo_color)
    halo.setBorderColor(QColor(0, 0, 0, 0))
    for p in points:
        halo.append(p)
    chart.addSeries(halo)
    halo.attachAxis(x_axis)
    halo.attachAxis(y_axis)

    dots = QScatterSeries()
    dots.setMarkerSize(size)
    dots.setColor(color)
    dots.setBorderColor(QColor(0, 0, 0, 0))
    for p in points:
        dots.append(p)

    def _on_hover(point: QPointF, state: bool):
        if not state or not points:
            return
        # Closest point wins
        best = min(range(len(points)),
                   key=lambda i: abs(points[i].x() - point.x()) + abs(points[i].y() - point.y()))
        QToolTip.showText(QCursor.pos(), labels[best])

    dots.hovered.connect(_on_hover)
    chart.addSeries(dots)
    dots.attachAxis(x_axis)
    dots.attachAxis(y_axis)
    return dots


def make_chart_view(chart: QChart, height: int = 300) -> QChartView:
    """Wrap chart in a styled view with antialiasing."""
    view = QChartView(chart)
    view.setRenderHint(QPainter.RenderHint.Antialiasing)
    view.setStyleSheet("background: transparent; border: none;")
    view.setMinimumHeight(height)
    return view


def peak_label(result: ScheduleResult, index: int) -> str:
    """Tooltip text for one peak, e.g. '07:40 - 09:10: 124.8'."""
    cycle = result.cycles[index]
    return (f"{format_clock_time(cycle.peak_start)} - "
            f"{format_clock_time(cycle.peak_end)}: {cycle.performance_score:.1f}")


# ── Public chart functions ───────────────────────────────────────────────────

def plot_rhythm_curve(result: ScheduleResult, height: int = 300) -> QChartView:
    chart = _base_chart("neural engagement curve")

    if result.is_empty:
        chart.setTitle("neural engagement curve — no cycles")
        return make_chart_view(chart, height)

    times, values = build_curve_points(result)
    scaled = normalize(values) * 100.0

    x_axis = _value_axis("hours awake", visible_grid=False)
    y_axis = _value_axis()
    y_axis.setLabelsVisible(False)
    chart.addAxis(x_axis, Qt.AlignmentFlag.AlignBottom)
    chart.addAxis(y_axis, Qt.AlignmentFlag.AlignLeft)

    hours = times / MINUTES_PER_HOUR
    curve = [QPointF(float(x), float(y)) for x, y in zip(hours, scaled)]
    _glow_line(chart, curve, CYAN, x_axis, y_axis)
    _glow_area(chart, curve, CYAN, x_axis, y_axis)

    # One dot per peak, at the middle of the peak plateau
    lo = float(values.min())
    span = float(values.max()) - lo or 1.0
    peak_points: List[QPointF] = []
    peak_labels: List[str] = []
    optimal_points: List[QPointF] = []
    optimal_labels: List[str] = []
    for cycle in result.cycles:
        mid_h = ((cycle.peak_start + cycle.peak_end) / 2 - result.wake) / MINUTES_PER_HOUR
        y = (cycle.performance_score - lo) / span * 100.0
        label = peak_label(result, cycle.index)
        if cycle.index == result.optimal_index:
            optimal_points.append(QPointF(mid_h, y))
            optimal_labels.append(f"PEAK  {label}")
        else:
            peak_points.append(QPointF(mid_h, y))
            peak_labels.append(label)

    if peak_points:
        _hover_dots(chart, peak_points, CYAN, x_axis, y_axis, peak_labels)
    _hover_dots(chart, optimal_points, PINK, x_axis, y_axis, optimal_labels, size=11)

    x_axis.setRange(0, result.total_minutes / MINUTES_PER_HOUR)
    y_axis.setRange(0, 110)
    logger.debug("Rhythm chart built with %d points.", len(curve))
    return make_chart_view(chart, height)
