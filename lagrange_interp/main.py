"""
Lagrange Interpolation Explorer.

Enter at least five samples (x_i, y_i) and a query point; the window shows
the interpolating polynomial, its Lagrange basis polynomials, the value at
the query point and a step-by-step derivation of that value.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QCheckBox,
    QDialog,
    QDoubleSpinBox,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QTableWidget,
    QTableWidgetItem,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from .errors import InterpolationError
from .interpolation import build_interpolating_polynomial, interpolate_at
from .latex_gen import LaTeXGenerator
from .polynomial import FloatArray, format_number, format_polynomial
from .preprocessing import SAMPLE_DATA, parse_points, parse_query_point, plot_range
from .sampling import sample_all_basis_polynomials, sample_polynomial
from .settings import PlotSettings
from .trace import StepTrace, build_trace, format_trace

logger = logging.getLogger(__name__)


# ===========================================================================
# Settings dialog
# ===========================================================================

class SettingsDialog(QDialog):

    def __init__(self, settings: PlotSettings, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self._settings = settings
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QGridLayout(self)

        self._num_points_sb = QSpinBox()
        self._num_points_sb.setRange(50, 500)
        self._num_points_sb.setSingleStep(10)
        self._num_points_sb.setValue(self._settings.num_points)
        self._num_points_sb.setToolTip("More points give smoother curves")

        self._margin_sb = QDoubleSpinBox()
        self._margin_sb.setRange(0.0, 2.0)
        self._margin_sb.setSingleStep(0.05)
        self._margin_sb.setValue(self._settings.margin_ratio)

        self._trace_decimals_sb = QSpinBox()
        self._trace_decimals_sb.setRange(0, 12)
        self._trace_decimals_sb.setValue(self._settings.trace_decimals)

        self._latex_approx_cb = QCheckBox("Approximate coefficients (decimals)")
        self._latex_approx_cb.setChecked(self._settings.latex_approx)
        self._latex_approx_cb.setToolTip(
            "ON  — coefficients shown as rounded decimals, e.g. 0.333\n"
            "OFF — exact rational fractions, e.g. 1/3"
        )

        self._latex_decimals_sb = QSpinBox()
        self._latex_decimals_sb.setRange(0, 10)
        self._latex_decimals_sb.setValue(self._settings.latex_decimals)
        self._latex_approx_cb.toggled.connect(self._latex_decimals_sb.setEnabled)
        self._latex_decimals_sb.setEnabled(self._settings.latex_approx)

        fields: list[tuple[str, QWidget]] = [
            ("Points per curve:", self._num_points_sb),
            ("Plot margin (share of x-span):", self._margin_sb),
            ("Step-by-step decimals:", self._trace_decimals_sb),
        ]
        for row, (label, widget) in enumerate(fields):
            layout.addWidget(QLabel(label), row, 0)
            layout.addWidget(widget, row, 1)

        sep_row = len(fields)
        sep = QLabel("─── LaTeX Output Format ───")
        sep.setStyleSheet("color: gray; font-size: 10px;")
        layout.addWidget(sep, sep_row, 0, 1, 2)
        layout.addWidget(self._latex_approx_cb, sep_row + 1, 0, 1, 2)
        layout.addWidget(QLabel("Digits after decimal point:"), sep_row + 2, 0)
        layout.addWidget(self._latex_decimals_sb, sep_row + 2, 1)

        btn_row = QHBoxLayout()
        ok_btn = QPushButton("OK")
        cancel_btn = QPushButton("Cancel")
        ok_btn.clicked.connect(self.accept)
        cancel_btn.clicked.connect(self.reject)
        btn_row.addWidget(ok_btn)
        btn_row.addWidget(cancel_btn)
        layout.addLayout(btn_row, sep_row + 3, 0, 1, 2)

    def get_settings(self) -> Optional[PlotSettings]:
        try:
            return PlotSettings(
                num_points=int(self._num_points_sb.value()),
                margin_ratio=float(self._margin_sb.value()),
                min_data_points=self._settings.min_data_points,
                trace_decimals=int(self._trace_decimals_sb.value()),
                latex_approx=bool(self._latex_approx_cb.isChecked()),
                latex_decimals=int(self._latex_decimals_sb.value()),
            )
        except (ValueError, TypeError):
            return None


# ===========================================================================
# Main window
# ===========================================================================

class InterpolationApp(QMainWindow):

    _POLY_COLOR: tuple[int, int, int] = (60, 160, 240)
    _POINT_COLOR: tuple[int, int, int] = (220, 80, 80)
    # Cycled over the basis polynomials L_0, L_1, ...
    _BASIS_COLORS: tuple[tuple[int, int, int], ...] = (
        (255, 140, 0),
        (80, 200, 80),
        (180, 80, 220),
        (20, 210, 190),
        (240, 100, 160),
        (160, 220, 60),
        (240, 190, 40),
        (140, 100, 240),
    )

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Lagrange Interpolation Explorer")
        self.setGeometry(100, 100, 1450, 820)

        self._settings = PlotSettings()
        self._latex_gen = LaTeXGenerator(
            approx=self._settings.latex_approx,
            decimals=self._settings.latex_decimals,
        )

        self._x_points: FloatArray = np.empty(0, dtype=np.float64)
        self._y_points: FloatArray = np.empty(0, dtype=np.float64)
        self._query: Optional[float] = None
        self._coefficients: Optional[FloatArray] = None
        self._trace: Optional[StepTrace] = None
        self._x_range: Optional[tuple[float, float]] = None
        self._basis_checkboxes: list[QCheckBox] = []

        self._build_ui()
        self._configure_plot()
        self._reset_table()

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)

        # ── data input ────────────────────────────────────────────────
        left = QVBoxLayout()
        data_group = QGroupBox("Data Points")
        data_layout = QVBoxLayout(data_group)
        self._table = QTableWidget(0, 2)
        self._table.setHorizontalHeaderLabels(["x", "y"])
        self._table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        data_layout.addWidget(self._table)

        row_btns = QHBoxLayout()
        self._add_btn = QPushButton("Add Point")
        self._remove_btn = QPushButton("Remove Point")
        self._sample_btn = QPushButton("Sample Data")
        self._reset_btn = QPushButton("Reset")
        self._add_btn.clicked.connect(self.add_point)
        self._remove_btn.clicked.connect(self.remove_point)
        self._sample_btn.clicked.connect(self.load_sample_data)
        self._reset_btn.clicked.connect(self._reset_table)
        for widget in (self._add_btn, self._remove_btn, self._sample_btn, self._reset_btn):
            row_btns.addWidget(widget)
        data_layout.addLayout(row_btns)

        query_row = QHBoxLayout()
        query_row.addWidget(QLabel("Interpolation point x ="))
        self._query_edit = QLineEdit()
        self._query_edit.returnPressed.connect(self.interpolate)
        query_row.addWidget(self._query_edit)
        data_layout.addLayout(query_row)

        self._interp_btn = QPushButton("Calculate Interpolation")
        self._interp_btn.clicked.connect(self.interpolate)
        data_layout.addWidget(self._interp_btn)
        left.addWidget(data_group)

        # ── x-range controls ──────────────────────────────────────────
        range_group = QGroupBox("View")
        range_layout = QGridLayout(range_group)
        self._x_min_edit = QLineEdit()
        self._x_max_edit = QLineEdit()
        apply_btn = QPushButton("Apply Range")
        reset_zoom_btn = QPushButton("Reset Zoom")
        settings_btn = QPushButton("Settings")
        apply_btn.clicked.connect(self.apply_range)
        reset_zoom_btn.clicked.connect(self.reset_zoom)
        settings_btn.clicked.connect(self.show_settings)
        range_layout.addWidget(QLabel("Minimum X:"), 0, 0)
        range_layout.addWidget(self._x_min_edit, 0, 1)
        range_layout.addWidget(QLabel("Maximum X:"), 1, 0)
        range_layout.addWidget(self._x_max_edit, 1, 1)
        range_layout.addWidget(apply_btn, 2, 0)
        range_layout.addWidget(reset_zoom_btn, 2, 1)
        range_layout.addWidget(settings_btn, 3, 0, 1, 2)
        left.addWidget(range_group)
        root.addLayout(left, 1)

        # ── plot ──────────────────────────────────────────────────────
        middle = QVBoxLayout()
        self._plot_widget = pg.PlotWidget()
        self._plot_widget.addLegend(offset=(10, 10))
        middle.addWidget(self._plot_widget)

        toggles = QHBoxLayout()
        self._show_poly_cb = QCheckBox("Interpolating polynomial")
        self._show_poly_cb.setChecked(True)
        self._show_poly_cb.toggled.connect(self._redraw)
        self._show_all_basis_cb = QCheckBox("All basis polynomials")
        self._show_all_basis_cb.toggled.connect(self._toggle_all_basis)
        toggles.addWidget(self._show_poly_cb)
        toggles.addWidget(self._show_all_basis_cb)
        middle.addLayout(toggles)

        self._basis_box = QGroupBox("Basis polynomials")
        self._basis_layout = QHBoxLayout(self._basis_box)
        middle.addWidget(self._basis_box)

        self._status_lbl = QLabel("Enter at least 5 points")
        self._status_lbl.setStyleSheet("color: gray; font-style: italic;")
        middle.addWidget(self._status_lbl)
        root.addLayout(middle, 3)

        # ── results ───────────────────────────────────────────────────
        right = QVBoxLayout()
        right.addWidget(QLabel("Interpolating polynomial:"))
        self._poly_lbl = QLabel("—")
        self._poly_lbl.setWordWrap(True)
        self._poly_lbl.setStyleSheet("font-family: 'Courier New'; font-size: 14px;")
        right.addWidget(self._poly_lbl)
        self._value_lbl = QLabel("")
        self._value_lbl.setStyleSheet("font-size: 14px;")
        right.addWidget(self._value_lbl)

        right.addWidget(QLabel("Step-by-step calculation:"))
        self._trace_output = QTextEdit()
        self._trace_output.setReadOnly(True)
        self._trace_output.setFontFamily("Courier New")
        right.addWidget(self._trace_output)

        self._copy_latex_btn = QPushButton("Copy LaTeX")
        self._copy_latex_btn.clicked.connect(self.copy_latex)
        right.addWidget(self._copy_latex_btn)
        root.addLayout(right, 2)

    def _configure_plot(self) -> None:
        self._plot_widget.setLabel("left", "y")
        self._plot_widget.setLabel("bottom", "x")
        self._plot_widget.showGrid(x=True, y=True, alpha=0.3)

    # ------------------------------------------------------------------
    # Data table
    # ------------------------------------------------------------------

    def _append_row(self, x_text: str = "", y_text: str = "") -> None:
        row = self._table.rowCount()
        self._table.insertRow(row)
        self._table.setItem(row, 0, QTableWidgetItem(x_text))
        self._table.setItem(row, 1, QTableWidgetItem(y_text))

    def _reset_table(self) -> None:
        self._table.setRowCount(0)
        for _ in range(self._settings.min_data_points):
            self._append_row()
        self._query_edit.clear()
        self._status_lbl.setText(f"Enter at least {self._settings.min_data_points} points")

    def add_point(self) -> None:
        self._append_row()

    def remove_point(self) -> None:
        if self._table.rowCount() <= self._settings.min_data_points:
            self._status_lbl.setText(
                f"At least {self._settings.min_data_points} data points are required"
            )
            return
        row = self._table.currentRow()
        self._table.removeRow(row if row >= 0 else self._table.rowCount() - 1)

    def load_sample_data(self) -> None:
        self._table.setRowCount(0)
        for x_text, y_text in SAMPLE_DATA:
            self._append_row(x_text, y_text)
        if not self._query_edit.text().strip():
            self._query_edit.setText("0.5")

    def _table_rows(self) -> list[tuple[Optional[str], Optional[str]]]:
        rows: list[tuple[Optional[str], Optional[str]]] = []
        for r in range(self._table.rowCount()):
            x_item, y_item = self._table.item(r, 0), self._table.item(r, 1)
            rows.append((
                x_item.text() if x_item is not None else None,
                y_item.text() if y_item is not None else None,
            ))
        return rows

    # ------------------------------------------------------------------
    # Computation
    # ------------------------------------------------------------------

    def interpolate(self) -> None:
        try:
            xs, ys = parse_points(self._table_rows(), self._settings.min_data_points)
            query = parse_query_point(self._query_edit.text())
            coefficients = build_interpolating_polynomial(xs, ys)
            value = interpolate_at(query, xs, ys)
            trace = build_trace(query, xs, ys)
        except InterpolationError as exc:
            logger.warning("interpolation rejected: %s", exc)
            QMessageBox.warning(self, "Invalid Input", str(exc))
            return

        self._x_points, self._y_points = xs, ys
        self._query = query
        self._coefficients = coefficients
        self._trace = trace
        self._x_range = plot_range(xs, self._settings.margin_ratio)
        self._rebuild_basis_checkboxes(len(xs))

        self._poly_lbl.setText(f"P(x) = {format_polynomial(coefficients)}")
        self._value_lbl.setText(
            f"P({format_number(query)}) = {value:.{self._settings.trace_decimals}f}"
        )
        self._trace_output.setPlainText(format_trace(trace, self._settings.trace_decimals))
        self._status_lbl.setText(f"Interpolated {len(xs)} points (degree ≤ {len(xs) - 1})")
        self._sync_range_edits()
        self._redraw()

    def _rebuild_basis_checkboxes(self, n: int) -> None:
        for cb in self._basis_checkboxes:
            self._basis_layout.removeWidget(cb)
            cb.deleteLater()
        self._basis_checkboxes = []
        show_all = self._show_all_basis_cb.isChecked()
        for j in range(n):
            cb = QCheckBox(f"L{j}(x)")
            r, g, b = self._BASIS_COLORS[j % len(self._BASIS_COLORS)]
            cb.setStyleSheet(f"color: rgb({r},{g},{b});")
            cb.setChecked(show_all)
            cb.toggled.connect(self._redraw)
            self._basis_layout.addWidget(cb)
            self._basis_checkboxes.append(cb)

    def _toggle_all_basis(self, checked: bool) -> None:
        for cb in self._basis_checkboxes:
            cb.blockSignals(True)
            cb.setChecked(checked)
            cb.blockSignals(False)
        self._redraw()

    # ------------------------------------------------------------------
    # Plotting
    # ------------------------------------------------------------------

    def _redraw(self, *_: Any) -> None:
        self._plot_widget.clear()
        if self._coefficients is None or self._x_range is None:
            return
        x_min, x_max = self._x_range
        count = self._settings.num_points

        visible = [j for j, cb in enumerate(self._basis_checkboxes) if cb.isChecked()]
        if visible:
            basis_curves = sample_all_basis_polynomials(self._x_points, x_min, x_max, count)
            for j in visible:
                color = self._BASIS_COLORS[j % len(self._BASIS_COLORS)]
                curve = basis_curves[j]
                self._plot_widget.plot(
                    curve.x, curve.y,
                    pen=pg.mkPen(color=color, width=1.5, style=Qt.PenStyle.DashLine),
                    name=f"L{j}(x)",
                )

        if self._show_poly_cb.isChecked():
            curve = sample_polynomial(self._coefficients, x_min, x_max, count)
            self._plot_widget.plot(
                curve.x, curve.y, pen=pg.mkPen(color=self._POLY_COLOR, width=2.5), name="P(x)"
            )

        self._plot_widget.plot(
            self._x_points, self._y_points, pen=None, symbol="o", symbolSize=9,
            symbolBrush=self._POINT_COLOR, name="Data points",
        )
        if self._trace is not None:
            self._plot_widget.plot(
                [self._trace.x], [self._trace.final_value], pen=None, symbol="star",
                symbolSize=14, symbolBrush=(40, 40, 40), name="Query point",
            )
        self._plot_widget.setXRange(x_min, x_max, padding=0)

    def _sync_range_edits(self) -> None:
        if self._x_range is None:
            return
        self._x_min_edit.setText(f"{self._x_range[0]:.4g}")
        self._x_max_edit.setText(f"{self._x_range[1]:.4g}")

    def apply_range(self) -> None:
        try:
            x_min = float(self._x_min_edit.text())
            x_max = float(self._x_max_edit.text())
        except ValueError:
            QMessageBox.warning(self, "Invalid Range", "Range bounds must be numbers")
            return
        if x_min >= x_max:
            QMessageBox.warning(self, "Invalid Range", "Minimum X must be less than Maximum X")
            return
        self._x_range = (x_min, x_max)
        self._redraw()

    def reset_zoom(self) -> None:
        if self._x_points.size == 0:
            return
        self._x_range = plot_range(self._x_points, self._settings.margin_ratio)
        self._sync_range_edits()
        self._redraw()

    # ------------------------------------------------------------------
    # Export / settings
    # ------------------------------------------------------------------

    def copy_latex(self) -> None:
        if self._coefficients is None:
            self._status_lbl.setText("Nothing to copy yet")
            return
        blocks = [self._latex_gen.polynomial(self._coefficients)]
        blocks.extend(self._latex_gen.basis(j, list(self._x_points))
                      for j in range(len(self._x_points)))
        if self._trace is not None:
            blocks.append(self._latex_gen.trace(self._trace))
        QApplication.clipboard().setText("\n".join(blocks))
        self._status_lbl.setText("LaTeX copied to clipboard")

    def show_settings(self) -> None:
        dialog = SettingsDialog(self._settings, self)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return
        new_settings = dialog.get_settings()
        if new_settings is None:
            QMessageBox.critical(self, "Invalid Settings", "Could not apply settings")
            return
        self._settings = new_settings
        self._latex_gen.reconfigure(new_settings.latex_approx, new_settings.latex_decimals)
        if self._coefficients is not None:
            self.interpolate()


# ===========================================================================
# Entry point
# ===========================================================================

def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    window = InterpolationApp()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
