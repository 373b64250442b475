"""PyQt5 GUI for converting positions between WGS84, RT90 and SWEREF99.

Layout (left-to-right, top-to-bottom):
  ┌ Header: title ─────────────────────────────────────────────────────────┐
  │ ┌ Source (left) ───────────┐  ┌ Result (right) ──────────────────────┐ │
  │ │ Grid:   [rt90_2.5_gon_v] │  │ read-only display                     │ │
  │ │ Format: [Degrees]        │  │ (monospace, dark)                     │ │
  │ │ Northing / Latitude      │  │ every notation + PROJ deviation       │ │
  │ │ Easting / Longitude      │  │                                       │ │
  │ ├ Target ──────────────────┤  │                                       │ │
  │ │ Grid:   [sweref_99_tm]   │  │                                       │ │
  │ └──────────────────────────┘  └───────────────────────────────────────┘ │
  │ ┌ CRS Metadata ──────────────────────────────────────────────────────┐ │
  │ └────────────────────────────────────────────────────────────────────┘ │
  │ [Swap]                                  [Lookup CRS]   [Convert]      │
  └────────────────────────────────────────────────────────────────────────┘
"""

import logging

from PyQt5.QtCore import Qt, QThread, pyqtSignal
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QComboBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSplitter,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from .coord_transformer import deviation
from .coordinate_codec import (
    CoordinateFormat,
    FormatError,
    format_decimal,
    is_unset,
    parse_decimal,
    parse_latitude,
    parse_longitude,
)
from .crs_metadata import for_variant
from .grid_parameters import GridVariant
from .models import Position

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------

_BTN_PRIMARY = """
QPushButton {
    background-color: #0078D4; color: white;
    border: none; border-radius: 4px;
    font-weight: bold; font-size: 11px; padding: 6px 14px;
}
QPushButton:hover   { background-color: #106EBE; }
QPushButton:pressed { background-color: #005A9E; }
QPushButton:disabled { background-color: #444; color: #888; }
"""

_BTN_SECONDARY = """
QPushButton {
    background-color: #4A4A5A; color: #D4D4D4;
    border: none; border-radius: 4px;
    font-size: 11px; padding: 6px 14px;
}
QPushButton:hover   { background-color: #5A5A6A; }
QPushButton:pressed { background-color: #3A3A4A; }
QPushButton:disabled { background-color: #333; color: #777; }
"""

_DARK_TEXT = """
QTextEdit {
    background-color: #1E1E1E; color: #D4D4D4;
    border: 1px solid #3E3E42; border-radius: 4px; padding: 8px;
}
"""

_INPUT = """
QLineEdit, QComboBox {
    background-color: #2D2D30; color: #D4D4D4;
    border: 1px solid #3E3E42; border-radius: 3px; padding: 4px 8px;
}
QLineEdit:focus { border: 1px solid #0078D4; }
"""

_GROUP = """
QGroupBox {
    color: #9CDCFE; font-weight: bold;
    border: 1px solid #3E3E42; border-radius: 4px;
    margin-top: 10px; padding-top: 6px;
}
QGroupBox::title { subcontrol-origin: margin; left: 10px; padding: 0 4px; }
"""

_MONO = QFont("Courier", 9)

_FORMAT_LABELS = {
    CoordinateFormat.DEGREES: "Degrees",
    CoordinateFormat.DEGREES_MINUTES: "Degrees, minutes",
    CoordinateFormat.DEGREES_MINUTES_SECONDS: "Degrees, minutes, seconds",
}


# ---------------------------------------------------------------------------
# Worker threads: keep pyproj / epsg.io off the UI thread
# ---------------------------------------------------------------------------

class _LookupWorker(QThread):
    result = pyqtSignal(object)
    failed = pyqtSignal(str)

    def __init__(self, variant: GridVariant):
        super().__init__()
        self._variant = variant

    def run(self):
        try:
            self.result.emit(for_variant(self._variant))
        except Exception as exc:
            logger.warning("CRS lookup for %s failed: %s", self._variant, exc)
            self.failed.emit(str(exc))


class _ReferenceWorker(QThread):
    result = pyqtSignal(int, object, object)   # conversion id, target, (Δa, Δb)
    failed = pyqtSignal(str)

    def __init__(self, conversion_id: int, position: Position, target: GridVariant):
        super().__init__()
        self._conversion_id = conversion_id
        self._position = position
        self._target = target

    def run(self):
        try:
            diff = deviation(self._position, self._target)
            self.result.emit(self._conversion_id, self._target, diff)
        except Exception as exc:
            logger.warning("PROJ reference conversion failed: %s", exc)
            self.failed.emit(str(exc))


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

class ConverterUI(QMainWindow):
    """Main window of the coordinate converter."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("WGS84 / RT90 / SWEREF99 Converter")
        self.setGeometry(100, 100, 980, 640)
        self.setStyleSheet("background-color: #252526; color: #D4D4D4;")

        self._result: Position | None = None
        self._conversion_id = 0
        self._workers: list[QThread] = []   # prevent GC of running threads

        self._build_ui()

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _build_ui(self):
        root_widget = QWidget()
        self.setCentralWidget(root_widget)
        root = QVBoxLayout(root_widget)
        root.setSpacing(8)
        root.setContentsMargins(12, 12, 12, 10)

        title = QLabel("WGS84 / RT90 / SWEREF99 Converter")
        f = QFont()
        f.setPointSize(12)
        f.setBold(True)
        title.setFont(f)
        root.addWidget(title)

        splitter = QSplitter(Qt.Horizontal)
        splitter.setHandleWidth(6)
        splitter.addWidget(self._build_left_panel())
        splitter.addWidget(self._build_result_panel())
        splitter.setSizes([420, 560])
        root.addWidget(splitter, stretch=3)

        root.addWidget(self._build_crs_section(), stretch=1)
        root.addLayout(self._build_button_row())

        self.statusBar().showMessage("Enter a position and click 'Convert'")
        self.statusBar().setStyleSheet("color: #9CDCFE;")
        self._on_source_changed()

    def _build_left_panel(self) -> QWidget:
        panel = QWidget()
        vbox = QVBoxLayout(panel)
        vbox.setContentsMargins(0, 0, 0, 0)

        src = QGroupBox("Source")
        src.setStyleSheet(_GROUP)
        form = QFormLayout(src)
        self._source_combo = self._variant_combo(GridVariant.WGS84)
        self._source_combo.currentIndexChanged.connect(self._on_source_changed)
        self._format_combo = QComboBox()
        self._format_combo.setStyleSheet(_INPUT)
        for fmt, label in _FORMAT_LABELS.items():
            self._format_combo.addItem(label, fmt)
        self._a_label = QLabel()
        self._b_label = QLabel()
        self._a_input = self._lineedit()
        self._b_input = self._lineedit()
        self._a_input.returnPressed.connect(self._convert)
        self._b_input.returnPressed.connect(self._convert)
        form.addRow("Grid:", self._source_combo)
        form.addRow("Format:", self._format_combo)
        form.addRow(self._a_label, self._a_input)
        form.addRow(self._b_label, self._b_input)
        vbox.addWidget(src)

        dst = QGroupBox("Target")
        dst.setStyleSheet(_GROUP)
        form = QFormLayout(dst)
        self._target_combo = self._variant_combo(GridVariant.SWEREF_99_TM)
        form.addRow("Grid:", self._target_combo)
        vbox.addWidget(dst)
        vbox.addStretch()
        return panel

    def _build_result_panel(self) -> QGroupBox:
        panel = QGroupBox("Result")
        panel.setStyleSheet(_GROUP)
        layout = QVBoxLayout(panel)
        self._result_text = QTextEdit()
        self._result_text.setReadOnly(True)
        self._result_text.setFont(_MONO)
        self._result_text.setStyleSheet(_DARK_TEXT)
        self._result_text.setPlaceholderText("Converted position appears here…")
        layout.addWidget(self._result_text)
        return panel

    def _build_crs_section(self) -> QGroupBox:
        grp = QGroupBox("CRS Metadata  (target grid)")
        grp.setStyleSheet(_GROUP)
        layout = QVBoxLayout(grp)
        self._crs_text = QTextEdit()
        self._crs_text.setReadOnly(True)
        self._crs_text.setFont(_MONO)
        self._crs_text.setStyleSheet(_DARK_TEXT)
        self._crs_text.setMaximumHeight(130)
        self._crs_text.setPlaceholderText("Click 'Lookup CRS' to describe the target grid…")
        layout.addWidget(self._crs_text)
        return grp

    def _build_button_row(self) -> QHBoxLayout:
        row = QHBoxLayout()

        swap_btn = QPushButton("Swap Source/Target")
        swap_btn.setStyleSheet(_BTN_SECONDARY)
        swap_btn.setToolTip("Use the last result as the new source")
        swap_btn.clicked.connect(self._swap)
        row.addWidget(swap_btn)

        row.addStretch()

        self._lookup_btn = QPushButton("Lookup CRS")
        self._lookup_btn.setStyleSheet(_BTN_SECONDARY)
        self._lookup_btn.clicked.connect(self._lookup_crs)
        row.addWidget(self._lookup_btn)

        convert_btn = QPushButton("Convert")
        convert_btn.setStyleSheet(_BTN_PRIMARY)
        convert_btn.clicked.connect(self._convert)
        row.addWidget(convert_btn)
        return row

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _lineedit(self) -> QLineEdit:
        w = QLineEdit()
        w.setStyleSheet(_INPUT)
        return w

    @staticmethod
    def _variant_combo(selected: GridVariant) -> QComboBox:
        combo = QComboBox()
        combo.setStyleSheet(_INPUT)
        for v in GridVariant:
            combo.addItem(v.value, v)
        combo.setCurrentIndex(list(GridVariant).index(selected))
        return combo

    def _track(self, worker: QThread):
        """Keep a reference until the worker has finished."""
        self._workers.append(worker)
        worker.finished.connect(lambda: self._untrack(worker))

    def _untrack(self, worker: QThread):
        if worker in self._workers:
            self._workers.remove(worker)

    def _on_source_changed(self):
        geodetic = self._source_combo.currentData().is_wgs84
        self._format_combo.setEnabled(geodetic)
        if geodetic:
            self._a_label.setText("Latitude:")
            self._b_label.setText("Longitude:")
            self._a_input.setPlaceholderText("e.g. 59.330231 or N 59º 19' 48.8316\"")
            self._b_input.setPlaceholderText("e.g. 18.059196 or E 18º 3' 33.1056\"")
        else:
            self._a_label.setText("Northing (X):")
            self._b_label.setText("Easting (Y):")
            self._a_input.setPlaceholderText("metres")
            self._b_input.setPlaceholderText("metres")

    # ------------------------------------------------------------------
    # Convert
    # ------------------------------------------------------------------

    def _form_to_position(self) -> Position:
        """Build the source position.  Raises ValueError on bad input."""
        variant = self._source_combo.currentData()
        a_text = self._a_input.text().strip()
        b_text = self._b_input.text().strip()

        if variant.is_wgs84:
            fmt = self._format_combo.currentData()
            latitude = parse_latitude(a_text, fmt)
            longitude = parse_longitude(b_text, fmt)
            if is_unset(latitude) or is_unset(longitude):
                raise ValueError("Latitude and longitude must be given and at most 90°.")
            return Position.wgs84(latitude, longitude)

        if not a_text or not b_text:
            raise ValueError("Northing and easting are required.")
        return Position.grid(parse_decimal(a_text), parse_decimal(b_text), variant)

    def _convert(self):
        try:
            source = self._form_to_position()
        except FormatError as exc:
            QMessageBox.warning(self, "Format Error", str(exc))
            return
        except ValueError as exc:
            QMessageBox.warning(self, "Validation Error", str(exc))
            return

        target = self._target_combo.currentData()
        self._conversion_id += 1
        try:
            result = source.convert_to(target)
        except ValueError as exc:
            self.statusBar().showMessage("Conversion failed")
            QMessageBox.warning(self, "Conversion Error", str(exc))
            return

        self._result = result
        self._result_text.setPlainText(self._format_result(source, result))
        self.statusBar().showMessage(f"Converted {source.variant} → {target}")

        w = _ReferenceWorker(self._conversion_id, source, target)
        w.result.connect(self._on_reference_success)
        w.failed.connect(lambda msg: self.statusBar().showMessage(f"PROJ check failed: {msg}"))
        self._track(w)
        w.start()

    @staticmethod
    def _format_result(source: Position, result: Position) -> str:
        lines = [
            "── Source ───────────────────────────────",
            f"  {source}",
            "",
            "── Result ───────────────────────────────",
        ]
        if result.variant.is_wgs84:
            for fmt, label in _FORMAT_LABELS.items():
                lines.append(f"  {label}:")
                lines.append(f"    Latitude:   {result.latitude_to_string(fmt)}")
                lines.append(f"    Longitude:  {result.longitude_to_string(fmt)}")
        else:
            lines += [
                f"  Grid:       {result.variant}",
                f"  Northing:   {format_decimal(result.northing)} m",
                f"  Easting:    {format_decimal(result.easting)} m",
            ]
        return "\n".join(lines)

    def _on_reference_success(self, conversion_id: int, target: GridVariant, diff):
        if conversion_id != self._conversion_id:
            return   # superseded by a later conversion
        d_a, d_b = diff
        unit = "°" if target.is_wgs84 else " m"
        self._result_text.append(
            "\n── PROJ check (built-in − PROJ) ─────────\n"
            f"  Δ first:    {d_a:+.9f}{unit}\n"
            f"  Δ second:   {d_b:+.9f}{unit}"
        )

    def _swap(self):
        if self._result is None:
            return
        result = self._result
        self._source_combo.setCurrentIndex(list(GridVariant).index(result.variant))
        self._format_combo.setCurrentIndex(0)
        self._a_input.setText(format_decimal(result.a))
        self._b_input.setText(format_decimal(result.b))
        self.statusBar().showMessage("Result moved to source")

    # ------------------------------------------------------------------
    # CRS lookup
    # ------------------------------------------------------------------

    def _lookup_crs(self):
        variant = self._target_combo.currentData()
        self._lookup_btn.setEnabled(False)
        self.statusBar().showMessage(f"Looking up CRS for {variant}…")

        w = _LookupWorker(variant)
        w.result.connect(self._on_lookup_success)
        w.failed.connect(self._on_lookup_failed)
        w.finished.connect(lambda: self._lookup_btn.setEnabled(True))
        self._track(w)
        w.start()

    def _on_lookup_success(self, meta):
        self._crs_text.setPlainText("\n".join([
            f"  EPSG:            {meta.epsg}",
            f"  CRS Name:        {meta.crs_name}",
            f"  Description:     {meta.description}",
            f"  Geodetic Datum:  {meta.geodetic_datum}",
            f"  Map Projection:  {meta.map_projection}",
            f"  Map Zone:        {meta.map_zone}",
        ]))
        self.statusBar().showMessage(f"CRS loaded: {meta.crs_name}")

    def _on_lookup_failed(self, msg: str):
        self.statusBar().showMessage("CRS lookup failed")
        QMessageBox.warning(self, "CRS Lookup Error", f"Could not describe the grid:\n\n{msg}")
