"""Main application window with live sinusoid shading preview."""

from __future__ import annotations

from pathlib import Path

from PIL import Image
from PyQt6.QtCore import QByteArray, QThread, QTimer, pyqtSignal
from PyQt6.QtWidgets import (
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)
from PyQt6.QtSvgWidgets import QSvgWidget

from config_manager import ConfigManager
from errors import DecodeError, WriteError
from image_processing import document_to_svg, load_image, save_svg, transform
from image_processing.utils import resize_to_max_dimension
from models import MAX_INPUT_DIMENSION, ShadingConfig, SinusoidDocument
from ui.components import SinusoidControlsWidget

# Delay before recomputing after a parameter change (ms)
DEBOUNCE_MS = 150


class TransformThread(QThread):
    """Background thread for the transform to avoid blocking UI."""

    finished_document = pyqtSignal(object)  # SinusoidDocument
    error = pyqtSignal(str)  # Error message

    def __init__(self, image: Image.Image, config: ShadingConfig):
        super().__init__()
        self.image = image
        self.config = config

    def run(self):
        """Execute the transform in background."""
        try:
            document = transform(self.image, self.config)
            self.finished_document.emit(document)
        except Exception as e:
            # MemoryError on huge sample counts has an empty message
            self.error.emit(str(e) or type(e).__name__)


class SinusoidShaderWindow(QMainWindow):
    """Main window: image selection, parameter controls, and SVG preview."""

    def __init__(self, config_manager: ConfigManager | None = None):
        super().__init__()
        self.setWindowTitle("Sinusoid Shader v0.1.0")
        self.setMinimumSize(900, 600)

        # Application state
        self.config_manager = config_manager or ConfigManager()
        self.config = self.config_manager.load()
        self.image: Image.Image | None = None
        self.current_image_path: str | None = None
        self.document: SinusoidDocument | None = None
        self.transform_thread: TransformThread | None = None
        self._rerun_pending = False

        # AIDEV-NOTE: Parameter edits restart this timer so a burst of
        # spinbox changes only triggers one transform
        self.debounce_timer = QTimer(self)
        self.debounce_timer.setSingleShot(True)
        self.debounce_timer.setInterval(DEBOUNCE_MS)

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Initialize the user interface."""
        central = QWidget()
        layout = QHBoxLayout()

        # --- Left column: file selection, controls, actions ---
        side_layout = QVBoxLayout()

        file_layout = QHBoxLayout()
        self.file_path_label = QLabel("No image selected")
        self.file_path_label.setWordWrap(True)
        file_layout.addWidget(self.file_path_label, stretch=1)

        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.setToolTip("Select an image file (PNG, JPG, GIF, TIFF)")
        file_layout.addWidget(self.browse_btn)
        side_layout.addLayout(file_layout)

        controls_group = QGroupBox("Sinusoid Settings")
        controls_layout = QVBoxLayout()
        self.controls = SinusoidControlsWidget(self.config)
        controls_layout.addWidget(self.controls)
        controls_group.setLayout(controls_layout)
        side_layout.addWidget(controls_group)

        self.save_btn = QPushButton("Save SVG...")
        self.save_btn.setEnabled(False)
        self.save_btn.setToolTip("Write the current preview to an SVG file")
        side_layout.addWidget(self.save_btn)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        side_layout.addWidget(self.status_label)
        side_layout.addStretch()

        layout.addLayout(side_layout, stretch=0)

        # --- Right column: preview ---
        self.preview = QSvgWidget()
        self.preview.setMinimumSize(400, 400)
        self.preview.setStyleSheet("background-color: white;")
        layout.addWidget(self.preview, stretch=1)

        central.setLayout(layout)
        self.setCentralWidget(central)

    def _connect_signals(self):
        """Connect internal signals to handlers."""
        self.browse_btn.clicked.connect(self._on_browse_clicked)
        self.save_btn.clicked.connect(self._on_save_clicked)
        self.controls.config_changed.connect(self._on_config_changed)
        self.debounce_timer.timeout.connect(self._start_transform)

    # === Event Handlers ===

    def _on_browse_clicked(self):
        """Handle browse button click."""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Select Image",
            "",
            "Images (*.png *.jpg *.jpeg *.gif *.tif *.tiff);;All Files (*)",
        )
        if file_path:
            self.open_image(file_path)

    def open_image(self, file_path: str):
        """Load an image and match the output size to it."""
        try:
            image = load_image(file_path)
        except DecodeError as e:
            # Keep whatever was loaded before
            self.status_label.setText(f"Error: {e}")
            return

        self.image = resize_to_max_dimension(image, MAX_INPUT_DIMENSION)
        self.current_image_path = file_path
        self.file_path_label.setText(f"Selected: {Path(file_path).name}")

        width, height = self.image.size
        # set_config emits config_changed which schedules the transform
        self.controls.set_config(self.config.with_size(width, height))

    def _on_config_changed(self, config: ShadingConfig):
        """Store the new config and schedule a recompute."""
        self.config = config
        if self.image is not None:
            self.debounce_timer.start()

    def _start_transform(self):
        """Run the transform in the background, queueing one rerun if busy."""
        if self.image is None:
            return
        if self.transform_thread is not None and self.transform_thread.isRunning():
            self._rerun_pending = True
            return

        self.status_label.setText("Rendering...")
        self.transform_thread = TransformThread(self.image, self.config)
        self.transform_thread.finished_document.connect(self._on_transform_finished)
        self.transform_thread.error.connect(self._on_transform_error)
        self.transform_thread.finished.connect(self._on_thread_done)
        self.transform_thread.start()

    def _on_thread_done(self):
        if self._rerun_pending:
            self._rerun_pending = False
            self._start_transform()

    def _on_transform_finished(self, document: SinusoidDocument):
        """Show the rendered document."""
        self.document = document
        self.preview.load(QByteArray(document_to_svg(document).encode("utf-8")))
        self.save_btn.setEnabled(True)
        self.status_label.setText(
            f"{len(document.paths)} lines, {document.point_count()} points"
        )

    def _on_transform_error(self, error_msg: str):
        """Keep the previous preview and report the error."""
        pretty_msg = error_msg.replace("\n", " ").strip()
        self.status_label.setText(f"Error: {pretty_msg}")

    def _on_save_clicked(self):
        """Save the current document."""
        if self.document is None:
            return

        default_name = "sine_shaded_image.svg"
        if self.current_image_path:
            default_name = str(Path(self.current_image_path).with_suffix(".svg"))

        file_path, _ = QFileDialog.getSaveFileName(
            self, "Save SVG", default_name, "SVG Files (*.svg)"
        )
        if not file_path:
            return

        try:
            written = save_svg(self.document, file_path)
        except WriteError as e:
            QMessageBox.critical(self, "Save Failed", str(e))
            return
        self.status_label.setText(f"Saved {written}")

    def closeEvent(self, a0):
        """Persist settings and wait for a running transform."""
        if self.transform_thread is not None and self.transform_thread.isRunning():
            self.transform_thread.wait()

        success, error = self.config_manager.save(self.config)
        if not success:
            print(f"Warning: Could not save config file: {error}")
        super().closeEvent(a0)
