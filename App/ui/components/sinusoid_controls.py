"""Sinusoid shading controls component."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QWidget, QVBoxLayout

from models import MAX_INPUT_DIMENSION, ShadingConfig
from ui.widgets import WidgetFactory


class SinusoidControlsWidget(QWidget):
    """Controls for the sinusoid shading parameters.

    This component provides UI controls for every ShadingConfig field:
    - Number of lines
    - Output width/height
    - Sample frequency
    - Minimum/maximum sinusoid frequency
    - Amplitude (ratio of row height)

    AIDEV-NOTE: ShadingConfig is immutable. Each control builds a new config
    through the typed with_* builders and emits it.
    """

    # Emitted with the new ShadingConfig whenever any control value changes
    config_changed = pyqtSignal(object)

    def __init__(self, config: ShadingConfig, parent=None):
        """Initialize sinusoid controls.

        Args:
            config: Initial configuration
            parent: Parent widget
        """
        super().__init__(parent)
        self.config = config
        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Create and layout UI controls."""
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        # Lines slider with auto-updating label
        self.lines_slider, self.lines_label = WidgetFactory.create_slider_with_label(
            range_min=1,
            range_max=MAX_INPUT_DIMENSION,
            value=self.config.lines,
            tick_interval=128,
            tooltip="Number of sinusoids (rows) to draw",
        )
        lines_row = WidgetFactory.create_labeled_row(
            "Lines:", self.lines_slider, self.lines_label
        )
        layout.addLayout(lines_row)

        # Output size
        self.width_spin = WidgetFactory.create_int_spinbox(
            range_min=1,
            range_max=10000,
            value=self.config.width,
            suffix=" px",
            tooltip="Output document width",
        )
        layout.addLayout(WidgetFactory.create_labeled_row("Width:", self.width_spin))

        self.height_spin = WidgetFactory.create_int_spinbox(
            range_min=1,
            range_max=10000,
            value=self.config.height,
            suffix=" px",
            tooltip="Output document height",
        )
        layout.addLayout(WidgetFactory.create_labeled_row("Height:", self.height_spin))

        # Sample frequency
        self.sample_freq_spin = WidgetFactory.create_double_spinbox(
            range_min=0.1,
            range_max=50.0,
            value=self.config.sample_freq,
            decimals=1,
            step=0.5,
            tooltip="Points per source column. Higher is smoother but slower",
        )
        layout.addLayout(
            WidgetFactory.create_labeled_row("Sample Frequency:", self.sample_freq_spin)
        )

        # Frequency range
        self.min_freq_spin = WidgetFactory.create_double_spinbox(
            range_min=0.001,
            range_max=10.0,
            value=self.config.min_freq,
            decimals=3,
            step=0.01,
            tooltip="Frequency used for the lightest areas",
        )
        layout.addLayout(
            WidgetFactory.create_labeled_row("Min Frequency:", self.min_freq_spin)
        )

        self.max_freq_spin = WidgetFactory.create_double_spinbox(
            range_min=0.001,
            range_max=10.0,
            value=self.config.max_freq,
            decimals=3,
            step=0.1,
            tooltip="Frequency used for the darkest areas",
        )
        layout.addLayout(
            WidgetFactory.create_labeled_row("Max Frequency:", self.max_freq_spin)
        )

        # Amplitude
        self.amplitude_spin = WidgetFactory.create_double_spinbox(
            range_min=0.0,
            range_max=2.0,
            value=self.config.amplitude,
            decimals=2,
            step=0.05,
            tooltip="Ratio of row height. Above 0.5 rows overlap",
        )
        layout.addLayout(
            WidgetFactory.create_labeled_row("Amplitude:", self.amplitude_spin)
        )

        # Widgets clamp out-of-range initial values
        for control, value in self._control_values(self.config):
            self._show_value(control, value)
        self.lines_label.setText(str(self.config.lines))

        self.setLayout(layout)

    def _connect_signals(self):
        """Connect widget signals to config updates."""
        self.lines_slider.valueChanged.connect(
            lambda v: self._apply(self.config.with_lines(v))
        )
        self.width_spin.valueChanged.connect(
            lambda v: self._apply(self.config.with_size(v, self.config.height))
        )
        self.height_spin.valueChanged.connect(
            lambda v: self._apply(self.config.with_size(self.config.width, v))
        )
        self.sample_freq_spin.valueChanged.connect(
            lambda v: self._apply(self.config.with_sample_freq(v))
        )
        self.min_freq_spin.valueChanged.connect(
            lambda v: self._apply(
                self.config.with_frequency_range(v, self.config.max_freq)
            )
        )
        self.max_freq_spin.valueChanged.connect(
            lambda v: self._apply(
                self.config.with_frequency_range(self.config.min_freq, v)
            )
        )
        self.amplitude_spin.valueChanged.connect(
            lambda v: self._apply(self.config.with_amplitude(v))
        )

    def _apply(self, config: ShadingConfig):
        """Store new config and emit signal.

        Args:
            config: Replacement configuration
        """
        self.config = config
        self.config_changed.emit(config)

    def _control_values(self, config: ShadingConfig):
        """Pair each control with the config value it displays."""
        return [
            (self.lines_slider, config.lines),
            (self.width_spin, config.width),
            (self.height_spin, config.height),
            (self.sample_freq_spin, config.sample_freq),
            (self.min_freq_spin, config.min_freq),
            (self.max_freq_spin, config.max_freq),
            (self.amplitude_spin, config.amplitude),
        ]

    @staticmethod
    def _show_value(control, value):
        """Set a control's value, widening its range if needed.

        AIDEV-NOTE: The default ranges are for interactive use only. Configs
        restored from disk may go beyond them and must not be clamped.
        """
        if value > control.maximum():
            control.setMaximum(value)
        if value < control.minimum():
            control.setMinimum(value)
        control.blockSignals(True)
        control.setValue(value)
        control.blockSignals(False)

    def set_config(self, config: ShadingConfig):
        """Replace the configuration and refresh every control.

        Control signals are blocked while updating, then a single
        config_changed is emitted.
        """
        for control, value in self._control_values(config):
            self._show_value(control, value)
        self.lines_label.setText(str(config.lines))

        self._apply(config)

    def get_config(self) -> ShadingConfig:
        """Get the current configuration."""
        return self.config
