"""Widget factory for the sinusoid parameter controls.

Spinboxes, sliders and labeled rows are built here so the controls
component only deals with wiring values into ShadingConfig.
"""

from typing import Tuple

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QDoubleSpinBox,
    QHBoxLayout,
    QLabel,
    QSlider,
    QSpinBox,
    QWidget,
)


class WidgetFactory:
    """Factory class for the control widgets used by the preview window."""

    @staticmethod
    def create_int_spinbox(
        range_min: int,
        range_max: int,
        value: int,
        suffix: str = "",
        tooltip: str = "",
    ) -> QSpinBox:
        """Create a QSpinBox with range, value, suffix and tooltip set."""
        spinbox = QSpinBox()
        spinbox.setRange(range_min, range_max)
        spinbox.setValue(value)
        spinbox.setSuffix(suffix)
        spinbox.setToolTip(tooltip)
        return spinbox

    @staticmethod
    def create_double_spinbox(
        range_min: float,
        range_max: float,
        value: float,
        decimals: int,
        step: float,
        tooltip: str = "",
    ) -> QDoubleSpinBox:
        """Create a QDoubleSpinBox.

        Args:
            range_min: Minimum value
            range_max: Maximum value
            value: Initial value
            decimals: Number of decimal places shown and kept
            step: Increment for arrow keys and buttons
            tooltip: Tooltip text

        Returns:
            Configured QDoubleSpinBox
        """
        spinbox = QDoubleSpinBox()
        # Decimals first, otherwise Qt rounds the range and value to 2 places
        spinbox.setDecimals(decimals)
        spinbox.setRange(range_min, range_max)
        spinbox.setSingleStep(step)
        spinbox.setValue(value)
        spinbox.setToolTip(tooltip)
        return spinbox

    @staticmethod
    def create_slider_with_label(
        range_min: int,
        range_max: int,
        value: int,
        tick_interval: int = 0,
        tooltip: str = "",
    ) -> Tuple[QSlider, QLabel]:
        """Create a horizontal slider plus a label that tracks its value."""
        slider = QSlider(Qt.Orientation.Horizontal)
        slider.setRange(range_min, range_max)
        slider.setValue(value)
        slider.setToolTip(tooltip)
        if tick_interval:
            slider.setTickPosition(QSlider.TickPosition.TicksBelow)
            slider.setTickInterval(tick_interval)

        label = QLabel(str(value))
        label.setMinimumWidth(40)
        slider.valueChanged.connect(lambda v: label.setText(str(v)))

        return slider, label

    @staticmethod
    def create_labeled_row(label_text: str, *widgets: QWidget) -> QHBoxLayout:
        """Lay out a caption followed by one or more widgets."""
        layout = QHBoxLayout()
        layout.addWidget(QLabel(label_text))
        for widget in widgets:
            layout.addWidget(widget)
        return layout
