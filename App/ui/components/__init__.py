"""UI components package for modular control widgets."""

from ui.components.sinusoid_controls import SinusoidControlsWidget

__all__ = ["SinusoidControlsWidget"]
