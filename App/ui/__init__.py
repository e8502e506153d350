"""UI components for the sinusoid shading preview application."""

from ui.main_window import SinusoidShaderWindow

__all__ = ["SinusoidShaderWindow"]
