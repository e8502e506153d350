"""Sinusoid Shader - interactive preview entry point."""

import sys

from PyQt6.QtWidgets import QApplication

from ui.main_window import SinusoidShaderWindow


def main():
    """Launch the sinusoid shading preview application."""
    app = QApplication(sys.argv)

    app.setApplicationDisplayName("Sinusoid Shader")
    app.setApplicationName("SinusoidShader")

    window = SinusoidShaderWindow()
    if len(sys.argv) > 1:
        window.open_image(sys.argv[1])
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
