"""Error types raised by the sinusoid shading pipeline."""


class SinusoidShadingError(Exception):
    """Base class for all pipeline errors."""


class DecodeError(SinusoidShadingError, ValueError):
    """Input bytes are not a supported or decodable raster image."""


class ValidationError(SinusoidShadingError, ValueError):
    """Configuration or image cannot be used by the numeric pipeline."""


class WriteError(SinusoidShadingError, OSError):
    """The output document could not be persisted."""
