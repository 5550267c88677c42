"""twill_image - Responsive image attribute compiler."""

from .common.config import ImageSettings, get_settings
from .common.errors import InvalidDescriptorError, InvalidOverridesError, TwillImageError
from .common.schemas import (
    ArtDirectionSource,
    CompileOverrides,
    ImageData,
    ImageDescriptor,
    Layout,
    Loading,
    RenderBundle,
    SourceEntry,
)
from .compiler import ResponsiveImageCompiler, compile_image
from .styles import ImageStyles, resolve_styles

__version__ = "0.1.0"

__all__ = [
    "ArtDirectionSource",
    "CompileOverrides",
    "ImageData",
    "ImageDescriptor",
    "ImageSettings",
    "ImageStyles",
    "InvalidDescriptorError",
    "InvalidOverridesError",
    "Layout",
    "Loading",
    "RenderBundle",
    "ResponsiveImageCompiler",
    "SourceEntry",
    "TwillImageError",
    "__version__",
    "compile_image",
    "get_settings",
    "resolve_styles",
]
