"""Common module - schemas, settings and errors."""

from .config import ImageSettings, get_settings
from .errors import InvalidDescriptorError, InvalidOverridesError, TwillImageError
from .schemas import (
    ArtDirectionSource,
    CompileOverrides,
    ImageData,
    ImageDescriptor,
    Layout,
    Loading,
    RenderBundle,
    SourceEntry,
)

__all__ = [
    "ArtDirectionSource",
    "CompileOverrides",
    "ImageData",
    "ImageDescriptor",
    "ImageSettings",
    "InvalidDescriptorError",
    "InvalidOverridesError",
    "Layout",
    "Loading",
    "RenderBundle",
    "SourceEntry",
    "TwillImageError",
    "get_settings",
]
