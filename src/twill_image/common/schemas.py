"""Pydantic schemas for image descriptors, overrides and render bundles."""

from enum import StrEnum
from pathlib import PurePosixPath
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ─────────────────────────────────────────────────────────────
# Enumerations
# ─────────────────────────────────────────────────────────────


class Layout(StrEnum):
    """Sizing behaviour of the rendered image."""

    FULL_WIDTH = "fullWidth"
    """Take the full width of the container element."""
    CONSTRAINED = "constrained"
    """Take the full width of the container up to the image width."""
    FIXED = "fixed"
    """Take an exact width and height."""


class Loading(StrEnum):
    """Value of the ``<img>`` loading attribute."""

    LAZY = "lazy"
    EAGER = "eager"


# ─────────────────────────────────────────────────────────────
# Raw descriptor (input)
# ─────────────────────────────────────────────────────────────


class _CamelModel(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ImageData(_CamelModel):
    """A single crop as produced by the content layer.

    Attributes:
        src: Default image url
        alt: Description of the image
        width: Natural width in pixels
        height: Natural height in pixels
        aspect_ratio: width / height (derived from dimensions when absent)
        src_set: Native format srcset
        src_set_webp: WebP srcset
        extension: File extension of the native format (derived from src when absent)
        lqip_base64: Low-quality placeholder payload (data uri)
    """

    src: str = Field(..., min_length=1, description="Default image source url")
    alt: str | None = Field(default=None, description="Description of the image")
    width: int = Field(..., gt=0, description="Natural width in pixels")
    height: int = Field(..., gt=0, description="Natural height in pixels")
    aspect_ratio: float | None = Field(default=None, gt=0, description="width / height")
    src_set: str | None = None
    src_set_webp: str | None = None
    extension: str | None = None
    lqip_base64: str | None = None

    @property
    def ratio(self) -> float:
        if self.aspect_ratio is not None:
            return self.aspect_ratio
        return self.width / self.height

    @property
    def file_extension(self) -> str | None:
        if self.extension:
            return self.extension
        # Drop query string and fragment before looking at the suffix
        path = self.src.split("?", 1)[0].split("#", 1)[0]
        suffix = PurePosixPath(path).suffix
        return suffix[1:].lower() if suffix else None


class ArtDirectionSource(_CamelModel):
    """An alternate crop selected by a media query."""

    media_query: str = Field(..., description="CSS media query, e.g. '(max-width: 767px)'")
    image: ImageData


class ImageDescriptor(_CamelModel):
    """Raw image descriptor. Source order is significant."""

    image: ImageData
    sources: list[ArtDirectionSource] | None = None
    layout: str | None = None
    sizes: str | None = None


# ─────────────────────────────────────────────────────────────
# Caller overrides
# ─────────────────────────────────────────────────────────────


class CompileOverrides(_CamelModel):
    """Frontend options overriding descriptor values and global settings."""

    background_color: str | None = None
    layout: str | None = Field(
        default=None,
        description="One of 'fullWidth', 'constrained' or 'fixed'",
    )
    loading: Loading | None = None
    lqip: bool | None = None
    sizes: str | None = None
    class_: str | None = Field(
        default=None,
        alias="class",
        description="CSS class added to the wrapper element",
    )
    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


# ─────────────────────────────────────────────────────────────
# Output
# ─────────────────────────────────────────────────────────────


class SourceEntry(_CamelModel):
    """Attributes of a single ``<source>`` tag."""

    srcset: str | None = None
    aspect_ratio: float = Field(..., description="Aspect ratio in percentage form (ratio * 100)")
    type: str | None = None
    media_query: str | None = None

    def to_dict(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


class RenderBundle(_CamelModel):
    """Everything a renderer needs to emit the picture element.

    Optional attributes are ``None`` when they have no value. ``to_dict()``
    gives the sparse camelCase mapping handed to templates.
    """

    alt: str | None = None
    aspect_ratio: float
    height: int
    width: int
    layout: str
    loading: Loading
    should_load: bool
    main_src: str
    main_sources: list[SourceEntry]
    placeholder_src: str | None = None
    placeholder_sources: list[SourceEntry] | None = None
    main_style: str
    placeholder_style: str
    wrapper_style: str
    wrapper_classes: str
    sizes: str | None = None

    def to_dict(self) -> dict[str, object]:
        data = self.model_dump(by_alias=True, exclude_none=True, mode="json")
        return {key: value for key, value in data.items() if value != "" and value != []}
