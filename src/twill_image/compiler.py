"""Compile a raw image descriptor into render-ready attributes."""

from collections.abc import Mapping

from loguru import logger
from pydantic import ValidationError

from .common.config import ImageSettings, get_settings
from .common.errors import InvalidDescriptorError, InvalidOverridesError
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
from .styles import resolve_styles
from .utils.media_types import ImageMimeType, mime_type

WRAPPER_CLASS = "twill-image-wrapper"
WRAPPER_CONSTRAINED_CLASS = "twill-image-wrapper-constrained"

# Placeholders are single-density data uris, always served as gif
PLACEHOLDER_MIME_TYPE = ImageMimeType.GIF


def build_source(
    srcset: str | None,
    aspect_ratio: float,
    type: str | None = None,
    media_query: str | None = None,
) -> SourceEntry:
    return SourceEntry(
        srcset=srcset or None,
        aspect_ratio=aspect_ratio * 100,
        type=str(type) if type else None,
        media_query=media_query or None,
    )


def default_sizes(layout: str, width: int) -> str | None:
    """Default sizes attribute for a layout, None for unknown layouts."""
    match layout:
        case Layout.CONSTRAINED:
            return f"(min-width:{width}px) {width}px, 100vw"
        case Layout.FIXED:
            return f"{width}px"
        case Layout.FULL_WIDTH:
            return "100vw"
        case _:
            logger.debug(f"No default sizes for layout '{layout}'")
            return None


def wrapper_classes(layout: str, extra_class: str | None = None) -> str:
    classes = [WRAPPER_CLASS]
    if layout == Layout.CONSTRAINED:
        classes.append(WRAPPER_CONSTRAINED_CLASS)
    if extra_class:
        classes.append(extra_class)
    return " ".join(classes)


class ResponsiveImageCompiler:
    """Turns image descriptors into ``RenderBundle`` instances.

    Stateless apart from its settings: a single compiler may be shared across
    threads and requests.

    Example:
        compiler = ResponsiveImageCompiler(ImageSettings(webp_support=False))
        bundle = compiler.compile(descriptor, {"layout": "constrained", "class": "hero"})
        context = bundle.to_dict()
    """

    def __init__(self, settings: ImageSettings | None = None):
        """Initialize compiler.

        Args:
            settings: Global defaults. If None, uses get_settings().
        """
        self.settings: ImageSettings = settings if settings is not None else get_settings()

    def compile(
        self,
        descriptor: ImageDescriptor | Mapping[str, object],
        overrides: CompileOverrides | Mapping[str, object] | None = None,
    ) -> RenderBundle:
        """Compile one descriptor.

        Args:
            descriptor: Raw image descriptor (model or mapping)
            overrides: Frontend options, highest precedence

        Returns:
            Frozen RenderBundle

        Raises:
            InvalidDescriptorError: If image src, width or height are missing or invalid
            InvalidOverridesError: If overrides fail validation
        """
        data = self._validate_descriptor(descriptor)
        options = self._validate_overrides(overrides)
        settings = self.settings
        image = data.image

        background_color = options.background_color or settings.background_color
        layout = str(options.layout or data.layout or settings.layout)
        loading = options.loading or settings.loading
        lqip = options.lqip if options.lqip is not None else settings.lqip
        width = options.width if options.width is not None else image.width
        height = options.height if options.height is not None else image.height
        sizes = options.sizes or data.sizes or default_sizes(layout, width)

        placeholder_src: str | None = None
        placeholder_sources: list[SourceEntry] | None = None
        if lqip:
            placeholder_src = image.lqip_base64 or None
            placeholder_sources = self._placeholder_sources(data.sources)

        styles = resolve_styles(layout, background_color, width, height)
        main_sources = self._main_sources(image, data.sources)

        logger.debug(
            f"Compiled image {image.src}: layout={layout}, sources={len(main_sources)}, "
            f"lqip={lqip}"
        )

        return RenderBundle(
            alt=image.alt or None,
            aspect_ratio=image.ratio,
            height=height,
            width=width,
            layout=layout,
            loading=loading,
            should_load=loading == Loading.EAGER,
            main_src=image.src,
            main_sources=main_sources,
            placeholder_src=placeholder_src,
            placeholder_sources=placeholder_sources,
            main_style=styles.main(loading),
            placeholder_style=styles.placeholder(),
            wrapper_style=styles.wrapper(),
            wrapper_classes=wrapper_classes(layout, options.class_),
            sizes=sizes,
        )

    def _main_sources(
        self, image: ImageData, sources: list[ArtDirectionSource] | None
    ) -> list[SourceEntry]:
        entries: list[SourceEntry] = []
        for source in sources or []:
            entries.extend(self._format_sources(source.image, source.media_query))
        # The unconditional default must come last
        entries.extend(self._format_sources(image))
        return entries

    def _format_sources(
        self, image: ImageData, media_query: str | None = None
    ) -> list[SourceEntry]:
        ratio = image.ratio
        entries = [build_source(image.src_set, ratio, mime_type(image.file_extension), media_query)]
        if self.settings.webp_support:
            entries.append(
                build_source(
                    image.src_set_webp or image.src_set,
                    ratio,
                    ImageMimeType.WEBP,
                    media_query,
                )
            )
        return entries

    def _placeholder_sources(
        self, sources: list[ArtDirectionSource] | None
    ) -> list[SourceEntry] | None:
        if not sources:
            return None

        entries = [
            build_source(
                f"{source.image.lqip_base64} 1x",
                source.image.ratio,
                PLACEHOLDER_MIME_TYPE,
                source.media_query,
            )
            for source in sources
            if source.image.lqip_base64
        ]
        return entries or None

    @staticmethod
    def _validate_descriptor(
        descriptor: ImageDescriptor | Mapping[str, object],
    ) -> ImageDescriptor:
        if isinstance(descriptor, ImageDescriptor):
            return descriptor
        try:
            return ImageDescriptor.model_validate(descriptor)
        except ValidationError as e:
            raise InvalidDescriptorError.from_validation_error(e) from e

    @staticmethod
    def _validate_overrides(
        overrides: CompileOverrides | Mapping[str, object] | None,
    ) -> CompileOverrides:
        if overrides is None:
            return CompileOverrides()
        if isinstance(overrides, CompileOverrides):
            return overrides
        try:
            return CompileOverrides.model_validate(overrides)
        except ValidationError as e:
            raise InvalidOverridesError.from_validation_error(e) from e


def compile_image(
    descriptor: ImageDescriptor | Mapping[str, object],
    overrides: CompileOverrides | Mapping[str, object] | None = None,
    settings: ImageSettings | None = None,
) -> RenderBundle:
    """Compile a descriptor with a one-off compiler."""
    return ResponsiveImageCompiler(settings).compile(descriptor, overrides)
