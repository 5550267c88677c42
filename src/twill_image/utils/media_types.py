from enum import StrEnum


class ImageMimeType(StrEnum):
    PNG = "image/png"
    JPEG = "image/jpeg"
    GIF = "image/gif"
    BMP = "image/bmp"
    ICO = "image/vnd.microsoft.icon"
    TIFF = "image/tiff"
    SVG = "image/svg+xml"
    WEBP = "image/webp"

    @classmethod
    def from_extension(cls, extension: str | None) -> "ImageMimeType | None":
        if not extension:
            return None
        return _EXTENSION_TYPES.get(extension.lower().lstrip("."))


_EXTENSION_TYPES: dict[str, ImageMimeType] = {
    "png": ImageMimeType.PNG,
    "jpe": ImageMimeType.JPEG,
    "jpeg": ImageMimeType.JPEG,
    "jpg": ImageMimeType.JPEG,
    "gif": ImageMimeType.GIF,
    "bmp": ImageMimeType.BMP,
    "ico": ImageMimeType.ICO,
    "tiff": ImageMimeType.TIFF,
    "tif": ImageMimeType.TIFF,
    "svg": ImageMimeType.SVG,
    "svgz": ImageMimeType.SVG,
    "webp": ImageMimeType.WEBP,
}


def mime_type(extension: str | None) -> str | None:
    """Map a file extension to its MIME type, or None when unknown."""
    found = ImageMimeType.from_extension(extension)
    return str(found) if found is not None else None
