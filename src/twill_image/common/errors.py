"""Exceptions raised while compiling image attributes."""

from typing_extensions import override

from pydantic import ValidationError


class TwillImageError(Exception):
    """Base class for all twill_image errors."""

    def __init__(self, message: str = "An unknown image compilation error occurred."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return self.message


class InvalidDescriptorError(TwillImageError, ValueError):
    """Raised when a raw image descriptor lacks required fields.

    A descriptor without ``image.src``, ``image.width`` or ``image.height`` is a
    caller contract violation. These are never replaced by defaults.
    """

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "InvalidDescriptorError":
        return cls(f"Invalid image descriptor: {_describe(error)}")


class InvalidOverridesError(TwillImageError, ValueError):
    """Raised when caller overrides fail validation."""

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "InvalidOverridesError":
        return cls(f"Invalid compile overrides: {_describe(error)}")


def _describe(error: ValidationError) -> str:
    parts: list[str] = []
    for item in error.errors():
        location = ".".join(str(loc) for loc in item["loc"]) or "<root>"
        parts.append(f"{location} ({item['msg']})")
    return "; ".join(parts)
