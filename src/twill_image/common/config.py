"""Global image settings.

Values are read from ``TWILL_IMAGE_*`` environment variables (or a ``.env``
file) and otherwise fall back to the defaults below. Compilers receive an
explicit ``ImageSettings`` instance; ``get_settings()`` provides the shared one.
"""

from functools import lru_cache
from typing import ClassVar

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .schemas import Layout, Loading


class ImageSettings(BaseSettings):
    """Defaults applied when neither overrides nor the descriptor set a value."""

    background_color: str = Field(
        default="transparent",
        description="Fill shown behind the image before it paints",
    )
    lqip: bool = Field(default=True, description="Render a low-quality placeholder")
    webp_support: bool = Field(
        default=True,
        description="Emit a WebP <source> after each native format source",
    )
    layout: str = Field(default=Layout.FULL_WIDTH, description="Default layout")
    loading: Loading = Field(default=Loading.LAZY, description="Default loading attribute")

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="TWILL_IMAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )


@lru_cache
def get_settings() -> ImageSettings:
    """Return the process-wide settings instance."""
    settings = ImageSettings()
    logger.debug(
        f"Loaded image settings: layout={settings.layout}, lqip={settings.lqip}, "
        f"webp_support={settings.webp_support}"
    )
    return settings
