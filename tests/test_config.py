"""Unit tests for image settings."""

import pytest

from twill_image import Layout, Loading, ResponsiveImageCompiler
from twill_image.common.config import ImageSettings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_defaults():
    """Test built-in defaults."""
    settings = ImageSettings(_env_file=None)  # pyright: ignore[reportCallIssue]

    assert settings.background_color == "transparent"
    assert settings.lqip is True
    assert settings.webp_support is True
    assert settings.layout == Layout.FULL_WIDTH
    assert settings.loading == Loading.LAZY


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch):
    """Test TWILL_IMAGE_* environment variables are read."""
    monkeypatch.setenv("TWILL_IMAGE_WEBP_SUPPORT", "false")
    monkeypatch.setenv("TWILL_IMAGE_LQIP", "0")
    monkeypatch.setenv("TWILL_IMAGE_BACKGROUND_COLOR", "#f5f5f5")
    monkeypatch.setenv("TWILL_IMAGE_LOADING", "eager")

    settings = ImageSettings(_env_file=None)  # pyright: ignore[reportCallIssue]

    assert settings.webp_support is False
    assert settings.lqip is False
    assert settings.background_color == "#f5f5f5"
    assert settings.loading == Loading.EAGER


def test_settings_are_frozen():
    settings = ImageSettings(_env_file=None)  # pyright: ignore[reportCallIssue]
    with pytest.raises(ValueError):
        settings.lqip = False  # pyright: ignore[reportAttributeAccessIssue]


def test_get_settings_cached():
    assert get_settings() is get_settings()


def test_compiler_uses_shared_settings(monkeypatch: pytest.MonkeyPatch, descriptor):
    """Test a compiler built without settings reads the environment."""
    monkeypatch.setenv("TWILL_IMAGE_WEBP_SUPPORT", "false")

    compiler = ResponsiveImageCompiler()

    assert compiler.settings is get_settings()
    assert len(compiler.compile(descriptor).main_sources) == 1
