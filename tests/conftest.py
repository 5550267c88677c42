"""Test configuration and fixtures for twill_image.

This module provides:
- Settings fixtures with WebP on/off
- Raw descriptor fixtures (single image, art-directed)
- FastAPI TestClient for route testing
"""

import os
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from twill_image import ImageSettings, ResponsiveImageCompiler
from twill_image.routes import create_router

# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Keep TWILL_IMAGE_* variables from the host out of the tests."""
    for key in list(os.environ):
        if key.startswith("TWILL_IMAGE_"):
            monkeypatch.delenv(key)


@pytest.fixture
def settings() -> ImageSettings:
    """Default settings: WebP and LQIP enabled."""
    return ImageSettings(
        background_color="transparent",
        lqip=True,
        webp_support=True,
        _env_file=None,  # pyright: ignore[reportCallIssue]
    )


@pytest.fixture
def settings_no_webp() -> ImageSettings:
    return ImageSettings(
        background_color="transparent",
        lqip=True,
        webp_support=False,
        _env_file=None,  # pyright: ignore[reportCallIssue]
    )


@pytest.fixture
def compiler(settings: ImageSettings) -> ResponsiveImageCompiler:
    return ResponsiveImageCompiler(settings)


@pytest.fixture
def compiler_no_webp(settings_no_webp: ImageSettings) -> ResponsiveImageCompiler:
    return ResponsiveImageCompiler(settings_no_webp)


# ============================================================================
# Descriptor Fixtures
# ============================================================================


@pytest.fixture
def image_data() -> dict[str, Any]:
    """Main crop as sent by the content layer (camelCase keys)."""
    return {
        "src": "a.jpg",
        "alt": "A mountain lake",
        "width": 800,
        "height": 400,
        "aspectRatio": 2.0,
        "srcSet": "a.jpg 1x",
        "srcSetWebp": "a.webp 1x",
        "extension": "jpg",
        "lqipBase64": "data:image/gif;base64,R0lGODlhAQABAAAAACw=",
    }


@pytest.fixture
def descriptor(image_data: dict[str, Any]) -> dict[str, Any]:
    return {"image": image_data}


@pytest.fixture
def art_directed_descriptor(image_data: dict[str, Any]) -> dict[str, Any]:
    """Descriptor with two art-direction sources (mobile, tablet)."""
    return {
        "image": image_data,
        "sources": [
            {
                "mediaQuery": "(max-width: 767px)",
                "image": {
                    "src": "mobile.png",
                    "alt": "A mountain lake",
                    "width": 400,
                    "height": 400,
                    "aspectRatio": 1.0,
                    "srcSet": "mobile.png 1x, mobile@2x.png 2x",
                    "srcSetWebp": "mobile.webp 1x, mobile@2x.webp 2x",
                    "extension": "png",
                    "lqipBase64": "data:image/gif;base64,mobile",
                },
            },
            {
                "mediaQuery": "(max-width: 1023px)",
                "image": {
                    "src": "tablet.jpg",
                    "alt": "A mountain lake",
                    "width": 600,
                    "height": 400,
                    "aspectRatio": 1.5,
                    "srcSet": "tablet.jpg 1x",
                    "srcSetWebp": "tablet.webp 1x",
                    "extension": "jpg",
                    "lqipBase64": "data:image/gif;base64,tablet",
                },
            },
        ],
    }


# ============================================================================
# API Fixtures
# ============================================================================


@pytest.fixture
def api_client(compiler: ResponsiveImageCompiler) -> TestClient:
    """Provide FastAPI TestClient for route testing."""
    app = FastAPI()
    app.include_router(create_router(compiler))
    return TestClient(app)
