"""Test configuration and fixtures for cl_image_tools.

This module provides:
- Pytest configuration (markers, storage location option)
- Function-scoped fixtures (synthetic images, storage, processors)
- Route fixtures (FastAPI TestClient)
"""

import os
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from PIL import Image, ImageDraw

from cl_image_tools.common.file_storage_impl import LocalFileStorage
from cl_image_tools.plugins.image_processing import BUILTIN_PROCESSORS, create_router
from cl_image_tools.registry import ProcessorRegistry, build_registry

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_addoption(parser):
    """Add custom ini values."""
    parser.addini(
        "test_storage_base_dir",
        help="Base directory for test storage (default: per-test tmp_path)",
        default="",
    )


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: full integration tests (upload → processor → response)",
    )


# ============================================================================
# Synthetic Images
# ============================================================================


def _draw_test_image(size: tuple[int, int], mode: str = "RGB") -> Image.Image:
    """Gradient-ish test card with a grid and a centred ellipse."""
    width, height = size
    fill = (73, 109, 137, 255) if mode == "RGBA" else (73, 109, 137)
    img = Image.new(mode, size, color=fill)
    draw = ImageDraw.Draw(img)

    for x in range(0, width, 50):
        draw.line([(x, 0), (x, height)], fill=(255, 255, 255), width=2)
    for y in range(0, height, 50):
        draw.line([(0, y), (width, y)], fill=(255, 255, 255), width=2)

    draw.ellipse(
        [width // 4, height // 4, 3 * width // 4, 3 * height // 4],
        fill=(200, 100, 100),
    )
    return img


@pytest.fixture
def portrait_image(tmp_path: Path) -> Path:
    """600x800 JPEG."""
    path = tmp_path / "portrait.jpg"
    _draw_test_image((600, 800)).save(path, "JPEG", quality=90)
    return path


@pytest.fixture
def landscape_image(tmp_path: Path) -> Path:
    """800x600 JPEG."""
    path = tmp_path / "landscape.jpg"
    _draw_test_image((800, 600)).save(path, "JPEG", quality=90)
    return path


@pytest.fixture
def rotated_image(tmp_path: Path) -> Path:
    """JPEG stored at 800x600 with EXIF Orientation=6, displayed at 600x800."""
    path = tmp_path / "rotated.jpg"
    exif = Image.Exif()
    exif[0x0112] = 6
    _draw_test_image((800, 600)).save(path, "JPEG", quality=90, exif=exif)
    return path


@pytest.fixture
def rgba_image(tmp_path: Path) -> Path:
    """200x100 PNG with a half-transparent background."""
    path = tmp_path / "rgba.png"
    img = Image.new("RGBA", (200, 100), color=(255, 0, 0, 128))
    img.save(path, "PNG")
    return path


@pytest.fixture
def not_an_image(tmp_path: Path) -> Path:
    path = tmp_path / "notes.jpg"
    path.write_text("definitely not a JPEG")
    return path


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for test outputs."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def file_storage(tmp_path: Path, pytestconfig) -> LocalFileStorage:
    """Provide file storage for testing.

    Configuration priority:
    1. TEST_STORAGE_DIR environment variable
    2. pytest ini test_storage_base_dir option
    3. Default: tmp_path / "file_storage"
    """
    env_storage = os.environ.get("TEST_STORAGE_DIR")
    ini_storage = pytestconfig.getini("test_storage_base_dir")

    if env_storage:
        storage_dir = Path(env_storage)
    elif ini_storage:
        storage_dir = Path(ini_storage)
    else:
        storage_dir = tmp_path / "file_storage"

    return LocalFileStorage(base_dir=storage_dir)


@pytest.fixture
def processor_registry() -> ProcessorRegistry:
    """All built-in processors with default settings."""
    return build_registry(list(BUILTIN_PROCESSORS))


@pytest.fixture
def api_client(file_storage, processor_registry) -> TestClient:
    """Provide FastAPI TestClient for route testing."""
    app = FastAPI()
    app.include_router(create_router(file_storage, processor_registry))
    return TestClient(app)
