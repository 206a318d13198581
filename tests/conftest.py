"""
Pytest configuration for ODT Composer
"""

import io
import logging
import sys
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
from PIL import Image as PILImage

from odt_composer import DocumentBuilder, TextDocument
from odt_composer.utils.odf_names import NAMESPACES


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    
    # Console-only logging, warnings and errors only
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))
    
    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)
    
    yield
    
    root_logger.handlers.clear()


@pytest.fixture
def temp_dir(tmp_path):
    """Directory for written documents."""
    return Path(tmp_path)


@pytest.fixture
def document():
    """Empty text document."""
    return TextDocument()


@pytest.fixture
def builder():
    """Document builder with default options."""
    return DocumentBuilder()


@pytest.fixture
def png_bytes():
    """PNG image of 40x20 pixels."""
    buffer = io.BytesIO()
    PILImage.new("RGB", (40, 20), (255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def parse_xml():
    """Parse serialized output back into an element tree."""
    def _parse(content: str) -> ET.Element:
        return ET.fromstring(content.split("?>", 1)[1])
    return _parse


@pytest.fixture
def ns():
    """Namespace map for ElementTree path lookups."""
    return dict(NAMESPACES)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
