"""
Shared fixtures. Images are generated in memory with Pillow.
"""

import io

import pytest
from PIL import Image

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def make_image(width, height, color=WHITE):
    return Image.new('RGBA', (width, height), color)


@pytest.fixture
def half_black_image():
    """16x2, left half black, right half white"""
    image = make_image(16, 2)
    image.paste(BLACK, (0, 0, 8, 2))
    return image


@pytest.fixture
def png_bytes(half_black_image):
    buf = io.BytesIO()
    half_black_image.save(buf, format='PNG')
    return buf.getvalue()


@pytest.fixture
def png_path(tmp_path, half_black_image):
    path = tmp_path / 'half_black.png'
    half_black_image.save(path)
    return path
