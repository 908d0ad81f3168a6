import pytest
from PIL import Image


def gradient(w, h):
    """Opaque sheet where every pixel in a small image has its own colour."""
    img = Image.new("RGBA", (w, h))
    px = img.load()
    for y in range(h):
        for x in range(w):
            px[x, y] = (x * 7 % 256, y * 11 % 256, 40, 255)
    return img


@pytest.fixture
def make_sheet():
    return gradient
