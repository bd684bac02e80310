from pathlib import Path

import pytest
from PIL import Image

RED = (255, 0, 0, 255)
YELLOW = (255, 255, 0, 255)
WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def solid(size, rgba=WHITE):
    return Image.new("RGBA", size, rgba)


def save_png(image: Image.Image, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, format="PNG")
    return path


@pytest.fixture
def white_icon():
    return solid((100, 100))


@pytest.fixture
def shape_template():
    return solid((512, 512), BLACK)


@pytest.fixture
def icons_dir(tmp_path):
    path = tmp_path / "icons"
    save_png(solid((100, 100)), path / "Attack.png")
    return path


@pytest.fixture
def shape_path(tmp_path, shape_template):
    return save_png(shape_template, tmp_path / "shape.png")
