import pygame
import pytest

from cardslot.resources import ResourceError, ResourceManager


@pytest.fixture
def two_cell_sheet(tmp_path):
    sheet = pygame.Surface((20, 10))
    sheet.fill((255, 0, 0), pygame.Rect(0, 0, 10, 10))
    sheet.fill((0, 0, 255), pygame.Rect(10, 0, 10, 10))
    path = tmp_path / "sheet.bmp"
    pygame.image.save(sheet, str(path))
    return str(path)


class _CountingLoader:
    def __init__(self, size=(8, 8)):
        self.calls = []
        self.size = size

    def __call__(self, file_path):
        self.calls.append(file_path)
        return pygame.Surface(self.size)


def test_single_image_loaded_from_file(two_cell_sheet):
    manager = ResourceManager()
    images = manager.get_images(two_cell_sheet)
    assert len(images) == 1
    assert images[0].get_size() == (20, 10)


def test_images_are_cached():
    loader = _CountingLoader()
    manager = ResourceManager(loader=loader)
    first = manager.get_images("a.png")
    second = manager.get_images("a.png")
    assert first is second
    assert loader.calls == ["a.png"]
    assert "a.png" in manager and len(manager) == 1


def test_delete_images_forces_reload():
    loader = _CountingLoader()
    manager = ResourceManager(loader=loader)
    manager.get_images("a.png")
    manager.delete_images()
    assert len(manager) == 0
    manager.get_images("a.png")
    assert loader.calls == ["a.png", "a.png"]


def test_divided_sheet_cells_in_row_order(two_cell_sheet):
    manager = ResourceManager()
    cells = manager.get_images(two_cell_sheet, 2, 2, 1, 10, 10)
    assert len(cells) == 2
    assert all(cell.get_size() == (10, 10) for cell in cells)
    assert tuple(cells[0].get_at((5, 5)))[:3] == (255, 0, 0)
    assert tuple(cells[1].get_at((5, 5)))[:3] == (0, 0, 255)


def test_missing_file_raises(tmp_path):
    manager = ResourceManager()
    missing = str(tmp_path / "missing.png")
    with pytest.raises(ResourceError) as info:
        manager.get_images(missing)
    assert info.value.file_path == missing
    assert missing not in manager


def test_grid_larger_than_sheet_raises():
    manager = ResourceManager(loader=_CountingLoader(size=(10, 10)))
    with pytest.raises(ResourceError):
        manager.get_images("sheet.png", 4, 2, 2, 10, 10)


def test_too_many_cells_for_grid_raises():
    manager = ResourceManager(loader=_CountingLoader(size=(100, 100)))
    with pytest.raises(ResourceError):
        manager.get_images("sheet.png", 5, 2, 2, 10, 10)


def test_partial_division_arguments_rejected():
    manager = ResourceManager(loader=_CountingLoader())
    with pytest.raises(TypeError):
        manager.get_images("sheet.png", 4, 2)