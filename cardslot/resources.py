"""Cached image loading, including sprite-sheet division."""

import pygame


class ResourceError(Exception):
    """Raised when an image cannot be loaded or divided."""

    def __init__(self, file_path, reason=""):
        message = f"could not load image {file_path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.file_path = file_path


def _load_surface(file_path):
    return pygame.image.load(file_path)


class ResourceManager:
    """Loads images once and serves them from a cache keyed by path."""

    def __init__(self, loader=None):
        self._loader = loader or _load_surface
        self._images = {}

    def __contains__(self, file_path):
        return file_path in self._images

    def __len__(self):
        return len(self._images)

    def get_images(self, file_path, all_num=None, x_num=None, y_num=None,
                   x_size=None, y_size=None):
        """Return the images stored for ``file_path``, loading them if needed.

        Without division arguments the whole file is one image. With them the
        file is cut row by row into ``all_num`` cells of ``x_size`` by
        ``y_size``, ``x_num`` across and ``y_num`` down.
        """
        cached = self._images.get(file_path)
        if cached is not None:
            return cached

        division = (all_num, x_num, y_num, x_size, y_size)
        if all_num is None:
            if any(arg is not None for arg in division):
                raise TypeError("division arguments require all_num")
            images = (self._load(file_path),)
        else:
            if any(arg is None for arg in division):
                raise TypeError("all division arguments must be given together")
            images = self._divide(file_path, *division)

        self._images[file_path] = images
        return images

    def _load(self, file_path):
        try:
            return self._loader(file_path)
        except (pygame.error, OSError) as exc:
            raise ResourceError(file_path, str(exc)) from exc

    def _divide(self, file_path, all_num, x_num, y_num, x_size, y_size):
        if min(all_num, x_num, y_num, x_size, y_size) <= 0:
            raise ResourceError(file_path, "division values must be positive")
        if all_num > x_num * y_num:
            raise ResourceError(file_path, "more cells requested than the grid holds")
        sheet = self._load(file_path)
        width, height = sheet.get_size()
        if x_num * x_size > width or y_num * y_size > height:
            raise ResourceError(file_path, "grid exceeds image size")
        cells = []
        for index in range(all_num):
            row, col = divmod(index, x_num)
            rect = pygame.Rect(col * x_size, row * y_size, x_size, y_size)
            cells.append(sheet.subsurface(rect).copy())
        return tuple(cells)

    def delete_images(self):
        """Drop every cached image."""
        self._images.clear()