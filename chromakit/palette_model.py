"""A collection of palettes loaded from, and saved to, directories."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .palette import ColorPalette, PaletteFormatError

_UNNAMED = "Unnamed"


def _remove_if_writable_file(file_name: str) -> bool:
    path = Path(file_name)
    if path.is_file() and os.access(path, os.W_OK):
        try:
            path.unlink()
        except OSError:
            return False
        return True
    return False


class ColorPaletteModel:
    """Palettes found in search paths, with new ones saved under save_path."""

    def __init__(self, search_paths: list[str] | None = None, save_path: str = "") -> None:
        self._palettes: list[ColorPalette] = []
        self._search_paths: list[str] = list(search_paths or [])
        self.save_path = save_path

    @property
    def search_paths(self) -> list[str]:
        return list(self._search_paths)

    @search_paths.setter
    def search_paths(self, paths: list[str]) -> None:
        self._search_paths = list(paths)

    @property
    def palettes(self) -> list[ColorPalette]:
        return list(self._palettes)

    def __len__(self) -> int:
        return len(self._palettes)

    def add_search_path(self, path: str) -> None:
        if path not in self._search_paths:
            self._search_paths.append(path)

    def load(self) -> None:
        """Reload every readable *.gpl file from the search paths."""
        self._palettes = []
        for directory in self._search_paths:
            root = Path(directory)
            if not root.is_dir():
                continue
            files = sorted(
                p for p in root.glob("*.gpl") if p.is_file() and os.access(p, os.R_OK)
            )
            for file in files:
                try:
                    palette = ColorPalette.from_file(file.resolve())
                except (OSError, UnicodeDecodeError, PaletteFormatError):
                    continue
                self._palettes.append(palette)

    def _find(self, name: str) -> ColorPalette | None:
        return next((p for p in self._palettes if p.name == name), None)

    def has_palette(self, name: str) -> bool:
        return self._find(name) is not None

    def palette(self, key: int | str) -> ColorPalette:
        """The palette at an index, or the first one with a given name."""
        if isinstance(key, str):
            found = self._find(key)
            if found is None:
                raise KeyError(key)
            return found
        self._check_index(key)
        return self._palettes[key]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._palettes):
            raise IndexError(f"palette index out of range: {index}")

    def tooltip(self, index: int) -> str:
        palette = self.palette(index)
        return f"{palette.name} ({len(palette)} colors)"

    @staticmethod
    def _fix_unnamed(palette: ColorPalette) -> None:
        if not palette.name:
            palette.name = _UNNAMED

    @staticmethod
    def _attempt_save(palette: ColorPalette, filename: str) -> bool:
        if not filename:
            return False
        try:
            palette.save(filename)
        except OSError:
            return False
        return True

    def _save(self, palette: ColorPalette, suggested: str = "") -> bool:
        if suggested and self._attempt_save(palette, suggested):
            return True
        if self._attempt_save(palette, palette.file_name):
            return True

        save_dir = Path(self.save_path or ".")
        if not save_dir.exists():
            try:
                save_dir.mkdir()
            except OSError:
                return False

        filename = palette.name + ".gpl"
        if not (save_dir / filename).exists() and self._attempt_save(
            palette, str((save_dir / filename).absolute())
        ):
            return True

        pattern = re.compile(re.escape(palette.name) + r"([0-9]+)\.gpl")
        numbers = [
            int(match.group(1))
            for existing in save_dir.glob("*.gpl")
            if existing.is_file() and (match := pattern.search(existing.name))
        ]
        highest = max(numbers, default=0)
        return self._attempt_save(
            palette, str((save_dir / f"{palette.name}{highest + 1}.gpl").absolute())
        )

    def add_palette(self, palette: ColorPalette, save: bool = True) -> bool:
        """Append a copy of palette; returns False if saving was asked for and failed."""
        local = palette.copy()
        self._fix_unnamed(local)
        self._palettes.append(local)
        if save:
            return self._save(local)
        return True

    def update_palette(self, index: int, palette: ColorPalette, save: bool = True) -> bool:
        """Replace the palette at index, saving to its old file name when possible."""
        self._check_index(index)
        filename = self._palettes[index].file_name
        local = palette.copy()
        self._fix_unnamed(local)
        self._palettes[index] = local
        if save:
            return self._save(local, filename)
        return True

    def remove_palette(self, index: int, remove_file: bool = True) -> bool:
        """Drop a palette; False when its file was to be removed but could not be."""
        self._check_index(index)
        file_name = self._palettes.pop(index).file_name
        if file_name and remove_file:
            return _remove_if_writable_file(file_name)
        return True

    def remove_rows(self, row: int, count: int) -> bool:
        """Drop count palettes from row on, deleting their files where possible."""
        if not 0 <= row < len(self._palettes) or count <= 0:
            return False
        removed = self._palettes[row:row + count]
        for palette in removed:
            if palette.file_name:
                _remove_if_writable_file(palette.file_name)
        del self._palettes[row:row + count]
        return True

    def index_from_file(self, filename: str | os.PathLike[str]) -> int | None:
        """Index of the palette stored in filename, or None."""
        canonical = os.path.realpath(filename)
        return next(
            (
                i
                for i, palette in enumerate(self._palettes)
                if palette.file_name and os.path.realpath(palette.file_name) == canonical
            ),
            None,
        )