import pytest

from chromakit.color import Color
from chromakit.palette import ColorPalette, PaletteFormatError

RED = Color(255, 0, 0)
GREEN = Color(0, 128, 0)
BLUE = Color(0, 0, 255)


def test_save_writes_gimp_format(tmp_path):
    palette = ColorPalette([(RED, "Red"), BLUE], name="Test")
    path = tmp_path / "test.gpl"
    written = palette.save(path)
    assert written == str(path)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "GIMP Palette"
    assert lines[1] == "Name: Test"
    assert lines[2] == "#"
    assert lines[3] == "255   0   0\tRed"
    assert lines[4] == "  0   0 255\tUnnamed"


def test_save_writes_columns_when_set(tmp_path):
    palette = ColorPalette([RED], name="Cols", columns=4)
    path = tmp_path / "c.gpl"
    palette.save(path)
    assert "Columns: 4" in path.read_text(encoding="utf-8").splitlines()


def test_round_trip(tmp_path):
    palette = ColorPalette([(RED, "Red"), (GREEN, "Green"), (BLUE, "Blue")], name="Prim", columns=3)
    path = tmp_path / "prim.gpl"
    palette.save(path)
    loaded = ColorPalette.from_file(path)
    assert loaded.colors == palette.colors
    assert loaded.name == palette.name
    assert loaded.columns == palette.columns
    assert loaded.file_name == str(path)
    assert loaded.dirty is False


def test_load_properties_and_comments(tmp_path):
    path = tmp_path / "pal.gpl"
    path.write_text(
        "GIMP Palette\nNAME: Mixed\ncolumns: 2\n# comment\n\n#another\n"
        "255 0 0 Red\n  0 0 255\tDeep Blue\n",
        encoding="utf-8",
    )
    palette = ColorPalette.from_file(path)
    assert palette.name == "Mixed"
    assert palette.columns == 2
    assert palette.only_colors() == [RED, BLUE]
    assert palette.name_at(1) == "Deep Blue"


def test_load_without_name_property_has_empty_name(tmp_path):
    path = tmp_path / "nameless.gpl"
    path.write_text("GIMP Palette\n#\n255 0 0 Red\n", encoding="utf-8")
    palette = ColorPalette.from_file(path)
    assert palette.name == ""
    assert len(palette) == 1


def test_load_bad_header(tmp_path):
    path = tmp_path / "bad.gpl"
    path.write_text("Not a palette\n", encoding="utf-8")
    with pytest.raises(PaletteFormatError):
        ColorPalette.from_file(path)


def test_load_bad_entry(tmp_path):
    path = tmp_path / "bad.gpl"
    path.write_text("GIMP Palette\n#\n300 0 0 Too much\n", encoding="utf-8")
    with pytest.raises(PaletteFormatError):
        ColorPalette.from_file(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        ColorPalette.from_file(tmp_path / "absent.gpl")


def test_color_table_forces_opaque():
    table = [Color(10, 20, 30, 40).to_rgba_int(), BLUE.to_rgba_int()]
    palette = ColorPalette.from_color_table(table)
    assert palette.only_colors() == [Color(10, 20, 30), BLUE]
    assert palette.color_table() == [Color(10, 20, 30).to_rgba_int(), BLUE.to_rgba_int()]
    assert palette.dirty is True


def test_columns_clamped_to_zero():
    palette = ColorPalette([RED])
    palette.columns = -5
    assert palette.columns == 0
    assert palette.dirty is False
    palette.columns = 3
    assert palette.columns == 3
    assert palette.dirty is True


def test_editing_marks_dirty_and_updates():
    palette = ColorPalette([RED, GREEN])
    assert palette.dirty is False
    palette.set_color_at(0, BLUE, "Blue")
    assert palette.color_at(0) == BLUE
    assert palette.name_at(0) == "Blue"
    assert palette.dirty is True
    palette.set_color_at(0, RED)
    assert palette.name_at(0) == "Blue"
    palette.set_name_at(1, "Green")
    assert palette.colors == [(RED, "Blue"), (GREEN, "Green")]


def test_insert_append_erase():
    palette = ColorPalette([RED])
    palette.append_color(BLUE, "b")
    palette.insert_color(1, GREEN, "g")
    assert palette.only_colors() == [RED, GREEN, BLUE]
    palette.insert_color(3, RED)
    assert len(palette) == 4
    palette.erase_color(0)
    assert palette.only_colors() == [GREEN, BLUE, RED]


@pytest.mark.parametrize("index", [-1, 5])
def test_invalid_indices_raise(index):
    palette = ColorPalette([RED, GREEN])
    with pytest.raises(IndexError):
        palette.color_at(index)
    with pytest.raises(IndexError):
        palette.name_at(index)
    with pytest.raises(IndexError):
        palette.set_color_at(index, BLUE)
    with pytest.raises(IndexError):
        palette.erase_color(index)
    with pytest.raises(IndexError):
        palette.insert_color(index if index < 0 else 3, BLUE)


def test_copy_is_independent():
    palette = ColorPalette([RED], name="A")
    other = palette.copy()
    other.append_color(BLUE)
    other.name = "B"
    assert palette.only_colors() == [RED]
    assert palette.name == "A"


def test_preview_layout_covers_area():
    palette = ColorPalette([RED, GREEN, BLUE, RED, GREEN])
    cells = palette.preview_layout(100, 50)
    assert [c.color for c in cells] == palette.only_colors()
    total = sum(c.width * c.height for c in cells)
    assert total <= 100 * 50 + 1e-9
    assert all(c.x + c.width <= 100 + 1e-9 and c.y + c.height <= 50 + 1e-9 for c in cells)


def test_preview_layout_uses_columns():
    palette = ColorPalette([RED, GREEN, BLUE], columns=1)
    cells = palette.preview_layout(10, 30)
    assert [c.x for c in cells] == [0, 0, 0]
    assert [c.y for c in cells] == [0, 10, 20]


def test_preview_layout_empty():
    assert ColorPalette().preview_layout(10, 10) == []
    assert ColorPalette([RED]).preview_layout(0, 10) == []