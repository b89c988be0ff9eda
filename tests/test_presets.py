import pytest

from terrainmetrics.presets import parse_presets, read_presets

SAMPLE = """# Alps
"Mont Blanc", "terrains/montblanc.png", 1024, 1024, 30000, 30000, 1000, 4800, 45.8, 0.5

# Other
!"Canyon", "terrains/canyon.png", 512, 256, 20000, 10000, 500.5, 2500, 36.1, 1
broken, line, with, too, few
"""


def test_names_in_file_order():
    catalog = parse_presets(SAMPLE)
    assert catalog.names() == ["Mont Blanc", "Canyon"]


def test_headers_and_separators_are_disabled():
    catalog = parse_presets(SAMPLE)
    disabled = [item.label for item in catalog.items if not item.enabled]
    assert disabled == ["Alps", "", "Other"]


def test_fields_are_parsed():
    preset = parse_presets(SAMPLE, data_path="data/")["Canyon"]
    assert preset.image_path == "data/terrains/canyon.png"
    assert (preset.cells_x, preset.cells_y) == (512, 256)
    assert (preset.terrain_x, preset.terrain_y) == (20000.0, 10000.0)
    assert (preset.hmin, preset.hmax) == (500.5, 2500.0)
    assert preset.avg_lat == 36.1
    assert preset.default_scale == 1.0


def test_selected_marker():
    assert parse_presets(SAMPLE).selected == "Canyon"


def test_default_selection_is_first_item_when_preset():
    text = '"A", "a.png", 1, 1, 1, 1, 0, 1, 10, 1\n"B", "b.png", 1, 1, 1, 1, 0, 1, 10, 1\n'
    assert parse_presets(text).selected == "A"


def test_default_selection_on_header_is_none():
    text = '# Header\n"A", "a.png", 1, 1, 1, 1, 0, 1, 10, 1\n'
    assert parse_presets(text).selected is None


def test_wrong_field_count_skipped():
    catalog = parse_presets("broken, line, with, too, few\n")
    assert catalog.names() == []
    assert catalog.items == []


def test_unparsable_numbers_become_zero():
    text = '"A", "a.png", x, 1.5, 7, 7, lo, 1, 10, 1\n'
    preset = parse_presets(text)["A"]
    assert preset.cells_x == 0
    assert preset.cells_y == 0
    assert preset.hmin == 0.0


def test_missing_preset_raises_key_error():
    with pytest.raises(KeyError):
        parse_presets(SAMPLE)["Nowhere"]


def test_describe_round_trip():
    preset = parse_presets(SAMPLE)["Mont Blanc"]
    assert preset.describe().startswith("1024 x 1024 cells")


def test_read_presets_from_file(tmp_path):
    path = tmp_path / "presets.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    catalog = read_presets(path, data_path="./")
    assert catalog.names() == parse_presets(SAMPLE).names()
    assert catalog["Mont Blanc"].image_path == "./terrains/montblanc.png"


def test_read_presets_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_presets(tmp_path / "absent.txt")