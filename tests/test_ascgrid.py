import pytest

from terrainmetrics.ascgrid import parse_asc, read_asc

SAMPLE = """ncols 3
nrows 2
xllcorner 10
yllcorner 20
cellsize 5
NODATA_value -9999
1 2 3
4 5 -9999
"""


def test_header_fields():
    header, _ = parse_asc(SAMPLE)
    assert header.ncols == 3
    assert header.nrows == 2
    assert header.xll == 10.0
    assert header.yll == 20.0
    assert header.cell_size == 5.0
    assert header.nodata_value == -9999.0
    assert header.centered is False


def test_rows_are_flipped():
    _, hf = parse_asc(SAMPLE)
    assert (hf.nx, hf.ny) == (3, 2)
    assert hf.at(0, 0) == 4.0
    assert hf.at(1, 0) == 5.0
    assert hf.at(0, 1) == 1.0
    assert hf.at(2, 1) == 3.0


def test_nodata_becomes_zero():
    _, hf = parse_asc(SAMPLE)
    assert hf.at(2, 0) == 0.0


def test_cell_size_matches_header():
    header, hf = parse_asc(SAMPLE)
    assert hf.cell_size() == pytest.approx((header.cell_size, header.cell_size))


def test_headers_case_insensitive_and_values_across_lines():
    text = "NCOLS 2\nNROWS 2\nCellSize 1\n7\n8 9\n10\n"
    _, hf = parse_asc(text)
    assert hf.at(0, 1) == 7.0
    assert hf.at(1, 1) == 8.0
    assert hf.at(0, 0) == 9.0
    assert hf.at(1, 0) == 10.0


def test_centered_header_moves_to_corner():
    text = "ncols 2\nnrows 2\nxllcenter 10\nyllcenter 20\ncellsize 4\n1 2\n3 4\n"
    header, _ = parse_asc(text)
    assert header.centered is True
    assert header.xll == pytest.approx(10 - 0.5 * 4)
    assert header.yll == pytest.approx(20 - 0.5 * 4)


def test_unknown_header_is_ignored():
    text = "ncols 2\nnrows 2\nprojection utm\ncellsize 1\n1 2\n3 4\n"
    header, hf = parse_asc(text)
    assert header.ncols == 2
    assert hf.at(0, 0) == 3.0


def test_missing_samples_raise():
    with pytest.raises(ValueError):
        parse_asc("ncols 3\nnrows 3\ncellsize 1\n1 2 3\n")


def test_missing_dimensions_raise():
    with pytest.raises(ValueError):
        parse_asc("cellsize 1\n1 2 3 4\n")


def test_bad_header_value_raises():
    with pytest.raises(ValueError):
        parse_asc("ncols abc\nnrows 2\n1 2 3 4\n")


def test_read_asc_from_file(tmp_path):
    path = tmp_path / "dem.asc"
    path.write_text(SAMPLE, encoding="utf-8")
    header, hf = read_asc(path)
    expected_header, expected_hf = parse_asc(SAMPLE)
    assert header == expected_header
    assert hf.values == expected_hf.values