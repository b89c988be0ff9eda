import pytest

from terrainmetrics.intfield import IntField


def test_constant_construction():
    f = IntField(3, 2, 7)
    assert len(f) == 6
    assert f.values == [7] * 6


def test_values_length_mismatch():
    with pytest.raises(ValueError):
        IntField(2, 2, [1, 2, 3])


def test_cell_id_layout():
    f = IntField(3, 2, [0, 1, 2, 3, 4, 5])
    assert f.cell_id(2, 1) == 5
    assert f.at(1, 1) == f[4]
    assert f[(2, 0)] == 2


def test_at_out_of_grid():
    f = IntField(2, 2, 0)
    with pytest.raises(IndexError):
        f.at(2, 0)
    with pytest.raises(IndexError):
        f[(-1, 0)]
    with pytest.raises(IndexError):
        f[4]


def test_setitem_both_keys():
    f = IntField(2, 2, 0)
    f[(1, 1)] = 9
    f[0] = 4
    assert f.at(1, 1) == 9
    assert f.at(0, 0) == 4


def test_is_valid_cell():
    f = IntField(3, 4)
    assert f.is_valid_cell(2, 3)
    assert not f.is_valid_cell(3, 0)
    assert not f.is_valid_cell(0, -1)


def test_value_range():
    f = IntField(2, 2, [5, -3, 8, 0])
    assert f.value_range() == (-3, 8)


def test_value_range_empty():
    with pytest.raises(ValueError):
        IntField(0, 0).value_range()


def test_percentile_bounds():
    values = [9, 1, 5, 3, 7, 2]
    f = IntField(3, 2, values)
    assert f.percentile(0.0) == min(values)
    assert f.percentile(1.0) == max(values)
    assert f.percentile(0.5) in values


def test_percentile_monotone():
    f = IntField(4, 4, list(range(16, 0, -1)))
    results = [f.percentile(p / 10) for p in range(11)]
    assert results == sorted(results)


def test_percentile_empty():
    with pytest.raises(ValueError):
        IntField(0, 3).percentile(0.5)


def test_fill():
    f = IntField(2, 3, [1, 2, 3, 4, 5, 6])
    f.fill(-2)
    assert f.values == [-2] * 6


def test_to_floats():
    f = IntField(2, 1, [3, -4])
    assert f.to_floats() == [3.0, -4.0]
    assert all(isinstance(v, float) for v in f.to_floats())