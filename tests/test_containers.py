import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from radonct import Vector, Matrix, InvalidArgument, SizeMismatch, IndexOutOfRange


# --- Vector construction --- #


def test_vector_create_is_zero_filled():
    v = Vector.create(4)
    assert v.size == 4
    assert len(v) == 4
    assert_array_equal(v.to_numpy(), np.zeros(4))


@pytest.mark.parametrize('size', [0, -3, None, 2.7, 3.0, True])
def test_vector_create_rejects_bad_size(size):
    with pytest.raises(InvalidArgument):
        Vector.create(size)


def test_vector_from_buffer_adopts_without_copy():
    buf = np.zeros(3)
    v = Vector.from_buffer(buf)
    v.update(1, 5.0)
    assert buf[1] == 5.0
    buf[2] = 7.0
    assert v.get(2) == 7.0
    assert v.data is buf


@pytest.mark.parametrize('buffer', [None, [], np.zeros(0), np.zeros((2, 2))])
def test_vector_from_buffer_rejects_bad_buffers(buffer):
    with pytest.raises(InvalidArgument):
        Vector.from_buffer(buffer)


# --- Vector access and arithmetic --- #


@pytest.mark.parametrize('index', [-1, 3, 100])
def test_vector_out_of_range_access(index):
    v = Vector.create(3)
    with pytest.raises(IndexOutOfRange):
        v.get(index)
    with pytest.raises(IndexOutOfRange):
        v.update(index, 1.0)


def test_vector_sum_in_place():
    a = Vector.from_buffer([1.0, 2.0, 3.0])
    b = Vector.from_buffer([0.5, -2.0, 1.0])
    a.sum(b)
    assert_array_equal(a.to_numpy(), [1.5, 0.0, 4.0])
    assert_array_equal(b.to_numpy(), [0.5, -2.0, 1.0])


def test_vector_sum_size_mismatch():
    with pytest.raises(SizeMismatch):
        Vector.create(3).sum(Vector.create(4))
    with pytest.raises(InvalidArgument):
        Vector.create(3).sum(None)


def test_vector_max_is_signed():
    assert Vector.from_buffer([-5.0, 1.0, -0.5]).max() == 1.0
    assert Vector.from_buffer([-5.0, -2.0]).max() == -2.0


# --- Vector paste --- #


def test_vector_paste_within_bounds():
    v = Vector.create(5)
    v.paste(1, Vector.from_buffer([1.0, 2.0, 3.0]))
    assert_array_equal(v.to_numpy(), [0.0, 1.0, 2.0, 3.0, 0.0])


def test_vector_paste_clips_overflow():
    v = Vector.create(4)
    v.paste(2, Vector.from_buffer([1.0, 2.0, 3.0, 4.0]))
    assert_array_equal(v.to_numpy(), [0.0, 0.0, 1.0, 2.0])


def test_vector_paste_offset_past_end_copies_nothing():
    v = Vector.create(3)
    v.paste(3, Vector.from_buffer([1.0]))
    v.paste(10, Vector.from_buffer([1.0]))
    assert_array_equal(v.to_numpy(), np.zeros(3))


def test_vector_paste_errors():
    v = Vector.create(3)
    with pytest.raises(IndexOutOfRange):
        v.paste(-1, Vector.create(1))
    with pytest.raises(InvalidArgument):
        v.paste(0, None)


# --- Vector convolution --- #


@pytest.mark.parametrize('n, m', [(1, 1), (3, 5), (16, 7), (8, 33)])
def test_convolve_length_and_values(rng, n, m):
    a = Vector.from_buffer(rng.standard_normal(n))
    b = Vector.from_buffer(rng.standard_normal(m))
    result = a.convolve(b)
    assert result.size == n + m - 1
    assert_allclose(result.to_numpy(), np.convolve(a.data, b.data), rtol=1e-12, atol=1e-12)


def test_convolve_is_commutative(rng):
    a = Vector.from_buffer(rng.standard_normal(11))
    b = Vector.from_buffer(rng.standard_normal(6))
    assert_allclose(a.convolve(b).to_numpy(), b.convolve(a).to_numpy(),
                    rtol=1e-12, atol=1e-12)


def test_convolve_does_not_mutate_inputs():
    a = Vector.from_buffer([1.0, 2.0])
    b = Vector.from_buffer([1.0, 1.0, 1.0])
    assert_array_equal(a.convolve(b).to_numpy(), [1.0, 3.0, 3.0, 2.0])
    assert_array_equal(a.to_numpy(), [1.0, 2.0])
    assert_array_equal(b.to_numpy(), [1.0, 1.0, 1.0])


def test_convolve_rejects_none():
    with pytest.raises(InvalidArgument):
        Vector.create(2).convolve(None)


# --- Matrix construction and access --- #


def test_matrix_create():
    m = Matrix.create(4, 3)
    assert (m.width, m.height) == (4, 3)
    assert m.shape == (3, 4)
    assert_array_equal(m.to_numpy(), np.zeros((3, 4)))


@pytest.mark.parametrize('width, height', [(0, 3), (3, 0), (-1, -1), (2.7, 3), (3, 2.5), (None, 2)])
def test_matrix_create_rejects_bad_dimensions(width, height):
    with pytest.raises(InvalidArgument):
        Matrix.create(width, height)


@pytest.mark.parametrize('array', [None, np.zeros(3), np.zeros((0, 4)), np.zeros((2, 2, 2))])
def test_matrix_from_array_rejects_bad_input(array):
    with pytest.raises(InvalidArgument):
        Matrix.from_array(array)


def test_matrix_get_update_use_column_row_order():
    m = Matrix.create(3, 2)
    m.update(2, 1, 4.0)
    assert m.get(2, 1) == 4.0
    assert m.data[1, 2] == 4.0


@pytest.mark.parametrize('x, y', [(-1, 0), (3, 0), (0, -1), (0, 2)])
def test_matrix_out_of_range_access(x, y):
    m = Matrix.create(3, 2)
    with pytest.raises(IndexOutOfRange):
        m.get(x, y)
    with pytest.raises(IndexOutOfRange):
        m.update(x, y, 1.0)


def test_matrix_row_is_a_reference():
    m = Matrix.create(3, 2)
    row = m.row(1)
    row.update(0, 9.0)
    assert m.get(0, 1) == 9.0
    m.update(2, 1, -1.0)
    assert row.get(2) == -1.0
    assert m.row(1) is row
    with pytest.raises(IndexOutOfRange):
        m.row(2)


# --- Matrix arithmetic --- #


def test_matrix_sum(random_matrix):
    a = random_matrix(4, 3)
    b = random_matrix(4, 3)
    expected = a.to_numpy() + b.to_numpy()
    a.sum(b)
    assert_allclose(a.to_numpy(), expected)


def test_matrix_sum_size_mismatch():
    with pytest.raises(SizeMismatch):
        Matrix.create(4, 3).sum(Matrix.create(3, 4))
    with pytest.raises(InvalidArgument):
        Matrix.create(4, 3).sum(None)


def test_sum_columns_of_constant_matrix():
    w, h, v = 5, 7, 0.5
    m = Matrix.from_array(np.full((h, w), v))
    cols = m.sum_columns()
    assert cols.size == w
    assert_allclose(cols.to_numpy(), np.full(w, v * h))


def test_sum_columns_matches_numpy(random_matrix):
    m = random_matrix(6, 4)
    assert_allclose(m.sum_columns().to_numpy(), m.data.sum(axis=0))


def test_matrix_max_is_signed():
    m = Matrix.from_array([[-10.0, 2.0], [1.0, -3.0]])
    assert m.max() == 2.0


# --- Matrix paste and row replacement --- #


def test_paste_region_within_bounds():
    m = Matrix.create(4, 4)
    m.paste_region(1, 1, Matrix.from_array(np.ones((2, 2))))
    expected = np.zeros((4, 4))
    expected[1:3, 1:3] = 1.0
    assert_array_equal(m.to_numpy(), expected)


def test_paste_region_clips_both_axes():
    m = Matrix.create(4, 4)
    m.paste_region(2, 3, Matrix.from_array(np.ones((3, 3))))
    expected = np.zeros((4, 4))
    expected[3:, 2:] = 1.0
    assert_array_equal(m.to_numpy(), expected)


def test_paste_region_errors():
    m = Matrix.create(2, 2)
    with pytest.raises(IndexOutOfRange):
        m.paste_region(-1, 0, Matrix.create(1, 1))
    with pytest.raises(InvalidArgument):
        m.paste_region(0, 0, None)


def test_replace_row():
    m = Matrix.create(3, 2)
    m.replace_row(0, Vector.from_buffer([1.0, 2.0, 3.0]))
    assert_array_equal(m.to_numpy(), [[1.0, 2.0, 3.0], [0.0, 0.0, 0.0]])


def test_replace_row_is_strict():
    m = Matrix.create(3, 2)
    with pytest.raises(SizeMismatch):
        m.replace_row(0, Vector.create(2))
    with pytest.raises(SizeMismatch):
        m.replace_row(0, Vector.create(4))
    with pytest.raises(IndexOutOfRange):
        m.replace_row(2, Vector.create(3))
    with pytest.raises(InvalidArgument):
        m.replace_row(0, None)


def test_matrix_copy_is_independent():
    m = Matrix.create(2, 2)
    c = m.copy()
    c.update(0, 0, 1.0)
    assert m.get(0, 0) == 0.0


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
