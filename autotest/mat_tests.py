import copy

import pytest


def create_matrix_test():
    from dynmat import Matrix, Vector
    m = Matrix(5)
    assert m.size == 5
    assert m.shape == (5, 5)
    assert len(m) == 5
    for row in m:
        assert isinstance(row, Vector)
        assert row.size == 5
        assert list(row) == [0.0] * 5
    assert Matrix().size == 1


def create_matrix_invalid_size_test():
    from dynmat import Matrix, InvalidSize, MAX_MATRIX_SIZE
    with pytest.raises(InvalidSize):
        Matrix(MAX_MATRIX_SIZE + 1)
    with pytest.raises(InvalidSize):
        Matrix(0)
    with pytest.raises(InvalidSize):
        Matrix(-5)


def max_size_class_attr_test():
    from dynmat import Matrix, InvalidSize

    class SmallMatrix(Matrix):
        max_size = 3

    assert SmallMatrix(3).size == 3
    with pytest.raises(InvalidSize) as e:
        SmallMatrix(4)
    assert e.value.size == 4
    assert e.value.max_size == 3


def set_row_takes_matrix_dtype_test():
    import io
    from dynmat import Matrix, Vector
    m = Matrix(2, dtype=int)
    m[0] = Vector.from_buffer([1.5, 2.5])
    m.set_at(1, Vector.from_buffer([1.5, 2.5]))
    assert m[0].dtype is int
    assert m.at(1).dtype is int
    m.read(io.StringIO("1 2 3 4"))
    assert all(type(e) is int and type(e) is m[i].dtype
               for i in range(2) for e in m[i])
    assert m[1] == Vector.from_buffer([3, 4])


def copy_test():
    from dynmat import Matrix
    m1 = Matrix(2, dtype=int)
    m1[0][0] = 7
    for m2 in (m1.copy(), copy.copy(m1), copy.deepcopy(m1)):
        assert m2 == m1
        assert m2 is not m1
        m2[0][0] = 3
        m2[1][1] = 3
        assert m1[0][0] == 7
        assert m1[1][1] == 0


def move_swap_test():
    from dynmat import Matrix
    m1 = Matrix(2, dtype=int)
    m1[0][1] = 4
    m2 = m1.move()
    assert m1.size == 0
    assert m2[0][1] == 4

    m3 = Matrix(3, dtype=int)
    m2.swap(m3)
    assert m2.size == 3
    assert m3.size == 2
    assert m3[0][1] == 4


def assign_test():
    from dynmat import Matrix
    m1 = Matrix(5, dtype=int)
    m1[0][0] = 5
    m2 = m1.copy()
    m1.assign(m1)
    assert m1 == m2

    m1 = Matrix(2, dtype=int)
    m2 = Matrix(2, dtype=int)
    m1[0][0] = 7
    m1.assign(m2)
    assert m1 == m2

    m1 = Matrix(5, dtype=int)
    m2 = Matrix(4, dtype=int)
    m1.assign(m2)
    assert m1.size == 4
    assert m1 == m2
    m1[0][0] = 1
    assert m2[0][0] == 0


def set_get_row_test():
    from dynmat import Matrix, Vector, LengthMismatch
    m = Matrix(4, dtype=int)
    v = Vector.from_buffer([1, 2, 0, 1])
    m[1] = v
    assert m[1] == v
    assert m.at(1) == v
    # the stored row is a copy
    v[0] = 9
    assert m[1][0] == 1
    # the returned row is not
    m.at(1).set_at(3, 6)
    assert m[1][3] == 6
    assert m.at(1).at(3) == 6

    with pytest.raises(LengthMismatch):
        m[0] = Vector(3)
    with pytest.raises(LengthMismatch):
        m.set_at(0, Vector(5))
    with pytest.raises(TypeError):
        m[0] = [1, 2, 3, 4]


def at_test():
    from dynmat import Matrix, Vector, IndexOutOfRange
    m = Matrix(4, dtype=int)
    v = Vector.from_buffer([1, 1, 1, 1])
    with pytest.raises(IndexOutOfRange):
        m.set_at(-2, v)
    with pytest.raises(IndexOutOfRange):
        m.set_at(4, v)
    with pytest.raises(IndexOutOfRange):
        m.at(4)
    with pytest.raises(IndexOutOfRange):
        m.at(0).at(4)
    m.set_at(3, v)
    assert m.at(3) == v
    assert m.at(0) == Vector(4, dtype=int)


def equality_test():
    from dynmat import Matrix
    m1 = Matrix(2, dtype=int)
    m2 = Matrix(2, dtype=int)
    m1[0][0] = 7
    m2[0][0] = 7
    assert m1 == m2
    assert m1 == m1
    m2[1][0] = 1
    assert m1 != m2
    assert Matrix(2) != Matrix(3)


def equality_different_size_same_rows_test():
    from dynmat import Matrix
    m1 = Matrix(2, dtype=int)
    m2 = Matrix(3, dtype=int)
    # same row contents up to the smaller size must still compare unequal
    assert m1 != m2
    assert m2 != m1


def add_sub_test():
    from dynmat import Matrix, LengthMismatch
    m1 = Matrix(5, dtype=int)
    m2 = Matrix(5, dtype=int)
    m3 = Matrix(5, dtype=int)
    m1[0][0] = 5
    m2[0][0] = 5
    m3[0][0] = 10
    assert m1 + m2 == m3

    m1 = Matrix(5, dtype=int)
    m2 = Matrix(5, dtype=int)
    m1[0][0] = 10
    m2[0][0] = 5
    assert m1 - m2 == m2
    assert m1[0][0] == 10

    with pytest.raises(LengthMismatch):
        Matrix(2) + Matrix(3)
    with pytest.raises(LengthMismatch):
        Matrix(3) - Matrix(2)
    with pytest.raises(TypeError):
        Matrix(2) + 1


def scalar_mul_test():
    from dynmat import Matrix, Vector
    m = Matrix(3, dtype=int)
    v = Vector.from_buffer([1, 3, 5])
    m[0] = v
    res = Matrix(3, dtype=int)
    res[0] = v * 3
    assert m * 3 == res
    assert 3 * m == res
    assert (m * 3)[0] == Vector.from_buffer([3, 9, 15])
    assert (m * 3)[1] == Vector(3, dtype=int)


def matrix_vector_mul_test():
    from dynmat import Matrix, Vector, LengthMismatch
    m = Matrix(3, dtype=int)
    m[0] = Vector.from_buffer([2, 1, 4])
    v = Vector.from_buffer([1, 0, 2])
    res = Vector(3, dtype=int)
    res[0] = 10
    assert m * v == res
    assert isinstance(m * v, Vector)

    with pytest.raises(LengthMismatch):
        Matrix(3) * Vector(2)


def matrix_matrix_mul_test():
    from dynmat import Matrix, Vector, LengthMismatch
    m1 = Matrix(3, dtype=int)
    m2 = Matrix(3, dtype=int)
    v1 = Vector.from_buffer([1, 1, 2])
    v2 = Vector.from_buffer([0, 2, 1])
    m1[2] = v1
    m2[2] = v2
    res = Matrix(3, dtype=int)
    res[2] = v2 * 2
    assert m1 * m2 == res
    assert (m1 * m2)[2] == Vector.from_buffer([0, 4, 2])

    with pytest.raises(LengthMismatch):
        Matrix(3) * Matrix(2)


def matrix_matrix_mul_numpy_test():
    import numpy as np
    from dynmat import Matrix
    a = np.arange(16).reshape(4, 4)
    b = np.arange(16, 32).reshape(4, 4)
    m = Matrix.from_array(a) * Matrix.from_array(b)
    assert np.array_equal(m.newx, np.dot(a, b))


def from_array_test():
    import numpy as np
    from dynmat import Matrix, InvalidSize
    a = np.eye(3)
    m = Matrix.from_array(a)
    assert m.size == 3
    assert m[1][1] == 1.0
    assert m[0][1] == 0.0
    assert np.array_equal(m.newx, a)
    with pytest.raises(InvalidSize):
        Matrix.from_array(np.ones((2, 3)))
    with pytest.raises(InvalidSize):
        Matrix.from_array(np.ones(3))
    with pytest.raises(InvalidSize):
        Matrix.from_array(np.ones((0, 0)))


def df_test():
    import numpy as np
    import pandas as pd
    from dynmat import Matrix
    m = Matrix.from_array(np.arange(9).reshape(3, 3))
    df = m.to_dataframe()
    assert isinstance(df, pd.DataFrame)
    assert df.shape == (3, 3)
    assert df.loc[1, 2] == 5
    assert m.df().equals(df)
    m2 = Matrix.from_dataframe(df)
    assert m2 == m
    with pytest.raises(TypeError):
        Matrix.from_dataframe(np.ones((2, 2)))


def str_test():
    from dynmat import Matrix
    m = Matrix(2, dtype=int)
    m[0][0] = 1
    m[1][1] = 2
    assert str(m) == "1 0\n0 2\n"
    assert repr(m) == "Matrix([[1, 0], [0, 2]])"


if __name__ == "__main__":
    matrix_matrix_mul_test()
    df_test()
