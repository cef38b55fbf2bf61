import io

import pytest

from matrices.matrix import Matrix, MatrixError
from matrices.vector3d import Vector3D

SAMPLE_A = [[1, 0, 2], [-3, 4, 6], [-1, -2, 3]]
SAMPLE_B = [[1, 2, 3], [2, 3, 4], [3, 4, 2]]
IDENTITY = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]


def test_zeros_has_requested_shape_and_values():
    m = Matrix.zeros(2, 3)
    assert (m.rows, m.cols) == (2, 3)
    assert all(value == 0 for row in [m[0], m[1]] for value in row)


@pytest.mark.parametrize("rows, cols", [(11, 3), (3, 11), (0, 2), (2, -1)])
def test_size_limits_are_enforced(rows, cols):
    with pytest.raises(MatrixError):
        Matrix(rows, cols)


def test_value_count_must_match_shape():
    with pytest.raises(MatrixError):
        Matrix(2, 2, [1, 2, 3])


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(MatrixError):
        Matrix.from_rows([[1, 2], [3]])


def test_getitem_by_pair_and_row():
    m = Matrix.from_rows(SAMPLE_A)
    assert m[1, 2] == 6
    assert m[2] == (-1, -2, 3)


def test_read_matches_from_rows():
    stream = io.StringIO("1 0 2\n-3 4\n6 -1 -2 3\n")
    assert Matrix.read(3, 3, stream) == Matrix.from_rows(SAMPLE_A)


def test_read_too_few_entries_raises():
    with pytest.raises(MatrixError):
        Matrix.read(2, 2, io.StringIO("1 2 3\n"))


def test_read_bad_entry_raises():
    with pytest.raises(MatrixError):
        Matrix.read(1, 2, io.StringIO("1 x\n"))


def test_format_header_and_rows():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    assert m.format() == "--- Printing matrix of size [2 x 2] ---\n1 2 \n3 4 \n"


def test_determinant_of_source_examples():
    assert Matrix.from_rows(SAMPLE_A).determinant() == pytest.approx(44)
    assert Matrix.from_rows(SAMPLE_B).determinant() == pytest.approx(3)


def test_inverse_of_first_source_example():
    inv = Matrix.from_rows(SAMPLE_A).inverse()
    expected = [
        [0.545455, -0.0909091, -0.181818],
        [0.0681818, 0.113636, -0.272727],
        [0.227273, 0.0454545, 0.0909091],
    ]
    for i, row in enumerate(expected):
        assert list(inv[i]) == pytest.approx(row, rel=1e-5)


def test_inverse_of_second_source_example():
    inv = Matrix.from_rows(SAMPLE_B).inverse()
    expected = [
        [-3.33333, 2.66667, -0.333333],
        [2.66667, -2.33333, 0.666667],
        [-0.333333, 0.666667, -0.333333],
    ]
    for i, row in enumerate(expected):
        assert list(inv[i]) == pytest.approx(row, rel=1e-5)


@pytest.mark.parametrize("rows", [SAMPLE_A, SAMPLE_B])
def test_matrix_times_inverse_is_identity(rows):
    m = Matrix.from_rows(rows)
    identity_entries = [value for row in IDENTITY for value in row]
    right = m @ m.inverse()
    left = m.inverse() @ m
    assert (right.rows, right.cols) == (3, 3)
    assert (left.rows, left.cols) == (3, 3)
    assert [v for i in range(3) for v in right[i]] == pytest.approx(
        identity_entries, abs=1e-9
    )
    assert [v for i in range(3) for v in left[i]] == pytest.approx(
        identity_entries, abs=1e-9
    )


def test_inverse_of_single_entry():
    assert Matrix.from_rows([[4]]).inverse()[0, 0] == pytest.approx(0.25)


def test_singular_matrix_cannot_be_inverted():
    with pytest.raises(MatrixError):
        Matrix.from_rows([[1, 2], [2, 4]]).inverse()


def test_non_square_operations_raise():
    m = Matrix.zeros(2, 3)
    for operation in (m.determinant, m.inverse, m.adjoint):
        with pytest.raises(MatrixError):
            operation()


def test_adjoint_times_matrix_is_determinant_times_identity():
    m = Matrix.from_rows(SAMPLE_A)
    product = m @ m.adjoint()
    assert (product.rows, product.cols) == (3, 3)
    assert [v for i in range(3) for v in product[i]] == pytest.approx(
        [44, 0, 0, 0, 44, 0, 0, 0, 44], abs=1e-9
    )


def test_determinant_expands_by_cofactors():
    m = Matrix.from_rows(SAMPLE_B)
    expansion = sum(m[0, j] * m.cofactor(0, j) for j in range(3))
    assert m.determinant() == pytest.approx(expansion)


def test_determinant_is_multiplicative_for_larger_matrices():
    a = Matrix.from_rows([[2, 1, 0, 3], [1, -1, 4, 0], [0, 2, 1, 1], [5, 0, -2, 1]])
    b = Matrix.from_rows([[1, 0, 2, 1], [3, 1, 0, -1], [0, 2, 1, 4], [1, 1, 1, 0]])
    assert (a @ b).determinant() == pytest.approx(a.determinant() * b.determinant())
    assert a.transpose().determinant() == pytest.approx(a.determinant())


def test_scalar_multiplication_scales_determinant():
    m = Matrix.from_rows(SAMPLE_A)
    assert (2 * m).determinant() == pytest.approx(2**3 * m.determinant())
    assert 2 * m == m * 2 == m.multiply(2)


def test_transpose_round_trip_and_shape():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    t = m.transpose()
    assert (t.rows, t.cols) == (3, 2)
    assert t[2, 0] == m[0, 2]
    assert t.transpose() == m


def test_sub_matrix_removes_row_and_column():
    m = Matrix.from_rows(SAMPLE_A)
    sub = m.sub_matrix(1, 0)
    assert sub == Matrix.from_rows([[0, 2], [-2, 3]])


@pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 0)])
def test_sub_matrix_out_of_range_raises(row, col):
    with pytest.raises(MatrixError):
        Matrix.from_rows(SAMPLE_A).sub_matrix(row, col)


def test_identity_is_neutral_for_multiplication():
    m = Matrix.from_rows(SAMPLE_B)
    ident = Matrix.from_rows(IDENTITY)
    assert ident @ m == m
    assert m.multiply(ident) == m


def test_mismatched_multiplication_raises():
    with pytest.raises(MatrixError):
        Matrix.zeros(2, 3) @ Matrix.zeros(2, 3)


def test_matrix_times_vector_uses_row_dot_products():
    m = Matrix.from_rows(SAMPLE_A)
    v = Vector3D(3, 5, -2)
    result = m @ v
    assert list(result) == [v.dot(Vector3D(*m[i])) for i in range(3)]
    assert m.multiply(v) == result


def test_vector_multiplication_needs_three_by_three():
    with pytest.raises(MatrixError):
        Matrix.zeros(2, 2) @ Vector3D(1, 2, 3)


def test_multiply_rejects_unknown_type():
    with pytest.raises(TypeError):
        Matrix.zeros(2, 2).multiply("text")