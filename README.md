# matrices

Small dense matrices (from 1 × 1 up to 10 × 10) and three-dimensional
vectors in pure Python, with no dependencies outside the standard library.

- `matrices.matrix.Matrix` – an immutable, hashable matrix of floats.
  It supports matrix products, scalar products, products with a
  `Vector3D`, transposes, sub-matrices (minors), cofactors, adjoints,
  determinants of any square size (by cofactor expansion along the first
  row) and inverses (adjoint divided by determinant).
- `matrices.vector3d.Vector3D` – an immutable vector with `x`, `y`, `z`
  components, offering magnitude, scaling, normalisation, dot and cross
  products, addition and subtraction.

## Installation

```
pip install .
```

## Library use

```python
from matrices.matrix import Matrix, MatrixError
from matrices.vector3d import Vector3D

a = Matrix.from_rows([[1, 0, 2], [-3, 4, 6], [-1, -2, 3]])
print(a.determinant())        # 44.0
print(a.inverse().format())   # 1/det(A) * adj(A)
print(a[0, 2])                # 2.0
print(a[1])                   # (-3.0, 4.0, 6.0)

b = Matrix.zeros(3, 3)
product = a @ b               # matrix product, same as a.multiply(b)
doubled = 2 * a               # scalar product, same as a.multiply(2)
minor = a.sub_matrix(0, 0)    # row 0 and column 0 removed
print(a.cofactor(0, 0), a.adjoint().format(), a.transpose().format())

v = Vector3D(3, 5, -2)
print((a @ v).format())       # same as a.multiply(v); needs a 3x3 matrix
print((v + Vector3D(-4, -2, 8)).format())
print(v.dot(Vector3D(1, 0, 0)), v.cross(Vector3D(0, 1, 0)).format())
print(v.magnitude(), v.normalize(), v.scale(2))
```

A matrix can also be built from its size and a flat sequence of entries,
`Matrix(2, 3, [1, 2, 3, 4, 5, 6])`, or read from a stream of
whitespace-separated numbers, row by row, with `Matrix.read(rows, cols,
stream)`; without a stream it reads standard input.

`format()` on a matrix gives a header line with its size followed by one
line per row; on a vector it gives a header line followed by one component
per line.

### Errors

Operations that have no answer raise `MatrixError`, a subclass of
`ValueError`:

- building a matrix larger than 10 × 10 or smaller than 1 × 1, or giving
  the wrong number of entries or rows of unequal length;
- reading too few entries, or an entry that is not a number;
- multiplying matrices whose inner sizes differ, or multiplying a matrix
  that is not 3 × 3 by a `Vector3D`;
- taking a sub-matrix at a position outside the matrix, or of a matrix
  with a single row or column;
- asking for the determinant, adjoint or inverse of a non-square matrix,
  or inverting a matrix whose determinant is zero.

Normalising a zero `Vector3D` raises `ValueError`.

## Command line

```
matrices
```

The command reads two 3 × 3 matrices from standard input (nine numbers
each, separated by whitespace), prints both and their inverses, then prints
the vector (3, 5, -2), its products with each matrix, and its sum with
(-4, -2, 8). A matrix that cannot be inverted is reported in place of its
inverse. If the input runs short or holds something that is not a number,
the command prints an error on standard error and exits with status 1.

```
printf '1 0 2 -3 4 6 -1 -2 3\n1 2 3 2 3 4 3 4 2\n' | matrices
```