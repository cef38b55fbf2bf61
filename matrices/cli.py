"""Command that reads two 3x3 matrices and shows their inverses and vector products."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator

from matrices.matrix import Matrix, MatrixError
from matrices.vector3d import Vector3D


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="matrices",
        description="Read two 3x3 matrices from standard input, then print their "
        "inverses and their products with a fixed vector.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    tokens = _tokens(sys.stdin)
    matrices = []
    try:
        for _ in range(2):
            out.write("Fill your matrix\n")
            matrix = Matrix.read(3, 3, tokens)
            out.write("\n")
            out.write(matrix.format())
            matrices.append(matrix)
    except MatrixError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    out.write("\nInverse of matrix.\n")
    for matrix in matrices:
        try:
            out.write(matrix.inverse().format())
        except MatrixError as exc:
            out.write(f"{exc}\n")

    vector = Vector3D(3, 5, -2)
    out.write(vector.format())
    for matrix in matrices:
        out.write((matrix @ vector).format())

    vector += Vector3D(-4, -2, 8)
    out.write(vector.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())