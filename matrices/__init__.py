"""Small dense matrices and three-dimensional vectors, with a command-line front end."""

__version__ = "0.1.0"
__all__ = ["cli", "matrix", "vector3d"]