"""This module contains the `Matrix` class: a square matrix stored as a list of
owned `Vector` rows.  `Matrix` overloads the arithmetic operators for
matrix-matrix, matrix-vector and matrix-scalar operations."""

from .mat_handler import Matrix, MAX_MATRIX_SIZE
