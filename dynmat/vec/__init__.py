"""This module contains the `Vector` class: a fixed-size sequence of a generic
element type that overloads the arithmetic operators for elementwise and
scalar operations and the dot product."""

from .vec_handler import Vector, MAX_VECTOR_SIZE
