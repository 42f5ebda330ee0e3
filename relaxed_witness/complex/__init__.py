"""Simplicial complex helpers: combinatorics, the container contract, closure and checks."""
