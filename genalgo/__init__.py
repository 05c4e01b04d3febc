"""A small genetic algorithm with binary-encoded integer candidates."""

__version__ = "0.1.0"
__all__ = ["param", "candidate", "population", "algorithm", "cli"]