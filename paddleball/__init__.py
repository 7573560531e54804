"""A two-player table-tennis arcade game, its window-free simulation and a collision demo."""

__version__ = "0.1.0"
__all__ = ["__version__"]