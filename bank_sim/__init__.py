"""Console bank account simulator."""

__version__ = "0.1.0"
