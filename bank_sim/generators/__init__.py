"""Demo account generators."""

from bank_sim.generators.account import AccountGenerator

__all__ = ["AccountGenerator"]
