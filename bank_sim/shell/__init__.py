"""Interactive console shell."""

from bank_sim.shell.menu import BankShell

__all__ = ["BankShell"]
