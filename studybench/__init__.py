"""Study programs: C-style string helpers, containers, console games and a contact book."""

__version__ = "0.1.0"