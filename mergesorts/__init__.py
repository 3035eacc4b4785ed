"""Four merge sort variants over integer lists, each with a command-line front end."""

__version__ = "1.0.0"