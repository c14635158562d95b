"""Solutions to a numbered set of algorithmic problems, grouped by topic, with a command-line front end."""

__version__ = "0.1.0"