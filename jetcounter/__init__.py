"""JetCounter — a single-screen countdown timer."""

__version__ = "0.1.0"
