"""Simulators for CPU scheduling and page replacement algorithms, with a command line front end."""

__version__ = "0.1.0"
__all__ = ["cli", "paging", "scheduling"]