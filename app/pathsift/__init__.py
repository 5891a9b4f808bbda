"""pathsift - path classification and criteria-driven directory tree walking."""

__version__ = "0.1.0"
