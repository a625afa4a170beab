"""Console text editor with an on-screen keyboard and a tiny expression language."""

__version__ = "0.1.0"