"""Classic algorithms and data structures in plain Python, with a CSV attendance report."""

__version__ = "0.1.0"