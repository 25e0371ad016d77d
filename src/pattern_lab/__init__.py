"""Pattern Lab.

Standalone demonstrations of classic object-oriented design patterns and a set
of query exercises over a SQLite bookstore dataset.
"""

__version__ = "0.1.0"
