"""Multi-threaded regex search over files and directory trees."""

__version__ = "0.1.0"