"""taskbox: a simple command line to-do manager backed by one JSON file."""

__version__ = "0.1.0"
