"""Parse the DY syntax and the PLX course, skill and exercise files written in it."""

__version__ = "0.0.1"