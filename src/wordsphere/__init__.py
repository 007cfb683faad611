"""Word Sphere: a frequency-weighted word cloud rotating on a sphere."""
__version__ = "0.1.0"
