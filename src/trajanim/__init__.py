"""
trajanim: Static and animated 2D trajectory plots exported as GIFs.
"""
__version__ = "0.1.0"
__all__ = [
    "data",
    "visualization",
    "apps",
]
