"""k-nearest-neighbor classification of 28x28 grayscale digit images."""

__version__ = "0.0.1"
