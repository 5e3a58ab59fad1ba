"""symbolmap — combine standalone SVG images into one hidden sprite."""

__version__ = "0.1.0"
