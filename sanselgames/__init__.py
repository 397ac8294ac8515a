"""Small arcade games on pygame: a grid snake with walls and apples, and an animated dino."""

__version__ = "0.1.0"