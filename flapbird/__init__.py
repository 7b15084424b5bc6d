"""A side-scrolling flappy-bird style arcade game: game logic and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]