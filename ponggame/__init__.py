"""Game logic for a two-paddle arcade game: actors, ball physics, menu and level layout, render buffering."""

__version__ = "0.1.0"

__all__ = ["__version__"]