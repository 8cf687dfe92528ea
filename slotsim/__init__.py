"""Console slot machine simulator with reels, minigames and bonus wheels."""

__version__ = "0.1.0"
__all__ = ["__version__"]