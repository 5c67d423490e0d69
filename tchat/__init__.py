"""tchat - monitor Twitch chat rooms from the terminal."""

__version__ = "0.3.0"

__all__ = ["__version__"]
