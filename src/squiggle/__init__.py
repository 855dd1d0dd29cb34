from squiggle.progress.drawable import SquigglyProgress

__all__ = ["SquigglyProgress"]
__version__ = "0.1.0"
