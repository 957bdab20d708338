from .maybe import Maybe, Some, Nothing, maybe

__version__ = "0.1.0"
