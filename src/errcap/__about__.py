__version__ = "0.1.0"
__author__ = "errcap contributors"
__copyright__ = f"Copyright (c) 2026, {__author__}."
__docs__ = "Capability-based classification of Python errors."

__all__ = [
    "__author__",
    "__copyright__",
    "__docs__",
    "__version__",
]
