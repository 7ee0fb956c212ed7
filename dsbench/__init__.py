"""Skip list and red-black tree with a workload generator and a timing command."""

__version__ = "0.1.0"
__all__ = ["__version__"]