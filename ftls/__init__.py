"""A small ls-style directory lister with -l, -R, -a, -r and -t options."""

__version__ = "0.1.0"
__all__ = ["__version__"]