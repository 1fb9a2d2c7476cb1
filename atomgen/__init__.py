"""atomgen -- scaffolds packages for the Atom editor."""

__version__ = "0.1.0"
