"""pkgci — CI configuration plugins for package templates."""

__version__ = "0.1.0"
