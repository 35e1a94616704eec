"""Generator for License Project packages."""

__version__ = "1.0.0"
