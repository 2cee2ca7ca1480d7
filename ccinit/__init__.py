"""Initialize a project's .claude configuration directory from a template tree."""

__version__ = "0.1.0"