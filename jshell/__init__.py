"""A small interactive command shell with builtins, heredocs and text utilities."""

__version__ = "0.1.0"