"""A tiny content-addressed version control tool with a command-line interface."""

__version__ = "0.1.0"