"""Checkie — a checkers rules engine with flying kings and a suicide mode."""

__version__ = "0.1.0"
