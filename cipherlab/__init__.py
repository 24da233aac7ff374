"""Shift, Vigenère and substitution cipher tools with frequency-analysis attacks."""

__version__ = "0.1.0"