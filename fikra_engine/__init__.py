"""Idea categorization and diaspora mentor matching for the Fikra Valley idea platform."""

__version__ = "0.1.0"
