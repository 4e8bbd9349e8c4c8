"""Ahaan Thai - Thai food dictionary, cookbooks, recipe library and encyclopedia."""

__version__ = "1.0.0"
