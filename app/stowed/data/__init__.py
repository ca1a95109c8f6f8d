"""Bundled data files for stowed."""
