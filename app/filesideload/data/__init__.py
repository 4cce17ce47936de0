"""Bundled data files for filesideload."""
