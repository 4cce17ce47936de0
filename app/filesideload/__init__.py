"""filesideload - Import files already present on the server's disk.

An administrator registers a sideload directory; users pick files or
sub-directories from it for import, optionally removing the sources
once imported.
"""

__version__ = "0.3.0"
