"""Parametric geometry for split dactyl-style keyboard cases.

Every builder returns a SolidPython object tree; nothing here evaluates
CSG or touches the filesystem.
"""

__version__ = "0.1.0"
