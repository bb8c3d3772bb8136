"""Utilities relating to: key comparers, argument checks and value equality."""

from . import comparers, misc
