"""Substructures owned by an IndexedDict: the key->position index and the parallel key/value sequence."""

from .index import PositionIndex
from .sequence import EntrySequence
