"""Public-facing objects."""

from . import core, utilities

from .classes.indexed_dict import IndexedDict
from .classes.views import ReadOnlyIndexedDict, PairList
from .utilities.comparers import KeyComparer, KeyFunctionComparer, CaseInsensitiveComparer
from .errors import (IndexedDictError, DuplicateKeyError, KeyNotFoundError, PositionOutOfRangeError,
                     InvalidArgumentError, EnumerationInvalidatedError)

# Ensure warning uniformity across package
import warnings

# Force warnings.warn() to omit the source code line in the message
formatwarning_orig = warnings.formatwarning
warnings.formatwarning = lambda message, category, filename, lineno, line=None: \
    formatwarning_orig(message, category, filename, lineno, line='')
