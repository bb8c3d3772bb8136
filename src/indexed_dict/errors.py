"""Exceptions raised by IndexedDict and its substructures"""


class IndexedDictError(Exception):
    pass


class DuplicateKeyError(IndexedDictError, ValueError):
    def __init__(self, key):
        super().__init__(f'An entry with key {key!r} already exists')
        self.key = key


class KeyNotFoundError(IndexedDictError, KeyError):
    def __init__(self, key):
        super().__init__(key)
        self.key = key


class PositionOutOfRangeError(IndexedDictError, IndexError):
    def __init__(self, position, upper):
        if upper < 0:
            message = f'Position {position} is out of range, no positions are valid'
        else:
            message = f'Position {position} is outside the valid range [0, {upper}]'
        super().__init__(message)
        self.position = position
        self.upper = upper


class InvalidArgumentError(IndexedDictError, ValueError):
    pass


class EnumerationInvalidatedError(IndexedDictError, RuntimeError):
    def __init__(self):
        super().__init__('IndexedDict was structurally modified during enumeration')
