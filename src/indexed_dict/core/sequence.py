"""EntrySequence: keys and values in two position-synchronized lists"""

from ..utilities.misc import check_position


class EntrySequence:
    def __init__(self):
        self.keys = []
        self.values = []

    def __repr__(self):
        return f'EntrySequence({list(zip(self.keys, self.values))})'

    def __len__(self):
        return len(self.keys)

    def __iter__(self):
        return zip(self.keys, self.values)

    def check(self, position, inserting=False):
        """Validate a position: [0, len) to read, write or remove, [0, len] to insert"""
        upper = len(self.keys) if inserting else len(self.keys) - 1
        return check_position(position, upper)

    def append(self, key, value):
        self.keys.append(key)
        self.values.append(value)

    def insert_at(self, position, key, value):
        position = self.check(position, inserting=True)
        self.keys.insert(position, key)
        self.values.insert(position, value)

    def remove_at(self, position):
        position = self.check(position)
        return self.keys.pop(position), self.values.pop(position)

    def get(self, position):
        position = self.check(position)
        return self.keys[position], self.values[position]

    def set_value(self, position, value):
        self.values[self.check(position)] = value

    def set_key_and_value(self, position, key, value):
        position = self.check(position)
        self.keys[position] = key
        self.values[position] = value

    def clear(self):
        self.keys.clear()
        self.values.clear()
