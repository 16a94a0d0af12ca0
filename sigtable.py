"""
A signal table interns signal names into small integers.
The integers are the signals everywhere else: cells hold sets of them,
literals and rule outputs refer to them.
Handles are never removed, so they stay valid for the lifetime of the table.
"""

import re

# Characters allowed in a signal name
signal_name_re = re.compile(r"[A-Za-z0-9_$']+")

class SignalTable:
    "Bidirectional map between signal names and integer handles."

    def __init__(self, names=None):
        self.ids = {}
        self.names = []
        if names is not None:
            for name in names:
                self.intern(name)

    def intern(self, name):
        "Return the handle of name, creating it on first use."
        try:
            return self.ids[name]
        except KeyError:
            if not signal_name_re.fullmatch(name):
                raise ValueError("Bad signal name: {!r}".format(name))
            signal = len(self.names)
            self.ids[name] = signal
            self.names.append(name)
            return signal

    def lookup(self, name):
        "Return the handle of name, or None if it was never interned."
        return self.ids.get(name)

    def name_of(self, signal):
        if type(signal) != int or not 0 <= signal < len(self.names):
            raise KeyError("Unknown signal handle: {}".format(signal))
        return self.names[signal]

    def __contains__(self, name):
        return name in self.ids

    def __len__(self):
        return len(self.names)

    def __iter__(self):
        return iter(self.names)

    def __str__(self):
        return "SignalTable[" + ", ".join(self.names) + "]"
