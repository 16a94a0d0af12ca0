from frozendict import frozendict

# A configuration is one time step of the space-time diagram:
# a fixed-width strip of cells, each cell a set of signals (integer handles).
# Outside the strip every cell is empty (open boundary).

class Neighborhood:
    """
    The signal sets of the cells around a focal cell, indexed by relative offset.
    Only offsets in [min_offset, max_offset] exist; asking for any other offset
    raises IndexError instead of pretending the cell is empty.
    The sets are the live cells of the configuration, not copies.
    """

    def __init__(self, cells, min_offset, max_offset):
        self.cells = cells
        self.min_offset = min_offset
        self.max_offset = max_offset

    def __getitem__(self, offset):
        try:
            return self.cells[offset]
        except KeyError:
            raise IndexError("Offset {} outside of neighborhood [{}, {}]".format(offset, self.min_offset, self.max_offset))

    def __contains__(self, offset):
        return offset in self.cells

    def __iter__(self):
        return iter(self.cells)

    def __len__(self):
        return len(self.cells)

class Configuration:
    "A strip of nb_cells cells, each holding a set of signals."

    def __init__(self, nb_cells):
        if nb_cells < 1:
            raise ValueError("A configuration needs at least one cell, got {}".format(nb_cells))
        self.cells = [set() for _ in range(nb_cells)]

    @classmethod
    def from_cells(cls, cells):
        "Build a configuration from a list of iterables of signals."
        conf = cls(len(cells))
        for (i, cell) in enumerate(cells):
            conf.cells[i].update(cell)
        return conf

    def __len__(self):
        return len(self.cells)

    def __getitem__(self, i):
        return self.cells[i]

    def add(self, i, signal):
        self.cells[i].add(signal)

    def copy(self):
        return Configuration.from_cells(self.cells)

    def __eq__(self, other):
        if type(other) != Configuration:
            return NotImplemented
        return self.cells == other.cells

    def neighborhood(self, c, min_offset, max_offset):
        "The neighborhood of cell c, covering offsets min_offset..max_offset inclusive."
        nbhd = {}
        for i in range(min_offset, max_offset+1):
            if 0 <= c+i < len(self.cells):
                nbhd[i] = self.cells[c+i]
            else:
                nbhd[i] = frozenset()
        return Neighborhood(frozendict(nbhd), min_offset, max_offset)

    def display_str(self, signals):
        "One line of text, cells separated by spaces; empty cells are shown as '.'"
        return " ".join("+".join(sorted(signals.name_of(s) for s in cell)) if cell else "."
                        for cell in self.cells)

    def __repr__(self):
        return "Configuration(" + repr([sorted(cell) for cell in self.cells]) + ")"
