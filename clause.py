"""
A Clause is a boolean condition on the signals of a neighborhood.
It is a small immutable tree whose nodes are tagged by op:

  "T"  always true, no inputs
  "V"  literal, inputs (signal, position, time)
  "!"  negation of one clause
  "&"  conjunction of two or more clauses
  "|"  disjunction of two or more clauses

Build clauses with LIT, NOT, AND and OR (and the constants T and F) instead of
calling Clause directly; they do the flattening and the double negation collapse.
Everything else is a plain function that looks at the op.
"""

class Clause:
    __slots__ = ("op", "inputs")

    def __init__(self, op, *inputs):
        object.__setattr__(self, "op", op)
        object.__setattr__(self, "inputs", inputs)

    def __setattr__(self, name, value):
        raise AttributeError("Clauses are immutable")

    def __eq__(self, other):
        if type(other) != Clause:
            return NotImplemented
        return self.op == other.op and self.inputs == other.inputs

    def __hash__(self):
        return hash((self.op, self.inputs))

    def __repr__(self):
        return "C" + basic_str(self)

def basic_str(c):
    "Debug representation with raw signal handles."
    if c.op == "T":
        return "T"
    if c.op == "V":
        return "V" + str(c.inputs)
    if c.op == "!":
        return "!" + basic_str(c.inputs[0])
    return c.op + "(" + ", ".join(basic_str(d) for d in c.inputs) + ")"

def LIT(signal, position=0, time=0):
    return Clause("V", signal, position, time)

def NOT(c):
    if c.op == "!":
        return c.inputs[0]
    return Clause("!", c)

def AND(*inputs):
    if len(inputs) == 0:
        return T
    if len(inputs) == 1:
        return inputs[0]
    andeds = []
    for inp in inputs:
        if inp.op == "&":
            andeds.extend(inp.inputs)
        else:
            andeds.append(inp)
    return Clause("&", *andeds)

def OR(*inputs):
    if len(inputs) == 0:
        return F
    if len(inputs) == 1:
        return inputs[0]
    oreds = []
    for inp in inputs:
        if inp.op == "|":
            oreds.extend(inp.inputs)
        else:
            oreds.append(inp)
    return Clause("|", *oreds)

T = Clause("T")
F = NOT(T)

def evaluate(c, nbhd):
    """
    Evaluate a clause on a neighborhood (a mapping from offsets to signal sets).
    The time offset of a literal is not consulted: a neighborhood is one time slice.
    A literal whose position is missing from nbhd raises IndexError.
    """
    op = c.op
    if op == "V":
        signal, position, _ = c.inputs
        return signal in nbhd[position]
    elif op == "&":
        return all(evaluate(d, nbhd) for d in c.inputs)
    elif op == "|":
        return any(evaluate(d, nbhd) for d in c.inputs)
    elif op == "!":
        return not evaluate(c.inputs[0], nbhd)
    elif op == "T":
        return True
    raise Exception("Unknown clause op: {}".format(op))

def literal_prefix(c):
    signal, position, time = c.inputs
    s = ""
    if time != 0:
        s += "{}/".format(time)
    if position != 0:
        s += "{}.".format(position)
    return s

def tostr(c, signals):
    """
    Canonical text of a clause; signals is the SignalTable used for the names.
    The result parses back to an equivalent clause.
    """
    op = c.op
    if op == "V":
        return literal_prefix(c) + signals.name_of(c.inputs[0])
    elif op == "!":
        sub = c.inputs[0]
        if sub.op == "T":
            return "[]"
        if sub.op == "V":
            # the sign goes after the prefixes, "-1.A" would read as position -1
            return literal_prefix(sub) + "-" + signals.name_of(sub.inputs[0])
        return "-" + tostr(sub, signals)
    elif op == "&":
        return "(" + " ".join(tostr(d, signals) for d in c.inputs) + ")"
    elif op == "|":
        return "[" + " ".join(tostr(d, signals) for d in c.inputs) + "]"
    elif op == "T":
        # "-[]" parses back to T
        return "-[]"
    raise Exception("Unknown clause op: {}".format(op))

def get_signals(c, sofar=None):
    "Set of signals referenced anywhere in the clause."
    if sofar is None:
        sofar = set()
    if c.op == "V":
        sofar.add(c.inputs[0])
    elif c.op != "T":
        for d in c.inputs:
            get_signals(d, sofar)
    return sofar

def get_positions(c, sofar=None):
    "Set of position offsets of all literals in the clause."
    if sofar is None:
        sofar = set()
    if c.op == "V":
        sofar.add(c.inputs[1])
    elif c.op != "T":
        for d in c.inputs:
            get_positions(d, sofar)
    return sofar
