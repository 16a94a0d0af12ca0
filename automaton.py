from clause import evaluate, get_positions
from configuration import Configuration
from rparser import parse_rules
from sigtable import SignalTable

def parse_automaton(code, signals=None):
    "Parse a rule description into an Automaton, or raise a RuleParsingError."
    return Automaton(code, signals)

class Automaton:
    """
    A one-dimensional signal cellular automaton.

    rules are applied to every cell in the order they appear in the description.
    min_neighbor and max_neighbor bound the offsets the rules look at or write to
    (0 is always included); every rule is evaluated on a neighborhood of exactly
    that range.
    max_future_depth is the largest number of steps ahead that an output writes to.
    """

    def __init__(self, code, signals=None):
        if signals is None:
            signals = SignalTable()
        self.signals = signals
        self.rules, self.max_future_depth = parse_rules(code, signals)
        offsets = {0}
        for rule in self.rules:
            get_positions(rule.condition, offsets)
            offsets.update(output.neighbor for output in rule.outputs)
        self.min_neighbor = min(offsets)
        self.max_neighbor = max(offsets)

    def make_configuration(self, nb_cells, seeds=None):
        "An empty configuration, with seeds ({cell : [signal names]}) placed into it."
        conf = Configuration(nb_cells)
        if seeds is not None:
            for (cell, names) in seeds.items():
                for name in names:
                    conf.add(cell, self.signals.intern(name))
        return conf

    def apply_rules(self, diagram, t):
        """
        Run all rules on every cell of diagram[t], left to right, writing into diagram.
        Writes that fall outside the strip or after the end of diagram are dropped.
        A 0/0 write is visible to the cells and rules processed after it.
        """
        config = diagram[t]
        nb_cells = len(config)
        for c in range(nb_cells):
            nbhd = config.neighborhood(c, self.min_neighbor, self.max_neighbor)
            for rule in self.rules:
                if evaluate(rule.condition, nbhd):
                    for output in rule.outputs:
                        target_cell = c + output.neighbor
                        target_time = t + output.future_step
                        if 0 <= target_time < len(diagram) and 0 <= target_cell < nb_cells:
                            diagram[target_time].cells[target_cell].add(output.signal)

    def make_diagram(self, initial, nb_steps):
        """
        Return the space-time diagram of nb_steps steps from initial as a list of
        nb_steps+1 configurations. initial is the first one and is modified in place.
        """
        if nb_steps < 0:
            raise ValueError("Number of steps must be nonnegative, got {}".format(nb_steps))
        nb_cells = len(initial)
        diagram = [initial]
        for _ in range(nb_steps):
            diagram.append(Configuration(nb_cells))
        for t in range(nb_steps):
            self.apply_rules(diagram, t)
        return diagram

    def iter_diagram(self, initial, nb_steps=None):
        """
        Yield the configurations of the space-time diagram one at a time.
        Gives the same configurations as make_diagram, but only keeps the next
        max_future_depth configurations in memory. Without nb_steps it never stops.
        """
        if nb_steps is not None and nb_steps < 0:
            raise ValueError("Number of steps must be nonnegative, got {}".format(nb_steps))
        nb_cells = len(initial)
        window = [initial]
        t = 0
        while nb_steps is None or t < nb_steps:
            depth = self.max_future_depth + 1
            if nb_steps is not None:
                depth = min(depth, nb_steps - t + 1)
            while len(window) < depth:
                window.append(Configuration(nb_cells))
            self.apply_rules(window, 0)
            yield window.pop(0)
            t += 1
        yield window[0]

    def get_signals(self):
        signals = set()
        for rule in self.rules:
            signals.update(rule.get_condition_signals())
            signals.update(rule.get_output_signals())
        return signals

    def causality_violations(self):
        "List of (rule, output) pairs whose output writes to another cell in the same step."
        return [(rule, output)
                for rule in self.rules
                for output in rule.outputs
                if not output.is_causal()]

    def render(self):
        return "\n".join(rule.tostr(self.signals) for rule in self.rules)

    def __str__(self):
        return self.render()
