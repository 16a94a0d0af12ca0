from clause import get_signals, tostr

class RuleOutput:
    """
    One signal placement: when the rule fires at cell c and time t,
    signal is added to cell c+neighbor at time t+future_step.
    """
    __slots__ = ("neighbor", "signal", "future_step")

    def __init__(self, neighbor, signal, future_step=1):
        object.__setattr__(self, "neighbor", neighbor)
        object.__setattr__(self, "signal", signal)
        object.__setattr__(self, "future_step", future_step)

    def __setattr__(self, name, value):
        raise AttributeError("Rule outputs are immutable")

    def __eq__(self, other):
        if type(other) != RuleOutput:
            return NotImplemented
        return (self.neighbor, self.signal, self.future_step) == (other.neighbor, other.signal, other.future_step)

    def __hash__(self):
        return hash((self.neighbor, self.signal, self.future_step))

    def __repr__(self):
        return "RuleOutput({}, {}, {})".format(self.neighbor, self.signal, self.future_step)

    def is_causal(self):
        # same-step writes are only allowed on the rule's own cell
        return self.future_step >= 1 or (self.future_step == 0 and self.neighbor == 0)

    def tostr(self, signals):
        name = signals.name_of(self.signal)
        if self.future_step == 1:
            return "{}.{}".format(self.neighbor, name)
        return "{}/{}.{}".format(self.future_step, self.neighbor, name)

class Rule:
    "A condition together with the outputs it triggers, in order."
    __slots__ = ("condition", "outputs")

    def __init__(self, condition, outputs):
        object.__setattr__(self, "condition", condition)
        object.__setattr__(self, "outputs", tuple(outputs))

    def __setattr__(self, name, value):
        raise AttributeError("Rules are immutable")

    def __eq__(self, other):
        if type(other) != Rule:
            return NotImplemented
        return self.condition == other.condition and self.outputs == other.outputs

    def __hash__(self):
        return hash((self.condition, self.outputs))

    def __repr__(self):
        return "Rule({!r}, {!r})".format(self.condition, list(self.outputs))

    def get_output_signals(self):
        return set(output.signal for output in self.outputs)

    def get_condition_signals(self):
        return get_signals(self.condition)

    def tostr(self, signals):
        return "{}: {}".format(tostr(self.condition, signals),
                               " ".join(output.tostr(signals) for output in self.outputs))
