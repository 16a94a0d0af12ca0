import argparse
import sys

from automaton import Automaton
from rparser import RuleParsingError
import rulesets


class Sigca:
    def __init__(self, nb_cells=40, nb_steps=40, seed="Init", verbose=False):
        self.automaton = None
        self.nb_cells = nb_cells
        self.nb_steps = nb_steps
        # signal placed in cell 0 of the initial configuration
        self.seed = seed
        self.verbose = verbose

    def load(self, code, mode="report"):
        """
        Parse a rule description and keep the automaton.
        In report mode a parse error is printed and None returned,
        in assert mode it is raised.
        """
        try:
            aut = Automaton(code)
        except RuleParsingError as e:
            print("Parse error: {}".format(e.msg))
            if e.text is not None:
                print(e.text)
                print(" "*(e.offset-1) + "^")
            if mode == "assert":
                raise
            return None
        if self.verbose:
            print("parsed {} rules over {} signals".format(len(aut.rules), len(aut.get_signals())))
            print("neighborhood [{}, {}], future depth {}".format(aut.min_neighbor, aut.max_neighbor, aut.max_future_depth))
            for (rule, output) in aut.causality_violations():
                print("Warning: output {} of rule {} writes to another cell in the same step".format(
                    output.tostr(aut.signals), rule.tostr(aut.signals)))
        self.automaton = aut
        return aut

    def initial_configuration(self):
        seeds = {0 : [self.seed]} if self.seed else None
        return self.automaton.make_configuration(self.nb_cells, seeds)

    def diagram(self):
        if self.automaton is None:
            raise Exception("No automaton loaded")
        return self.automaton.make_diagram(self.initial_configuration(), self.nb_steps)

    def display_lines(self):
        if self.automaton is None:
            raise Exception("No automaton loaded")
        width = len(str(self.nb_steps))
        for (t, conf) in enumerate(self.automaton.iter_diagram(self.initial_configuration(), self.nb_steps)):
            yield "{:>{}} | {}".format(t, width, conf.display_str(self.automaton.signals))

    def display_str(self):
        return "\n".join(self.display_lines())


def main(argv=None):
    arg_parser = argparse.ArgumentParser(description="Compute the space-time diagram of a signal cellular automaton.")
    arg_parser.add_argument("filename", metavar='f', type=str, nargs='?',
                            help="file containing the rule description")
    arg_parser.add_argument("--preset", choices=sorted(rulesets.presets),
                            help="use a bundled rule description instead of a file")
    arg_parser.add_argument("--cells", type=int, default=40)
    arg_parser.add_argument("--steps", type=int, default=40)
    arg_parser.add_argument("--seed", type=str, default="Init",
                            help="signal placed in cell 0 at time 0")
    arg_parser.add_argument("--show-rules", action="store_true")
    arg_parser.add_argument("--verbose", action="store_true")
    args = arg_parser.parse_args(argv)
    if args.cells < 1:
        arg_parser.error("--cells must be positive")
    if args.steps < 0:
        arg_parser.error("--steps must be nonnegative")

    if args.preset is not None:
        code = rulesets.presets[args.preset]
    elif args.filename is not None:
        with open(args.filename, 'r', encoding="utf-8") as f:
            code = f.read()
    else:
        arg_parser.error("give a file or a preset")

    runner = Sigca(nb_cells=args.cells, nb_steps=args.steps, seed=args.seed, verbose=args.verbose)
    if runner.load(code) is None:
        return 1
    if args.show_rules:
        print(runner.automaton.render())
        print()
    for line in runner.display_lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
