"""
parse_rules takes the text of a rule description and returns its rules.

The text is line oriented. Each line is
  condition: outputs
or just
  outputs
and the indentation of a line decides which earlier conditions it is nested in:
a nested line's condition is the conjunction of its own condition and the
conditions of all its ancestors.

Conditions and outputs are parsed with parsy; the indentation is handled by
an explicit stack in parse_rules.
"""

import re
import parsy as p
from clause import LIT, NOT, AND, OR
from rule import Rule, RuleOutput

class RuleParsingError(SyntaxError):
    "A rule description could not be parsed. Has lineno, offset and text."

    def __init__(self, msg, lineno=None, offset=None, text=None):
        super().__init__(msg, (None, lineno, offset, text))

### Tokens

whitespace = p.regex(r'\s*')

def lexeme(parser):
    "parser followed by whitespace."
    return parser << whitespace

# Signed integer, a leading + is allowed
integer = p.regex(r'[+-]?\d+').map(int).desc("integer")
# Signal name
signal_name = p.regex(r"[A-Za-z0-9_$']+").desc("signal name")
# Sign of a literal
sign = p.regex(r'[+-]').desc("sign")

lparen = lexeme(p.string('('))
rparen = lexeme(p.string(')'))
lbracket = lexeme(p.string('['))
rbracket = lexeme(p.string(']'))

# Optional prefixes "t/" and "p."
time_prefix = (integer << p.string('/')).optional(None)
position_prefix = (integer << p.string('.')).optional(None)
# Outputs never write into the past
future_prefix = (p.regex(r'\+?\d+').map(int).desc("future step") << p.string('/')).optional(None)

### Grammar

def make_grammar(signals):
    """
    Build the condition and output parsers for one parse.
    Signal names are interned into signals as they are read.
    """

    # Literal: [time/][position.][sign]name
    @p.generate
    def literal():
        time = yield time_prefix
        position = yield position_prefix
        the_sign = yield sign.optional()
        name = yield signal_name
        lit = LIT(signals.intern(name), position or 0, time or 0)
        if the_sign == '-':
            return NOT(lit)
        return lit

    item = p.forward_declaration()

    # Standalone sign in front of any item, e.g. "- A" or "-(A B)"
    @p.generate
    def signed_item():
        the_sign = yield lexeme(sign)
        sub = yield item
        if the_sign == '-':
            return NOT(sub)
        return sub

    # (a b ...) is a conjunction and may not be empty
    conj_group = (lparen >> item.at_least(1) << rparen).combine(AND)
    # [a b ...] is a disjunction; [] is always false
    disj_group = (lbracket >> item.many() << rbracket).combine(OR)

    item.become(lexeme(literal) | signed_item | conj_group | disj_group)

    # Output: [time/][neighbor.]name
    @p.generate
    def output():
        time = yield future_prefix
        neighbor = yield position_prefix
        name = yield signal_name
        if time is None:
            time = 1
        return RuleOutput(neighbor or 0, signals.intern(name), time)

    condition = whitespace >> item << p.eof
    outputs = whitespace >> lexeme(output).many() << p.eof
    return condition, outputs

### Line parsing

token_re = re.compile(r'[()\[\]]|[^\s()\[\]]+')

def error_token(stream, index):
    m = token_re.match(stream, index)
    if m is None:
        return "end of line"
    return repr(m.group())

def parse_part(parser, part, what, lineno, line, start):
    "Parse one part of a line; start is the column of part in line."
    try:
        return parser.parse(part)
    except p.ParseError as e:
        index = e.index
        # parse errors point past the whitespace that ended the last good token
        while index < len(part) and part[index].isspace():
            index += 1
        msg = "Invalid {} on line {}: expected {}, found {}".format(
            what, lineno, " or ".join(sorted(e.expected)), error_token(part, index))
        raise RuleParsingError(msg, lineno, start+index+1, line) from None

def parse_rules(code, signals):
    """
    Parse a rule description.
    Return (rules, max_future_depth) or raise a RuleParsingError.
    """
    condition_parser, outputs_parser = make_grammar(signals)
    rules = []
    max_future_depth = 1
    # (condition, indent) of the open ancestor lines, innermost last
    stack = []
    for (lineno, line) in enumerate(code.splitlines(), start=1):
        content = line.split('#', 1)[0]
        if not content.strip():
            continue
        indent = len(content) - len(content.lstrip())

        cond_str, colon, outs_str = content.partition(':')
        if not colon or not cond_str.strip():
            # outputs only, they continue the enclosing condition
            cond_str = None
            outs_str = content if not colon else outs_str
        outs_start = len(content) - len(outs_str)

        while stack and stack[-1][1] >= indent:
            stack.pop()

        if cond_str is not None:
            line_condition = parse_part(condition_parser, cond_str, "condition", lineno, line, 0)
            if stack:
                condition = AND(stack[-1][0], line_condition)
            else:
                condition = line_condition
            stack.append((condition, indent))
        elif stack:
            condition = stack[-1][0]
        else:
            raise RuleParsingError("Outputs without an enclosing condition on line {}".format(lineno),
                                   lineno, indent+1, line)

        outputs = parse_part(outputs_parser, outs_str, "outputs", lineno, line, outs_start)
        if outputs:
            for output in outputs:
                max_future_depth = max(max_future_depth, output.future_step)
            rules.append(Rule(condition, outputs))
    return rules, max_future_depth
