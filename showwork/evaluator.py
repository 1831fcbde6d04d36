# Recursive evaluation of an expression tree with a running "show work" trace
#
# The trace is the original expression text. Each time a sub-expression is
# evaluated its canonical text is searched for in the trace and replaced with the
# computed value, and the trace is printed whenever it changes.

from math import copysign, cos, inf, isnan, log, nan, pow, sin, sqrt
import logging
from re import sub

from showwork.errors import EvaluationError
from showwork.tree import BinaryOp, NumberNode, UnaryFunc

logger = logging.getLogger(__name__)

# Operators, except the sign of an exponent such as 1e-07
PADDED_OPERATORS = r"(?<![0-9]e)(\^\^|[+\-*/])"


def format_value(value, wrap=False):
    """Render ``value`` the way it appears in the trace.

    Values without a fractional part are written as integers, everything else
    uses Python's default float text. Every number that is turned into trace
    text must go through here, otherwise substitutions stop matching.
    """
    value = float(value)
    text = str(int(value)) if value.is_integer() else repr(value)

    return f"({text})" if wrap else text


def pad_operators(expression):
    return sub(PADDED_OPERATORS, r" \1 ", expression)


def is_odd_integer(x):
    return x.is_integer() and x % 2 == 1


# IEEE 754 division: dividing by zero gives an infinity or nan instead of raising
def divide(left, right):
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or isnan(left):
            return nan

        return copysign(inf, left) * copysign(1.0, right)


def power(left, right):
    try:
        return pow(left, right)
    except OverflowError:
        return copysign(inf, left) if is_odd_integer(right) else inf
    except ValueError:
        if left == 0 and right < 0:
            return copysign(inf, left) if is_odd_integer(right) else inf

        return nan


def safe_sqrt(x):
    try:
        return sqrt(x)
    except ValueError:
        return nan


def safe_log(x):
    try:
        return log(x)
    except ValueError:
        return -inf if x == 0 else nan


def safe_trig(func):
    def apply(x):
        try:
            return func(x)
        except ValueError:
            return nan

    return apply


OPERATIONS = {
    '+': lambda a, b: a + b,
    '-': lambda a, b: a - b,
    '*': lambda a, b: a * b,
    '/': divide,
    "^^": power,
}

FUNCTIONS = {
    "sin": safe_trig(sin),
    "cos": safe_trig(cos),
    "sqrt": safe_sqrt,
    "log": safe_log,
}


class Trace:
    """Mutable text of the expression being reduced.

    ``echo`` receives every printed line. ``last_line`` holds the buffer as of the
    most recent output so that the same state is never printed twice in a row.
    """

    def __init__(self, expression, echo=print):
        self.buffer = expression
        self.echo = echo
        self.last_line = expression

    def substitute_operation(self, sub_expr, result):
        pos = self.buffer.find(sub_expr)

        if pos != -1:
            # Keep function call syntax intact, e.g. sqrt(9+7) -> sqrt(16)
            wrap = pos > 0 and self.buffer[pos - 1].isalpha()
            self.replace_at(pos, sub_expr, format_value(result, wrap))
            return

        # Fallback for sub-expressions written without their own parentheses
        bare = sub_expr.replace('(', '').replace(')', '')
        self.buffer = self.buffer.replace(bare, format_value(result), 1)

    def substitute_function(self, sub_expr, result):
        self.buffer = self.buffer.replace(sub_expr, format_value(result), 1)

    def replace_at(self, pos, old, new):
        self.buffer = f"{self.buffer[:pos]}{new}{self.buffer[pos + len(old):]}"

    # Print the buffer if it moved away from last_step and was not just printed
    def emit(self, last_step):
        if self.buffer == last_step or self.buffer == self.last_line:
            return

        self.last_line = self.buffer
        self.echo(f"= {pad_operators(self.buffer)}")

    # Make sure the final value is the last thing shown
    def finish(self, value):
        text = format_value(value)

        if self.buffer != text:
            logger.debug("Trace %r did not reduce to %r", self.buffer, text)
            self.buffer = text
            self.emit(None)


def evaluate(root, trace):
    value = evaluate_node(root, trace)
    trace.finish(value)

    return value


def evaluate_node(node, trace):
    if isinstance(node, NumberNode):
        return node.value

    last_step = trace.buffer

    if isinstance(node, BinaryOp):
        left = evaluate_node(node.left, trace)
        right = evaluate_node(node.right, trace)

        if (operation := OPERATIONS.get(node.operator)) is None:
            raise EvaluationError(f"Unknown operator: {node.operator}")

        result = operation(left, right)
        sub_expr = f"({format_value(left)}{node.operator}{format_value(right)})"
        trace.substitute_operation(sub_expr, result)

    elif isinstance(node, UnaryFunc):
        arg = evaluate_node(node.argument, trace)

        if (func := FUNCTIONS.get(node.name)) is None:
            raise EvaluationError(f"Unknown function: {node.name}")

        result = func(arg)
        trace.substitute_function(f"{node.name}({format_value(arg)})", result)

    else:
        raise EvaluationError(f"Unknown node: {node!r}")

    trace.emit(last_step)

    return result
