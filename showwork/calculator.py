# Runs an expression through the whole pipeline:
# text -> tokens -> postfix -> tree -> value, printing each simplification step

import logging

from showwork.evaluator import Trace, evaluate, pad_operators
from showwork.lexer import tokenize
from showwork.parser import to_postfix
from showwork.tree import build_tree

logger = logging.getLogger(__name__)


def strip_whitespace(expression):
    return ''.join(expression.split())


# param expression - raw expression text, may contain spaces
# param       echo - called with every output line, print by default
def calculator(expression, echo=print):
    expression = strip_whitespace(expression)
    logger.debug("Evaluating %r", expression)

    echo(pad_operators(expression))

    tokens = tokenize(expression)
    postfix = to_postfix(tokens)
    root = build_tree(postfix)

    return evaluate(root, Trace(expression, echo))


# Same as calculator(), but collects the output instead of printing it
def show_work(expression):
    lines = []
    value = calculator(expression, echo=lines.append)

    return value, lines
