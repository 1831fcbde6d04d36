# Shunting Yard conversion from infix tokens to postfix (RPN) order

import logging

from showwork.errors import ExpressionSyntaxError
from showwork.lexer import Function, Number, Operator, Paren

logger = logging.getLogger(__name__)

# symbol: (precedence, left associative)
OPERATORS = {
    '+': (1, True),
    '-': (1, True),
    '*': (2, True),
    '/': (2, True),
    "^^": (3, False),
}

MISMATCHED_PARENS = "Incorrect or mismatched parentheses"


def get_operator(symbol):
    try:
        return OPERATORS[symbol]
    except KeyError:
        raise ExpressionSyntaxError(f"Unknown operator: {symbol}") from None


def precedence(symbol):
    return get_operator(symbol)[0]


def is_left_associative(symbol):
    return get_operator(symbol)[1]


def should_pop(top, incoming):
    if not isinstance(top, Operator):
        return False

    prec_t, prec_i = precedence(top.symbol), precedence(incoming.symbol)

    if prec_t > prec_i:
        return True

    return prec_t == prec_i and is_left_associative(incoming.symbol)


def to_postfix(tokens):
    """Reorder ``tokens`` into postfix, raising ExpressionSyntaxError on bad input."""
    output, ops = [], []

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)

        elif isinstance(token, Function):
            ops.append(token)

        elif isinstance(token, Operator):
            get_operator(token.symbol)

            while ops and should_pop(ops[-1], token):
                output.append(ops.pop())

            ops.append(token)

        elif token == Paren('('):
            ops.append(token)

        elif token == Paren(')'):
            while ops and ops[-1] != Paren('('):
                output.append(ops.pop())

            if not ops:
                raise ExpressionSyntaxError(MISMATCHED_PARENS)

            ops.pop()

            # A function is emitted as soon as its argument closes
            if ops and isinstance(ops[-1], Function):
                output.append(ops.pop())

        else:
            raise ExpressionSyntaxError(f"Unknown token: {token}")

    while ops:
        top = ops.pop()

        if isinstance(top, Paren):
            raise ExpressionSyntaxError(MISMATCHED_PARENS)

        output.append(top)

    logger.debug("Postfix: %s", output)
    return output
