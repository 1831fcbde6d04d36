# Converts an expression string into a flat list of tokens

from dataclasses import dataclass
import logging

from showwork.errors import LexError

logger = logging.getLogger(__name__)

DIGITS = "0123456789."
OPERATOR_CHARS = "+-*/^"
PARENS = "()"


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Operator:
    symbol: str


@dataclass(frozen=True)
class Function:
    name: str


@dataclass(frozen=True)
class Paren:
    char: str


def tokenize(expression):
    """Split ``expression`` into Number, Operator, Function and Paren tokens.

    Characters outside the expression alphabet are skipped without error. A run
    of letters always becomes a Function token; unknown names are rejected
    later by the evaluator.
    """
    tokens = []
    i, n = 0, len(expression)

    while i < n:
        ch = expression[i]

        if ch.isspace():
            i += 1

        elif ch in DIGITS:
            start = i
            while i < n and expression[i] in DIGITS:
                i += 1
            tokens.append(Number(parse_number(expression[start:i])))

        elif ch in OPERATOR_CHARS:
            i += 1
            if ch == '^' and i < n and expression[i] == '^':
                i += 1
                tokens.append(Operator("^^"))
            else:
                tokens.append(Operator(ch))

        elif ch in PARENS:
            tokens.append(Paren(ch))
            i += 1

        elif ch.isalpha():
            start = i
            while i < n and expression[i].isalpha():
                i += 1
            tokens.append(Function(expression[start:i]))

        else:
            logger.debug("Skipping unrecognized character %r at position %d", ch, i)
            i += 1

    logger.debug("Tokens: %s", tokens)
    return tokens


def parse_number(text):
    try:
        return float(text)
    except ValueError:
        raise LexError(f"Invalid number: {text}") from None
