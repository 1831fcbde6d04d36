# Expression tree nodes and their construction from a postfix token stream

from dataclasses import dataclass
import logging

from showwork.errors import StructureError
from showwork.lexer import Function, Number, Operator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumberNode:
    value: float


@dataclass(frozen=True)
class BinaryOp:
    operator: str
    left: object
    right: object


@dataclass(frozen=True)
class UnaryFunc:
    name: str
    argument: object


def build_tree(postfix):
    stack = []

    def pop_operand():
        if not stack:
            raise StructureError("Operator/function without operand")
        return stack.pop()

    for token in postfix:
        if isinstance(token, Number):
            stack.append(NumberNode(token.value))

        elif isinstance(token, Operator):
            # Right comes off the stack first
            right = pop_operand()
            left = pop_operand()
            stack.append(BinaryOp(token.symbol, left, right))

        elif isinstance(token, Function):
            stack.append(UnaryFunc(token.name, pop_operand()))

        else:
            raise StructureError(f"Unknown token in postfix stream: {token}")

    if len(stack) != 1:
        raise StructureError("Invalid expression tree")

    root = stack.pop()
    logger.debug("Tree: %s", render(root))

    return root


# Fully parenthesized infix form of a tree, used for debug output
def render(node):
    if isinstance(node, BinaryOp):
        return f"({render(node.left)} {node.operator} {render(node.right)})"

    if isinstance(node, UnaryFunc):
        return f"{node.name}({render(node.argument)})"

    return repr(node.value)
