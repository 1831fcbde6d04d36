# Exceptions raised by the expression pipeline
# Every error derives from ValueError so callers that already guard numeric input keep working


class CalculatorError(ValueError):
    pass


# Raised by the lexer when accumulated numeric text is not a float
class LexError(CalculatorError):
    pass


# Raised by the shunting-yard pass for unbalanced parentheses and unknown operators
class ExpressionSyntaxError(CalculatorError):
    pass


# Raised while assembling the tree from postfix when operands are missing or left over
class StructureError(CalculatorError):
    pass


# Raised while walking the tree for names the evaluator cannot apply
class EvaluationError(CalculatorError):
    pass
