"""
Tests for tree evaluation and the running trace
"""

from math import inf, isnan

import pytest

from showwork.errors import EvaluationError
from showwork.evaluator import (Trace, divide, evaluate, format_value, pad_operators,
                                power, safe_log, safe_sqrt)
from showwork.lexer import tokenize
from showwork.parser import to_postfix
from showwork.tree import BinaryOp, NumberNode, UnaryFunc, build_tree


def run(expression):
    lines = []
    trace = Trace(expression, echo=lines.append)
    value = evaluate(build_tree(to_postfix(tokenize(expression))), trace)
    return value, lines


class TestFormatValue:

    def test_integral_values_drop_the_decimal_point(self):
        assert format_value(4.0) == "4"
        assert format_value(-3.0) == "-3"
        assert format_value(-0.0) == "0"

    def test_fractional_values(self):
        assert format_value(2.5) == "2.5"
        assert format_value(0.1 + 0.2) == "0.30000000000000004"

    def test_wrap(self):
        assert format_value(16.0, wrap=True) == "(16)"
        assert format_value(0.5, wrap=True) == "(0.5)"

    def test_non_finite(self):
        assert format_value(inf) == "inf"
        assert format_value(float("nan")) == "nan"


class TestPadOperators:

    def test_operators_are_padded(self):
        assert pad_operators("3+4*2") == "3 + 4 * 2"
        assert pad_operators("(8/2)-1") == "(8 / 2) - 1"

    def test_double_caret_padded_once(self):
        assert pad_operators("2^^9") == "2 ^^ 9"

    def test_exponent_sign_is_not_padded(self):
        assert pad_operators("1e-07+1") == "1e-07 + 1"
        assert pad_operators("2e+20*3") == "2e+20 * 3"


class TestArithmetic:

    def test_divide_by_zero_is_ieee(self):
        assert divide(1.0, 0.0) == inf
        assert divide(-1.0, 0.0) == -inf
        assert divide(1.0, -0.0) == -inf
        assert isnan(divide(0.0, 0.0))

    def test_power(self):
        assert power(2.0, 10.0) == 1024.0
        assert power(0.0, -1.0) == inf
        assert power(10.0, 400.0) == inf
        assert power(-10.0, 401.0) == -inf
        assert isnan(power(-8.0, 0.5))

    def test_function_domains(self):
        assert isnan(safe_sqrt(-1.0))
        assert safe_log(0.0) == -inf
        assert isnan(safe_log(-1.0))


class TestEvaluate:

    @pytest.mark.parametrize("expression, expected", [
        ("3+4*2", 11),
        ("(1+2)*3", 9),
        ("2+3*4", 14),
        ("10-2-3", 5),
        ("8/2/2", 2),
        ("2^^3^^2", 512),
        ("sqrt(16)", 4),
        ("sin(0)", 0),
        ("cos(0)", 1),
        ("log(1)", 0),
        ("10/4", 2.5),
    ])
    def test_values(self, expression, expected):
        assert run(expression)[0] == expected

    def test_trace_steps(self):
        assert run("3+4*2")[1] == ["= 3 + 8", "= 11"]

    def test_right_associative_trace(self):
        assert run("2^^3^^2")[1] == ["= 2 ^^ 9", "= 512"]

    def test_function_argument_keeps_its_parentheses(self):
        assert run("sqrt(9+7)")[1] == ["= sqrt(16)", "= 4"]

    def test_repeated_sub_expressions_reduce_left_to_right(self):
        assert run("(2+3)*(2+3)")[1] == ["= 5 * (2 + 3)", "= 5 * 5", "= 25"]

    def test_number_alone_prints_nothing(self):
        assert run("5") == (5.0, [])

    def test_integral_literal_is_normalized(self):
        assert run("4.0") == (4.0, ["= 4"])

    def test_final_value_is_always_last(self):
        """Text the substitutions cannot match still ends on the result"""
        assert run("sqrt((16))")[1] == ["= 4"]

    def test_skipped_characters_stay_in_the_trace(self):
        assert run("2+3$")[1] == ["= 5$", "= 5"]

    def test_no_duplicate_consecutive_lines(self):
        for expression in ("2*3+2*3", "sqrt((16))", "((1+2))*((3))", "sqrt(sqrt(16))+1"):
            lines = run(expression)[1]
            assert all(a != b for a, b in zip(lines, lines[1:]))

    def test_division_by_zero_does_not_raise(self):
        value, lines = run("1/0")
        assert value == inf
        assert lines == ["= inf"]

    def test_unknown_function(self):
        with pytest.raises(EvaluationError, match="Unknown function: foo"):
            run("foo(1)")

    def test_unknown_operator_is_rejected(self):
        tree = BinaryOp('%', NumberNode(1.0), NumberNode(2.0))
        with pytest.raises(EvaluationError, match="Unknown operator"):
            evaluate(tree, Trace("1%2", echo=lambda line: None))

    def test_trace_printed_before_a_failure_is_kept(self):
        lines = []
        tree = UnaryFunc("foo", BinaryOp('+', NumberNode(1.0), NumberNode(2.0)))
        with pytest.raises(EvaluationError):
            evaluate(tree, Trace("foo(1+2)", echo=lines.append))
        assert lines == ["= foo(3)"]

    def test_prints_by_default(self, capsys):
        evaluate(build_tree(to_postfix(tokenize("1+1"))), Trace("1+1"))
        assert capsys.readouterr().out == "= 2\n"
