import pytest

from dsakit.expressions import infix_to_postfix, is_operator, precedence


def test_source_example():
    assert infix_to_postfix("a+b-c") == "ab+c-"


def test_higher_precedence_binds_first():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_precedence_ordering():
    assert precedence("*") == precedence("/")
    assert precedence("+") == precedence("-")
    assert precedence("*") > precedence("+")
    assert precedence("+") > precedence("a")


def test_non_operators_have_lowest_precedence():
    assert precedence("x") == precedence("(")


@pytest.mark.parametrize("ch", list("+-*/"))
def test_is_operator_true(ch):
    assert is_operator(ch)


@pytest.mark.parametrize("ch", list("a1( "))
def test_is_operator_false(ch):
    assert not is_operator(ch)


def test_no_operators_is_identity():
    assert infix_to_postfix("abc") == "abc"


@pytest.mark.parametrize("expr", ["a+b-c", "a*b+c/d", "x-y*z+w", "p/q/r"])
def test_output_is_a_permutation(expr):
    result = infix_to_postfix(expr)
    assert sorted(result) == sorted(expr)


@pytest.mark.parametrize("expr", ["a+b-c", "a*b+c/d", "x-y*z+w"])
def test_operand_order_preserved(expr):
    result = infix_to_postfix(expr)
    operands = [ch for ch in expr if not is_operator(ch)]
    assert [ch for ch in result if not is_operator(ch)] == operands


def test_equal_precedence_is_left_associative():
    result = infix_to_postfix("a-b-c")
    assert result.index("-") < result.index("c")