import pytest

from dsakit.parentheses import UnbalancedError, check_braces, is_balanced

SOURCE_EXPR = "{{3+2}*{4*{6-9}}}"


def test_check_braces_source_example():
    assert check_braces(SOURCE_EXPR) == SOURCE_EXPR.count("{")


def test_check_braces_no_braces():
    assert check_braces("3+2") == 0


def test_check_braces_extra_closing_reports_position():
    expr = "{3}}+1"
    with pytest.raises(UnbalancedError) as info:
        check_braces(expr)
    assert info.value.position == expr.index("}") + 1


def test_check_braces_unclosed():
    with pytest.raises(UnbalancedError) as info:
        check_braces("{{3}")
    assert info.value.position is None


def test_check_braces_capacity_limit():
    deep = "{" * 20 + "}" * 20
    assert check_braces(deep) == 20
    with pytest.raises(OverflowError):
        check_braces("{" + deep + "}")


def test_check_braces_custom_capacity():
    with pytest.raises(OverflowError):
        check_braces("{{{}}}", capacity=2)
    assert check_braces("{{}}", capacity=2) == 2


def test_unbalanced_error_is_value_error():
    with pytest.raises(ValueError):
        check_braces("}")


@pytest.mark.parametrize(
    "expr, expected",
    [
        (SOURCE_EXPR, True),
        ("", True),
        ("{}", True),
        ("}{", False),
        ("{{}", False),
        ("{}}", False),
        ("}{}{", False),
    ],
)
def test_is_balanced(expr, expected):
    assert is_balanced(expr) is expected


def test_is_balanced_has_no_depth_limit():
    deep = "{" * 500 + "}" * 500
    assert is_balanced(deep)
    assert not is_balanced(deep + "}")