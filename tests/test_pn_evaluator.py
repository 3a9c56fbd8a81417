import logging
import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from polish_notation import (
    DivisionByZero,
    EmptyInput,
    ErrorKind,
    ExpressionTooDeep,
    InvalidToken,
    PNEvaluator,
    PolishError,
    TrailingTokens,
    UnexpectedEnd,
    evaluate,
)
from polish_notation.config.config import EVALUATOR_CONFIG


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ("5", 5.0),
        ("+ 5 1", 6.0),
        ("* + 1 2 3", 9.0),
        ("+ 5 2 ", 7.0),
        ("- 5 2", 3.0),
        ("* 5 2 ", 10.0),
        ("/ 5 2", 2.5),
        ("% 5 2 ", 1.0),
        ("1", 1.0),
        ("-1", -1.0),
        ("- 2 5", -3.0),
        ("/ 1 4", 0.25),
        ("+ * 2 3 4", 10.0),
        ("* + 1 2 + 3 4", 21.0),
        ("- * 3 3 + 2 2", 5.0),
        ("+ -3 7", 4.0),
        ("* -2 -3", 6.0),
        ("+ + + 1 1 1 1", 4.0),
    ],
)
def test_evaluate_values(expression: str, expected: float) -> None:
    assert evaluate(expression) == expected


def test_result_is_plain_float() -> None:
    result = evaluate("+ 1 2")
    assert type(result) is float


def test_whitespace_runs_are_ignored() -> None:
    assert evaluate("  +\t5 \n\n 1  ") == 6.0


def test_operands_keep_textual_order() -> None:
    assert evaluate("- 10 3") == 7.0
    assert evaluate("/ 8 2") == 4.0
    assert evaluate("- / 8 2 - 5 4") == 3.0


@pytest.mark.parametrize("expression", ["", "   ", "\t\n"])
def test_empty_input(expression: str) -> None:
    with pytest.raises(EmptyInput) as excinfo:
        evaluate(expression)
    assert excinfo.value.kind is ErrorKind.EMPTY_INPUT
    assert str(excinfo.value) == "empty input"


@pytest.mark.parametrize("expression", ["+ 5", "+", "* + 5 1 - 7", "- * 1 2"])
def test_unexpected_end(expression: str) -> None:
    with pytest.raises(UnexpectedEnd) as excinfo:
        evaluate(expression)
    assert str(excinfo.value) == "unexpected end of input"


def test_trailing_tokens() -> None:
    with pytest.raises(TrailingTokens) as excinfo:
        evaluate("5 5")
    assert excinfo.value.kind is ErrorKind.TRAILING_TOKENS
    assert excinfo.value.remaining == 1
    assert str(excinfo.value) == "trailing tokens"


def test_trailing_tokens_are_not_classified() -> None:
    # the expression is complete before the bad word is reached
    with pytest.raises(TrailingTokens) as excinfo:
        evaluate("+ 1 2 oops 3")
    assert excinfo.value.remaining == 2


@pytest.mark.parametrize("expression", ["/ 1 0", "/ 1 -0.0", "% 5 0", "+ 1 / 2 - 3 3"])
def test_division_by_zero(expression: str) -> None:
    with pytest.raises(DivisionByZero) as excinfo:
        evaluate(expression)
    assert str(excinfo.value) == "division by zero"


def test_zero_dividend_is_fine() -> None:
    assert evaluate("/ 0 5") == 0.0


@pytest.mark.parametrize(
    ("expression", "token"),
    [
        ("* [ 5 1 = 7  1", "["),
        ("+ 1 x", "x"),
        ("abc", "abc"),
        ("+ nan 1", "nan"),
        ("+ inf 1", "inf"),
        ("1_000", "1_000"),
        ("^ 2 3", "^"),
    ],
)
def test_invalid_token(expression: str, token: str) -> None:
    with pytest.raises(InvalidToken) as excinfo:
        evaluate(expression)
    assert excinfo.value.token == token
    assert str(excinfo.value) == f"invalid token: {token}"


def test_first_error_from_the_left_wins() -> None:
    with pytest.raises(DivisionByZero):
        evaluate("+ / 1 0 x")
    with pytest.raises(InvalidToken):
        evaluate("+ x / 1 0")


def test_all_errors_share_base_class() -> None:
    for expression in ["", "+ 5", "5 5", "/ 1 0", "?"]:
        with pytest.raises(PolishError):
            evaluate(expression)


def test_deep_nesting_beyond_limit() -> None:
    expression = "+ 1 " * 5000 + "1"
    with pytest.raises(ExpressionTooDeep) as excinfo:
        evaluate(expression)
    assert excinfo.value.limit == EVALUATOR_CONFIG["max_depth"]
    assert str(excinfo.value) == "expression too deep"


def test_deep_nesting_with_raised_limit() -> None:
    expression = "+ 1 " * 5000 + "1"
    assert evaluate(expression, max_depth=5000) == 5001.0


def test_limit_counts_pending_operators() -> None:
    assert evaluate("+ + 1 2 3", max_depth=2) == 6.0
    with pytest.raises(ExpressionTooDeep):
        evaluate("+ + + 1 2 3 4", max_depth=2)
    # a long left-to-right chain of shallow sums stays under the limit
    assert evaluate("+ + 1 2 + 3 4", max_depth=2) == 10.0


def test_limit_from_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(EVALUATOR_CONFIG, "max_depth", 1)
    assert evaluate("+ 1 2") == 3.0
    with pytest.raises(ExpressionTooDeep) as excinfo:
        evaluate("+ 1 + 2 3")
    assert excinfo.value.limit == 1


@pytest.mark.parametrize("max_depth", [0, -1, 1.5, True, "10"])
def test_bad_max_depth(max_depth) -> None:
    with pytest.raises(ValueError, match="max_depth"):
        evaluate("1", max_depth=max_depth)


def test_overflow_is_not_an_error() -> None:
    assert evaluate("* 1e308 10") == math.inf
    assert evaluate("- 0 * 1e308 10") == -math.inf


def test_finite_inputs_give_finite_results() -> None:
    for expression in ["+ 1.5 2.25", "* -3 0.5", "/ 1 3", "% 7.5 2", "- .5 5."]:
        assert math.isfinite(evaluate(expression))


def test_idempotent() -> None:
    expression = "* + 1 2 / 9 3"
    assert evaluate(expression) == evaluate(expression) == 9.0
    with pytest.raises(TrailingTokens):
        evaluate("5 5")
    with pytest.raises(TrailingTokens):
        evaluate("5 5")


def test_concurrent_calls() -> None:
    expressions = [f"+ {i} * {i} 2" for i in range(200)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(evaluate, expressions))
    assert results == [3.0 * i for i in range(200)]


def test_class_entry_point() -> None:
    assert PNEvaluator.evaluate("- 5 2") == 3.0


def test_tokens_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="polish_notation.core.pn_evaluator")
    evaluate("+ 5 1")
    messages = [record.getMessage() for record in caplog.records]
    assert "token: '+'" in messages
    assert "token: '1'" in messages


def test_base_error_has_generic_kind() -> None:
    error = PolishError("custom failure")
    assert error.kind is ErrorKind.FAILED_CALCULATION
    assert str(error) == "failed calculation: custom failure"
    assert str(PolishError()) == "failed calculation"


def test_non_string_expression() -> None:
    with pytest.raises(TypeError, match="expression must be str"):
        evaluate(None)
