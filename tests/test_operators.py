import pytest

from lazy_rpn import (
    InvalidToken,
    Lazy,
    OperatorAlreadyDefined,
    Operators,
    TokenRegistry,
    TokenType,
    install_builtins,
    install_extensions,
    make_logging_operator,
)


def _recording(log, name, value):
    return Lazy(lambda: log.append(name) or value)


@pytest.mark.parametrize("method, x, y, expected", [
    ("add", 4, 2, 6),
    ("sub", 2, 4, -2),
    ("mul", 4, 2, 8),
    ("div", 4, 2, 2),
    ("div", -7, 2, -3),
    ("div", 7, -2, -3),
    ("div", -7, -2, 3),
    ("concat_digits", 4, 2, 42),
])
def test_arithmetic(method, x, y, expected):
    op = getattr(Operators, method)

    assert op(Lazy.constant(x), Lazy.constant(y)) == expected


def test_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        Operators.div(Lazy.constant(1), Lazy.constant(0))


def test_binary_operators_evaluate_left_first():
    log = []
    Operators.sub(_recording(log, 'a', 1), _recording(log, 'b', 2))

    assert log == ['a', 'b']


def test_sequence_discards_first_result():
    log = []

    assert Operators.sequence(_recording(log, 'a', 10), _recording(log, 'b', 20)) == 20
    assert log == ['a', 'b']


@pytest.mark.parametrize("condition, expected, runs", [(0, 0, []), (3, 5, ['b'])])
def test_conditional(condition, expected, runs):
    log = []

    assert Operators.conditional(Lazy.constant(condition), _recording(log, 'b', 5)) == expected
    assert log == runs


@pytest.mark.parametrize("count, runs", [(0, 0), (3, 3), (-2, 0)])
def test_repeat(count, runs):
    log = []

    assert Operators.repeat(Lazy.constant(count), _recording(log, 'b', 1)) == 0
    assert len(log) == runs


def test_logging_operator_ignores_operands():
    sink = []
    log = []
    op = make_logging_operator(sink, "x", value=3)

    assert op(_recording(log, 'a', 1), _recording(log, 'b', 2)) == 3
    assert sink == ["x"]
    assert log == []


def test_install_builtins():
    registry = TokenRegistry()
    install_builtins(registry)

    assert registry.literals() == ['0', '2', '4']
    assert sorted(registry.operators()) == sorted('+-*/')
    assert registry.lookup('4').func() == 4


def test_install_extensions_with_custom_tokens():
    registry = TokenRegistry()
    install_extensions(registry, tokens={"repeat": 'R'})

    assert registry.lookup('R').func is Operators.repeat
    assert registry.lookup('$').type == TokenType.UNBOUND
    assert registry.lookup('?').func is Operators.conditional


def test_install_extensions_token_collision_raises():
    registry = TokenRegistry()

    with pytest.raises(OperatorAlreadyDefined) as excinfo:
        install_extensions(registry, tokens={"repeat": '?'})

    assert excinfo.value.token == '?'
    assert registry.lookup('?').func is Operators.conditional


def test_install_extensions_collision_with_builtin_raises():
    registry = TokenRegistry()
    install_builtins(registry)

    with pytest.raises(OperatorAlreadyDefined):
        install_extensions(registry, tokens={"sequence": '+'})
    assert registry.lookup('+').func is Operators.add


def test_install_extensions_unknown_combinator_rejected():
    registry = TokenRegistry()

    with pytest.raises(InvalidToken):
        install_extensions(registry, tokens={"repaet": 'R'})
    assert len(registry) == 0
