import pytest

from lazy_rpn import RPNEvaluator, TokenRegistry, install_extensions


@pytest.fixture
def registry():
    return TokenRegistry()


@pytest.fixture
def calculator():
    return RPNEvaluator.with_builtins()


@pytest.fixture
def extended(calculator):
    install_extensions(calculator.registry)
    return calculator


@pytest.fixture
def pomidor(extended):
    """'P' 操作符：忽略操作数，向日志追加 "pomidor" 并返回0"""
    from lazy_rpn import make_logging_operator

    buffer = []
    extended.define('P', make_logging_operator(buffer, "pomidor"))
    return extended, buffer
