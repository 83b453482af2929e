"""lazy_rpn/operators.py"""
import logging

from lazy_rpn.exceptions import InvalidToken

logger = logging.getLogger(__name__)

BUILTIN_LITERALS = {'0': 0, '2': 2, '4': 4}

BUILTIN_OPERATORS = {
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
}

EXTENSION_OPERATORS = {
    '!': 'concat_digits',
    ',': 'sequence',
    '?': 'conditional',
    '$': 'repeat',
}


class Operators:
    """所有操作符的静态方法集合，签名统一为 (a: Lazy, b: Lazy) -> int"""

    # 算术操作符====================

    @staticmethod
    def add(a, b):
        return a() + b()

    @staticmethod
    def sub(a, b):
        return a() - b()

    @staticmethod
    def mul(a, b):
        return a() * b()

    @staticmethod
    def div(a, b):
        """整数除法，向零取整；除数为0时抛出 ZeroDivisionError"""
        x = a()
        y = b()
        q = abs(x) // abs(y)
        return q if (x < 0) == (y < 0) else -q

    # 组合子========================================

    @staticmethod
    def concat_digits(a, b):
        """a*10 + b，例如 "42!" -> 42"""
        return a() * 10 + b()

    @staticmethod
    def sequence(a, b):
        """先执行a（丢弃结果），再返回b的结果"""
        a()
        return b()

    @staticmethod
    def conditional(a, b):
        """a非零时执行b，否则b不执行并返回0"""
        return b() if a() else 0

    @staticmethod
    def repeat(a, b):
        """执行 b 共 a() 次，返回0"""
        for _ in range(a()):
            b()
        return 0


def make_logging_operator(sink, text, value=0):
    """忽略两个操作数，把text追加到sink，返回value"""
    def log_operator(a, b):
        sink.append(text)
        return value

    return log_operator


def _install(registry, mapping):
    for token, method_name in mapping.items():
        registry.register_operator(token, getattr(Operators, method_name))


def install_builtins(registry, literals=None):
    """注册内置字面量和 + - * /"""
    literals = BUILTIN_LITERALS if literals is None else literals
    for token, value in literals.items():
        registry.register_literal(token, lambda value=value: value)
    _install(registry, BUILTIN_OPERATORS)
    logger.debug(f"Installed builtins: literals={list(literals)}, operators={list(BUILTIN_OPERATORS)}")


def install_extensions(registry, tokens=None):
    """
    注册示例组合子 ! , ? $
    Args:
        tokens: 可选，方法名 -> token字符，用于替换默认字符
    """
    tokens = tokens or {}
    unknown = set(tokens) - set(EXTENSION_OPERATORS.values())
    if unknown:
        raise InvalidToken(f"Unknown extension combinators: {sorted(unknown)}")

    installed = []
    for default_token, method_name in EXTENSION_OPERATORS.items():
        token = tokens.get(method_name, default_token)
        registry.register_operator(token, getattr(Operators, method_name))
        installed.append(token)
    logger.debug(f"Installed extensions: {installed}")
