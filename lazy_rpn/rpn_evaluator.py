"""RPN表达式求值器 - 先构建Lazy树，再按需执行"""
from functools import partial
import logging

from lazy_rpn.exceptions import RPNSyntaxError, UnknownOperator
from lazy_rpn.thunk import Lazy
from lazy_rpn.token_system import TokenRegistry, TokenType, iter_tokens

logger = logging.getLogger(__name__)


def _apply(combinator, a, b):
    """把操作符和两个操作数封装成新的Lazy（a、b以句柄形式捕获，不预先求值）"""
    return Lazy(partial(combinator, a, b))


class RPNEvaluator:
    """评估后缀表达式，每个字符是一个token"""

    def __init__(self, registry=None):
        self.registry = registry if registry is not None else TokenRegistry()

    @classmethod
    def with_builtins(cls, literals=None):
        """带有内置字面量（0 2 4）和 + - * / 的求值器"""
        from lazy_rpn.operators import install_builtins

        evaluator = cls()
        install_builtins(evaluator.registry, literals=literals)
        return evaluator

    def define_literal(self, token, producer):
        self.registry.register_literal(token, producer)

    def define(self, token, combinator):
        self.registry.register_operator(token, combinator)

    def evaluate(self, text):
        """
        解析表达式并返回未执行的顶层Lazy
        Args:
            text: str，或 bytes / 单字符、编码的可迭代对象
        Returns:
            Lazy
        Raises:
            UnknownOperator: token未注册
            RPNSyntaxError: 操作数不足，或结束时栈中元素不为1
        """
        stack = []
        position = -1

        for position, raw in enumerate(iter_tokens(text)):
            token = self.registry.lookup(raw)

            if token.type == TokenType.LITERAL:
                stack.append(Lazy(token.func))

            elif token.type == TokenType.OPERATOR:
                if len(stack) < token.arity:
                    logger.error(f"Insufficient operands for {token.name!r} at position {position}")
                    raise RPNSyntaxError(
                        f"Operator {token.name!r} at position {position} needs "
                        f"{token.arity} operands, stack has {len(stack)}",
                        token=token.name, position=position, depth=len(stack)
                    )
                b = stack.pop()
                a = stack.pop()
                stack.append(_apply(token.func, a, b))

            else:
                logger.error(f"Unknown operator {token.name!r} at position {position}")
                raise UnknownOperator(
                    f"Unknown operator {token.name!r} at position {position}",
                    token=token.name, position=position
                )

        if len(stack) != 1:
            if not stack:
                logger.error("Empty stack after evaluation")
            else:
                logger.error(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise RPNSyntaxError(
                f"Expression leaves {len(stack)} values on the stack, expected 1",
                position=position + 1, depth=len(stack)
            )

        return stack.pop()

    def calculate(self, text):
        """evaluate(text) 并立即执行；操作符内部的异常（如除零）原样抛出"""
        return self.evaluate(text).invoke()
