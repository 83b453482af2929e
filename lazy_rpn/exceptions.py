"""lazy_rpn/exceptions.py"""


class CalculatorError(Exception):
    """所有计算器错误的基类"""

    def __init__(self, message, token=None, position=None):
        super().__init__(message)
        self.token = token
        self.position = position


class RPNSyntaxError(CalculatorError):
    """栈结构错误：操作数不足，或结束时栈中元素个数不为1"""

    def __init__(self, message, token=None, position=None, depth=0):
        super().__init__(message, token=token, position=position)
        self.depth = depth


class UnknownOperator(CalculatorError):
    """Token没有注册"""


class OperatorAlreadyDefined(CalculatorError):
    """Token已经注册为字面量或操作符"""


class InvalidToken(CalculatorError, ValueError):
    """Token不是0-127范围内的单个字符"""
