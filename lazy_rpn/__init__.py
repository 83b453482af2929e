"""延迟求值的后缀表达式计算器 - Lazy、Token注册表、RPN求值器和操作符"""
from .exceptions import (
    CalculatorError, RPNSyntaxError, UnknownOperator,
    OperatorAlreadyDefined, InvalidToken
)
from .thunk import Lazy
from .token_system import TokenType, Token, TokenRegistry, RPNValidator, TOKEN_SPACE
from .rpn_evaluator import RPNEvaluator
from .operators import Operators, install_builtins, install_extensions, make_logging_operator

__all__ = [
    'CalculatorError', 'RPNSyntaxError', 'UnknownOperator',
    'OperatorAlreadyDefined', 'InvalidToken',
    'Lazy', 'TokenType', 'Token', 'TokenRegistry', 'RPNValidator', 'TOKEN_SPACE',
    'RPNEvaluator', 'Operators', 'install_builtins', 'install_extensions',
    'make_logging_operator'
]
