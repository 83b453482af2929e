"""lazy_rpn/token_system.py"""
from enum import Enum
import logging

from lazy_rpn.exceptions import InvalidToken, OperatorAlreadyDefined, UnknownOperator

logger = logging.getLogger(__name__)

TOKEN_SPACE = 128  # 单字符token的取值范围 0..127
UNDERFLOW = -1     # calculate_stack_size 中表示"操作数不足"


class TokenType(Enum):
    LITERAL = "literal"    # 0元：直接产生整数
    OPERATOR = "operator"  # 2元：接收两个Lazy
    UNBOUND = "unbound"    # 未注册


class Token:
    """注册表条目；创建后只读，不能通过 lookup 的返回值改绑token"""

    __slots__ = ("type", "name", "code", "func", "arity")

    def __init__(self, token_type, name, code=None, func=None, arity=0):
        object.__setattr__(self, "type", token_type)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "code", code)
        object.__setattr__(self, "func", func)
        object.__setattr__(self, "arity", arity)

    def __setattr__(self, key, value):
        raise AttributeError(f"Token {self.name!r} is read-only")

    def __delattr__(self, key):
        raise AttributeError(f"Token {self.name!r} is read-only")

    def __repr__(self):
        return f"Token({self.type.value}, {self.name!r})"


def token_code(token):
    """把 str 单字符或 int 编码统一为 0..127 的整数编码"""
    if isinstance(token, str):
        if len(token) != 1:
            raise InvalidToken(f"Token must be a single character, got {token!r}", token=token)
        code = ord(token)
    elif isinstance(token, int) and not isinstance(token, bool):
        code = token
    else:
        raise InvalidToken(f"Unsupported token type: {type(token).__name__}", token=token)

    if not 0 <= code < TOKEN_SPACE:
        raise InvalidToken(f"Token code {code} outside 0..{TOKEN_SPACE - 1}", token=token)
    return code


def token_name(token):
    """用于日志和错误信息的可读名称"""
    if isinstance(token, int) and not isinstance(token, bool) and 0 <= token < 0x110000:
        return chr(token)
    return token


def iter_tokens(text):
    """逐个产出输入中的token（str按字符，bytes按字节编码）"""
    if isinstance(text, (bytes, bytearray)):
        return iter(bytes(text))
    return iter(text)


class TokenRegistry:
    """字符 -> 字面量/操作符 的注册表，注册后不可覆盖"""

    def __init__(self):
        self._entries = {}  # code -> Token

    def register_literal(self, token, producer):
        self._register(token, producer, TokenType.LITERAL, arity=0)

    def register_operator(self, token, combinator):
        self._register(token, combinator, TokenType.OPERATOR, arity=2)

    def _register(self, token, func, token_type, arity):
        code = token_code(token)
        if not callable(func):
            raise TypeError(f"{token_type.value} for {chr(code)!r} must be callable")

        existing = self._entries.get(code)
        if existing is not None:
            raise OperatorAlreadyDefined(
                f"Token {chr(code)!r} is already defined as {existing.type.value}",
                token=chr(code)
            )

        self._entries[code] = Token(token_type, chr(code), code=code, func=func, arity=arity)
        logger.debug(f"Registered {token_type.value} {chr(code)!r}")

    def lookup(self, token):
        """查询token；未注册或超出范围均返回 UNBOUND"""
        try:
            code = token_code(token)
        except InvalidToken:
            return Token(TokenType.UNBOUND, token_name(token))

        entry = self._entries.get(code)
        if entry is None:
            return Token(TokenType.UNBOUND, chr(code), code=code)
        return entry

    def is_defined(self, token):
        return self.lookup(token).type != TokenType.UNBOUND

    def literals(self):
        return [t.name for t in self if t.type == TokenType.LITERAL]

    def operators(self):
        return [t.name for t in self if t.type == TokenType.OPERATOR]

    def __contains__(self, token):
        return self.is_defined(token)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        for code in sorted(self._entries):
            yield self._entries[code]


class RPNValidator:
    """不构建thunk，只模拟栈深度"""

    @staticmethod
    def calculate_stack_size(text, registry):
        """
        计算扫描完 text 后栈中的元素数量。
        遇到操作数不足的操作符时返回 UNDERFLOW；遇到未注册token抛出 UnknownOperator。
        """
        stack_size = 0
        for position, raw in enumerate(iter_tokens(text)):
            token = registry.lookup(raw)

            if token.type == TokenType.LITERAL:
                stack_size += 1
            elif token.type == TokenType.OPERATOR:
                if stack_size < token.arity:
                    return UNDERFLOW
                stack_size = stack_size - token.arity + 1
            else:
                raise UnknownOperator(f"Unknown operator {token.name!r}",
                                      token=token.name, position=position)
        return stack_size

    @staticmethod
    def is_valid_expression(text, registry):
        """evaluate(text) 能否成功"""
        try:
            return RPNValidator.calculate_stack_size(text, registry) == 1
        except UnknownOperator:
            return False

    @staticmethod
    def can_terminate(text, registry):
        """当前前缀是否已经构成完整表达式"""
        return RPNValidator.is_valid_expression(text, registry)

    @staticmethod
    def get_valid_next_tokens(text, registry):
        """返回当前状态下所有合法的下一个token"""
        try:
            stack_size = RPNValidator.calculate_stack_size(text, registry)
        except UnknownOperator:
            return []
        if stack_size == UNDERFLOW:
            return []

        valid_tokens = []
        for token in registry:
            if token.type == TokenType.LITERAL:
                valid_tokens.append(token.name)
            elif token.arity <= stack_size:
                valid_tokens.append(token.name)
        return valid_tokens
