"""配置文件"""
import logging

from lazy_rpn.operators import BUILTIN_LITERALS, BUILTIN_OPERATORS
from lazy_rpn.token_system import TOKEN_SPACE

logger = logging.getLogger(__name__)

# 计算器参数
CALCULATOR_CONFIG = {
    "builtin_literals": dict(BUILTIN_LITERALS),  # 可在此覆盖内置字面量
    "install_extensions": False,  # 是否默认注册 ! , ? $
}

# 示例组合子使用的字符（方法名 -> token）
EXTENSION_CONFIG = {
    "concat_digits": '!',
    "sequence": ',',
    "conditional": '?',
    "repeat": '$',
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 命令行 / REPL
CLI_CONFIG = {
    "prompt": "rpn> ",
    "quit_commands": ("quit", "exit"),
}


def validate_config():
    """验证配置的合理性"""
    literals = CALCULATOR_CONFIG["builtin_literals"]
    operators = list(BUILTIN_OPERATORS)
    extensions = list(EXTENSION_CONFIG.values())

    for token in list(literals) + operators + extensions:
        assert len(token) == 1 and ord(token) < TOKEN_SPACE, f"token {token!r} must be a single ASCII character"
    for value in literals.values():
        assert isinstance(value, int), "literal values must be integers"

    builtin = set(literals) | set(operators)
    assert not builtin & set(extensions), "extension tokens collide with builtins"
    assert len(set(extensions)) == len(extensions), "extension tokens must be distinct"
    assert isinstance(logging.getLevelName(LOGGING_CONFIG["level"]), int), "unknown log level"
    logger.debug("Configuration validated successfully!")
