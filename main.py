"""主程序入口 - 计算后缀表达式或进入交互模式"""
import argparse
import logging
import sys

from config.config import *
from lazy_rpn import (
    CalculatorError,
    RPNEvaluator,
    RPNValidator,
    install_builtins,
    install_extensions,
)

logger = logging.getLogger(__name__)


def parse_literal(text):
    """'C=N' -> ('C', N)"""
    token, sep, value = text.partition('=')
    if not sep or len(token) != 1:
        raise argparse.ArgumentTypeError(f"expected C=N with a single character C, got {text!r}")
    try:
        return token, int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"literal value must be an integer, got {value!r}")


def build_calculator(args):
    """按配置和命令行参数创建求值器"""
    calculator = RPNEvaluator()
    install_builtins(calculator.registry, literals=CALCULATOR_CONFIG['builtin_literals'])

    if args.extensions or CALCULATOR_CONFIG['install_extensions']:
        install_extensions(calculator.registry, tokens=EXTENSION_CONFIG)

    for token, value in args.literal or []:
        calculator.define_literal(token, lambda value=value: value)

    logger.info(f"Literals: {''.join(calculator.registry.literals())}, "
                f"operators: {''.join(calculator.registry.operators())}")
    return calculator


def run_expression(calculator, expression, check_only=False):
    """计算单个表达式并输出结果"""
    if check_only:
        valid = RPNValidator.is_valid_expression(expression, calculator.registry)
        print("valid" if valid else "invalid")
        return valid
    print(calculator.calculate(expression))
    return True


def repl(calculator, check_only=False, stream=None):
    """逐行读取表达式，错误只报告不退出"""
    stream = stream or sys.stdin
    interactive = stream.isatty()

    while True:
        if interactive:
            print(CLI_CONFIG['prompt'], end='', flush=True)
        line = stream.readline()
        if not line:
            break

        expression = line.strip()
        if not expression:
            continue
        if expression in CLI_CONFIG['quit_commands']:
            break

        try:
            run_expression(calculator, expression, check_only)
        except (CalculatorError, ZeroDivisionError) as e:
            logger.error(f"{type(e).__name__}: {e}")
            print(f"error: {type(e).__name__}: {e}")
    return 0


def main(args):
    logging.basicConfig(
        level=args.log_level or LOGGING_CONFIG['level'],
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    try:
        calculator = build_calculator(args)
    except CalculatorError as e:
        logger.error(f"Failed to set up calculator: {e}")
        return 1

    if not args.expressions:
        return repl(calculator, check_only=args.check)

    status = 0
    for expression in args.expressions:
        try:
            if not run_expression(calculator, expression, args.check):
                status = 1
        except (CalculatorError, ZeroDivisionError) as e:
            logger.error(f"Failed to evaluate {expression!r}: {type(e).__name__}: {e}")
            return 1
    return status


def build_parser():
    parser = argparse.ArgumentParser(description="Lazy postfix calculator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Postfix expressions, one character per token (e.g. 42+). Reads stdin if omitted"
    )
    parser.add_argument(
        "--extensions",
        action="store_true",
        help="Register the sample combinators ! , ? $"
    )
    parser.add_argument(
        "--literal",
        type=parse_literal,
        action="append",
        metavar="C=N",
        help="Register an extra literal, may be repeated"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only check that expressions are well-formed"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default from config)"
    )
    return parser


def cli():
    sys.exit(main(build_parser().parse_args()))


if __name__ == "__main__":
    cli()
