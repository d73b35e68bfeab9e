"""
intseq_gp/interpreter.py - Stack machine that runs one genome on one input
"""
import math
from enum import Enum
from typing import Any, Iterable, List, Optional, Union

from .instructions import OPERATIONS, Number, Op


class Overflow(Enum):
    """Marker for a numeric-domain failure while running a genome"""

    OVERFLOW = 'overflow'

    def __repr__(self):
        return 'OVERFLOW'


OVERFLOW = Overflow.OVERFLOW


def execute(genome: Iterable[Any], x: Number) -> Union[List[Any], Overflow]:
    """Run genome left to right and return the final stack (top last).

    Any operator that finds too few operands, leaves its domain or produces a
    non-finite float turns the whole run into OVERFLOW; the remaining
    instructions are not executed. Tokens that are neither x nor an operator
    are pushed as literals.
    """
    stack: List[Any] = []
    for instruction in genome:
        if instruction is Op.X:
            stack.append(x)
            continue
        if not (isinstance(instruction, Op) and instruction in OPERATIONS):
            stack.append(instruction)
            continue

        arity, primitive = OPERATIONS[instruction]
        if len(stack) < arity:
            return OVERFLOW
        args = stack[len(stack) - arity:]
        del stack[len(stack) - arity:]

        try:
            result = primitive(*args)
        except (ArithmeticError, ValueError, TypeError):
            return OVERFLOW
        if isinstance(result, float) and not math.isfinite(result):
            return OVERFLOW
        stack.append(result)
    return stack


def run(genome: Iterable[Any], x: Number) -> Union[Number, Overflow, None]:
    """Top of the stack after running genome on x, OVERFLOW, or None if empty"""
    stack = execute(genome, x)
    if stack is OVERFLOW:
        return OVERFLOW
    return stack[-1] if stack else None


def describe(genome: Iterable[Any], x: Number) -> Optional[str]:
    """Human readable result of run(), used by the CLI"""
    result = run(genome, x)
    if result is OVERFLOW:
        return 'overflow'
    if result is None:
        return 'empty'
    return repr(result)
