"""
intseq_gp/instructions.py - Instruction set, operator table and safe primitives
"""
import math
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Tuple, Union

import numpy as np
from scipy.special import comb, perm


class Op(Enum):
    """Closed set of non-literal instructions. Values are the text tokens."""

    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    MOD = 'mod'
    EXPT = 'expt'
    MAX = 'max'
    MIN = 'min'
    LOG_E = 'log_e'
    LOG_10 = 'log_10'
    ABS = 'abs'
    GCD = 'gcd'
    LCM = 'lcm'
    SQRT = 'sqrt'
    CBRT = 'cbrt'
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    PERM = 'perm'
    COMB = 'comb'
    X = 'x'

    def __str__(self):
        return self.value


Instruction = Union[Op, int]
Number = Union[int, float]

CONSTANTS = (-1, 0, 1)

# Largest result of expt, in bits, computed exactly for integer operands
MAX_POWER_BITS = 1024

# perm/comb refuse counts beyond this (170! is the largest finite float factorial)
MAX_COUNT = 170

# Default pool for random genomes and UMAD additions. The other operators are
# executable but make the numbers too big to be useful as random material.
INGREDIENTS: Tuple[Instruction, ...] = (Op.ADD, Op.SUB, Op.MUL, Op.DIV, Op.X, -1, 0, 1)


def _integral(value: Number) -> int:
    """Return value as an int, or raise ValueError if it has a fractional part"""
    if isinstance(value, int):
        return value
    if float(value).is_integer():
        return int(value)
    raise ValueError(f"{value!r} is not integral")


def _count(value: Number) -> int:
    count = _integral(value)
    if count < 0 or count > MAX_COUNT:
        raise ValueError(f"invalid count {count}")
    return count


# Binary primitives receive (b, a): b was below a on the stack, a was the top.

def _div(b, a):
    return b / a


def _mod(b, a):
    return b % a


def _expt(b, a):
    if isinstance(b, int) and isinstance(a, int) and a >= 0:
        if abs(b) > 1 and (abs(b).bit_length() - 1) * a > MAX_POWER_BITS:
            raise OverflowError(f"{b} ** {a} is too large")
        return b ** a
    result = b ** a
    if isinstance(result, complex):
        raise ValueError(f"{b} ** {a} is not real")
    return result


def _gcd(b, a):
    return math.gcd(_integral(b), _integral(a))


def _lcm(b, a):
    return math.lcm(_integral(b), _integral(a))


def _perm(n, k):
    return int(perm(_count(n), _count(k), exact=True))


def _comb(n, k):
    return int(comb(_count(n), _count(k), exact=True))


def _log_e(a):
    return math.log(a)


def _log_10(a):
    return math.log10(a)


def _sqrt(a):
    return math.sqrt(a)


def _cbrt(a):
    return float(np.cbrt(float(a)))


# Op -> (arity, primitive). Op.X is handled by the interpreter itself.
OPERATIONS: Dict[Op, Tuple[int, Callable[..., Number]]] = {
    Op.ADD: (2, lambda b, a: b + a),
    Op.SUB: (2, lambda b, a: b - a),
    Op.MUL: (2, lambda b, a: b * a),
    Op.DIV: (2, _div),
    Op.MOD: (2, _mod),
    Op.EXPT: (2, _expt),
    Op.MAX: (2, max),
    Op.MIN: (2, min),
    Op.LOG_E: (1, _log_e),
    Op.LOG_10: (1, _log_10),
    Op.ABS: (1, abs),
    Op.GCD: (2, _gcd),
    Op.LCM: (2, _lcm),
    Op.SQRT: (1, _sqrt),
    Op.CBRT: (1, _cbrt),
    Op.SIN: (1, math.sin),
    Op.COS: (1, math.cos),
    Op.TAN: (1, math.tan),
    Op.PERM: (2, _perm),
    Op.COMB: (2, _comb),
}


def parse_instruction(token: Any) -> Instruction:
    """Convert a text token ('x', '+', '-1', ...) or an int into an instruction"""
    if isinstance(token, Op):
        return token
    if isinstance(token, int) and not isinstance(token, bool):
        return token
    text = str(token).strip()
    try:
        return Op(text)
    except ValueError:
        pass
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Unknown instruction: {token!r}")


def format_instruction(instruction: Any) -> str:
    return str(instruction)


def parse_genome(tokens: Union[str, Iterable[Any]]) -> Tuple[Instruction, ...]:
    """Parse a whitespace separated string or a sequence of tokens"""
    if isinstance(tokens, str):
        tokens = tokens.split()
    return tuple(parse_instruction(token) for token in tokens)


def format_genome(genome: Iterable[Any]) -> List[str]:
    return [format_instruction(instruction) for instruction in genome]
