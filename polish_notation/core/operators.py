"""core/operators.py"""
import numpy as np
import logging

from polish_notation.core.errors import DivisionByZero

logger = logging.getLogger(__name__)


class Operators:
    """Static methods for every built-in operator, on float64 operands"""

    @staticmethod
    def ensure_float(operand):
        """Coerce an operand to numpy.float64"""
        return np.float64(operand)

    @staticmethod
    def _check_divisor(operand2, name):
        # -0.0 == 0 as well
        if operand2 == 0:
            logger.debug(f"Zero right operand for {name}")
            raise DivisionByZero()

    # binary operators ========================================
    @staticmethod
    def add(operand1, operand2):
        """Addition"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators.ensure_float(operand1) + Operators.ensure_float(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """Subtraction"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators.ensure_float(operand1) - Operators.ensure_float(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """Multiplication, overflowing to +/-inf"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators.ensure_float(operand1) * Operators.ensure_float(operand2)

    @staticmethod
    def div(operand1, operand2):
        """Division; a zero divisor raises DivisionByZero"""
        Operators._check_divisor(operand2, 'div')
        with np.errstate(over='ignore', invalid='ignore'):
            return np.divide(Operators.ensure_float(operand1), Operators.ensure_float(operand2))

    @staticmethod
    def mod(operand1, operand2):
        """
        Remainder with the sign of the dividend (C fmod), so `% -5 2` is -1.
        A zero divisor raises DivisionByZero.
        """
        Operators._check_divisor(operand2, 'mod')
        with np.errstate(invalid='ignore'):
            return np.fmod(Operators.ensure_float(operand1), Operators.ensure_float(operand2))


# symbol -> callable
OPERATOR_FUNCTIONS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '%': Operators.mod,
}
