class FormulaError(Exception):
    '''Root of every error raised by the formula.'''


class DomainError(FormulaError, ValueError):
    '''The input is outside of the range which the formula supports.'''


class ZeroDenominatorError(DomainError):
    pass


class BaseBelowOneError(DomainError):
    '''The base ratio is smaller than one, so its logarithm would be negative.'''


class ZeroBaseError(BaseBelowOneError):
    '''The base numerator is zero; rejected for every exponent, including 0.'''


class BaseTooLargeError(DomainError):
    pass


class ExponentInputTooLargeError(DomainError):
    '''No precision level can hold the input of the exponentiation stage.'''


class PrecisionOutOfRangeError(DomainError):
    pass


class ArithmeticOverflowError(FormulaError, ArithmeticError):
    '''
        A 256-bit operation overflowed.
        The precision tables exist to make this unreachable from 'power',
        so hitting it from there indicates a broken table.
    '''


class ImplementationError(FormulaError):
    '''A fixed-point result came out larger than the exact result.'''
