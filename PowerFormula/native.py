from decimal import Decimal
from decimal import localcontext


DECIMAL_PRECISION = 100 # 78 digits for a maximum of 2^256-1, and the rest for after the decimal point


def power(baseN, baseD, expN, expD, precision):
    with localcontext() as context:
        context.prec = DECIMAL_PRECISION
        baseN, baseD, expN, expD = [Decimal(value) for value in (baseN, baseD, expN, expD)]
        return (baseN/baseD)**(expN/expD)*2**precision


def ln(x, precision):
    with localcontext() as context:
        context.prec = DECIMAL_PRECISION
        return (Decimal(x)/2**precision).ln()*2**precision


def log2(x, precision):
    with localcontext() as context:
        context.prec = DECIMAL_PRECISION
        return (Decimal(x)/2**precision).ln()/Decimal(2).ln()*2**precision


def exp(x, precision):
    with localcontext() as context:
        context.prec = DECIMAL_PRECISION
        return (Decimal(x)/2**precision).exp()*2**precision
