from PowerFormula.constants import ONE
from PowerFormula.errors import DomainError
from PowerFormula.errors import ZeroDenominatorError
from PowerFormula.errors import ArithmeticOverflowError


MAX_UINT256 = (ONE << 256) - 1


def checkUint256(x):
    if not 0 <= x <= MAX_UINT256:
        raise ArithmeticOverflowError('0x{:x} is not a 256-bit unsigned value'.format(x))
    return x


def safeAdd(x, y):
    if x + y > MAX_UINT256:
        raise ArithmeticOverflowError('0x{:x} + 0x{:x} overflows'.format(x, y))
    return x + y


def safeSub(x, y):
    if x < y:
        raise ArithmeticOverflowError('0x{:x} - 0x{:x} underflows'.format(x, y))
    return x - y


def safeMul(x, y):
    if x * y > MAX_UINT256:
        raise ArithmeticOverflowError('0x{:x} * 0x{:x} overflows'.format(x, y))
    return x * y


def safeShl(x, y):
    if x << y > MAX_UINT256:
        raise ArithmeticOverflowError('0x{:x} << {:d} overflows'.format(x, y))
    return x << y


def safeDiv(x, y):
    if y == 0:
        raise ZeroDenominatorError('0x{:x} / 0'.format(x))
    return x // y


'''
    Return floor(x * y / z).
    The product is kept in a 512-bit intermediate, hence the result may exceed 256 bits.
    Narrowing the result (or rejecting it) is up to the caller.
'''
def mulDiv(x, y, z):
    for operand in (x, y, z):
        checkUint256(operand)
    if z == 0:
        raise ZeroDenominatorError('0x{:x} * 0x{:x} / 0'.format(x, y))
    return (x * y) // z


'''
    Compute the largest integer smaller than or equal to the binary logarithm of the input.
'''
def floorLog2(_n):
    if _n == 0:
        raise DomainError('floorLog2 of zero is undefined')
    checkUint256(_n)

    res = 0

    if _n < 256:
        # At most 8 iterations
        while _n > 1:
            _n >>= 1
            res += 1
    else:
        # Exactly 8 iterations
        for s in [ONE << (8 - 1 - k) for k in range(8)]:
            if _n >= (ONE << s):
                _n >>= s
                res |= s

    return res
