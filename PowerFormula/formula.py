from collections import namedtuple
from PowerFormula import functions
from PowerFormula.constants import ONE
from PowerFormula.constants import FIXED_1
from PowerFormula.constants import FIXED_2
from PowerFormula.constants import MAX_NUM
from PowerFormula.constants import MIN_PRECISION
from PowerFormula.constants import MAX_PRECISION
from PowerFormula.tables import TAYLOR_COEFS
from PowerFormula.tables import maxExpArray
from PowerFormula.tables import maxExpArrayShl
from PowerFormula.tables import LN2_NUMERATOR
from PowerFormula.tables import LN2_DENOMINATOR
from PowerFormula.tables import OPT_LOG_HI_TERMS
from PowerFormula.tables import OPT_LOG_LO_TERMS
from PowerFormula.tables import OPT_LOG_MAX_VAL
from PowerFormula.tables import OPT_EXP_HI_TERMS
from PowerFormula.tables import OPT_EXP_LO_TERMS
from PowerFormula.tables import OPT_EXP_MAX_VAL
from PowerFormula.uint256 import checkUint256
from PowerFormula.uint256 import safeMul
from PowerFormula.uint256 import safeDiv
from PowerFormula.uint256 import mulDiv
from PowerFormula.uint256 import floorLog2
from PowerFormula.errors import DomainError
from PowerFormula.errors import ZeroDenominatorError
from PowerFormula.errors import BaseBelowOneError
from PowerFormula.errors import ZeroBaseError
from PowerFormula.errors import BaseTooLargeError
from PowerFormula.errors import ExponentInputTooLargeError
from PowerFormula.errors import PrecisionOutOfRangeError


Ratio = namedtuple('Ratio','numerator,denominator')
PowerResult = namedtuple('PowerResult','value,precision')


'''
    General Description:
        Determine a value of precision.
        Calculate an integer approximation of (_baseN / _baseD) ^ (_expN / _expD) * 2 ^ precision.
        Return the result along with the precision used.

    Detailed Description:
        Instead of calculating "base ^ exp", we calculate "e ^ (log(base) * exp)".
        The value of "log(base)" is represented with an integer slightly smaller than "log(base) * 2 ^ precision".
        The larger "precision" is, the more accurately this value represents the real value.
        However, the larger "precision" is, the more bits are required in order to store this value.
        And the exponentiation function, which takes "x" and calculates "e ^ x", is limited to a maximum exponent (maximum value of "x").
        This maximum exponent depends on the "precision" used, and it is given by "maxExpArray[precision] >> (MAX_PRECISION - precision)".
        Hence we need to determine the highest precision which can be used for the given input, before calling the exponentiation function.
        This allows us to compute "base ^ exp" with maximum accuracy and without exceeding 256 bits in any of the intermediate computations.
        This functions assumes that "_expN < 2 ^ 256" and "_expD < 2 ^ 256".
'''
def power(_baseN, _baseD, _expN, _expD):
    checkRatio(Ratio(_expN, _expD))
    baseLog = scaledLog(_baseN, _baseD)

    # The product is kept at double width, anything above 256 bits is rejected by the precision search
    baseLogTimesExp = mulDiv(baseLog, _expN, _expD)
    if baseLogTimesExp < OPT_EXP_MAX_VAL:
        return PowerResult(optimalExp(baseLogTimesExp), MAX_PRECISION)

    precision = findPositionInMaxExpArray(baseLogTimesExp)
    return PowerResult(generalExp(baseLogTimesExp >> (MAX_PRECISION - precision), precision), precision)


def checkRatio(ratio):
    for value in ratio:
        checkUint256(value)
    if ratio.denominator == 0:
        raise ZeroDenominatorError('0x{:x} / 0'.format(ratio.numerator))
    return ratio


'''
    Validate a base ratio and return it at MAX_PRECISION scale, that is "floor(_baseN / _baseD * 2 ^ MAX_PRECISION)".
    The numerator must be a value between 1 and MAX_NUM - 1, and larger than or equal to the denominator.
'''
def baseRatio(_baseN, _baseD):
    checkRatio(Ratio(_baseN, _baseD))
    if _baseN == 0:
        raise ZeroBaseError('the base numerator is zero')
    if _baseN < _baseD:
        raise BaseBelowOneError('0x{:x} / 0x{:x} is smaller than one'.format(_baseN, _baseD))
    if _baseN >= MAX_NUM:
        raise BaseTooLargeError('0x{:x} is not smaller than 0x{:x}'.format(_baseN, MAX_NUM))
    return safeDiv(safeMul(_baseN, FIXED_1), _baseD)


'''
    Return floor(ln(_baseN / _baseD) * 2 ^ MAX_PRECISION).
'''
def scaledLog(_baseN, _baseD):
    base = baseRatio(_baseN, _baseD)
    if base < OPT_LOG_MAX_VAL:
        return optimalLog(base)
    return generalLog(base)


'''
    Return floor(log2(_baseN / _baseD) * 2 ^ MAX_PRECISION).
'''
def scaledLog2(_baseN, _baseD):
    return binaryLog(baseRatio(_baseN, _baseD))


'''
    Compute log2(x / FIXED_1) * FIXED_1.
    This functions assumes that "x >= FIXED_1", because the output would be negative otherwise.
'''
def binaryLog(x):
    if x < FIXED_1:
        raise BaseBelowOneError('0x{:x} is smaller than one'.format(x))
    checkUint256(x)

    res = 0

    # If x >= 2, then we compute the integer part of log2(x), which is larger than 0.
    if x >= FIXED_2:
        count = floorLog2(x // FIXED_1)
        x >>= count # now x < 2
        res = count * FIXED_1

    # If x > 1, then we compute the fraction part of log2(x), which is larger than 0.
    if x > FIXED_1:
        for i in range(MAX_PRECISION, 0, -1):
            x = (x * x) // FIXED_1 # now 1 < x < 4
            if x >= FIXED_2:
                x >>= 1 # now 1 < x < 2
                res += ONE << (i - 1)

    return res


'''
    Compute ln(x / FIXED_1) * FIXED_1.
    This functions assumes that "FIXED_1 <= x < MAX_NUM * FIXED_1".
'''
def generalLog(x):
    return safeMul(binaryLog(x), LN2_NUMERATOR) // LN2_DENOMINATOR


'''
    Compute ln(x / FIXED_1) * FIXED_1.
    Input range: FIXED_1 <= x <= OPT_LOG_MAX_VAL - 1
    Auto-generated from the term tables:
    - The first part subtracts 1 / 2 ^ n for n = 1 to 8, by dividing x by e ^ (1 / 2 ^ n)
    - The second part sums y - y^2 / 2 + y^3 / 3 - ... for y = x - 1
'''
def optimalLog(x):
    if x < FIXED_1:
        raise BaseBelowOneError('0x{:x} is smaller than one'.format(x))
    if x >= OPT_LOG_MAX_VAL:
        raise DomainError('0x{:x} is not smaller than 0x{:x}'.format(x, OPT_LOG_MAX_VAL))
    return functions.optimalLog(x, OPT_LOG_HI_TERMS, OPT_LOG_LO_TERMS, FIXED_1)


'''
    The global "maxExpArrayShl" is sorted in descending order, and therefore the following statements are equivalent:
    - This function finds the position of [the smallest value in "maxExpArrayShl" larger than or equal to "x"]
    - This function finds the highest position of [a value in "maxExpArrayShl" larger than or equal to "x"]
'''
def findPositionInMaxExpArray(_x):
    lo = MIN_PRECISION
    hi = MAX_PRECISION

    while lo + 1 < hi:
        mid = (lo + hi) // 2
        if maxExpArrayShl[mid] >= _x:
            lo = mid
        else:
            hi = mid

    if maxExpArrayShl[hi] >= _x:
        return hi
    if maxExpArrayShl[lo] >= _x:
        return lo

    raise ExponentInputTooLargeError('0x{:x} is larger than 0x{:x}'.format(_x, maxExpArrayShl[MIN_PRECISION]))


'''
    Compute e ^ (x / 2 ^ precision) * 2 ^ precision.
    Every intermediate value is checked, so an input above "maxExpArray[precision]" raises ArithmeticOverflowError.
'''
def generalExp(_x, _precision):
    return functions.generalExp(_x, TAYLOR_COEFS, _precision)


'''
    Same as 'generalExp', but the input is validated against the precision table first.
'''
def scaledExp(_x, _precision):
    if not MIN_PRECISION <= _precision <= MAX_PRECISION:
        raise PrecisionOutOfRangeError('precision {} is not between {} and {}'.format(_precision, MIN_PRECISION, MAX_PRECISION))
    if _x < 0:
        raise DomainError('the input is negative')
    if _x > maxExpArray[_precision]:
        raise ExponentInputTooLargeError('0x{:x} is larger than 0x{:x} at precision {}'.format(_x, maxExpArray[_precision], _precision))
    return generalExp(_x, _precision)


'''
    Compute e ^ (x / FIXED_1) * FIXED_1.
    Input range: 0 <= x <= OPT_EXP_MAX_VAL - 1
    Auto-generated from the term tables:
    - The first part computes e ^ (x % 2 ^ -3) via a taylor series
    - The second part multiplies the result by e ^ 2 ^ n for every bit n set in x, for n = -3 to 3
'''
def optimalExp(x):
    if not 0 <= x < OPT_EXP_MAX_VAL:
        raise DomainError('0x{:x} is not between 0 and 0x{:x}'.format(x, OPT_EXP_MAX_VAL - 1))
    return functions.optimalExp(x, OPT_EXP_HI_TERMS, OPT_EXP_LO_TERMS, FIXED_1)
