import logging
import random
from PowerFormula import native
from PowerFormula.formula import power
from PowerFormula.constants import MAX_WEIGHT
from PowerFormula.errors import DomainError
from PowerFormula.errors import ImplementationError
from PowerFormula.inputs import UniformDistribution
from PowerFormula.inputs import ExponentialDistribution
from PowerFormula.inputs import PercentDistribution


MINIMUM_VALUE_BASE = 2
MAXIMUM_VALUE_BASE = 10 ** 26
GROWTH_FACTOR_BASE = 10

MINIMUM_VALUE_EXP = MAX_WEIGHT // 10
MAXIMUM_VALUE_EXP = MAX_WEIGHT
SAMPLES_COUNT_EXP = 10


logger = logging.getLogger(__name__)


'''
    Return the ratio between the fixed-point result and the exact result of the same power.
    The fixed-point result is never supposed to exceed the exact result.
'''
def powerTest(baseN, baseD, expN, expD):
    resultFixedPoint, precision = power(baseN, baseD, expN, expD)
    resultNative = native.power(baseN, baseD, expN, expD, precision)
    if resultFixedPoint > resultNative:
        error = ['Implementation Error:']
        error.append('baseN            = {}'.format(baseN           ))
        error.append('baseD            = {}'.format(baseD           ))
        error.append('expN             = {}'.format(expN            ))
        error.append('expD             = {}'.format(expD            ))
        error.append('resultFixedPoint = {}'.format(resultFixedPoint))
        error.append('resultNative     = {}'.format(resultNative    ))
        raise ImplementationError('\n'.join(error))
    return resultFixedPoint/resultNative


def randomPowerInputs(rng=random):
    baseN = rng.randrange(2, 10**26)
    baseD = rng.randrange(1, baseN)
    expN  = rng.randrange(1, MAX_WEIGHT)
    expD  = rng.randrange(expN, MAX_WEIGHT + 1)
    return baseN, baseD, expN, expD


'''
    Run 'powerTest' on every input and yield (index, accuracy, worstAccuracy, numOfFailures) after each one.
    Inputs rejected by the formula count as failures with an accuracy of 0.
    An ImplementationError stops the run.
'''
def runTests(testInputs):
    worstAccuracy = 1
    numOfFailures = 0
    for n, (baseN, baseD, expN, expD) in enumerate(testInputs):
        try:
            accuracy = powerTest(baseN, baseD, expN, expD)
            worstAccuracy = min(worstAccuracy, accuracy)
        except DomainError as error:
            logger.debug('rejected power(%d, %d, %d, %d): %s', baseN, baseD, expN, expD, error)
            accuracy = 0
            numOfFailures += 1
        yield n, accuracy, worstAccuracy, numOfFailures


def runRandomTest(size, rng=random):
    return runTests(randomPowerInputs(rng) for n in range(size))


'''
    Every base in 'rangeBaseN' (over 1) raised to every exponent in 'rangeExpN' (over MAX_WEIGHT).
'''
def gridPowerInputs(rangeBaseN, rangeExpN):
    return [(baseN, 1, expN, MAX_WEIGHT) for baseN in rangeBaseN for expN in rangeExpN]


def runGridTest(rangeBaseN=None, rangeExpN=None):
    if rangeBaseN is None:
        rangeBaseN = ExponentialDistribution(MINIMUM_VALUE_BASE, MAXIMUM_VALUE_BASE, GROWTH_FACTOR_BASE)
    if rangeExpN is None:
        rangeExpN = UniformDistribution(MINIMUM_VALUE_EXP, MAXIMUM_VALUE_EXP, SAMPLES_COUNT_EXP)
    return runTests(gridPowerInputs(rangeBaseN, rangeExpN))


'''
    Compute the power for the exponents "expN / expD" of every percent between 1 and 100 of 'MAX_WEIGHT'.
    Return a list of (expN, expD, result) tuples, where 'result' is either a PowerResult or the DomainError raised.
'''
def sweepExponent(baseN, baseD, sweepNumerator=True):
    results = []
    for value in PercentDistribution(MAX_WEIGHT):
        expN, expD = (value, MAX_WEIGHT) if sweepNumerator else (MAX_WEIGHT, value)
        try:
            result = power(baseN, baseD, expN, expD)
        except DomainError as error:
            result = error
        results.append((expN, expD, result))
    return results


'''
    Return the positions in 'results' (as returned by 'sweepExponent') where success turns into failure or vice versa.
'''
def crossoverPoints(results):
    succeeded = [not isinstance(result, DomainError) for expN, expD, result in results]
    return [n for n in range(1, len(succeeded)) if succeeded[n] != succeeded[n-1]]
