from PowerFormula.constants import MAX_NUM
from PowerFormula.accuracy import sweepExponent
from PowerFormula.accuracy import crossoverPoints
from PowerFormula.errors import DomainError


MAX_BASE_N = MAX_NUM - 1
MIN_BASE_D = 1


for baseN, baseD in [(MAX_BASE_N, MAX_BASE_N - 1), (MAX_BASE_N, MIN_BASE_D)]:
    for sweepNumerator in [True, False]:
        results = sweepExponent(baseN, baseD, sweepNumerator)
        print('power(0x{:x}, 0x{:x}, {}):'.format(baseN, baseD, 'expN / MAX_WEIGHT' if sweepNumerator else 'MAX_WEIGHT / expD'))
        for expN, expD, result in results:
            if isinstance(result, DomainError):
                print('    {:7d} / {:7d}: {}'.format(expN, expD, type(result).__name__))
            else:
                print('    {:7d} / {:7d}: precision = {:3d}, value = 0x{:x}'.format(expN, expD, result.precision, result.value))
        print('    crossover points = {}'.format(crossoverPoints(results)))
