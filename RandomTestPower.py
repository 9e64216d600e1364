import sys
from PowerFormula.accuracy import runRandomTest
from PowerFormula.errors import ImplementationError


size = int(sys.argv[1]) if len(sys.argv) > 1 else 0
if size == 0:
    size = int(input('How many test-cases would you like to execute? '))


try:
    for n, accuracy, worstAccuracy, numOfFailures in runRandomTest(size):
        print('Test #{}: accuracy = {:.12f}, worst accuracy = {:.12f}, num of failures = {}'.format(n, accuracy, worstAccuracy, numOfFailures))
except ImplementationError as error:
    print(error)
