from PowerFormula.accuracy import runGridTest
from PowerFormula.errors import ImplementationError


try:
    for n, accuracy, worstAccuracy, numOfFailures in runGridTest():
        print('Test #{}: accuracy = {:.12f}, worst accuracy = {:.12f}, num of failures = {}'.format(n, accuracy, worstAccuracy, numOfFailures))
except ImplementationError as error:
    print(error)
