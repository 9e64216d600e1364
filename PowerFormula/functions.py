from math import factorial
from PowerFormula.uint256 import MAX_UINT256
from PowerFormula.uint256 import safeAdd
from PowerFormula.uint256 import safeSub
from PowerFormula.uint256 import safeMul
from PowerFormula.errors import ArithmeticOverflowError


def getTaylorCoefs(numOfCoefs):
    maxFactorial = factorial(numOfCoefs-1)
    return [maxFactorial//factorial(i) for i in range(1,numOfCoefs)]


def getMaxExpArray(coefficients,numOfPrecisions):
    return [binarySearch(generalExp,{'coefficients':coefficients,'precision':precision}) for precision in range(numOfPrecisions)]


def getMaxValArray(coefficients,maxExpArray):
    return [generalExp(maxExpArray[precision],coefficients,precision) for precision in range(len(maxExpArray))]


'''
    Return the largest input in [0, 2 ^ 256) for which 'func' completes without overflowing.
    The overflow of 'func' must be monotonic in its input.
'''
def binarySearch(func,args):
    lo = 0
    hi = MAX_UINT256
    while lo+1 < hi:
        mid = (lo+hi)//2
        try:
            func(mid,**args)
            lo = mid
        except ArithmeticOverflowError:
            hi = mid
    try:
        func(hi,**args)
        return hi
    except ArithmeticOverflowError:
        func(lo,**args)
        return lo


'''
    Approximate "e ^ x" via maclaurin summation: "(x^0)/0! + (x^1)/1! + ... + (x^n)/n!".
    Return "e ^ (x / 2 ^ precision) * 2 ^ precision", that is, the result is upshifted for accuracy.
    The coefficients are "n! / 1!, n! / 2!, ..., n! / n!".
    Every intermediate is checked, so the largest input which completes is the one 'binarySearch' finds.
'''
def generalExp(x,coefficients,precision):
    xi = x
    res = 0
    for coefficient in coefficients[1:]:
        xi = safeMul(xi,x)>>precision
        res = safeAdd(res,safeMul(xi,coefficient))
    return safeAdd(safeAdd(res//coefficients[0],x),1<<precision)


'''
    Compute "ln(x / fixed1) * fixed1" for "fixed1 <= x < hiTerms[0].exp".
    Divide x by every "hiTerms[n].exp" (e ^ 2 ^ -n) which fits, then sum the series of "y = x - 1" with "loTerms".
'''
def optimalLog(x,hiTerms,loTerms,fixed1):
    res = 0
    for term in hiTerms[+1:]:
        if x >= term.exp:
            res = safeAdd(res,term.val)
            x = safeMul(x,fixed1)//term.exp
    z = y = safeSub(x,fixed1)
    w = safeMul(y,y)//fixed1
    for term in loTerms[:-1]:
        res = safeAdd(res,safeMul(z,safeSub(term.num,y))//term.den)
        z = safeMul(z,w)//fixed1
    res = safeAdd(res,safeMul(z,safeSub(loTerms[-1].num,y))//loTerms[-1].den)
    return res


'''
    Compute "e ^ (x / fixed1) * fixed1" for "0 <= x < hiTerms[-1].bit".
    Sum the taylor series of the bits below "hiTerms[0].bit" with "loTerms", then multiply by "hiTerms[n].num / hiTerms[n].den" for every higher bit set.
'''
def optimalExp(x,hiTerms,loTerms,fixed1):
    res = 0
    z = y = x % hiTerms[0].bit
    for term in loTerms[+1:]:
        z = safeMul(z,y)//fixed1
        res = safeAdd(res,safeMul(z,term.val))
    res = safeAdd(safeAdd(res//loTerms[0].val,y),fixed1)
    for term in hiTerms[:-1]:
        if x & term.bit:
            res = safeMul(res,term.num)//term.den
    return res
