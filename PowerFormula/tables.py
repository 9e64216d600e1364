'''
    Constant tables of the formula.

    Everything here is generated when the module is first imported, from the settings in 'constants'.
    The tables are exposed as tuples and never change afterwards.
'''
import logging
from decimal import Decimal
from decimal import localcontext
from decimal import ROUND_FLOOR
from decimal import ROUND_CEILING
from math import factorial
from collections import namedtuple
from PowerFormula.constants import FIXED_1
from PowerFormula.constants import MAX_NUM
from PowerFormula.constants import MIN_PRECISION
from PowerFormula.constants import MAX_PRECISION
from PowerFormula.constants import NUM_OF_TAYLOR_COEFS
from PowerFormula.constants import LOG_MAX_HI_TERM_VAL
from PowerFormula.constants import LOG_NUM_OF_HI_TERMS
from PowerFormula.constants import EXP_MAX_HI_TERM_VAL
from PowerFormula.constants import EXP_NUM_OF_HI_TERMS
from PowerFormula.uint256 import MAX_UINT256
from PowerFormula.uint256 import safeSub
from PowerFormula.uint256 import safeShl
from PowerFormula.functions import getTaylorCoefs
from PowerFormula.functions import getMaxExpArray
from PowerFormula.functions import getMaxValArray
from PowerFormula.functions import optimalLog
from PowerFormula.functions import optimalExp


logger = logging.getLogger(__name__)


DECIMAL_PRECISION = 100


LogHiTerm = namedtuple('LogHiTerm','val,exp')
LogLoTerm = namedtuple('LogLoTerm','num,den')
ExpHiTerm = namedtuple('ExpHiTerm','bit,num,den')
ExpLoTerm = namedtuple('ExpLoTerm','val,ind')


def floor(d):
    return int(d.to_integral_exact(rounding=ROUND_FLOOR))


def ceiling(d):
    return int(d.to_integral_exact(rounding=ROUND_CEILING))


'''
    LN2_NUMERATOR / LN2_DENOMINATOR is the largest fraction not above ln(2),
    such that the binary logarithm of any input smaller than MAX_NUM can be multiplied by LN2_NUMERATOR without overflow.
'''
def getLn2ScalingFactors():
    with localcontext() as context:
        context.prec = DECIMAL_PRECISION
        ln2 = Decimal(2).ln()
        maxLog2 = floor(Decimal(MAX_NUM-1).ln()/ln2*FIXED_1)
        numerator = MAX_UINT256//maxLog2
        denominator = ceiling(numerator/ln2)
    return numerator,denominator


def getOptimalLogTerms():
    with localcontext() as context:
        context.prec = DECIMAL_PRECISION
        hiTerms = []
        for n in range(LOG_NUM_OF_HI_TERMS+1):
            cur = Decimal(LOG_MAX_HI_TERM_VAL)/2**n
            val = int(FIXED_1*cur)
            exp = int(FIXED_1*cur.exp())
            hiTerms.append(LogHiTerm(val,exp))

    maxVal = hiTerms[0].exp-1
    loTerms = [LogLoTerm(FIXED_1*2,FIXED_1*2)]
    res = optimalLog(maxVal,hiTerms,loTerms,FIXED_1)
    while True:
        n = len(loTerms)
        val = FIXED_1*(2*n+2)
        loTermsNext = loTerms+[LogLoTerm(val//(2*n+1),val)]
        resNext = optimalLog(maxVal,hiTerms,loTermsNext,FIXED_1)
        if res < resNext:
            res = resNext
            loTerms = loTermsNext
        else:
            break

    return tuple(hiTerms),tuple(loTerms)


def getOptimalExpTerms():
    with localcontext() as context:
        context.prec = DECIMAL_PRECISION
        hiTerms = []
        top = int((Decimal(2)**(EXP_MAX_HI_TERM_VAL-EXP_NUM_OF_HI_TERMS)).exp()*FIXED_1)-1
        for n in range(EXP_NUM_OF_HI_TERMS+1):
            cur = (Decimal(2)**(n+EXP_MAX_HI_TERM_VAL-EXP_NUM_OF_HI_TERMS)).exp()
            den = int(MAX_UINT256/(cur*top))
            num = int(den*cur)
            top = top*num//den
            bit = (FIXED_1<<(n+EXP_MAX_HI_TERM_VAL))>>EXP_NUM_OF_HI_TERMS
            hiTerms.append(ExpHiTerm(bit,num,den))

    maxVal = hiTerms[-1].bit-1
    loTerms = [ExpLoTerm(1,1)]
    res = optimalExp(maxVal,hiTerms,loTerms,FIXED_1)
    while True:
        n = len(loTerms)+1
        val = factorial(n)
        loTermsNext = [ExpLoTerm(val//factorial(i+1),i+1) for i in range(n)]
        resNext = optimalExp(maxVal,hiTerms,loTermsNext,FIXED_1)
        if res < resNext:
            res = resNext
            loTerms = loTermsNext
        else:
            break

    return tuple(hiTerms),tuple(loTerms)


TAYLOR_COEFS = tuple(getTaylorCoefs(NUM_OF_TAYLOR_COEFS))


'''
    maxExpArray[precision] is the largest input of 'generalExp' at that precision (scaled by 2 ^ precision).
    maxValArray[precision] is the output of 'generalExp' for that input.
    maxExpArrayShl[precision] is the largest input at MAX_PRECISION scale which still maps to that precision.
    All three cover every precision between 0 and MAX_PRECISION, though only MIN_PRECISION and above are used.
'''
maxExpArray = tuple(getMaxExpArray(TAYLOR_COEFS,MAX_PRECISION+1))
maxValArray = tuple(getMaxValArray(TAYLOR_COEFS,maxExpArray))
maxExpArrayShl = tuple(safeSub(safeShl(maxExpArray[precision]+1,MAX_PRECISION-precision),1) for precision in range(MAX_PRECISION+1))


LN2_NUMERATOR,LN2_DENOMINATOR = getLn2ScalingFactors()


OPT_LOG_HI_TERMS,OPT_LOG_LO_TERMS = getOptimalLogTerms()
OPT_LOG_MAX_VAL = OPT_LOG_HI_TERMS[0].exp


OPT_EXP_HI_TERMS,OPT_EXP_LO_TERMS = getOptimalExpTerms()
OPT_EXP_MAX_VAL = OPT_EXP_HI_TERMS[-1].bit


logger.debug('generated precision tables for precisions %d to %d, max exp at %d = 0x%x',
             MIN_PRECISION, MAX_PRECISION, MIN_PRECISION, maxExpArray[MIN_PRECISION])
