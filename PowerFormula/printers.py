'''
    Render the generated tables as source text.
    Every function returns a list of lines.
'''
from PowerFormula.constants import FIXED_1
from PowerFormula.constants import FIXED_2
from PowerFormula.constants import MAX_NUM
from PowerFormula.constants import MIN_PRECISION
from PowerFormula.constants import MAX_PRECISION
from PowerFormula.tables import maxExpArray
from PowerFormula.tables import maxValArray
from PowerFormula.tables import maxExpArrayShl
from PowerFormula.tables import LN2_NUMERATOR
from PowerFormula.tables import LN2_DENOMINATOR
from PowerFormula.tables import OPT_LOG_MAX_VAL
from PowerFormula.tables import OPT_EXP_MAX_VAL


def printIntScalingFactors():
    maxLen = len(hex(max([FIXED_1,FIXED_2,MAX_NUM])))
    return [
        'FIXED_1 = {0:#0{1}x}'.format(FIXED_1,maxLen),
        'FIXED_2 = {0:#0{1}x}'.format(FIXED_2,maxLen),
        'MAX_NUM = {0:#0{1}x}'.format(MAX_NUM,maxLen),
    ]


def printLn2ScalingFactors():
    return [
        'LN2_NUMERATOR   = 0x{:x}'.format(LN2_NUMERATOR  ),
        'LN2_DENOMINATOR = 0x{:x}'.format(LN2_DENOMINATOR),
    ]


def printOptimalMaxValues():
    return [
        'OPT_LOG_MAX_VAL = 0x{:x}'.format(OPT_LOG_MAX_VAL),
        'OPT_EXP_MAX_VAL = 0x{:x}'.format(OPT_EXP_MAX_VAL),
    ]


'''
    Print the table at MAX_PRECISION scale, that is 'maxExpArrayShl' rather than 'maxExpArray'.
    Precisions below MIN_PRECISION are never selected, so they are printed commented out.
'''
def printMaxExpArray():
    len1 = len(str(MAX_PRECISION))
    len2 = len(hex(maxExpArrayShl[0]))
    lines = ['maxExpArrayShl = [0] * {}'.format(len(maxExpArrayShl))]
    for precision in range(len(maxExpArrayShl)):
        prefix = '' if MIN_PRECISION <= precision <= MAX_PRECISION else '# '
        lines.append('{0:s}maxExpArrayShl[{1:{2}d}] = {3:#0{4}x}'.format(prefix,precision,len1,maxExpArrayShl[precision],len2))
    return lines


def printPythonFile():
    lines = []
    lines += ['MIN_PRECISION = {}'.format(MIN_PRECISION),'MAX_PRECISION = {}'.format(MAX_PRECISION),'']
    lines += printIntScalingFactors()+['']
    lines += printLn2ScalingFactors()+['']
    lines += printOptimalMaxValues()+['']
    lines += printMaxExpArray()
    return lines


def printJavascriptFile():
    lines = []
    lines.append('module.exports.MIN_PRECISION = {};'.format(MIN_PRECISION))
    lines.append('module.exports.MAX_PRECISION = {};'.format(MAX_PRECISION))
    lines.append('module.exports.maxExpArray = [')
    for precision in range(len(maxExpArray)):
        lines.append('    /* {:3d} */    \'0x{:x}\','.format(precision,maxExpArray[precision]))
    lines.append('];')
    lines.append('module.exports.maxValArray = [')
    for precision in range(len(maxValArray)):
        lines.append('    /* {:3d} */    \'0x{:x}\','.format(precision,maxValArray[precision]))
    lines.append('];')
    return lines


def printMaxExpPerPrecision():
    maxMaxExpLen = len('0x{:x}'.format(maxExpArray[0]))
    formatString = '{:s}{:d}{:s}'.format('Precision = {:3d} | Max Exp = {:',maxMaxExpLen,'s} | Real Max Exp = {:12.9f} | Ratio = {:9.7f}')
    lines = ['Max Exp Per Precision:']
    for precision in range(MIN_PRECISION,MAX_PRECISION+1):
        maxExp = '0x{:x}'.format(maxExpArray[precision])
        realMaxExp = maxExpArray[precision]/2**precision
        ratio = maxExpArray[precision]/maxExpArray[precision-1]
        lines.append(formatString.format(precision,maxExp,realMaxExp,ratio))
    return lines
