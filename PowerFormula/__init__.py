'''
    Fixed-point power formula.

    Compute (baseN / baseD) ^ (expN / expD) with 256-bit unsigned integer arithmetic only.
    The result is returned along with the precision used, that is, the real value is "value / 2 ^ precision".
'''
from PowerFormula.constants import MIN_PRECISION
from PowerFormula.constants import MAX_PRECISION
from PowerFormula.constants import FIXED_1
from PowerFormula.constants import MAX_NUM
from PowerFormula.formula import Ratio
from PowerFormula.formula import PowerResult
from PowerFormula.formula import power
from PowerFormula.formula import scaledLog
from PowerFormula.formula import scaledLog2
from PowerFormula.formula import scaledExp
from PowerFormula.formula import findPositionInMaxExpArray
from PowerFormula.uint256 import floorLog2
from PowerFormula.errors import FormulaError
from PowerFormula.errors import DomainError
from PowerFormula.errors import ZeroDenominatorError
from PowerFormula.errors import BaseBelowOneError
from PowerFormula.errors import ZeroBaseError
from PowerFormula.errors import BaseTooLargeError
from PowerFormula.errors import ExponentInputTooLargeError
from PowerFormula.errors import PrecisionOutOfRangeError
from PowerFormula.errors import ArithmeticOverflowError
