import unittest
from decimal import Decimal
from decimal import getcontext
from hypothesis import given, assume, example
import hypothesis.strategies as st
from PowerFormula import native
from PowerFormula import power
from PowerFormula import PowerResult
from PowerFormula.formula import baseRatio
from PowerFormula.constants import FIXED_1
from PowerFormula.constants import MAX_NUM
from PowerFormula.constants import MAX_WEIGHT
from PowerFormula.constants import MIN_PRECISION
from PowerFormula.constants import MAX_PRECISION
from PowerFormula.uint256 import MAX_UINT256
from PowerFormula.errors import ZeroDenominatorError
from PowerFormula.errors import BaseBelowOneError
from PowerFormula.errors import ZeroBaseError
from PowerFormula.errors import BaseTooLargeError
from PowerFormula.errors import ExponentInputTooLargeError
from PowerFormula.errors import ArithmeticOverflowError


getcontext().prec = 100


MAX_BASE_N = MAX_NUM - 1
MIN_BASE_D = 1
MAX_EXPONENT = MAX_WEIGHT


PERCENTS = range(1, 101)


# Slack for the rounding of the reference values
ROUNDING = Decimal(10) ** -20


weights = st.integers(min_value=1, max_value=MAX_WEIGHT)


class TestPowerSweeps(unittest.TestCase):
    def testNearUnityBaseExpNumerator(self):
        for percent in PERCENTS:
            result = power(MAX_BASE_N, MAX_BASE_N - 1, MAX_EXPONENT * percent // 100, MAX_EXPONENT)
            self.assertEqual(result, (FIXED_1, MAX_PRECISION))

    def testNearUnityBaseExpDenominator(self):
        for percent in PERCENTS:
            result = power(MAX_BASE_N, MAX_BASE_N - 1, MAX_EXPONENT, MAX_EXPONENT * percent // 100)
            self.assertEqual(result, (FIXED_1, MAX_PRECISION))

    def testMaxBaseExpNumerator(self):
        for percent in PERCENTS:
            args = (MAX_BASE_N, MIN_BASE_D, MAX_EXPONENT * percent // 100, MAX_EXPONENT)
            if percent < 64:
                value, precision = power(*args)
                self.assertGreaterEqual(precision, MIN_PRECISION)
                self.assertLessEqual(value, MAX_UINT256)
            else:
                self.assertRaises(ExponentInputTooLargeError, power, *args)

    def testMaxBaseExpDenominator(self):
        for percent in PERCENTS:
            args = (MAX_BASE_N, MIN_BASE_D, MAX_EXPONENT, MAX_EXPONENT * percent // 100)
            self.assertRaises(ExponentInputTooLargeError, power, *args)

    def testSingleCrossover(self):
        outcomes = []
        for expN in range(MAX_EXPONENT // 100, MAX_EXPONENT + 1, MAX_EXPONENT // 100):
            try:
                power(MAX_BASE_N, MIN_BASE_D, expN, MAX_EXPONENT)
                outcomes.append(True)
            except ExponentInputTooLargeError:
                outcomes.append(False)
        self.assertEqual(outcomes, sorted(outcomes, reverse=True))
        self.assertEqual(outcomes.count(True), 63)

    def testPrecisionDecreasesWithTheExponent(self):
        precisions = [power(MAX_BASE_N, MIN_BASE_D, MAX_EXPONENT * percent // 100, MAX_EXPONENT).precision for percent in range(1, 64)]
        self.assertEqual(precisions, sorted(precisions, reverse=True))
        self.assertEqual(precisions[-1], MIN_PRECISION)


class TestPowerScenarios(unittest.TestCase):
    def assertApproximately(self, result, expected):
        value, precision = result
        real = Decimal(value) / 2 ** precision
        self.assertLessEqual(abs(real - expected), Decimal(10) ** -30)

    def testResultType(self):
        result = power(2, 1, 1, 1)
        self.assertIsInstance(result, PowerResult)
        self.assertEqual(result.precision, MAX_PRECISION)

    def testSquare(self):
        self.assertApproximately(power(2, 1, 1, 1), 2)
        self.assertApproximately(power(2, 1, 2, 1), 4)

    def testSquareRoot(self):
        self.assertApproximately(power(4, 1, 1, 2), 2)
        self.assertApproximately(power(9, 4, 1, 2), Decimal('1.5'))

    def testZeroExponent(self):
        self.assertEqual(power(5, 3, 0, 1), (FIXED_1, MAX_PRECISION))

    @given(st.integers(min_value=1, max_value=MAX_BASE_N), st.integers(min_value=0, max_value=MAX_UINT256), st.integers(min_value=1, max_value=MAX_UINT256))
    @example(1, 1, 1)
    def testUnity(self, k, expN, expD):
        self.assertEqual(power(k, k, expN, expD), (FIXED_1, MAX_PRECISION))

    @given(weights, weights, weights, weights)
    @example(2, 1, 1, 1)
    @example(MAX_WEIGHT, 1, 1, 1)
    def testAccuracy(self, a, b, c, d):
        baseN, baseD = max(a, b), min(a, b)
        expN, expD = min(c, d), max(c, d)
        value, precision = power(baseN, baseD, expN, expD)
        self.assertEqual(precision, MAX_PRECISION)
        real = native.power(baseN, baseD, expN, expD, precision)
        ratio = value / real
        self.assertLessEqual(ratio, 1 + Decimal(10) ** -30)
        self.assertGreaterEqual(ratio, 1 - Decimal(10) ** -30)

    @given(st.integers(min_value=3, max_value=MAX_BASE_N), weights, weights)
    @example(MAX_BASE_N, 63, 100)
    def testNeverExceedsTheRealValue(self, baseN, c, d):
        expN, expD = min(c, d), max(c, d)
        try:
            value, precision = power(baseN, 1, expN, expD)
        except ExponentInputTooLargeError:
            assume(False)
        self.assertLessEqual(value, native.power(baseN, 1, expN, expD, precision) + ROUNDING)


class TestBaseRatio(unittest.TestCase):
    def testScaling(self):
        self.assertEqual(baseRatio(1, 1), FIXED_1)
        self.assertEqual(baseRatio(3, 2), FIXED_1 * 3 // 2)
        self.assertEqual(baseRatio(MAX_BASE_N, MIN_BASE_D), MAX_BASE_N * FIXED_1)
        self.assertEqual(baseRatio(MAX_BASE_N, MAX_BASE_N - 1), FIXED_1)

    def testZeroDenominator(self):
        self.assertRaises(ZeroDenominatorError, baseRatio, 1, 0)


class TestPowerErrors(unittest.TestCase):
    def testZeroDenominator(self):
        self.assertRaises(ZeroDenominatorError, power, 2, 0, 1, 1)
        self.assertRaises(ZeroDenominatorError, power, 2, 1, 1, 0)
        self.assertRaises(ZeroDenominatorError, power, 0, 0, 1, 0)

    def testZeroBase(self):
        self.assertRaises(ZeroBaseError, power, 0, 1, 1, 1)
        self.assertRaises(ZeroBaseError, power, 0, 1, 0, 1)

    def testBaseBelowOne(self):
        self.assertRaises(BaseBelowOneError, power, 1, 2, 1, 1)
        self.assertRaises(BaseBelowOneError, power, MAX_BASE_N - 1, MAX_BASE_N, 1, 1)

    def testBaseTooLarge(self):
        self.assertRaises(BaseTooLargeError, power, MAX_NUM, 1, 1, 1)

    def testOperandsAbove256Bits(self):
        self.assertRaises(ArithmeticOverflowError, power, 2, 1, MAX_UINT256 + 1, 1)
        self.assertRaises(ArithmeticOverflowError, power, 2, 1, 1, MAX_UINT256 + 1)

    def testHugeExponent(self):
        self.assertRaises(ExponentInputTooLargeError, power, 2, 1, MAX_UINT256, 1)


if __name__ == '__main__':
    unittest.main()
