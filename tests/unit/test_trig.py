"""
Тесты для модуля Trig

Проверяет:
1. Перевод градусы ↔ радианы
2. Нормализацию углов (диапазон, идемпотентность)
3. sin/cos/tan: точные значения в особых точках, точность ряда
4. asin/acos/atan/atan2: особые значения, квадранты, область определения
"""

from decimal import Decimal, localcontext

import pytest

from decimath.core.domain import KERNEL_CONTEXT
from decimath.core.errors import (
    DomainError,
    InverseTrigDomainError,
    RangeError,
    UndefinedError,
)
from decimath.core.math.constants import (
    PI,
    PI_HALF,
    PI_QUARTER,
    PI_THREE_HALVES,
    SMALLEST_NON_ZERO,
    TWO_PI,
)
from decimath.core.math.numerical_safeguards import is_close, is_within_units
from decimath.core.math.trig import (
    acos,
    asin,
    atan,
    atan2,
    cos,
    normalize_angle,
    normalize_angle_deg,
    sin,
    tan,
    to_deg,
    to_rad,
)

# Допуски в единицах последнего разряда ожидаемого значения
SIN_COS_UNITS = 10
ATAN_UNITS = 5

# Тождества проверяются с фиксированным абсолютным допуском
IDENTITY_TOL = Decimal("1E-26")


def assert_within(actual: Decimal, expected: Decimal, units: int) -> None:
    assert is_within_units(actual, expected, units), f"{actual} != {expected} (±{units} ulp)"


def assert_identity(actual: Decimal, expected: Decimal) -> None:
    assert is_close(actual, expected, abs_tol=IDENTITY_TOL), f"{actual} != {expected}"


# =============================================================================
# ПЕРЕВОД И НОРМАЛИЗАЦИЯ
# =============================================================================


class TestAngleConversion:
    """Тесты to_rad / to_deg"""

    def test_exact_degree_steps(self) -> None:
        """Кратные 15 градусам переводятся через константы"""
        assert to_rad(0) == 0
        assert to_rad(90) == PI_HALF
        assert to_rad(180) == PI
        assert to_rad(270) == PI_THREE_HALVES
        assert to_rad(360) == TWO_PI
        assert to_rad(45) == PI_QUARTER
        assert to_rad(-90) == PI_HALF.copy_negate()

    def test_arbitrary_degrees(self) -> None:
        assert_within(to_rad(1), Decimal("0.017453292519943295769236907685"), 5)
        assert_identity(to_rad(Decimal("57.295779513082320876798154814")), Decimal(1))

    def test_to_deg(self) -> None:
        assert_identity(to_deg(PI), Decimal(180))
        assert_identity(to_deg(PI_HALF), Decimal(90))
        assert_within(to_deg(1), Decimal("57.295779513082320876798154814"), 5)


class TestNormalizeAngle:
    """Тесты normalize_angle"""

    def test_known_values(self) -> None:
        assert normalize_angle(0) == 0
        assert normalize_angle(PI.copy_negate()) == PI
        assert normalize_angle(TWO_PI.copy_negate()) == 0
        assert normalize_angle(TWO_PI) == 0

    def test_multiples_of_pi(self) -> None:
        """Кратные π с точностью до последнего разряда констант"""
        # 5π
        assert normalize_angle(Decimal("15.707963267948966192313216916")) == Decimal(
            "3.1415926535897932384626433828"
        )
        # -1001π
        assert normalize_angle(Decimal("-31419.068128551522177864896476")) == Decimal(
            "3.1415926535897932384626437666"
        )
        # -4π: частное чуть меньше 2, остаток равен двум единицам последнего разряда
        assert normalize_angle(Decimal("-12.566370614359172953850573533")) == Decimal("2E-28")
        # 4π + π/2
        assert normalize_angle(Decimal("14.137166941154069573081895225")) == Decimal(
            "1.5707963267948966192313216918"
        )

    def test_large_angle(self) -> None:
        """Большие углы сводятся без потери младших разрядов"""
        assert normalize_angle(522277854577893) == Decimal("4.7016207739845413794891781334")
        assert normalize_angle(-522277854577893) == Decimal("1.5815645331950450974361086332")

    def test_range_and_idempotence(self) -> None:
        """Результат в [0, 2π), повторная нормализация ничего не меняет"""
        for angle in (
            Decimal("-100.5"),
            PI_HALF.copy_negate(),
            Decimal("0.1"),
            Decimal(7),
            Decimal("1E+20"),
            Decimal("-1E+27"),
            -SMALLEST_NON_ZERO,
        ):
            once = normalize_angle(angle)
            assert 0 <= once < TWO_PI, angle
            assert normalize_angle(once) == once, angle


class TestNormalizeAngleDeg:
    """Тесты normalize_angle_deg"""

    def test_known_values(self) -> None:
        assert normalize_angle_deg(0) == 0
        assert normalize_angle_deg(-180) == 180
        assert normalize_angle_deg(-10001 * 180) == 180
        assert normalize_angle_deg(-360) == 0
        assert normalize_angle_deg(450) == 90
        assert normalize_angle_deg(5 * 180) == 180
        assert normalize_angle_deg(4 * 180 + 90) == 90

    def test_large_angle(self) -> None:
        assert normalize_angle_deg(522277854577893) == 333
        assert normalize_angle_deg(-522277854577893) == 27

    def test_just_below_boundary(self) -> None:
        """-720 - 1e-26 → 360 - 1e-26, а не 360"""
        angle = Decimal("-720.00000000000000000000000001")
        assert normalize_angle_deg(angle) == Decimal("359.99999999999999999999999999")

    def test_tiny_negative_angle_wraps_to_zero(self) -> None:
        """-1e-28 + 360 округляется до 360 → результат 0, а не 360"""
        for angle in (-SMALLEST_NON_ZERO, Decimal("-5E-28"), Decimal("-360.0000000000000000000000001")):
            result = normalize_angle_deg(angle)
            assert 0 <= result < 360, (angle, result)

        assert normalize_angle_deg(-SMALLEST_NON_ZERO) == 0

    def test_idempotence(self) -> None:
        for angle in (Decimal("-0.5"), Decimal(359), Decimal("725.25"), Decimal(-1000000)):
            once = normalize_angle_deg(angle)
            assert 0 <= once < 360, angle
            assert normalize_angle_deg(once) == once, angle


# =============================================================================
# SIN / COS / TAN
# =============================================================================


class TestSin:
    """Тесты sin"""

    def test_exact_points(self) -> None:
        """В нулях и экстремумах результат точный"""
        assert sin(0) == 0
        assert sin(PI) == 0
        assert sin(TWO_PI) == 0
        assert sin(PI_HALF) == 1
        assert sin(PI_THREE_HALVES) == -1
        assert sin(PI_HALF.copy_negate()) == -1
        assert sin(PI.copy_negate()) == 0

    def test_known_values(self) -> None:
        assert_within(sin(12), Decimal("-0.5365729180004349716653742282424"), SIN_COS_UNITS)
        assert_within(sin(-12), Decimal("0.5365729180004349716653742282424"), SIN_COS_UNITS)
        assert_within(sin(Decimal("2.667")), Decimal("0.45697615904786257495867623434033"), SIN_COS_UNITS)

    def test_argument_near_full_turn(self) -> None:
        """Около 2π ряд считается от 2π - x, а не от самого x"""
        half = Decimal("0.5")
        # 2π - 0.5
        assert sin(Decimal("5.7831853071795864769252867666")) == sin(half).copy_negate()
        assert_within(sin(half), Decimal("0.47942553860420300027328793521557"), SIN_COS_UNITS)

    def test_odd_function(self) -> None:
        for x in (Decimal("0.3"), Decimal("1.1"), Decimal("2.9"), Decimal(5)):
            assert sin(-x) == sin(x).copy_negate()


class TestCos:
    """Тесты cos"""

    def test_exact_points(self) -> None:
        assert cos(0) == 1
        assert cos(TWO_PI) == 1
        assert cos(PI) == -1
        assert cos(PI_HALF) == 0
        assert cos(PI_THREE_HALVES) == 0
        assert cos(PI.copy_negate()) == -1

    def test_known_values(self) -> None:
        assert_within(cos(Decimal("0.5")), Decimal("0.87758256189037271611628158260383"), SIN_COS_UNITS)
        assert_within(cos(Decimal("0.625")), Decimal("0.81096311950521790218953480394108"), SIN_COS_UNITS)
        assert_within(cos(Decimal("1.5")), Decimal("0.07073720166770291008818985143427"), SIN_COS_UNITS)
        assert_within(cos(Decimal("-4538.5")), Decimal("-0.4523618664556990608284425320411137"), SIN_COS_UNITS)
        assert_within(cos(-37), Decimal("0.7654140519453433564910812927706"), 2 * SIN_COS_UNITS)

    def test_tiny_argument(self) -> None:
        assert cos(Decimal("0.0000000000000007777777777777")) == 1

    def test_even_function(self) -> None:
        for x in (Decimal("0.3"), Decimal("2.9"), Decimal(5)):
            assert cos(-x) == cos(x)

    def test_pythagorean_identity(self) -> None:
        """sin² + cos² ≈ 1"""
        for x in (Decimal("0.1"), Decimal(1), Decimal("2.5"), Decimal(-4), Decimal(12)):
            s = sin(x)
            c = cos(x)
            with localcontext(KERNEL_CONTEXT):
                total = s * s + c * c
            assert is_close(total, Decimal(1), abs_tol=Decimal("5E-27")), x


class TestTan:
    """Тесты tan"""

    def test_values(self) -> None:
        assert tan(0) == 0
        assert_identity(tan(PI_QUARTER), Decimal(1))
        assert_within(tan(Decimal("0.5")), Decimal("0.54630248984379051325517946578029"), SIN_COS_UNITS)

    def test_undefined_at_half_pi(self) -> None:
        """cos == 0 → UndefinedError"""
        with pytest.raises(UndefinedError):
            tan(PI_HALF)
        with pytest.raises(UndefinedError):
            tan(PI_THREE_HALVES)

    def test_undefined_is_zero_division(self) -> None:
        with pytest.raises(ZeroDivisionError):
            tan(PI_HALF)


# =============================================================================
# ОБРАТНЫЕ ФУНКЦИИ
# =============================================================================


class TestAsin:
    """Тесты asin"""

    def test_special_values(self) -> None:
        assert asin(-1) == PI_HALF.copy_negate()
        assert asin(0) == 0
        assert asin(1) == PI_HALF

    def test_known_values(self) -> None:
        assert_within(asin(Decimal("0.5")), Decimal("0.5235987755982988730771072305"), 1)
        assert_within(asin(Decimal("-0.00272843")), Decimal("-0.0027284333852336778146637600"), 1)
        assert_within(asin(Decimal("0.00063728")), Decimal("0.0006372800431359826841117316"), 2)
        assert_within(asin(Decimal("0.63728")), Decimal("0.6909635231193644059731635443"), 3)

    def test_near_one(self) -> None:
        """±(1 - 1e-28): ряд около ±1 не нужен"""
        assert_within(asin(1 - SMALLEST_NON_ZERO), Decimal("1.5707963267948824770956979607"), 11)
        assert_within(asin(-1 + SMALLEST_NON_ZERO), Decimal("-1.5707963267948824770956979607"), 11)

    def test_sin_of_asin(self) -> None:
        """sin(asin(x)) ≈ x"""
        for x in (Decimal("-0.9"), Decimal("-0.3"), Decimal("0.25"), Decimal("0.75")):
            assert_identity(sin(asin(x)), x)

    def test_out_of_range(self) -> None:
        """|z| > 1 → InverseTrigDomainError"""
        with pytest.raises(InverseTrigDomainError):
            asin(Decimal("1.0000000000000000000000000001"))
        with pytest.raises(InverseTrigDomainError):
            asin(-2)

    def test_error_is_domain_and_range(self) -> None:
        """Ошибка перехватывается и как DomainError, и как RangeError"""
        with pytest.raises(DomainError):
            asin(2)
        with pytest.raises(RangeError):
            asin(2)


class TestAcos:
    """Тесты acos"""

    def test_special_values(self) -> None:
        assert acos(-1) == PI
        assert acos(0) == PI_HALF
        assert acos(1) == 0

    def test_known_values(self) -> None:
        assert_within(acos(Decimal("0.5")), Decimal("1.0471975511965977461542144610932"), ATAN_UNITS)
        assert_within(acos(Decimal("-0.5")), Decimal("2.0943951023931954923084289221863"), ATAN_UNITS)

    def test_asin_plus_acos(self) -> None:
        """asin(z) + acos(z) ≈ π/2"""
        for z in (Decimal("-0.7"), Decimal("0.2"), Decimal("0.99")):
            with localcontext(KERNEL_CONTEXT):
                total = asin(z) + acos(z)
            assert_identity(total, PI_HALF)

    def test_out_of_range(self) -> None:
        with pytest.raises(InverseTrigDomainError):
            acos(Decimal("-1.5"))


class TestAtan:
    """Тесты atan"""

    def test_special_values(self) -> None:
        assert atan(-1) == PI_QUARTER.copy_negate()
        assert atan(0) == 0
        assert atan(1) == PI_QUARTER

    def test_known_values(self) -> None:
        assert_within(atan(Decimal("0.5")), Decimal("0.46364760900080611621425623146121"), ATAN_UNITS)
        assert_within(atan(Decimal("0.625")), Decimal("0.55859931534356243597150821640166"), ATAN_UNITS)
        assert_within(atan(Decimal("1.5")), Decimal("0.98279372324732906798571061101467"), ATAN_UNITS)
        assert_within(atan(15877), Decimal("1.5707333426040118384856405100905"), ATAN_UNITS)
        assert_within(atan(-37), Decimal("-1.5437758776076318304431463582812"), ATAN_UNITS)

    def test_tiny_argument(self) -> None:
        x = Decimal("0.0000000000000007777777777777")
        assert_within(atan(x), x, ATAN_UNITS)

    def test_huge_argument(self) -> None:
        """atan(x) → π/2 при x → ∞"""
        assert_within(atan(Decimal("1700000000000000000000000000")), Decimal("1.5707963267948966192313216910515"), ATAN_UNITS)
        assert_within(atan(Decimal("39614081257132168796771975168")), Decimal("1.5707963267948966192313216916145"), ATAN_UNITS)
        assert_within(atan(Decimal("79228162514264337593543950335")), Decimal("1.5707963267948966192313216916271"), ATAN_UNITS)


class TestAtan2:
    """Тесты atan2"""

    # π/2 + π/4 с полной точностью типа
    THREE_QUARTERS_PI = Decimal("2.3561944901923449288469825374")

    def test_axes(self) -> None:
        assert atan2(0, 0) == 0
        assert atan2(1, 0) == PI_HALF
        assert atan2(-1, 0) == PI_HALF.copy_negate()
        assert atan2(0, 1) == 0
        assert atan2(0, -1) == PI

    def test_quadrants(self) -> None:
        """Знаки x и y определяют квадрант"""
        assert_within(atan2(1, 1), PI_QUARTER, ATAN_UNITS)
        assert_within(atan2(1, -1), self.THREE_QUARTERS_PI, ATAN_UNITS)
        assert_within(atan2(-1, -1), self.THREE_QUARTERS_PI.copy_negate(), ATAN_UNITS)
        assert_within(atan2(-1, 1), PI_QUARTER.copy_negate(), ATAN_UNITS)

    def test_known_values(self) -> None:
        half = Decimal("0.5")

        assert_within(atan2(2, half), Decimal("1.3258176636680324650592392104285"), ATAN_UNITS)
        assert_within(atan2(2, -half), Decimal("1.815774989921760773403404172851"), ATAN_UNITS)
        assert_within(atan2(-2, -half), Decimal("-1.815774989921760773403404172851"), ATAN_UNITS)
        assert_within(atan2(-2, half), Decimal("-1.3258176636680324650592392104285"), ATAN_UNITS)

    def test_result_range(self) -> None:
        """-π < θ <= π"""
        for y, x in ((1, -1000), (-1, -1000), (Decimal("1E-20"), -1), (-5, 3)):
            theta = atan2(y, x)
            assert PI.copy_negate() < theta <= PI
