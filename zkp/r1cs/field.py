"""
R1CS 기반 모듈: 유한체(Finite Field)
======================================

R1CS의 벡터, 행렬, 제약 검사에서 사용하는 스칼라 타입을 정의한다.

**유한체 FR**:
  bn128 타원곡선의 스칼라 필드. py_ecc의 FQ를 그대로 상속하므로
  +, -, *, /, ** 및 == 연산은 모두 py_ecc가 모듈러 산술로 처리한다.
  선형대수 계층은 이 연산자만 사용하고 모듈러 연산을 직접 하지 않는다.

**항등원**:
  ZERO (덧셈 항등원), ONE (곱셈 항등원).
  ONE은 witness의 0번 슬롯(상수 항)에 들어가는 값이다.

사용 예시:
    >>> from zkp.r1cs.field import FR, ONE, CURVE_ORDER, random_fr
    >>> a = FR(3) * FR(7)   # FR(21)
    >>> -ONE == FR(CURVE_ORDER - 1)  # True
    >>> r = random_fr()     # 균등 분포 샘플
"""

import secrets

from py_ecc.fields import bn128_FQ as FQ
from py_ecc import bn128


# ─────────────────────────────────────────────────────────────────────
# 유한체(Finite Field) FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """bn128 스칼라 필드 위의 유한체 원소.

    속성:
        field_modulus: bn128 곡선 위수 (소수 p)
    """
    field_modulus = bn128.curve_order


# 곡선 위수 (필드 크기)
CURVE_ORDER = bn128.curve_order

ZERO = FR(0)
ONE = FR(1)


def to_fr(value):
    """정수 또는 FR 값을 FR 원소로 변환한다.

    정수는 CURVE_ORDER로 reduce 된다 (음수 포함: -1 → p-1).

    Raises:
        TypeError: int/FR 이외의 값 (bool, float 등)
    """
    if isinstance(value, FR):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return FR(value)
    raise TypeError(f"FR 원소로 변환할 수 없는 값입니다: {value!r}")


def random_fr():
    """필드 전체에서 균등하게 샘플링한 FR 원소를 반환한다."""
    return FR(secrets.randbelow(CURVE_ORDER))
