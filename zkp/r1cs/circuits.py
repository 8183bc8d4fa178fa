"""
예제 R1CS 회로와 witness 생성기
=================================

**토이 회로**: C(x1, x2, x3) = x1·x2·x3 + (1 - x1)·(x2 + x3),  x1 ∈ {0, 1}

  witness z = (1, r, x1, x2, x3, r1, r2)

  | 제약 | L            | R        | O        | 의미                           |
  |------|--------------|----------|----------|--------------------------------|
  | 0    | x1           | x1       | x1       | x1·x1 = x1  (x1은 0 또는 1)    |
  | 1    | x2           | x3       | r1       | x2·x3 = r1                     |
  | 2    | x1           | r1       | r2       | x1·r1 = r2                     |
  | 3    | 1 - x1       | x2 + x3  | r - r2   | (1-x1)(x2+x3) = r - r2         |

**세제곱근 회로**: y = x³

  witness z = (1, x, y, r1, r2)

  | 제약 | L  | R  | O       | 의미               |
  |------|----|----|---------|--------------------|
  | 0    | x  | x  | r1      | x·x = r1           |
  | 1    | x  | r1 | y + r2  | x·r1 = y + r2      |

  r2 = x·r1 - y 이므로 올바른 witness에서는 항상 r2 = 0 이다.

사용 예시:
    >>> r1cs = toy_r1cs()
    >>> r1cs.is_satisfied(toy_witness(1, 3, 4))   # True
    >>> cube_root_r1cs().is_satisfied(cube_root_witness())  # True
"""

from zkp.r1cs.field import ZERO, ONE, to_fr, random_fr
from zkp.r1cs.linear_algebra import Matrix, Vector
from zkp.r1cs.r1cs import R1CS


TOY_WITNESS_SIZE = 7
TOY_CONSTRAINT_NUM = 4

CUBE_ROOT_WITNESS_SIZE = 5
CUBE_ROOT_CONSTRAINT_NUM = 2


# ─────────────────────────────────────────────────────────────────────
# 토이 회로: x1·x2·x3 + (1 - x1)·(x2 + x3)
# ─────────────────────────────────────────────────────────────────────

def toy_r1cs():
    """토이 회로의 R1CS (witness 7칸, 제약 4개)."""
    zero, one = ZERO, ONE

    left_matrix = Matrix([
        [zero, zero, one, zero, zero, zero, zero],
        [zero, zero, zero, one, zero, zero, zero],
        [zero, zero, one, zero, zero, zero, zero],
        [one, zero, -one, zero, zero, zero, zero],
    ], num_cols=TOY_WITNESS_SIZE, num_rows=TOY_CONSTRAINT_NUM)
    right_matrix = Matrix([
        [zero, zero, one, zero, zero, zero, zero],
        [zero, zero, zero, zero, one, zero, zero],
        [zero, zero, zero, zero, zero, one, zero],
        [zero, zero, zero, one, one, zero, zero],
    ], num_cols=TOY_WITNESS_SIZE, num_rows=TOY_CONSTRAINT_NUM)
    output_matrix = Matrix([
        [zero, zero, one, zero, zero, zero, zero],
        [zero, zero, zero, zero, zero, one, zero],
        [zero, zero, zero, zero, zero, zero, one],
        [zero, one, zero, zero, zero, zero, -one],
    ], num_cols=TOY_WITNESS_SIZE, num_rows=TOY_CONSTRAINT_NUM)

    return R1CS(left_matrix, right_matrix, output_matrix)


def toy_witness(x1, x2, x3):
    """토이 회로의 witness (1, r, x1, x2, x3, r1, r2)를 계산한다.

    x1이 0/1이 아니면 제약 0을 만족하지 않는 witness가 나온다.
    """
    x1, x2, x3 = to_fr(x1), to_fr(x2), to_fr(x3)
    r1 = x2 * x3
    r2 = x1 * r1
    r = r2 + (ONE - x1) * (x2 + x3)
    return Vector([ONE, r, x1, x2, x3, r1, r2], size=TOY_WITNESS_SIZE)


# ─────────────────────────────────────────────────────────────────────
# 세제곱근 회로: y = x³
# ─────────────────────────────────────────────────────────────────────

def cube_root_r1cs():
    """y = x³ 관계의 R1CS (witness 5칸, 제약 2개)."""
    zero, one = ZERO, ONE

    left_matrix = Matrix([
        [zero, one, zero, zero, zero],
        [zero, one, zero, zero, zero],
    ], num_cols=CUBE_ROOT_WITNESS_SIZE, num_rows=CUBE_ROOT_CONSTRAINT_NUM)
    right_matrix = Matrix([
        [zero, one, zero, zero, zero],
        [zero, zero, zero, one, zero],
    ], num_cols=CUBE_ROOT_WITNESS_SIZE, num_rows=CUBE_ROOT_CONSTRAINT_NUM)
    output_matrix = Matrix([
        [zero, zero, zero, one, zero],
        [zero, zero, one, zero, one],
    ], num_cols=CUBE_ROOT_WITNESS_SIZE, num_rows=CUBE_ROOT_CONSTRAINT_NUM)

    return R1CS(left_matrix, right_matrix, output_matrix)


def cube_root_witness(x=None):
    """세제곱근 회로의 witness (1, x, y, r1, r2)를 생성한다.

    Args:
        x: 입력값. None이면 필드에서 균등 샘플링한다.
    """
    x = random_fr() if x is None else to_fr(x)
    y = x * x * x

    r1 = x * x
    r2 = r1 * x - y

    return Vector([ONE, x, y, r1, r2], size=CUBE_ROOT_WITNESS_SIZE)
