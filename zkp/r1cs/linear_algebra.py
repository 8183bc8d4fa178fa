"""
R1CS 선형대수: 고정 길이 벡터(Vector)와 행렬(Matrix)
======================================================

R1CS 제약 검사에 필요한 FR 위의 벡터/행렬 연산을 제공한다.

**세 가지 곱을 구분해야 한다**:
  - 내적 (dot):             a·b = Σ aᵢ·bᵢ          → 스칼라 하나
  - 아다마르 곱 (hadamard):  (a∘b)ᵢ = aᵢ·bᵢ        → 같은 shape의 벡터/행렬
  - 행렬-벡터 곱:            (A·v)ᵢ = rowᵢ(A)·v    → 행 개수 길이의 벡터

**차원(shape)**:
  Vector<N>은 정확히 N개의 원소를 갖는다.
  Matrix<N, M>은 길이 N인 행 벡터 M개로 이루어진다.
    - N: 열 개수 (R1CS에서 witness 슬롯 수)
    - M: 행 개수 (R1CS에서 제약 개수)
  차원은 생성 시점에 검사하고, 두 값을 결합하는 모든 연산의 경계에서
  다시 검사한다. 불일치는 잘라내거나 채우지 않고 DimensionMismatchError로 끝낸다.

**불변성**:
  원소는 tuple로 보관하며 setter가 없다. 모든 연산은 새 값을 만든다.

사용 예시:
    >>> a = Vector([1, 5, 5])
    >>> b = Vector([2, 3, 2])
    >>> a.dot(b)                  # FR(27)
    >>> A = Matrix([[1, 5, 5], [2, 3, 2]])
    >>> A.vector_product(b)       # Vector([27, 17])
"""

from zkp.r1cs.errors import DimensionMismatchError
from zkp.r1cs.field import ZERO, to_fr, random_fr


def _check_index(index, bound, axis):
    # 음수 인덱스도 범위 초과로 처리한다 (Python식 wrap-around 없음)
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"{axis} 인덱스는 정수여야 합니다: {index!r}")
    if not 0 <= index < bound:
        raise DimensionMismatchError(
            f"{axis} 인덱스 범위 초과: {index} (크기 {bound})"
        )


# ─────────────────────────────────────────────────────────────────────
# Vector
# ─────────────────────────────────────────────────────────────────────

class Vector:
    """FR 원소 N개로 이루어진 고정 길이 벡터.

    Args:
        elements: FR 또는 정수의 시퀀스 (정수는 FR로 변환)
        size: 기대 길이 N. 주어지면 len(elements)와 같아야 한다.

    Raises:
        DimensionMismatchError: size가 주어졌는데 길이가 다를 때

    예시:
        >>> Vector([1, 2, 3], size=3)
        Vector([1, 2, 3])
        >>> Vector([1, 2], size=3)   # DimensionMismatchError
    """

    def __init__(self, elements, size=None):
        elements = tuple(to_fr(e) for e in elements)
        if size is not None and len(elements) != size:
            raise DimensionMismatchError(
                f"Vector 길이 불일치: 기대 {size}, 실제 {len(elements)}"
            )
        self._elements = elements

    @classmethod
    def zero(cls, size):
        """모든 원소가 0인 길이 size 벡터."""
        return cls([ZERO] * size)

    @classmethod
    def random(cls, size):
        """각 원소를 필드에서 균등 샘플링한 길이 size 벡터."""
        return cls([random_fr() for _ in range(size)])

    @property
    def size(self):
        """벡터 길이 N."""
        return len(self._elements)

    def get(self, i):
        """i번째 원소를 반환한다. 0 <= i < N 이 아니면 DimensionMismatchError."""
        _check_index(i, self.size, "Vector")
        return self._elements[i]

    def _check_same_size(self, other, op):
        if not isinstance(other, Vector):
            raise TypeError(f"{op}: Vector가 필요합니다: {type(other).__name__}")
        if self.size != other.size:
            raise DimensionMismatchError(
                f"{op}: 벡터 길이 불일치 ({self.size} != {other.size})"
            )

    def dot(self, other):
        """내적: Σ self[i]·other[i] (덧셈 항등원에서 누적 시작).

        Returns:
            FR: 스칼라
        """
        self._check_same_size(other, "dot")
        result = ZERO
        for a, b in zip(self._elements, other._elements):
            result = result + a * b
        return result

    def hadamard_product(self, other):
        """아다마르 곱: c[i] = self[i]·other[i].

        내적과 달리 결과는 같은 길이의 벡터다.
        """
        self._check_same_size(other, "hadamard_product")
        return Vector(
            [a * b for a, b in zip(self._elements, other._elements)]
        )

    def to_ints(self):
        return [int(e) for e in self._elements]

    def __getitem__(self, i):
        return self.get(i)

    def __len__(self):
        return self.size

    def __iter__(self):
        return iter(self._elements)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.size == other.size and all(
            a == b for a, b in zip(self._elements, other._elements)
        )

    def __repr__(self):
        return f"Vector({self.to_ints()})"


# ─────────────────────────────────────────────────────────────────────
# Matrix
# ─────────────────────────────────────────────────────────────────────

class Matrix:
    """길이 N인 행 벡터 M개로 이루어진 행렬 (Matrix<N, M>).

    (i, j) 원소는 i번째 행의 j번째 원소다 (0 <= i < M, 0 <= j < N).
    R1CS 안에서는 "제약 M개 × witness 슬롯 N개"로 해석된다.

    Args:
        rows: Vector 또는 시퀀스의 리스트 (각 행)
        num_cols: 기대 열 개수 N (행 길이)
        num_rows: 기대 행 개수 M

    Raises:
        DimensionMismatchError: 행 개수/행 길이가 기대값과 다르거나,
            행 길이가 서로 다를 때 (ragged)

    예시:
        >>> A = Matrix([[1, 5, 5], [2, 3, 2]])
        >>> A.shape          # (3, 2) → N=3 열, M=2 행
        >>> A.column(0)      # Vector([1, 2])
    """

    def __init__(self, rows, num_cols=None, num_rows=None):
        rows = tuple(r if isinstance(r, Vector) else Vector(r) for r in rows)

        if num_rows is not None and len(rows) != num_rows:
            raise DimensionMismatchError(
                f"Matrix 행 개수 불일치: 기대 {num_rows}, 실제 {len(rows)}"
            )
        if num_cols is None:
            if not rows:
                raise DimensionMismatchError("빈 Matrix는 num_cols를 명시해야 합니다")
            num_cols = rows[0].size
        for i, r in enumerate(rows):
            if r.size != num_cols:
                raise DimensionMismatchError(
                    f"Matrix {i}번째 행 길이 불일치: 기대 {num_cols}, 실제 {r.size}"
                )

        self._rows = rows
        self._num_cols = num_cols

    @classmethod
    def zero(cls, num_cols, num_rows):
        """모든 원소가 0인 M×N 행렬."""
        return cls(
            [Vector.zero(num_cols) for _ in range(num_rows)],
            num_cols=num_cols,
            num_rows=num_rows,
        )

    @property
    def num_rows(self):
        """행 개수 M."""
        return len(self._rows)

    @property
    def num_cols(self):
        """열 개수 N (= 각 행의 길이)."""
        return self._num_cols

    @property
    def shape(self):
        """(N, M) — Matrix<N, M>의 타입 파라미터 순서."""
        return (self._num_cols, len(self._rows))

    @property
    def rows(self):
        return self._rows

    def row(self, i):
        """i번째 행 (Vector<N>)."""
        _check_index(i, self.num_rows, "Matrix 행")
        return self._rows[i]

    def column(self, j):
        """j번째 열 (Vector<M>): 각 행의 j번째 원소를 행 순서대로 모은다."""
        _check_index(j, self.num_cols, "Matrix 열")
        return Vector([r.get(j) for r in self._rows])

    def get(self, i, j):
        """(i, j) 원소."""
        return self.row(i).get(j)

    def _check_same_shape(self, other, op):
        if not isinstance(other, Matrix):
            raise TypeError(f"{op}: Matrix가 필요합니다: {type(other).__name__}")
        if self.shape != other.shape:
            raise DimensionMismatchError(
                f"{op}: 행렬 shape 불일치 ({self.shape} != {other.shape})"
            )

    def hadamard_product(self, other):
        """아다마르 곱: c_ij = a_ij · b_ij (행 단위로 Vector.hadamard_product)."""
        self._check_same_shape(other, "hadamard_product")
        return Matrix(
            [a.hadamard_product(b) for a, b in zip(self._rows, other._rows)],
            num_cols=self._num_cols,
            num_rows=self.num_rows,
        )

    def vector_product(self, v):
        """행렬-벡터 곱 A·v.

        c_i = Σ_j a_ij · v_j = row(i)·v  (행마다 내적 한 번)

        R1CS에서 제약 행렬(M×N)을 witness(N)에 적용해
        제약마다 값 하나씩, 길이 M의 벡터를 얻는 연산이다.

        Args:
            v: 길이 N의 Vector

        Returns:
            Vector: 길이 M
        """
        if not isinstance(v, Vector):
            raise TypeError(f"vector_product: Vector가 필요합니다: {type(v).__name__}")
        if v.size != self._num_cols:
            raise DimensionMismatchError(
                f"vector_product: 벡터 길이 {v.size} != 행렬 열 개수 {self._num_cols}"
            )
        return Vector([r.dot(v) for r in self._rows])

    def to_ints(self):
        return [r.to_ints() for r in self._rows]

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and all(
            a == b for a, b in zip(self._rows, other._rows)
        )

    def __repr__(self):
        return f"Matrix({self.to_ints()})"
