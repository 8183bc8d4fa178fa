"""
Rank-1 Constraint System (R1CS)
================================

계산을 이차 제약(quadratic constraint)들의 집합으로 표현한다.

**구조**:
  세 행렬 L (left), R (right), O (output). 모두 같은 shape Matrix<N, M>.
    - N (witness_size):     witness 슬롯 수
    - M (num_constraints):  제약 수

**만족 조건**:
  witness z에 대해

    (L·z) ∘ (R·z) == O·z

  즉 모든 제약 k에 대해

    (L_k · z) · (R_k · z) == O_k · z
    (선형결합)  ×  (선형결합)  =  (선형결합)

  ∘는 아다마르 곱(원소별 곱), L_k·z는 k번째 행과 witness의 내적이다.

**witness 규약**:
  z[0] == 1. 이 슬롯이 상수 항 역할을 하여 아핀(affine) 항을
  이차 시스템 안에서 표현할 수 있다.

**오류와 결과의 구분**:
  - 잘못된 입력 (z[0] != 1, 길이 불일치, 잘못된 제약 번호) → WitnessError
  - 올바른 입력이지만 제약 불만족                            → False
  check()는 두 번째 경우를 SatisfactionReport로 자세히 돌려준다.

사용 예시:
    >>> r1cs = R1CS(L, R, O)
    >>> r1cs.is_satisfied(witness)               # True / False
    >>> r1cs.is_constraint_satisfied(witness, 2)
    >>> report = r1cs.check(witness)
    >>> report.unsatisfied                       # (2, 3)
"""

from zkp.r1cs.errors import DimensionMismatchError, WitnessError
from zkp.r1cs.field import ONE
from zkp.r1cs.linear_algebra import Matrix, Vector


class SatisfactionReport:
    """올바른 형식의 witness에 대한 R1CS 평가 결과.

    속성:
        left_eval:   L·z (Vector<M>)
        right_eval:  R·z (Vector<M>)
        output_eval: O·z (Vector<M>)
        unsatisfied: 만족하지 않는 제약 번호의 tuple (오름차순)
    """

    def __init__(self, left_eval, right_eval, output_eval, unsatisfied):
        self.left_eval = left_eval
        self.right_eval = right_eval
        self.output_eval = output_eval
        self.unsatisfied = tuple(unsatisfied)

    @property
    def satisfied(self):
        return not self.unsatisfied

    def __bool__(self):
        return self.satisfied

    def __repr__(self):
        return (
            f"SatisfactionReport(satisfied={self.satisfied}, "
            f"unsatisfied={list(self.unsatisfied)})"
        )


class R1CS:
    """세 행렬 (left, right, output)로 이루어진 R1CS.

    Args:
        left_matrix, right_matrix, output_matrix: 같은 shape의 Matrix

    Raises:
        DimensionMismatchError: 세 행렬의 shape가 다를 때
    """

    def __init__(self, left_matrix, right_matrix, output_matrix):
        for name, m in (
            ("left", left_matrix),
            ("right", right_matrix),
            ("output", output_matrix),
        ):
            if not isinstance(m, Matrix):
                raise TypeError(f"{name} 행렬은 Matrix여야 합니다: {type(m).__name__}")
        if not left_matrix.shape == right_matrix.shape == output_matrix.shape:
            raise DimensionMismatchError(
                "R1CS 행렬 shape 불일치: "
                f"left={left_matrix.shape}, right={right_matrix.shape}, "
                f"output={output_matrix.shape}"
            )

        self.left = left_matrix
        self.right = right_matrix
        self.output = output_matrix

    @property
    def witness_size(self):
        """witness 슬롯 수 N."""
        return self.left.num_cols

    @property
    def num_constraints(self):
        """제약 수 M."""
        return self.left.num_rows

    def _validate_witness(self, witness):
        if not isinstance(witness, Vector):
            witness = Vector(witness)
        if witness.size != self.witness_size:
            raise WitnessError(
                f"witness 길이 불일치: 기대 {self.witness_size}, 실제 {witness.size}"
            )
        if witness.get(0) != ONE:
            raise WitnessError("witness의 첫 번째 원소는 1이어야 합니다!")
        return witness

    def _validate_constraint_id(self, constraint_id):
        if isinstance(constraint_id, bool) or not isinstance(constraint_id, int):
            raise TypeError(f"제약 번호는 정수여야 합니다: {constraint_id!r}")
        if not 0 <= constraint_id < self.num_constraints:
            raise WitnessError(
                f"잘못된 제약 번호: {constraint_id} (제약 수 {self.num_constraints})"
            )

    def is_satisfied(self, witness):
        """witness가 R1CS 전체를 만족하는지 검사한다.

        Lz = L·z, Rz = R·z, Oz = O·z를 계산하고
        Lz ∘ Rz == Oz 인지 비교한다.

        Raises:
            WitnessError: witness[0] != 1 또는 길이 불일치
        """
        witness = self._validate_witness(witness)
        lz = self.left.vector_product(witness)
        rz = self.right.vector_product(witness)
        oz = self.output.vector_product(witness)
        return lz.hadamard_product(rz) == oz

    def is_constraint_satisfied(self, witness, constraint_id):
        """constraint_id번째 제약 하나만 검사한다.

        Lz/Rz/Oz 전체를 만들지 않고 해당 행 세 개의 내적만 계산한다:
            (L_k·z) · (R_k·z) == O_k·z

        Raises:
            WitnessError: witness[0] != 1, 길이 불일치,
                또는 constraint_id가 [0, M) 밖일 때
        """
        witness = self._validate_witness(witness)
        self._validate_constraint_id(constraint_id)
        a = self.left.row(constraint_id).dot(witness)
        b = self.right.row(constraint_id).dot(witness)
        c = self.output.row(constraint_id).dot(witness)
        return a * b == c

    def check(self, witness):
        """R1CS 전체를 평가하고 제약별 결과를 담은 SatisfactionReport를 반환한다.

        잘못된 입력은 예외로, 불만족은 report.satisfied == False로 구분된다.
        """
        witness = self._validate_witness(witness)
        lz = self.left.vector_product(witness)
        rz = self.right.vector_product(witness)
        oz = self.output.vector_product(witness)
        lr = lz.hadamard_product(rz)
        unsatisfied = [k for k in range(self.num_constraints) if lr[k] != oz[k]]
        return SatisfactionReport(lz, rz, oz, unsatisfied)

    def unsatisfied_constraints(self, witness):
        """만족하지 않는 제약 번호 리스트."""
        return list(self.check(witness).unsatisfied)

    def __repr__(self):
        return (
            f"R1CS(witness_size={self.witness_size}, "
            f"num_constraints={self.num_constraints})"
        )
