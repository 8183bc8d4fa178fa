"""
R1CS 입력 오류 타입.

두 종류 모두 호출자의 계약 위반(malformed input)이며 복구 대상이 아니다.
witness가 제약을 만족하지 않는 것은 오류가 아니라 False 결과다.
"""


class R1CSError(ValueError):
    """R1CS 코어가 발생시키는 모든 입력 오류의 기반 클래스."""


class DimensionMismatchError(R1CSError):
    """벡터/행렬 길이 불일치, 피연산자 shape 불일치, 인덱스 범위 초과."""


class WitnessError(R1CSError):
    """witness 전제조건 위반: witness[0] != 1, 길이 불일치, 잘못된 제약 번호."""
