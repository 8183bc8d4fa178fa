"""
R1CS 데모: y = x³ 세제곱근 회로와 토이 회로
=============================================

실행:
    python -m zkp.r1cs.example

흐름:
    1. 세제곱근 R1CS 구성
    2. 랜덤 witness (1, x, y, r1, r2) 생성
    3. R1CS 만족 여부 확인
    4. 토이 회로에서 올바른/잘못된 witness의 제약별 결과 확인
"""

from zkp.r1cs.linear_algebra import Vector
from zkp.r1cs.circuits import (
    cube_root_r1cs,
    cube_root_witness,
    toy_r1cs,
    toy_witness,
)


def main():
    print("=" * 60)
    print("  R1CS Satisfiability Demo")
    print("  회로: y = x³")
    print("=" * 60)

    # ── 1. R1CS 구성 ──
    print("\n[1] R1CS 구성...")
    cube_root = cube_root_r1cs()
    print(f"    witness 크기: {cube_root.witness_size}")
    print(f"    제약 수: {cube_root.num_constraints}")

    # ── 2. witness 생성 ──
    print("\n[2] 랜덤 witness 생성...")
    witness = cube_root_witness()
    for name, value in zip(("1", "x", "y", "r1", "r2"), witness.to_ints()):
        print(f"      {name:>2} = {value}")

    # ── 3. 만족 여부 ──
    print("\n[3] R1CS 만족 여부 확인...")
    result = cube_root.is_satisfied(witness)
    print(f"    결과: {'만족 ✓' if result else '불만족 ✗'}")

    # ── 4. 토이 회로: 제약별 확인 ──
    print("\n[4] 토이 회로 x1·x2·x3 + (1-x1)(x2+x3)")
    toy = toy_r1cs()
    valid = toy_witness(1, 3, 4)
    # x1만 0으로 바꾸고 나머지는 x1 = 1 기준 값을 그대로 둔다
    invalid = Vector([1, 12, 0, 3, 4, 12, 12])
    for label, w in (("올바른 witness", valid), ("잘못된 witness", invalid)):
        report = toy.check(w)
        print(f"    {label}: {w.to_ints()}")
        for k in range(toy.num_constraints):
            ok = k not in report.unsatisfied
            print(f"      제약 {k}: {'✓' if ok else '✗'}")

    print("\n" + "=" * 60)
    if result:
        print("  데모 완료: R1CS가 witness로 만족됩니다!")
    else:
        print("  데모 완료: R1CS가 만족되지 않습니다. 행렬을 확인하세요.")
    print("=" * 60)

    return result


if __name__ == "__main__":
    main()
