"""
예제 회로와 데모 테스트: 토이 회로, y = x³ 세제곱근 회로, example.main
"""

import pytest

from zkp.r1cs.field import FR, ZERO
from zkp.r1cs.errors import WitnessError
from zkp.r1cs.linear_algebra import Vector
from zkp.r1cs.circuits import (
    toy_r1cs, toy_witness,
    cube_root_r1cs, cube_root_witness,
    CUBE_ROOT_WITNESS_SIZE, CUBE_ROOT_CONSTRAINT_NUM,
)
from zkp.r1cs import example


class TestToyCircuit:
    def test_witness_layout(self):
        assert toy_witness(1, 3, 4) == Vector([1, 12, 1, 3, 4, 12, 12])
        assert toy_witness(0, 3, 4) == Vector([1, 7, 0, 3, 4, 12, 0])

    @pytest.mark.parametrize("x1", [0, 1])
    @pytest.mark.parametrize("x2, x3", [(3, 4), (0, 0), (10, -2)])
    def test_generated_witness_satisfies(self, x1, x2, x3):
        assert toy_r1cs().is_satisfied(toy_witness(x1, x2, x3))

    def test_output_value(self):
        # C(1, x2, x3) = x2·x3,  C(0, x2, x3) = x2 + x3
        assert toy_witness(1, 5, 6)[1] == FR(30)
        assert toy_witness(0, 5, 6)[1] == FR(11)

    def test_non_boolean_selector_fails_first_constraint(self):
        r1cs = toy_r1cs()
        witness = toy_witness(2, 3, 4)
        assert not r1cs.is_constraint_satisfied(witness, 0)
        assert not r1cs.is_satisfied(witness)

    def test_tampered_output(self):
        witness = Vector([1, 13, 1, 3, 4, 12, 12])
        assert toy_r1cs().unsatisfied_constraints(witness) == [3]


class TestCubeRootCircuit:
    def test_dimensions(self):
        r1cs = cube_root_r1cs()
        assert r1cs.witness_size == CUBE_ROOT_WITNESS_SIZE
        assert r1cs.num_constraints == CUBE_ROOT_CONSTRAINT_NUM

    def test_fixed_witness(self):
        witness = cube_root_witness(3)
        assert witness == Vector([1, 3, 27, 9, 0])
        assert cube_root_r1cs().is_satisfied(witness)

    def test_random_witness(self):
        r1cs = cube_root_r1cs()
        for _ in range(5):
            witness = cube_root_witness()
            assert witness[4] == ZERO
            assert r1cs.is_satisfied(witness)

    def test_wrong_cube(self):
        # y = 26 ≠ 3³
        witness = Vector([1, 3, 26, 9, 0])
        r1cs = cube_root_r1cs()
        assert r1cs.is_constraint_satisfied(witness, 0)
        assert not r1cs.is_constraint_satisfied(witness, 1)

    def test_wrong_square(self):
        witness = Vector([1, 3, 27, 8, 0])
        assert cube_root_r1cs().unsatisfied_constraints(witness) == [0, 1]

    def test_constant_slot_required(self):
        witness = Vector([0, 3, 27, 9, 0])
        with pytest.raises(WitnessError):
            cube_root_r1cs().is_satisfied(witness)


class TestExample:
    def test_main(self, capsys):
        assert example.main() is True
        out = capsys.readouterr().out
        assert "R1CS Satisfiability Demo" in out
        assert "제약 2: ✗" in out
