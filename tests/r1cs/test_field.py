"""
field 모듈 테스트: FR, 항등원, to_fr, random_fr
"""
import pytest
from zkp.r1cs.field import FR, CURVE_ORDER, ZERO, ONE, to_fr, random_fr


class TestFR:
    def test_identities(self):
        a = FR(12345)
        assert a + ZERO == a
        assert a * ONE == a
        assert a * ZERO == ZERO

    def test_modular_reduction(self):
        assert FR(CURVE_ORDER + 7) == FR(7)

    def test_negation(self):
        assert -ONE == FR(CURVE_ORDER - 1)
        assert ONE + (-ONE) == ZERO

    def test_field_modulus(self):
        assert FR.field_modulus == CURVE_ORDER


class TestToFr:
    def test_int(self):
        x = to_fr(5)
        assert isinstance(x, FR)
        assert x == FR(5)

    def test_negative_int(self):
        assert to_fr(-1) == FR(CURVE_ORDER - 1)

    def test_fr_passthrough(self):
        x = FR(9)
        assert to_fr(x) is x

    @pytest.mark.parametrize("bad", [1.5, "3", None, True])
    def test_rejects_non_integers(self, bad):
        with pytest.raises(TypeError):
            to_fr(bad)


class TestRandomFr:
    def test_type_and_range(self):
        for _ in range(10):
            r = random_fr()
            assert isinstance(r, FR)
            assert 0 <= int(r) < CURVE_ORDER

    def test_not_constant(self):
        samples = {int(random_fr()) for _ in range(8)}
        assert len(samples) > 1
