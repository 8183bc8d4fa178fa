import sys
import os
import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from zkp.r1cs.linear_algebra import Matrix, Vector
from zkp.r1cs.circuits import toy_r1cs


@pytest.fixture(scope="session")
def toy():
    """토이 회로 R1CS (witness 7칸, 제약 4개)."""
    return toy_r1cs()


@pytest.fixture
def a_vec():
    return Vector([1, 5, 5])


@pytest.fixture
def b_vec():
    return Vector([2, 3, 2])


@pytest.fixture
def a_mat():
    return Matrix([[1, 5, 5], [2, 3, 2]])


@pytest.fixture
def b_mat():
    return Matrix([[2, 3, 2], [1, 5, 5]])
