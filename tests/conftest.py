import pytest

from ciphersuite.classical import register_all


@pytest.fixture(autouse=True, scope="session")
def _plugins():
    register_all()
