import pytest

from ciphers.classical import register_all


@pytest.fixture(autouse=True, scope="session")
def _register_plugins():
    register_all()
