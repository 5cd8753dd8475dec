import pytest


@pytest.fixture
def test_mnemonic():
    return (
        "abandon abandon abandon abandon abandon abandon "
        "abandon abandon abandon abandon abandon about"
    )


@pytest.fixture
def sui_mnemonic():
    return (
        "film crazy soon outside stand loop subway crumble thrive popular green nuclear "
        "struggle pistol arm wife phrase warfare march wheat nephew ask sunny firm"
    )
