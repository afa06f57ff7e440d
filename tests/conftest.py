from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_text():
    """Read a file from tests/fixtures."""

    def _read(name: str) -> str:
        return (FIXTURES / name).read_text(encoding="utf-8")

    return _read


@pytest.fixture
def mixed_decklist() -> str:
    """Decklist mixing both entry dialects and inline tags."""
    return """
        1 Atraxa, Praetors' Voice
        1 Imperial Seal
        1 Jeweled Lotus (CMR) 319
        1 Lim-Dûl's Vault
        1 Llanowar Elves (M12) 182
        3 Brainstorm #Card Advantage #Draw
    """


@pytest.fixture
def sectioned_decklist() -> str:
    """Decklist with comment section headers in all three comment styles."""
    return """//!Commander
1 Atraxa, Praetors' Voice (2XM) 190

// Ramp
1 Sol Ring (C21) 263 #Artifact
1 Cultivate
4x Llanowar Elves (M19) 314

# Interaction
1 Fire // Ice (MH2) 290
1 Counterspell #Staple #Blue Card
"""
