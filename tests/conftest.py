"""
Test bootstrap:
- Make src/ importable when the package is not installed
- Shared records and addresses for codec tests
"""
import sys
import pathlib

import pytest

SRC = pathlib.Path(__file__).resolve().parent.parent / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def owner_key() -> bytes:
    """Deterministic 32-byte key."""
    return bytes(range(1, 33))


@pytest.fixture
def mint_key() -> bytes:
    return bytes(range(200, 232))


@pytest.fixture
def honeypot(owner_key, mint_key):
    from roulette_client import Honeypot, encode_address

    return Honeypot(
        version=3,
        honeypot_bump_seed=254,
        vault_bump_seed=253,
        owner=encode_address(owner_key),
        mint=encode_address(mint_key),
        tick_size=1_000,
        max_amount=5_000_000,
        minimum_bank_size=2**63,
        owed_amount=2**64 - 1,
    )


@pytest.fixture
def place_guesses():
    """The two-guess PlaceGuesses instruction and its exact wire bytes."""
    from roulette_client import PlaceGuessesArgs, RouletteGuess

    args = PlaceGuessesArgs(guesses=[
        RouletteGuess(guess=17, amount=500),
        RouletteGuess(guess=0, amount=1_000_000),
    ])
    wire = bytes.fromhex(
        "05"
        "02000000"
        "11" "f401000000000000"
        "00" "40420f0000000000"
    )
    return args, wire


@pytest.fixture
def codec():
    from roulette_client import RecordCodec

    return RecordCodec()
