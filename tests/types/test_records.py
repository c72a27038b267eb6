"""
Typed record model tests.

Validation at construction, camelCase aliases and the instruction union.
"""

import pytest
from pydantic import ValidationError

from roulette_client import (
    RNG,
    AccountVersion,
    Guess,
    Honeypot,
    InitializeHoneypotArgs,
    PlaceGuessesArgs,
    RouletteGuess,
    SampleArgs,
    TryCancelArgs,
    parse_instruction,
)


class TestValidation:
    """Test pydantic validation of field ranges."""

    def test_u64_bounds(self):
        SampleArgs(tolerance=2**64 - 1)
        with pytest.raises(ValidationError):
            SampleArgs(tolerance=2**64)
        with pytest.raises(ValidationError):
            SampleArgs(tolerance=-1)

    def test_u8_bounds(self):
        with pytest.raises(ValidationError):
            RouletteGuess(guess=256, amount=1)

    def test_discriminant_is_fixed(self):
        assert SampleArgs(tolerance=1).instruction == 1
        with pytest.raises(ValidationError):
            SampleArgs(instruction=2, tolerance=1)

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            RNG(version=2, sample=1, slot=1, value=3)

    def test_frozen(self):
        rng = RNG(version=2, sample=1, slot=1)
        with pytest.raises(ValidationError):
            rng.slot = 5

    def test_locked_guess_slot_count(self, owner_key):
        from roulette_client import LockedGuess, encode_address

        address = encode_address(owner_key)
        with pytest.raises(ValidationError):
            LockedGuess(version=4, bump_seed=1, owner=address, vault=address, slot=0,
                        active=False, active_size=0, guesses=[0] * 10)


class TestAliases:
    """Test camelCase dictionary exchange."""

    def test_to_dict(self):
        args = InitializeHoneypotArgs(tick_size=1, max_bet_size=2, minimum_bank_size=3)
        assert args.to_dict() == {
            "instruction": 2, "tickSize": 1, "maxBetSize": 2, "minimumBankSize": 3,
        }

    def test_from_camel_case(self, honeypot):
        assert Honeypot.model_validate(honeypot.to_dict()) == honeypot

    def test_nested_to_dict(self):
        args = PlaceGuessesArgs(guesses=[RouletteGuess(guess=1, amount=2)])
        assert args.to_dict() == {"instruction": 5, "guesses": [{"guess": 1, "amount": 2}]}


class TestInstructionUnion:
    """Test the discriminated instruction union."""

    def test_parse_by_discriminant(self):
        assert parse_instruction({"instruction": 7}) == TryCancelArgs()
        args = parse_instruction({"instruction": 5, "guesses": [{"guess": 38, "amount": 10}]})
        assert isinstance(args, PlaceGuessesArgs)
        assert args.guesses[0].amount == 10

    def test_parse_unknown(self):
        with pytest.raises(ValidationError):
            parse_instruction({"instruction": 42})


class TestEnums:
    """Test enum accessors."""

    def test_account_version(self, honeypot):
        assert honeypot.account_version == AccountVersion.HONEYPOT_V1
        assert RNG(version=2, sample=0, slot=0).account_version == AccountVersion.RNG_V1

    def test_unknown_account_version(self):
        with pytest.raises(ValueError):
            RNG(version=9, sample=0, slot=0).account_version

    def test_guess_selector(self):
        bet = RouletteGuess(guess=Guess.RED, amount=5)
        assert bet.guess == 38
        assert bet.selector is Guess.RED
        assert RouletteGuess(guess=37, amount=1).selector is Guess.R36
        assert len(Guess) == 50
