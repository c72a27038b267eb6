"""
Account state records and the nested RouletteGuess.

Account buffers fetched from the network are often over-allocated; decoding
ignores bytes past the last declared field.
"""

from __future__ import annotations
from typing import Annotated, ClassVar, List

from pydantic import Field

from ..enums import AccountVersion, Guess, RecordType
from .base import U8, U64, RouletteRecord

LOCKED_GUESS_SLOTS = 64


class _AccountState(RouletteRecord):
    version: U8

    @property
    def account_version(self) -> AccountVersion:
        """Version byte as an AccountVersion; raises ValueError if unknown."""
        return AccountVersion(self.version)


class RNG(_AccountState):
    """Random number sample account."""

    record_type: ClassVar[RecordType] = RecordType.RNG

    sample: U64
    slot: U64


class Honeypot(_AccountState):
    """
    House bank account.

    Owner and mint are base58 address text; they are only checked when the
    record is encoded.
    """

    record_type: ClassVar[RecordType] = RecordType.HONEYPOT

    honeypot_bump_seed: U8 = Field(alias="honeypotBumpSeed")
    vault_bump_seed: U8 = Field(alias="vaultBumpSeed")
    owner: str
    mint: str
    tick_size: U64 = Field(alias="tickSize")
    max_amount: U64 = Field(alias="maxAmount")
    minimum_bank_size: U64 = Field(alias="minimumBankSize")
    owed_amount: U64 = Field(alias="owedAmount")


class LockedGuess(_AccountState):
    """Per-player account holding the amounts locked on each bet selector."""

    record_type: ClassVar[RecordType] = RecordType.LOCKED_GUESS

    bump_seed: U8 = Field(alias="bumpSeed")
    owner: str
    vault: str
    slot: U64
    active: bool
    active_size: U64 = Field(alias="activeSize")
    guesses: Annotated[List[U64], Field(min_length=LOCKED_GUESS_SLOTS,
                                        max_length=LOCKED_GUESS_SLOTS)]

    def amount_on(self, guess: Guess) -> int:
        return self.guesses[int(guess)]


class RouletteGuess(RouletteRecord):
    """One bet: a selector byte and the amount wagered on it."""

    record_type: ClassVar[RecordType] = RecordType.ROULETTE_GUESS

    guess: U8
    amount: U64

    @property
    def selector(self) -> Guess:
        return Guess(self.guess)
