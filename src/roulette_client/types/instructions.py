"""
Instruction argument records.

Each instruction is a closed variant keyed by its leading ``instruction``
byte. The byte is an ordinary u8 field with a fixed literal value, so it is
encoded like any other field.
"""

from __future__ import annotations
from typing import Annotated, Any, ClassVar, List, Literal, Mapping, Union

from pydantic import Field, TypeAdapter

from ..enums import InstructionKind, RecordType
from .base import U64, RouletteRecord
from .state import RouletteGuess


class InitializeArgs(RouletteRecord):
    record_type: ClassVar[RecordType] = RecordType.INITIALIZE

    instruction: Literal[0] = 0


class SampleArgs(RouletteRecord):
    """Request a new random sample, failing if the slot drifted past tolerance."""

    record_type: ClassVar[RecordType] = RecordType.SAMPLE

    instruction: Literal[1] = 1
    tolerance: U64


class InitializeHoneypotArgs(RouletteRecord):
    """Create the house bank with its betting limits."""

    record_type: ClassVar[RecordType] = RecordType.INITIALIZE_HONEYPOT

    instruction: Literal[2] = 2
    tick_size: U64 = Field(alias="tickSize")
    max_bet_size: U64 = Field(alias="maxBetSize")
    minimum_bank_size: U64 = Field(alias="minimumBankSize")


class WithdrawFromHoneypotArgs(RouletteRecord):
    record_type: ClassVar[RecordType] = RecordType.WITHDRAW_FROM_HONEYPOT

    instruction: Literal[3] = 3
    amount_to_withdraw: U64 = Field(alias="amountToWithdraw")


class InitializeGuessAccountArgs(RouletteRecord):
    record_type: ClassVar[RecordType] = RecordType.INITIALIZE_GUESS_ACCOUNT

    instruction: Literal[4] = 4


class PlaceGuessesArgs(RouletteRecord):
    """Lock a batch of bets; encoded as a u32 count followed by 9-byte guesses."""

    record_type: ClassVar[RecordType] = RecordType.PLACE_GUESSES

    instruction: Literal[5] = 5
    guesses: List[RouletteGuess]


class SpinArgs(RouletteRecord):
    record_type: ClassVar[RecordType] = RecordType.SPIN

    instruction: Literal[6] = 6
    tolerance: U64


class TryCancelArgs(RouletteRecord):
    record_type: ClassVar[RecordType] = RecordType.TRY_CANCEL

    instruction: Literal[7] = 7


InstructionArgs = Annotated[
    Union[
        InitializeArgs,
        SampleArgs,
        InitializeHoneypotArgs,
        WithdrawFromHoneypotArgs,
        InitializeGuessAccountArgs,
        PlaceGuessesArgs,
        SpinArgs,
        TryCancelArgs,
    ],
    Field(discriminator="instruction"),
]

INSTRUCTION_MODELS = {
    InstructionKind.INITIALIZE: InitializeArgs,
    InstructionKind.SAMPLE: SampleArgs,
    InstructionKind.INITIALIZE_HONEYPOT: InitializeHoneypotArgs,
    InstructionKind.WITHDRAW_FROM_HONEYPOT: WithdrawFromHoneypotArgs,
    InstructionKind.INITIALIZE_GUESS_ACCOUNT: InitializeGuessAccountArgs,
    InstructionKind.PLACE_GUESSES: PlaceGuessesArgs,
    InstructionKind.SPIN: SpinArgs,
    InstructionKind.TRY_CANCEL: TryCancelArgs,
}

_INSTRUCTION_ADAPTER = TypeAdapter(InstructionArgs)


def parse_instruction(data: Mapping[str, Any]):
    """
    Build the instruction variant named by ``data["instruction"]``.

    Raises:
        pydantic.ValidationError: If the discriminant is unknown or fields are invalid
    """
    return _INSTRUCTION_ADAPTER.validate_python(dict(data))
