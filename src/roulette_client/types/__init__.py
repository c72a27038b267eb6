"""Typed records for roulette instructions and account state"""

from .base import RouletteRecord
from .instructions import (
    INSTRUCTION_MODELS,
    InitializeArgs,
    InitializeGuessAccountArgs,
    InitializeHoneypotArgs,
    InstructionArgs,
    PlaceGuessesArgs,
    SampleArgs,
    SpinArgs,
    TryCancelArgs,
    WithdrawFromHoneypotArgs,
    parse_instruction,
)
from .state import LOCKED_GUESS_SLOTS, RNG, Honeypot, LockedGuess, RouletteGuess

__all__ = [
    "RouletteRecord",
    "InstructionArgs",
    "INSTRUCTION_MODELS",
    "InitializeArgs",
    "SampleArgs",
    "InitializeHoneypotArgs",
    "WithdrawFromHoneypotArgs",
    "InitializeGuessAccountArgs",
    "PlaceGuessesArgs",
    "SpinArgs",
    "TryCancelArgs",
    "parse_instruction",
    "RNG",
    "Honeypot",
    "LockedGuess",
    "RouletteGuess",
    "LOCKED_GUESS_SLOTS",
]
