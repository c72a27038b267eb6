"""
Enumerations shared by the roulette program layouts.
"""

from enum import Enum, IntEnum


class RecordType(str, Enum):
    """Record type identifiers known to the codec."""

    # Instruction arguments
    INITIALIZE = "Initialize"
    SAMPLE = "Sample"
    INITIALIZE_HONEYPOT = "InitializeHoneypot"
    WITHDRAW_FROM_HONEYPOT = "WithdrawFromHoneypot"
    INITIALIZE_GUESS_ACCOUNT = "InitializeGuessAccount"
    PLACE_GUESSES = "PlaceGuesses"
    SPIN = "Spin"
    TRY_CANCEL = "TryCancel"

    # Nested records
    ROULETTE_GUESS = "RouletteGuess"

    # Account state
    HONEYPOT = "Honeypot"
    RNG = "RNG"
    LOCKED_GUESS = "LockedGuess"

    def __str__(self) -> str:
        return self.value


class InstructionKind(IntEnum):
    """Instruction discriminants, the first byte of every instruction buffer."""

    INITIALIZE = 0
    SAMPLE = 1
    INITIALIZE_HONEYPOT = 2
    WITHDRAW_FROM_HONEYPOT = 3
    INITIALIZE_GUESS_ACCOUNT = 4
    PLACE_GUESSES = 5
    SPIN = 6
    TRY_CANCEL = 7


class AccountVersion(IntEnum):
    """Leading version byte of program-owned accounts."""

    UNINITIALIZED = 0
    TOMBSTONE = 1
    RNG_V1 = 2
    HONEYPOT_V1 = 3
    LOCKED_GUESS_V1 = 4


class Guess(IntEnum):
    """Roulette bet selectors as stored in a guess byte."""

    ZERO = 0
    DOUBLE_ZERO = 1
    R1 = 2
    B2 = 3
    R3 = 4
    B4 = 5
    R5 = 6
    B6 = 7
    R7 = 8
    B8 = 9
    R9 = 10
    B10 = 11
    B11 = 12
    R12 = 13
    B13 = 14
    R14 = 15
    B15 = 16
    R16 = 17
    B17 = 18
    R18 = 19
    R19 = 20
    B20 = 21
    R21 = 22
    B22 = 23
    R23 = 24
    B24 = 25
    R25 = 26
    B26 = 27
    R27 = 28
    B28 = 29
    B29 = 30
    R30 = 31
    B31 = 32
    R32 = 33
    B33 = 34
    R34 = 35
    B35 = 36
    R36 = 37
    RED = 38
    BLACK = 39
    EVEN = 40
    ODD = 41
    COL1 = 42
    COL2 = 43
    COL3 = 44
    DOZEN1 = 45
    DOZEN2 = 46
    DOZEN3 = 47
    LOW = 48
    HIGH = 49


__all__ = ["RecordType", "InstructionKind", "AccountVersion", "Guess"]
