"""
Wire layouts of the roulette program.

This table is the binding contract with the on-chain program: field order is
the byte order, and every integer is little-endian.
"""

from ..enums import InstructionKind, RecordType
from ..types import instructions, state
from .fields import RecordLayout, TypeTag, array, boolean, pubkey, u8, u64, vector
from .registry import TypeRegistry


def _instruction(record_type: RecordType, kind: InstructionKind, *fields) -> RecordLayout:
    return RecordLayout(
        record_type=record_type,
        fields=(u8("instruction"),) + tuple(fields),
        model=instructions.INSTRUCTION_MODELS[kind],
        discriminant=int(kind),
    )


INSTRUCTION_LAYOUTS = (
    _instruction(RecordType.INITIALIZE, InstructionKind.INITIALIZE),
    _instruction(RecordType.SAMPLE, InstructionKind.SAMPLE, u64("tolerance")),
    _instruction(
        RecordType.INITIALIZE_HONEYPOT,
        InstructionKind.INITIALIZE_HONEYPOT,
        u64("tick_size"),
        u64("max_bet_size"),
        u64("minimum_bank_size"),
    ),
    _instruction(
        RecordType.WITHDRAW_FROM_HONEYPOT,
        InstructionKind.WITHDRAW_FROM_HONEYPOT,
        u64("amount_to_withdraw"),
    ),
    _instruction(RecordType.INITIALIZE_GUESS_ACCOUNT, InstructionKind.INITIALIZE_GUESS_ACCOUNT),
    _instruction(
        RecordType.PLACE_GUESSES,
        InstructionKind.PLACE_GUESSES,
        vector("guesses", RecordType.ROULETTE_GUESS),
    ),
    _instruction(RecordType.SPIN, InstructionKind.SPIN, u64("tolerance")),
    _instruction(RecordType.TRY_CANCEL, InstructionKind.TRY_CANCEL),
)

STATE_LAYOUTS = (
    RecordLayout(
        RecordType.ROULETTE_GUESS,
        (u8("guess"), u64("amount")),
        state.RouletteGuess,
    ),
    RecordLayout(
        RecordType.HONEYPOT,
        (
            u8("version"),
            u8("honeypot_bump_seed"),
            u8("vault_bump_seed"),
            pubkey("owner"),
            pubkey("mint"),
            u64("tick_size"),
            u64("max_amount"),
            u64("minimum_bank_size"),
            u64("owed_amount"),
        ),
        state.Honeypot,
    ),
    RecordLayout(
        RecordType.RNG,
        (u8("version"), u64("sample"), u64("slot")),
        state.RNG,
    ),
    RecordLayout(
        RecordType.LOCKED_GUESS,
        (
            u8("version"),
            u8("bump_seed"),
            pubkey("owner"),
            pubkey("vault"),
            u64("slot"),
            boolean("active"),
            u64("active_size"),
            array("guesses", TypeTag.U64, state.LOCKED_GUESS_SLOTS),
        ),
        state.LockedGuess,
    ),
)


def build_default_registry() -> TypeRegistry:
    """Create and freeze a registry holding every roulette layout."""
    registry = TypeRegistry()
    for layout in INSTRUCTION_LAYOUTS + STATE_LAYOUTS:
        registry.register(layout)
    return registry.freeze()


DEFAULT_REGISTRY = build_default_registry()
