"""
Record codec tests.

Round-trips for every declared record type, exact instruction layouts,
discriminant stability, truncation at every byte and trailing-byte handling.
"""

import pytest

from roulette_client import (
    RNG,
    CodecOptions,
    Honeypot,
    InitializeArgs,
    InitializeGuessAccountArgs,
    InitializeHoneypotArgs,
    LockedGuess,
    PlaceGuessesArgs,
    RecordCodec,
    RecordType,
    RouletteGuess,
    SampleArgs,
    SpinArgs,
    TryCancelArgs,
    WithdrawFromHoneypotArgs,
    decode,
    decode_instruction,
    encode,
    encode_address,
    encoded_size,
    static_size,
)
from roulette_client.runtime.errors import (
    BufferUnderrunError,
    FieldMismatchError,
    InvalidAddressError,
    TrailingBytesError,
    UnknownDiscriminantError,
    UnknownRecordTypeError,
    ValueOutOfRangeError,
)

U64_MAX = 2**64 - 1

FIXED_INSTRUCTIONS = [
    (InitializeArgs(), 1),
    (SampleArgs(tolerance=42), 9),
    (InitializeHoneypotArgs(tick_size=1, max_bet_size=U64_MAX, minimum_bank_size=2**53 + 1), 25),
    (WithdrawFromHoneypotArgs(amount_to_withdraw=123_456_789), 9),
    (InitializeGuessAccountArgs(), 1),
    (SpinArgs(tolerance=0), 9),
    (TryCancelArgs(), 1),
]


class TestInstructionLayouts:
    """Test the exact wire layout of instruction arguments."""

    def test_place_guesses_bytes(self, place_guesses):
        """Test the two-guess PlaceGuesses layout byte for byte."""
        args, wire = place_guesses
        assert encode(args) == wire
        assert len(wire) == 1 + 4 + 9 + 9

    def test_place_guesses_decode(self, place_guesses):
        """Test decoding reproduces the original structure."""
        args, wire = place_guesses
        decoded = decode(RecordType.PLACE_GUESSES, wire)
        assert decoded == args
        assert [g.guess for g in decoded.guesses] == [17, 0]
        assert [g.amount for g in decoded.guesses] == [500, 1_000_000]

    @pytest.mark.parametrize("args,size", FIXED_INSTRUCTIONS)
    def test_fixed_size(self, args, size):
        """Test fixed-size instructions always produce their declared byte count."""
        encoded = encode(args)
        assert len(encoded) == size
        assert static_size(args.record_type) == size
        assert encoded_size(args) == size

    @pytest.mark.parametrize("args,size", FIXED_INSTRUCTIONS)
    def test_roundtrip(self, args, size):
        assert decode(args.record_type, encode(args)) == args

    @pytest.mark.parametrize("args,_size", FIXED_INSTRUCTIONS)
    def test_discriminant_is_first_byte(self, args, _size):
        """Test every instruction leads with its own discriminant."""
        assert encode(args)[0] == args.instruction

    def test_discriminant_independent_of_values(self):
        """Test the discriminant byte does not depend on payload values."""
        for tolerance in [0, 1, 255, 256, U64_MAX]:
            assert encode(SampleArgs(tolerance=tolerance))[0] == 1
            assert encode(SpinArgs(tolerance=tolerance))[0] == 6

    def test_initialize_honeypot_layout(self):
        args = InitializeHoneypotArgs(tick_size=1, max_bet_size=2, minimum_bank_size=3)
        assert encode(args) == bytes.fromhex(
            "02" "0100000000000000" "0200000000000000" "0300000000000000"
        )


class TestVectors:
    """Test length-prefixed vectors keep count and order."""

    @pytest.mark.parametrize("n", [0, 1, 2, 7, 64])
    def test_length_agreement(self, n):
        guesses = [RouletteGuess(guess=i % 50, amount=i * 1000) for i in range(n)]
        args = PlaceGuessesArgs(guesses=guesses)
        encoded = encode(args)
        assert len(encoded) == 1 + 4 + 9 * n
        decoded = decode(RecordType.PLACE_GUESSES, encoded)
        assert len(decoded.guesses) == n
        assert list(decoded.guesses) == guesses

    def test_empty_vector_bytes(self):
        assert encode(PlaceGuessesArgs(guesses=[])) == b"\x05\x00\x00\x00\x00"

    def test_vector_has_no_static_size(self):
        assert static_size(RecordType.PLACE_GUESSES) is None

    def test_truncated_vector(self, codec):
        """Test a vector shorter than its declared count underruns."""
        # one element declared, a third of it present
        with pytest.raises(BufferUnderrunError) as exc_info:
            codec.decode(RecordType.PLACE_GUESSES, b"\x05\x01\x00\x00\x00\x11\xf4\x01")
        assert exc_info.value.record_type == "PlaceGuesses"
        assert exc_info.value.field == "guesses"

    def test_truncated_at_every_length(self, place_guesses):
        """Test every prefix of a two-element PlaceGuesses underruns."""
        _, wire = place_guesses
        for size in range(len(wire)):
            with pytest.raises(BufferUnderrunError):
                decode(RecordType.PLACE_GUESSES, wire[:size])


class TestAccountState:
    """Test account state records."""

    def test_honeypot_size(self, honeypot):
        encoded = encode(honeypot)
        assert len(encoded) == 1 + 1 + 1 + 32 + 32 + 8 + 8 + 8 + 8 == 99
        assert static_size(RecordType.HONEYPOT) == 99

    def test_honeypot_layout(self, honeypot, owner_key, mint_key):
        encoded = encode(honeypot)
        assert encoded[:3] == bytes([3, 254, 253])
        assert encoded[3:35] == owner_key
        assert encoded[35:67] == mint_key
        assert encoded[67:75] == (1_000).to_bytes(8, "little")
        assert encoded[91:99] == b"\xff" * 8

    def test_honeypot_roundtrip(self, honeypot):
        assert decode(RecordType.HONEYPOT, encode(honeypot)) == honeypot

    def test_honeypot_truncated_at_every_length(self, honeypot):
        """Test every prefix shorter than 99 bytes underruns."""
        encoded = encode(honeypot)
        for size in range(99):
            with pytest.raises(BufferUnderrunError):
                decode(RecordType.HONEYPOT, encoded[:size])

    def test_honeypot_underrun_context(self, honeypot):
        encoded = encode(honeypot)
        with pytest.raises(BufferUnderrunError) as exc_info:
            decode(RecordType.HONEYPOT, encoded[:50])
        assert exc_info.value.record_type == "Honeypot"
        assert exc_info.value.field == "mint"
        assert exc_info.value.offset == 35

    def test_honeypot_invalid_owner(self, honeypot):
        """Test an invalid address surfaces at encode time."""
        bad = honeypot.model_copy(update={"owner": "not-a-key"})
        with pytest.raises(InvalidAddressError) as exc_info:
            encode(bad)
        assert exc_info.value.field == "owner"

    def test_rng_roundtrip(self):
        rng = RNG(version=2, sample=U64_MAX, slot=123_456)
        encoded = encode(rng)
        assert encoded == b"\x02" + b"\xff" * 8 + (123_456).to_bytes(8, "little")
        assert decode(RecordType.RNG, encoded) == rng

    def test_rng_truncated_at_every_length(self):
        encoded = encode(RNG(version=2, sample=1, slot=2))
        for size in range(17):
            with pytest.raises(BufferUnderrunError):
                decode(RecordType.RNG, encoded[:size])

    def test_locked_guess_roundtrip(self, owner_key, mint_key):
        locked = LockedGuess(
            version=4,
            bump_seed=255,
            owner=encode_address(owner_key),
            vault=encode_address(mint_key),
            slot=99,
            active=True,
            active_size=3,
            guesses=[i * 10 for i in range(64)],
        )
        encoded = encode(locked)
        assert len(encoded) == 595
        assert encoded[74] == 1
        assert decode(RecordType.LOCKED_GUESS, encoded) == locked

    def test_trailing_bytes_ignored(self, honeypot):
        """Test over-allocated account buffers decode."""
        padded = encode(honeypot) + b"\x00" * 157
        assert decode(RecordType.HONEYPOT, padded) == honeypot

    def test_trailing_bytes_strict(self, honeypot):
        codec = RecordCodec(options=CodecOptions(allow_trailing_bytes=False))
        encoded = encode(honeypot)
        assert codec.decode(RecordType.HONEYPOT, encoded) == honeypot
        with pytest.raises(TrailingBytesError) as exc_info:
            codec.decode(RecordType.HONEYPOT, encoded + b"\x00")
        assert exc_info.value.details["trailing"] == 1


class TestDispatch:
    """Test record type lookup and instruction dispatch."""

    def test_string_record_type(self):
        assert decode("RNG", bytes(17)) == RNG(version=0, sample=0, slot=0)

    def test_unknown_record_type(self):
        with pytest.raises(UnknownRecordTypeError):
            decode("Roulette", b"\x00")

    def test_decode_instruction(self, place_guesses):
        args, wire = place_guesses
        assert decode_instruction(wire) == args
        assert decode_instruction(b"\x07") == TryCancelArgs()
        assert isinstance(decode_instruction(encode(SpinArgs(tolerance=5))), SpinArgs)

    def test_decode_instruction_unknown(self):
        with pytest.raises(UnknownDiscriminantError) as exc_info:
            decode_instruction(b"\x08")
        assert exc_info.value.details["discriminant"] == 8

    def test_decode_instruction_empty(self):
        with pytest.raises(BufferUnderrunError):
            decode_instruction(b"")

    def test_wrong_discriminant_for_record_type(self):
        """Test decoding a Spin buffer as Sample is rejected."""
        with pytest.raises(FieldMismatchError):
            decode(RecordType.SAMPLE, encode(SpinArgs(tolerance=1)))

    def test_encode_unregistered_instance(self):
        with pytest.raises(UnknownRecordTypeError):
            encode(object())

    def test_encode_bypassed_validation(self):
        """Test values that skipped model validation are still range checked."""
        bad = SampleArgs.model_construct(tolerance=2**64)
        with pytest.raises(ValueOutOfRangeError) as exc_info:
            encode(bad)
        assert exc_info.value.field == "tolerance"
        assert exc_info.value.record_type == "Sample"

    def test_deterministic(self, honeypot):
        assert encode(honeypot) == encode(honeypot)
