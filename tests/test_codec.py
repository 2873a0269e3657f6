"""Tests for the stored-hash codec."""

import base64

import pytest
from pydantic import ValidationError

from credhash.core.codec import decode, encode
from credhash.core.types import LegacyDigest, ModernHash
from credhash.exceptions import MalformedHash, UnsupportedAlgorithm

SALT = bytes(range(24))
KEY = bytes(range(100, 124))


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


class TestEncode:
    def test_modern_layout(self):
        record = ModernHash(algorithm="sha256", iterations=1000, salt=SALT, key=KEY)
        assert encode(record) == f"sha256:1000:{_b64(SALT)}:{_b64(KEY)}"

    def test_legacy_is_hex(self):
        digest = bytes.fromhex("5f4dcc3b5aa765d61d8327deb882cf99")
        assert encode(LegacyDigest(digest=digest)) == "5f4dcc3b5aa765d61d8327deb882cf99"

    def test_rejects_non_record(self):
        with pytest.raises(TypeError):
            encode("sha256:1:a:b")  # type: ignore[arg-type]


class TestRoundTrip:
    def test_modern(self):
        record = ModernHash(algorithm="sha512", iterations=1, salt=b"", key=b"\x00")
        assert decode(encode(record)) == record

    def test_modern_defaults(self):
        record = ModernHash(algorithm="sha256", iterations=1000, salt=SALT, key=KEY)
        assert decode(encode(record)) == record

    def test_legacy(self):
        record = LegacyDigest(digest=bytes(range(16)))
        assert decode(encode(record)) == record


class TestDecode:
    def test_modern_fields(self):
        record = decode(f"sha256:1000:{_b64(SALT)}:{_b64(KEY)}")
        assert isinstance(record, ModernHash)
        assert record.kind == "modern"
        assert record.algorithm == "sha256"
        assert record.iterations == 1000
        assert record.salt == SALT
        assert record.key == KEY

    def test_algorithm_normalised(self):
        record = decode(f"SHA256:5:{_b64(SALT)}:{_b64(KEY)}")
        assert record.algorithm == "sha256"

    def test_legacy_upper_and_lower_hex(self):
        lower = decode("5f4dcc3b5aa765d61d8327deb882cf99")
        upper = decode("5F4DCC3B5AA765D61D8327DEB882CF99")
        assert isinstance(lower, LegacyDigest)
        assert lower == upper
        assert lower.digest == bytes.fromhex("5f4dcc3b5aa765d61d8327deb882cf99")

    def test_unsupported_algorithm(self):
        with pytest.raises(UnsupportedAlgorithm):
            decode(f"whirlpool9:1000:{_b64(SALT)}:{_b64(KEY)}")

    @pytest.mark.parametrize(
        "stored",
        [
            "",
            "not-a-hash",
            "5f4dcc3b5aa765d61d8327deb882cf9",  # 31 hex chars
            "5f4dcc3b5aa765d61d8327deb882cf999",  # 33 hex chars
            "5f4dcc3b5aa765d61d8327deb882cfzz",  # 32 chars, not hex
            " 5f4dcc3b5aa765d61d8327deb882cf9",
            "5f4dcc3b5aa765d61d8327deb882cf99\n",
            "sha256:1000:abc",
            "sha256:1000",
        ],
    )
    def test_too_few_fields(self, stored: str):
        with pytest.raises(MalformedHash):
            decode(stored)

    def test_too_many_fields(self):
        with pytest.raises(MalformedHash):
            decode(f"sha256:1000:{_b64(SALT)}:{_b64(KEY)}:extra")

    @pytest.mark.parametrize("iterations", ["abc", "", "-5", "0", "1e3", "+10", " 10", "١٠"])
    def test_bad_iteration_field(self, iterations: str):
        with pytest.raises(MalformedHash):
            decode(f"sha256:{iterations}:{_b64(SALT)}:{_b64(KEY)}")

    @pytest.mark.parametrize("bad", ["***", "abc", "QUJD=", "QR==", "é"])
    def test_bad_salt_base64(self, bad: str):
        with pytest.raises(MalformedHash):
            decode(f"sha256:1000:{bad}:{_b64(KEY)}")

    @pytest.mark.parametrize("bad", ["***", "abc", "QUJD=", "QR=="])
    def test_bad_key_base64(self, bad: str):
        with pytest.raises(MalformedHash):
            decode(f"sha256:1000:{_b64(SALT)}:{bad}")

    def test_empty_key_rejected(self):
        with pytest.raises(MalformedHash):
            decode(f"sha256:1000:{_b64(SALT)}:")

    def test_non_string(self):
        with pytest.raises(MalformedHash):
            decode(None)  # type: ignore[arg-type]
        with pytest.raises(MalformedHash):
            decode(b"5f4dcc3b5aa765d61d8327deb882cf99")  # type: ignore[arg-type]


class TestRecords:
    def test_frozen(self):
        record = ModernHash(algorithm="sha256", iterations=1, salt=SALT, key=KEY)
        with pytest.raises(ValidationError):
            record.iterations = 2  # type: ignore[misc]

    def test_iterations_must_be_positive(self):
        with pytest.raises(ValidationError):
            ModernHash(algorithm="sha256", iterations=0, salt=SALT, key=KEY)

    def test_unknown_algorithm(self):
        with pytest.raises(UnsupportedAlgorithm):
            ModernHash(algorithm="nope", iterations=1, salt=SALT, key=KEY)

    def test_legacy_digest_length(self):
        with pytest.raises(ValidationError):
            LegacyDigest(digest=b"short")
