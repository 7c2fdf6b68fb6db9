"""Unit tests for compact JWS production and reading."""
from __future__ import annotations

import base64
import hashlib
import hmac
import json
from typing import Any

import jwt as pyjwt
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from hooksign.config.validation import UnsupportedAlgorithmError
from hooksign.kernel.errors import TokenParseError
from hooksign.security.jws import (
    JwsProducer,
    JwsReader,
    SignedToken,
    b64url_decode,
    b64url_encode,
)

SECRET = "Key-Must-Be-at-least-32-bytes-in-length!"


def to_json(value: Any) -> bytes:
    return json.dumps(value, separators=(",", ":")).encode("utf-8")


def from_json(raw: bytes) -> Any:
    return json.loads(raw.decode("utf-8"))


PRODUCE = JwsProducer(to_json, "HS256", SECRET)
READ = JwsReader(from_json)


def _flip_char(segment: str, index: int = 0) -> str:
    c = segment[index]
    replacement = "A" if c != "A" else "B"
    return segment[:index] + replacement + segment[index + 1:]


# ---------------------------------------------------------------------------
# base64url helpers
# ---------------------------------------------------------------------------
class TestBase64Url:
    def test_encode_has_no_padding(self) -> None:
        assert b64url_encode(b"a") == "YQ"
        assert "=" not in b64url_encode(b"ab")

    def test_encode_uses_url_alphabet(self) -> None:
        assert b64url_encode(b"\xfb\xff") == "-_8"

    def test_decode_accepts_unpadded(self) -> None:
        assert b64url_decode("YQ") == b"a"
        assert b64url_decode("-_8") == b"\xfb\xff"

    @pytest.mark.parametrize("segment", ["YQ==", "a+b/", "abc$", "A"])
    def test_decode_rejects_malformed(self, segment: str) -> None:
        with pytest.raises(TokenParseError):
            b64url_decode(segment)


# ---------------------------------------------------------------------------
# JwsProducer
# ---------------------------------------------------------------------------
class TestJwsProducer:
    def test_known_signature(self) -> None:
        token = PRODUCE({"admin": True})
        assert token.signature == "oRvT0gzL1pGPzXUJDDfuS5ViCXu12CEoe6MykK1fkMc"

    def test_signature_matches_stdlib_hmac(self) -> None:
        header64 = base64.urlsafe_b64encode(b'{"typ":"JWT","alg":"HS256"}').rstrip(b"=")
        claims64 = base64.urlsafe_b64encode(b'{"admin":true}').rstrip(b"=")
        digest = hmac.new(SECRET.encode("utf-8"), header64 + b"." + claims64, hashlib.sha256).digest()
        expected = base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")
        token = PRODUCE({"admin": True})
        assert token.signature == expected
        assert token.token == f"{header64.decode()}.{claims64.decode()}.{expected}"

    def test_header_and_claims(self) -> None:
        token = PRODUCE({"admin": True})
        assert token.header == {"typ": "JWT", "alg": "HS256"}
        assert token.claims == {"admin": True}
        assert token.algorithm == "HS256"

    def test_token_string_layout(self) -> None:
        token = PRODUCE({"admin": True})
        header64, claims64, signature64 = token.token.split(".")
        assert from_json(b64url_decode(header64)) == {"typ": "JWT", "alg": "HS256"}
        assert from_json(b64url_decode(claims64)) == {"admin": True}
        assert signature64 == token.signature
        assert "=" not in token.token
        assert str(token) == token.token

    def test_token_does_not_collide_with_claims(self) -> None:
        token = PRODUCE({"token": "user-supplied"})
        assert token.claims == {"token": "user-supplied"}
        assert token.token.count(".") == 2

    @pytest.mark.parametrize(("alg", "size"), [("HS256", 32), ("HS384", 48), ("HS512", 64)])
    def test_signature_length_per_algorithm(self, alg: str, size: int) -> None:
        token = JwsProducer(to_json, alg, "k" * size)({"sub": "u1"})
        assert len(token.signature_bytes) == size
        assert token.header["alg"] == alg

    def test_lowercase_algorithm_accepted(self) -> None:
        assert JwsProducer(to_json, "hs384", SECRET).algorithm == "HS384"

    @pytest.mark.parametrize("alg", ["RS256", "none", "", None, "HmacSHA256"])
    def test_unknown_algorithm_rejected(self, alg: Any) -> None:
        with pytest.raises(UnsupportedAlgorithmError):
            JwsProducer(to_json, alg, SECRET)

    def test_str_encoder_output_is_utf8_encoded(self) -> None:
        token = JwsProducer(json.dumps, "HS256", SECRET)({"a": 1})
        assert READ(token.token).claims == {"a": 1}

    def test_interoperates_with_pyjwt(self) -> None:
        token = PRODUCE({"sub": "user-1", "admin": True})
        decoded = pyjwt.decode(token.token, SECRET, algorithms=["HS256"])
        assert decoded == {"sub": "user-1", "admin": True}


# ---------------------------------------------------------------------------
# JwsReader
# ---------------------------------------------------------------------------
class TestJwsReader:
    def test_reads_produced_token(self) -> None:
        produced = PRODUCE({"admin": True})
        read = READ(produced.token)
        assert isinstance(read, SignedToken)
        assert read.header == produced.header
        assert read.claims == produced.claims
        assert read.signature == produced.signature
        assert read.token == produced.token

    def test_verify_with_right_secret(self) -> None:
        assert READ(PRODUCE({"admin": True}).token).verify(SECRET) is True

    def test_verify_with_wrong_secret(self) -> None:
        assert READ(PRODUCE({"admin": True}).token).verify(SECRET + "x") is False

    def test_verify_accepts_bytes_secret(self) -> None:
        assert READ(PRODUCE({"a": 1}).token).verify(SECRET.encode()) is True

    def test_reads_pyjwt_token(self) -> None:
        key = SECRET * 2
        encoded = pyjwt.encode({"sub": "alice"}, key, algorithm="HS512")
        token = READ(encoded)
        assert token.claims == {"sub": "alice"}
        assert token.algorithm == "HS512"
        assert token.verify(key) is True

    def test_well_known_example_token(self) -> None:
        token = READ(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
            ".eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiaWF0IjoxNTE2MjM5MDIyfQ"
            ".SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c"
        )
        assert token.header == {"alg": "HS256", "typ": "JWT"}
        assert token.claims["name"] == "John Doe"
        assert token.verify("your-256-bit-secret") is True
        assert token.verify("not-the-secret") is False

    def test_signing_input_is_first_two_segments(self) -> None:
        produced = PRODUCE({"admin": True})
        assert READ(produced.token).signing_input == produced.token.rsplit(".", 1)[0]

    def test_unknown_algorithm_does_not_verify(self) -> None:
        header = b64url_encode(to_json({"typ": "JWT", "alg": "RS256"}))
        claims = b64url_encode(to_json({"a": 1}))
        token = READ(f"{header}.{claims}.c2ln")
        assert token.verify(SECRET) is False

    def test_missing_algorithm_does_not_verify(self) -> None:
        header = b64url_encode(to_json({"typ": "JWT"}))
        claims = b64url_encode(to_json({"a": 1}))
        assert READ(f"{header}.{claims}.c2ln").verify(SECRET) is False

    def test_non_mapping_header_does_not_verify(self) -> None:
        header = b64url_encode(to_json(["HS256"]))
        claims = b64url_encode(to_json({"a": 1}))
        assert READ(f"{header}.{claims}.c2ln").verify(SECRET) is False

    def test_signature_segment_keeps_extra_dots(self) -> None:
        produced = PRODUCE({"a": 1})
        token = READ(produced.token + ".extra")
        assert token.signature == produced.signature + ".extra"
        assert token.verify(SECRET) is False

    @pytest.mark.parametrize("value", ["", "abc", "abc.def"])
    def test_too_few_segments(self, value: str) -> None:
        with pytest.raises(TokenParseError):
            READ(value)

    def test_malformed_base64_segment(self) -> None:
        claims = b64url_encode(to_json({"a": 1}))
        with pytest.raises(TokenParseError):
            READ(f"not*base64.{claims}.sig")

    def test_decoder_failure_is_wrapped(self) -> None:
        garbage = b64url_encode(b"{not json")
        claims = b64url_encode(to_json({"a": 1}))
        with pytest.raises(TokenParseError) as info:
            READ(f"{garbage}.{claims}.sig")
        assert isinstance(info.value.__cause__, ValueError)
        assert info.value.segment == "header"

    def test_non_string_token(self) -> None:
        with pytest.raises(TokenParseError):
            READ(b"a.b.c")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Tampering and idempotence
# ---------------------------------------------------------------------------
class TestJwsTampering:
    @pytest.mark.parametrize("segment", [0, 1, 2])
    def test_any_segment_change_fails_verification(self, segment: int) -> None:
        parts = PRODUCE({"admin": False, "sub": "user-1"}).token.split(".")
        parts[segment] = _flip_char(parts[segment], 1)
        try:
            token = READ(".".join(parts))
        except TokenParseError:
            return
        assert token.verify(SECRET) is False

    def test_reencoding_reproduces_token(self) -> None:
        produced = PRODUCE({"sub": "user-1", "roles": ["a", "b"]})
        read = READ(produced.token)
        rebuilt = ".".join(
            [b64url_encode(to_json(read.header)), b64url_encode(to_json(read.claims)), read.signature]
        )
        assert rebuilt == produced.token


class TestJwsProperties:
    claims_strategy = st.dictionaries(
        st.text(min_size=1, max_size=10),
        st.one_of(st.integers(), st.booleans(), st.text(max_size=20)),
        max_size=5,
    )

    @settings(max_examples=50)
    @given(claims=claims_strategy, secret=st.text(min_size=1, max_size=40))
    def test_round_trip_verifies_only_with_same_secret(self, claims: dict[str, Any], secret: str) -> None:
        token = JwsProducer(to_json, "HS256", secret)(claims)
        read = READ(token.token)
        assert read.claims == claims
        assert read.verify(secret) is True
        assert read.verify(secret + "!") is False
