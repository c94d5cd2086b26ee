"""Tests for credential injection, nonce handling and URI signing."""

import hashlib
import hmac
from unittest.mock import patch

from pydantic import SecretStr

from bittrex_api.api.auth import RequestSigner


def make_signer(key: str = "test_key", secret: str = "test_secret") -> RequestSigner:
    return RequestSigner(SecretStr(key), SecretStr(secret))


class TestSignature:
    def test_matches_hmac_sha512_hex(self):
        signer = make_signer()
        uri = "https://bittrex.com/api/v1.1/account/getbalances?apikey=test_key&nonce=1700000000"
        expected = hmac.new(b"test_secret", uri.encode("utf-8"), hashlib.sha512).hexdigest()
        assert signer.sign(uri) == expected

    def test_is_lowercase_hex_of_sha512_length(self):
        sig = make_signer().sign("https://bittrex.com/api/v1.1/public/getmarkets?")
        assert len(sig) == 128
        assert sig == sig.lower()
        int(sig, 16)

    def test_deterministic(self):
        signer = make_signer()
        uri = "https://bittrex.com/api/v1.1/public/getmarkets?"
        assert signer.sign(uri) == signer.sign(uri)

    def test_changes_with_uri(self):
        signer = make_signer()
        base = "https://bittrex.com/api/v1.1/public/getticker?market=BTC-LTC"
        assert signer.sign(base) != signer.sign(base + "x")

    def test_changes_with_secret(self):
        uri = "https://bittrex.com/api/v1.1/public/getmarkets?"
        assert make_signer(secret="a").sign(uri) != make_signer(secret="b").sign(uri)

    def test_build_headers(self):
        signer = make_signer()
        headers = signer.build_headers("uri")
        assert headers == {"apisign": signer.sign("uri")}


class TestAuthenticate:
    def test_appends_apikey_and_nonce_last(self):
        signer = make_signer()
        with patch("bittrex_api.api.auth.time.time", return_value=1700000000.7):
            params = signer.authenticate({"currency": "BTC"})
        assert list(params) == ["currency", "apikey", "nonce"]
        assert params["apikey"] == "test_key"
        assert params["nonce"] == 1700000000

    def test_does_not_mutate_input(self):
        original = {"currency": "BTC"}
        make_signer().authenticate(original)
        assert original == {"currency": "BTC"}

    def test_none_params(self):
        params = make_signer().authenticate(None)
        assert set(params) == {"apikey", "nonce"}


class TestNonce:
    def test_same_second_gives_same_nonce(self):
        """Whole-second nonces collide on rapid calls; this is documented behaviour."""
        signer = make_signer()
        with patch("bittrex_api.api.auth.time.time", side_effect=[1700000000.1, 1700000000.9]):
            assert signer.next_nonce() == signer.next_nonce() == 1700000000

    def test_never_moves_backwards(self):
        signer = make_signer()
        with patch("bittrex_api.api.auth.time.time", side_effect=[1700000005.0, 1700000001.0]):
            first = signer.next_nonce()
            second = signer.next_nonce()
        assert second >= first
