"""
Request authentication for the Bittrex API.

Private calls carry ``apikey`` and ``nonce`` query params. Every call, public
ones included, is signed: HMAC-SHA512 over the complete URI, keyed with the
API secret, sent hex-encoded in the ``apisign`` header.

The nonce is Unix time in whole seconds. Two private calls issued within the
same second therefore share a nonce, and the exchange may reject the second
one. It is never allowed to move backwards within one signer.
"""

import hashlib
import hmac
import time

from pydantic import SecretStr

from bittrex_api.api.constants import SIGNATURE_HEADER
from bittrex_api.api.uri import ParamValue


class RequestSigner:
    """Injects credentials and signs request URIs."""

    def __init__(self, api_key: SecretStr, api_secret: SecretStr) -> None:
        self._api_key = api_key
        self._api_secret = api_secret
        self._last_nonce = 0

    def next_nonce(self) -> int:
        nonce = max(int(time.time()), self._last_nonce)
        self._last_nonce = nonce
        return nonce

    def authenticate(self, params: dict[str, ParamValue] | None) -> dict[str, ParamValue]:
        """Return a copy of params with apikey and nonce appended last."""
        authenticated = dict(params or {})
        authenticated["apikey"] = self._api_key.get_secret_value()
        authenticated["nonce"] = self.next_nonce()
        return authenticated

    def sign(self, uri: str) -> str:
        """
        Create HMAC SHA512 signature of a request URI.

        Args:
            uri: Full request URI including the query string

        Returns:
            Lowercase hex signature
        """
        return hmac.new(
            self._api_secret.get_secret_value().encode("utf-8"),
            uri.encode("utf-8"),
            hashlib.sha512,
        ).hexdigest()

    def build_headers(self, uri: str) -> dict[str, str]:
        return {SIGNATURE_HEADER: self.sign(uri)}
