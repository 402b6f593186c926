"""Socket authorization token.

The token is ``sha256(owner_id + document_name + timestamp + secret)`` as a hex
digest. It is a bearer token: the issuer does not track or revoke it, and
expiry is only enforced by whoever calls :func:`verify_socket_token` with a
``max_age``.
"""

import hashlib
import hmac
import time


def compute_socket_token(owner_id: str, document_name: str, timestamp: int, secret: str) -> str:
    """Derive the token for one user, document and timestamp."""
    payload = f"{owner_id}{document_name}{timestamp}{secret}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def verify_socket_token(
    owner_id: str,
    document_name: str,
    timestamp: int,
    token: str,
    secret: str,
    max_age: int | None = None,
    now: float | None = None,
) -> bool:
    """Check a token presented to the realtime server.

    With ``max_age`` set, tokens whose timestamp is more than ``max_age``
    seconds away from ``now`` (in either direction) are rejected.
    """
    if not secret or not token:
        return False
    if max_age is not None:
        current = time.time() if now is None else now
        if abs(current - timestamp) > max_age:
            return False
    expected = compute_socket_token(owner_id, document_name, timestamp, secret)
    return hmac.compare_digest(expected, token)
