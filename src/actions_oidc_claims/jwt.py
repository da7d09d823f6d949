"""Read claims out of a compact-serialized token.

This does NOT verify the token. Signature, expiry, audience and issuer checks
belong to whoever accepts the token (a cloud trust broker, or PyJWT with the
issuer's JWKS). Use this to inspect a token you already trust, or after
verification has happened elsewhere.
"""

from __future__ import annotations

import jwt as pyjwt

from actions_oidc_claims.codec import MalformedClaimsError, decode_payload
from actions_oidc_claims.models import Claims
from actions_oidc_claims.revisions import HEADER_CLAIMS, SchemaRevision, resolve_revision


def claims_from_token(token: str, revision: SchemaRevision | None = None) -> Claims:
    """Decode a JWT's payload into `Claims` without verifying it.

    Args:
        token: The raw JWT string (header.payload.signature).
        revision: Schema revision to hold the payload to. When the revision
            carries the header values (`alg`, `kid`, `typ`), they are taken
            from the token's JOSE header unless the payload already has them.

    Raises:
        MalformedClaimsError: Not a structurally valid JWT.
        ClaimsSchemaError: The payload does not match the claim set.
    """
    revision = resolve_revision(revision)
    try:
        payload = pyjwt.decode(token, options={"verify_signature": False})
        header = pyjwt.get_unverified_header(token)
    except pyjwt.InvalidTokenError as exc:
        raise MalformedClaimsError(f"Malformed token: {exc}") from exc

    for name in HEADER_CLAIMS - revision.excluded:
        if name in header:
            payload.setdefault(name, header[name])

    return decode_payload(payload, revision)
