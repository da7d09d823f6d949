"""Typed model of the GitHub Actions OIDC token claim set.

Provides the `Claims` record, its JSON codec, the open enumerations for
repository visibility and runner environment, and `make_dummy()` for tests.
"""

from actions_oidc_claims.codec import (
    ClaimsSchemaError,
    DecodeError,
    MalformedClaimsError,
    decode,
    decode_payload,
    encode,
)
from actions_oidc_claims.enums import Other, RunnerEnvironment, Visibility
from actions_oidc_claims.jwt import claims_from_token
from actions_oidc_claims.models import Claims, make_dummy
from actions_oidc_claims.revisions import LATEST, SchemaRevision, default_revision

__all__ = [
    "LATEST",
    "Claims",
    "ClaimsSchemaError",
    "DecodeError",
    "MalformedClaimsError",
    "Other",
    "RunnerEnvironment",
    "SchemaRevision",
    "Visibility",
    "claims_from_token",
    "decode",
    "decode_payload",
    "default_revision",
    "encode",
    "make_dummy",
]
