"""JSON encoding and decoding of claim sets.

Decoding translates every failure into a `DecodeError` so callers can reject a
token with one `except` clause:

  - MalformedClaimsError: the text is not JSON at all.
  - ClaimsSchemaError: the JSON does not fit the claim set; `field` names the
    offending claim when there is one.

An unrecognized visibility or runner environment string is not an error; it
decodes to `Other`. Claims the model does not know are ignored.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from actions_oidc_claims.models import Claims
from actions_oidc_claims.revisions import SchemaRevision, resolve_revision

logger = logging.getLogger(__name__)

# Claim names as they appear in the token, e.g. "ref" rather than "git_ref".
WIRE_KEYS = frozenset(field.alias or name for name, field in Claims.model_fields.items())


class DecodeError(ValueError):
    """A claims document could not be decoded."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class MalformedClaimsError(DecodeError):
    """The input is not syntactically valid."""


class ClaimsSchemaError(DecodeError):
    """The input parsed but does not match the claim set."""


def decode(text: str | bytes, revision: SchemaRevision | None = None) -> Claims:
    """Parse a JSON object into `Claims`.

    Args:
        text: The JSON payload, e.g. the decoded middle segment of a token.
        revision: Schema revision to hold the document to. Defaults to the
            configured revision (see `revisions.default_revision`).

    Raises:
        MalformedClaimsError: `text` is not valid JSON.
        ClaimsSchemaError: Not an object, a required claim is missing or null,
            or a claim has the wrong JSON type.
        ValueError: ACTIONS_OIDC_CLAIMS_REVISION names an unknown revision and
            `revision` was not passed. This is a configuration error, not a
            DecodeError.
    """
    try:
        payload = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        logger.debug(f"Rejected claims document: invalid JSON ({exc})")
        raise MalformedClaimsError(f"Claims are not valid JSON: {exc}") from exc
    return decode_payload(payload, revision)


def _reject_constant(name: str) -> Any:
    """Refuse the NaN and Infinity literals that json accepts but JSON does not."""
    raise ValueError(f"'{name}' is not a JSON number")


def decode_payload(payload: Any, revision: SchemaRevision | None = None) -> Claims:
    """Validate an already-parsed payload mapping into `Claims`."""
    revision = resolve_revision(revision)

    if not isinstance(payload, Mapping):
        logger.debug(f"Rejected claims document: top-level {type(payload).__name__}")
        raise ClaimsSchemaError(
            f"Claims must be a JSON object, got {type(payload).__name__}"
        )

    data = {
        key: value
        for key, value in payload.items()
        if key in WIRE_KEYS and key not in revision.excluded
    }

    try:
        claims = Claims.model_validate(data)
    except ValidationError as exc:
        raise _schema_error(exc) from exc

    # Revision-specific claims are optional on the model, so check them here.
    for name in sorted(revision.required):
        if getattr(claims, name) is None:
            logger.debug(f"Rejected claims document: '{name}' missing for {revision.value}")
            raise ClaimsSchemaError(
                f"Missing claim '{name}' required by schema revision {revision.value}",
                field=name,
            )

    return claims


def encode(claims: Claims, revision: SchemaRevision | None = None) -> str:
    """Serialize `claims` to canonical JSON using the token's claim names.

    Unset optional claims and claims the revision does not carry are omitted.
    """
    revision = resolve_revision(revision)
    return claims.model_dump_json(
        by_alias=True,
        exclude_none=True,
        exclude=set(revision.excluded),
    )


def _schema_error(exc: ValidationError) -> ClaimsSchemaError:
    """Reduce a pydantic ValidationError to its first offending claim."""
    error = exc.errors()[0]
    field = str(error["loc"][0]) if error["loc"] else None
    if error["type"] == "missing":
        message = f"Missing required claim '{field}'"
    else:
        message = f"Invalid value for claim '{field}': {error['msg']}"
    logger.debug(f"Rejected claims document: {message} ({exc.error_count()} error(s))")
    return ClaimsSchemaError(message, field=field)
