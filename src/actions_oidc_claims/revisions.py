"""Schema revisions of the GitHub Actions OIDC claim set.

The claim set has changed shape over time. Rather than keeping one model per
revision, `Claims` is the superset of every revision and each `SchemaRevision`
states which of the optional claims it requires and which it does not carry:

  - V1: the first published set. Still carries the JOSE header values
    (`alg`, `kid`, `typ`) alongside the payload, always names the reusable
    workflow, and predates the `environment` claim.
  - V2: header values dropped, reusable workflow still always present.
  - V3: current. `environment`, `job_workflow_ref` and `job_workflow_sha`
    appear only when the job uses them.

Excluded claims are ignored on decode and never written on encode.
"""

from __future__ import annotations

import os
from enum import Enum

REVISION_ENV_VAR = "ACTIONS_OIDC_CLAIMS_REVISION"

HEADER_CLAIMS = frozenset({"alg", "kid", "typ"})
REUSABLE_WORKFLOW_CLAIMS = frozenset({"job_workflow_ref", "job_workflow_sha"})


class SchemaRevision(str, Enum):
    """A published revision of the claim set."""

    V1 = "v1"
    V2 = "v2"
    V3 = "v3"

    @property
    def required(self) -> frozenset[str]:
        """Optional model fields that this revision requires."""
        return _REQUIRED[self]

    @property
    def excluded(self) -> frozenset[str]:
        """Model fields this revision does not carry."""
        return _EXCLUDED[self]


LATEST = SchemaRevision.V3

_REQUIRED: dict[SchemaRevision, frozenset[str]] = {
    SchemaRevision.V1: HEADER_CLAIMS | REUSABLE_WORKFLOW_CLAIMS,
    SchemaRevision.V2: REUSABLE_WORKFLOW_CLAIMS,
    SchemaRevision.V3: frozenset(),
}

_EXCLUDED: dict[SchemaRevision, frozenset[str]] = {
    SchemaRevision.V1: frozenset({"environment"}),
    SchemaRevision.V2: HEADER_CLAIMS | {"environment"},
    SchemaRevision.V3: HEADER_CLAIMS,
}


def default_revision() -> SchemaRevision:
    """Return the revision used when a caller does not pass one.

    Reads ACTIONS_OIDC_CLAIMS_REVISION from the environment; unset means LATEST.
    """
    raw = os.environ.get(REVISION_ENV_VAR, "").strip().lower()
    if not raw:
        return LATEST
    try:
        return SchemaRevision(raw)
    except ValueError:
        accepted = ", ".join(r.value for r in SchemaRevision)
        raise ValueError(
            f"{REVISION_ENV_VAR}={raw!r} is not a known schema revision. "
            f"Accepted values: {accepted}."
        ) from None


def resolve_revision(revision: SchemaRevision | None) -> SchemaRevision:
    """Return `revision`, or the configured default when it is None."""
    return default_revision() if revision is None else revision
