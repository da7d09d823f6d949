"""The claim set carried by a GitHub Actions OIDC token.

Based on
https://docs.github.com/en/actions/deployment/security-hardening-your-deployments/about-security-hardening-with-openid-connect#understanding-the-oidc-token

Attribute names match the claim names in the token, except `git_ref`, which is
the `ref` claim. Optional fields are None when the claim is absent.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from actions_oidc_claims.enums import (
    RepositoryVisibility,
    RunnerEnvironment,
    RunnerEnvironmentType,
    Visibility,
)
from actions_oidc_claims.revisions import SchemaRevision, resolve_revision

# Far enough out that a dummy token never looks expired to a test.
DUMMY_EXPIRES_AT = 33247274880.0
DUMMY_ISSUED_AT = 1690366107.0


class Claims(BaseModel):
    """Typed, immutable view of a token payload.

    Strict mode keeps JSON types honest: timestamps take finite numbers only
    and string claims take strings only. Unknown claims are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        populate_by_name=True,
        extra="ignore",
        allow_inf_nan=False,
    )

    # Standard claims
    aud: str  # audience; the repository owner's URL unless customized
    iss: str  # https://token.actions.githubusercontent.com
    sub: str  # matched by the cloud provider's trust policy
    exp: float
    iat: float
    jti: str
    nbf: float

    # GitHub-specific claims
    actor: str
    actor_id: str
    base_ref: str  # target branch of a pull request
    environment: str | None = None  # only when the job references an environment
    event_name: str
    head_ref: str  # source branch of a pull request
    job_workflow_ref: str | None = None  # only for reusable workflows
    job_workflow_sha: str | None = None
    git_ref: str = Field(alias="ref")
    ref_type: str  # branch, tag
    repository_visibility: RepositoryVisibility
    repository: str
    repository_id: str
    repository_owner: str
    repository_owner_id: str
    run_id: str
    run_number: str
    run_attempt: str
    runner_environment: RunnerEnvironmentType
    workflow: str
    workflow_ref: str  # e.g. octo/app/.github/workflows/ci.yml@refs/heads/main
    workflow_sha: str

    # JOSE header values, carried only by SchemaRevision.V1
    alg: str | None = None
    kid: str | None = None
    typ: str | None = None

    @classmethod
    def make_dummy(cls, revision: SchemaRevision | None = None) -> Claims:
        """See `make_dummy`."""
        return make_dummy(revision)


def make_dummy(revision: SchemaRevision | None = None) -> Claims:
    """Fill in every field of a claim set with placeholders.

    Useful as a starting point in tests. The result does not resemble a token
    GitHub would issue, and callers will usually need to adjust fields with
    `model_copy(update=...)` before use. Optional claims are left unset unless
    `revision` requires them.
    """
    revision = resolve_revision(revision)
    placeholders = {
        "alg": "RS256",
        "kid": "",
        "typ": "JWT",
        "job_workflow_ref": "",
        "job_workflow_sha": "",
    }
    optional = {name: placeholders[name] for name in revision.required}

    return Claims(
        aud="",
        iss="",
        sub="",
        exp=DUMMY_EXPIRES_AT,
        iat=DUMMY_ISSUED_AT,
        jti="",
        nbf=DUMMY_ISSUED_AT,
        actor="",
        actor_id="",
        base_ref="",
        event_name="",
        head_ref="",
        git_ref="refs/heads/main",
        ref_type="branch",
        repository_visibility=Visibility.PUBLIC,
        repository="",
        repository_id="",
        repository_owner="",
        repository_owner_id="",
        run_id="",
        run_number="",
        run_attempt="1",
        runner_environment=RunnerEnvironment.GITHUB_HOSTED,
        workflow="",
        workflow_ref="",
        workflow_sha="",
        **optional,
    )
