"""Tests for the Claims model and the dummy builder."""

import pytest
from actions_oidc_claims import (
    Claims,
    RunnerEnvironment,
    SchemaRevision,
    Visibility,
    decode,
    encode,
    make_dummy,
)
from actions_oidc_claims.models import DUMMY_EXPIRES_AT
from pydantic import ValidationError


class TestMakeDummy:
    def test_placeholder_values(self):
        dummy = make_dummy()

        assert dummy.aud == ""
        assert dummy.sub == ""
        assert dummy.exp == DUMMY_EXPIRES_AT
        assert dummy.git_ref == "refs/heads/main"
        assert dummy.ref_type == "branch"
        assert dummy.run_attempt == "1"

    def test_default_enumerations(self):
        dummy = make_dummy()
        assert dummy.repository_visibility is Visibility.PUBLIC
        assert dummy.runner_environment is RunnerEnvironment.GITHUB_HOSTED

    def test_optional_claims_unset(self):
        dummy = make_dummy()
        assert dummy.environment is None
        assert dummy.job_workflow_ref is None
        assert dummy.job_workflow_sha is None
        assert dummy.alg is None

    def test_far_future_expiry(self):
        dummy = make_dummy()
        assert dummy.exp > dummy.iat
        assert dummy.nbf == dummy.iat

    def test_classmethod_matches_function(self):
        assert Claims.make_dummy() == make_dummy()

    def test_customize_with_model_copy(self):
        dummy = make_dummy().model_copy(
            update={"repository": "acme/app", "environment": "production"}
        )
        assert dummy.repository == "acme/app"
        assert decode(encode(dummy)) == dummy

    @pytest.mark.parametrize("revision", list(SchemaRevision))
    def test_roundtrips_under_every_revision(self, revision):
        dummy = make_dummy(revision)
        assert decode(encode(dummy, revision), revision) == dummy

    def test_v1_dummy_has_header_claims(self):
        dummy = make_dummy(SchemaRevision.V1)
        assert dummy.alg == "RS256"
        assert dummy.typ == "JWT"
        assert dummy.kid == ""
        assert dummy.job_workflow_ref == ""


class TestClaimsModel:
    def test_is_immutable(self):
        dummy = make_dummy()
        with pytest.raises(ValidationError):
            dummy.sub = "repo:acme/app:ref:refs/heads/main"

    def test_is_hashable(self):
        assert hash(make_dummy()) == hash(make_dummy())

    def test_construct_by_wire_key(self):
        data = make_dummy().model_dump(by_alias=True)
        data["ref"] = "refs/tags/v1.0"
        claims = Claims(**data)
        assert claims.git_ref == "refs/tags/v1.0"

    def test_enumeration_accepts_plain_strings(self):
        claims = make_dummy().model_dump()
        claims["repository_visibility"] = "private"
        assert Claims(**claims).repository_visibility is Visibility.PRIVATE

    def test_rejects_string_timestamp(self):
        data = make_dummy().model_dump()
        data["exp"] = "33247274880"
        with pytest.raises(ValidationError):
            Claims(**data)
