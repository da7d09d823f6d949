"""Shared test fixtures for claims tests.

Provides:
  - A realistic token payload as GitHub would issue it
  - Isolation from ACTIONS_OIDC_CLAIMS_REVISION set in the developer's shell
"""

import os
from typing import Any
from unittest.mock import patch

import pytest
from actions_oidc_claims.revisions import REVISION_ENV_VAR


@pytest.fixture(autouse=True)
def clean_revision_env():
    """Run every test with the default schema revision unconfigured."""
    env = {k: v for k, v in os.environ.items() if k != REVISION_ENV_VAR}
    with patch.dict("os.environ", env, clear=True):
        yield


@pytest.fixture
def payload() -> dict[str, Any]:
    """Payload of a push-triggered run on a self-hosted runner."""
    return {
        "aud": "https://example.org",
        "iss": "https://token.actions.githubusercontent.com",
        "sub": "repo:acme/app:ref:refs/heads/main",
        "exp": 1690369707,
        "iat": 1690366107,
        "jti": "example-id",
        "nbf": 1690365807,
        "actor": "octocat",
        "actor_id": "583231",
        "base_ref": "",
        "event_name": "push",
        "head_ref": "",
        "ref": "refs/heads/main",
        "ref_type": "branch",
        "repository_visibility": "public",
        "repository": "acme/app",
        "repository_id": "74",
        "repository_owner": "acme",
        "repository_owner_id": "65",
        "run_id": "5656111111",
        "run_number": "12",
        "run_attempt": "1",
        "runner_environment": "self-hosted",
        "workflow": "CI",
        "workflow_ref": "acme/app/.github/workflows/ci.yml@refs/heads/main",
        "workflow_sha": "e8f1b2d2a9c47b8e8e1c5c0a3f3c2b1a0d9e8f7c",
    }
