"""Open enumerations for claims with a bounded-but-extensible vocabulary.

GitHub documents a fixed set of values for `repository_visibility` and
`runner_environment`, but adds new ones without notice. Each field therefore
decodes to either a known enum member or `Other`, which keeps the unrecognized
string verbatim so it survives a decode/encode round-trip.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer, PlainValidator


class Visibility(str, Enum):
    """Visibility of the repository the workflow runs in."""

    INTERNAL = "internal"
    PRIVATE = "private"
    PUBLIC = "public"


class RunnerEnvironment(str, Enum):
    """Type of runner executing the job."""

    GITHUB_HOSTED = "github-hosted"
    SELF_HOSTED = "self-hosted"


class Other(BaseModel):
    """A value outside the known vocabulary, preserved exactly as issued."""

    model_config = ConfigDict(frozen=True)

    value: str


def _open_enum(enum_cls: type[Enum]) -> Any:
    """Build a field type that tries `enum_cls` first and falls back to `Other`."""

    def validate(value: Any) -> Enum | Other:
        if isinstance(value, (enum_cls, Other)):
            return value
        if not isinstance(value, str):
            raise ValueError(f"expected a string, got {type(value).__name__}")
        try:
            return enum_cls(value)
        except ValueError:
            return Other(value=value)

    def serialize(value: Enum | Other) -> str:
        return value.value

    return Annotated[
        enum_cls | Other,
        PlainValidator(validate),
        PlainSerializer(serialize, return_type=str),
    ]


RepositoryVisibility = _open_enum(Visibility)
RunnerEnvironmentType = _open_enum(RunnerEnvironment)
