"""Pydantic models for bundle information documents.

Every section is closed (unknown fields are rejected), strict (no type
coercion) and frozen. ``kit.version`` is stored as a KitVersion and encoded as
its canonical string.
"""

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    PlainSerializer,
    PlainValidator,
    StrictBool,
    StrictStr,
    ValidationError,
)

from bundle_info.errors import (
    KitVersionError,
    SchemaViolation,
    SchemaViolationError,
    ViolationKind,
)
from bundle_info.kit_version import KitVersion, format_kit_version, parse_kit_version


def _validate_kit_version(value: object) -> KitVersion:
    if isinstance(value, KitVersion):
        return value
    if not isinstance(value, str):
        raise ValueError("a valid kit version string")
    return parse_kit_version(value)


KitVersionField = Annotated[
    KitVersion,
    PlainValidator(_validate_kit_version),
    PlainSerializer(format_kit_version, return_type=str),
]


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class BundleVersionSection(_Section):
    version: StrictStr


class KitInformationSection(_Section):
    name: StrictStr
    version: KitVersionField


class WiFiInformationSection(_Section):
    ssid: StrictStr
    psk: StrictStr
    enabled: StrictBool
    region: StrictStr


class BundleInformation(_Section):
    """A complete bundle information document.

    Build instances from decoded TOML with ``from_mapping`` so that validation
    failures surface as SchemaViolationError.
    """

    bundle: BundleVersionSection
    kit: KitInformationSection
    wifi: WiFiInformationSection

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BundleInformation":
        """Validate a decoded document against the schema.

        Raises:
            SchemaViolationError: If any field is missing, unknown or mistyped
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            violations = [_to_violation(error) for error in exc.errors()]
            cause = _codec_error(exc) or exc
            raise SchemaViolationError(violations) from cause

    def to_mapping(self) -> dict[str, Any]:
        """Return the document as plain data, with the kit version as a string."""
        return self.model_dump()


_KIND_BY_ERROR_TYPE = {
    "missing": ViolationKind.MISSING_FIELD,
    "extra_forbidden": ViolationKind.UNKNOWN_FIELD,
}


def _to_violation(error: Any) -> SchemaViolation:
    path = ".".join(str(part) for part in error["loc"]) or "<document>"
    kind = _KIND_BY_ERROR_TYPE.get(error["type"], ViolationKind.TYPE_MISMATCH)
    cause = error.get("ctx", {}).get("error")
    message = str(cause) if isinstance(cause, Exception) else error["msg"]
    return SchemaViolation(kind=kind, path=path, message=message)


def _codec_error(exc: ValidationError) -> KitVersionError | None:
    for error in exc.errors():
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, KitVersionError):
            return cause
    return None
