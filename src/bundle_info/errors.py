"""Exception types raised while parsing kit versions and bundle documents.

I/O failures (``OSError``) and TOML syntax errors (``tomllib.TOMLDecodeError``)
are raised by their own libraries and are not wrapped here.
"""

from dataclasses import dataclass
from enum import Enum


class BundleInfoError(Exception):
    """Base class for all bundle-info errors."""


class KitVersionError(BundleInfoError, ValueError):
    """A kit version string could not be parsed."""


class GrammarMismatchError(KitVersionError):
    """The string does not match the kit version grammar at all."""

    def __init__(self, text: str) -> None:
        super().__init__("version was not in valid format.")
        self.text = text


_COMPONENT_MESSAGES = {
    "epoch": "Unable to parse version epoch",
    "major": "Unable to parse version major value",
    "minor": "Unable to parse version minor value",
    "patch": "Unable to parse version patch value",
}


class ComponentOverflowError(KitVersionError):
    """A numeric component does not fit its declared width.

    ``value`` is None when the digits were too long to convert.
    """

    def __init__(self, component: str, value: int | None, maximum: int) -> None:
        super().__init__(_COMPONENT_MESSAGES[component])
        self.component = component
        self.value = value
        self.maximum = maximum


class ViolationKind(Enum):
    MISSING_FIELD = "missing_field"
    UNKNOWN_FIELD = "unknown_field"
    TYPE_MISMATCH = "type_mismatch"


@dataclass(frozen=True)
class SchemaViolation:
    """A single deviation from the bundle document schema."""

    kind: ViolationKind
    path: str  # Dotted field path, e.g. "wifi.enabled"
    message: str


class SchemaViolationError(BundleInfoError, ValueError):
    """The document does not have exactly the expected fields and types.

    Carries every violation found. ``kind`` and ``path`` refer to the first one.
    """

    def __init__(self, violations: list[SchemaViolation]) -> None:
        if not violations:
            raise ValueError("SchemaViolationError requires at least one violation")
        lines = [f"{v.path}: {v.message}" for v in violations]
        super().__init__("Invalid bundle document: " + "; ".join(lines))
        self.violations = tuple(violations)

    @property
    def kind(self) -> ViolationKind:
        return self.violations[0].kind

    @property
    def path(self) -> str:
        return self.violations[0].path
