"""Kit version identifiers.

Canonical form::

    <epoch>.<major>.<minor>.<patch>[dev][:<commit>[@<branch>]]

``epoch`` is 16 bits wide, ``major``/``minor``/``patch`` are 8 bits wide. The
commit is 5 to 40 lowercase hex characters and the branch is word characters.
"""

import re
from dataclasses import dataclass

from bundle_info.errors import ComponentOverflowError, GrammarMismatchError

EPOCH_MAX = 0xFFFF
COMPONENT_MAX = 0xFF

KIT_VERSION_PATTERN = re.compile(
    r"([0-9]+)\.([0-9]+)\.([0-9]+)\.([0-9]+)(dev)?(?::([0-9a-f]{5,40})(?:@(\w+))?)?"
)


@dataclass(frozen=True)
class BuildInfo:
    """Source control metadata embedded in a kit version."""

    commit: str
    branch: str | None = None

    def __str__(self) -> str:
        if self.branch is None:
            return self.commit
        return f"{self.commit}@{self.branch}"


@dataclass(frozen=True)
class KitVersion:
    """Immutable kit version.

    Components are range-checked on construction, so every instance can be
    formatted. Instances support equality but deliberately no ordering.
    """

    epoch: int
    major: int
    minor: int
    patch: int
    dev: bool = False
    build_info: BuildInfo | None = None

    def __post_init__(self) -> None:
        _check_range("epoch", self.epoch, EPOCH_MAX)
        _check_range("major", self.major, COMPONENT_MAX)
        _check_range("minor", self.minor, COMPONENT_MAX)
        _check_range("patch", self.patch, COMPONENT_MAX)

    @classmethod
    def parse(cls, text: str) -> "KitVersion":
        return parse_kit_version(text)

    def format(self) -> str:
        return format_kit_version(self)

    def __str__(self) -> str:
        return format_kit_version(self)


def parse_kit_version(text: str) -> KitVersion:
    """Parse a kit version string.

    Args:
        text: Version string in canonical form

    Returns:
        The parsed KitVersion

    Raises:
        GrammarMismatchError: If the string does not match the grammar
        ComponentOverflowError: If a numeric component exceeds its width
    """
    match = KIT_VERSION_PATTERN.fullmatch(text)
    if match is None:
        raise GrammarMismatchError(text)

    epoch, major, minor, patch, dev, commit, branch = match.groups()
    return KitVersion(
        epoch=_parse_component("epoch", epoch, EPOCH_MAX),
        major=_parse_component("major", major, COMPONENT_MAX),
        minor=_parse_component("minor", minor, COMPONENT_MAX),
        patch=_parse_component("patch", patch, COMPONENT_MAX),
        dev=dev is not None,
        build_info=_combine_build_info(commit, branch),
    )


def format_kit_version(version: KitVersion) -> str:
    """Format a KitVersion in canonical form."""
    text = f"{version.epoch}.{version.major}.{version.minor}.{version.patch}"
    if version.dev:
        text += "dev"
    if version.build_info is not None:
        text += f":{version.build_info}"
    return text


def _combine_build_info(commit: str | None, branch: str | None) -> BuildInfo | None:
    # A branch is only kept alongside a commit. The grammar cannot produce a
    # branch on its own, but the combination is still mapped to None.
    if commit is None:
        return None
    return BuildInfo(commit=commit, branch=branch)


def _parse_component(component: str, digits: str, maximum: int) -> int:
    # Reject over-long digit runs before int(), which refuses very long strings.
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(maximum)):
        raise ComponentOverflowError(component, None, maximum)
    value = int(significant)
    _check_range(component, value, maximum)
    return value


def _check_range(component: str, value: int, maximum: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Version {component} must be an int, got {type(value).__name__}")
    if not 0 <= value <= maximum:
        raise ComponentOverflowError(component, value, maximum)
