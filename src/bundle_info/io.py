"""Reading and writing bundle information TOML documents."""

import logging
import tomllib
from pathlib import Path

import tomlkit

from bundle_info.schema import BundleInformation

logger = logging.getLogger(__name__)


def loads_bundle_info(text: str) -> BundleInformation:
    """Parse bundle information from TOML text.

    Raises:
        tomllib.TOMLDecodeError: If the text is not valid TOML
        SchemaViolationError: If the document does not match the schema
    """
    data = tomllib.loads(text)
    return BundleInformation.from_mapping(data)


def load_bundle_info(path: Path) -> BundleInformation:
    """Load bundle information from a TOML file.

    Args:
        path: Path to the bundle document

    Returns:
        Validated BundleInformation

    Raises:
        OSError: If the file cannot be read (e.g. FileNotFoundError)
        tomllib.TOMLDecodeError: If the file is not valid TOML
        SchemaViolationError: If the document does not match the schema
    """
    logger.debug("Loading bundle information from %s", path)
    info = loads_bundle_info(path.read_text(encoding="utf-8"))
    logger.debug(
        "Loaded bundle %s for kit %s %s", info.bundle.version, info.kit.name, info.kit.version
    )
    return info


def dumps_bundle_info(info: BundleInformation) -> str:
    """Serialize bundle information to TOML text.

    The output re-parses to an equal value but is not guaranteed to match the
    formatting of the document it was loaded from.
    """
    doc = tomlkit.document()
    for section_name, section in info.to_mapping().items():
        table = tomlkit.table()
        for key, value in section.items():
            table[key] = value
        doc[section_name] = table
    return tomlkit.dumps(doc)


def save_bundle_info(info: BundleInformation, path: Path) -> None:
    """Write bundle information to a TOML file, creating parent directories."""
    logger.debug("Saving bundle information to %s", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_bundle_info(info), encoding="utf-8")
