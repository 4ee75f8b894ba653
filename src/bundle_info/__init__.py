"""bundle-info: kit versions and bundle information documents.

Import from submodules:
- kit_version: KitVersion, BuildInfo, parse_kit_version, format_kit_version
- schema: BundleInformation and its section models
- io: load_bundle_info, loads_bundle_info, dumps_bundle_info, save_bundle_info
- errors: exception types
"""

from bundle_info.version import __version__ as __version__
