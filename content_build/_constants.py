"""Common literal values used across content_build.

These constants keep default filenames and directory names centralized so the
configuration loader, pipeline stages, and tests share the same values without
drifting. Intended for internal use within the content_build package.

Examples
--------
>>> from content_build import _constants
>>> _constants.STAMP_TEMPLATE.format(stem="site-data")
'.site-data.stamp.json'
>>> _constants.DEFAULT_URL_PREFIX
'/content'
"""

DEFAULT_CONTENT_DIR = "content"
DEFAULT_SECTIONS_DIRNAME = "sections"
DEFAULT_SITE_FILENAME = "site.json"
DEFAULT_META_FILENAME = "meta.json"
DEFAULT_OUTPUT_MANIFEST = "src/generated/site-data.json"
DEFAULT_PUBLIC_DIR = "public/content"
DEFAULT_URL_PREFIX = "/content"

STAMP_TEMPLATE = ".{stem}.stamp.json"
PIECE_ID_SEPARATOR = "--"
SVG_SUFFIX = ".svg"
