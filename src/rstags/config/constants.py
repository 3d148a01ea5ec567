"""Configuration constants.

Values here are not user-configurable. For configurable values, see
models.py.
"""

PROGRAM_NAME = "rstags"
"""Name written to the !_TAG_PROGRAM_NAME pseudo-tag."""

PROGRAM_VERSION = "0.1.0"

TAG_FILE_FORMAT = 2
"""Extended ctags format (kind field after the ;" separator)."""

DEFAULT_EXTENSIONS: tuple[str, ...] = (".rs",)

DEFAULT_TAGS_FILE = "tags"

CONFIG_DIR_NAME = ".rstags"
