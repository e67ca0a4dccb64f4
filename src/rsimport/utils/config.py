"""
Configuration constants to replace magic values throughout rsimport
"""

import os
import tempfile

# Module resolution constants
MODULE_SEPARATOR = "::"
MODULE_FILE_EXTENSION = ".rs"
DEFAULT_SEARCH_PATH = "."  # Implicit first search path (current working directory)
SEARCH_PATH_ENV_VAR = "RSIMPORT_PATH"  # Extra search paths for the CLI, os.pathsep-separated

# Symbol naming constants
IMPL_SYMBOL_PREFIX = "impl_"
IMPL_QUALIFIED_SEPARATOR = "_for_"

# Parser configuration constants (cache under temp dir to avoid cluttering project root)
DEFAULT_PARSER_CACHE_FILE = os.path.join(tempfile.gettempdir(), "rsimport_items_grammar.cache")
GRAMMAR_START_RULE = "source_file"

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"

# CLI constants
CLI_PROG_NAME = "rsimport"
