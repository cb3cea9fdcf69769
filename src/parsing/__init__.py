"""Path decomposition and ``.strings`` parsing.

Public API:
  decompose_path, table_identity        path -> table identity decomposition
  load_strings_file, parse_strings_bytes decoding plus entry parsing
  parse_entries                          entry parsing of already decoded text
"""

from .path_decomposer import decompose_path, table_identity  # noqa: F401
from .strings_parser import load_strings_file, parse_entries, parse_strings_bytes  # noqa: F401
