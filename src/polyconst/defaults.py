"""Fixed configuration for polyconst.

Plain module-level constants; the CLI flags override the few that are
meant to be chosen per run.
"""

import string

MIN_BASE = 2
MAX_BASE = 36

# Digit alphabet: 0-9 then a-z. Index of a character is its digit value.
DIGITS = string.digits + string.ascii_lowercase

METADATA_KEY = "keys"

METHODS = ("gauss", "lagrange")
DEFAULT_METHOD = "gauss"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
