"""
Package-wide defaults for wordbreak.
"""

# Seconds an async query waits before giving up
DEFAULT_TIMEOUT = 30.0

# Worker threads shared by the async API
MAX_WORKERS = 4

# File suffix of compiled (marisa_trie) dictionaries
COMPILED_SUFFIX = ".dic"

# Word list lines starting with this are ignored
COMMENT_PREFIX = "#"
