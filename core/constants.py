"""
Application constants for the domain registry.

Contains field limits shared by validation and the ORM schema, and
pagination defaults used by the HTTP layer.
"""

# =============================================================================
# Field Limits
# =============================================================================

# Maximum length of account emails and domain names
MAX_NAME_LENGTH = 128

# Column width for opaque external identity references
MAX_EXTERNAL_ID_LENGTH = 128

# =============================================================================
# Pagination
# =============================================================================

DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 1000
