"""
Configuration constants for comply.
These are immutable library constants, not runtime configuration.
"""

# Policy rejection tagging
POLICY_REJECTION_PREFIX = "PolicyRejection"
DEFAULT_MESSAGE_TEMPLATE = "[{name}] policy is not met for the argument: {argument}"

# Argument rendering placeholders
NO_VALUE_PLACEHOLDER = "<no value>"
UNSERIALIZABLE_PLACEHOLDER = "<unserializable>"

# Compact JSON settings for argument rendering
JSON_SEPARATORS = (',', ':')  # No whitespace
JSON_SORT_KEYS = False  # Keep caller's key order
JSON_ENSURE_ASCII = False

# Logging
DEFAULT_LOG_LEVEL = "INFO"
LOGGER_NAMESPACE = "comply"
