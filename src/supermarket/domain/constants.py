"""Business limits shared across the domain."""

MAX_QUANTITY_IN_ORDER = 1000
MAX_NAME_LENGTH = 100
