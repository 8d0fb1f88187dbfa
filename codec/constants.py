"""Codec constants for substitution tables and encoded messages.

These values define the encoded message format and must match on
both the encoding and the decoding side.
"""

import string

# Letters covered by a complete substitution table, in generation order
ALPHABET = string.ascii_uppercase

# Inclusive range of numbers a letter may be substituted with
MIN_SUBSTITUTE = 1
MAX_SUBSTITUTE = 100

# Reserved separator between tokens of an encoded message (never escaped)
DELIMITER = '$'

# Upper bound on redraws when looking for an unused number for one letter
MAX_DRAW_ATTEMPTS = 1000

# Tag prefixes used by the tagged token format
NUMBER_TAG = 'N'
LITERAL_TAG = 'L'
