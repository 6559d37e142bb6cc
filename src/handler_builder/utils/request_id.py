"""Short random request identifiers used to correlate log lines of one invocation."""

import random
import string

REQUEST_ID_ALPHABET = string.digits + string.ascii_lowercase
REQUEST_ID_LENGTH = 13


def generate_request_id() -> str:
    """
    Return a random base-36 string.

    Not cryptographically random and not guaranteed unique; good enough for
    tracing, never use it for anything security related.
    """
    return ''.join(random.choices(REQUEST_ID_ALPHABET, k=REQUEST_ID_LENGTH))
