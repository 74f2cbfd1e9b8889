"""GUID parser."""

import uuid
from typing import Optional

from .base import ParseResult, Validator


class UUIDValidator(Validator):
    """
    Accepts the forms understood by ``uuid.UUID``: hyphenated, bare 32 hex
    digits, braced and ``urn:uuid:`` prefixed.
    """

    def try_parse(self, raw: Optional[str]) -> ParseResult:
        if raw is None or not raw.strip():
            return None, "Please enter a valid GUID"
        try:
            return uuid.UUID(raw.strip()), None
        except ValueError:
            return None, "Please enter a valid GUID (e.g., 12345678-1234-1234-1234-123456789abc)"
