import calendar
import logging
from typing import Optional, Protocol

from .constants import SINGLE, DOUBLE, RE_UUID, RE_DATETIME, RE_THING

logger = logging.getLogger(__name__)


class AmbiguityOracle(Protocol):
    """Tells whether a quoted strand would be read back as a richer literal."""

    def looks_like_uuid(self, text: str) -> bool: ...
    def looks_like_datetime(self, text: str) -> bool: ...
    def looks_like_record_id(self, text: str) -> bool: ...


class NullOracle:
    """Grammar without strand ambiguity: nothing ever needs a prefix."""

    def looks_like_uuid(self, text: str) -> bool:
        return False

    def looks_like_datetime(self, text: str) -> bool:
        return False

    def looks_like_record_id(self, text: str) -> bool:
        return False


class LegacyOracle:
    """
    Classifier for the old parser, which greedily turns quoted strands
    into uuids, datetimes and record ids.

    Every probe takes the quoted text (as produced by quote_str) and
    reports a non-match instead of raising.
    """

    def looks_like_uuid(self, text: str) -> bool:
        body = _unquote(text)
        return body is not None and RE_UUID.fullmatch(body) is not None

    def looks_like_datetime(self, text: str) -> bool:
        body = _unquote(text)
        if body is None:
            return False
        m = RE_DATETIME.fullmatch(body)
        if not m:
            return False

        year, month, day = int(m['year']), int(m['month']), int(m['day'])
        if not 1 <= month <= 12:
            return False
        # monthrange maps years outside 1..9999 onto the 400 year cycle
        if not 1 <= day <= calendar.monthrange(year, month)[1]:
            return False

        if m['hour'] is not None:
            if int(m['hour']) > 23 or int(m['minute']) > 59 or int(m['second']) > 59:
                return False
            if m['zh'] is not None and (int(m['zh']) > 23 or int(m['zm']) > 59):
                return False
        return True

    def looks_like_record_id(self, text: str) -> bool:
        body = _unquote(text)
        return body is not None and RE_THING.fullmatch(body) is not None


NULL_ORACLE = NullOracle()
LEGACY_ORACLE = LegacyOracle()


def is_ambiguous(text: str, oracle: AmbiguityOracle) -> bool:
    ambiguous = (
        oracle.looks_like_uuid(text)
        or oracle.looks_like_datetime(text)
        or oracle.looks_like_record_id(text)
    )
    if ambiguous:
        logger.debug("strand %s reads back as a non-string literal", text)
    return ambiguous


def _unquote(text: str) -> Optional[str]:
    if len(text) < 2 or text[0] not in (SINGLE, DOUBLE) or text[-1] != text[0]:
        return None
    return text[1:-1]
