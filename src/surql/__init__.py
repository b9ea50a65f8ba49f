from .escape import (
    quote_str, quote_plain_str,
    escape_key, escape_rid, escape_ident, escape_thing,
    escape_with, escape_normal, escape_numeric,
    render_quoted_string, render_plain_string,
    render_key, render_identifier, render_record_id_segment,
    render_escaped_normal, render_escaped_numeric,
)
from .constants import EscapePolicy, KEY, RID, IDENT
from .literals import AmbiguityOracle, NullOracle, LegacyOracle, NULL_ORACLE, LEGACY_ORACLE
from .errors import SurqlError, SurqlEncodeError

__all__ = [
    'quote_str', 'quote_plain_str',
    'escape_key', 'escape_rid', 'escape_ident', 'escape_thing',
    'escape_with', 'escape_normal', 'escape_numeric',
    'render_quoted_string', 'render_plain_string',
    'render_key', 'render_identifier', 'render_record_id_segment',
    'render_escaped_normal', 'render_escaped_numeric',
    'EscapePolicy', 'KEY', 'RID', 'IDENT',
    'AmbiguityOracle', 'NullOracle', 'LegacyOracle', 'NULL_ORACLE', 'LEGACY_ORACLE',
    'SurqlError', 'SurqlEncodeError',
]
