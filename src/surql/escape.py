from typing import Any, Optional
from .constants import (
    SINGLE, DOUBLE, BACKSLASH, COLON,
    DOUBLE_ESC, BACKSLASH_ESC, STRAND_PREFIX,
    EscapePolicy, KEY, RID, IDENT
)
from .errors import SurqlEncodeError
from .literals import AmbiguityOracle, NULL_ORACLE, LEGACY_ORACLE, is_ambiguous


def quote_str(s: str) -> str:
    """
    Quote a string with single or double quotes:

        cat          -> 'cat'
        cat's        -> "cat's"
        cat's "toy"  -> "cat's \\"toy\\""

    Backslashes are always doubled. Double quotes are escaped only when
    they are the delimiter; inside single quotes they are left as is.
    """
    _check_str('quote_str', s)
    quote = DOUBLE if SINGLE in s else SINGLE
    escape_double = quote == DOUBLE

    out = [quote]
    last = 0
    for i, c in enumerate(s):
        if c == BACKSLASH:
            esc = BACKSLASH_ESC
        elif c == DOUBLE and escape_double:
            esc = DOUBLE_ESC
        else:
            continue
        out.append(s[last:i])
        out.append(esc)
        last = i + 1
    out.append(s[last:])
    out.append(quote)
    return "".join(out)


def quote_plain_str(s: str, oracle: Optional[AmbiguityOracle] = None) -> str:
    # The old parser reads quoted uuids, datetimes and record ids as those
    # types, so such strands get an explicit string tag.
    ret = quote_str(s)
    if oracle is not None and is_ambiguous(ret, oracle):
        ret = STRAND_PREFIX + ret
    return ret


def escape_key(s: str) -> str:
    """Escapes an object key if necessary."""
    return escape_with(s, KEY)


def escape_rid(s: str) -> str:
    """Escapes a record id segment if necessary."""
    return escape_with(s, RID)


def escape_ident(s: str) -> str:
    """Escapes an identifier if necessary."""
    return escape_with(s, IDENT)


def escape_thing(table: str, key: str) -> str:
    return f"{escape_rid(table)}{COLON}{escape_rid(key)}"


def escape_with(s: str, policy: EscapePolicy) -> str:
    if policy.numeric:
        return escape_numeric(s, policy.open, policy.close, policy.escape)
    return escape_normal(s, policy.open, policy.close, policy.escape)


def escape_normal(s: str, l: str, r: str, e: str) -> str:
    """
    Wrap `s` in `l`...`r` unless it is made only of ASCII letters, digits
    and underscores. Occurrences of `r` inside are replaced with `e`.

    When nothing needs escaping the input object itself is returned.
    """
    _check_str('escape_normal', s)
    for c in s:
        if not _is_safe(c):
            return _wrap(s, l, r, e)
    return s


def escape_numeric(s: str, l: str, r: str, e: str) -> str:
    """
    Like escape_normal, but an all-digit value is wrapped as well, so it
    is not read back as a number.
    """
    _check_str('escape_numeric', s)
    numeric = True
    for c in s:
        if not _is_safe(c):
            return _wrap(s, l, r, e)
        if not '0' <= c <= '9':
            numeric = False
    if numeric:
        return _wrap(s, l, r, e)
    return s


def render_plain_string(s: str, compat_mode: bool = False) -> str:
    return quote_plain_str(s, LEGACY_ORACLE if compat_mode else NULL_ORACLE)


render_quoted_string = quote_str
render_key = escape_key
render_identifier = escape_ident
render_record_id_segment = escape_rid
render_escaped_normal = escape_normal
render_escaped_numeric = escape_numeric


# Helpers
def _is_safe(c: str) -> bool:
    return c == '_' or (c.isascii() and c.isalnum())


def _wrap(s: str, l: str, r: str, e: str) -> str:
    return f"{l}{s.replace(r, e)}{r}"


def _check_str(func: str, value: Any):
    if not isinstance(value, str):
        raise SurqlEncodeError(func, value)
