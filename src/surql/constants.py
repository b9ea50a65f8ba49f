import re
from dataclasses import dataclass

# Delimiters
SINGLE = "'"
DOUBLE = '"'
BACKTICK = '`'
BRACKETL = '⟨'
BRACKETR = '⟩'
BACKSLASH = '\\'
COLON = ':'

# Escapes for an embedded closing delimiter
DOUBLE_ESC = '\\"'
BACKTICK_ESC = '\\`'
BRACKET_ESC = '\\⟩'
BACKSLASH_ESC = '\\\\'

# Tag that forces the old parser to read a quoted value as a plain strand
STRAND_PREFIX = 's'


@dataclass(frozen=True)
class EscapePolicy:
    open: str
    close: str
    escape: str
    numeric: bool = False


KEY = EscapePolicy(DOUBLE, DOUBLE, DOUBLE_ESC)
RID = EscapePolicy(BRACKETL, BRACKETR, BRACKET_ESC, numeric=True)
IDENT = EscapePolicy(BACKTICK, BACKTICK, BACKTICK_ESC, numeric=True)

# Literal shapes recognised by the old parser inside a quoted strand
RE_UUID = re.compile(
    r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'
)

RE_DATETIME = re.compile(r'''
    (?P<year>[+-]?\d{4})-(?P<month>\d{2})-(?P<day>\d{2})
    (?:
        T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})
        (?:\.\d+)?
        (?:Z|[+-](?P<zh>\d{2}):(?P<zm>\d{2}))
    )?
''', re.VERBOSE)

_RE_PLAIN = r'[A-Za-z0-9_]+'
_RE_BRACKETED = r'⟨(?:[^⟩\\]|\\.)*⟩'
_RE_BACKTICKED = r'`(?:[^`\\]|\\.)*`'

RE_THING = re.compile(r'''
    (?:{plain}|{bracketed}|{backticked})
    :
    (?:{plain}|-\d+|{bracketed}|{backticked}|\{{.*\}}|\[.*\])
'''.format(plain=_RE_PLAIN, bracketed=_RE_BRACKETED, backticked=_RE_BACKTICKED),
    re.VERBOSE | re.DOTALL)
