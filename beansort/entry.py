"""Entry and line types shared by the parser and the section sorter."""

import datetime
import enum
from typing import NamedTuple, Optional

# Date given to entries without an intrinsic date.
SENTINEL_DATE = datetime.date(1990, 1, 1)

# Glyph of the section headings and how often it frames the section name.
DECO = '€'
NDECO = 4


class EntryKind(enum.Enum):
    ACCOUNT = 'account'
    OPTION = 'option'
    COMMODITY = 'commodity'
    OTHER_ENTRY = 'other entry'
    PRICE = 'price'
    TRANSACTION = 'transaction'
    INDENTED = 'indented'
    SECTION = 'section'
    HEADER = 'header'
    COMMENT = 'comment'


# Kinds that may remain in the assembled entry list.
STORABLE_KINDS = frozenset({
    EntryKind.HEADER,
    EntryKind.OPTION,
    EntryKind.ACCOUNT,
    EntryKind.COMMODITY,
    EntryKind.PRICE,
    EntryKind.TRANSACTION,
    EntryKind.OTHER_ENTRY,
    EntryKind.COMMENT,
})

# Directives that absorb the indented lines following them.
MULTILINE_KINDS = frozenset({EntryKind.TRANSACTION, EntryKind.COMMODITY})


class LineKind(enum.Enum):
    DATE = 'date'
    OPTION = 'option'
    SECTION = 'section'
    COMMENT = 'comment'
    INDENT = 'indent'
    EMPTY = 'empty'


class Line(NamedTuple):
    """A classified line. Only DATE lines carry a date."""
    kind: LineKind
    date: Optional[datetime.date] = None


class Entry(NamedTuple):
    """One logical directive: its rendered text, date and kind."""
    content: str
    date: datetime.date
    kind: EntryKind

    def merge(self, other):
        """Append the content of other, keeping this entry's date and kind."""
        return self._replace(content=f'{self.content}\n{other.content}')
