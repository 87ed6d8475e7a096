"""Turn the lines of a beancount file into a list of logical entries.

Each line is classified first, date lines are then turned into typed
entries by looking at the directive keyword following the date. Comment
lines are carried into the entry that follows them and indented lines
are folded into the transaction or commodity they continue.
"""

import datetime
import logging
import re

from beansort import printer
from beansort import sections
from beansort.entry import (DECO, NDECO, MULTILINE_KINDS, SENTINEL_DATE, Entry, EntryKind, Line,
                            LineKind)
from beansort.errors import (DateParseError, InsufficientLinesError, MisplacedIndentError,
                             MissingDirectiveError, UnclassifiableLineError)

logger = logging.getLogger(__name__)

RE_DATE = re.compile(r'^(\d{4}-[01]\d-[0-3]\d)')
RE_OPTION = re.compile(r'^option')
RE_COMMENT = re.compile(r'^;+')
RE_INDENTED = re.compile(r'^ +\S')
RE_DIRECTIVE = re.compile(r'^\d{4}-[01]\d-[0-3]\d (\w+|\*|!)')


def section_marker(deco=DECO, ndeco=NDECO):
    return ';' + deco * ndeco


def get_line_type(line, lineno, deco=DECO, ndeco=NDECO):
    """Classify a single line of text.

    The rules are tried in order and the first one matching wins. Section
    headings are comments too, so they must be tested before comments.

    Args:
      line: The line, without its line terminator.
      lineno: The 1-based line number, used in error messages.
      deco: The glyph used in section headings.
      ndeco: How many times the glyph opens a section heading.
    Returns:
      A Line instance.
    """
    match = RE_DATE.match(line)
    if match:
        token = match.group(1)
        try:
            date = datetime.datetime.strptime(token, '%Y-%m-%d').date()
        except ValueError as exc:
            raise DateParseError(token, lineno, line) from exc
        return Line(LineKind.DATE, date)
    if RE_OPTION.match(line):
        return Line(LineKind.OPTION)
    if line.startswith(section_marker(deco, ndeco)):
        return Line(LineKind.SECTION)
    if RE_COMMENT.match(line):
        return Line(LineKind.COMMENT)
    if RE_INDENTED.match(line):
        return Line(LineKind.INDENT)
    if line == '':
        return Line(LineKind.EMPTY)
    raise UnclassifiableLineError(lineno, line)


def construct_dated_entry(line, date, lineno=None):
    """Create an entry from a line starting with a date."""
    match = RE_DIRECTIVE.match(line)
    if match is None:
        raise MissingDirectiveError(line, lineno)
    directive = match.group(1)
    if directive in ('*', '!'):
        kind = EntryKind.TRANSACTION
    elif directive == 'commodity':
        kind = EntryKind.COMMODITY
    elif directive == 'price':
        kind = EntryKind.PRICE
    elif directive == 'open':
        kind = EntryKind.ACCOUNT
    else:
        kind = EntryKind.OTHER_ENTRY
    return Entry(line, date, kind)


def _strip_eol(line):
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line


def find_entries(lines, skipn=0, deco=DECO, ndeco=NDECO):
    """Assemble the logical entries of a ledger.

    Args:
      lines: An iterable of text lines, with or without line terminators.
      skipn: The number of leading lines kept verbatim as header entries.
      deco: The glyph used in section headings.
      ndeco: How many times the glyph opens a section heading.
    Returns:
      The list of entries in file order.
    """
    lines = iter(lines)
    entries = []

    for count in range(skipn):
        try:
            line = next(lines)
        except StopIteration:
            raise InsufficientLinesError(skipn, count) from None
        entries.append(Entry(_strip_eol(line), SENTINEL_DATE, EntryKind.HEADER))

    for lineno, line in enumerate(lines, skipn + 1):
        line = _strip_eol(line)
        line_type = get_line_type(line, lineno, deco, ndeco)

        if line_type.kind is LineKind.DATE:
            entry = construct_dated_entry(line, line_type.date, lineno)
        elif line_type.kind is LineKind.OPTION:
            entry = Entry(line, SENTINEL_DATE, EntryKind.OPTION)
        elif line_type.kind is LineKind.COMMENT:
            entry = Entry(line, SENTINEL_DATE, EntryKind.COMMENT)
        elif line_type.kind is LineKind.INDENT:
            entry = Entry(line, SENTINEL_DATE, EntryKind.INDENTED)
        else:
            # Section headings and empty lines.
            continue

        # Comments travel with the entry that follows them.
        if entries and entries[-1].kind is EntryKind.COMMENT:
            comment = entries.pop()
            entry = entry._replace(content=f'{comment.content}\n{entry.content}')

        if entry.kind is EntryKind.INDENTED:
            if not entries:
                raise MisplacedIndentError(lineno)
            last = entries.pop()
            if last.kind not in MULTILINE_KINDS:
                raise MisplacedIndentError(lineno, entry.content)
            entries.append(last.merge(entry))
        else:
            entries.append(entry)

    logger.debug('Found %d entries', len(entries))
    return entries


class LedgerFile:
    """A ledger file being sorted: its source and its entries.

    The entries are replaced wholesale by sort() and consumed by write().
    """

    def __init__(self, file, deco=DECO, ndeco=NDECO):
        self.file = file
        self.deco = deco
        self.ndeco = ndeco
        self.entries = []

    def find_entries(self, skipn=0):
        self.entries = find_entries(self.file, skipn, self.deco, self.ndeco)
        return self

    def sort(self):
        self.entries = sections.sort_entries(self.entries, self.deco, self.ndeco)
        return self

    def write(self, path, spaces=False):
        entries, self.entries = self.entries, []
        with open(path, 'w', encoding='utf-8') as output:
            printer.print_entries(entries, output, spaces)

    def close(self):
        self.file.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def read_file(path, deco=DECO, ndeco=NDECO):
    """Open the ledger at path for reading."""
    return LedgerFile(open(path, encoding='utf-8'), deco, ndeco)
