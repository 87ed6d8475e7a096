"""Group sorted entries into the fixed sections of the output file."""

import logging
import operator

from beansort.entry import DECO, NDECO, SENTINEL_DATE, Entry, EntryKind
from beansort.errors import UnknownSectionError

logger = logging.getLogger(__name__)

SECTIONS = (
    'Header',
    'Options',
    'Accounts',
    'Commodities',
    'Other Entries',
    'Prices',
    'Transactions',
)


def get_section_variant(section):
    """Return the entry kind collected by the named section."""
    if section == 'Header':
        return EntryKind.HEADER
    if section == 'Options':
        return EntryKind.OPTION
    if section == 'Accounts':
        return EntryKind.ACCOUNT
    if section == 'Commodities':
        return EntryKind.COMMODITY
    if section == 'Other Entries':
        return EntryKind.OTHER_ENTRY
    if section == 'Prices':
        return EntryKind.PRICE
    if section == 'Transactions':
        return EntryKind.TRANSACTION
    raise UnknownSectionError(section)


def section_heading(section, deco=DECO, ndeco=NDECO):
    """Render the three line heading of a section, e.g.

      ;€€€€€€€€€€€€€€€
      ;€€€€Options€€€€
      ;€€€€€€€€€€€€€€€
    """
    frame = deco * ndeco
    border = f';{frame}{deco * len(section)}{frame}'
    return f'{border}\n;{frame}{section}{frame}\n{border}'


def sort_entries(entries, deco=DECO, ndeco=NDECO):
    """Sort entries by date and group them by section.

    The sort is stable, entries sharing a date keep their file order.
    Every section but the header is preceded by a heading entry.
    """
    entries = sorted(entries, key=operator.attrgetter('date'))

    for entry in entries:
        if entry.kind is EntryKind.COMMENT:
            logger.warning('Dropping trailing comment not followed by an entry: %r',
                           entry.content)

    sorted_entries = []
    for section in SECTIONS:
        if section != 'Header':
            sorted_entries.append(
                Entry(section_heading(section, deco, ndeco), SENTINEL_DATE, EntryKind.SECTION))
        kind = get_section_variant(section)
        sorted_entries.extend(entry for entry in entries if entry.kind is kind)

    logger.debug('Sorted %d entries into %d sections', len(entries), len(SECTIONS))
    return sorted_entries
