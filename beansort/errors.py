"""Errors raised while reading and sorting a ledger file.

Every error is fatal to the run. The command line converts them into a
click exception, nothing is recovered locally.
"""


class BeansortError(Exception):
    """Base class for all beansort errors."""

    def __init__(self, message, lineno=None, line=None):
        super().__init__(message)
        self.lineno = lineno
        self.line = line


class DateParseError(BeansortError):
    """A date shaped token is not a valid calendar date."""

    def __init__(self, token, lineno=None, line=None):
        super().__init__(f'Invalid date "{token}" on line {lineno}', lineno, line)
        self.token = token


class UnclassifiableLineError(BeansortError):
    def __init__(self, lineno, line):
        super().__init__(f'Can\'t define line {lineno}: "{line}"', lineno, line)


class MissingDirectiveError(BeansortError):
    def __init__(self, line, lineno=None):
        where = f' on line {lineno}' if lineno is not None else ''
        super().__init__(f'Couldn\'t find entry type{where}: "{line}"', lineno, line)


class InsufficientLinesError(BeansortError):
    """The skip count is larger than the number of lines in the file."""

    def __init__(self, requested, available):
        super().__init__(f'Skipped more lines than are available in the file '
                         f'({requested} requested, {available} available)')
        self.requested = requested
        self.available = available


class MisplacedIndentError(BeansortError):
    """An indented line does not follow a transaction or commodity."""

    def __init__(self, lineno, line=None):
        message = f'Misplaced indented line: Line {lineno}'
        if line is not None:
            message += f'\n"{line}"'
        super().__init__(message, lineno, line)


class UnknownSectionError(BeansortError):
    def __init__(self, section):
        super().__init__(f'Not handled section type "{section}"')
        self.section = section
