import sys


def print_entries(entries, output=None, spaces=False):
    """Write the rendered entries to a file.

    Args:
      entries: A list of entries.
      output: An optional file object to write the entries to.
      spaces: Insert an empty line after every entry.
    """
    output = output or sys.stdout

    for entry in entries:
        output.write(entry.content)
        output.write('\n')
        if spaces:
            output.write('\n')
