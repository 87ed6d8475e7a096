import logging
import os
import pathlib
import shutil

import click

from beansort import parser
from beansort.entry import DECO, NDECO
from beansort.errors import BeansortError

logger = logging.getLogger(__name__)


def validate_deco(ctx, param, value):
    if not value:
        raise click.BadParameter('the decoration glyph must not be empty')
    return value


def backup_file(path):
    """Copy path to <stem>_backup.<ext> next to it and return the copy's path."""
    path = pathlib.Path(path)
    stem = path.stem or 'finances'
    ext = path.suffix[1:] or 'beancount'
    backup = path.with_name(f'{stem}_backup.{ext}')
    shutil.copyfile(path, backup)
    click.echo(f'Backup done: {path} -> {backup}')
    return backup


@click.command()
@click.option('-f', '--file', 'filename', required=True,
              type=click.Path(exists=True, dir_okay=False),
              help='Filepath which has to be sorted.')
@click.option('-o', '--out', required=True, type=click.Path(dir_okay=False),
              help='Where to write the sorted file?')
@click.option('-s', '--skipn', default=0, show_default=True, type=click.IntRange(min=0),
              help='Leave the first n lines where they are. (e.g. for modline)')
@click.option('--spaces', is_flag=True, help='Leave one empty line between each entry.')
@click.option('--deco', default=DECO, show_default=True, callback=validate_deco,
              help='Glyph used to draw the section headings.')
@click.option('--ndeco', default=NDECO, show_default=True, type=click.IntRange(min=1),
              help='Number of glyphs framing the section names.')
@click.option('--no-backup', is_flag=True, help='Do not copy the file before sorting it.')
@click.option('-v', '--verbose', is_flag=True, help='Log what is being done.')
def main(filename, out, skipn, spaces, deco, ndeco, no_backup, verbose):
    """Sort a beancount file into sections ordered by date."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format='%(levelname)s: %(message)s')
    logger.info('Current directory is %s', os.getcwd())
    click.echo(f'Selected beancount file is {filename}')

    try:
        with parser.read_file(filename, deco, ndeco) as ledger:
            if not no_backup:
                backup_file(filename)
            ledger.find_entries(skipn).sort()
        ledger.write(out, spaces)
    except BeansortError as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == '__main__':
    main()
