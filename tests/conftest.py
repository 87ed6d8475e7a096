"""
conftest.py
-----------
Shared pytest fixtures for beansort tests.
"""
import pytest

from beansort import parser, sections


@pytest.fixture
def unsorted_ledger():
    """A small ledger with directives in no particular order."""
    return """\
;; -*- mode: beancount -*-
2022-04-17 * "Schlosspark Pankow" "Brezel"
  Expenses:Food        2.50 EUR
  Assets:Cash

option "operating_currency" "EUR"
2020-01-01 open Assets:Cash
; price of the day
2022-04-18 price EUR 1.08 USD
2020-01-01 commodity EUR
  name: "Euro"
2022-04-16 * "Bakery"
  Expenses:Food        1.20 EUR
  Assets:Cash
2021-06-30 balance Assets:Cash 0 EUR
2020-01-01 open Expenses:Food
"""


@pytest.fixture
def ledger_file(tmp_path, unsorted_ledger):
    """The unsorted ledger written to disk."""
    path = tmp_path / "finances.beancount"
    path.write_text(unsorted_ledger, encoding="utf-8")
    return path


@pytest.fixture
def sort_text():
    """Run the whole pipeline over a string and return the rendered result."""
    def run(text, skipn=0):
        entries = parser.find_entries(text.splitlines(keepends=True), skipn)
        return "".join(entry.content + "\n" for entry in sections.sort_entries(entries))
    return run
