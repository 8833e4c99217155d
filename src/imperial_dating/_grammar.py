"""Lark grammar for Imperial date strings."""

from __future__ import annotations

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from imperial_dating._constants import MAX_MILLENNIUM_DIGITS
from imperial_dating._errors import (
    ERR_MSG_MALFORMED_IMPERIAL,
    ConversionError,
    MalformedImperialDateError,
)
from imperial_dating.imperial_date import ImperialDate

# Applied after spaces and periods are stripped, so "5 001 000.M2" and
# "5001000.M2" both reach the parser as "5001000M2".
IMPERIAL_GRAMMAR = r"""
start: CODE "M" MILLENNIUM

CODE: /[0-9]{7}/
MILLENNIUM: /[0-9]+/
"""


class _ImperialTransformer(Transformer):
    """Builds an ImperialDate from the parse tree."""

    def start(self, children):
        code, millennium = children
        if len(millennium) > MAX_MILLENNIUM_DIGITS:
            raise MalformedImperialDateError(
                ERR_MSG_MALFORMED_IMPERIAL,
                f"millennium has {len(millennium)} digits, limit is {MAX_MILLENNIUM_DIGITS}",
            )
        return ImperialDate(
            check_number=int(code[0]),
            year_fraction=int(code[1:4]),
            year_of_millennium=int(code[4:7]),
            millennium=int(millennium),
        )


_parser = Lark(IMPERIAL_GRAMMAR, parser="lalr", transformer=_ImperialTransformer())


def normalize(text: str) -> str:
    """Strip surrounding whitespace, interior spaces and periods."""
    return text.strip().replace(" ", "").replace(".", "")


def parse_imperial(text: str) -> ImperialDate:
    """Parse an Imperial date string into its fields.

    Raises:
        MalformedImperialDateError: If the text is not a string of the form
            seven digits, ``M``, one or more digits (after normalization).
    """
    if not isinstance(text, str):
        raise MalformedImperialDateError(
            ERR_MSG_MALFORMED_IMPERIAL,
            f"expected str, got {type(text).__name__}",
        )
    normalized = normalize(text)
    try:
        return _parser.parse(normalized)
    except UnexpectedInput as e:
        raise MalformedImperialDateError(
            ERR_MSG_MALFORMED_IMPERIAL,
            f"{text!r} is not an imperial date: {e}",
            wrapped=e,
        ) from e
    except VisitError as e:
        if isinstance(e.orig_exc, ConversionError):
            raise e.orig_exc from e
        raise
