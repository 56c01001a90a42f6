"""Outputs derived from the contract state: serialization and summary exports."""

from lease_intake.sinks.markup import (
    TextRun,
    parse_summary,
    split_emphasis,
    strip_emphasis,
    to_print_html,
)
from lease_intake.sinks.serialization import (
    contract_to_dict,
    person_to_dict,
    quote_to_dict,
    serialize_value,
    to_dict,
)

__all__ = [
    "TextRun",
    "contract_to_dict",
    "parse_summary",
    "person_to_dict",
    "quote_to_dict",
    "serialize_value",
    "split_emphasis",
    "strip_emphasis",
    "to_dict",
    "to_print_html",
]
