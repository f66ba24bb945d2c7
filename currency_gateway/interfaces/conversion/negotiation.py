"""
Minimal content negotiation.

Only answers one question: does a header allow a given media type?
Quality weights and other parameters are ignored.
"""

from collections.abc import Iterable


def split_media_ranges(raw_value: str) -> list[str]:
    """Split one header value into bare media ranges.

    `"text/html, application/*;q=0.9"` gives `["text/html", "application/*"]`.
    """
    ranges = []
    for value in raw_value.split(","):
        value = value.strip()
        weight_start = value.find(";")
        if weight_start > -1:
            value = value[:weight_start].strip()
        ranges.append(value)
    return ranges


def header_allows(values: Iterable[str], expected: str) -> bool:
    """Check whether any occurrence of a header matches a media type.

    A range matches `type/subtype` when it is exactly `type/subtype`,
    `type/*` or `*/*`. An absent header (no values) allows everything.

    Args:
        values: Every occurrence of the header, as sent by the client.
        expected: The media type the server supports, e.g. application/json.

    Raises:
        ValueError: If `expected` is not of the form type/subtype.
    """
    main_type, slash, _ = expected.partition("/")
    if not slash:
        raise ValueError(f"invalid MIME type {expected}")

    values = list(values)
    if not values:
        return True

    accepted = {expected, f"{main_type}/*", "*/*"}
    return any(
        media_range in accepted
        for raw_value in values
        for media_range in split_media_ranges(raw_value)
    )
