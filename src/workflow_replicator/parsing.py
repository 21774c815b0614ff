"""
Parsing of comma-separated action inputs.
"""

import re
from typing import List

_QUOTES = re.compile(r"['\"]+")


def parse_comma_list(value: str) -> List[str]:
    """
    Split a comma-separated input into trimmed, unquoted entries.

    Every single or double quote is removed, wherever it appears in an
    entry. Order is preserved and nothing is de-duplicated; a trailing comma
    yields an empty entry.

    Args:
        value: Raw input such as ``"a, b ,'c'"``

    Returns:
        List of entries
    """
    return [_QUOTES.sub('', item.strip()) for item in value.split(',')]
