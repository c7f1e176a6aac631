"""
Purpose: Text filter run before route planning.
What it does:
Narrows the full vendor list down to the ones matching a free-text query.

Matching rules:
- case-insensitive
- every token in the query must appear somewhere in the vendor's
  name, menu or location (or the words "food trucks carts")
- anything that is not a-z / 0-9 separates tokens and is otherwise ignored
- an empty query matches everything
"""

from __future__ import annotations

import re
from typing import List, Sequence

from .models import Vendor

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def tokenize(search_string: str) -> List[str]:
    return _NON_ALNUM.sub(" ", (search_string or "").lower()).split()


def matches(vendor: Vendor, tokens: Sequence[str]) -> bool:
    text = vendor.search_text()
    return all(token in text for token in tokens)


def filter_vendors(vendors: Sequence[Vendor], search_string: str) -> List[Vendor]:
    """
    Returns a new list with the vendors matching every token of search_string,
    in their original order.
    """
    tokens = tokenize(search_string)
    return [vendor for vendor in vendors if matches(vendor, tokens)]
