from __future__ import annotations

import re
from typing import List, Union

# whitespace not enclosed in single or double quotes
_TOKEN_SPLIT = re.compile(r"""\s(?=(?:[^'"]|'[^']*'|"[^"]*")*$)""")
_TOKEN_TRIM = re.compile(r"""(^ +)|( +$)|(^["']+)|(["']+$)""")


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character from ``text``."""
    return "".join(ch for ch in text if not ch.isspace())


def is_unique(text: str) -> bool:
    """True if no character occurs more than once."""
    return len(set(text)) == len(text)


def in_blocks_of(text: str, block_size: int = 5, rejoin: bool = True) -> Union[str, List[str]]:
    """Drop whitespace and chunk ``text`` into groups of ``block_size``.

    With ``rejoin`` the groups come back as one space-separated string
    (``"QCTBG IJSWI H"``), otherwise as a list.
    """
    if block_size < 1:
        raise ValueError("block_size must be >= 1")
    compact = strip_whitespace(text)
    blocks = [compact[i:i + block_size] for i in range(0, len(compact), block_size)]
    if rejoin:
        return " ".join(blocks)
    return blocks


def tokenize(text: str) -> List[str]:
    """Split on whitespace outside quotes and strip surrounding quotes.

    >>> tokenize('AQ "F P" YF')
    ['AQ', 'F P', 'YF']
    """
    tokens = [_TOKEN_TRIM.sub("", tok) for tok in _TOKEN_SPLIT.split(text) if tok]
    return [tok for tok in tokens if tok]
