import re
from typing import Optional

from algorithms.lcs import lcs_length

WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    return WHITESPACE.sub("", text)


def compute_similarity(text1: Optional[str], text2: Optional[str]) -> float:
    """
    LCS similarity of two documents, in [0, 1].
    None on either side scores 0.0; raw-equal texts score 1.0 before any
    whitespace is stripped. Otherwise all whitespace is removed and the
    LCS length is divided by the mean of the two stripped lengths.
    """
    if text1 is None or text2 is None:
        return 0.0
    if text1 == text2:
        return 1.0

    a, b = normalize_text(text1), normalize_text(text2)
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    l = lcs_length(a, b)
    return l / ((len(a) + len(b)) / 2.0)
