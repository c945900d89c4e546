import re
from collections import Counter
from typing import List, Tuple

MAXNGRAMSIZE = 5
PLACEHOLDER = "_"

# Digits and whitespace carry no language signal, a run of them becomes one boundary marker.
_NOISE_RUN = re.compile(r'[\d\s]+')


def normalize_text(text: str) -> str:
    """
    Prepares text for n-gram analysis.

    Every run of digits and whitespace is collapsed into a single
    placeholder character, so "abc123def" becomes "abc_def". Case and
    punctuation are kept, they are part of what makes a language recognisable.

    Args:
        text: The raw input string.

    Returns:
        The normalized buffer.
    """
    return _NOISE_RUN.sub(PLACEHOLDER, text)


def create_ngram_table(buffer: str, max_ngram_size: int = MAXNGRAMSIZE) -> Counter:
    """
    Counts every character n-gram of length 1..max_ngram_size in a buffer.

    From each start offset the n-gram grows one character at a time. Once an
    n-gram longer than one character ends in the placeholder, nothing longer
    is taken from that offset, so placeholders only ever sit at the borders.

    Args:
        buffer: The normalized text.
        max_ngram_size: The longest n-gram to count.

    Returns:
        A Counter mapping each n-gram to its number of occurrences.
    """
    table = Counter()
    size = len(buffer)

    for start in range(size):
        for length in range(1, max_ngram_size + 1):
            if start + length > size:
                break
            ngram = buffer[start:start + length]
            table[ngram] += 1
            if length > 1 and ngram[-1] == PLACEHOLDER:
                break

    return table


def rank_ngrams(table: Counter, limit: int) -> List[Tuple[str, int]]:
    """Returns the `limit` most frequent (ngram, count) pairs, ties in first-seen order."""
    # most_common() is a stable sort, equal counts keep the table's insertion order.
    return table.most_common(limit)
