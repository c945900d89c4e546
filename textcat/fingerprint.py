from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .utils import normalize_text, create_ngram_table, rank_ngrams

MINDOCSIZE = 25
MAXNGRAMS = 400


class NotEnoughData(ValueError):
    """Raised when a text is too short to build a meaningful fingerprint."""


class Fingerprint:
    """
    An immutable, rank-ordered list of n-grams.

    Rank 1 is the most frequent n-gram. The n-grams are kept twice: as a
    tuple for iterating in rank order and as a dict for constant-time rank
    lookups during comparison.
    """
    __slots__ = ("_ngrams", "_ranks")

    def __init__(self, ngrams: Iterable[str]):
        """
        Args:
            ngrams: The n-grams, most frequent first. A repeated n-gram keeps
                    its first position so the ranks stay dense.
        """
        ranks: Dict[str, int] = {}
        for ngram in ngrams:
            if ngram not in ranks:
                ranks[ngram] = len(ranks) + 1
        object.__setattr__(self, "_ranks", ranks)
        object.__setattr__(self, "_ngrams", tuple(ranks))

    @classmethod
    def from_ranks(cls, ranks: Mapping[str, int]) -> "Fingerprint":
        """Builds a fingerprint from an n-gram -> rank mapping. Ranks must be exactly 1..K."""
        ordered = sorted(ranks.items(), key=lambda item: item[1])
        expected = list(range(1, len(ordered) + 1))
        if [rank for _, rank in ordered] != expected:
            raise ValueError(f"Ranks must be dense and start at 1, got {sorted(ranks.values())}")
        return cls(ngram for ngram, _ in ordered)

    def __setattr__(self, name, value):
        raise AttributeError("Fingerprint is immutable")

    def rank(self, ngram: str) -> Optional[int]:
        return self._ranks.get(ngram)

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(self._ranks.items())

    @property
    def ngrams(self) -> Tuple[str, ...]:
        return self._ngrams

    def to_dict(self) -> Dict[str, int]:
        return dict(self._ranks)

    def __contains__(self, ngram: object) -> bool:
        return ngram in self._ranks

    def __iter__(self) -> Iterator[str]:
        return iter(self._ngrams)

    def __len__(self) -> int:
        return len(self._ngrams)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fingerprint):
            return NotImplemented
        return self._ngrams == other._ngrams

    def __hash__(self) -> int:
        return hash(self._ngrams)

    def __repr__(self) -> str:
        preview = ", ".join(repr(ngram) for ngram in self._ngrams[:5])
        more = ", ..." if len(self._ngrams) > 5 else ""
        return f"Fingerprint([{preview}{more}], size={len(self._ngrams)})"


def create_fingerprint(text: str, max_ngrams: int = MAXNGRAMS) -> Fingerprint:
    """
    Creates a language "fingerprint" for a piece of text.

    The text is normalized, every n-gram of length 1 to 5 is counted, and
    the `max_ngrams` most frequent ones are kept in order of frequency.

    Args:
        text: The raw input text.
        max_ngrams: The number of top n-grams to keep.

    Returns:
        The fingerprint of the text.

    Raises:
        NotEnoughData: If the text is shorter than MINDOCSIZE characters.
    """
    # Checked on the raw text, before any normalization work is done.
    if len(text) < MINDOCSIZE:
        raise NotEnoughData(
            f"Text too short to classify: {len(text)} characters, at least {MINDOCSIZE} needed."
        )

    table = create_ngram_table(normalize_text(text))
    ranked: List[Tuple[str, int]] = rank_ngrams(table, max_ngrams)

    return Fingerprint(ngram for ngram, count in ranked)
