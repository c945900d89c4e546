import logging
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Protocol, Tuple

from .fingerprint import Fingerprint

PROFILE_SUFFIX = ".lm"


class ProfileStore(Protocol):
    """Anything that can hand out a pre-ranked fingerprint for a language name."""

    def load_profile(self, name: str) -> Fingerprint:
        ...


def parse_fingerprint(lines: Iterable[str]) -> Fingerprint:
    """
    Parses the lines of a .lm profile.

    Each line holds an n-gram, optionally followed by a tab and anything
    else (usually its count). Only the n-gram is used, and the line order
    is the rank order.

    Ranks are renumbered to stay dense: blank lines are skipped and a
    repeated n-gram keeps its first line, so every n-gram after one of
    those ranks below its line number.
    """
    ngrams = []
    for line in lines:
        ngram, _, _ = line.rstrip("\r\n").partition("\t")
        if ngram:
            ngrams.append(ngram)
    return Fingerprint(ngrams)


def read_fingerprint(path: Path) -> Fingerprint:
    with path.open('r', encoding='utf-8', newline='') as f:
        return parse_fingerprint(f)


def write_fingerprint(path: Path, ranked: List[Tuple[str, int]]) -> None:
    """Saves (ngram, count) pairs, most frequent first, in the .lm format."""
    with path.open('w', encoding='utf-8', newline='\n') as f:
        for ngram, count in ranked:
            f.write(f"{ngram}\t {count}\n")


class DirectoryProfileStore:
    """
    Loads language profiles from `<profile_dir>/<name>.lm` files.
    """
    def __init__(self, profile_dir: Path):
        self.profile_dir = Path(profile_dir)
        if not self.profile_dir.is_dir():
            raise FileNotFoundError(f"Profiles directory not found at {self.profile_dir}")

    def path_for(self, name: str) -> Path:
        return self.profile_dir / f"{name}{PROFILE_SUFFIX}"

    def available(self) -> List[str]:
        """Lists the language names that have a profile file, sorted by name."""
        return sorted(path.stem for path in self.profile_dir.glob(f"*{PROFILE_SUFFIX}"))

    def load_profile(self, name: str) -> Fingerprint:
        path = self.path_for(name)
        fingerprint = read_fingerprint(path)
        logging.debug(f"Read {len(fingerprint)} n-grams from {path}")
        return fingerprint


class MemoryProfileStore:
    """Serves profiles that are already in memory, keyed by language name."""

    def __init__(self, profiles: Mapping[str, Fingerprint]):
        self._profiles: Dict[str, Fingerprint] = dict(profiles)

    def load_profile(self, name: str) -> Fingerprint:
        try:
            return self._profiles[name]
        except KeyError:
            raise FileNotFoundError(f"No profile for language '{name}'") from None
