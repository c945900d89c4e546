import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .fingerprint import Fingerprint, NotEnoughData, create_fingerprint
from .profiles import DirectoryProfileStore, ProfileStore

MAXOUTOFPLACE = 400
MAXSCORE = 2147483647
THRESHOLDVALUE = 1.03


def compare(known: Fingerprint, unknown: Fingerprint, cutoff: int) -> int:
    """
    Calculates the 'out-of-place' distance between two fingerprints.

    For every n-gram of the unknown fingerprint, in rank order, the distance
    grows by how far its rank is from its rank in the known profile. An
    n-gram the profile does not have costs MAXOUTOFPLACE. Lower distance
    means a better match.

    Ranks are compared on the same 1-based scale on both sides, so a
    fingerprint is at distance 0 from itself. libtextcat subtracts the
    0-based position instead, so its scores come out higher than these by
    one for every shared n-gram that sits below its profile rank (and
    lower by one for the others). Rankings between languages are unaffected
    in practice, but raw scores are not comparable one to one.

    Args:
        known: The fingerprint of a language profile.
        unknown: The fingerprint of the text being classified.
        cutoff: Give up as soon as the distance exceeds this value.

    Returns:
        The distance, or MAXSCORE if it went past the cutoff.
    """
    total_distance = 0
    for i, ngram in enumerate(unknown):
        rank_in_lang = known.rank(ngram)
        if rank_in_lang is not None:
            # i is 0-based, profile ranks start at 1.
            total_distance += abs(rank_in_lang - (i + 1))
        else:
            total_distance += MAXOUTOFPLACE

        if total_distance > cutoff:
            return MAXSCORE

    return total_distance


class TextCat:
    """
    Identifies the language of a text with the TextCat n-gram method.

    The language profiles are loaded once, in the configured order, and are
    never changed afterwards, so one instance can be shared between threads.
    """
    def __init__(self, languages: Mapping[str, str], store: ProfileStore):
        """
        Loads a profile for every supported language.

        Args:
            languages: Ordered mapping of internal language name to its
                       2-letter code (e.g. {'english': 'en'}).
            store: Where the pre-ranked profiles come from.
        """
        profiles: List[Tuple[str, str, Fingerprint]] = []

        for name, code in languages.items():
            try:
                profiles.append((name, code, store.load_profile(name)))
            except (OSError, UnicodeDecodeError) as e:
                logging.warning(f"Could not load profile for '{name}', skipping. Details: {e}")

        self._profiles: Tuple[Tuple[str, str, Fingerprint], ...] = tuple(profiles)
        self._codes: Dict[str, str] = {name: code for name, code, _ in self._profiles}

        loaded_langs = list(self._codes)
        logging.info(f"TextCat is ready. Loaded {len(loaded_langs)} languages: {', '.join(loaded_langs)}")

    @classmethod
    def from_directory(cls, profile_dir: Path, languages: Mapping[str, str]) -> "TextCat":
        """Builds a classifier from the <name>.lm files in a directory."""
        return cls(languages, DirectoryProfileStore(profile_dir))

    @property
    def languages(self) -> Dict[str, str]:
        return dict(self._codes)

    def profile(self, name: str) -> Fingerprint:
        for profile_name, _, fingerprint in self._profiles:
            if profile_name == name:
                return fingerprint
        raise KeyError(name)

    def score(self, fingerprint: Fingerprint) -> List[Tuple[str, int]]:
        """
        Scores a fingerprint against every loaded profile.

        Each time a better score turns up, the cutoff for the remaining
        profiles shrinks to just above it, so hopeless profiles are dropped
        after a few n-grams and come back as MAXSCORE.

        Returns:
            (language name, score) pairs, best first. Equal scores keep the
            order the languages were configured in.
        """
        min_score = MAXSCORE
        threshold = MAXSCORE
        candidates = []

        for name, _, profile in self._profiles:
            score = compare(profile, fingerprint, threshold)
            candidates.append((name, score))
            if score < min_score:
                min_score = score
                threshold = int(score * THRESHOLDVALUE)

        return sorted(candidates, key=lambda item: item[1])

    def classify_fingerprint(self, fingerprint: Fingerprint) -> Optional[str]:
        if not self._profiles:
            return None
        best_match_lang, _ = self.score(fingerprint)[0]
        return self._codes[best_match_lang]

    def classify(self, text: str) -> Optional[str]:
        """
        Returns the 2-letter code of the language the text is written in,
        or None if the text is too short or no profiles are loaded.
        """
        try:
            fingerprint = create_fingerprint(text)
        except NotEnoughData as e:
            logging.debug(f"No match: {e}")
            return None
        return self.classify_fingerprint(fingerprint)

    def identify(self, text: str, top_n: int = 3) -> Dict[str, Any]:
        """
        Identifies the language of a text and returns a detailed analysis.

        Args:
            text: The input text to analyze.
            top_n: The number of top language matches to return in the distribution.

        Returns:
            A dictionary containing the prediction, score distribution, and top features,
            or a dictionary with a single "error" key.
        """
        if not self._profiles:
            return {"error": "Identifier has no profiles loaded."}

        try:
            text_profile = create_fingerprint(text)
        except NotEnoughData as e:
            return {"error": str(e)}

        sorted_scores = self.score(text_profile)
        best_match_lang, _ = sorted_scores[0]

        # The n-grams of the text that rank highest in the winning language.
        best_lang_profile = self.profile(best_match_lang)
        top_features = sorted(
            [ngram for ngram in text_profile if ngram in best_lang_profile],
            key=best_lang_profile.rank
        )[:5]

        return {
            "prediction": self._codes[best_match_lang],
            "distribution": [
                {"lang": self._codes[lang], "score": None if score == MAXSCORE else score}
                for lang, score in sorted_scores[:top_n]
            ],
            "top_features": top_features
        }
