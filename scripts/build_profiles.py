import sys
import logging
from pathlib import Path
from itertools import islice

from datasets import load_dataset

# Make the textcat package importable when the script is run from a checkout.
ROOT_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT_DIR))

from textcat.config import settings, configure_logging
from textcat.fingerprint import MAXNGRAMS
from textcat.profiles import write_fingerprint
from textcat.utils import normalize_text, create_ngram_table, rank_ngrams

# Configuration
DATASET = "unimelb-nlp/wikiann"
MAX_SAMPLES_PER_LANG = 25_000  # Using an underscore for readability

configure_logging(settings.log_level)


def build_profile_text(lang_code: str) -> str:
    """Streams WikiANN sentences for one language and joins them into one text."""
    # Using streaming=True is memory-efficient, we only pull the samples we need.
    dataset = load_dataset(DATASET, lang_code, split="train", streaming=True)
    samples = islice(dataset, MAX_SAMPLES_PER_LANG)
    return "\n".join(" ".join(sample['tokens']) for sample in samples)


def main():
    """
    Main function to orchestrate the profile generation process.
    """
    profiles_dir = settings.profile_dir
    profiles_dir.mkdir(parents=True, exist_ok=True)
    logging.info(f"Starting Language Profile Generation into {profiles_dir}")

    failed = []
    for lang_name, lang_code in settings.language_map.items():
        logging.info(f"Processing {lang_name} ({lang_code})...")

        try:
            logging.info(f"  > Loading dataset '{DATASET}' for '{lang_code}'.")
            raw_text = build_profile_text(lang_code)

            if not raw_text:
                logging.warning(f"  > No text found for {lang_name}. Skipping.")
                failed.append(lang_name)
                continue

            logging.info("  > Counting n-grams.")
            table = create_ngram_table(normalize_text(raw_text))
            ranked = rank_ngrams(table, MAXNGRAMS)

            profile_path = profiles_dir / f"{lang_name}.lm"
            write_fingerprint(profile_path, ranked)
            logging.info(f"  > Saved {len(ranked)} n-grams to {profile_path}")

        except Exception as e:
            logging.error(f"  > FAILED to process {lang_name}. Error: {e}")
            failed.append(lang_name)

    if failed:
        logging.warning(f"Finished with {len(failed)} missing profiles: {', '.join(failed)}")
    else:
        logging.info("All language profiles generated successfully!")


if __name__ == "__main__":
    main()
