# main.py

import sys
from pathlib import Path
from typing import Dict, Any, Optional

import click

from textcat.config import settings, configure_logging
from textcat.core import TextCat

# A helper to pretty-print our results dictionary
def display_results(result: Dict[str, Any]):
    """Formats and prints the identification results in a user-friendly way."""
    prediction = result.get("prediction", "N/A")
    distribution = result.get("distribution", [])
    features = result.get("top_features", [])

    # Print a nice summary report
    click.echo("\n" + "="*40)
    click.secho("# Language Identification Report", fg='yellow', bold=True)
    click.echo("="*40)

    click.echo("Top Prediction: ", nl=False)
    click.secho(f"{prediction.upper()}", fg='green', bold=True)

    click.echo("\n # Score Distribution (lower is better):")
    for item in distribution:
        lang = item.get('lang', '?').upper()
        score = item.get('score')
        click.echo(f"  - {lang}: {'pruned' if score is None else score}")

    click.echo("\n # Top Features (most influential n-grams):")
    click.secho(f"  {', '.join(repr(f) for f in features)}", fg='cyan')
    click.echo("="*40)


@click.command()
@click.argument('text', type=str)
@click.option(
    '--profiles', '-p', 'profile_dir',
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help='Directory holding the <language>.lm profiles (default: TEXTCAT_PROFILE_DIR).'
)
@click.option('--top-n', '-n', type=click.IntRange(min=1), default=None, help="How many languages to list in the report.")
@click.option('--code-only', is_flag=True, help="Print only the 2-letter language code.")
def cli(text: str, profile_dir: Optional[Path], top_n: Optional[int], code_only: bool):
    """
    Identifies the language of a given TEXT string.

    Example usages:\n
    python main.py "This is a test sentence, long enough to classify."\n
    python main.py "Ceci est une phrase de test assez longue." --code-only
    """
    configure_logging(settings.log_level)
    profile_dir = profile_dir or settings.profile_dir

    try:
        identifier = TextCat.from_directory(profile_dir, settings.language_map)
    except FileNotFoundError as e:
        click.secho("Error: Could not find language profiles.", fg='red', err=True)
        click.secho(f"Details: {e}", fg='red', err=True)
        click.secho("\n Please run 'python scripts/build_profiles.py' to generate them first.", err=True)
        sys.exit(2)

    results = identifier.identify(text, top_n=top_n or settings.top_n)

    if "error" in results:
        click.secho(f"Error: {results['error']}", fg='red', bold=True, err=True)
        sys.exit(1)

    if code_only:
        click.echo(results["prediction"])
    else:
        display_results(results)


if __name__ == '__main__':
    cli()
