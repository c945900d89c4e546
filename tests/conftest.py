import sys
from pathlib import Path
import pytest

# Path Fix
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from textcat.fingerprint import MAXNGRAMS
from textcat.profiles import write_fingerprint
from textcat.utils import normalize_text, create_ngram_table, rank_ngrams

# Training text for the small profiles used across the tests. Same story in every language.
SAMPLE_TEXTS = {
    "english": (
        "The quick development of the railway changed the way people lived and worked in the "
        "nineteenth century. Towns that had been isolated for hundreds of years were suddenly "
        "connected to the great cities, and farmers could send their goods to markets that were "
        "far away. At the same time the factories needed more and more workers, and many families "
        "left the countryside to find work in the industrial towns. The living conditions in these "
        "towns were often terrible, and it took many years before the government passed laws to "
        "improve the health and the safety of the workers and their children. Today we think of the "
        "railway as something ordinary, but for the people of that time it was one of the most "
        "exciting inventions they had ever seen."
    ),
    "german": (
        "Die schnelle Entwicklung der Eisenbahn hat die Art und Weise verändert, wie die Menschen "
        "im neunzehnten Jahrhundert lebten und arbeiteten. Städte, die jahrhundertelang abgeschieden "
        "gewesen waren, wurden plötzlich mit den großen Städten verbunden, und die Bauern konnten "
        "ihre Waren auf Märkte schicken, die weit entfernt lagen. Gleichzeitig brauchten die Fabriken "
        "immer mehr Arbeiter, und viele Familien verließen das Land, um in den Industriestädten "
        "Arbeit zu finden. Die Lebensbedingungen in diesen Städten waren oft schrecklich, und es "
        "dauerte viele Jahre, bis die Regierung Gesetze erließ, um die Gesundheit und die Sicherheit "
        "der Arbeiter und ihrer Kinder zu verbessern. Heute halten wir die Eisenbahn für etwas "
        "Gewöhnliches, aber für die Menschen jener Zeit war sie eine der aufregendsten Erfindungen, "
        "die sie je gesehen hatten."
    ),
    "french": (
        "Le développement rapide du chemin de fer a changé la manière dont les gens vivaient et "
        "travaillaient au dix-neuvième siècle. Des villes qui étaient restées isolées pendant des "
        "centaines d'années ont été soudain reliées aux grandes villes, et les paysans pouvaient "
        "envoyer leurs marchandises vers des marchés très éloignés. En même temps, les usines "
        "avaient besoin de plus en plus d'ouvriers, et de nombreuses familles ont quitté la campagne "
        "pour trouver du travail dans les villes industrielles. Les conditions de vie dans ces villes "
        "étaient souvent terribles, et il a fallu de nombreuses années avant que le gouvernement vote "
        "des lois pour améliorer la santé et la sécurité des ouvriers et de leurs enfants. "
        "Aujourd'hui nous pensons que le chemin de fer est une chose ordinaire, mais pour les gens "
        "de cette époque c'était une des inventions les plus passionnantes qu'ils aient jamais vues."
    ),
}

LANGUAGES = {"english": "en", "german": "de", "french": "fr"}


@pytest.fixture(scope="session")
def profiles_path(tmp_path_factory):
    """A directory with an .lm profile for every sample language."""
    path = tmp_path_factory.mktemp("profiles")
    for name, text in SAMPLE_TEXTS.items():
        table = create_ngram_table(normalize_text(text))
        write_fingerprint(path / f"{name}.lm", rank_ngrams(table, MAXNGRAMS))
    return path


@pytest.fixture(scope="session")
def languages():
    return dict(LANGUAGES)
