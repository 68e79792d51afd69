
# Locale tags are matched literally. Both French forms share one table.
LOCALE_TABLES = {"fr-FR": "fr", "fr": "fr", "en-US": "en-US"}

MISSING_TRANSLATION_MARKERS = {"fr": "Traduction manquante", "en-US": "Missing translation"}
MISSING_LOCALE_MARKER = "Locale manquante"

# Source keys held by each fixture country before translation.
COUNTRY_FIXTURES = {
    "FR": {"label": "Pays_libelle_1", "description": "Pays_description_1"},
    "US": {"label": "Pays_libelle_2", "description": "Pays_description_2"},
}

# (country code, locale) -> (label, description)
EXPECTED_TRANSLATIONS = {
    ("FR", "fr-FR"): ("France", "Le plus beau des pays de tous les temps."),
    ("US", "fr-FR"): ("Etats-Unis", "Le pays des burgers."),
    ("FR", "en-US"): ("France", "The country of wine."),
    ("US", "en-US"): ("United States", "The best country ever."),
}

DEFAULT_STRATEGY = "direct"
DEFAULT_LOCALE = "fr-FR"

# The reference run repeats every scenario a million times; the UI default is
# kept small enough to stay interactive.
BENCHMARK_ITERATIONS = 1_000_000
UI_ITERATIONS = 10_000
