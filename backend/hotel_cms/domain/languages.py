DEFAULT_LANGUAGE = "fr"

# Languages stored in translation side-tables; French lives on the parent row
TRANSLATION_LANGUAGES = ("en", "es", "it")

SUPPORTED_LANGUAGES = (DEFAULT_LANGUAGE,) + TRANSLATION_LANGUAGES
