"""
Singular and plural forms of snake_case identifiers.

Only the last underscore-delimited segment is inflected, so ``hello_people``
becomes ``hello_person``. Irregular words and uncountable nouns are looked up
in static tables before the suffix rules apply.

Some plural shapes are ambiguous (``caches`` could come from ``cach`` or
``cache``). The rules pick the common English reading and the word tables
below cover the exceptions.
"""

# singular -> plural
IRREGULAR_PLURALS: dict[str, str] = {
    "person": "people",
    "man": "men",
    "woman": "women",
    "child": "children",
    "ox": "oxen",
    "mouse": "mice",
    "goose": "geese",
    "foot": "feet",
    "tooth": "teeth",
    "sex": "sexes",
    "move": "moves",
    "movie": "movies",
    "quiz": "quizzes",
    "status": "statuses",
    "alias": "aliases",
    "bus": "buses",
    "campus": "campuses",
    "virus": "viruses",
    "bonus": "bonuses",
    "census": "censuses",
    "chorus": "choruses",
    "circus": "circuses",
    "genius": "geniuses",
    "surplus": "surpluses",
    "lens": "lenses",
    "gas": "gases",
    "bias": "biases",
    "atlas": "atlases",
    "canvas": "canvases",
    "analysis": "analyses",
    "crisis": "crises",
    "hero": "heroes",
    "echo": "echoes",
    "potato": "potatoes",
    "tomato": "tomatoes",
}

# plural -> singular
IRREGULAR_SINGULARS: dict[str, str] = {plural: singular for singular, plural in IRREGULAR_PLURALS.items()}

UNCOUNTABLES: frozenset[str] = frozenset({
    "equipment",
    "information",
    "rice",
    "money",
    "species",
    "series",
    "fish",
    "sheep",
    "jeans",
    "police",
    "news",
})

# Singulars ending in "ie"; "cookies" is not "cooky"
IE_WORDS: frozenset[str] = frozenset({
    "auntie",
    "birdie",
    "bookie",
    "brownie",
    "calorie",
    "cookie",
    "freebie",
    "goalie",
    "hoodie",
    "lie",
    "newbie",
    "pie",
    "prairie",
    "rookie",
    "selfie",
    "smoothie",
    "tie",
    "zombie",
})

# Singulars ending in "che"; "caches" is not "cach"
CHE_WORDS: frozenset[str] = frozenset({
    "ache",
    "avalanche",
    "cache",
    "cliche",
    "creche",
    "headache",
    "microfiche",
    "moustache",
    "mustache",
    "niche",
    "psyche",
    "quiche",
})

VOWELS = "aeiou"

# Endings that take "es" in the plural
_ES_SUFFIXES = ("s", "x", "z", "ch", "sh")

# Stems that keep their last letter when "es" is dropped
_ES_STEMS = ("ss", "x", "sh", "zz", "tz")

# Endings of words that are already singular
_SINGULAR_ENDINGS = ("ss", "us", "is")


def singular(name: str) -> str:
    """Return the singular form of the last segment of a snake_case name."""
    head, sep, tail = name.rpartition("_")
    return f"{head}{sep}{singularize_word(tail)}"


def plural(name: str) -> str:
    """Return the plural form of the last segment of a snake_case name."""
    head, sep, tail = name.rpartition("_")
    return f"{head}{sep}{pluralize_word(singularize_word(tail))}"


def singularize_word(word: str) -> str:
    """Singularize a single word, repeating the rules until nothing changes."""
    while True:
        reduced = _singularize_step(word)
        if reduced == word:
            return word
        word = reduced


def pluralize_word(word: str) -> str:
    """Pluralize a word that is already in singular form."""
    lowered = word.lower()
    if not lowered or lowered in UNCOUNTABLES:
        return word
    if lowered in IRREGULAR_PLURALS:
        return _match_case(word, IRREGULAR_PLURALS[lowered])

    if len(lowered) > 1 and lowered.endswith("y") and lowered[-2] not in VOWELS:
        result = word[:-1] + _match_case(word[-1], "ies")
    elif lowered.endswith(_ES_SUFFIXES):
        result = word + _match_case(word[-1], "es")
    else:
        result = word + _match_case(word[-1], "s")

    # The suffix rules can land on a word the tables already own,
    # e.g. "bu" -> "bus" or "fishe" -> "fishes" -> "fish".
    back = singularize_word(result).lower()
    if back in UNCOUNTABLES:
        return _match_case(word, back)
    if back in IRREGULAR_PLURALS:
        return _match_case(word, IRREGULAR_PLURALS[back])
    return result


def _singularize_step(word: str) -> str:
    lowered = word.lower()
    if not lowered or lowered in UNCOUNTABLES or lowered in IRREGULAR_PLURALS:
        return word
    if lowered in IRREGULAR_SINGULARS:
        return _match_case(word, IRREGULAR_SINGULARS[lowered])

    if not lowered.endswith("s") or lowered.endswith(_SINGULAR_ENDINGS):
        return word

    if lowered.endswith("ies"):
        if lowered[:-1] in IE_WORDS:
            return word[:-1]
        if len(lowered) > 4 and lowered[-4] not in VOWELS:
            return word[:-3] + _match_case(word[-1], "y")
        return word[:-1]

    if lowered.endswith("es"):
        stem = lowered[:-2]
        if stem.endswith(_ES_STEMS):
            return word[:-2]
        if stem.endswith("ch"):
            return word[:-1] if f"{stem}e" in CHE_WORDS else word[:-2]
        # "sizes", "houses" and "tables" only lose their "s"
        return word[:-1]

    if len(lowered) > 1:
        return word[:-1]
    return word


def _match_case(source: str, replacement: str) -> str:
    if source.isupper():
        return replacement.upper()
    if source[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement
