# qverse/services/quran/aliases.py
"""
Alias tables for Quran references.

Two independent lookups, both keyed on the trimmed lowercase phrase:
- Named verses: well-known verse names -> canonical "chapter:verse"
- Surah names: transliterations and English names -> chapter number

Tables are built once at import and exposed read-only through
AliasTables, which the parser receives by reference. New aliases can be
inserted with AliasTables.extended(); existing keys are never changed.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

MIN_CHAPTER = 1
MAX_CHAPTER = 114

_CANONICAL_VERSE = re.compile(r'^(\d+):(\d+)$')

# Surah keys must be reachable by the parser's surah-name form
_SURAH_KEY = re.compile(r"[a-z][a-z '\-]*")


class AliasTableError(ValueError):
    """Raised when an alias entry is malformed or conflicts with an existing one."""
    pass


# Named verse phrases -> canonical reference
NAMED_VERSES = MappingProxyType({
    "ayat al-kursi": "2:255",
    "al kursi": "2:255",
    "throne verse": "2:255",
    "verse of the throne": "2:255",
    "surah yasin": "36:1",
    "yaseen": "36:1",
    "surah kahf": "18:1",
    "al kahf": "18:1",
    "surah fatihah": "1:1",
    "al fatihah": "1:1",
    "the opening": "1:1",
    "ayat an-nur": "24:35",
    "light verse": "24:35",
    "verse of light": "24:35",
})


# Surah names grouped by chapter. Each group lists the transliteration
# with its article, the bare form, and the common English name.
_SURAH_NAME_GROUPS: Tuple[Tuple[int, Tuple[str, ...]], ...] = (
    (1, ("al-fatihah", "al fatihah", "fatihah", "fatiha", "the opening")),
    (2, ("al-baqarah", "baqarah", "baqara", "the cow")),
    (3, ("ali imran", "al imran", "aal-e-imran", "imran", "family of imran")),
    (4, ("an-nisa", "nisa", "women", "the women")),
    (5, ("al-maidah", "maidah", "the table", "the table spread")),
    (6, ("al-anam", "anam", "the cattle")),
    (7, ("al-araf", "araf", "the heights")),
    (8, ("al-anfal", "anfal", "the spoils of war")),
    (9, ("at-tawbah", "tawbah", "tawba", "the repentance")),
    (10, ("yunus", "jonah")),
    (11, ("hud",)),
    (12, ("yusuf", "joseph")),
    (13, ("ar-rad", "rad", "the thunder")),
    (14, ("ibrahim", "abraham")),
    (15, ("al-hijr", "hijr", "the rocky tract")),
    (16, ("an-nahl", "nahl", "the bee")),
    (17, ("al-isra", "isra", "the night journey", "bani israil")),
    (18, ("al-kahf", "al kahf", "kahf", "the cave")),
    (19, ("maryam", "mary")),
    (20, ("ta-ha", "taha")),
    (21, ("al-anbiya", "anbiya", "the prophets")),
    (22, ("al-hajj", "hajj", "the pilgrimage")),
    (23, ("al-muminun", "muminun", "the believers")),
    (24, ("an-nur", "nur", "the light")),
    (25, ("al-furqan", "furqan", "the criterion")),
    (26, ("ash-shuara", "shuara", "the poets")),
    (27, ("an-naml", "naml", "the ant")),
    (28, ("al-qasas", "qasas", "the stories")),
    (29, ("al-ankabut", "ankabut", "the spider")),
    (30, ("ar-rum", "rum", "the romans")),
    (31, ("luqman",)),
    (32, ("as-sajdah", "sajdah", "the prostration")),
    (33, ("al-ahzab", "ahzab", "the combined forces")),
    (34, ("saba", "sheba")),
    (35, ("fatir", "the originator")),
    (36, ("ya-sin", "yasin", "yaseen")),
    (37, ("as-saffat", "saffat", "those who set the ranks")),
    (38, ("sad",)),
    (39, ("az-zumar", "zumar", "the troops")),
    (40, ("ghafir", "al-mumin", "the forgiver")),
    (41, ("fussilat", "explained in detail")),
    (42, ("ash-shura", "shura", "the consultation")),
    (43, ("az-zukhruf", "zukhruf", "the ornaments of gold")),
    (44, ("ad-dukhan", "dukhan", "the smoke")),
    (45, ("al-jathiyah", "jathiyah", "the crouching")),
    (46, ("al-ahqaf", "ahqaf", "the wind-curved sandhills")),
    (47, ("muhammad",)),
    (48, ("al-fath", "fath", "the victory")),
    (49, ("al-hujurat", "hujurat", "the rooms")),
    (50, ("qaf",)),
    (51, ("adh-dhariyat", "dhariyat", "the winnowing winds")),
    (52, ("at-tur", "tur", "the mount")),
    (53, ("an-najm", "najm", "the star")),
    (54, ("al-qamar", "qamar", "the moon")),
    (55, ("ar-rahman", "rahman", "the beneficent")),
    (56, ("al-waqiah", "waqiah", "the inevitable")),
    (57, ("al-hadid", "hadid", "the iron")),
    (58, ("al-mujadila", "mujadila", "the pleading woman")),
    (59, ("al-hashr", "hashr", "the exile")),
    (60, ("al-mumtahanah", "mumtahanah", "she that is to be examined")),
    (61, ("as-saff", "saff", "the ranks")),
    (62, ("al-jumuah", "jumuah", "the congregation")),
    (63, ("al-munafiqun", "munafiqun", "the hypocrites")),
    (64, ("at-taghabun", "taghabun", "the mutual disillusion")),
    (65, ("at-talaq", "talaq", "the divorce")),
    (66, ("at-tahrim", "tahrim", "the prohibition")),
    (67, ("al-mulk", "mulk", "the sovereignty")),
    (68, ("al-qalam", "qalam", "the pen")),
    (69, ("al-haqqah", "haqqah", "the reality")),
    (70, ("al-maarij", "maarij", "the ascending stairways")),
    (71, ("nuh", "noah")),
    (72, ("al-jinn", "jinn", "the jinn")),
    (73, ("al-muzzammil", "muzzammil", "the enshrouded one")),
    (74, ("al-muddaththir", "muddaththir", "the cloaked one")),
    (75, ("al-qiyamah", "qiyamah", "the resurrection")),
    (76, ("al-insan", "insan", "the man")),
    (77, ("al-mursalat", "mursalat", "the emissaries")),
    (78, ("an-naba", "naba", "the tidings")),
    (79, ("an-naziat", "naziat", "those who drag forth")),
    (80, ("abasa", "he frowned")),
    (81, ("at-takwir", "takwir", "the overthrowing")),
    (82, ("al-infitar", "infitar", "the cleaving")),
    (83, ("al-mutaffifin", "mutaffifin", "the defrauding")),
    (84, ("al-inshiqaq", "inshiqaq", "the sundering")),
    (85, ("al-buruj", "buruj", "the mansions of the stars")),
    (86, ("at-tariq", "tariq", "the nightcomer")),
    (87, ("al-ala", "ala", "the most high")),
    (88, ("al-ghashiyah", "ghashiyah", "the overwhelming")),
    (89, ("al-fajr", "fajr", "the dawn")),
    (90, ("al-balad", "balad", "the city")),
    (91, ("ash-shams", "shams", "the sun")),
    (92, ("al-layl", "layl", "the night")),
    (93, ("ad-duha", "duha", "the morning hours")),
    (94, ("ash-sharh", "sharh", "al-inshirah", "inshirah", "the relief")),
    (95, ("at-tin", "tin", "the fig")),
    (96, ("al-alaq", "alaq", "the clot")),
    (97, ("al-qadr", "qadr", "the power")),
    (98, ("al-bayyinah", "bayyinah", "the clear proof")),
    (99, ("az-zalzalah", "zalzalah", "the earthquake")),
    (100, ("al-adiyat", "adiyat", "the courser")),
    (101, ("al-qariah", "qariah", "the calamity")),
    (102, ("at-takathur", "takathur", "the rivalry in world increase")),
    (103, ("al-asr", "asr", "the declining day")),
    (104, ("al-humazah", "humazah", "the traducer")),
    (105, ("al-fil", "fil", "the elephant")),
    (106, ("quraysh", "quraish")),
    (107, ("al-maun", "maun", "the small kindnesses")),
    (108, ("al-kawthar", "kawthar", "the abundance")),
    (109, ("al-kafirun", "kafirun", "the disbelievers")),
    (110, ("an-nasr", "nasr", "the divine support")),
    (111, ("al-masad", "masad", "the palm fiber")),
    (112, ("al-ikhlas", "ikhlas", "the sincerity")),
    (113, ("al-falaq", "falaq", "the daybreak")),
    (114, ("an-nas", "nas", "mankind")),
)

# Synonyms not covered by the grouped names above
_EXTRA_SURAH_NAMES = {
    "the spoils": 8,
    "the beneficent one": 55,
}


def normalize_alias_key(phrase: str) -> str:
    """Lowercase, trim and collapse internal whitespace."""
    return re.sub(r'\s+', ' ', phrase.strip().lower())


def validate_named_verse(key: str, value: str) -> str:
    """
    Check a named-verse value against the canonical grammar.

    Returns:
        The value unchanged

    Raises:
        AliasTableError: If the value is not "chapter:verse" within bounds
    """
    match = _CANONICAL_VERSE.match(value or "")
    if not match:
        raise AliasTableError(f"Named verse {key!r} has non-canonical value {value!r}")
    chapter, verse = int(match.group(1)), int(match.group(2))
    if not MIN_CHAPTER <= chapter <= MAX_CHAPTER or verse < 1:
        raise AliasTableError(f"Named verse {key!r} points outside the Quran: {value!r}")
    return value


def validate_surah_number(key: str, value) -> int:
    """
    Check a surah alias: ASCII letters, spaces, apostrophes and hyphens,
    no leading "surah ", mapping to an integer chapter in [1, 114].
    """
    if not _SURAH_KEY.fullmatch(key) or key.startswith("surah "):
        raise AliasTableError(f"Surah alias {key!r} is not a parseable surah name")
    if isinstance(value, bool) or not isinstance(value, int):
        raise AliasTableError(f"Surah alias {key!r} must map to an integer, got {value!r}")
    if not MIN_CHAPTER <= value <= MAX_CHAPTER:
        raise AliasTableError(f"Surah alias {key!r} maps to chapter {value} outside 1-114")
    return value


def _merge(base: Dict, additions: Mapping, validate) -> Dict:
    """Insert additions into a copy of base. Conflicting keys are rejected."""
    merged = dict(base)
    for raw_key, value in additions.items():
        key = normalize_alias_key(str(raw_key))
        if not key:
            raise AliasTableError("Alias keys must be non-empty")
        value = validate(key, value)
        if key in merged and merged[key] != value:
            raise AliasTableError(
                f"Alias {key!r} already maps to {merged[key]!r}, refusing {value!r}"
            )
        merged[key] = value
    return merged


def _check_shared_keys(verses: Mapping[str, str], names: Mapping[str, int]):
    """A phrase in both tables must name the first verse of its surah."""
    for key in verses.keys() & names.keys():
        if verses[key] != f"{names[key]}:1":
            raise AliasTableError(
                f"{key!r} names verse {verses[key]} but surah {names[key]}"
            )


def _flatten_groups(groups: Iterable[Tuple[int, Tuple[str, ...]]]) -> Dict[str, int]:
    table: Dict[str, int] = {}
    for chapter, names in groups:
        table = _merge(table, {name: chapter for name in names}, validate_surah_number)
    return table


@dataclass(frozen=True)
class AliasTables:
    """
    Read-only bundle of the named-verse and surah-name lookups.

    Attributes:
        named_verses: phrase -> "chapter:verse"
        surahs: surah name -> chapter number
    """
    named_verses: Mapping[str, str]
    surahs: Mapping[str, int]

    @classmethod
    def build(
        cls,
        named_verses: Optional[Mapping[str, str]] = None,
        surahs: Optional[Mapping[str, int]] = None,
    ) -> "AliasTables":
        """Validate plain dicts and freeze them into an AliasTables."""
        verses = _merge({}, named_verses or {}, validate_named_verse)
        names = _merge({}, surahs or {}, validate_surah_number)
        _check_shared_keys(verses, names)
        return cls(MappingProxyType(verses), MappingProxyType(names))

    def extended(
        self,
        named_verses: Optional[Mapping[str, str]] = None,
        surahs: Optional[Mapping[str, int]] = None,
    ) -> "AliasTables":
        """
        Return a new AliasTables with extra entries inserted.

        Existing keys keep their value; re-mapping one raises AliasTableError.
        """
        verses = _merge(dict(self.named_verses), named_verses or {}, validate_named_verse)
        names = _merge(dict(self.surahs), surahs or {}, validate_surah_number)
        _check_shared_keys(verses, names)
        return AliasTables(MappingProxyType(verses), MappingProxyType(names))

    def named_verse(self, phrase: str) -> Optional[str]:
        """Look up a named verse. Returns the canonical reference or None."""
        return self.named_verses.get(normalize_alias_key(phrase))

    def surah_number(self, name: str) -> Optional[int]:
        """Look up a surah name. Returns the chapter number or None."""
        return self.surahs.get(normalize_alias_key(name))


SURAH_NAMES = MappingProxyType({
    **_flatten_groups(_SURAH_NAME_GROUPS),
    **_EXTRA_SURAH_NAMES,
})

DEFAULT_TABLES = AliasTables.build(NAMED_VERSES, SURAH_NAMES)
