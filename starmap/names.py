#!/usr/bin/env python3
"""
Name and flavour-text synthesis for star systems and planets.

System names come from four strategies picked uniformly at random:
Greek letter + constellation ("Alpha Centauri"), a real star name ("Vega"),
a catalog designation ("Kepler-452") or a compound name ("New Haven").
Every draw comes from the random.Random handed in by the caller so a fixed
seed reproduces the same names.
"""
from __future__ import annotations

import random
from typing import List, Set, Tuple

GREEK_LETTERS = [
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta",
    "Iota", "Kappa", "Lambda", "Mu", "Nu", "Xi", "Omicron", "Pi",
    "Rho", "Sigma", "Tau", "Upsilon", "Phi", "Chi", "Psi", "Omega",
]

CONSTELLATIONS = [
    "Centauri", "Eridani", "Ceti", "Draconis", "Leonis", "Aquarii", "Orionis",
    "Scorpii", "Cassiopeiae", "Andromedae", "Lyrae", "Cygni", "Aquilae",
    "Ursae", "Bootis", "Virginis", "Geminorum", "Tauri", "Sagittarii",
    "Capricorni", "Piscium", "Arietis", "Cancri", "Librae", "Persei",
    "Herculis", "Ophiuchi", "Serpentis", "Coronae", "Hydrae",
]

REAL_STARS = [
    "Sirius", "Canopus", "Arcturus", "Vega", "Capella", "Rigel", "Procyon",
    "Betelgeuse", "Achernar", "Altair", "Aldebaran", "Antares", "Spica",
    "Pollux", "Fomalhaut", "Deneb", "Regulus", "Adhara", "Castor", "Bellatrix",
    "Elnath", "Miaplacidus", "Alnilam", "Alnitak", "Alnair", "Alioth",
    "Dubhe", "Mirfak", "Wezen", "Sargas", "Kaus Australis", "Avior",
    "Alkaid", "Menkalinan", "Atria", "Alhena", "Peacock", "Alsephina",
    "Mirzam", "Alphard", "Hamal", "Polaris", "Alderamin", "Denebola",
]

NAME_PREFIXES = [
    "New", "Neo", "Nova", "Omega", "Proxima", "Ultima", "Prima", "Kepler",
    "Ross", "Gliese", "Wolf", "Lacaille", "Luyten", "Barnard", "Kruger",
    "Groombridge", "Lalande", "Struve", "Innes", "van", "Stein",
]

NAME_SUFFIXES = [
    "Prime", "Secundus", "Tertius", "Major", "Minor", "Station", "Outpost",
    "Haven", "Refuge", "Bastion", "Forge", "Reach", "Crossing", "Gate",
    "Nexus", "Hub", "Point", "Junction", "Terminal", "Threshold",
]

CATALOG_MAX = 9999


class NameGenerator:
    """Issues system names that are unique within one generation run."""

    def __init__(
        self,
        rng: random.Random,
        max_attempts: int = 100,
        fallback_prefix: str = "System",
    ) -> None:
        self.rng = rng
        self.max_attempts = max_attempts
        self.fallback_prefix = fallback_prefix
        self.used_names: Set[str] = set()
        self._fallback_counter = 0

    def reserve(self, name: str) -> None:
        """Mark a fixed name (e.g. the home system) as taken."""
        self.used_names.add(name)

    def system_name(self) -> str:
        strategies = (
            self._greek_constellation,
            self._real_star,
            self._catalog_name,
            self._compound_name,
        )
        for _ in range(self.max_attempts):
            name = strategies[self.rng.randrange(len(strategies))]()
            if name not in self.used_names:
                self.used_names.add(name)
                return name
        return self._fallback_name()

    def _greek_constellation(self) -> str:
        greek = self.rng.choice(GREEK_LETTERS)
        constellation = self.rng.choice(CONSTELLATIONS)
        return f"{greek} {constellation}"

    def _real_star(self) -> str:
        return self.rng.choice(REAL_STARS)

    def _catalog_name(self) -> str:
        prefix = self.rng.choice(NAME_PREFIXES)
        return f"{prefix}-{self.rng.randint(1, CATALOG_MAX)}"

    def _compound_name(self) -> str:
        prefix = self.rng.choice(NAME_PREFIXES)
        suffix = self.rng.choice(NAME_SUFFIXES)
        return f"{prefix} {suffix}"

    def _fallback_name(self) -> str:
        while True:
            self._fallback_counter += 1
            name = f"{self.fallback_prefix}-{self._fallback_counter}"
            if name not in self.used_names:
                self.used_names.add(name)
                return name


# ---------- System descriptions ----------

CORE_DESCRIPTIONS = [
    "A highly developed core world with massive orbital installations and billions of inhabitants.",
    "Capital of a sector, this system hosts impressive military and civilian infrastructure.",
    "A wealthy industrial hub with state-of-the-art shipyards and manufacturing facilities.",
    "Home to one of humanity's most prestigious universities and research centers.",
    "A major trade nexus where goods from across the galaxy change hands.",
]

MID_DESCRIPTIONS = [
    "A prosperous trade station serves as the heart of this busy system.",
    "Mining operations and refineries dot the asteroid belts of this resource-rich system.",
    "A growing colonial world striving to match the prosperity of the core systems.",
    "Agricultural domes and hydroponics stations feed millions across nearby systems.",
    "This system's strategic location makes it a valuable waypoint for traders.",
]

OUTER_DESCRIPTIONS = [
    "A rugged frontier settlement where hardy colonists eke out a living.",
    "Distant from central authority, this system is a haven for independent traders and prospectors.",
    "Lawlessness and opportunity go hand in hand in this remote outpost.",
    "This barely-settled system sees more pirates than law enforcement patrols.",
    "A lonely outpost at the edge of civilized space, where self-reliance is everything.",
]

EDGE_DESCRIPTIONS = [
    "An alien world of incomprehensible architecture and technology.",
    "Mysterious signals emanate from the installations orbiting these strange planets.",
    "Few humans have visited this system and returned to tell the tale.",
    "The border of known space, where humanity meets the unknown.",
    "Advanced technology beyond human understanding is evident throughout this system.",
]

INDEPENDENT_DESCRIPTIONS = [
    "An independent system that jealously guards its autonomy.",
    "Free from major faction control, this system charts its own course.",
    "A neutral ground where ships of all allegiances meet for trade.",
    "This system's fierce independence has kept major powers at bay.",
    "A hodgepodge of different cultures and peoples call this diverse system home.",
]


def description_pool(faction_id: str, ring: str) -> List[str]:
    if faction_id in ("united_earth_federation", "republic_of_mars"):
        return CORE_DESCRIPTIONS if ring == "core" else MID_DESCRIPTIONS
    if faction_id == "free_traders_guild":
        return MID_DESCRIPTIONS
    if faction_id == "frontier_worlds":
        return OUTER_DESCRIPTIONS
    if faction_id == "auroran_empire":
        return EDGE_DESCRIPTIONS
    return INDEPENDENT_DESCRIPTIONS


def system_description(rng: random.Random, faction_id: str, ring: str) -> str:
    return rng.choice(description_pool(faction_id, ring))


# ---------- Planets ----------

STATION_NAMES = [
    "Station", "Outpost", "Hub", "Terminal", "Bastion",
    "Citadel", "Haven", "Nexus", "Gateway", "Port",
]

ROMAN_NUMERALS = ["I", "II", "III", "IV", "V", "VI"]

STATION_DESCRIPTIONS = [
    "A massive orbital station serving as the system's commercial hub.",
    "A military starbase bristling with weapons and defenses.",
    "A research station dedicated to advanced scientific studies.",
    "A mining platform processing ore from nearby asteroids.",
    "A shipyard where vessels are constructed and repaired.",
    "A trading post where merchants from across the galaxy meet.",
    "A refueling depot crucial for long-range voyages.",
]

PLANET_PREFIXES = [
    "A rocky", "A barren", "A lush", "An icy", "A volcanic", "A desert",
    "A temperate", "A toxic", "A radiation-scarred", "A terraformed",
    "An oceanic", "A jungle-covered", "A mountainous", "A gaseous",
]

PLANET_MIDPARTS = [
    "world", "planet", "moon", "dwarf planet", "terrestrial body",
]

PLANET_SUFFIXES = [
    "with a thin atmosphere.",
    "rich in mineral resources.",
    "hosting a thriving colony.",
    "barely suitable for habitation.",
    "under active terraforming.",
    "with ancient ruins dotting its surface.",
    "covered in sprawling cities.",
    "home to unique flora and fauna.",
    "with valuable ore deposits.",
    "serving as a military outpost.",
    "functioning as a research station.",
    "operating as a commercial hub.",
    "known for its agricultural output.",
    "famous for its shipyards.",
    "hosting a major spaceport.",
]


def _letter_suffix(index: int) -> str:
    # A..Z, then AA, AB, ... so large indices stay distinct
    letters = ""
    index += 1
    while index > 0:
        index, rem = divmod(index - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def planet_name(
    rng: random.Random,
    system_name: str,
    index: int,
    station_chance: float = 0.3,
) -> Tuple[str, bool]:
    """Return (name, is_station) for the index-th body of a system."""
    if rng.random() < station_chance:
        return f"{system_name} {rng.choice(STATION_NAMES)}", True
    if rng.random() < 0.5 and index < len(ROMAN_NUMERALS):
        return f"{system_name} {ROMAN_NUMERALS[index]}", False
    return f"{system_name} {_letter_suffix(index)}", False


def planet_description(rng: random.Random, is_station: bool) -> str:
    if is_station:
        return rng.choice(STATION_DESCRIPTIONS)
    prefix = rng.choice(PLANET_PREFIXES)
    midpart = rng.choice(PLANET_MIDPARTS)
    suffix = rng.choice(PLANET_SUFFIXES)
    return f"{prefix} {midpart} {suffix}"
