"""
Place catalog for Daytrip.

The catalog is literal data: it is built at import time and never
reloaded or mutated. Durations are in hours, importance is a
non-negative score (higher is more worth seeing).
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Place:
    """Immutable sightseeing entry."""

    name: str
    duration: float
    importance: int


PLACES: Tuple[Place, ...] = (
    Place("Isaakievskij sobor", 5.0, 10),
    Place("Ermitazh", 8.0, 11),
    Place("Kunstkamera", 3.5, 4),
    Place("Petropavlovskaya krepost", 10.0, 7),
    Place("Leningradskij zoopark", 9.0, 15),
    Place("Mednyj vsadnik", 1.0, 17),
    Place("Kazanskij sobor", 4.0, 3),
    Place("Spas na Krovi", 2.0, 9),
    Place("Zimnij dvorec Petra I", 7.0, 12),
    Place("Zoologicheskij muzej", 5.5, 6),
    Place("Muzej oborony i blokady Leningrada", 2.0, 19),
    Place("Russkij muzej", 5.0, 8),
    Place("Navestit druzej", 12.0, 20),
    Place("Muzej voskovyh figur", 2.0, 13),
    Place("Literaturno-memorialnyj muzej F.M. Dostoevskogo", 4.0, 2),
    Place("Ekaterininskij dvorec", 1.5, 5),
    Place("Peterburgskij muzej kukol", 1.0, 14),
    Place('Muzej mikrominiatyury "Russkij Levsha"', 3.0, 18),
    Place("Vserossijskij muzej A.S.Pushkina i filialy", 6.0, 1),
    Place("Muzej sovremennogo iskusstva Erarta", 7.0, 16),
)
