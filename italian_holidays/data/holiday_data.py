"""
Reference data for Italian national public holidays.
"""

from typing import List, Tuple

# (month, day, Italian name, English name)
FIXED_HOLIDAYS: Tuple[Tuple[int, int, str, str], ...] = (
    (1, 1, "Capodanno", "New Year's Day"),
    (1, 6, "Epifania", "Epiphany"),
    (4, 25, "Festa della Liberazione", "Liberation Day"),
    (5, 1, "Festa dei Lavoratori", "International Workers' Day"),
    (6, 2, "Festa della Repubblica", "Republic Day"),
    (8, 15, "Ferragosto", "Assumption Day"),
    (11, 1, "Tutti i Santi", "All Saints' Day"),
    (12, 8, "Immacolata Concezione", "Immaculate Conception"),
    (12, 25, "Natale", "Christmas Day"),
    (12, 26, "Santo Stefano", "St. Stephen's Day"),
)

EASTER_NAMES = ("Pasqua", "Easter Sunday")
PASQUETTA_NAMES = ("Lunedì dell'Angelo", "Easter Monday")

WEEKDAY_NAMES: List[str] = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

WEEKDAY_NAMES_IT: List[str] = [
    "lunedì",
    "martedì",
    "mercoledì",
    "giovedì",
    "venerdì",
    "sabato",
    "domenica",
]
