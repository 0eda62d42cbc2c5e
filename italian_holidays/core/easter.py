"""
Easter date computation using Gauss's algorithm.
"""

from datetime import date, timedelta


def easter_for_year(year: int) -> date:
    """
    Compute Easter Sunday for a Gregorian year using the Gauss algorithm.

    Every step uses integer floor division; real division gives wrong
    results for some years.

    Args:
        year: The year whose Easter needs to be computed.

    Returns:
        The date of Easter Sunday.
    """
    # Golden Number - 1
    g = year % 19
    c = year // 100
    # related to Epact
    h = (c - c // 4 - (8 * c + 13) // 25 + 19 * g + 15) % 30
    # number of days from 21 March to the Paschal full moon
    i = h - (h // 28) * (1 - (29 // (h + 1)) * ((21 - g) // 11))
    # weekday for the Paschal full moon
    j = (year + year // 4 + i + 2 - c + c // 4) % 7
    # number of days from 21 March to the Sunday on or before the Paschal full moon
    l = i - j

    month = 3 + (l + 40) // 44
    day = l + 28 - 31 * (month // 4)
    return date(year, month, day)


def monday_after_easter(easter: date) -> date:
    """Return the day after the given Easter date (Pasquetta)."""
    return easter + timedelta(days=1)


def monday_after_easter_for_year(year: int) -> date:
    """Return Easter Monday for the given year."""
    return monday_after_easter(easter_for_year(year))


# Italian aliases
pasquetta_for_year = monday_after_easter_for_year
pasquetta_from_pasqua = monday_after_easter
