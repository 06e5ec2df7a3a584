"""Enums for the homecost domain models."""

from enum import StrEnum


class BracketDimension(StrEnum):
    """Which home characteristic a bracket set is keyed on."""

    YEAR_BUILT = "year_built"
    FLOOR_AREA = "floor_area"


class Month(StrEnum):
    """Calendar months in chart order, January first."""

    JAN = "Jan"
    FEB = "Feb"
    MAR = "Mar"
    APR = "Apr"
    MAY = "May"
    JUN = "Jun"
    JUL = "Jul"
    AUG = "Aug"
    SEP = "Sep"
    OCT = "Oct"
    NOV = "Nov"
    DEC = "Dec"
