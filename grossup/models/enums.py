"""Enumerations for GrossUp."""

from enum import StrEnum


class FilingStatus(StrEnum):
    # Values match the keys used by the rate-table data files.
    SINGLE = "single"
    MFJ = "marriedJointly"
    MFS = "marriedSeparately"
    HOH = "headOfHousehold"
