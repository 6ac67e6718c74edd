#!/usr/bin/env python3

class InvalidInputError(ValueError):
    """Expression matrix is missing, holds factors, or is not a table."""


class MissingFileError(FileNotFoundError):
    """MRK_List2 reference file path does not exist."""


class MissingColumnError(KeyError):
    """MRK_List2 reference file lacks a required column."""

    def __str__(self):
        # KeyError repr()s its message
        return str(self.args[0]) if self.args else ""


class CorruptedLabelWarning(UserWarning):
    """Row labels that look like Excel date conversions (Sept2 -> 2-Sep)."""
