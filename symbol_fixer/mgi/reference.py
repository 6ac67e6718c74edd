#!/usr/bin/env python3
"""
MGI reference data: the set of official MGI symbols and the synonym table.

The bundled copies live in symbol_fixer/data/ and are loaded once per
process. A freshly downloaded MRK_List2.rpt can be used instead for the
synonyms:
    http://www.informatics.jax.org/downloads/reports/MRK_List2.rpt
"""

import os
from dataclasses import dataclass
from functools import lru_cache

import pandas as pd
from symbol_fixer.errors import MissingColumnError, MissingFileError

MRK_LIST_URL = "http://www.informatics.jax.org/downloads/reports/MRK_List2.rpt"

SYMBOL_COLUMN = "Marker Symbol"
SYNONYM_COLUMN = "Marker Synonyms (pipe-separated)"
# headers as written by R's read.csv/write.table round trip
COLUMN_ALIASES = {
    "Marker.Symbol": SYMBOL_COLUMN,
    "Marker.Synonyms..pipe.separated.": SYNONYM_COLUMN,
}

ALL_MGI_FILE = "all_mgi.txt"
SYNONYM_DATA_FILE = "mgi_synonym_data.tsv"
BUNDLED_DATA_NOTICE = (
    "Note: the bundled MGI data is a small subset of the MGI marker list. "
    f"Download MRK_List2.rpt from {MRK_LIST_URL} and pass it as mrk_file_path (--mrk) "
    "for real datasets, or inject a full MgiReference."
)


@dataclass(frozen=True)
class MgiReference:
    symbols: frozenset
    synonyms: pd.DataFrame  # columns: mgi_symbol, synonyms (pipe-joined), table order


def data_dir():
    # symbol_fixer/mgi/ -> symbol_fixer/data/
    package_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(package_root, "data")


def read_symbol_list(path):
    with open(path, "r", encoding="utf-8") as f:
        return frozenset(line.strip() for line in f if line.strip())


def _tidy_synonym_table(mgi_data):
    mgi_data = mgi_data[mgi_data[SYNONYM_COLUMN].str.strip() != ""]
    return pd.DataFrame({
        "mgi_symbol": mgi_data[SYMBOL_COLUMN].str.strip(),
        "synonyms": mgi_data[SYNONYM_COLUMN],
    }).reset_index(drop=True)


def read_mrk_list(mrk_file_path):
    """Read a tab-delimited MRK_List2.rpt, checking for the symbol and synonym columns."""
    if not os.path.exists(mrk_file_path):
        raise MissingFileError(
            f"ERROR: the file path used in mrk_file_path does not direct to a real file: {mrk_file_path}. "
            "Either leave this argument blank or direct to an MRK_List2.rpt file downloaded from the MGI website. "
            f"It should be possible to obtain from: {MRK_LIST_URL}"
        )
    mgi_data = pd.read_csv(mrk_file_path, sep="\t", dtype=str, keep_default_na=False)
    mgi_data = mgi_data.rename(columns=COLUMN_ALIASES)
    for col in (SYNONYM_COLUMN, SYMBOL_COLUMN):
        if col not in mgi_data.columns:
            raise MissingColumnError(
                f"ERROR: the MRK_List2.rpt file does not seem to have a column named '{col}'"
            )
    return mgi_data


def load_mrk_synonyms(mrk_file_path):
    """Non-empty synonym rows of an MRK_List2.rpt file."""
    return _tidy_synonym_table(read_mrk_list(mrk_file_path))


@lru_cache(maxsize=1)
def get_bundled_reference():
    symbols = read_symbol_list(os.path.join(data_dir(), ALL_MGI_FILE))
    synonyms = load_mrk_synonyms(os.path.join(data_dir(), SYNONYM_DATA_FILE))
    return MgiReference(symbols=symbols, synonyms=synonyms)


def load_reference(mrk_file_path=None, reference=None):
    """
    Pick the reference data for a run.

    An injected reference replaces the bundled one. When mrk_file_path is
    given its synonyms are used, and its marker symbols (MRK_List2 leaves out
    withdrawn markers) are added to the bundled (or injected) symbol set.
    """
    base = reference if reference is not None else get_bundled_reference()
    if mrk_file_path is None:
        return base
    mgi_data = read_mrk_list(mrk_file_path)
    mrk_symbols = frozenset(s.strip() for s in mgi_data[SYMBOL_COLUMN] if s.strip())
    return MgiReference(symbols=base.symbols | mrk_symbols, synonyms=_tidy_synonym_table(mgi_data))
