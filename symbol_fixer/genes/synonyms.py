#!/usr/bin/env python3
import pandas as pd
from symbol_fixer.genes.normalisation import split_synonyms

# Number of bad symbols tested against the synonym table at a time
STEP_SIZE = 500

INDEX_COLUMNS = ["mgi_symbol", "syn"]

def _chunks(values, step_size):
    for lower in range(0, len(values), step_size):
        yield values[lower:lower + step_size]

def filter_synonym_rows(synonym_table, not_mgi, step_size=STEP_SIZE):
    """
    Keep the synonym table rows that list at least one of the bad symbols.

    The bad symbols are matched step_size at a time; each chunk only adds
    rows to the mask, so the rows kept and their order do not depend on
    the chunk size.
    """
    if step_size < 1:
        raise ValueError(f"step_size must be a positive integer, got {step_size}")
    not_mgi = list(dict.fromkeys(not_mgi))
    tokens = synonym_table["synonyms"].map(split_synonyms)
    keep_rows = pd.Series(False, index=synonym_table.index)
    for use_mgi in _chunks(not_mgi, step_size):
        use_mgi = set(use_mgi)
        keep_rows |= tokens.map(lambda syns: not use_mgi.isdisjoint(syns)).astype(bool)
    return synonym_table[keep_rows]

def flatten_synonyms(synonym_rows):
    """One (mgi_symbol, syn) row per synonym, in table order."""
    all_syn = synonym_rows.assign(syn=synonym_rows["synonyms"].map(split_synonyms))
    all_syn = all_syn.explode("syn").dropna(subset=["syn"])
    return all_syn[INDEX_COLUMNS].reset_index(drop=True)

def build_synonym_index(synonym_table, not_mgi, step_size=STEP_SIZE):
    """
    Map each bad symbol that is a known synonym onto its MGI symbol.

    Returns a DataFrame with columns mgi_symbol and syn, indexed by syn.
    When a synonym is listed for several MGI symbols the first one in the
    table wins.
    """
    if len(not_mgi) == 0:
        return pd.DataFrame(columns=INDEX_COLUMNS, dtype=str).set_index("syn", drop=False).rename_axis(None)

    all_syn = flatten_synonyms(filter_synonym_rows(synonym_table, not_mgi, step_size))
    matching_syn = all_syn[all_syn["syn"].isin(set(not_mgi))]
    matching_syn = matching_syn[matching_syn["mgi_symbol"] != matching_syn["syn"]]
    matching_syn = matching_syn[~matching_syn["syn"].duplicated()]
    return matching_syn.set_index("syn", drop=False).rename_axis(None)
