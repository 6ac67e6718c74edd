#!/usr/bin/env python3
from dataclasses import dataclass, field
import pandas as pd


@dataclass
class MergeResult:
    matrix: pd.DataFrame
    dup_genes: list = field(default_factory=list)
    # synonym -> MGI symbol
    merged_sources: dict = field(default_factory=dict)
    renamed: dict = field(default_factory=dict)
    dropped_ambiguous: dict = field(default_factory=dict)

    @property
    def num_corrected(self):
        return len(self.merged_sources) + len(self.renamed)


def merge_synonym_rows(exp, matching_syn):
    """
    Replace mis-used synonyms in exp by their MGI symbols.

    Rows whose MGI symbol is already in the matrix are summed into that row.
    Rows moving to a symbol that is not yet in the matrix are renamed, except
    when two or more of them land on the same symbol: those are all dropped,
    since there is no telling which combination is right.
    """
    syn_to_mgi = matching_syn["mgi_symbol"]
    is_bad = exp.index.isin(syn_to_mgi.index)
    exp_good = exp.loc[~is_bad].copy()
    exp_bad = exp.loc[syn_to_mgi.index]

    # Check for duplicates of existing genes
    dup_genes = list(dict.fromkeys(g for g in syn_to_mgi if g in exp_good.index))

    # Where duplicates exist, sum them together
    for dG in dup_genes:
        sources = syn_to_mgi.index[syn_to_mgi == dG]
        exp_good.loc[dG] = exp_good.loc[dG].to_numpy() + exp_bad.loc[sources].to_numpy().sum(axis=0)

    is_dup = syn_to_mgi.isin(dup_genes)
    merged_sources = syn_to_mgi[is_dup]
    remaining = syn_to_mgi[~is_dup]

    # Several mislabelled rows pointing at one new gene
    collided = remaining.duplicated(keep=False)
    dropped = remaining[collided]
    renamed = remaining[~collided]

    exp_renamed = exp_bad.loc[renamed.index].copy()
    exp_renamed.index = pd.Index(renamed.tolist(), name=exp.index.name)
    new_exp = pd.concat([exp_good, exp_renamed])

    return MergeResult(
        matrix=new_exp,
        dup_genes=dup_genes,
        merged_sources=merged_sources.to_dict(),
        renamed=renamed.to_dict(),
        dropped_ambiguous=dropped.to_dict(),
    )
