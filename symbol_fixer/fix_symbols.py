#!/usr/bin/env python3
"""
Fix bad MGI symbols in an expression matrix.

Given an expression matrix whose rows are supposed to be MGI symbols, find
the symbols which are not official MGI symbols, then check the MGI synonym
table for whether they match a proper MGI symbol. Where a symbol turns out
to be an alias for a gene that is already in the dataset, the reads are
summed together.

Also checks whether any gene names contain "Sep", "Mar" or "Feb"; these
should be checked for signs that Excel has corrupted the gene names.

Example:
    exp = pd.read_csv("cortex_mrna.csv", index_col=0)
    exp = fix_bad_mgi_symbols(exp)
"""

from symbol_fixer.genes.normalisation import find_not_mgi, warn_date_like
from symbol_fixer.genes.stats import (
    report_corrected,
    report_dup_genes,
    report_not_mgi,
    report_still_not_mgi,
    summarise_fix,
)
from symbol_fixer.genes.synonyms import STEP_SIZE, build_synonym_index
from symbol_fixer.matrix.merge import merge_synonym_rows
from symbol_fixer.matrix.validation import validate_expression_matrix
from symbol_fixer.mgi.reference import BUNDLED_DATA_NOTICE, load_reference

def run_symbol_fix(exp, mrk_file_path=None, print_all_bad_symbols=False,
                   reference=None, row_names=None, step_size=STEP_SIZE):
    """
    Run the full fix and return (new_exp, summary).

    :param exp: DataFrame with MGI symbols as the index, or a 2-D numpy array with row_names
    :param mrk_file_path: optional path to an MRK_List2.rpt file to take synonyms from
    :param print_all_bad_symbols: print every symbol still not MGI after fixing
    :param reference: MgiReference to use in place of the bundled data
    :param row_names: row labels for a numpy array input
    :param step_size: how many bad symbols are matched against the synonym table at a time
    """
    # All fatal checks run before any resolution
    exp = validate_expression_matrix(exp, row_names=row_names)
    mgi = load_reference(mrk_file_path, reference=reference)
    if reference is None and mrk_file_path is None:
        print(BUNDLED_DATA_NOTICE, flush=True)
    print(f"Checking {exp.shape[0]} rows against {len(mgi.symbols)} MGI symbols "
          f"(synonyms from {mrk_file_path or 'bundled data'})", flush=True)

    not_mgi = find_not_mgi(exp.index, mgi.symbols)
    report_not_mgi(not_mgi)

    # Checking for presence of bad date genes, i.e. Sept2 --> 02.Sep
    date_like = warn_date_like(not_mgi)

    matching_syn = build_synonym_index(mgi.synonyms, not_mgi, step_size=step_size)
    result = merge_synonym_rows(exp, matching_syn)
    report_dup_genes(result.dup_genes)
    report_corrected(result.num_corrected, len(matching_syn), result.dropped_ambiguous)

    still_not_mgi = sorted(find_not_mgi(result.matrix.index, mgi.symbols))
    report_still_not_mgi(still_not_mgi, print_all_bad_symbols)

    return result.matrix, summarise_fix(not_mgi, date_like, result, still_not_mgi)

def fix_bad_mgi_symbols(exp, mrk_file_path=None, print_all_bad_symbols=False,
                        reference=None, row_names=None, step_size=STEP_SIZE):
    """Return exp with rownames corrected and rows representing the same gene merged."""
    new_exp, _ = run_symbol_fix(
        exp,
        mrk_file_path=mrk_file_path,
        print_all_bad_symbols=print_all_bad_symbols,
        reference=reference,
        row_names=row_names,
        step_size=step_size,
    )
    return new_exp
