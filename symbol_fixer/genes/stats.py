#!/usr/bin/env python3
from symbol_fixer.genes.normalisation import PREVIEW_LIMIT

def report_not_mgi(not_mgi):
    print(f"{len(not_mgi)} rows do not have proper MGI symbols", flush=True)
    if len(not_mgi) > PREVIEW_LIMIT:
        print(not_mgi[:PREVIEW_LIMIT], flush=True)

def report_dup_genes(dup_genes):
    print(f"{len(dup_genes)} poorly annotated genes are replicates of existing genes. These are: ", flush=True)
    print(dup_genes, flush=True)

def report_corrected(num_corrected, num_matched, dropped_ambiguous):
    print(f"{num_matched} rows matched a synonym, {num_corrected} of them corrected by checking synonyms", flush=True)
    if dropped_ambiguous:
        print(f"{len(dropped_ambiguous)} rows were dropped because they map onto the same new gene:", flush=True)
        for syn, mgi_symbol in dropped_ambiguous.items():
            print(f"    ✗ {syn} → {mgi_symbol}", flush=True)

def report_still_not_mgi(still_not_mgi, print_all_bad_symbols=False):
    print(f"{len(still_not_mgi)} rows STILL do not have proper MGI symbols", flush=True)
    if print_all_bad_symbols:
        print(still_not_mgi, flush=True)

def summarise_fix(not_mgi, date_like, merge_result, still_not_mgi):
    """
    Summary of one symbol fixing run.

    Keys:
    not_mgi            labels that were not MGI symbols on input
    date_like          labels flagged as possible Excel date corruption
    dup_genes          MGI symbols that received summed synonym rows
    merged             synonym -> MGI symbol, summed into an existing row
    renamed            synonym -> MGI symbol, row renamed
    dropped_ambiguous  synonym -> MGI symbol, dropped (collision)
    num_corrected      len(merged) + len(renamed)
    still_not_mgi      sorted labels still not MGI symbols on output
    """
    return {
        "not_mgi": list(not_mgi),
        "date_like": list(date_like),
        "dup_genes": list(merge_result.dup_genes),
        "merged": dict(merge_result.merged_sources),
        "renamed": dict(merge_result.renamed),
        "dropped_ambiguous": dict(merge_result.dropped_ambiguous),
        "num_corrected": merge_result.num_corrected,
        "still_not_mgi": list(still_not_mgi),
    }
