#!/usr/bin/env python3
"""
check_symbols.py

Reads gene symbols from stdin or a file (one per line, comma separated
values allowed) and tells, for each unique symbol, whether it is an
official MGI symbol, a synonym that resolves to one, or unknown.

Output is tab separated: symbol, status (MGI / SYNONYM / UNKNOWN), MGI symbol.

Usage:
  # from file:
  python3 -m symbol_fixer.utils.check_symbols genes.txt > genes.status.tsv

  # or from a pipe, with a downloaded MRK_List2.rpt:
  cut -d, -f1 cortex_mrna.csv | tail -n +2 | python3 -m symbol_fixer.utils.check_symbols --mrk MRK_List2.rpt
"""

import sys
import argparse
from symbol_fixer.genes.normalisation import find_not_mgi
from symbol_fixer.genes.synonyms import build_synonym_index
from symbol_fixer.mgi.reference import BUNDLED_DATA_NOTICE, load_reference

def read_symbols(lines):
    symbols = []
    for ln in lines:
        for g in ln.strip().split(","):
            g = g.strip().strip('"')
            if g:
                symbols.append(g)
    # unique, first seen order
    return list(dict.fromkeys(symbols))

def check_symbols(symbols, mgi):
    """Return (symbol, status, mgi_symbol) for every symbol."""
    not_mgi = find_not_mgi(symbols, mgi.symbols)
    syn_to_mgi = build_synonym_index(mgi.synonyms, not_mgi)["mgi_symbol"].to_dict()
    rows = []
    for g in symbols:
        if g in mgi.symbols:
            rows.append((g, "MGI", g))
        elif g in syn_to_mgi:
            rows.append((g, "SYNONYM", syn_to_mgi[g]))
        else:
            rows.append((g, "UNKNOWN", ""))
    return rows

def main(argv=None):
    parser = argparse.ArgumentParser(description="Check gene symbols against MGI")
    parser.add_argument("infile", nargs="?", help="File of gene symbols (default: stdin)")
    parser.add_argument("--mrk", help="MRK_List2.rpt file to take synonyms from")
    args = parser.parse_args(argv)

    if args.infile:
        with open(args.infile, 'r', encoding='utf-8', errors='replace') as fh:
            lines = fh.readlines()
    else:
        lines = sys.stdin.readlines()

    if args.mrk is None:
        print(BUNDLED_DATA_NOTICE, file=sys.stderr)
    for symbol, status, mgi_symbol in check_symbols(read_symbols(lines), load_reference(args.mrk)):
        print(f"{symbol}\t{status}\t{mgi_symbol}")

if __name__ == "__main__":
    main()
