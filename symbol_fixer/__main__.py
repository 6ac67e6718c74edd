#!/usr/bin/env python3
"""
Command line runner for fixing bad MGI symbols in an expression matrix.

Usage:
    fix-mgi-symbols --input cortex_mrna.csv
    fix-mgi-symbols --input cortex_mrna.tsv --output fixed/cortex_mrna.tsv --mrk MRK_List2.rpt
    python3 -m symbol_fixer --input cortex_mrna.csv --print-all-bad-symbols
"""

import sys
import argparse
import os
import warnings

from symbol_fixer.errors import (
    CorruptedLabelWarning,
    InvalidInputError,
    MissingColumnError,
    MissingFileError,
)
from symbol_fixer.filesystem.paths import (
    build_output_path,
    read_expression_matrix,
    save_expression_matrix,
)
from symbol_fixer.fix_symbols import run_symbol_fix
from symbol_fixer.genes.synonyms import STEP_SIZE

def positive_int(value):
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid step size: {value}")
    if n < 1:
        raise argparse.ArgumentTypeError("Step size must be at least 1")
    return n

def build_parser():
    parser = argparse.ArgumentParser(
        description='Fix bad MGI symbols in an expression matrix',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Use the bundled MGI data:
    fix-mgi-symbols --input cortex_mrna.csv

  Use a freshly downloaded MRK_List2.rpt for the synonyms:
    fix-mgi-symbols --input cortex_mrna.csv --mrk MRK_List2.rpt --output cortex_mrna.fixed.csv
        """
    )
    parser.add_argument('--input', required=True,
                        help='Expression matrix (CSV/TSV), first column holding the MGI symbols')
    parser.add_argument('--output', help='Where to write the fixed matrix (default: <input>.fixed.<ext>)')
    parser.add_argument('--mrk', help='MRK_List2.rpt file to take synonyms from (default: bundled data)')
    parser.add_argument('--sep', help='Field separator of the input (default: from the file extension)')
    parser.add_argument('--print-all-bad-symbols', action='store_true',
                        help='Print every symbol that is still not an MGI symbol after fixing')
    parser.add_argument('--step-size', type=positive_int, default=STEP_SIZE,
                        help=f'Bad symbols matched against the synonym table at a time (default: {STEP_SIZE})')
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not os.path.exists(args.input):
        parser.error(f"--input file does not exist: {args.input}")
    output = args.output or build_output_path(args.input)

    print(f"\n{'='*80}")
    print("FIXING BAD MGI SYMBOLS")
    print(f"{'='*80}")
    print(f"""
        Arguments:
        \t--input:\t{args.input}
        \t--output:\t{output}
        \t--mrk:\t\t{args.mrk or 'bundled MGI data'}
        """, flush=True)

    exp = read_expression_matrix(args.input, sep=args.sep)
    print(f"Loaded matrix: {exp.shape[0]} rows x {exp.shape[1]} columns", flush=True)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", CorruptedLabelWarning)
        try:
            new_exp, summary = run_symbol_fix(
                exp,
                mrk_file_path=args.mrk,
                print_all_bad_symbols=args.print_all_bad_symbols,
                step_size=args.step_size,
            )
        except (InvalidInputError, MissingFileError, MissingColumnError) as e:
            print(f"\n{e}", flush=True)
            print("\n❌ Fixing MGI symbols failed.", flush=True)
            sys.exit(1)
    for w in caught:
        print(f"Warning: {w.message}", flush=True)

    out_path = save_expression_matrix(new_exp, output, sep=args.sep)

    print("\n" + "="*80)
    print(f"✓ {summary['num_corrected']} rows corrected, {len(summary['still_not_mgi'])} still not MGI symbols")
    print(f"✅ Saved fixed matrix ({new_exp.shape[0]} rows) →→→ {out_path}")
    print("="*80 + "\n", flush=True)
    return 0

if __name__ == "__main__":
    main()
