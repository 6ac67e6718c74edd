import os
import pandas as pd

TAB_EXTENSIONS = {".tsv", ".txt", ".tab", ".rpt"}

def infer_sep(path):
    """Tab for .tsv/.txt/.tab/.rpt files, comma otherwise (.gz is looked through)."""
    name = path[:-3] if path.lower().endswith(".gz") else path
    ext = os.path.splitext(name)[1].lower()
    return "\t" if ext in TAB_EXTENSIONS else ","

def build_output_path(input_path):
    """cortex_mrna.csv -> cortex_mrna.fixed.csv, next to the input."""
    base, ext = os.path.splitext(input_path)
    if ext.lower() == ".gz":
        base, inner = os.path.splitext(base)
        ext = inner + ext
    return f"{base}.fixed{ext}"

def read_expression_matrix(path, sep=None):
    """Read a matrix whose first column holds the gene symbols."""
    sep = sep or infer_sep(path)
    exp = pd.read_csv(path, sep=sep, index_col=0, keep_default_na=False, na_values=[""])
    exp.index = exp.index.map(str)
    return exp

def save_expression_matrix(exp, path, sep=None):
    dir_path = os.path.dirname(path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)
    sep = sep or infer_sep(path)
    exp.to_csv(path, sep=sep)
    return os.path.abspath(path)
