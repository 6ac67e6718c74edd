#!/usr/bin/env python3
import numpy as np
import pandas as pd
from symbol_fixer.errors import InvalidInputError


def _to_numeric_column(col):
    # float() is correctly rounded, so "0.1" comes back as the same double
    try:
        return col.map(lambda v: float(v) if isinstance(v, str) else v).astype("float64")
    except (ValueError, TypeError):
        raise InvalidInputError(
            f"ERROR: column '{col.name}' of 'exp' contains values that are not numbers."
        )


def validate_expression_matrix(exp, row_names=None):
    """
    Check the expression matrix and return a numeric DataFrame copy.

    Rows are expected to be MGI symbols and columns samples/cells. A 2-D
    numpy array is accepted when row_names supplies its gene symbols.
    """
    if exp is None:
        raise InvalidInputError(
            "ERROR: 'exp' is null. It should be a numerical matrix with the rownames being MGI symbols."
        )

    if isinstance(exp, np.ndarray):
        if exp.ndim != 2:
            raise InvalidInputError(f"ERROR: exp must be a two-dimensional array, got {exp.ndim} dimensions")
        if row_names is None or len(row_names) != exp.shape[0]:
            raise InvalidInputError(
                "ERROR: a numpy array 'exp' needs 'row_names' with one MGI symbol per row"
            )
        if not (np.issubdtype(exp.dtype, np.number) or exp.dtype.kind in ("U", "S", "O")):
            raise InvalidInputError(f"ERROR: exp has unsupported dtype {exp.dtype}")
        if exp.dtype.kind == "S":
            exp = exp.astype(str)
        exp = pd.DataFrame(exp, index=list(row_names))
    elif isinstance(exp, pd.DataFrame):
        exp = exp.copy()
        if row_names is not None:
            if len(row_names) != exp.shape[0]:
                raise InvalidInputError("ERROR: 'row_names' length does not match the rows of 'exp'")
            exp.index = list(row_names)
    else:
        raise InvalidInputError("ERROR: exp must be either a pandas DataFrame or a 2-D numpy array")

    if any(isinstance(dtype, pd.CategoricalDtype) for dtype in exp.dtypes):
        raise InvalidInputError(
            "ERROR: Input 'exp' should not contain factors. Perhaps categorical dtypes were set while loading"
        )

    # by position, sample names may repeat
    columns = [exp.iloc[:, i] for i in range(exp.shape[1])]
    text_pos = [i for i, col in enumerate(columns)
                if not pd.api.types.is_numeric_dtype(col) or pd.api.types.is_bool_dtype(col)]
    if text_pos:
        non_text = [columns[i].name for i in text_pos
                    if not (pd.api.types.is_object_dtype(columns[i]) or pd.api.types.is_string_dtype(columns[i]))]
        if non_text:
            raise InvalidInputError(f"ERROR: exp has non-numeric columns: {', '.join(map(str, non_text))}")
        print("Warning: Input 'exp' stored as characters. Converting to numeric. Check that it looks correct.", flush=True)
        for i in text_pos:
            exp.isetitem(i, _to_numeric_column(columns[i]))

    exp.index = exp.index.map(str)
    if exp.index.has_duplicates:
        dups = exp.index[exp.index.duplicated()].unique().tolist()
        raise InvalidInputError(f"ERROR: exp has duplicated row names: {', '.join(dups[:20])}")

    return exp
