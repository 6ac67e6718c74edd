import re
import warnings
from symbol_fixer.errors import CorruptedLabelWarning

# --------------------------------------------------------------------------
# Detection of row labels that are not official MGI symbols
# --------------------------------------------------------------------------

# Excel turns Sept2 into 2-Sep, March1 into 1-Mar, ...
DATE_LIKE_PATTERN = re.compile(r"Sep|Mar|Feb")
PREVIEW_LIMIT = 20

def find_not_mgi(labels, mgi_symbols):
    """Return the labels that are not official MGI symbols, in input order."""
    return [label for label in labels if label not in mgi_symbols]

def find_date_like(labels):
    """Labels that might have been corrupted into dates by a spreadsheet."""
    return [label for label in labels if DATE_LIKE_PATTERN.search(label)]

def warn_date_like(not_mgi):
    date_like = find_date_like(not_mgi)
    if date_like:
        warnings.warn(
            f"Possible presence of excel corrupted date-like genes: {', '.join(date_like)}",
            CorruptedLabelWarning,
            stacklevel=3,
        )
    return date_like

# --------------------------------------------------------------------------
# Synonym field parsing
# --------------------------------------------------------------------------

def split_synonyms(raw):
    """Split a pipe-separated MRK_List2 synonym field into its tokens."""
    if raw is None or (isinstance(raw, float) and raw != raw):
        return []
    tokens = [s.strip() for s in str(raw).split("|")]
    return [s for s in tokens if s]
