import pandas as pd
import pytest

from symbol_fixer.mgi.reference import MgiReference


MRK_HEADER = "MGI Accession ID\tMarker Symbol\tStatus\tMarker Name\tMarker Synonyms (pipe-separated)\n"


@pytest.fixture
def synonym_table():
    return pd.DataFrame({
        "mgi_symbol": ["Actb", "Bar", "Hprt", "Ptprc", "Cd8a", "Gapdh"],
        "synonyms": [
            "Sept2|beta-actin",
            "Baz",
            "Hprt1|HPRT",
            "Cd45|Ly-5",
            "Lyt-2|Cd45",
            "Gapdh|Gapd",
        ],
    })


@pytest.fixture
def reference(synonym_table):
    symbols = frozenset(["Actb", "Bar", "Cd8a", "Foo", "Gapdh", "Hprt", "Ptprc"])
    return MgiReference(symbols=symbols, synonyms=synonym_table)


@pytest.fixture
def mrk_file(tmp_path):
    path = tmp_path / "MRK_List2.rpt"
    path.write_text(
        MRK_HEADER
        + "MGI:1\tActb\tO\tactin, beta\tSept2\n"
        + "MGI:2\tBar\tO\tbar gene\t\n"
        + "MGI:3\tQux\tO\tqux gene\tBaz|Quux\n",
        encoding="utf-8",
    )
    return path


def make_exp(rows, values=None):
    """Small float matrix with two samples."""
    if values is None:
        values = [[float(i + 1), float(10 * (i + 1))] for i in range(len(rows))]
    return pd.DataFrame(values, index=rows, columns=["cell1", "cell2"])
