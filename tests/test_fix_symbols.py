"""End to end tests for fix_bad_mgi_symbols / run_symbol_fix."""

import warnings

import numpy as np
import pandas as pd
import pytest

from conftest import make_exp
from symbol_fixer.errors import CorruptedLabelWarning, InvalidInputError, MissingFileError
from symbol_fixer.fix_symbols import fix_bad_mgi_symbols, run_symbol_fix


def test_valid_matrix_is_returned_unchanged(reference, capsys):
    exp = make_exp(["Actb", "Gapdh", "Foo"])
    new_exp, summary = run_symbol_fix(exp, reference=reference)

    pd.testing.assert_frame_equal(new_exp, exp)
    assert summary["not_mgi"] == []
    assert summary["num_corrected"] == 0
    assert "0 rows do not have proper MGI symbols" in capsys.readouterr().out


def test_synonym_of_missing_gene_is_renamed(reference):
    exp = pd.DataFrame([[1, 2], [3, 4]], index=["Foo", "Baz"], columns=["s1", "s2"])
    new_exp = fix_bad_mgi_symbols(exp, reference=reference)

    expected = pd.DataFrame([[1, 2], [3, 4]], index=["Foo", "Bar"], columns=["s1", "s2"])
    pd.testing.assert_frame_equal(new_exp, expected)


def test_synonym_of_present_gene_is_summed_and_date_like_warned(reference):
    exp = make_exp(["Actb", "Sept2", "Gm1234"], [[1.0, 5.0], [2.0, 0.5], [7.0, 7.0]])
    with pytest.warns(CorruptedLabelWarning, match="Sept2"):
        new_exp, summary = run_symbol_fix(exp, reference=reference)

    assert list(new_exp.index) == ["Actb", "Gm1234"]
    assert new_exp.loc["Actb"].tolist() == [3.0, 5.5]
    assert new_exp.loc["Gm1234"].tolist() == [7.0, 7.0]
    assert summary["date_like"] == ["Sept2"]
    assert summary["dup_genes"] == ["Actb"]
    assert summary["merged"] == {"Sept2": "Actb"}
    assert summary["still_not_mgi"] == ["Gm1234"]


def test_ambiguous_collision_drops_both_rows(reference):
    exp = make_exp(["Actb", "Hprt1", "HPRT"])
    new_exp, summary = run_symbol_fix(exp, reference=reference)

    assert list(new_exp.index) == ["Actb"]
    assert summary["dropped_ambiguous"] == {"Hprt1": "Hprt", "HPRT": "Hprt"}


def test_duplicate_synonym_resolution_ignores_row_order(reference):
    exp = make_exp(["Cd45", "Lyt-2", "Foo"])
    forward = fix_bad_mgi_symbols(exp, reference=reference)
    backward = fix_bad_mgi_symbols(exp.iloc[::-1], reference=reference)

    # Cd45 is listed for Ptprc before Cd8a
    assert forward.loc["Ptprc"].tolist() == exp.loc["Cd45"].tolist()
    assert backward.loc["Ptprc"].tolist() == exp.loc["Cd45"].tolist()
    assert sorted(forward.index) == sorted(backward.index) == ["Cd8a", "Foo", "Ptprc"]


def test_fixing_twice_is_idempotent(reference):
    exp = make_exp(["Actb", "Sept2", "Baz", "Hprt1", "HPRT", "Cd45", "Gm1234"])
    once, _ = run_symbol_fix(exp, reference=reference)
    twice, summary = run_symbol_fix(once, reference=reference)

    pd.testing.assert_frame_equal(twice, once)
    assert summary["num_corrected"] == 0
    assert summary["not_mgi"] == ["Gm1234"]


def test_report_output(reference, capsys):
    exp = make_exp(["Actb", "Sept2", "Baz", "Gm1234", "Gm99"])
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", CorruptedLabelWarning)
        fix_bad_mgi_symbols(exp, reference=reference, print_all_bad_symbols=True)
    out = capsys.readouterr().out

    assert "4 rows do not have proper MGI symbols" in out
    assert "1 poorly annotated genes are replicates of existing genes" in out
    assert "['Actb']" in out
    assert "2 rows matched a synonym, 2 of them corrected by checking synonyms" in out
    assert "2 rows STILL do not have proper MGI symbols" in out
    assert "['Gm1234', 'Gm99']" in out


def test_long_bad_symbol_lists_are_previewed(reference, capsys):
    rows = [f"Gm{i}" for i in range(25)]
    fix_bad_mgi_symbols(make_exp(rows), reference=reference)
    out = capsys.readouterr().out

    assert "25 rows do not have proper MGI symbols" in out
    assert str(rows[:20]) in out
    assert "Gm24" not in out


def test_residual_list_only_printed_on_request(reference, capsys):
    fix_bad_mgi_symbols(make_exp(["Actb", "Gm1234"]), reference=reference)
    assert "['Gm1234']" not in capsys.readouterr().out


def test_numpy_input(reference):
    new_exp = fix_bad_mgi_symbols(np.array([[1.0, 2.0], [3.0, 4.0]]), reference=reference,
                                  row_names=["Foo", "Baz"])
    assert list(new_exp.index) == ["Foo", "Bar"]


def test_mrk_file_synonyms(reference, mrk_file):
    exp = make_exp(["Foo", "Baz"])
    new_exp = fix_bad_mgi_symbols(exp, mrk_file_path=mrk_file, reference=reference)
    # the file maps Baz to Qux, not Bar
    assert list(new_exp.index) == ["Foo", "Qux"]


def test_bad_input_fails_before_any_output(reference, capsys):
    with pytest.raises(InvalidInputError):
        fix_bad_mgi_symbols(None, reference=reference)
    assert "MGI symbols" not in capsys.readouterr().out


def test_missing_mrk_file_is_fatal(reference, tmp_path):
    with pytest.raises(MissingFileError):
        fix_bad_mgi_symbols(make_exp(["Actb"]), mrk_file_path=tmp_path / "missing.rpt",
                            reference=reference)


def test_bundled_reference_fixes_excel_septins():
    exp = make_exp(["Actb", "Sept2", "Sept7", "Hprt1"])
    with pytest.warns(CorruptedLabelWarning):
        new_exp = fix_bad_mgi_symbols(exp)
    assert list(new_exp.index) == ["Actb", "Hprt", "Septin2", "Septin7"]


def test_repeated_sample_names(reference):
    exp = pd.DataFrame([[1.0, 2.0], [3.0, 4.0]], index=["Actb", "Sept2"], columns=["cell", "cell"])
    with pytest.warns(CorruptedLabelWarning):
        new_exp, summary = run_symbol_fix(exp, reference=reference)

    assert list(new_exp.index) == ["Actb"]
    assert list(new_exp.columns) == ["cell", "cell"]
    assert new_exp.loc["Actb"].tolist() == [4.0, 6.0]
    assert summary["merged"] == {"Sept2": "Actb"}


def test_step_size_is_passed_through(reference):
    exp = make_exp(["Foo", "Baz", "Cd45", "Gm1"])
    assert fix_bad_mgi_symbols(exp, reference=reference, step_size=1).equals(
        fix_bad_mgi_symbols(exp, reference=reference)
    )
    with pytest.raises(ValueError, match="step_size"):
        fix_bad_mgi_symbols(exp, reference=reference, step_size=0)


def test_collision_report_counts_matched_and_corrected(reference, capsys):
    fix_bad_mgi_symbols(make_exp(["Actb", "Baz", "Hprt1", "HPRT"]), reference=reference)
    out = capsys.readouterr().out

    assert "3 rows matched a synonym, 1 of them corrected by checking synonyms" in out
    assert "2 rows were dropped because they map onto the same new gene:" in out


def test_bundled_data_notice(reference, capsys):
    with pytest.warns(CorruptedLabelWarning):
        fix_bad_mgi_symbols(make_exp(["Actb", "Sept2"]))
    assert "bundled MGI data is a small subset" in capsys.readouterr().out

    fix_bad_mgi_symbols(make_exp(["Actb"]), reference=reference)
    assert "small subset" not in capsys.readouterr().out


def test_no_bundled_data_notice_with_mrk_file(mrk_file, capsys):
    fix_bad_mgi_symbols(make_exp(["Actb", "Qux"]), mrk_file_path=mrk_file)
    assert "small subset" not in capsys.readouterr().out
