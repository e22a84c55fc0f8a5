"""
Tests for read_matrix / write_matrix, summaries and transpose.
"""

import io
import warnings

import pytest

from pysms.codec import SMSReader, SMSWriter
from pysms.core.exceptions import ConfigurationError, FormatError, RangeError
from pysms.sparse import (
    MatrixInfo,
    SparseStore,
    read_matrix,
    summarize,
    summarize_entries,
    transpose_matrix,
    wants_transpose,
    write_matrix,
)


class TestReadMatrix:

    def test_opens_reader(self, sms):
        store = read_matrix(SMSReader(sms("2 3 M\n2 3 7\n0 0 0\n")))
        assert store.shape == (2, 3)
        assert store.get(2, 3) == 7

    def test_already_opened_reader(self, sms):
        reader = SMSReader(sms("2 3 M\n1 1 1\n0 0 0\n"))
        reader.open()
        assert read_matrix(reader).nnz == 1

    def test_duplicates_warn(self, sms):
        with pytest.warns(UserWarning, match="1 duplicate entries overwritten"):
            store = read_matrix(SMSReader(sms("1 1 M\n1 1 2\n1 1 3\n0 0 0\n")))
        assert store.get(1, 1) == 3
        assert store.nnz == 1

    def test_no_warning_without_duplicates(self, sms):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            read_matrix(SMSReader(sms("1 2 M\n1 1 2\n1 2 3\n0 0 0\n")))

    def test_range_error_aborts(self, sms):
        with pytest.raises(RangeError):
            read_matrix(SMSReader(sms("1 1 M\n2 1 2\n0 0 0\n")))

    def test_missing_terminator_aborts(self, sms):
        with pytest.raises(FormatError):
            read_matrix(SMSReader(sms("1 1 M\n1 1 2\n")))


class TestWriteMatrix:

    def test_returns_count(self):
        store = SparseStore(2, 2)
        store.set(2, 2, 1)
        store.set(1, 2, 1)
        out = io.StringIO()
        assert write_matrix(store, SMSWriter(out)) == 2
        assert out.getvalue() == "2 2 M\n1 2 1\n2 2 1\n0 0 0\n"

    def test_all_zero_matrix(self):
        out = io.StringIO()
        write_matrix(SparseStore(4, 6), SMSWriter(out))
        assert out.getvalue() == "4 6 M\n0 0 0\n"


class TestSummarize:

    def test_counts_numeric_nonzeros(self, sms):
        store = read_matrix(SMSReader(sms("2 2 M\n1 1 3\n1 2 0\n2 2 -1\n0 0 0\n")))
        info = summarize(store)
        assert info == MatrixInfo(rows=2, cols=2, nonzero=2, density=50.0)

    def test_empty_dimensions(self):
        assert summarize(SparseStore(0, 3)).density == 0.0

    def test_stream_summary(self, sms):
        info = summarize_entries(SMSReader(sms("4 5 M\n1 1 1\n2 2 2\n0 0 0\n")))
        assert info.nonzero == 2
        assert info.density == pytest.approx(10.0)

    def test_format(self):
        info = MatrixInfo(rows=4, cols=5, nonzero=2, density=10.0)
        assert info.format(short=True) == "rows:4 columns:5 nonzero:2 density:10"
        assert info.format() == "Rows: 4\nColumns: 5\nNon-zeros: 2\nDensity%: 10"


class TestTranspose:

    def test_transposes(self, sms):
        out = io.StringIO()
        transpose_matrix(SMSReader(sms("2 3 M\n1 3 5\n2 1 6\n0 0 0\n")), SMSWriter(out))
        assert out.getvalue() == "3 2 M\n1 2 6\n3 1 5\n0 0 0\n"

    def test_tall_condition_keeps_wide_output_as_is(self, sms):
        out = io.StringIO()
        transpose_matrix(SMSReader(sms("3 2 M\n3 1 5\n0 0 0\n")), SMSWriter(out), only_if='tall')
        assert out.getvalue() == "3 2 M\n3 1 5\n0 0 0\n"

    @pytest.mark.parametrize("shape,only_if,expected", [
        ((2, 3), None, True),
        ((3, 2), None, True),
        ((3, 2), 'tall', False),
        ((2, 3), 'tall', True),
        ((2, 3), 'wide', False),
        ((3, 2), 'wide', True),
        ((3, 3), 'tall', True),
        ((3, 3), 'wide', True),
    ])
    def test_wants_transpose(self, shape, only_if, expected):
        assert wants_transpose(*shape, only_if=only_if) is expected

    def test_unknown_condition(self):
        with pytest.raises(ConfigurationError):
            wants_transpose(2, 2, only_if='square')
