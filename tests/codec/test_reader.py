"""
Tests for SMSReader.

Validates:
    - Header parsing and FormatError on a bad marker
    - Lazy single-pass iteration ending at the terminator
    - Terminator detection on coordinates only
    - RangeError for out-of-bounds coordinates
    - FormatError for malformed lines and a missing terminator
"""

import io

import pytest

from pysms.codec import Entry, Header, SMSReader, parse_token
from pysms.core.exceptions import FormatError, RangeError, StreamIOError


class TestHeader:

    def test_parses_dimensions(self, sms):
        reader = SMSReader(sms("3 4 M\n0 0 0\n"))
        assert reader.open() == Header(3, 4)
        assert reader.rows == 3
        assert reader.columns == 4

    def test_tolerates_extra_whitespace(self, sms):
        reader = SMSReader(sms("\n  2\t5   M  \n0 0 0\n"))
        assert reader.open() == Header(2, 5)

    def test_text_stream(self):
        reader = SMSReader(io.StringIO("1 1 M\n1 1 5\n0 0 0\n"))
        reader.open()
        assert list(reader) == [Entry(1, 1, 5)]

    @pytest.mark.parametrize("line", [
        "3 3 X", "3 3", "3 3 M extra", "3 x M", "-1 3 M", "3 3 m", "3.0 3 M",
    ])
    def test_malformed(self, sms, line):
        with pytest.raises(FormatError, match="Malformed SMS header") as info:
            SMSReader(sms(line + "\n0 0 0\n")).open()
        assert info.value.line_number == 1

    def test_empty_input(self, sms):
        with pytest.raises(FormatError, match="missing SMS header"):
            SMSReader(sms("")).open()

    def test_open_twice(self, sms):
        reader = SMSReader(sms("1 1 M\n0 0 0\n"))
        reader.open()
        with pytest.raises(FormatError, match="already read"):
            reader.open()

    def test_iterating_before_open(self, sms):
        with pytest.raises(FormatError, match="call open"):
            next(SMSReader(sms("1 1 M\n0 0 0\n")))

    def test_name_in_message(self, sms):
        with pytest.raises(FormatError, match="in 'matrix.sms' at line 1"):
            SMSReader(sms("1 1 Q\n"), name="matrix.sms").open()


class TestEntries:

    def test_reads_in_stream_order(self, sms):
        reader = SMSReader(sms("2 2 M\n2 1 3\n1 2 -4\n1 1 0.5\n0 0 0\n"))
        reader.open()
        assert list(reader) == [Entry(2, 1, 3), Entry(1, 2, -4), Entry(1, 1, 0.5)]

    def test_integer_and_float_values(self, sms):
        reader = SMSReader(sms("1 3 M\n1 1 7\n1 2 7.0\n1 3 1e3\n0 0 0\n"))
        reader.open()
        values = [e.value for e in reader]
        assert values == [7, 7.0, 1000.0]
        assert isinstance(values[0], int)
        assert isinstance(values[1], float)

    def test_single_pass(self, sms):
        reader = SMSReader(sms("1 1 M\n1 1 2\n0 0 0\n"))
        reader.open()
        assert len(list(reader)) == 1
        assert list(reader) == []
        assert reader.finished

    def test_stops_at_terminator(self, sms):
        stream = sms("1 1 M\n1 1 2\n0 0 0\ngarbage after\n")
        reader = SMSReader(stream)
        reader.open()
        assert list(reader) == [Entry(1, 1, 2)]
        # nothing past the terminator was consumed
        assert stream.readline() == b"garbage after\n"

    def test_is_lazy(self, sms):
        reader = SMSReader(sms("2 2 M\n1 1 1\n2 2 x\n0 0 0\n"))
        reader.open()
        assert next(reader) == Entry(1, 1, 1)
        with pytest.raises(FormatError, match="Malformed entry value"):
            next(reader)

    def test_skips_blank_lines(self, sms):
        reader = SMSReader(sms("1 1 M\n\n1 1 2\n   \n0 0 0\n"))
        reader.open()
        assert list(reader) == [Entry(1, 1, 2)]

    def test_empty_matrix(self, sms):
        reader = SMSReader(sms("0 0 M\n0 0 0\n"))
        assert reader.open() == Header(0, 0)
        assert list(reader) == []


class TestTerminator:

    def test_terminator_with_nonzero_value(self, sms):
        reader = SMSReader(sms("1 1 M\n1 1 2\n0 0 9\n1 1 3\n"))
        reader.open()
        assert list(reader) == [Entry(1, 1, 2)]

    def test_opaque_values(self, sms):
        reader = SMSReader(sms("2 2 M\n1 1 x+y\n2 2 0\n0 0 end\n"), value_type=parse_token)
        reader.open()
        assert list(reader) == [Entry(1, 1, "x+y"), Entry(2, 2, "0")]

    def test_zero_value_is_not_terminator(self, sms):
        reader = SMSReader(sms("1 1 M\n1 1 0\n0 0 0\n"))
        reader.open()
        assert list(reader) == [Entry(1, 1, 0)]

    def test_missing_terminator(self, sms):
        reader = SMSReader(sms("1 1 M\n1 1 2\n"))
        reader.open()
        assert next(reader) == Entry(1, 1, 2)
        with pytest.raises(FormatError, match="missing '0 0 0' terminator"):
            next(reader)


class TestBounds:

    @pytest.mark.parametrize("line", ["3 1 1", "1 3 1", "0 1 1", "1 0 1", "-1 1 1"])
    def test_out_of_range(self, sms, line):
        reader = SMSReader(sms(f"2 2 M\n{line}\n0 0 0\n"))
        reader.open()
        with pytest.raises(RangeError) as info:
            list(reader)
        assert (info.value.nrows, info.value.ncols) == (2, 2)

    @pytest.mark.parametrize("line", ["1 1", "1 1 1 1", "a 1 1", "1 1.5 1"])
    def test_malformed_entry(self, sms, line):
        reader = SMSReader(sms(f"2 2 M\n{line}\n0 0 0\n"))
        reader.open()
        with pytest.raises(FormatError) as info:
            list(reader)
        assert info.value.line_number == 2


class TestStreamErrors:

    def test_read_failure(self):
        class Broken(io.RawIOBase):
            def readable(self):
                return True

            def readline(self, size=-1):
                raise OSError(5, "Input/output error")

        with pytest.raises(StreamIOError) as info:
            SMSReader(Broken()).open()
        assert info.value.reason == "Input/output error"

    def test_non_ascii(self):
        with pytest.raises(FormatError, match="Non-ASCII"):
            SMSReader(io.BytesIO("1 1 Mé\n".encode('utf-8'))).open()
