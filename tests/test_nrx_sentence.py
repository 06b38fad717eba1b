"""
Tests for the NRX sentence schema.
"""

import datetime

import pytest

from nrx import (
    NRXSentence,
    Sentence,
    DataStatus,
    Date,
    Time,
    DataNotAvailable,
    ParseError,
    InvalidArgument,
)

EMPTY_NRX = "$CRNRX,,,,,,,,,,,,,*79"


@pytest.fixture
def nrx():
    return NRXSentence()


@pytest.fixture
def first_sentence():
    """First sentence of a series, every field set."""
    sentence = NRXSentence()
    sentence.set_number_of_sentences(3)
    sentence.set_sentence_number(1)
    sentence.set_sequential_id(0)
    sentence.set_message_code("UA98")
    sentence.set_frequency_table_index(1)
    sentence.set_time(Time(10, 23, 8.0))
    sentence.set_date(Date(2018, 3, 1))
    sentence.set_total_characters(429)
    sentence.set_total_bad_characters(0)
    sentence.set_status(DataStatus.ACTIVE)
    sentence.set_message_body("210640 UTC FEB^0A")
    return sentence


class TestEmptyNRX:
    """Test a sentence with every field empty."""

    def test_new_sentence(self, nrx):
        assert nrx.to_sentence() == EMPTY_NRX

    def test_parse_empty(self):
        nrx = NRXSentence.parse(EMPTY_NRX)
        assert nrx.talker == "CR"
        assert nrx.field_count == 13
        assert nrx.to_sentence() == EMPTY_NRX

    @pytest.mark.parametrize("getter", [
        "get_number_of_sentences",
        "get_sentence_number",
        "get_sequential_id",
        "get_message_code",
        "get_frequency_table_index",
        "get_time",
        "get_date",
        "get_total_characters",
        "get_total_bad_characters",
        "get_status",
        "get_message_body",
    ])
    def test_getters_not_available(self, getter):
        nrx = NRXSentence.parse(EMPTY_NRX)
        with pytest.raises(DataNotAvailable):
            getattr(nrx, getter)()


class TestNRXFormatting:
    """Test field formatting on the wire."""

    def test_first_sentence(self, first_sentence):
        wire = first_sentence.to_sentence()
        content = "CRNRX,003,001,00,UA98,1,102308.00,01,03,2018,429,0,A,210640 UTC FEB^0A"
        assert wire.startswith("$" + content + "*")
        assert wire.endswith(first_sentence.checksum)

    def test_continuation_sentence(self, nrx):
        nrx.set_number_of_sentences(3).set_sentence_number(2).set_sequential_id(0)
        nrx.set_message_body("ESTONIAN NAV WARN")
        assert nrx.to_sentence().startswith("$CRNRX,003,002,00,,,,,,,,,,ESTONIAN NAV WARN*")

    def test_reset_for_next_chunk(self, first_sentence):
        first_sentence.reset()
        assert first_sentence.to_sentence() == EMPTY_NRX

    def test_talker(self):
        assert NRXSentence("II").to_sentence().startswith("$IINRX,")


class TestNRXParsing:
    """Test typed getters on parsed sentences."""

    def test_round_trip(self, first_sentence):
        wire = first_sentence.to_sentence()
        parsed = NRXSentence.parse(wire)

        assert parsed.to_sentence() == wire
        assert parsed.checksum == first_sentence.checksum
        assert parsed.get_number_of_sentences() == 3
        assert parsed.get_sentence_number() == 1
        assert parsed.get_sequential_id() == 0
        assert parsed.get_message_code() == "UA98"
        assert parsed.get_frequency_table_index() == 1
        assert parsed.get_time() == Time(10, 23, 8.0)
        assert parsed.get_date() == Date(2018, 3, 1)
        assert parsed.get_total_characters() == 429
        assert parsed.get_total_bad_characters() == 0
        assert parsed.get_status() is DataStatus.ACTIVE
        assert parsed.get_message_body() == "210640 UTC FEB^0A"

    def test_parse_returns_nrx(self, first_sentence):
        assert isinstance(NRXSentence.parse(first_sentence.to_sentence()), NRXSentence)

    def test_generic_parse_then_schema(self, first_sentence):
        generic = Sentence.parse(first_sentence.to_sentence())
        assert generic.sentence_id == "NRX"
        assert NRXSentence.parse(generic.to_sentence()).get_message_code() == "UA98"

    def test_wrong_sentence_id(self):
        wire = Sentence("CR", "VHW", 13).to_sentence()
        with pytest.raises(ParseError):
            NRXSentence.parse(wire)

    def test_wrong_field_count(self):
        wire = Sentence("CR", "NRX", 12).to_sentence()
        with pytest.raises(ParseError):
            NRXSentence.parse(wire)

    def test_invalid_status(self, nrx):
        nrx.set_field(NRXSentence.DATA_STATUS, "X")
        with pytest.raises(ParseError):
            nrx.get_status()

    def test_void_status(self, nrx):
        nrx.set_status(DataStatus.VOID)
        assert nrx.get_field(NRXSentence.DATA_STATUS) == "V"
        assert NRXSentence.parse(nrx.to_sentence()).get_status() is DataStatus.VOID

    def test_invalid_time(self, nrx):
        nrx.set_field(NRXSentence.UTC_OF_RECEIPT, "10:23")
        with pytest.raises(ParseError):
            nrx.get_time()

    def test_invalid_date(self, nrx):
        nrx.set_date(Date(2018, 3, 1))
        nrx.set_field(NRXSentence.MONTH, "MAR")
        with pytest.raises(ParseError):
            nrx.get_date()

    def test_date_not_validated(self, nrx):
        """Day-of-month correctness is left to the caller."""
        nrx.set_date(Date(2018, 2, 31))
        assert nrx.get_date() == Date(2018, 2, 31)
        with pytest.raises(ValueError):
            nrx.get_date().to_date()

    def test_field_count_is_fixed(self, nrx):
        """Twelve fields never parse as NRX, whatever count is asked for."""
        short = Sentence("CR", "NRX", 12).to_sentence()
        with pytest.raises(ParseError):
            NRXSentence.parse(short, field_count=12)
        with pytest.raises(ParseError):
            NRXSentence.parse(short)
        with pytest.raises(ParseError):
            NRXSentence.parse(nrx.to_sentence(), field_count=12)
        assert NRXSentence.parse(nrx.to_sentence(), field_count=13).field_count == 13


class TestNRXValidation:
    """Test set-time range checks."""

    def test_frequency_table_index_range(self, nrx):
        nrx.set_frequency_table_index(0)
        nrx.set_frequency_table_index(9)
        with pytest.raises(InvalidArgument):
            nrx.set_frequency_table_index(-1)

    def test_frequency_table_index_rejected_keeps_value(self, nrx):
        nrx.set_frequency_table_index(2)
        with pytest.raises(InvalidArgument):
            nrx.set_frequency_table_index(10)
        assert nrx.get_frequency_table_index() == 2

    def test_sequential_id_range(self, nrx):
        nrx.set_sequential_id(99)
        assert nrx.get_field(NRXSentence.SEQUENTIAL_MESSAGE_ID) == "99"
        nrx.set_sequential_id(5)
        assert nrx.get_field(NRXSentence.SEQUENTIAL_MESSAGE_ID) == "05"
        with pytest.raises(InvalidArgument):
            nrx.set_sequential_id(100)
        assert nrx.get_sequential_id() == 5

    def test_sentence_counter_width(self, nrx):
        nrx.set_number_of_sentences(999).set_sentence_number(1)
        assert nrx.get_field(NRXSentence.SENTENCE_NUMBER) == "001"
        with pytest.raises(InvalidArgument):
            nrx.set_number_of_sentences(1000)
        with pytest.raises(InvalidArgument):
            nrx.set_sentence_number(-1)
        assert nrx.get_number_of_sentences() == 999

    def test_character_totals_non_negative(self, nrx):
        nrx.set_total_characters(0).set_total_bad_characters(12345)
        with pytest.raises(InvalidArgument):
            nrx.set_total_characters(-1)
        with pytest.raises(InvalidArgument):
            nrx.set_total_bad_characters(-1)

    @pytest.mark.parametrize("code", ["UA9", "UA100", "ua98", "U198", "UA9A", ""])
    def test_invalid_message_code(self, nrx, code):
        with pytest.raises(InvalidArgument):
            nrx.set_message_code(code)
        assert not nrx.has_value(NRXSentence.NAVTEX_MESSAGE_CODE)

    def test_message_code_parts(self, nrx):
        nrx.set_message_code_parts("U", "A", 8)
        assert nrx.get_message_code() == "UA08"

    def test_message_code_serial_range(self, nrx):
        with pytest.raises(InvalidArgument):
            nrx.set_message_code_parts("U", "A", 100)
        with pytest.raises(InvalidArgument):
            nrx.set_message_code_parts("U", "A", -1)
        with pytest.raises(InvalidArgument):
            nrx.set_message_code_parts("UA", "A", 1)

    def test_status_type(self, nrx):
        with pytest.raises(InvalidArgument):
            nrx.set_status("A")

    def test_invalid_time_rejected(self, nrx):
        nrx.set_time(Time(23, 59, 59.99))
        with pytest.raises(InvalidArgument):
            nrx.set_time(Time(24, 0, 0.0))
        assert nrx.get_time() == Time(23, 59, 59.99)

    def test_invalid_date_rejected_atomically(self, nrx):
        nrx.set_date(Date(2018, 3, 1))
        with pytest.raises(InvalidArgument):
            nrx.set_date(Date(2019, -1, 1))
        assert nrx.get_date() == Date(2018, 3, 1)

    def test_body_must_be_escaped(self, nrx):
        with pytest.raises(InvalidArgument):
            nrx.set_message_body("A,B")


class TestDateTimeValues:
    """Test conversion between field values and datetime."""

    def test_time_format(self):
        assert str(Time(10, 23, 8.0)) == "102308.00"
        assert str(Time(0, 0, 0.5)) == "000000.50"

    def test_time_parse(self):
        assert Time.parse("102308.00") == Time(10, 23, 8.0)
        assert Time.parse("102308") == Time(10, 23, 8.0)

    def test_set_datetime_values(self, nrx):
        nrx.set_time(datetime.time(10, 23, 8))
        nrx.set_date(datetime.date(2018, 3, 1))
        assert nrx.get_field(NRXSentence.UTC_OF_RECEIPT) == "102308.00"
        assert nrx.get_date().to_date() == datetime.date(2018, 3, 1)
        assert nrx.get_time().to_time().replace(tzinfo=None) == datetime.time(10, 23, 8)

    def test_time_rounding_carries(self):
        assert str(Time(10, 23, 59.996)) == "102400.00"
        assert str(Time(10, 59, 59.999)) == "110000.00"

    def test_time_rounding_past_midnight_rejected(self):
        with pytest.raises(InvalidArgument):
            str(Time(23, 59, 59.999))

    def test_rounded_datetime_reads_back(self, nrx):
        nrx.set_time(datetime.time(10, 23, 59, 996000))
        assert nrx.get_field(NRXSentence.UTC_OF_RECEIPT) == "102400.00"
        assert nrx.get_time().to_time().replace(tzinfo=None) == datetime.time(10, 24, 0)

    def test_out_of_range_time_to_time(self):
        with pytest.raises(ParseError):
            Time.parse("102360.00").to_time()
        with pytest.raises(ParseError):
            Time.parse("250000.00").to_time()

    @pytest.mark.parametrize("text", [
        "1234nan",
        "1234inf",
        "1234-1.5",
        "12341_0",
        "1234 5.0",
        "123405.",
        "12:34:05",
    ])
    def test_time_parse_rejects_malformed(self, text):
        with pytest.raises(ParseError):
            Time.parse(text)
