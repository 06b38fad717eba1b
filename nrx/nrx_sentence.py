"""
NRX - NAVTEX received message sentence.

Example:
    $CRNRX,xxx,xxx,xx,aaxx,x,hhmmss.ss,xx,xx,xxxx,x.x,x.x,A,c--c*hh<CR><LF>

A long message is carried by a series of NRX sentences. The first sentence
of a series has every field set; continuation sentences only set the
sentence counters, the sequential id and the message body, leaving the
other fields empty.
"""

import re

from . import DEFAULT_TALKER, NRX_SENTENCE_ID, NRX_FIELD_COUNT, BEGIN_CHAR
from .capabilities import TimeSentenceMixin, DateSentenceMixin
from .errors import InvalidArgument
from .sentence import Sentence
from .values import DataStatus

_MESSAGE_CODE_RE = re.compile(r"[A-Z]{2}[0-9]{2}\Z")


def _check_range(name: str, value: int, low: int, high: int):
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgument(f"{name} must be int, got {type(value).__name__}")
    if not low <= value <= high:
        raise InvalidArgument(f"{name} must be from {low} to {high}, got {value}")


class NRXSentence(TimeSentenceMixin, DateSentenceMixin, Sentence):
    """
    NRX sentence with typed accessors for its 13 fields.

    Setters validate their argument before touching the field and return
    the sentence, so a reset sentence can be filled in one expression:

        nrx.reset().set_sentence_number(2).set_message_body("TEXT")
    """

    SENTENCE_ID = NRX_SENTENCE_ID
    FIELD_COUNT = NRX_FIELD_COUNT

    # Field indices
    NUMBER_OF_SENTENCES = 0
    SENTENCE_NUMBER = 1
    SEQUENTIAL_MESSAGE_ID = 2
    NAVTEX_MESSAGE_CODE = 3
    FREQUENCY_TABLE_INDEX = 4
    UTC_OF_RECEIPT = 5
    DAY = 6
    MONTH = 7
    YEAR = 8
    TOTAL_CHARACTERS = 9
    TOTAL_BAD_CHARACTERS = 10
    DATA_STATUS = 11
    MESSAGE_BODY = 12

    TIME_FIELD = UTC_OF_RECEIPT
    DAY_FIELD = DAY
    MONTH_FIELD = MONTH
    YEAR_FIELD = YEAR

    # Frequency table
    FREQUENCY_NOT_RECEIVED = 0  # test messages
    FREQUENCY_490_KHZ = 1
    FREQUENCY_518_KHZ = 2
    FREQUENCY_4209_5_KHZ = 3  # 4 through 9 reserved

    def __init__(self, talker: str = DEFAULT_TALKER, begin_char: str = BEGIN_CHAR):
        super().__init__(talker, NRX_SENTENCE_ID, NRX_FIELD_COUNT, begin_char=begin_char)

    @classmethod
    def _create(cls, talker, sentence_id, field_count, begin_char):
        return cls(talker, begin_char=begin_char)

    # Series position

    def get_number_of_sentences(self) -> int:
        """Total number of sentences carrying the message, 1 to 999."""
        return self.get_int_field(self.NUMBER_OF_SENTENCES)

    def set_number_of_sentences(self, number_of_sentences: int):
        _check_range("number of sentences", number_of_sentences, 0, 999)
        return self.set_int_field(self.NUMBER_OF_SENTENCES, number_of_sentences, 3)

    def get_sentence_number(self) -> int:
        """Position of this sentence in the series, 1 to 999."""
        return self.get_int_field(self.SENTENCE_NUMBER)

    def set_sentence_number(self, sentence_number: int):
        _check_range("sentence number", sentence_number, 0, 999)
        return self.set_int_field(self.SENTENCE_NUMBER, sentence_number, 3)

    def get_sequential_id(self) -> int:
        return self.get_int_field(self.SEQUENTIAL_MESSAGE_ID)

    def set_sequential_id(self, sequential_id: int):
        _check_range("sequential id", sequential_id, 0, 99)
        return self.set_int_field(self.SEQUENTIAL_MESSAGE_ID, sequential_id, 2)

    # Message header

    def get_message_code(self) -> str:
        """
        NAVTEX message code, e.g. "UA98": transmitter coverage area,
        subject indicator and two digit serial number.
        """
        return self.get_field(self.NAVTEX_MESSAGE_CODE)

    def set_message_code(self, message_code: str):
        if not isinstance(message_code, str) or not _MESSAGE_CODE_RE.match(message_code):
            raise InvalidArgument(
                f"message code must be two letters and a two digit serial, got {message_code!r}"
            )
        return self.set_field(self.NAVTEX_MESSAGE_CODE, message_code)

    def set_message_code_parts(self, coverage_area: str, subject: str, serial_number: int):
        """Compose the message code from its parts, e.g. ("U", "A", 98)."""
        _check_range("serial number", serial_number, 0, 99)
        for name, char in (("coverage area", coverage_area), ("subject", subject)):
            if not isinstance(char, str) or len(char) != 1 or not ("A" <= char <= "Z"):
                raise InvalidArgument(f"{name} must be a single letter A-Z, got {char!r}")
        return self.set_message_code(f"{coverage_area}{subject}{serial_number:02d}")

    def get_frequency_table_index(self) -> int:
        """
        Frequency table index:
            0 = not received over air (test messages)
            1 = 490 kHz
            2 = 518 kHz
            3 = 4209.5 kHz
            4 through 9 reserved for future use
        """
        return self.get_int_field(self.FREQUENCY_TABLE_INDEX)

    def set_frequency_table_index(self, frequency_table_index: int):
        _check_range("frequency table index", frequency_table_index, 0, 9)
        return self.set_int_field(self.FREQUENCY_TABLE_INDEX, frequency_table_index)

    # Reception quality

    def get_total_characters(self) -> int:
        """Total number of characters in this series of sentences."""
        return self.get_int_field(self.TOTAL_CHARACTERS)

    def set_total_characters(self, total: int):
        _check_range("total characters", total, 0, float("inf"))
        return self.set_int_field(self.TOTAL_CHARACTERS, total)

    def get_total_bad_characters(self) -> int:
        return self.get_int_field(self.TOTAL_BAD_CHARACTERS)

    def set_total_bad_characters(self, total: int):
        _check_range("total bad characters", total, 0, float("inf"))
        return self.set_int_field(self.TOTAL_BAD_CHARACTERS, total)

    def get_status(self) -> DataStatus:
        return DataStatus.from_char(self.get_char_field(self.DATA_STATUS))

    def set_status(self, status: DataStatus):
        if not isinstance(status, DataStatus):
            raise InvalidArgument(f"status must be a DataStatus, got {status!r}")
        return self.set_char_field(self.DATA_STATUS, status.to_char())

    # Text

    def get_message_body(self) -> str:
        """
        Escaped message text carried by this sentence. This may be only a
        part of the message, see nrx.decoder.reassemble_series().
        """
        return self.get_field(self.MESSAGE_BODY)

    def set_message_body(self, message_body: str):
        return self.set_field(self.MESSAGE_BODY, message_body)
