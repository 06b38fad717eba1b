"""
Field-indexed sentence structure and serialization.
"""

import logging
import re
from typing import Optional

import numpy as np

from . import BEGIN_CHAR, ALTERNATIVE_BEGIN_CHAR, CHECKSUM_DELIMITER, FIELD_DELIMITER
from .errors import DataNotAvailable, ParseError, ChecksumMismatch, InvalidArgument

# Module-level logger
_logger = logging.getLogger(__name__)

_TALKER_RE = re.compile(r"[A-Z0-9]{2}\Z")
_SENTENCE_ID_RE = re.compile(r"[A-Z0-9]{3}\Z")
_SENTENCE_RE = re.compile(
    r"\A([$!])([A-Z0-9]{2})([A-Z0-9]{3}),([^$!*\r\n]*)\*([0-9A-Fa-f]{2})\Z"
)
_INT_RE = re.compile(r"-?[0-9]+\Z")

# Characters that would break sentence framing if stored in a field
_FRAMING_CHARS = frozenset("$!*,\r\n")


class XORChecksum:
    """
    NMEA 0183 checksum.
    XOR of every byte between the begin character and the '*' delimiter,
    rendered as two uppercase hex digits.
    """

    @classmethod
    def compute(cls, content: str) -> int:
        """Compute the checksum of the sentence content."""
        data = np.frombuffer(content.encode("ascii"), dtype=np.uint8)
        return int(np.bitwise_xor.reduce(data))

    @classmethod
    def format(cls, checksum: int) -> str:
        return f"{checksum:02X}"

    @classmethod
    def verify(cls, content: str, checksum: str) -> bool:
        """Verify content against a two digit hex checksum."""
        return cls.format(cls.compute(content)) == checksum.upper()


class Sentence:
    """
    A delimited sentence as a fixed number of string fields.

    Wire format:
        $<talker:2><sentence id:3>,<field>,...,<field>*<checksum:2>

    Fields are stored as text. Typed setters format values before storing
    them, typed getters coerce the stored text back.

    Subclasses describing one schema set SENTENCE_ID and FIELD_COUNT so that
    parse() rejects other sentences.
    """

    SENTENCE_ID: Optional[str] = None
    FIELD_COUNT: Optional[int] = None

    def __init__(
        self,
        talker: str,
        sentence_id: str,
        field_count: int,
        begin_char: str = BEGIN_CHAR,
    ):
        """
        Initialize an empty sentence.

        Args:
            talker: Two character talker id (e.g. "CR")
            sentence_id: Three character sentence id (e.g. "NRX")
            field_count: Number of data fields, fixed for the sentence's lifetime
            begin_char: '$' or '!' (encapsulated sentences)
        """
        if not _SENTENCE_ID_RE.match(sentence_id):
            raise InvalidArgument(f"invalid sentence id: {sentence_id!r}")
        if field_count < 1:
            raise InvalidArgument(f"field_count must be positive, got {field_count}")
        if begin_char not in (BEGIN_CHAR, ALTERNATIVE_BEGIN_CHAR):
            raise InvalidArgument(f"invalid begin character: {begin_char!r}")

        self.talker = talker
        self.sentence_id = sentence_id
        self.begin_char = begin_char
        self._fields = [""] * field_count

    @property
    def talker(self) -> str:
        return self._talker

    @talker.setter
    def talker(self, talker: str):
        if not _TALKER_RE.match(talker):
            raise InvalidArgument(f"invalid talker id: {talker!r}")
        self._talker = talker

    @property
    def field_count(self) -> int:
        return len(self._fields)

    @property
    def fields(self) -> tuple:
        return tuple(self._fields)

    def _check_index(self, index: int):
        if not 0 <= index < len(self._fields):
            raise IndexError(
                f"field index {index} out of range for {self.sentence_id} "
                f"with {len(self._fields)} fields"
            )

    def reset(self):
        """Clear every field, keeping field count and identifiers."""
        for i in range(len(self._fields)):
            self._fields[i] = ""
        return self

    def has_value(self, index: int) -> bool:
        self._check_index(index)
        return self._fields[index] != ""

    # Getters

    def get_field(self, index: int) -> str:
        """
        Get the text stored in a field.

        Raises:
            DataNotAvailable: If the field is empty
        """
        if not self.has_value(index):
            raise DataNotAvailable(f"{self.sentence_id} field {index} is empty")
        return self._fields[index]

    def get_int_field(self, index: int) -> int:
        value = self.get_field(index)
        if not _INT_RE.match(value):
            raise ParseError(f"{self.sentence_id} field {index} is not an integer: {value!r}")
        return int(value)

    def get_char_field(self, index: int) -> str:
        value = self.get_field(index)
        if len(value) != 1:
            raise ParseError(f"{self.sentence_id} field {index} is not a single character: {value!r}")
        return value

    # Setters, all validate before storing so a rejected value leaves
    # the field unchanged

    def set_field(self, index: int, value: str):
        """
        Store text in a field.

        Args:
            index: Field index (0-based)
            value: ASCII text without delimiters, empty clears the field

        Returns:
            self, for chaining
        """
        self._check_index(index)
        if not isinstance(value, str):
            raise InvalidArgument(f"field value must be str, got {type(value).__name__}")
        if not value.isascii():
            raise InvalidArgument(f"field value must be ASCII: {value!r}")
        bad = _FRAMING_CHARS.intersection(value)
        if bad:
            raise InvalidArgument(f"field value contains reserved characters {sorted(bad)}: {value!r}")
        self._fields[index] = value
        return self

    def set_int_field(self, index: int, value: int, width: int = 0):
        """
        Store an integer, zero-padded to at least width digits.

        Examples:
            set_int_field(0, 7, 3) -> "007"
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidArgument(f"field value must be int, got {type(value).__name__}")
        if value < 0 and width > 0:
            raise InvalidArgument(f"cannot zero-pad negative value {value} to width {width}")
        text = f"{value:0{width}d}" if width > 0 else str(value)
        return self.set_field(index, text)

    def set_char_field(self, index: int, value: str):
        if not isinstance(value, str) or len(value) != 1:
            raise InvalidArgument(f"field value must be a single character: {value!r}")
        return self.set_field(index, value)

    # Serialization

    def _content(self) -> str:
        return FIELD_DELIMITER.join([self._talker + self.sentence_id] + self._fields)

    @property
    def checksum(self) -> str:
        return XORChecksum.format(XORChecksum.compute(self._content()))

    def to_sentence(self) -> str:
        """
        Serialize to wire text (without line terminator).

        Returns:
            e.g. "$CRNRX,,,,,,,,,,,,,*79"
        """
        content = self._content()
        checksum = XORChecksum.format(XORChecksum.compute(content))
        return f"{self.begin_char}{content}{CHECKSUM_DELIMITER}{checksum}"

    serialize = to_sentence

    @classmethod
    def _create(cls, talker: str, sentence_id: str, field_count: int, begin_char: str) -> "Sentence":
        return cls(talker, sentence_id, field_count, begin_char=begin_char)

    @classmethod
    def parse(cls, wire: str, field_count: Optional[int] = None) -> "Sentence":
        """
        Parse wire text into a sentence.

        Args:
            wire: Sentence text, optionally terminated by CR LF
            field_count: Required number of fields (default: FIELD_COUNT)

        Returns:
            Parsed sentence

        Raises:
            ParseError: If framing, sentence id or field count is wrong
            ChecksumMismatch: If the checksum does not match the content
        """
        text = wire.rstrip("\r\n")
        match = _SENTENCE_RE.match(text)
        if not match or not text.isascii():
            raise ParseError(f"malformed sentence: {wire!r}")

        begin_char, talker, sentence_id, data, checksum = match.groups()
        content = text[1:text.rindex(CHECKSUM_DELIMITER)]
        if not XORChecksum.verify(content, checksum):
            computed = XORChecksum.format(XORChecksum.compute(content))
            _logger.debug(f"Checksum mismatch: expected {computed}, got {checksum} in {text!r}")
            raise ChecksumMismatch(f"checksum {checksum} does not match computed {computed}: {text!r}")

        if cls.SENTENCE_ID is not None and sentence_id != cls.SENTENCE_ID:
            raise ParseError(f"expected {cls.SENTENCE_ID} sentence, got {sentence_id}")

        if field_count is not None and cls.FIELD_COUNT is not None and field_count != cls.FIELD_COUNT:
            raise ParseError(f"{cls.SENTENCE_ID} sentences have {cls.FIELD_COUNT} fields, not {field_count}")

        fields = data.split(FIELD_DELIMITER)
        expected = field_count if field_count is not None else cls.FIELD_COUNT
        if expected is not None and len(fields) != expected:
            raise ParseError(f"{sentence_id} must have {expected} fields, got {len(fields)}")

        sentence = cls._create(talker, sentence_id, len(fields), begin_char)
        sentence._fields[:] = fields
        return sentence

    @classmethod
    def is_valid(cls, wire: str) -> bool:
        """Check if wire text parses as this kind of sentence."""
        try:
            cls.parse(wire)
        except ParseError:
            return False
        return True

    def __str__(self) -> str:
        return self.to_sentence()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_sentence()!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sentence):
            return NotImplemented
        return self.to_sentence() == other.to_sentence()

    # Fields are mutable
    __hash__ = None
