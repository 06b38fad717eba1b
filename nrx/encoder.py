"""
NRX Encoder - Splits a NAVTEX message into a series of NRX sentences.
"""

import logging
from typing import Optional

from . import DEFAULT_TALKER, FIRST_BUDGET, CONTINUATION_BUDGET
from . import reserved
from .errors import InvalidArgument
from .nrx_sentence import NRXSentence
from .values import DataStatus, Date, Time

# Module-level logger
_logger = logging.getLogger(__name__)

# A chunk must be able to hold one whole escape token
MIN_BUDGET = reserved.TOKEN_LENGTH - 1


def split(escaped: str, first_budget: int = FIRST_BUDGET, continuation_budget: int = CONTINUATION_BUDGET) -> list[str]:
    """
    Split escaped text into message body chunks.

    The first chunk holds at most first_budget + 1 characters, every later
    chunk at most continuation_budget + 1. A cut that would fall inside an
    escape token is moved back to the start of the token, so each chunk
    decodes on its own.

    Args:
        escaped: Text produced by reserved.encode()
        first_budget: Body budget of the first sentence
        continuation_budget: Body budget of continuation sentences

    Returns:
        Chunks whose concatenation is exactly the input. Empty input gives
        a single empty chunk.
    """
    for name, budget in (("first_budget", first_budget), ("continuation_budget", continuation_budget)):
        if budget < MIN_BUDGET:
            raise InvalidArgument(f"{name} must be at least {MIN_BUDGET}, got {budget}")

    chunks = []
    index = 0
    limit = first_budget + 1

    while True:
        end = index + limit
        if end >= len(escaped):
            chunks.append(escaped[index:])
            break

        end = reserved.token_boundary(escaped, end)
        chunks.append(escaped[index:end])
        index = end
        limit = continuation_budget + 1

    return chunks


class NRXEncoder:
    """
    Encodes message text as a series of NRX sentences.

    One NRXSentence is reused for the whole series and reset between
    chunks. Header fields are only written to the first sentence.
    """

    def __init__(
        self,
        talker: str = DEFAULT_TALKER,
        first_budget: int = FIRST_BUDGET,
        continuation_budget: int = CONTINUATION_BUDGET,
    ):
        """
        Initialize encoder.

        Args:
            talker: Talker id of the emitted sentences
            first_budget: Body budget of the first sentence
            continuation_budget: Body budget of continuation sentences
        """
        self.first_budget = first_budget
        self.continuation_budget = continuation_budget
        self.sentence = NRXSentence(talker)

    def encode(
        self,
        text: str,
        message_code: str,
        sequential_id: int = 0,
        frequency_table_index: int = NRXSentence.FREQUENCY_490_KHZ,
        time: Optional[Time] = None,
        date: Optional[Date] = None,
        status: DataStatus = DataStatus.ACTIVE,
        bad_characters: int = 0,
    ) -> list[str]:
        """
        Encode a message.

        Args:
            text: Message text, may contain reserved characters
            message_code: NAVTEX message code, e.g. "UA98"
            sequential_id: Sequential message id (0-99)
            frequency_table_index: Frequency the message was received on (0-9)
            time: UTC of receipt, omitted if None
            date: Date of receipt, omitted if None
            status: Data quality status
            bad_characters: Number of characters received with errors

        Returns:
            Wire text of each sentence in the series
        """
        escaped = reserved.encode(text)
        chunks = split(escaped, self.first_budget, self.continuation_budget)
        _logger.debug(
            f"Encoding {len(text)} characters ({len(escaped)} escaped) "
            f"as {len(chunks)} sentences"
        )

        nrx = self.sentence
        sentences = []

        for number, chunk in enumerate(chunks, start=1):
            nrx.reset()
            if number == 1:
                nrx.set_message_code(message_code)
                nrx.set_frequency_table_index(frequency_table_index)
                if time is not None:
                    nrx.set_time(time)
                if date is not None:
                    nrx.set_date(date)
                nrx.set_total_characters(len(text))
                nrx.set_total_bad_characters(bad_characters)
                nrx.set_status(status)

            nrx.set_number_of_sentences(len(chunks))
            nrx.set_sentence_number(number)
            nrx.set_sequential_id(sequential_id)
            nrx.set_message_body(chunk)

            wire = nrx.to_sentence()
            _logger.debug(f"Sentence {number}/{len(chunks)}: {wire}")
            sentences.append(wire)

        return sentences


def parse_budgets(budgets: str) -> tuple[int, int]:
    """
    Parse a "FIRST:CONTINUATION" budget pair, e.g. "28:57".

    A single number sets both budgets.
    """
    parts = budgets.strip().split(":")
    try:
        values = [int(part) for part in parts]
    except ValueError:
        raise InvalidArgument(f"invalid budgets: {budgets!r}") from None

    if len(values) == 1:
        return values[0], values[0]
    if len(values) == 2:
        return values[0], values[1]
    raise InvalidArgument(f"invalid budgets: {budgets!r}")
