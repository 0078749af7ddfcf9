"""Parsing of command strings received from the base station."""

from __future__ import annotations

import enum
import logging
import re

from robotctl.estring import MAX_MSG_SIZE

logger = logging.getLogger(__name__)

BLE_UUID_TEST_SERVICE = "6fa632ca-6d84-4823-af1f-40a50ae188a6"
BLE_UUID_RX_STRING = "9750f60b-9c9c-4158-b620-02ec9521cd99"
BLE_UUID_TX_FLOAT = "27616294-3063-4ecc-b60b-3470ddef2938"
BLE_UUID_TX_STRING = "f235a225-6735-4d73-94cb-ee5dfce9ba83"

DEFAULT_DELIMITERS = ":|"
MAX_DELIMITERS = 8

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class CommandType(enum.IntEnum):
    """Command identifiers sent as the first field of a command string."""

    SET_POS_GAINS = 0
    SET_POS_SETPOINT = 1
    START_POS_PID = 2
    STOP_POS_PID = 3
    SEND_TOF_DATA = 4
    SEND_POS_PID_CONTROL_DATA = 5
    PID_SPEED_TEST = 6
    PING_SPEED_TEST = 7
    SET_ANGLE_GAINS = 8
    SET_ANGLE_SETPOINT = 9
    START_ANGLE_PID = 10
    STOP_ANGLE_PID = 11
    SEND_IMU_DATA = 12
    SEND_ANGLE_PID_CONTROL_DATA = 13
    START_OPEN_LOOP = 14
    FETCH_D1 = 15
    START_STUNT = 16
    FETCH_STUNT_TOF = 17
    FETCH_STUNT_KF = 18
    START_MAPPING = 19
    FETCH_MAPPING = 20


def _parse_int(token: str) -> int:
    """Read the leading integer of a token; 0 if there is none."""
    match = _INT_PREFIX.match(token)
    return int(match.group(1)) if match else 0


def _parse_float(token: str) -> float:
    """Read the leading number of a token; 0.0 if there is none."""
    match = _FLOAT_PREFIX.match(token)
    return float(match.group(1)) if match else 0.0


class RobotCommand:
    """Splits a command string into a command type followed by values.

    Fields are separated by any of the delimiter characters; empty fields are
    skipped.
    """

    def __init__(self, delimiters: str = DEFAULT_DELIMITERS) -> None:
        if not delimiters:
            raise ValueError("at least one delimiter is required")
        if len(delimiters) > MAX_DELIMITERS:
            raise ValueError(
                f"at most {MAX_DELIMITERS} delimiters are allowed, got {len(delimiters)}"
            )
        self.delimiters = delimiters
        self._splitter = re.compile("[" + re.escape(delimiters) + "]+")
        self._tokens: list[str] = []
        self._cursor: int | None = None

    def set_cmd_string(self, message: str | bytes | bytearray | memoryview) -> None:
        """Load a command string; only its first ``MAX_MSG_SIZE - 1`` characters are kept."""
        if isinstance(message, str):
            text = message
        elif isinstance(message, (bytes, bytearray, memoryview)):
            text = bytes(message).decode("latin-1")
        else:
            raise TypeError(f"expected str or bytes, got {type(message).__name__}")
        text = text.split("\0", 1)[0]
        limit = MAX_MSG_SIZE - 1
        if len(text) > limit:
            logger.warning(
                "Robot command string larger than MAX_MSG_SIZE=%d bytes, "
                "keeping only the first %d",
                MAX_MSG_SIZE,
                limit,
            )
            text = text[:limit]
        self._tokens = [token for token in self._splitter.split(text) if token]
        self._cursor = None

    def get_command_type(self) -> int:
        """Return the command type from the first field and rewind to the values."""
        if not self._tokens:
            raise ValueError("invalid command type")
        self._cursor = 1
        return _parse_int(self._tokens[0])

    def _next_token(self) -> str:
        if self._cursor is None:
            raise ValueError("get_command_type must be called before reading values")
        if self._cursor >= len(self._tokens):
            raise ValueError("no more tokens")
        token = self._tokens[self._cursor]
        self._cursor += 1
        return token

    def get_next_int(self) -> int:
        """Return the next field read as an integer."""
        return _parse_int(self._next_token())

    def get_next_float(self) -> float:
        """Return the next field read as a number."""
        return _parse_float(self._next_token())

    def get_next_str(self) -> str:
        """Return the next field as text."""
        return self._next_token()