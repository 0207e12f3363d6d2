"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into logical keys.
Every read waits at most ``timeout_ms``, so a lone ESC or a truncated
escape sequence decodes to a bare ESC instead of blocking.
"""

from __future__ import annotations

import errno
import logging
import os
import select

from ..ansi import ESC
from ..errors import InputOutputError
from .keys import CSI_LETTER_KEYS, SS3_LETTER_KEYS, TILDE_SEQUENCE_KEYS, Key, key_name

logger = logging.getLogger(__name__)

READ_TIMEOUT_MS = 100

_NO_DATA_ERRNOS = frozenset({errno.EAGAIN, errno.EWOULDBLOCK, errno.EINTR})


def _read_ready_byte(fd: int, timeout_ms: int) -> int | None:
    """Return one byte from ``fd`` or ``None`` when nothing arrived in time.

    An empty read after ``select`` reported the fd ready is end of input
    (closed pipe, terminal hangup) and raises ``InputOutputError``.
    """
    try:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    except OSError as exc:
        if exc.errno in _NO_DATA_ERRNOS:
            return None
        raise InputOutputError.from_os_error("read", exc) from exc
    if not ready:
        return None
    try:
        ch = os.read(fd, 1)
    except OSError as exc:
        if exc.errno in _NO_DATA_ERRNOS:
            return None
        raise InputOutputError.from_os_error("read", exc) from exc
    if not ch:
        raise InputOutputError("read", detail="end of input")
    return ch[0]


def read_key(fd: int, timeout_ms: int = READ_TIMEOUT_MS) -> int:
    """Block until one logical key is available and return it.

    Plain bytes come back as their integer value, navigation sequences as
    ``Key`` members. Incomplete or unknown escape sequences yield ``ESC``.
    """
    while True:
        ch = _read_ready_byte(fd, timeout_ms)
        if ch is not None:
            break

    if ch != ESC:
        return ch

    key = _decode_escape_sequence(fd, timeout_ms)
    if key != ESC:
        logger.debug("decoded key %s", key_name(key))
    return key


def _decode_escape_sequence(fd: int, timeout_ms: int) -> int:
    first = _read_ready_byte(fd, timeout_ms)
    if first is None:
        return ESC
    second = _read_ready_byte(fd, timeout_ms)
    if second is None:
        return ESC

    if first == ord("["):
        if ord("0") <= second <= ord("9"):
            final = _read_ready_byte(fd, timeout_ms)
            if final != ord("~"):
                return ESC
            return TILDE_SEQUENCE_KEYS.get(second, ESC)
        return CSI_LETTER_KEYS.get(second, ESC)

    if first == ord("O"):
        return SS3_LETTER_KEYS.get(second, ESC)

    return ESC


__all__ = ["READ_TIMEOUT_MS", "Key", "read_key"]
