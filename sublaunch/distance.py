from __future__ import annotations

import logging
from array import array
from typing import MutableSequence

log = logging.getLogger(__name__)


class InvalidBuffer(ValueError):
    def __init__(self, required: int, actual: int) -> None:
        super().__init__(f"scratch buffer too short: need {required}, got {actual}")
        self.required = required
        self.actual = actual


def distance(
    a: str,
    b: str,
    cost_sub: int,
    cost_ins: int,
    cost_del: int,
    buf1: MutableSequence[int],
    buf2: MutableSequence[int],
) -> int:
    """Weighted edit distance turning ``a`` into ``b``.

    Only two DP rows exist at any time and both live in the caller's buffers,
    which must hold at least ``max(len(a), len(b)) + 1`` cells. Their
    previous contents are never read.
    """
    if cost_sub < 0 or cost_ins < 0 or cost_del < 0:
        raise ValueError("edit costs must be non-negative")

    n = len(b)
    required = max(len(a), n) + 1
    for buf in (buf1, buf2):
        if len(buf) < required:
            raise InvalidBuffer(required, len(buf))

    prev, cur = buf1, buf2
    for j in range(n + 1):
        prev[j] = j * cost_ins

    for i, ca in enumerate(a, start=1):
        cur[0] = i * cost_del
        for j in range(1, n + 1):
            best = prev[j] + cost_del
            ins = cur[j - 1] + cost_ins
            if ins < best:
                best = ins
            sub = prev[j - 1] + (0 if ca == b[j - 1] else cost_sub)
            if sub < best:
                best = sub
            cur[j] = best
        prev, cur = cur, prev

    return prev[n]


def _new_buffer(size: int) -> array:
    return array("l", [0]) * size


class EditDistance:
    """Owns one scratch buffer pair and a fixed cost triple.

    Not safe for overlapping calls: every computation overwrites the buffers.
    """

    def __init__(
        self,
        *,
        cost_sub: int = 1,
        cost_ins: int = 5,
        cost_del: int = 5,
        buffer_size: int = 20,
    ) -> None:
        if cost_sub < 0 or cost_ins < 0 or cost_del < 0:
            raise ValueError("edit costs must be non-negative")
        if buffer_size < 1:
            raise ValueError("buffer_size must be positive")
        self.cost_sub = cost_sub
        self.cost_ins = cost_ins
        self.cost_del = cost_del
        self._buf1 = _new_buffer(buffer_size)
        self._buf2 = _new_buffer(buffer_size)

    @property
    def capacity(self) -> int:
        return len(self._buf1)

    def ensure_capacity(self, size: int) -> None:
        if size <= len(self._buf1):
            return
        # at least double
        new_size = max(size, len(self._buf1) * 2)
        log.debug("Growing edit-distance buffers %d -> %d", len(self._buf1), new_size)
        self._buf1 = _new_buffer(new_size)
        self._buf2 = _new_buffer(new_size)

    def __call__(self, a: str, b: str) -> int:
        try:
            return distance(a, b, self.cost_sub, self.cost_ins, self.cost_del, self._buf1, self._buf2)
        except InvalidBuffer as e:
            self.ensure_capacity(e.required)
        return distance(a, b, self.cost_sub, self.cost_ins, self.cost_del, self._buf1, self._buf2)
