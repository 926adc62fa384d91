"""Drills solved with stacks and queues."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Sequence

_DECODE_PART = re.compile(r"\d+|.", re.DOTALL)
_CLOSER_TO_OPENER = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset("({[")
_RECENT_WINDOW = 3000


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """Asteroids left after all collisions.

    Positive values move right, negative values move left; the smaller one
    explodes when two meet and both explode when they are the same size.
    """
    survivors: list[int] = []
    for asteroid in asteroids:
        alive = True
        while alive and survivors and survivors[-1] > 0 and asteroid < 0:
            if survivors[-1] < -asteroid:
                survivors.pop()
            elif survivors[-1] == -asteroid:
                survivors.pop()
                alive = False
            else:
                alive = False
        if alive:
            survivors.append(asteroid)
    return survivors


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """Days to wait after each day for a warmer one, 0 when none comes."""
    waits = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperatures[pending[-1]] < temperature:
            earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append(day)
    return waits


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups into ``text`` repeated ``k`` times.

    A count of zero keeps a single copy of the text. Raises ValueError for a
    ']' with no count or no matching '['.
    """
    chars: list[str] = []
    counts: list[int] = []
    for piece in _DECODE_PART.findall(s):
        if piece.isdigit():
            counts.append(int(piece))
        elif piece == "]":
            if not counts:
                raise ValueError("']' without a repeat count")
            try:
                opening = len(chars) - 1 - chars[::-1].index("[")
            except ValueError:
                raise ValueError("']' without a matching '['") from None
            body = "".join(chars[opening + 1 :])
            del chars[opening:]
            chars.extend(body * max(counts.pop(), 1))
        else:
            chars.append(piece)
    return "".join(chars)


def predict_party_victory(senate: str) -> str:
    """Party that wins the senate vote: 'Radiant' or 'Dire'.

    Every letter other than 'R' counts as a Dire senator.
    """
    size = len(senate)
    radiant = deque(index for index, party in enumerate(senate) if party == "R")
    dire = deque(index for index, party in enumerate(senate) if party != "R")
    while radiant and dire:
        first_radiant, first_dire = radiant.popleft(), dire.popleft()
        if first_radiant < first_dire:
            radiant.append(first_radiant + size)
        else:
            dire.append(first_dire + size)
    return "Radiant" if radiant else "Dire"


def remove_stars(s: str) -> str:
    """Each '*' removes itself and the closest kept character to its left."""
    kept: list[str] = []
    for char in s:
        if char != "*":
            kept.append(char)
        elif kept:
            kept.pop()
        else:
            raise ValueError("'*' with nothing to remove")
    return "".join(kept)


def is_valid(s: str) -> bool:
    """Tell whether every bracket is closed by the matching kind in order.

    Any character that is not an opening bracket is treated as a closer.
    """
    openers: list[str] = []
    for char in s:
        if char in _OPENERS:
            openers.append(char)
        elif not openers or _CLOSER_TO_OPENER.get(char) != openers[-1]:
            return False
        else:
            openers.pop()
    return not openers


class RecentCounter:
    """Counts requests made within the last 3000 milliseconds."""

    def __init__(self) -> None:
        self._requests: deque[int] = deque()

    def ping(self, t: int) -> int:
        """Record a request at time ``t``; return the requests in [t - 3000, t]."""
        self._requests.append(t)
        while self._requests[0] < t - _RECENT_WINDOW:
            self._requests.popleft()
        return len(self._requests)


class StockSpanner:
    """Reports, for each day's price, how many consecutive days it has topped."""

    def __init__(self) -> None:
        self._higher: list[tuple[int, int]] = []
        self._day = 0

    def next(self, price: int) -> int:
        """Record ``price``; return the days up to today with price <= it."""
        while self._higher and self._higher[-1][0] <= price:
            self._higher.pop()
        if self._higher:
            span = self._day - self._higher[-1][1]
        else:
            span = self._day + 1
        self._higher.append((price, self._day))
        self._day += 1
        return span