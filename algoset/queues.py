"""Queue, stack and heap exercises."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Hashable, Iterable, Sequence
from typing import Any


def interleave(items: Sequence[Any]) -> list[Any]:
    """Interleave the first half of ``items`` with the second half.

    With an odd number of items the last one is dropped.
    """
    half = len(items) // 2
    first, second = items[:half], items[half : 2 * half]
    return [item for pair in zip(first, second) for item in pair]


def reverse_first_k(items: Sequence[Any], k: int) -> list[Any]:
    """Reverse the first ``k`` items, keeping the rest in order."""
    if not 0 <= k <= len(items):
        raise ValueError(f"k must be between 0 and {len(items)}, got {k}")
    head = list(items[:k])
    head.reverse()
    return head + list(items[k:])


def card_rotation(n: int) -> list[int]:
    """Arrange cards 1..n so that rotating card ``i`` times reveals ``i``.

    For each card ``i`` in turn, ``i`` cards are moved from the top to the
    bottom of the deck and the top card is then dealt; the returned deck
    deals the cards in order 1, 2, ..., n.
    """
    if n < 0:
        raise ValueError("number of cards must not be negative")
    positions = deque(range(n))
    result = [0] * n
    for card in range(1, n + 1):
        positions.rotate(-card)
        result[positions.popleft()] = card
    return result


def circular_tour(petrol: Sequence[int], distance: Sequence[int]) -> int | None:
    """Return the pump from which a full circle can be driven, or None."""
    if len(petrol) != len(distance):
        raise ValueError("petrol and distance must have the same length")
    start = 0
    balance = 0
    deficit = 0
    for index, (gained, needed) in enumerate(zip(petrol, distance)):
        balance += gained - needed
        if balance < 0:
            start = index + 1
            deficit += balance
            balance = 0
    return start if balance + deficit >= 0 else None


def _check_window(k: int) -> None:
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")


def max_of_subarrays(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values."""
    _check_window(k)
    window: deque[int] = deque()
    result = []
    for index, value in enumerate(values):
        while window and values[window[-1]] <= value:
            window.pop()
        window.append(index)
        if window[0] <= index - k:
            window.popleft()
        if index >= k - 1:
            result.append(values[window[0]])
    return result


def first_negatives(values: Sequence[int], k: int) -> list[int]:
    """Return the first negative value of every window of ``k``, or 0 if none."""
    _check_window(k)
    negatives: deque[int] = deque()
    result = []
    for index, value in enumerate(values):
        if value < 0:
            negatives.append(index)
        if index >= k - 1:
            while negatives and negatives[0] <= index - k:
                negatives.popleft()
            result.append(values[negatives[0]] if negatives else 0)
    return result


def first_non_repeating(stream: Iterable[str]) -> str:
    """For every prefix of ``stream``, give its first unrepeated character or '#'."""
    counts: Counter[str] = Counter()
    candidates: deque[str] = deque()
    output = []
    for char in stream:
        counts[char] += 1
        if counts[char] == 1:
            candidates.append(char)
        while candidates and counts[candidates[0]] > 1:
            candidates.popleft()
        output.append(candidates[0] if candidates else "#")
    return "".join(output)


def pairwise_destruction(words: Iterable[Hashable]) -> int:
    """Count the words left after equal neighbours cancel each other out."""
    stack: list[Hashable] = []
    for word in words:
        if stack and stack[-1] == word:
            stack.pop()
        else:
            stack.append(word)
    return len(stack)


def reverse_stack(stack: Sequence[Any]) -> list[Any]:
    """Return the stack with its top and bottom swapped end to end."""
    return list(reversed(stack))


class MaxHeap:
    """A priority queue that always yields its largest value first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Insert ``value``."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[index] < items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def pop(self) -> Any:
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        largest = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down()
        return largest

    def top(self) -> Any:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def _sift_down(self) -> None:
        items = self._items
        size = len(items)
        index = 0
        while (left := 2 * index + 1) < size:
            largest = index
            if items[left] > items[largest]:
                largest = left
            right = left + 1
            if right < size and items[right] > items[largest]:
                largest = right
            if largest == index:
                break
            items[index], items[largest] = items[largest], items[index]
            index = largest