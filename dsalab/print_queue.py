"""A bounded max-heap of print jobs ordered by priority, with a menu front end."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass

__all__ = ["PrintJob", "QueueFullError", "QueueEmptyError", "PrintQueue", "main"]

MAX_HEAP_SIZE = 10


@dataclass(frozen=True)
class PrintJob:
    """A job to print: its priority, job number and page count."""

    priority: int
    job_number: int
    pages: int

    def __str__(self) -> str:
        return (
            f"Priority: {self.priority}, Job Number: {self.job_number}, "
            f"Number of Pages: {self.pages}"
        )


class QueueFullError(Exception):
    """Raised when a job is added to a full queue."""


class QueueEmptyError(Exception):
    """Raised when a job is taken from an empty queue."""


class PrintQueue:
    """Print jobs in a max-heap of limited capacity; the highest priority comes first."""

    def __init__(self, capacity: int = MAX_HEAP_SIZE) -> None:
        self.capacity = capacity
        self._heap: list[PrintJob] = []

    def enqueue(self, job: PrintJob) -> None:
        """Add ``job``, keeping the heap ordered."""
        if len(self._heap) >= self.capacity:
            raise QueueFullError("Cannot enqueue new job. Queue is full.")
        heap = self._heap
        heap.append(job)
        position = len(heap) - 1
        while position > 0:
            parent = (position - 1) // 2
            if heap[position].priority <= heap[parent].priority:
                break
            heap[position], heap[parent] = heap[parent], heap[position]
            position = parent

    def dequeue(self) -> PrintJob:
        """Remove and return the job with the highest priority."""
        if not self._heap:
            raise QueueEmptyError("Cannot dequeue an empty list.")
        heap = self._heap
        top = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._trickle_down(0)
        return top

    def _trickle_down(self, position: int) -> None:
        heap = self._heap
        while True:
            largest = position
            for child in (2 * position + 1, 2 * position + 2):
                if child < len(heap) and heap[child].priority > heap[largest].priority:
                    largest = child
            if largest == position:
                return
            heap[position], heap[largest] = heap[largest], heap[position]
            position = largest

    def highest(self) -> PrintJob:
        """The job with the highest priority, left in the queue."""
        if not self._heap:
            raise QueueEmptyError("Cannot print out an empty list")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)


# ------------------------------------------------------------------ command
_MENU = ("1. Enqueue", "2. Print", "3. Dequeue", "4. Quit")
_QUIT = 4


def _read_line() -> str | None:
    try:
        return input()
    except EOFError:
        return None


def _menu() -> int:
    print()
    print("Enter menu choice: ")
    for entry in _MENU:
        print(entry)
    while True:
        line = _read_line()
        if line is None:
            return _QUIT
        if line.strip():
            break
    match = re.match(r"\s*([+-]?\d+)", line)
    return int(match.group(1)) if match else 0


def _read_ints(count: int) -> list[int] | None:
    """Read ``count`` integers, over as many lines as needed; None on bad or missing input."""
    values: list[int] = []
    while len(values) < count:
        line = _read_line()
        if line is None:
            return None
        for token in re.split(r"[\s,]+", line.strip()):
            if not token:
                continue
            try:
                values.append(int(token))
            except ValueError:
                return None
    return values[:count]


def main(argv: list[str] | None = None) -> int:
    """Run the interactive print queue menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Interactive print job priority queue.")
    parser.parse_args(sys.argv[1:] if argv is None else argv)

    queue = PrintQueue()
    choice = _menu()
    while choice != _QUIT:
        if choice == 1:
            print(
                "Enter print job to enqueue (priority, job Number, number of pages): ",
                end="",
            )
            values = _read_ints(3)
            print()
            if values is not None:
                try:
                    queue.enqueue(PrintJob(*values))
                except QueueFullError as error:
                    print(error)
        elif choice == 2:
            try:
                print(queue.highest())
            except QueueEmptyError as error:
                print(error)
        elif choice == 3:
            try:
                queue.dequeue()
            except QueueEmptyError as error:
                print(f"ERROR: {error}")
        choice = _menu()
    return 0


if __name__ == "__main__":
    sys.exit(main())