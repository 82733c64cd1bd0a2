"""
Per-aircraft seat calculation.

For every aircraft the worker sums the numeric part of its seat numbers
('12A' -> 12) and squares the sum. The coordinator runs one worker thread
per aircraft so that the seat queries proceed in parallel, then joins them
all before the results page is rendered.

Usage:
    calculator = SeatCalculator(database)
    results = calculator.calculate(list(database.aircraft()))
"""

import logging
import math
import re
import threading
import time
from collections import Counter
from typing import Iterable, List, Optional

from flightdesk.errors import DatabaseError
from flightdesk.models.database import Database
from flightdesk.models.records import Aircraft, Result, SeatTotals

logger = logging.getLogger(__name__)

_SEAT_ROW = re.compile(r'[+-]?[0-9]+')

# Seat rows outside a signed 64-bit integer are treated as malformed
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def seat_number(seat: str) -> int:
    """
    Numeric part of a seat number, ignoring its final letter.

    Exactly one trailing character is stripped. Anything that does not
    leave a plain integer ('A1A', '', 'A') counts as 0, as does a number
    too large for a 64-bit integer.
    """
    digits = seat[:-1]
    if not _SEAT_ROW.fullmatch(digits):
        return 0
    number = int(digits)
    if not _INT64_MIN <= number <= _INT64_MAX:
        return 0
    return number


class SeatCalculator:
    """
    Fans seat calculations out across threads, one per aircraft.

    The shared result list is the only state the threads touch together,
    and the lock guards nothing but the append.
    """

    def __init__(self, database: Database, timeout: Optional[float] = None):
        """
        Args:
            database: Query handle shared by every worker thread
            timeout: Total seconds to wait for workers, or None to wait
                     until every one of them has finished
        """
        self.database = database
        # Non-finite values mean no bound
        self.timeout = timeout if timeout is not None and math.isfinite(timeout) else None

    def seat_totals(self, aircraft_code: str) -> SeatTotals:
        """
        Sum and square the seat numbers of one aircraft.

        A failed seat query is logged and counts as no seats.
        """
        total = 0
        try:
            for seat in self.database.seat_numbers(aircraft_code):
                total += seat_number(seat)
        except DatabaseError as e:
            logger.warning(f'Seats query error for {aircraft_code}: {e}')
            return SeatTotals(total=0, square=0)

        return SeatTotals(total=total, square=total * total)

    def calculate(self, aircraft: Iterable[Aircraft]) -> List[Result]:
        """
        Compute one Result per aircraft concurrently.

        Results come back in completion order, not input order.
        """
        crafts = list(aircraft)
        results: List[Result] = []
        lock = threading.Lock()

        def run(craft: Aircraft) -> None:
            start = time.perf_counter()
            totals = self.seat_totals(craft.code)
            elapsed = time.perf_counter() - start

            with lock:
                results.append(Result(
                    aircraft_code=craft.code,
                    square=totals.square,
                    elapsed=elapsed,
                ))

        threads = [
            threading.Thread(
                target=run,
                args=(craft,),
                name=f'seats-{craft.code}',
                daemon=True,
            )
            for craft in crafts
        ]
        for thread in threads:
            thread.start()

        if self.timeout is None:
            for thread in threads:
                thread.join()
            return results

        deadline = time.monotonic() + self.timeout
        for thread in threads:
            thread.join(max(0.0, deadline - time.monotonic()))

        with lock:
            collected = list(results)

        # Unfinished means no result yet, whether or not the thread has exited
        finished = Counter(r.aircraft_code for r in collected)
        pending = []
        for thread, craft in zip(threads, crafts):
            if finished[craft.code]:
                finished[craft.code] -= 1
            else:
                pending.append(thread.name)

        if pending:
            logger.warning(
                f'Seat calculation timed out after {self.timeout}s; '
                f'{len(pending)} of {len(threads)} tasks unfinished: {", ".join(pending)}'
            )
        logger.debug(f'Calculated {len(collected)} results for {len(threads)} aircraft')
        return collected
