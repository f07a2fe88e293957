"""Tests for the six disk scheduling strategies.

The disk arm moves across tracks and the time is dominated by **seek
time** — how far the arm must travel.  Each strategy decides the order
in which requests are serviced.

Algorithms tested:
    - **FCFS** — First Come, First Served.  Service in arrival order.
    - **SSTF** — Shortest Seek Time First.  Service nearest request.
    - **SCAN** — Elevator algorithm.  Sweep to the edge, then reverse.
    - **C-SCAN** — Circular SCAN.  Sweep to the edge, jump to the other edge.
    - **LOOK** — SCAN that reverses at the last request.
    - **C-LOOK** — C-SCAN that jumps between requests, not edges.
"""

from py_disksched.algorithms import clook, cscan, fcfs, look, scan, sstf
from py_disksched.types import Direction

# -- Textbook example constants -----------------------------------------------
# Classic disk scheduling example: 8 requests with head at track 53.
_TEXTBOOK_REQUESTS = [98, 183, 37, 122, 14, 124, 65, 67]
_TEXTBOOK_HEAD = 53
_TRACKS = 200
_LAST_TRACK = 199
_NEAREST_TO_53 = 65


# -- FCFS (First Come, First Served) ------------------------------------------


class TestFCFS:
    """FCFS services requests in the order they arrive — no reordering."""

    def test_preserves_order(self) -> None:
        """Requests should be serviced in submission order."""
        result = fcfs(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS)
        assert list(result.sequence) == [_TEXTBOOK_HEAD, *_TEXTBOOK_REQUESTS]

    def test_textbook_total(self) -> None:
        """The textbook example moves the head 640 tracks."""
        result = fcfs(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS)
        assert result.total_seek_time == 640
        assert result.average_seek_time == 80.0

    def test_step_indexes_follow_input(self) -> None:
        """Step i should service request i."""
        result = fcfs(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS)
        for i, step in enumerate(result.steps):
            assert step.step_index == i
            assert step.to_track == _TEXTBOOK_REQUESTS[i]

    def test_names(self) -> None:
        """FCFS should carry its catalog names."""
        result = fcfs(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS)
        assert result.name == "FCFS"
        assert result.full_name == "First Come First Serve"

    def test_single_request(self) -> None:
        """A single request is one step."""
        result = fcfs(50, [100])
        assert result.sequence == (50, 100)
        assert result.total_seek_time == 50

    def test_input_not_modified(self) -> None:
        """The caller's list must be left alone."""
        requests = [30, 10, 20]
        fcfs(0, requests)
        assert requests == [30, 10, 20]


# -- SSTF (Shortest Seek Time First) ------------------------------------------


class TestSSTF:
    """SSTF always services the request nearest to the current head."""

    def test_nearest_first(self) -> None:
        """The first serviced request should be closest to the head."""
        result = sstf(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS)
        assert result.sequence[1] == _NEAREST_TO_53

    def test_textbook_order(self) -> None:
        """The textbook example has a well-known SSTF order."""
        result = sstf(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS)
        assert result.sequence == (53, 65, 67, 37, 14, 98, 122, 124, 183)
        assert result.total_seek_time == 236
        assert result.average_seek_time == 29.5

    def test_tie_goes_to_first_in_queue(self) -> None:
        """Equidistant requests: the one listed first wins."""
        assert sstf(50, [60, 40]).sequence == (50, 60, 40)
        assert sstf(50, [40, 60]).sequence == (50, 40, 60)

    def test_duplicates_serviced_separately(self) -> None:
        """Duplicate requests each get their own step."""
        result = sstf(50, [70, 70, 30])
        assert result.sequence == (50, 70, 70, 30)
        assert result.steps[1].distance == 0
        assert result.total_seek_time == 60

    def test_all_requests_serviced(self) -> None:
        """All requests must be serviced exactly once."""
        result = sstf(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS)
        assert sorted(result.sequence[1:]) == sorted(_TEXTBOOK_REQUESTS)

    def test_reduces_movement(self) -> None:
        """SSTF should move less than FCFS for this example."""
        sstf_total = sstf(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS).total_seek_time
        fcfs_total = fcfs(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS).total_seek_time
        assert sstf_total < fcfs_total


# -- SCAN (Elevator Algorithm) ------------------------------------------------


class TestSCAN:
    """SCAN sweeps to the disk edge, then reverses.  Like an elevator."""

    def test_textbook_right(self) -> None:
        """Sweeping right visits 199 before turning back."""
        result = scan(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, _TRACKS, Direction.RIGHT)
        assert result.sequence == (53, 65, 67, 98, 122, 124, 183, 199, 37, 14)
        assert result.total_seek_time == 331
        assert result.boundary_stops == (6,)

    def test_textbook_left(self) -> None:
        """Sweeping left visits 0 before turning back."""
        result = scan(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, _TRACKS, Direction.LEFT)
        assert result.sequence == (53, 37, 14, 0, 65, 67, 98, 122, 124, 183)
        assert result.total_seek_time == 236
        assert result.boundary_stops == (2,)

    def test_average_ignores_boundary_stop(self) -> None:
        """The average divides by the eight requests, not the nine steps."""
        result = scan(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, _TRACKS, Direction.RIGHT)
        assert result.step_count == 9
        assert result.average_seek_time == 331 / 8

    def test_no_boundary_when_already_at_edge(self) -> None:
        """A head parked on the last track does not step to it again."""
        result = scan(_LAST_TRACK, [50], _TRACKS, Direction.RIGHT)
        assert result.sequence == (_LAST_TRACK, 50)
        assert result.boundary_stops == ()

    def test_no_boundary_at_track_zero(self) -> None:
        """A head on track 0 sweeping left goes straight to the right side."""
        result = scan(0, [10], _TRACKS, Direction.LEFT)
        assert result.sequence == (0, 10)

    def test_request_on_head_goes_right(self) -> None:
        """A request equal to the head is serviced on the right-hand pass."""
        result = scan(50, [50, 40], _TRACKS, Direction.LEFT)
        assert result.sequence == (50, 40, 0, 50)
        assert result.total_seek_time == 100

    def test_request_on_head_served_first_going_right(self) -> None:
        """Sweeping right, a request on the head is serviced before moving."""
        result = scan(50, [50, 40], _TRACKS, Direction.RIGHT)
        assert result.sequence == (50, 50, _LAST_TRACK, 40)
        assert result.total_seek_time == 308

    def test_serviced_excludes_boundary(self) -> None:
        """``serviced`` lists only real requests."""
        result = scan(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, _TRACKS, Direction.RIGHT)
        assert result.serviced == (65, 67, 98, 122, 124, 183, 37, 14)

    def test_empty_queue_does_not_move(self) -> None:
        """With nothing to do, SCAN does not sweep to the edge."""
        result = scan(50, [], _TRACKS, Direction.RIGHT)
        assert result.sequence == (50,)
        assert result.steps == ()


# -- C-SCAN (Circular SCAN) ---------------------------------------------------


class TestCSCAN:
    """C-SCAN sweeps in one direction only, then jumps back to the other edge."""

    def test_textbook_right(self) -> None:
        """Sweeping right visits 199, jumps to 0, and continues upward."""
        result = cscan(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, _TRACKS, Direction.RIGHT)
        assert result.sequence == (53, 65, 67, 98, 122, 124, 183, 199, 0, 14, 37)
        assert result.total_seek_time == 382
        assert result.boundary_stops == (6, 7)

    def test_textbook_left(self) -> None:
        """Sweeping left visits 0, jumps to 199, and continues downward."""
        result = cscan(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, _TRACKS, Direction.LEFT)
        assert result.sequence == (53, 37, 14, 0, 199, 183, 124, 122, 98, 67, 65)
        assert result.total_seek_time == 386

    def test_jump_happens_even_from_edge(self) -> None:
        """The wrap-around jump is unconditional when requests remain."""
        result = cscan(_LAST_TRACK, [50], _TRACKS, Direction.RIGHT)
        assert result.sequence == (_LAST_TRACK, 0, 50)
        assert result.total_seek_time == 249

    def test_no_jump_without_far_side_requests(self) -> None:
        """With nothing behind the head, C-SCAN stops at the edge."""
        result = cscan(50, [60, 80], _TRACKS, Direction.RIGHT)
        assert result.sequence == (50, 60, 80, _LAST_TRACK)
        assert result.total_seek_time == 149

    def test_request_on_head_waits_for_wrap_going_left(self) -> None:
        """Sweeping left, a request on the head is serviced after the jump."""
        result = cscan(50, [50, 20, 80], 100, Direction.LEFT)
        assert result.sequence == (50, 20, 0, 99, 80, 50)
        assert result.total_seek_time == 198
        assert result.boundary_stops == (1, 2)

    def test_request_on_head_served_first_going_right(self) -> None:
        """Sweeping right, a request on the head is serviced before moving."""
        result = cscan(50, [50, 20], 100, Direction.RIGHT)
        assert result.sequence == (50, 50, 99, 0, 20)
        assert result.total_seek_time == 168

    def test_average_uses_request_count(self) -> None:
        """Two boundary stops do not change the divisor."""
        result = cscan(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, _TRACKS, Direction.RIGHT)
        assert result.average_seek_time == 382 / 8


# -- LOOK ---------------------------------------------------------------------


class TestLOOK:
    """LOOK reverses at the last request instead of the disk edge."""

    def test_textbook_right(self) -> None:
        """No stop at 199: the head turns around at 183."""
        result = look(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, Direction.RIGHT)
        assert result.sequence == (53, 65, 67, 98, 122, 124, 183, 37, 14)
        assert result.total_seek_time == 299
        assert result.boundary_stops == ()

    def test_textbook_left(self) -> None:
        """Sweeping left turns around at 14."""
        result = look(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, Direction.LEFT)
        assert result.sequence == (53, 37, 14, 65, 67, 98, 122, 124, 183)
        assert result.total_seek_time == 208

    def test_request_on_head_served_first_going_right(self) -> None:
        """A request on the head costs nothing when sweeping right."""
        result = look(50, [50, 40], Direction.RIGHT)
        assert result.sequence == (50, 50, 40)
        assert result.total_seek_time == 10

    def test_request_on_head_served_last_going_left(self) -> None:
        """Sweeping left, a request on the head waits for the return pass."""
        result = look(50, [50, 40], Direction.LEFT)
        assert result.sequence == (50, 40, 50)
        assert result.total_seek_time == 20

    def test_never_worse_than_scan(self) -> None:
        """Skipping the edge can only save movement."""
        look_total = look(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, Direction.RIGHT).total_seek_time
        scan_total = scan(
            _TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, _TRACKS, Direction.RIGHT
        ).total_seek_time
        assert look_total <= scan_total


# -- C-LOOK (Circular LOOK) ---------------------------------------------------


class TestCLOOK:
    """C-LOOK jumps from the last request straight to the furthest one behind."""

    def test_textbook_right(self) -> None:
        """The head jumps 183 -> 14 and keeps moving up."""
        result = clook(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, Direction.RIGHT)
        assert result.sequence == (53, 65, 67, 98, 122, 124, 183, 14, 37)
        assert result.total_seek_time == 322
        assert result.boundary_stops == ()

    def test_textbook_left(self) -> None:
        """The head jumps 14 -> 183 and keeps moving down."""
        result = clook(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, Direction.LEFT)
        assert result.sequence == (53, 37, 14, 183, 124, 122, 98, 67, 65)
        assert result.total_seek_time == 326

    def test_request_on_head_served_first_going_right(self) -> None:
        """Sweeping right, a request on the head costs nothing."""
        result = clook(50, [50, 40], Direction.RIGHT)
        assert result.sequence == (50, 50, 40)
        assert result.total_seek_time == 10

    def test_request_on_head_served_last_going_left(self) -> None:
        """Sweeping left, a request on the head is reached after the jump."""
        result = clook(50, [50, 40], Direction.LEFT)
        assert result.sequence == (50, 40, 50)
        assert result.total_seek_time == 20

    def test_names(self) -> None:
        """C-LOOK should carry its catalog names."""
        result = clook(_TEXTBOOK_HEAD, _TEXTBOOK_REQUESTS, Direction.RIGHT)
        assert result.name == "C-LOOK"
        assert result.full_name == "Circular LOOK"
