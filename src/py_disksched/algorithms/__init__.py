"""The six disk scheduling strategies.

Each strategy is a plain function that takes the head position and the
request queue (plus the track count and direction where it needs them)
and returns an ``AlgorithmResult``.  None of them keeps state between
calls.  Use ``py_disksched.engine.run`` to pick one by tag.
"""

from py_disksched.algorithms.clook import clook
from py_disksched.algorithms.cscan import cscan
from py_disksched.algorithms.fcfs import fcfs
from py_disksched.algorithms.look import look
from py_disksched.algorithms.scan import scan
from py_disksched.algorithms.sstf import sstf

__all__ = ["clook", "cscan", "fcfs", "look", "scan", "sstf"]
