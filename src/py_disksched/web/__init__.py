"""JSON web API for the scheduling engine.

This package provides a Flask application that serves the engine over
HTTP.  It is an **optional** extra — install with::

    pip install py-disksched[web]

The ``create_app`` factory in ``app.py`` serves four endpoints:

- ``GET /api/algorithms`` — the algorithm catalog.
- ``POST /api/run`` — run one algorithm and return its result.
- ``POST /api/compare`` — run every algorithm and rank them.
- ``GET /api/random`` — draw a random head and request queue.
"""
