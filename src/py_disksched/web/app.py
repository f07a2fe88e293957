"""Flask application factory for the py-disksched web API.

Request bodies use the same camelCase names as the results::

    {"algorithm": "scan", "initialHead": 53, "requests": [98, 183, 37],
     "totalTracks": 200, "direction": "right"}

Any field left out is taken from the app's ``SimulatorConfig``.
``requests`` may be a JSON list or a comma-separated string; a string is
filtered like typed input, a list is passed to the engine unchanged.
"""

from __future__ import annotations

import random
from typing import Any

from flask import Flask, Response, jsonify, request

from py_disksched.catalog import ALGORITHMS
from py_disksched.compare import compare
from py_disksched.config import SimulatorConfig
from py_disksched.engine import run
from py_disksched.logging import Logger, LogLevel
from py_disksched.requests import generate_random_requests, parse_requests, random_head
from py_disksched.types import InvalidConfigurationError

_HTTP_BAD_REQUEST = 400

# Upper bound on one /api/random draw.
MAX_RANDOM_COUNT = 1000

_SOURCE = "web"


def _run_inputs(data: dict[str, Any], config: SimulatorConfig) -> dict[str, Any]:
    """Merge a request body over *config* into ``run`` keyword arguments."""
    total_tracks = data.get("totalTracks", config.total_tracks)
    requests = data.get("requests", list(config.requests))
    if isinstance(requests, str):
        if not isinstance(total_tracks, int):
            msg = f"totalTracks must be an integer, got {total_tracks!r}"
            raise InvalidConfigurationError(msg)
        requests = parse_requests(requests, total_tracks)
    elif not isinstance(requests, list):
        msg = "requests must be a list or a comma-separated string"
        raise InvalidConfigurationError(msg)
    return {
        "initial_head": data.get("initialHead", config.initial_head),
        "requests": requests,
        "total_tracks": total_tracks,
        "direction": data.get("direction", config.direction),
    }


def create_app(config: SimulatorConfig | None = None, logger: Logger | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Defaults for omitted fields; read from the environment
            when not given.
        logger: Run log shared by every request; a fresh one if omitted.

    Returns:
        A configured Flask application ready to serve.

    """
    settings = config if config is not None else SimulatorConfig.from_env()
    run_log = logger if logger is not None else Logger()

    app = Flask(__name__)
    app.extensions["disksched.logger"] = run_log

    def _bad_request(error: InvalidConfigurationError) -> tuple[Response, int]:
        run_log.log(LogLevel.ERROR, str(error), source=_SOURCE)
        return jsonify({"error": str(error)}), _HTTP_BAD_REQUEST

    @app.route("/api/algorithms")
    def algorithms() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the algorithm catalog."""
        return jsonify([info.to_dict() for info in ALGORITHMS])

    @app.route("/api/run", methods=["POST"])
    def run_algorithm() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run one algorithm and return its ``AlgorithmResult`` as JSON."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), _HTTP_BAD_REQUEST
        try:
            inputs = _run_inputs(data, settings)
            result = run(data.get("algorithm", settings.algorithm), **inputs, logger=run_log)
        except InvalidConfigurationError as e:
            return _bad_request(e)
        return jsonify(result.to_dict())

    @app.route("/api/compare", methods=["POST"])
    def compare_algorithms() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run every algorithm and return them ranked by total seek time."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), _HTTP_BAD_REQUEST
        try:
            inputs = _run_inputs(data, settings)
            comparison = compare(**inputs, logger=run_log)
        except InvalidConfigurationError as e:
            return _bad_request(e)
        ranked = [
            {
                "id": kind.value,
                **result.to_dict(),
                "overheadPercent": comparison.overhead_percent(result),
            }
            for kind, result in comparison.ranked()
        ]
        return jsonify({"results": ranked, "best": comparison.best.name})

    @app.route("/api/random")
    def random_requests() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Draw a random head and request queue.

        Query parameters ``count``, ``tracks`` and ``seed`` are optional.
        ``count`` may not exceed ``MAX_RANDOM_COUNT``.
        """
        count = request.args.get("count", settings.random_count, type=int)
        tracks = request.args.get("tracks", settings.total_tracks, type=int)
        seed = request.args.get("seed", type=int)
        rng = random.Random(seed)  # noqa: S311
        try:
            if count > MAX_RANDOM_COUNT:
                msg = f"count must be at most {MAX_RANDOM_COUNT}, got {count}"
                raise InvalidConfigurationError(msg)
            requests = generate_random_requests(count, tracks, rng=rng)
            head = random_head(tracks, rng=rng)
        except InvalidConfigurationError as e:
            return _bad_request(e)
        return jsonify({"initialHead": head, "requests": requests, "totalTracks": tracks})

    return app


def main() -> None:
    """Run the web API development server.

    This is the ``py-disksched-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
