"""
main.py — DSA Visualizer Flask API
==================================
The web server in front of the playback engine.  Rendering lives in the
client; every route here speaks JSON.

Routes:
  GET  /api/algorithms               – registry listing (?family=sort|search|…)
  POST /api/data/generate            – random array / empty structure
  POST /api/runs                     – start an algorithm run
  GET  /api/runs/<id>                – current state + latest snapshot
  GET  /api/runs/<id>/snapshots      – snapshots since ?since=N (polling)
  POST /api/runs/<id>/pause          – pause at the next step boundary
  POST /api/runs/<id>/resume         – resume a paused run
  POST /api/runs/<id>/step           – pull exactly one step while paused
  POST /api/runs/<id>/cancel         – cancel (no further snapshots)
  POST /api/runs/<id>/delay          – change the delay between steps
  DELETE /api/runs/<id>              – drop a run (cancelling it if active)
  POST /api/compare                  – run two algorithms on the same data

State management:
  Runs live in an in-memory registry keyed by run id.  Each run pumps on
  its own background thread; the registry only holds handles.  Tree,
  graph, stack and queue operations can chain on a finished run's
  structure with "from_run", so inserts and pushes accumulate; a
  structure accepts one active run at a time (409 otherwise).  Once the
  registry holds more than MAX_RUNS runs, the oldest finished ones are
  evicted.
"""

import logging
import threading
from typing import Any, Dict

from flask import Flask, jsonify, request

from algorithms import algorithms_by_family, list_algorithms
from algorithms.step import plain
from engine import InvalidTransition, Recorder, RunHandle, WorkingSetError, compare, start
from settings import settings
from structures.generators import GENERATORS

logger = logging.getLogger(__name__)

app = Flask(__name__)

RUNS: Dict[str, RunHandle] = {}
_RUNS_LOCK = threading.Lock()

ARRAY_GENERATORS = {"random_array": "SORT_ARRAY_SIZE", "sorted_random_array": "SEARCH_ARRAY_SIZE"}


class UnknownRun(LookupError):
    pass


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------
@app.errorhandler(InvalidTransition)
def _invalid_transition(exc):
    return jsonify({"error": str(exc)}), 409


@app.errorhandler(WorkingSetError)
def _bad_working_set(exc):
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(ValueError)
def _bad_value(exc):
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(UnknownRun)
def _unknown_run(exc):
    return jsonify({"error": f"Unknown run: {exc.args[0]}"}), 404


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def get_run(run_id: str) -> RunHandle:
    with _RUNS_LOCK:
        handle = RUNS.get(run_id)
    if handle is None:
        raise UnknownRun(run_id)
    return handle


def optional_int(name: str, value: Any) -> Any:
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise ValueError(f"'{name}' must be an integer, got {value!r}")
    return value


def generate(kind: str, size: Any = None, seed: Any = None) -> Any:
    """Run a data generator by name, clamping array sizes to the configured maximum."""
    factory = GENERATORS.get(kind)
    if factory is None:
        raise ValueError(f"Unknown generator: {kind}")
    if kind in ARRAY_GENERATORS:
        size = optional_int("size", size)
        seed = optional_int("seed", seed)
        if size is None:
            size = getattr(settings, ARRAY_GENERATORS[kind])
        size = min(size, settings.MAX_ARRAY_SIZE)
        return factory(size=size, low=settings.KEY_MIN, high=settings.KEY_MAX, seed=seed)
    return factory()


def to_json(data: Any) -> Any:
    if hasattr(data, "to_dict"):
        return data.to_dict()
    if hasattr(data, "to_list"):
        return data.to_list()
    return plain(data)


def payload() -> Dict[str, Any]:
    return request.get_json(silent=True) or {}


def register(handle: RunHandle) -> None:
    """Add a run, evicting the oldest finished runs beyond MAX_RUNS."""
    with _RUNS_LOCK:
        RUNS[handle.id] = handle
        excess = len(RUNS) - settings.MAX_RUNS
        if excess <= 0:
            return
        stale = [rid for rid, h in RUNS.items() if rid != handle.id and h.controller.is_finished]
        for rid in stale[:excess]:
            del RUNS[rid]
    logger.debug("Evicted %d finished run(s)", min(excess, len(stale)))


# ---------------------------------------------------------------------------
# API: Registry & data
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    family = request.args.get("family")
    algos = algorithms_by_family(family) if family else list_algorithms()
    return jsonify([
        {
            "key":              a.key,
            "label":            a.label,
            "family":           a.family,
            "structure":        a.structure,
            "needs_target":     a.needs_target,
            "requires_sorted":  a.requires_sorted,
            "complexity_time":  a.complexity_time,
            "complexity_space": a.complexity_space,
            "description":      a.description,
        }
        for a in algos
    ])


@app.route("/api/data/generate", methods=["POST"])
def api_data_generate():
    data = payload()
    kind = data.get("kind", "random_array")
    out = generate(kind, data.get("size"), data.get("seed"))
    return jsonify({"kind": kind, "data": to_json(out)})


# ---------------------------------------------------------------------------
# API: Runs
# ---------------------------------------------------------------------------
@app.route("/api/runs", methods=["POST"])
def api_run_start():
    data = payload()
    algorithm = data.get("algorithm")
    if not algorithm:
        return jsonify({"error": "Missing 'algorithm'"}), 400

    if data.get("from_run"):
        initial = get_run(data["from_run"]).working_set
    elif data.get("data") is not None:
        initial = data["data"]
    elif data.get("generator"):
        initial = generate(data["generator"], data.get("size"), data.get("seed"))
    else:
        initial = None

    handle = start(
        algorithm,
        initial,
        delay_ms=data.get("delay_ms"),
        target=data.get("target"),
        background=True,
    )
    register(handle)
    logger.info("Run %s registered (%s)", handle.id, algorithm)
    return jsonify(handle.query().to_dict()), 201


@app.route("/api/runs/<run_id>")
def api_run_state(run_id):
    handle = get_run(run_id)
    body = handle.query().to_dict()
    body["working_set"] = to_json(handle.working_set) if handle.controller.is_finished else None
    return jsonify(body)


@app.route("/api/runs/<run_id>", methods=["DELETE"])
def api_run_delete(run_id):
    handle = get_run(run_id)
    if not handle.controller.is_finished:
        handle.cancel()
    with _RUNS_LOCK:
        RUNS.pop(run_id, None)
    logger.info("Run %s removed", run_id)
    return jsonify(handle.query().to_dict())


@app.route("/api/runs/<run_id>/snapshots")
def api_run_snapshots(run_id):
    handle = get_run(run_id)
    since = request.args.get("since", 0, type=int)
    snaps = handle.snapshots_since(since)
    return jsonify({
        "state":     handle.state.value,
        "since":     since,
        "snapshots": [s.to_dict() for s in snaps],
    })


@app.route("/api/runs/<run_id>/pause", methods=["POST"])
def api_run_pause(run_id):
    handle = get_run(run_id)
    handle.pause()
    return jsonify(handle.query().to_dict())


@app.route("/api/runs/<run_id>/resume", methods=["POST"])
def api_run_resume(run_id):
    handle = get_run(run_id)
    handle.resume()
    return jsonify(handle.query().to_dict())


@app.route("/api/runs/<run_id>/step", methods=["POST"])
def api_run_step(run_id):
    handle = get_run(run_id)
    snap = handle.step()
    body = handle.query().to_dict()
    body["stepped"] = snap is not None
    return jsonify(body)


@app.route("/api/runs/<run_id>/cancel", methods=["POST"])
def api_run_cancel(run_id):
    handle = get_run(run_id)
    handle.cancel()
    return jsonify(handle.query().to_dict())


@app.route("/api/runs/<run_id>/delay", methods=["POST"])
def api_run_delay(run_id):
    handle = get_run(run_id)
    delay = payload().get("delay_ms")
    if delay is None:
        return jsonify({"error": "Missing 'delay_ms'"}), 400
    handle.set_delay(delay)
    return jsonify(handle.query().to_dict())


# ---------------------------------------------------------------------------
# API: Comparison
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = payload()
    algos = data.get("algorithms") or []
    if len(algos) != 2:
        return jsonify({"error": "Provide exactly two algorithms"}), 400

    recorders = []
    for key in algos:
        rec = Recorder()
        rec.start(key, data.get("data"), data.get("target"))
        rec.run_to_completion()
        recorders.append(rec)

    result = compare(*recorders)
    return jsonify({
        "left":               recorders[0].export()["metrics"],
        "right":              recorders[1].export()["metrics"],
        "winner_comparisons": result.winner_comparisons,
        "winner_writes":      result.winner_writes,
        "winner_steps":       result.winner_steps,
    })


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(host=settings.HOST, port=settings.PORT, debug=settings.DEBUG)
