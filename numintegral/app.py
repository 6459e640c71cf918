from __future__ import annotations

import os

from flask import Flask, jsonify, request

from numintegral.errors import IntegralError
from numintegral.functions import FUNCTION_NAMES
from numintegral.integral_core import compute_integrals, parse_request, parse_sample_counts, run_request

app = Flask(__name__)


@app.get("/")
def home():
    return "OK. Try /numericalintegralservice/<functionid>/<a>/<b>/<n>/<intensity>"


@app.get("/numericalintegralservice/<function_id>/<lower>/<upper>/<n>/<intensity>")
def integral_route(function_id: str, lower: str, upper: str, n: str, intensity: str):
    try:
        req = parse_request((function_id, lower, upper, n, intensity))
    except IntegralError as e:
        return jsonify({"error": str(e)}), 400

    val, elapsed = run_request(req)
    return jsonify(
        {
            "function": FUNCTION_NAMES[req.function_id],
            "function_id": req.function_id,
            "lower": req.a,
            "upper": req.b,
            "n": req.n,
            "intensity": req.intensity,
            "value": val,
            "time_ms": elapsed * 1000,
        }
    )


@app.get("/numericalintegralservice/<function_id>/<lower>/<upper>")
def sweep_route(function_id: str, lower: str, upper: str):
    # the sweep validates every n itself, so any positive placeholder works here
    try:
        req = parse_request((function_id, lower, upper, 1, request.args.get("intensity", "0")))
    except IntegralError as e:
        return jsonify({"error": str(e)}), 400

    try:
        n_values = parse_sample_counts(request.args.getlist("n"))
        payload = compute_integrals(req.function_id, req.a, req.b, req.intensity, n_values)
    except IntegralError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(payload)


def server_options() -> dict:
    return {
        "host": os.getenv("NUMINTEGRAL_HOST", "0.0.0.0"),
        "port": int(os.getenv("NUMINTEGRAL_PORT", "5000")),
        "debug": os.getenv("NUMINTEGRAL_DEBUG", "0") == "1",
    }


if __name__ == "__main__":
    app.run(**server_options())
