import json

import azure.functions as func

from numintegral.errors import IntegralError
from numintegral.integral_core import compute_integrals, parse_request, parse_sample_counts

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)


def _error(message: str) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps({"error": message}),
        status_code=400,
        mimetype="application/json",
    )


@app.route(route="numericalintegralservice/{function_id}/{lower}/{upper}", methods=["GET"])
def numericalintegralservice(req: func.HttpRequest) -> func.HttpResponse:
    function_id = req.route_params.get("function_id")
    lower = req.route_params.get("lower")
    upper = req.route_params.get("upper")
    intensity = req.params.get("intensity", "0")

    # same validation as the Flask sweep route
    try:
        parsed = parse_request((function_id, lower, upper, 1, intensity))
        raw_n = req.params.get("n")
        n_values = parse_sample_counts(raw_n.split(",") if raw_n else [])
        payload = compute_integrals(parsed.function_id, parsed.a, parsed.b, parsed.intensity, n_values)
    except IntegralError as e:
        return _error(str(e))

    return func.HttpResponse(
        json.dumps(payload),
        status_code=200,
        mimetype="application/json",
    )
