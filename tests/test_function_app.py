import json

import azure.functions as func
import pytest

from numintegral.function_app import numericalintegralservice


def _call(route_params, params=None):
    req = func.HttpRequest(
        method="GET",
        body=b"",
        url="/api/numericalintegralservice",
        route_params=route_params,
        params=params or {},
    )
    return numericalintegralservice.build().get_user_function()(req)


def test_sweep_ok():
    resp = _call({"function_id": "4", "lower": "-3", "upper": "3"}, {"n": "10,1000"})
    assert resp.status_code == 200
    payload = json.loads(resp.get_body())
    assert payload["function"] == "exp(-x^2)"
    assert [r["n"] for r in payload["results"]] == [10, 1000]
    assert payload["results"][1]["value"] == pytest.approx(1.7724146965, rel=1e-4)


@pytest.mark.parametrize(
    "route_params,params",
    [
        ({"function_id": "0", "lower": "0", "upper": "1"}, {"n": "10"}),
        ({"function_id": "1", "lower": "a", "upper": "1"}, {"n": "10"}),
        ({"function_id": "1", "lower": "0", "upper": "1"}, {"n": "10,x"}),
        ({"function_id": "1", "lower": "0", "upper": "1"}, {"n": "0"}),
        ({"function_id": "1", "lower": "0", "upper": "1"}, {"n": "10", "intensity": "-1"}),
        ({"function_id": "1", "lower": "0", "upper": "1"}, {"n": "abc"}),
        ({"function_id": "1", "lower": "nan", "upper": "1"}, {"n": "10"}),
    ],
)
def test_validation(route_params, params):
    resp = _call(route_params, params)
    assert resp.status_code == 400
    assert "error" in json.loads(resp.get_body())
