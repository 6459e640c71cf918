import math

import pytest

from numintegral.errors import InvalidFunctionId
from numintegral.functions import DEFAULT_INTEGRANDS, FUNCTION_NAMES, FUNCTIONS, f1, f2, f3, f4, resolve_function
from numintegral.integral_core import validate_request


@pytest.mark.parametrize("function_id,name", [(1, "f1"), (2, "f2"), (3, "f3"), (4, "f4")])
def test_resolve_selects_matching_member(stub_integrands, function_id, name):
    bundle, calls = stub_integrands
    f = resolve_function(function_id, bundle)
    assert f is getattr(bundle, name)
    f(0.5, 0)
    assert calls == [name]


@pytest.mark.parametrize("function_id", [0, 5, 7, -1])
def test_resolve_rejects_unknown_ids(stub_integrands, function_id):
    bundle, calls = stub_integrands
    with pytest.raises(InvalidFunctionId) as info:
        resolve_function(function_id, bundle)
    assert info.value.function_id == function_id
    assert str(info.value) == "Invalid function ID (must be 1, 2, 3, or 4)"
    assert calls == []


def test_default_bundle():
    assert DEFAULT_INTEGRANDS == (f1, f2, f3, f4)
    assert resolve_function(3) is f3


def test_default_integrand_values():
    assert f1(0.25, 0) == 0.25
    assert f2(-3.0, 0) == 9.0
    assert f3(math.pi / 2, 0) == pytest.approx(1.0)
    assert f4(0.0, 0) == 1.0


@pytest.mark.parametrize("f", [f1, f2, f3, f4])
def test_intensity_does_not_change_value(f):
    assert f(0.7, 50) == f(0.7, 0)


def test_names_follow_dispatch_table():
    assert FUNCTION_NAMES.keys() == FUNCTIONS.keys() == {1, 2, 3, 4}


@pytest.mark.parametrize("function_id", [0, 1, 2, 3, 4, 5, "1", None])
def test_request_validation_agrees_with_dispatch(function_id):
    try:
        resolve_function(function_id)
    except InvalidFunctionId:
        with pytest.raises(InvalidFunctionId):
            validate_request(function_id, 10, 0)
    else:
        validate_request(function_id, 10, 0)
