import pytest

from bfhl.clients.gemini import first_word
from bfhl.core.operations import handle_request, parse_request, run_operation
from bfhl.models.operations import AIOp, FibonacciOp, HcfOp, LcmOp, PrimeOp
from conftest import FakeAIClient


@pytest.mark.parametrize("payload", [None, [], [{"fibonacci": 3}], "fibonacci", 5, b"{}"])
def test_non_object_bodies_are_rejected(payload):
    assert parse_request(payload).error == "Request body is required"


@pytest.mark.parametrize(
    "payload",
    [{}, {"fibonacci": 3, "prime": [2]}, {"foo": 1, "bar": 2}, {"a": 1, "b": 2, "c": 3}],
)
def test_key_count_must_be_one(payload):
    assert parse_request(payload).error == "Exactly one key is required"


@pytest.mark.parametrize("key", ["foo", "Fibonacci", "ai", "gcd"])
def test_unknown_key(key):
    assert parse_request({key: 1}).error == "Invalid key"


@pytest.mark.parametrize(
    "payload,expected",
    [
        ({"fibonacci": 7}, FibonacciOp(n=7)),
        ({"fibonacci": 7.0}, FibonacciOp(n=7)),
        ({"prime": [1, "x"]}, PrimeOp(values=[1, "x"])),
        ({"lcm": [4, 6]}, LcmOp(values=[4, 6])),
        ({"hcf": [12, 18]}, HcfOp(values=[12, 18])),
        ({"AI": "Capital of France?"}, AIOp(prompt="Capital of France?")),
    ],
)
def test_parses_each_operation(payload, expected):
    parsed = parse_request(payload)
    assert parsed.ok
    assert parsed.operation == expected


@pytest.mark.parametrize("value", [-1, 2.5, "5", None, True, [5]])
def test_invalid_fibonacci(value):
    assert parse_request({"fibonacci": value}).error == "Invalid fibonacci input"


@pytest.mark.parametrize("value", [5, "2,3", None, {"a": 2}])
def test_prime_needs_array(value):
    assert parse_request({"prime": value}).error == "Prime expects an array"


@pytest.mark.parametrize("key,label", [("lcm", "LCM"), ("hcf", "HCF")])
@pytest.mark.parametrize("value", [[], 12, None, "4,6", [4, "6"], [4, None], [True, 2]])
def test_lcm_hcf_need_non_empty_number_arrays(key, label, value):
    assert parse_request({key: value}).error == f"{label} expects a non-empty array"


@pytest.mark.parametrize("value", [1, None, ["hi"], {"text": "hi"}])
def test_ai_needs_string(value):
    assert parse_request({"AI": value}).error == "AI expects a string"


def test_run_operation_computes_each_kind():
    ai = FakeAIClient(answer="Paris")
    assert run_operation(FibonacciOp(n=5), ai).data == [0, 1, 1, 2, 3]
    assert run_operation(PrimeOp(values=[1, 2, 3, 4, 17, "x"]), ai).data == [2, 3, 17]
    assert run_operation(LcmOp(values=[4, 6]), ai).data == 12
    assert run_operation(HcfOp(values=[12, 18]), ai).data == 6
    assert run_operation(AIOp(prompt="Capital of France?"), ai).data == "Paris"
    assert ai.prompts == ["Capital of France?"]


def test_runtime_failures_become_error_results():
    ai = FakeAIClient(error=ConnectionError("upstream unreachable"))
    result = run_operation(AIOp(prompt="hello"), ai)
    assert not result.success
    assert result.error == "upstream unreachable"


def test_empty_exception_message_falls_back_to_class_name():
    ai = FakeAIClient(error=TimeoutError())
    assert run_operation(AIOp(prompt="hello"), ai).error == "TimeoutError"


def test_handle_request_does_not_call_ai_for_rejected_bodies():
    ai = FakeAIClient()
    result = handle_request({"AI": 42}, ai)
    assert not result.success
    assert result.error == "AI expects a string"
    assert ai.prompts == []


def test_handle_request_success():
    result = handle_request({"hcf": [24, 36, 60]}, FakeAIClient())
    assert result.success
    assert result.data == 12
    assert result.error is None


def test_ai_answer_with_non_string_text_is_an_error():
    class BadAnswer:
        def ask(self, prompt):
            return first_word({"candidates": [{"content": {"parts": [{"text": 7}]}}]})

    result = run_operation(AIOp(prompt="hello"), BadAnswer())
    assert not result.success
    assert result.error == "candidate text is int, not a string"


def test_unsupported_operation_is_an_error():
    result = run_operation(object(), FakeAIClient())
    assert not result.success
    assert result.error == "Unsupported operation: object"
