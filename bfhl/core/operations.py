# bfhl/core/operations.py
"""
Request parsing and dispatch for the /bfhl endpoint.

A request body carries exactly one of five keys. parse_request turns it into
one typed operation (or a rejection message), run_operation computes the
result. Both return plain result objects; the HTTP layer only maps them to
status codes.
"""

import logging
from typing import Any, Protocol

from bfhl.core import numeric
from bfhl.models.operations import (
    AIOp,
    FibonacciOp,
    HcfOp,
    LcmOp,
    Operation,
    OperationOutput,
    ParseOutput,
    PrimeOp,
)

logger = logging.getLogger(__name__)

BODY_REQUIRED = "Request body is required"
EXACTLY_ONE_KEY = "Exactly one key is required"
INVALID_KEY = "Invalid key"


class AnswerClient(Protocol):
    def ask(self, prompt: str) -> str: ...


def _parse_fibonacci(value: Any) -> ParseOutput:
    if not numeric.is_integer(value) or value < 0:
        return ParseOutput(error="Invalid fibonacci input")
    return ParseOutput(operation=FibonacciOp(n=int(value)))


def _parse_prime(value: Any) -> ParseOutput:
    if not isinstance(value, list):
        return ParseOutput(error="Prime expects an array")
    return ParseOutput(operation=PrimeOp(values=value))


def _is_number_list(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) > 0
        and all(numeric.is_number(v) for v in value)
    )


def _parse_lcm(value: Any) -> ParseOutput:
    if not _is_number_list(value):
        return ParseOutput(error="LCM expects a non-empty array")
    return ParseOutput(operation=LcmOp(values=value))


def _parse_hcf(value: Any) -> ParseOutput:
    if not _is_number_list(value):
        return ParseOutput(error="HCF expects a non-empty array")
    return ParseOutput(operation=HcfOp(values=value))


def _parse_ai(value: Any) -> ParseOutput:
    if not isinstance(value, str):
        return ParseOutput(error="AI expects a string")
    return ParseOutput(operation=AIOp(prompt=value))


PARSERS = {
    "fibonacci": _parse_fibonacci,
    "prime": _parse_prime,
    "lcm": _parse_lcm,
    "hcf": _parse_hcf,
    "AI": _parse_ai,
}


def parse_request(payload: Any) -> ParseOutput:
    if not isinstance(payload, dict):
        return ParseOutput(error=BODY_REQUIRED)

    if len(payload) != 1:
        return ParseOutput(error=EXACTLY_ONE_KEY)

    (key, value), = payload.items()
    parser = PARSERS.get(key)
    if parser is None:
        return ParseOutput(error=INVALID_KEY)
    return parser(value)


def _error_message(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


def run_operation(operation: Operation, ai_client: AnswerClient) -> OperationOutput:
    """
    Compute one parsed operation.

    This is the only place runtime and upstream failures are caught; they
    come back as an unsuccessful output carrying the exception's message.
    """
    try:
        if isinstance(operation, FibonacciOp):
            data = numeric.fibonacci(operation.n)
        elif isinstance(operation, PrimeOp):
            data = numeric.filter_primes(operation.values)
        elif isinstance(operation, LcmOp):
            data = numeric.lcm_of(operation.values)
        elif isinstance(operation, HcfOp):
            data = numeric.hcf_of(operation.values)
        elif isinstance(operation, AIOp):
            data = ai_client.ask(operation.prompt)
        else:
            raise TypeError(f"Unsupported operation: {type(operation).__name__}")
    except Exception as e:
        logger.exception("Operation %s failed", getattr(operation, "kind", "?"))
        return OperationOutput(success=False, error=_error_message(e))

    return OperationOutput(success=True, data=data)


def handle_request(payload: Any, ai_client: AnswerClient) -> OperationOutput:
    parsed = parse_request(payload)
    if not parsed.ok:
        logger.warning("Rejected request: %s", parsed.error)
        return OperationOutput(success=False, error=parsed.error)
    return run_operation(parsed.operation, ai_client)
