# bfhl/api/operations.py

from typing import Any, Union

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from bfhl.core.operations import handle_request
from bfhl.models.responses import FailureOut, SuccessOut

router = APIRouter(tags=["bfhl"])


def failure_response(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=FailureOut(message=message).model_dump(),
    )


@router.post(
    "/bfhl",
    response_model=SuccessOut,
    responses={400: {"model": FailureOut}},
)
def run_bfhl(
    request: Request,
    payload: Any = Body(default=None),
) -> Union[SuccessOut, JSONResponse]:
    """
    Run the single operation named by the body's only key:
    fibonacci, prime, lcm, hcf or AI.
    """
    settings = request.app.state.settings
    result = handle_request(payload, request.app.state.ai_client)

    if not result.success:
        return failure_response(result.error)

    return SuccessOut(official_email=settings.official_email, data=result.data)
