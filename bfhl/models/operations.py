# bfhl/models/operations.py

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class FibonacciOp(BaseModel):
    kind: Literal["fibonacci"] = "fibonacci"
    n: int


class PrimeOp(BaseModel):
    kind: Literal["prime"] = "prime"
    values: List[Any]


class LcmOp(BaseModel):
    kind: Literal["lcm"] = "lcm"
    values: List[Union[int, float]]


class HcfOp(BaseModel):
    kind: Literal["hcf"] = "hcf"
    values: List[Union[int, float]]


class AIOp(BaseModel):
    kind: Literal["AI"] = "AI"
    prompt: str


Operation = Annotated[
    Union[FibonacciOp, PrimeOp, LcmOp, HcfOp, AIOp],
    Field(discriminator="kind"),
]


class ParseOutput(BaseModel):
    """Either a parsed operation or the reason the request body was rejected."""

    operation: Optional[Operation] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class OperationOutput(BaseModel):
    success: bool
    data: Any = None
    error: Optional[str] = None
