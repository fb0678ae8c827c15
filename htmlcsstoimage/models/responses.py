"""
Response Models
===============

Uniform result shapes returned by the client. Callers branch on ``success``;
remote-side rejections are returned as ``CreateImageErrorResponse`` rather
than raised. Unknown fields sent by the service are preserved.
"""

import json
from typing import Any, Optional, List, Union, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ResponseModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")


def _as_text(value: Any) -> Any:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


class CreateImageSuccessResponse(_ResponseModel):
    """A rendered image."""
    success: Literal[True] = True
    id: str = Field(..., description="Image identifier")
    url: str = Field(..., description="Location of the rendered image")


class UnrecognizedSuccessResponse(_ResponseModel):
    """
    A 2xx answer whose body is not the expected success shape.

    Whatever the service sent is kept as extra fields.
    """
    success: Literal[True] = True


class ValidationError(_ResponseModel):
    """A single field-level validation failure reported by the service."""
    path: Optional[str] = Field(None, description="Path of the offending field")
    message: Optional[str] = Field(None, description="What is wrong with it")

    @field_validator("path", "message", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _as_text(value)


class CreateImageErrorResponse(_ResponseModel):
    """Error response, for single and batch calls alike."""
    success: Literal[False] = False
    error: str = Field(..., description="Error message")
    validation_errors: Optional[List[ValidationError]] = Field(
        None, description="Field-level validation errors"
    )
    message: Optional[str] = Field(None, description="Human readable explanation")

    @field_validator("error", "message", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("validation_errors", mode="before")
    @classmethod
    def wrap_validation_errors(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, list):
            value = [value]
        return [item if isinstance(item, dict) else {"message": item} for item in value]


class CreateImageBatchSuccessResponse(_ResponseModel):
    """Rendered images of a batch, in variation order."""
    success: Literal[True] = True
    images: List[CreateImageSuccessResponse] = Field(default_factory=list)


CreateImageResponse = Union[
    CreateImageSuccessResponse, UnrecognizedSuccessResponse, CreateImageErrorResponse
]
CreateImageBatchResponse = Union[
    CreateImageBatchSuccessResponse, UnrecognizedSuccessResponse, CreateImageErrorResponse
]
