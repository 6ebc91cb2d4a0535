from pydantic import BaseModel, Field
from typing import Optional

from colorengine import ColorRepresentation


class SuccessResponse(BaseModel):
    success: bool = Field(True, description="Whether the operation succeeded")
    message: str = Field(..., description="The converted color code")


class ErrorResponse(BaseModel):
    success: bool = Field(False, description="Whether the operation succeeded")
    error: str = Field(..., description="What went wrong")
    suggestion: Optional[str] = Field(None, description="How the input could be fixed")


class RepresentationResponse(BaseModel):
    success: bool = Field(True, description="Whether the operation succeeded")
    color: ColorRepresentation = Field(..., description="The color in every supported format")


class ValidationResponse(BaseModel):
    is_valid: bool = Field(..., description="Whether the code is well formed and in range")
    format: Optional[str] = Field(None, description="The format the code was checked against")
    reason: Optional[str] = Field(None, description="Why the code was rejected")


class DetectionResponse(BaseModel):
    format: Optional[str] = Field(None, description="The inferred format, or null when unrecognized")
