from pydantic import BaseModel, Field
from typing import Literal, Optional

FormatName = Literal["rgb", "hex", "hsl", "hsv", "cmyk", "lab"]


class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The color code to convert, e.g. rgb(255, 0, 0) or #FF0000")
    target: FormatName = Field(..., description="The target color code format to convert to")
    source: Optional[FormatName] = Field(None, description="Format of the input code; detected when omitted")


class ColorRepresentationRequest(BaseModel):
    code: str = Field(..., description="The color code to describe in every supported format")
    format: Optional[FormatName] = Field(None, description="Format of the input code; detected when omitted")


class ColorValidateRequest(BaseModel):
    code: str = Field(..., description="The color code to check")
    format: Optional[FormatName] = Field(None, description="Format to validate against; detected when omitted")


class ColorDetectRequest(BaseModel):
    code: str = Field(..., description="The color code whose format should be inferred")
