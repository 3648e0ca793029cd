from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Literal, Optional

Orientation = Literal["portrait", "landscape"]

class PaperSizeType(str, Enum):
    A4 = "A4"
    A5 = "A5"
    A6 = "A6"
    A7 = "A7"
    LETTER = "Letter"
    CR80 = "CR80"
    B1 = "B1"
    B2 = "B2"
    B3 = "B3"
    B4 = "B4"
    A1_ID = "A1_ID"
    A2_ID = "A2_ID"
    A3_ID = "A3_ID"
    CUSTOM = "Custom"

class Margins(BaseModel):
    top: float
    right: float
    bottom: float
    left: float

class PaperSizeConfiguration(BaseModel):
    """Paper size, orientation and margins for one print run (all lengths in mm).

    Field aliases follow the persisted camelCase format, so
    ``model_dump(by_alias=True)`` output reloads to an equal instance.
    """
    model_config = ConfigDict(populate_by_name=True)

    size_type: PaperSizeType = Field(alias="sizeType")
    orientation: Orientation
    custom_width: Optional[float] = Field(default=None, alias="customWidth")
    custom_height: Optional[float] = Field(default=None, alias="customHeight")
    margins: Margins

class BadgeDimensions(BaseModel):
    width: float
    height: float

class PaperDimensions(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float
    height: float

class PrintableArea(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float
    height: float

class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    error: Optional[str] = None

class PrintResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    error: Optional[str] = None

class PrintProfile(BaseModel):
    description: str
    configuration: PaperSizeConfiguration
    badge: Optional[BadgeDimensions] = None

class PrintProfiles(BaseModel):
    profiles: Dict[str, PrintProfile]

DEFAULT_PRINT_CONFIG = PaperSizeConfiguration(
    size_type=PaperSizeType.A4,
    orientation="portrait",
    margins=Margins(top=10, right=10, bottom=10, left=10),
)
