import logging
from types import MappingProxyType
from typing import NamedTuple, Optional, Tuple

from .models import PaperDimensions, PaperSizeConfiguration, PaperSizeType, PrintableArea, BadgeDimensions

logger = logging.getLogger(__name__)

class PaperSize(NamedTuple):
    width: float
    height: float
    label: str

# Paper Sizes (mm), narrower axis first. Orientation is applied on read.
PAPER_SIZES = MappingProxyType({
    PaperSizeType.A4:     PaperSize(210.0, 297.0, "A4"),
    PaperSizeType.A5:     PaperSize(148.0, 210.0, "A5"),
    PaperSizeType.A6:     PaperSize(105.0, 148.0, "A6"),
    PaperSizeType.A7:     PaperSize(74.0, 105.0, "A7"),
    PaperSizeType.LETTER: PaperSize(215.9, 279.4, "Letter"),
    PaperSizeType.CR80:   PaperSize(53.98, 85.6, "CR80 (Credit Card)"),
    PaperSizeType.B1:     PaperSize(55.0, 85.0, "B1 ID Card"),
    PaperSizeType.B2:     PaperSize(65.0, 105.0, "B2 ID Card"),
    PaperSizeType.B3:     PaperSize(80.0, 105.0, "B3 ID Card"),
    PaperSizeType.B4:     PaperSize(90.0, 130.0, "B4 ID Card"),
    PaperSizeType.A1_ID:  PaperSize(55.0, 90.0, "A1 ID Card"),
    PaperSizeType.A2_ID:  PaperSize(65.0, 95.0, "A2 ID Card"),
    PaperSizeType.A3_ID:  PaperSize(80.0, 100.0, "A3 ID Card"),
})

SIZE_GROUPS = MappingProxyType({
    "Standard Paper": (
        PaperSizeType.A4, PaperSizeType.A5, PaperSizeType.A6, PaperSizeType.A7, PaperSizeType.LETTER,
    ),
    "ID Card Sizes": (
        PaperSizeType.CR80, PaperSizeType.B1, PaperSizeType.B2, PaperSizeType.B3, PaperSizeType.B4,
        PaperSizeType.A1_ID, PaperSizeType.A2_ID, PaperSizeType.A3_ID,
    ),
    "Custom": (PaperSizeType.CUSTOM,),
})

DEFAULT_CUSTOM_WIDTH = 100.0
DEFAULT_CUSTOM_HEIGHT = 150.0

# Badge template sizes (mm) as laid out on the badge itself
BADGE_SIZES = MappingProxyType({
    "CR80": (85.6, 53.98),
    # ID card holders, B series (landscape)
    "B1": (85.0, 55.0),
    "B2": (105.0, 65.0),
    "B3": (105.0, 80.0),
    "B4": (130.0, 90.0),
    # ID card holders, A series (portrait)
    "A1": (55.0, 90.0),
    "A2": (65.0, 95.0),
    "A3": (80.0, 100.0),
    "A6": (105.0, 148.0),
    "A7": (74.0, 105.0),
})
DEFAULT_BADGE_SIZE = "CR80"

def swap_dimensions(width: float, height: float) -> Tuple[float, float]:
    return height, width

def get_paper_dimensions(config: PaperSizeConfiguration) -> PaperDimensions:
    """
    Returns the sheet size in mm for a configuration.

    Custom sizes fall back to 100x150mm when no dimensions were entered.
    Landscape swaps width and height of the catalog (portrait) size.
    """
    if config.size_type == PaperSizeType.CUSTOM:
        width = config.custom_width or DEFAULT_CUSTOM_WIDTH
        height = config.custom_height or DEFAULT_CUSTOM_HEIGHT
    else:
        paper = PAPER_SIZES[config.size_type]
        width, height = paper.width, paper.height

    if config.orientation == "landscape":
        width, height = swap_dimensions(width, height)

    return PaperDimensions(width=width, height=height)

def get_printable_area(config: PaperSizeConfiguration) -> PrintableArea:
    """Paper dimensions minus the opposing margins on each axis."""
    paper = get_paper_dimensions(config)
    margins = config.margins
    return PrintableArea(
        width=paper.width - margins.left - margins.right,
        height=paper.height - margins.top - margins.bottom,
    )

def get_badge_dimensions(
    size: Optional[str] = None,
    custom_width: Optional[float] = None,
    custom_height: Optional[float] = None,
) -> BadgeDimensions:
    """Resolves a badge template size name, defaulting to CR80 for unknown names."""
    if size is not None and size.lower() == "custom":
        return BadgeDimensions(
            width=custom_width or DEFAULT_CUSTOM_WIDTH,
            height=custom_height or DEFAULT_CUSTOM_HEIGHT,
        )
    if size not in BADGE_SIZES:
        if size is not None:
            logger.debug("Unknown badge size %r, using %s", size, DEFAULT_BADGE_SIZE)
        size = DEFAULT_BADGE_SIZE
    width, height = BADGE_SIZES[size]
    return BadgeDimensions(width=width, height=height)
