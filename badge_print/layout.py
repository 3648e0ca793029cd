"""
Badge packing on a sheet.

Badges are packed as a uniform, axis-aligned grid inside the printable
area: no per-badge rotation and no mixed orientations, which matches how
the print container lays badges out.
"""

import logging
import math
from pydantic import BaseModel, ConfigDict
from typing import List

from .models import PaperDimensions, PaperSizeConfiguration, PrintableArea, ValidationResult
from .paper import get_paper_dimensions, get_printable_area
from .validation import has_small_margins, validate_badge_fits_on_paper

logger = logging.getLogger(__name__)

PREVIEW_MAX_WIDTH_PX = 200
PREVIEW_MAX_SLOTS = 12

class BadgeGrid(BaseModel):
    model_config = ConfigDict(frozen=True)

    per_row: int
    per_column: int

    @property
    def count(self) -> int:
        return self.per_row * self.per_column

class BadgeSlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    column: int
    x: float
    y: float
    width: float
    height: float

class PrintPreview(BaseModel):
    """Scaled drawing plan for the on-screen sheet preview (lengths in px)."""
    model_config = ConfigDict(frozen=True)

    scale: float
    paper: PaperDimensions
    printable_area: PrintableArea
    paper_width_px: float
    paper_height_px: float
    printable_width_px: float
    printable_height_px: float
    margin_top_px: float
    margin_left_px: float
    grid: BadgeGrid
    badges_per_page: int
    slots: List[BadgeSlot]
    fit: ValidationResult
    small_margins: bool

def _fit_count(available: float, size: float) -> int:
    if size <= 0:
        return 0
    return max(0, math.floor(available / size))

def calculate_grid(badge_width: float, badge_height: float, config: PaperSizeConfiguration) -> BadgeGrid:
    area = get_printable_area(config)
    grid = BadgeGrid(
        per_row=_fit_count(area.width, badge_width),
        per_column=_fit_count(area.height, badge_height),
    )
    logger.debug(
        "Grid %dx%d for %sx%smm badges in %sx%smm printable area",
        grid.per_row, grid.per_column, badge_width, badge_height, area.width, area.height,
    )
    return grid

def calculate_badges_per_page(badge_width: float, badge_height: float, config: PaperSizeConfiguration) -> int:
    """Number of badges that fit on one sheet without overlapping; 0 when none fit."""
    return calculate_grid(badge_width, badge_height, config).count

def build_print_preview(
    config: PaperSizeConfiguration,
    badge_width: float,
    badge_height: float,
    max_width_px: float = PREVIEW_MAX_WIDTH_PX,
    max_slots: int = PREVIEW_MAX_SLOTS,
) -> PrintPreview:
    """
    Builds the preview plan: the sheet scaled to ``max_width_px`` with the
    printable area and up to ``max_slots`` badge placeholders, row-major.
    Placeholders are only produced when the badge fits the printable area.
    """
    paper = get_paper_dimensions(config)
    area = get_printable_area(config)
    grid = calculate_grid(badge_width, badge_height, config)
    fit = validate_badge_fits_on_paper(badge_width, badge_height, config)
    scale = max_width_px / paper.width

    slots = []
    if fit.valid and grid.count > 0:
        for index in range(min(grid.count, max_slots)):
            row, column = divmod(index, grid.per_row)
            slots.append(BadgeSlot(
                row=row,
                column=column,
                x=column * badge_width * scale,
                y=row * badge_height * scale,
                width=badge_width * scale,
                height=badge_height * scale,
            ))

    return PrintPreview(
        scale=scale,
        paper=paper,
        printable_area=area,
        paper_width_px=paper.width * scale,
        paper_height_px=paper.height * scale,
        printable_width_px=area.width * scale,
        printable_height_px=area.height * scale,
        margin_top_px=config.margins.top * scale,
        margin_left_px=config.margins.left * scale,
        grid=grid,
        badges_per_page=grid.count,
        slots=slots,
        fit=fit,
        small_margins=has_small_margins(config.margins),
    )
