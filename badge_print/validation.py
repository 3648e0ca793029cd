from .models import Margins, PaperSizeConfiguration, ValidationResult
from .paper import get_printable_area

MIN_CUSTOM_SIZE = 50  # mm
MAX_CUSTOM_SIZE = 500  # mm

MIN_MARGIN = 0  # mm
MAX_MARGIN = 50  # mm

# Below this the preview warns that some printers may clip content
SMALL_MARGIN_THRESHOLD = 5  # mm

VALID = ValidationResult(valid=True)

def _invalid(message: str) -> ValidationResult:
    return ValidationResult(valid=False, error=message)

def validate_custom_dimensions(width: float, height: float) -> ValidationResult:
    """Checks custom paper dimensions against the supported 50-500mm range."""
    if not MIN_CUSTOM_SIZE <= width <= MAX_CUSTOM_SIZE:
        return _invalid(f"Width must be between {MIN_CUSTOM_SIZE}mm and {MAX_CUSTOM_SIZE}mm")
    if not MIN_CUSTOM_SIZE <= height <= MAX_CUSTOM_SIZE:
        return _invalid(f"Height must be between {MIN_CUSTOM_SIZE}mm and {MAX_CUSTOM_SIZE}mm")
    return VALID

def validate_margins(margins: Margins) -> ValidationResult:
    """
    Checks each margin against 0-50mm, reporting the first offending side.

    Paper size is not considered here; a valid margin set can still leave
    no printable area on a small custom sheet.
    """
    for side in ("top", "right", "bottom", "left"):
        value = getattr(margins, side)
        if not MIN_MARGIN <= value <= MAX_MARGIN:
            return _invalid(f"{side.title()} margin must be between {MIN_MARGIN}mm and {MAX_MARGIN}mm")
    return VALID

def validate_badge_fits_on_paper(badge_width: float, badge_height: float, config: PaperSizeConfiguration) -> ValidationResult:
    area = get_printable_area(config)
    if badge_width > area.width or badge_height > area.height:
        return _invalid(
            f"Badge size ({badge_width:.1f}mm × {badge_height:.1f}mm) exceeds "
            f"printable area ({area.width:.1f}mm × {area.height:.1f}mm)"
        )
    return VALID

def has_small_margins(margins: Margins) -> bool:
    return any(
        value < SMALL_MARGIN_THRESHOLD
        for value in (margins.top, margins.right, margins.bottom, margins.left)
    )
