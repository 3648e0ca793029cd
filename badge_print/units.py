MM_PER_INCH = 25.4
CSS_PIXELS_PER_INCH = 96

# 96 / 25.4, the reference resolution used by browsers for CSS pixels
MM_TO_PX_RATIO = 3.7795275591

def mm_to_pixels(mm: float) -> float:
    """Converts millimeters to pixels at 96 DPI."""
    return mm * MM_TO_PX_RATIO

def pixels_to_mm(pixels: float) -> float:
    """Converts pixels at 96 DPI to millimeters."""
    return pixels / MM_TO_PX_RATIO
