import logging
from typing import Optional

from .layout import calculate_badges_per_page
from .models import PaperSizeConfiguration
from .paper import get_paper_dimensions
from .renderer import CssRenderer

logger = logging.getLogger(__name__)

BADGE_PRINT_CONTAINER_ID = "badge-print-container"
BADGE_CELL_CLASS = "badge-container"
NO_PRINT_CLASS = "no-print"

class PrintStyleGenerator:
    """
    Generates the CSS that pins the browser's print output to the configured
    sheet: an ``@page`` block for size and margins, and an ``@media print``
    block that shows only the badge cells, one per page.

    Both blocks are derived from ``get_paper_dimensions`` so that preview and
    print agree. Output depends only on the arguments.
    """

    def __init__(self, renderer: Optional[CssRenderer] = None):
        self.renderer = renderer or CssRenderer()

    def generate_page_rules(self, config: PaperSizeConfiguration) -> str:
        paper = get_paper_dimensions(config)
        css = self.renderer.render("page_rules.css.j2", {
            "paper": paper,
            "margins": config.margins,
        })
        return css.strip()

    def generate_media_print_styles(self, config: PaperSizeConfiguration, badge_width: float, badge_height: float) -> str:
        css = self.renderer.render("media_print.css.j2", {
            "container_id": BADGE_PRINT_CONTAINER_ID,
            "badge_class": BADGE_CELL_CLASS,
            "no_print_class": NO_PRINT_CLASS,
            "badge_width": badge_width,
            "badge_height": badge_height,
            "orientation": config.orientation,
        })
        return css.strip()

    def generate_stylesheet(self, config: PaperSizeConfiguration, badge_width: float, badge_height: float) -> str:
        page_rules = self.generate_page_rules(config)
        media_rules = self.generate_media_print_styles(config, badge_width, badge_height)
        logger.debug(
            "Generated print stylesheet for %s %s with %sx%smm badges",
            config.size_type.value, config.orientation, badge_width, badge_height,
        )
        return f"{page_rules}\n\n{media_rules}"

    def calculate_badges_per_page(self, badge_width: float, badge_height: float, config: PaperSizeConfiguration) -> int:
        return calculate_badges_per_page(badge_width, badge_height, config)
