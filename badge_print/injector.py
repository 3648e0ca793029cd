"""
Print style injection for badge printing.

The hosting document holds at most one generated print stylesheet, under
``PRINT_STYLE_ID``. ``PrintStyleController`` is the only writer of that
element: injecting replaces it (remove, then insert) and removing deletes
it. After ``print_with_configuration`` the stylesheet stays in place, since
the print dialog runs after the call returns; it is replaced by the next
injection or discarded with the document.
"""

import logging
import re
from pathlib import Path
from typing import Callable, List, NamedTuple, Optional, Protocol, Set, Tuple

from .generator import BADGE_CELL_CLASS, BADGE_PRINT_CONTAINER_ID, NO_PRINT_CLASS, PrintStyleGenerator
from .models import PaperSizeConfiguration, PrintResult
from .renderer import CssRenderer

logger = logging.getLogger(__name__)

PRINT_STYLE_ID = "badge-print-styles"
TRIAL_STYLE_ID = "badge-print-page-rule-probe"
TRIAL_CSS = "@page { margin: 0; }"

PRINT_UNSUPPORTED_ERROR = "Print functionality is not supported in this browser"
NO_BADGES_ERROR = "No badges to print. Please ensure badge template is configured."
UNKNOWN_PRINT_ERROR = "Unknown print error"

GENERIC_PRINT_INSTRUCTIONS = "Please check your browser's print settings to adjust paper size"
BROWSER_PRINT_INSTRUCTIONS = (
    (("chrome", "edg"), "In Chrome/Edge: Go to Print > More settings > Paper size"),
    (("firefox",), "In Firefox: Go to Print > Page Setup > Format & Options"),
    (("safari",), "In Safari: Go to Print > Show Details > Paper Size"),
)

class PrintHost(Protocol):
    """The document and rendering engine badges are printed from."""

    user_agent: str

    def supports_print(self) -> bool: ...

    def has_element(self, element_id: str) -> bool: ...

    def get_style(self, style_id: str) -> Optional[str]: ...

    def insert_style(self, style_id: str, css: str) -> None: ...

    def remove_style(self, style_id: str) -> None: ...

    def count_style_rules(self, style_id: str) -> int: ...

    def print_page(self) -> None: ...

_CSS_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)

def count_top_level_rules(css: str) -> int:
    """Counts top-level ``{...}`` blocks, ignoring comments."""
    css = _CSS_COMMENT.sub("", css)
    depth = 0
    rules = 0
    for char in css:
        if char == "{":
            if depth == 0:
                rules += 1
            depth += 1
        elif char == "}" and depth > 0:
            depth -= 1
    return rules

class HtmlDocumentHost:
    """
    In-process HTML document: head style elements, body element ids and a
    pluggable print action. Without a print action printing is unsupported.
    """

    def __init__(
        self,
        print_action: Optional[Callable[["HtmlDocumentHost"], None]] = None,
        user_agent: str = "",
        renderer: Optional[CssRenderer] = None,
    ):
        self.print_action = print_action
        self.user_agent = user_agent
        self.renderer = renderer or CssRenderer()
        self.styles: List[Tuple[str, str]] = []
        self.element_ids: Set[str] = set()
        self.badge_count = 0
        self.print_count = 0

    def add_badge_container(self, badge_count: int) -> None:
        self.element_ids.add(BADGE_PRINT_CONTAINER_ID)
        self.badge_count = badge_count

    def supports_print(self) -> bool:
        return callable(self.print_action)

    def has_element(self, element_id: str) -> bool:
        return element_id in self.element_ids

    def style_ids(self) -> List[str]:
        return [style_id for style_id, _ in self.styles]

    def get_style(self, style_id: str) -> Optional[str]:
        for existing_id, css in self.styles:
            if existing_id == style_id:
                return css
        return None

    def insert_style(self, style_id: str, css: str) -> None:
        self.styles.append((style_id, css))

    def remove_style(self, style_id: str) -> None:
        for index, (existing_id, _) in enumerate(self.styles):
            if existing_id == style_id:
                del self.styles[index]
                return

    def count_style_rules(self, style_id: str) -> int:
        css = self.get_style(style_id)
        if css is None:
            raise KeyError(style_id)
        return count_top_level_rules(css)

    def print_page(self) -> None:
        if self.print_action is None:
            raise RuntimeError(PRINT_UNSUPPORTED_ERROR)
        self.print_count += 1
        self.print_action(self)

    def to_html(self, title: str = "Badges") -> str:
        has_container = self.has_element(BADGE_PRINT_CONTAINER_ID)
        return self.renderer.render("document.html.j2", {
            "title": title,
            "styles": [{"id": style_id, "css": css} for style_id, css in self.styles],
            "container_id": BADGE_PRINT_CONTAINER_ID if has_container else None,
            "badge_class": BADGE_CELL_CLASS,
            "no_print_class": NO_PRINT_CLASS,
            "badge_count": self.badge_count,
        })

    def write_html(self, path: Path, title: str = "Badges") -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_html(title))
        return path

class StyleSheetHandle(NamedTuple):
    style_id: str
    css: str

class PrintStyleController:
    """Owns the single injected print stylesheet of a ``PrintHost``."""

    def __init__(self, host: PrintHost, generator: Optional[PrintStyleGenerator] = None):
        self.host = host
        self.generator = generator or PrintStyleGenerator()
        self._handle: Optional[StyleSheetHandle] = None

    @property
    def active_stylesheet(self) -> Optional[str]:
        return self._handle.css if self._handle else None

    def inject_print_styles(self, config: PaperSizeConfiguration, badge_width: float, badge_height: float) -> StyleSheetHandle:
        self.remove_print_styles()
        css = self.generator.generate_stylesheet(config, badge_width, badge_height)
        self.host.insert_style(PRINT_STYLE_ID, css)
        self._handle = StyleSheetHandle(PRINT_STYLE_ID, css)
        logger.debug("Injected print styles #%s", PRINT_STYLE_ID)
        return self._handle

    def remove_print_styles(self) -> None:
        if self.host.get_style(PRINT_STYLE_ID) is not None:
            self.host.remove_style(PRINT_STYLE_ID)
            logger.debug("Removed print styles #%s", PRINT_STYLE_ID)
        self._handle = None

    def has_print_styles(self) -> bool:
        return self.host.get_style(PRINT_STYLE_ID) is not None

    def print_with_configuration(self, config: PaperSizeConfiguration, badge_width: float, badge_height: float) -> PrintResult:
        """
        Injects the print stylesheet and opens the print dialog.

        Missing print support or a missing badge container are reported in
        the result, as is any unexpected failure.
        """
        try:
            if not self.host.supports_print():
                return PrintResult(success=False, error=PRINT_UNSUPPORTED_ERROR)

            if not self.host.has_element(BADGE_PRINT_CONTAINER_ID):
                return PrintResult(success=False, error=NO_BADGES_ERROR)

            self.inject_print_styles(config, badge_width, badge_height)
            self.host.print_page()
            return PrintResult(success=True)
        except Exception as e:
            logger.exception("Error during print operation")
            return PrintResult(success=False, error=str(e) or UNKNOWN_PRINT_ERROR)

    def detect_page_rule_support(self) -> bool:
        """Checks whether the host parses ``@page`` rules; assumes yes when unsure."""
        try:
            self.host.insert_style(TRIAL_STYLE_ID, TRIAL_CSS)
            try:
                return self.host.count_style_rules(TRIAL_STYLE_ID) > 0
            finally:
                self.host.remove_style(TRIAL_STYLE_ID)
        except Exception as e:
            logger.warning("Could not detect @page support: %s", e)
            return True

    def get_print_instructions(self) -> str:
        try:
            user_agent = self.host.user_agent.lower()
        except Exception as e:
            logger.warning("Could not read user agent: %s", e)
            return GENERIC_PRINT_INSTRUCTIONS

        for needles, instructions in BROWSER_PRINT_INSTRUCTIONS:
            if any(needle in user_agent for needle in needles):
                return instructions
        return GENERIC_PRINT_INSTRUCTIONS

    def get_paper_size_hint(self) -> Optional[str]:
        """Manual paper-size instructions, or None when the host honors ``@page``."""
        if self.detect_page_rule_support():
            return None
        return self.get_print_instructions()
