from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from pathlib import Path

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

def format_length(value: float) -> str:
    """Writes a length exactly: 210.0 -> '210', 53.98 -> '53.98'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)

class CssRenderer:
    def __init__(self, template_dir: Path = TEMPLATE_DIR):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(enabled_extensions=("html.j2",)),
            undefined=StrictUndefined,
            block_start_string='<%',
            block_end_string='%>',
            variable_start_string='<<',
            variable_end_string='>>',
            comment_start_string='<#',
            comment_end_string='#>',
        )
        # using alternate delimiters to avoid conflict with css {}
        self.env.filters["length"] = format_length

    def render(self, template_name: str, context: dict) -> str:
        template = self.env.get_template(template_name)
        return template.render(**context)
