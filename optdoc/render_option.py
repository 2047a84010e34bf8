"""Logic for rendering a single option entry."""

from optdoc.clean_type_signature import clean_type_signature
from optdoc.format_value import format_value


def render_option(
    prefix: str,
    name: str,
    typ: str | None,
    default: object,
    description: str | None,
    *,
    inherited: bool = False,
) -> list[str]:
    """Render the heading, type/default line and description of an option."""
    type_line = (
        f"Type: `{clean_type_signature(typ)}`, Default: `{format_value(default)}`"
    )
    if inherited:
        type_line += " (inherited)"
    parts = ["", f"#### {prefix}.{name}", "", type_line]
    if isinstance(description, str) and description.strip():
        parts.append("")
        # Kept verbatim, fenced code blocks included
        parts.extend(description.strip("\n").splitlines())
    return parts
