"""Types command - show the field type suffix table."""

import cyclopts

from solrdoc.cli.console import get_console
from solrdoc.domain.document.model.field_type import TYPE_SUFFIXES

app = cyclopts.App(name="types", help="Show field types and their index suffixes")


@app.default
def types() -> None:
    """List every field type with the suffix appended to field names."""
    rows = [
        {"type": field_type.value, "suffix": suffix, "example": f"title_{suffix}"}
        for field_type, suffix in TYPE_SUFFIXES.items()
    ]
    get_console().table(
        rows,
        [("type", "Type"), ("suffix", "Suffix"), ("example", "Example field")],
        title="Field types",
    )
