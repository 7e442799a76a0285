"""Text rendering for registry listings and records."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sen_mime.core.types import TypeRecord

_INDENT = " " * 8


def render_type_listing(types: list[str]) -> str:
    """Render installed types in the registry's message dump format.

    Example:
        >>> print(render_type_listing(["entity/person"]))
        BMessage(0x0) {
                types = string("entity/person", 14 bytes)
        }

    Byte counts include the terminating NUL. With more than one type each
    entry is subscripted: types[0], types[1], ...
    """
    lines = ["BMessage(0x0) {"]
    for position, mime_type in enumerate(types):
        label = "types" if len(types) == 1 else f"types[{position}]"
        size = len(mime_type.encode("utf-8")) + 1
        lines.append(f'{_INDENT}{label} = string("{mime_type}", {size} bytes)')
    lines.append("}")
    return "\n".join(lines)


def _yes_no(flag: bool | None) -> str:
    if flag is None:
        return "-"
    return "yes" if flag else "no"


def print_record(record: TypeRecord, console: Console | None = None) -> None:
    """Print a record's metadata and attribute schema as tables."""
    if console is None:
        console = Console(highlight=False, soft_wrap=True)

    fields = Table(title=escape(record.mime_type), show_header=False, title_justify="left")
    fields.add_column("Field", style="bold")
    fields.add_column("Value")
    fields.add_row("Short description", escape(record.short_description or "-"))
    fields.add_row("Long description", escape(record.long_description or "-"))
    fields.add_row("Preferred app", escape(record.preferred_app or "-"))
    fields.add_row("Sniffer rule", escape(record.sniffer_rule or "-"))
    fields.add_row("Extensions", escape(", ".join(record.extensions) or "-"))
    fields.add_row("Icon", f"{len(record.icon)} bytes" if record.icon else "-")
    console.print(fields)

    if not record.attributes:
        return

    attributes = Table(title="Attributes", title_justify="left")
    attributes.add_column("Name")
    attributes.add_column("Display name")
    attributes.add_column("Type")
    attributes.add_column("Searchable")
    attributes.add_column("Viewable")
    attributes.add_column("Editable")
    for spec in record.attributes:
        attributes.add_row(
            escape(spec.name),
            escape(spec.display_name),
            spec.value_type.type_name,
            _yes_no(spec.searchable),
            _yes_no(spec.viewable),
            _yes_no(spec.editable),
        )
    console.print(attributes)
