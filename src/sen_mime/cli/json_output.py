"""JSON output for commands with machine-parseable output."""

import base64
import json

from pydantic import BaseModel, ConfigDict

from sen_mime.cli.output import machine_output
from sen_mime.core.types import TypeRecord


class AttributeModel(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str
    display_name: str
    type: str
    searchable: bool | None
    viewable: bool
    editable: bool


class TypeRecordModel(BaseModel):
    """Pydantic model for a MIME type record in JSON output.

    The icon is base64 encoded.
    """

    model_config = ConfigDict(strict=True)

    type: str
    short_description: str | None
    long_description: str | None
    preferred_app: str | None
    sniffer_rule: str | None
    extensions: list[str]
    attributes: list[AttributeModel]
    icon: str | None

    @staticmethod
    def from_record(record: TypeRecord) -> "TypeRecordModel":
        return TypeRecordModel(
            type=record.mime_type,
            short_description=record.short_description,
            long_description=record.long_description,
            preferred_app=record.preferred_app,
            sniffer_rule=record.sniffer_rule,
            extensions=list(record.extensions),
            attributes=[
                AttributeModel(
                    name=spec.name,
                    display_name=spec.display_name,
                    type=spec.value_type.type_name,
                    searchable=spec.searchable,
                    viewable=spec.viewable,
                    editable=spec.editable,
                )
                for spec in record.attributes
            ],
            icon=base64.b64encode(record.icon).decode("ascii") if record.icon else None,
        )


def emit_record_json(record: TypeRecord) -> None:
    """Emit one record as indented JSON on stdout."""
    model = TypeRecordModel.from_record(record)
    machine_output(json.dumps(model.model_dump(mode="json"), indent=2))
