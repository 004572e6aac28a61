from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from recordbrowser.records.models import Record


def capitalize_label(name: str) -> str:
    """Upper-cases the first character of a field name, leaving the rest as is."""
    if not name:
        return name
    return name[0].upper() + name[1:]


class FieldView(BaseModel):
    """One editable line of the record form."""
    name: str
    label: str
    text: str
    edited: bool = False


class RecordView(BaseModel):
    """What the presentation layer draws for the current record."""
    fields: List[FieldView] = Field(default_factory=list)
    position: int = 0
    total: int = 0
    has_previous: bool = False
    has_next: bool = False

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def pairs(self) -> List[tuple]:
        """(label, text) pairs in display order."""
        return [(f.label, f.text) for f in self.fields]


def build_view(
    record: Optional[Record],
    position: int,
    total: int,
    edits: Optional[Dict[str, str]] = None,
) -> RecordView:
    """Builds the form for ``record``, overlaying scratch edits on stored values."""
    edits = edits or {}
    fields = []
    if record is not None:
        for name, value in record.items():
            edited = name in edits
            fields.append(FieldView(
                name=name,
                label=capitalize_label(name),
                text=edits[name] if edited else value,
                edited=edited,
            ))
    return RecordView(
        fields=fields,
        position=position,
        total=total,
        has_previous=total > 0 and position > 0,
        has_next=total > 0 and position < total - 1,
    )
