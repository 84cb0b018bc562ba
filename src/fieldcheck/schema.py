"""Field metadata extraction.

Builds a :class:`RecordSchema` for a record and flattens it into the field
rule map consumed by the dispatcher. Records are dataclass instances (rule tag
under the ``validate`` metadata key, alias under ``json``), pydantic models
(rule tag in ``json_schema_extra``, alias from the field alias), or instances
of any class registered with :func:`register_schema`.
"""

import dataclasses
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

from pydantic import BaseModel

from .errors import NonStructValidationError

logger = logging.getLogger(__name__)

VALIDATE_KEY = "validate"
ALIAS_KEY = "json"


@dataclass(frozen=True)
class FieldSpec:
    """One declared field: its name, how to read it, and its rule tag."""
    name: str
    accessor: Callable[[Any], Any]
    rules: str = ""
    alias: str | None = None

    def key(self, use_declared_names: bool = True) -> str:
        if use_declared_names or not self.alias:
            return self.name
        return self.alias


@dataclass(frozen=True)
class RecordSchema:
    """Ordered field declarations for one record type."""
    fields: tuple[FieldSpec, ...] = ()

    def field_rules(self, use_declared_names: bool = True) -> dict[str, list[str]]:
        field_rules: dict[str, list[str]] = {}
        for spec in self.fields:
            field_rules.setdefault(spec.key(use_declared_names), []).append(spec.rules)
        return field_rules

    def lookup(self, key: str, use_declared_names: bool = True) -> FieldSpec:
        for spec in self.fields:
            if spec.key(use_declared_names) == key:
                return spec
        raise KeyError(key)

    def value_of(self, record: Any, key: str, use_declared_names: bool = True) -> Any:
        return self.lookup(key, use_declared_names).accessor(record)


class MappingRecord:
    """A plain mapping paired with an explicit schema.

    Lets JSON-like data go through the same validator as typed records.
    """

    def __init__(self, data: Mapping[str, Any], schema: RecordSchema):
        self.data = data
        self.schema = schema

    def __getitem__(self, key: str) -> Any:
        return self.data.get(key)

    def __repr__(self) -> str:
        return f"MappingRecord({dict(self.data)!r})"


_registered_schemas: dict[type, RecordSchema] = {}


def register_schema(cls: type, schema: RecordSchema | Iterable[FieldSpec]) -> RecordSchema:
    """Install an explicit schema for ``cls`` and its subclasses.

    Takes precedence over dataclass or pydantic introspection.
    """
    if not isinstance(schema, RecordSchema):
        schema = RecordSchema(tuple(schema))
    _registered_schemas[cls] = schema
    return schema


def unregister_schema(cls: type) -> None:
    _registered_schemas.pop(cls, None)


def _mapping_accessor(name: str, alias: str | None) -> Callable[[Any], Any]:
    def accessor(record: MappingRecord) -> Any:
        # serialized records are usually keyed by alias
        if alias and alias in record.data:
            return record.data[alias]
        return record[name]
    return accessor


def schema_from_mapping(declarations: Mapping[str, str | Mapping[str, str]]) -> RecordSchema:
    """Build a schema for :class:`MappingRecord` data.

    Each entry maps a field name either to a rule tag string or to an object
    with optional ``validate`` and ``json`` keys.
    """
    specs = []
    for name, declaration in declarations.items():
        if isinstance(declaration, str):
            rules, alias = declaration, None
        elif isinstance(declaration, Mapping):
            rules = declaration.get(VALIDATE_KEY, "")
            alias = declaration.get(ALIAS_KEY)
        else:
            raise ValueError(
                f"Field '{name}' must map to a rule string or an object, "
                f"got {type(declaration).__name__}"
            )
        specs.append(FieldSpec(name, _mapping_accessor(name, alias), rules or "", alias))
    return RecordSchema(tuple(specs))


def _dataclass_schema(record: Any) -> RecordSchema:
    return RecordSchema(tuple(
        FieldSpec(
            name=f.name,
            accessor=attrgetter(f.name),
            rules=f.metadata.get(VALIDATE_KEY, ""),
            alias=f.metadata.get(ALIAS_KEY),
        )
        for f in dataclasses.fields(record)
    ))


def _pydantic_schema(record: BaseModel) -> RecordSchema:
    specs = []
    for name, info in type(record).model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        specs.append(FieldSpec(
            name=name,
            accessor=attrgetter(name),
            rules=extra.get(VALIDATE_KEY, "") or "",
            alias=info.serialization_alias or info.alias,
        ))
    return RecordSchema(tuple(specs))


def schema_for(record: Any) -> RecordSchema:
    """Return the schema describing ``record``.

    Raises:
        NonStructValidationError: record is not a structured aggregate
    """
    if isinstance(record, MappingRecord):
        return record.schema

    if not isinstance(record, type):
        for cls in type(record).__mro__:
            if cls in _registered_schemas:
                return _registered_schemas[cls]
        if dataclasses.is_dataclass(record):
            return _dataclass_schema(record)
        if isinstance(record, BaseModel):
            return _pydantic_schema(record)

    raise NonStructValidationError(type(record).__name__)


def extract_field_rules(record: Any, use_declared_names: bool = True) -> dict[str, list[str]]:
    """Map each field key of ``record`` to its raw rule tags.

    Args:
        record: Record to inspect
        use_declared_names: Key fields by declared name; when False the
            serialization alias is used where one is declared

    Returns:
        Field key -> list of raw tag strings, in declaration order
    """
    field_rules = schema_for(record).field_rules(use_declared_names)
    logger.debug(f"Extracted rules for {len(field_rules)} fields of {type(record).__name__}")
    return field_rules
