"""Attribute descriptors and the resolver interface.

The extractor hands every key segment to an `AttributeResolver`. A segment may
still carry trailing predicate text (``email_cont``); the resolver decides
which prefix of it names an attribute.

`SchemaAttributeResolver` is a reference resolver over an in-memory `Schema`
description, used by the CLI and the tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Protocol

from SearchSieve.core.errors import AttributeNotFoundError, AttributeTooDeepError


@dataclass(frozen=True, slots=True)
class Attribute:
    """Resolved attribute path.

    Attributes:
        name: Field name on the innermost schema.
        parent: Association names walked from the root schema, outermost first.
        type: Field type as declared by the schema, if known.
    """

    name: str
    parent: tuple[str, ...] = ()
    type: str | None = None

    @property
    def path(self) -> str:
        """Dotted path, e.g. ``user.email``."""
        return ".".join((*self.parent, self.name))


class AttributeResolver(Protocol):
    """Resolve one key segment against a schema handle.

    Implementations must be deterministic for a given ``(segment_key, schema)``
    pair and raise `AttributeNotFoundError` when nothing matches.
    """

    def resolve(self, segment_key: str, schema: Any) -> Attribute:
        ...


@dataclass(frozen=True, slots=True)
class Schema:
    """In-memory description of a filterable data model.

    Attributes:
        name: Schema name, for display only.
        fields: Field name to type name.
        associations: Association name to the associated schema.
    """

    name: str
    fields: Mapping[str, str] = field(default_factory=dict)
    associations: Mapping[str, Schema] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "associations", MappingProxyType(dict(self.associations)))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], *, name: str = "root", config_key: str = "schema") -> Schema:
        """Build a schema from a nested mapping.

        Expected shape::

            name: post
            fields: {title: string, published: boolean}
            associations:
              user:
                fields: {email: string}

        Args:
            raw: Schema mapping.
            name: Fallback name when the mapping has no ``name`` key.
            config_key: Key path used in error messages.

        Returns:
            Parsed schema.

        Raises:
            TypeError: If the mapping shape is invalid.
        """
        if not isinstance(raw, Mapping):
            raise TypeError(f"{config_key} must be an object")

        schema_name = raw.get("name", name)
        if not isinstance(schema_name, str):
            raise TypeError(f"{config_key}.name must be a string")

        fields_obj = raw.get("fields") or {}
        if not isinstance(fields_obj, Mapping):
            raise TypeError(f"{config_key}.fields must be an object")
        fields: dict[str, str] = {}
        for field_name, field_type in fields_obj.items():
            if not isinstance(field_name, str):
                raise TypeError(f"{config_key}.fields names must be strings")
            if not isinstance(field_type, str):
                raise TypeError(f"{config_key}.fields.{field_name} must be a string")
            fields[field_name] = field_type

        assoc_obj = raw.get("associations") or {}
        if not isinstance(assoc_obj, Mapping):
            raise TypeError(f"{config_key}.associations must be an object")
        associations = {
            assoc_name: cls.from_mapping(
                assoc_raw,
                name=assoc_name,
                config_key=f"{config_key}.associations.{assoc_name}",
            )
            for assoc_name, assoc_raw in assoc_obj.items()
        }
        return cls(name=schema_name, fields=fields, associations=associations)


@dataclass(frozen=True, slots=True)
class SchemaAttributeResolver:
    """Resolve key segments against a `Schema`.

    Fields of the current schema are tried first, longest name wins. Then
    associations are walked, again longest name first, and the rest of the
    segment is resolved against the associated schema.

    Attributes:
        max_depth: Maximum number of association hops, or None for no limit.
    """

    max_depth: int | None = None

    def resolve(self, segment_key: str, schema: Schema) -> Attribute:
        """Resolve a key segment into an attribute.

        Args:
            segment_key: Key segment, possibly ending in predicate text.
            schema: Root schema.

        Returns:
            Resolved attribute.

        Raises:
            AttributeNotFoundError: If no field path matches the segment.
            AttributeTooDeepError: If the matching path exceeds ``max_depth``.
        """
        attribute = self._resolve(segment_key, schema, ())
        if attribute is None:
            raise AttributeNotFoundError(segment_key)
        if self.max_depth is not None and len(attribute.parent) > self.max_depth:
            raise AttributeTooDeepError(segment_key)
        return attribute

    def _resolve(self, rest: str, schema: Schema, parent: tuple[str, ...]) -> Attribute | None:
        field_name = _longest_prefix(rest, schema.fields)
        if field_name is not None:
            return Attribute(name=field_name, parent=parent, type=schema.fields[field_name])

        for assoc_name in _prefixes_longest_first(rest, schema.associations):
            attribute = self._resolve(
                rest[len(assoc_name) + 1 :],
                schema.associations[assoc_name],
                (*parent, assoc_name),
            )
            if attribute is not None:
                return attribute
        return None


def _longest_prefix(text: str, names: Mapping[str, Any]) -> str | None:
    """Return the longest name that prefixes ``text`` at a ``_`` boundary."""
    for name in sorted(names, key=len, reverse=True):
        if text == name or text.startswith(f"{name}_"):
            return name
    return None


def _prefixes_longest_first(text: str, names: Mapping[str, Any]) -> list[str]:
    """Return every name followed by ``_`` in ``text``, longest first."""
    return [name for name in sorted(names, key=len, reverse=True) if text.startswith(f"{name}_")]
