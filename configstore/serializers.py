"""
Serializer adapters that turn configuration values into bytes and back.

The store does not know the shape of the value it persists; it only needs an
object with `encode(value) -> bytes` and `decode(data) -> value`. This module
provides:
- `Serializer`: the protocol a custom adapter has to satisfy.
- `JsonSerializer`: plain JSON values (dicts, lists, strings, numbers).
- `DataclassSerializer`: JSON objects mapped onto a dataclass type.

Adapters raise `SerializationError` for any payload they cannot handle.
"""
# configstore/serializers.py

import dataclasses
import json
import types
from typing import Any, Generic, Protocol, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from configstore.errors import SerializationError
from configstore.settings import JSON_ENCODING

T = TypeVar("T")


class Serializer(Protocol[T]):
    """Encodes a configuration value to bytes and decodes it back."""

    def encode(self, value: T) -> bytes:
        ...

    def decode(self, data: bytes) -> T:
        ...


class JsonSerializer:
    """Serializes JSON-compatible values as UTF-8 encoded JSON."""

    def __init__(self, indent=None, sort_keys=False):
        self.indent = indent
        self.sort_keys = sort_keys

    def encode(self, value: Any) -> bytes:
        try:
            text = json.dumps(value, indent=self.indent, sort_keys=self.sort_keys)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"could not encode {type(value).__name__} as JSON: {e}") from e
        return text.encode(JSON_ENCODING)

    def decode(self, data: bytes) -> Any:
        try:
            return json.loads(data.decode(JSON_ENCODING))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise SerializationError(f"could not decode JSON payload: {e}") from e


class DataclassSerializer(Generic[T]):
    """Serializes instances of one dataclass type as a JSON object.

    Field names are the JSON keys. Fields typed as another dataclass, or an
    optional one, are rebuilt recursively. Decoding fails when the object has
    unknown keys or misses a field without a default.
    """

    def __init__(self, cls: Type[T], indent=None):
        if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
            raise TypeError(f"{cls!r} is not a dataclass type")
        self.cls = cls
        self._json = JsonSerializer(indent=indent)

    def encode(self, value: T) -> bytes:
        if not isinstance(value, self.cls):
            raise SerializationError(
                f"expected {self.cls.__name__}, got {type(value).__name__}"
            )
        return self._json.encode(dataclasses.asdict(value))

    def decode(self, data: bytes) -> T:
        return _build(self.cls, self._json.decode(data))


def _dataclass_type(hint):
    """Returns the dataclass behind a field type, unwrapping `Optional[...]`."""
    if get_origin(hint) in (Union, types.UnionType):
        args = [a for a in get_args(hint) if a is not type(None)]
        if len(args) == 1:
            hint = args[0]
    if isinstance(hint, type) and dataclasses.is_dataclass(hint):
        return hint
    return None


def _build(cls, fields):
    """Rebuilds a dataclass from the dict `dataclasses.asdict` produced, nested ones included."""
    if not isinstance(fields, dict):
        raise SerializationError(
            f"expected a JSON object for {cls.__name__}, got {type(fields).__name__}"
        )
    try:
        hints = get_type_hints(cls)
    except NameError as e:
        raise SerializationError(f"could not resolve field types of {cls.__name__}: {e}") from e

    kwargs = dict(fields)
    for f in dataclasses.fields(cls):
        nested = _dataclass_type(hints.get(f.name))
        if nested is not None and kwargs.get(f.name) is not None:
            kwargs[f.name] = _build(nested, kwargs[f.name])
    try:
        return cls(**kwargs)
    except TypeError as e:
        raise SerializationError(f"could not build {cls.__name__}: {e}") from e
