# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Field descriptors: the per-class view of readable and writable fields.

A class is introspected once by :func:`describe` and the result cached, so
mapping calls never repeat the introspection. Supported shapes:

- dataclasses (frozen dataclasses expose read-only fields)
- pydantic ``BaseModel`` subclasses (frozen models or fields are read-only)
- plain classes declaring their fields through class annotations
- ``@property`` members of any of the above (writable only with a setter)

Names starting with an underscore and ``ClassVar`` annotations are not fields.
"""

from __future__ import annotations

import dataclasses
import functools
from dataclasses import dataclass
from typing import Any, ClassVar, get_origin, get_type_hints

from pydantic import BaseModel


@dataclass(frozen=True)
class FieldDescriptor:
    """Name, declared type and access capabilities of one field.

    Attributes:
        name: Attribute name on instances.
        field_type: Declared type (annotation), ``Any`` when undeclared.
        readable: Whether the value can be read from an instance.
        writable: Whether a value can be assigned on an instance.
        required: Whether the field declares no default value.
    """

    name: str
    field_type: Any = Any
    readable: bool = True
    writable: bool = True
    required: bool = False

    def get(self, instance: Any) -> Any:
        return getattr(instance, self.name)

    def set(self, instance: Any, value: Any) -> None:
        setattr(instance, self.name, value)


@functools.lru_cache(maxsize=None)
def describe(cls: type) -> tuple[FieldDescriptor, ...]:
    """Return the field descriptors of *cls* in declaration order."""
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        fields = _describe_model(cls)
    elif dataclasses.is_dataclass(cls):
        fields = _describe_dataclass(cls)
    else:
        fields = _describe_annotated(cls)
    seen = {f.name for f in fields}
    return (*fields, *_describe_properties(cls, seen))


def find_field(cls: type, name: str, *, ignore_case: bool = False) -> FieldDescriptor | None:
    """Find a field of *cls* by name; exact matches win over case-insensitive ones."""
    fields = describe(cls)
    for descriptor in fields:
        if descriptor.name == name:
            return descriptor
    if ignore_case:
        folded = name.casefold()
        for descriptor in fields:
            if descriptor.name.casefold() == folded:
                return descriptor
    return None


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------


def _is_private(name: str) -> bool:
    return name.startswith("_")


def _type_hints(cls: type) -> dict[str, Any]:
    """Resolved annotations, falling back to the raw ones when forward refs fail."""
    try:
        return get_type_hints(cls)
    except (NameError, TypeError):
        hints: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            hints.update(getattr(klass, "__annotations__", {}))
        return hints


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _describe_model(cls: type[BaseModel]) -> list[FieldDescriptor]:
    model_frozen = bool(cls.model_config.get("frozen", False))
    return [
        FieldDescriptor(
            name=name,
            field_type=info.annotation if info.annotation is not None else Any,
            writable=not (model_frozen or bool(info.frozen)),
            required=info.is_required(),
        )
        for name, info in cls.model_fields.items()
        if not _is_private(name)
    ]


def _describe_dataclass(cls: type) -> list[FieldDescriptor]:
    hints = _type_hints(cls)
    frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
    return [
        FieldDescriptor(
            name=f.name,
            field_type=hints.get(f.name, f.type),
            writable=not frozen,
            required=f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING,
        )
        for f in dataclasses.fields(cls)
        if not _is_private(f.name)
    ]


def _describe_annotated(cls: type) -> list[FieldDescriptor]:
    fields = []
    for name, annotation in _type_hints(cls).items():
        if _is_private(name) or _is_class_var(annotation):
            continue
        if isinstance(_static_attr(cls, name), property):
            continue
        fields.append(
            FieldDescriptor(name=name, field_type=annotation, required=not hasattr(cls, name))
        )
    return fields


def _static_attr(cls: type, name: str) -> Any:
    for klass in cls.__mro__:
        if name in vars(klass):
            return vars(klass)[name]
    return None


def _describe_properties(cls: type, seen: set[str]) -> list[FieldDescriptor]:
    properties: dict[str, property] = {}
    for klass in reversed(cls.__mro__):
        if klass is object or klass.__module__.startswith("pydantic"):
            continue
        for name, attr in vars(klass).items():
            if isinstance(attr, property):
                properties[name] = attr
            else:
                properties.pop(name, None)

    fields = []
    for name, prop in properties.items():
        if _is_private(name) or name in seen:
            continue
        fields.append(
            FieldDescriptor(
                name=name,
                field_type=_return_type(prop),
                readable=prop.fget is not None,
                writable=prop.fset is not None,
            )
        )
    return fields


def _return_type(prop: property) -> Any:
    if prop.fget is None:
        return Any
    try:
        return get_type_hints(prop.fget).get("return", Any)
    except (NameError, TypeError):
        return prop.fget.__annotations__.get("return", Any)
