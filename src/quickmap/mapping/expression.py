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
"""Fluent configuration expressions returned by ``create_map``.

Usage::

    (
        cfg.create_map(User, UserDto)
        .for_member("full_name", lambda opt: opt.map_from(lambda u: f"{u.first_name} {u.last_name}"))
        .for_member("password", lambda opt: opt.ignore())
        .reverse_map()
    )
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from quickmap.kernel.exceptions import ConfigurationException, require
from quickmap.mapping.property_map import PropertyMap
from quickmap.mapping.type_map import TypeMap

if TYPE_CHECKING:
    from quickmap.mapping.builder import MapperConfigurationExpression

S = TypeVar("S")
D = TypeVar("D")


def _require_callable(value: Any, argument: str) -> Callable[..., Any]:
    require(value, argument)
    if not callable(value):
        raise ConfigurationException(f"'{argument}' must be callable, got {type(value).__name__}")
    return value


class MemberConfigurationExpression(Generic[S]):
    """Options for one destination field, passed to the ``for_member`` configurer."""

    def __init__(self, type_map: TypeMap, property_map: PropertyMap) -> None:
        self._type_map = type_map
        self._property_map = property_map

    @property
    def property_map(self) -> PropertyMap:
        return self._property_map

    def map_from(self, source: Callable[[S], Any] | str) -> MemberConfigurationExpression[S]:
        """Take the value from a callable over the source, or from a named source field."""
        require(source, "source")
        self._type_map.ensure_not_sealed()
        if isinstance(source, str):
            field = self._type_map.source_field(source)
            if field is None or not field.readable:
                raise ConfigurationException(
                    f"Source field '{source}' does not exist on '{self._type_map.source_type.__name__}'"
                )
            self._property_map.source_field = field
            self._property_map.value_producer = None
        else:
            self._property_map.value_producer = _require_callable(source, "source")
        return self

    def ignore(self) -> MemberConfigurationExpression[S]:
        self._type_map.ensure_not_sealed()
        self._property_map.ignored = True
        return self

    def condition(self, predicate: Callable[[S], bool]) -> MemberConfigurationExpression[S]:
        """Map the field only for source instances satisfying *predicate*."""
        self._type_map.ensure_not_sealed()
        self._property_map.guard = _require_callable(predicate, "predicate")
        return self

    def use_value(self, value: Any) -> MemberConfigurationExpression[S]:
        """Always write *value*, regardless of the source instance."""
        self._type_map.ensure_not_sealed()
        self._property_map.use_constant(value)
        return self


class MappingExpression(Generic[S, D]):
    """Configures one TypeMap; every method returns an expression for chaining."""

    def __init__(self, type_map: TypeMap, owner: MapperConfigurationExpression) -> None:
        self._type_map = require(type_map, "type_map")
        self._owner = owner

    @property
    def type_map(self) -> TypeMap:
        return self._type_map

    def for_member(
        self,
        destination_member: str,
        member_options: Callable[[MemberConfigurationExpression[S]], Any],
    ) -> MappingExpression[S, D]:
        """Configure the destination field named *destination_member*."""
        require(destination_member, "destination_member")
        _require_callable(member_options, "member_options")
        self._type_map.ensure_not_sealed()
        field = self._type_map.destination_field(destination_member)
        if field is None:
            raise ConfigurationException(
                f"Field '{destination_member}' does not exist on '{self._type_map.destination_type.__name__}'"
            )
        property_map = self._type_map.get_or_create_property_map(field)
        member_options(MemberConfigurationExpression(self._type_map, property_map))
        return self

    def before_map(self, hook: Callable[[S, D], Any]) -> MappingExpression[S, D]:
        """Run *hook(source, destination)* before any field is mapped."""
        self._type_map.ensure_not_sealed()
        self._type_map.before_map = _require_callable(hook, "hook")
        return self

    def after_map(self, hook: Callable[[S, D], Any]) -> MappingExpression[S, D]:
        """Run *hook(source, destination)* after every field is mapped."""
        self._type_map.ensure_not_sealed()
        self._type_map.after_map = _require_callable(hook, "hook")
        return self

    def construct_using(self, factory: Callable[[S], D]) -> MappingExpression[S, D]:
        """Create new destinations with *factory(source)* instead of the no-argument constructor."""
        self._type_map.ensure_not_sealed()
        self._type_map.custom_constructor = _require_callable(factory, "factory")
        return self

    def reverse_map(self) -> MappingExpression[D, S]:
        """Register an independent, initially empty TypeMap for the swapped pair.

        Explicit configuration of this expression is not inverted; the
        reverse map relies on automatic matching plus whatever is configured
        on the returned expression.
        """
        return self._owner.create_map(self._type_map.destination_type, self._type_map.source_type)
