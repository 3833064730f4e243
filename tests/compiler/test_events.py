# Copyright 2026 uiderive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for event schema synthesis."""

import pytest

from uiderive.compiler.events import EventRegistry
from uiderive.diagnostics import CompileError, ErrorKind, Span
from uiderive.model.aggregate import EventKind, EventSchema
from uiderive.model.annotations import LiteralKind, LiteralValue

SPAN = Span("<test>", 1, 1)


def _catch(name: str) -> LiteralValue:
    return LiteralValue(kind=LiteralKind.STR, value=name, span=Span("<test>", 2, 5))


class TestCatchFlag:
    def test_defaults_to_field_name(self) -> None:
        registry = EventRegistry("Form")
        assert registry.catch_flag("age", None, SPAN) == "age"
        assert registry.schema().names == ["age"]

    def test_implicit_name_registered_once(self) -> None:
        registry = EventRegistry("Form")
        registry.catch_flag("turbo", None, SPAN)
        registry.catch_flag("turbo", None, SPAN)
        assert registry.schema().names == ["turbo"]

    def test_explicit_catch(self) -> None:
        registry = EventRegistry("Form")
        assert registry.catch_flag("age", _catch("changed"), SPAN) == "changed"
        assert registry.schema().entry("changed").kind is EventKind.BOOL

    def test_shared_explicit_catch(self) -> None:
        registry = EventRegistry("Form")
        registry.catch_flag("a", _catch("edited"), SPAN)
        registry.catch_flag("b", _catch("edited"), SPAN)
        assert registry.schema().names == ["edited"]

    def test_registration_order(self) -> None:
        registry = EventRegistry("Form")
        for name in ("z", "a", "m"):
            registry.catch_flag(name, None, SPAN)
        assert registry.schema().names == ["z", "a", "m"]


class TestCatchNested:
    def test_nested_entry(self) -> None:
        registry = EventRegistry("Window")
        child = EventSchema(aggregate="Login")
        name = registry.catch_nested("login", None, SPAN, "Login", child)
        entry = registry.schema().entry(name)
        assert entry.kind is EventKind.NESTED
        assert entry.type_name == "Login"
        assert entry.nested_schema == child

    def test_flag_conflicts_with_nested(self) -> None:
        registry = EventRegistry("Window")
        registry.catch_nested("login", None, SPAN, "Login")
        with pytest.raises(CompileError) as exc_info:
            registry.catch_flag("other", _catch("login"), SPAN)
        assert exc_info.value.kind is ErrorKind.ALREADY_DEFINED
        assert exc_info.value.span.line == 2

    def test_nested_conflicts_with_flag(self) -> None:
        registry = EventRegistry("Window")
        registry.catch_flag("login", None, SPAN)
        with pytest.raises(CompileError) as exc_info:
            registry.catch_nested("login", None, SPAN, "Login")
        assert exc_info.value.kind is ErrorKind.ALREADY_DEFINED

    def test_repeated_nested_reuses_entry(self) -> None:
        registry = EventRegistry("Window")
        first = registry.catch_nested("login", None, SPAN, "Login")
        second = registry.catch_nested("login", None, SPAN, "Login")
        assert first == second == "login"
        assert registry.schema().names == ["login"]

    def test_shared_explicit_nested_catch(self) -> None:
        registry = EventRegistry("Window")
        registry.catch_nested("primary", _catch("account"), SPAN, "Login")
        registry.catch_nested("backup", _catch("account"), SPAN, "Login")
        entry = registry.schema().entry("account")
        assert entry.kind is EventKind.NESTED
        assert registry.schema().names == ["account"]

    def test_nested_of_another_type_conflicts(self) -> None:
        registry = EventRegistry("Window")
        registry.catch_nested("primary", _catch("account"), SPAN, "Login")
        with pytest.raises(CompileError) as exc_info:
            registry.catch_nested("profile", _catch("account"), SPAN, "Profile")
        assert exc_info.value.kind is ErrorKind.ALREADY_DEFINED
        assert exc_info.value.span.line == 2
