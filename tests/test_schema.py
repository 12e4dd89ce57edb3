"""Tests for schema descriptors and the schema registry."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime

import pytest

from adventure_schema.exceptions import SchemaDefinitionError
from adventure_schema.models import Act, Adventure, Encounter, EncounterType, NPC, Scene
from adventure_schema.validation import (
    FieldKind,
    MinCount,
    Required,
    SchemaRegistry,
    StringLength,
    build_descriptor,
    get_schema,
    schema_field,
)
from adventure_schema.validation.schema import camel_case


@dataclass
class TreeNode:
    label: str | None = schema_field(Required(), default=None)
    children: list[TreeNode] = schema_field(default_factory=list)
    parent: TreeNode | None = None


@dataclass
class WithSet:
    tags: set[str] = field(default_factory=set)


@dataclass
class HoldsBadChild:
    child: WithSet | None = None


@dataclass
class BadExtension:
    extra: list[str] = schema_field(default_factory=list, extension=True)


@dataclass
class CaseClash:
    name: str = ""
    other: str = schema_field(default="", alias="NAME")


@dataclass
class TwoExtensions:
    first: dict[str, str] = schema_field(default_factory=dict, extension=True)
    second: dict[str, str] = schema_field(default_factory=dict, extension=True)


@dataclass
class Derived:
    name: str = ""
    computed: int = field(default=0, init=False)


class NotARecord:
    name: str = ""


@pytest.fixture
def registry():
    return SchemaRegistry("test")


class TestCamelCase:
    """Test default wire names."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("title", "title"),
            ("adventure_id", "adventureId"),
            ("estimated_play_time", "estimatedPlayTime"),
        ],
    )
    def test_conversion(self, name, expected):
        assert camel_case(name) == expected


class TestBuildDescriptor:
    """Test compiling record types."""

    def test_fields_in_declaration_order(self):
        schema = build_descriptor(Act)
        names = [fd.name for fd in schema]
        assert names[:4] == ["act_number", "title", "summary", "description"]
        assert len(schema) == len(names)

    def test_field_kinds(self):
        schema = build_descriptor(Adventure)
        assert schema.field("title").kind is FieldKind.OPTIONAL_SCALAR
        assert schema.field("version").kind is FieldKind.REQUIRED_SCALAR
        assert schema.field("level_range").kind is FieldKind.NESTED_RECORD
        assert schema.field("acts").kind is FieldKind.LIST_OF_RECORD
        assert schema.field("rewards").kind is FieldKind.LIST_OF_SCALAR
        assert schema.field("created_date").scalar_type is datetime

    def test_mapping_kind(self):
        schema = build_descriptor(Adventure)
        metadata_schema = build_descriptor(schema.field("metadata").record_type)
        custom = metadata_schema.field("custom_fields")
        assert custom.kind is FieldKind.MAPPING
        assert custom.extension
        assert metadata_schema.extension_field is custom

    def test_enum_is_scalar(self):
        fd = build_descriptor(Encounter).field("type")
        assert fd.kind is FieldKind.REQUIRED_SCALAR
        assert fd.scalar_type is EncounterType

    def test_constraints_in_declaration_order(self):
        fd = build_descriptor(Adventure).field("acts")
        assert [type(c) for c in fd.constraints] == [Required, MinCount]

    def test_wire_names_and_aliases(self):
        assert build_descriptor(Adventure).field("adventure_id").wire_name == "adventureId"
        assert build_descriptor(NPC).field("character_class").wire_name == "class"
        assert build_descriptor(Act).field("featured_npcs").wire_name == "featuredNPCs"

    def test_nullable(self):
        schema = build_descriptor(Adventure)
        assert schema.field("metadata").nullable
        assert schema.field("npcs").nullable
        assert not schema.field("version").nullable

    def test_lookup(self):
        schema = build_descriptor(Act)
        assert schema.lookup("FEATUREDNPCS").name == "featured_npcs"
        assert schema.lookup("FEATUREDNPCS", case_insensitive=False) is None
        assert schema.lookup("featuredNPCs", case_insensitive=False).name == "featured_npcs"
        assert schema.lookup("nope") is None

    def test_unknown_attribute_name(self):
        with pytest.raises(KeyError):
            build_descriptor(Act).field("nope")

    def test_nested_types(self):
        assert list(build_descriptor(Act).nested_types()) == [Scene]

    def test_init_false_fields_skipped(self):
        assert [fd.name for fd in build_descriptor(Derived)] == ["name"]

    def test_self_reference(self):
        schema = build_descriptor(TreeNode)
        assert schema.field("children").record_type is TreeNode
        assert schema.field("parent").record_type is TreeNode

    def test_to_dict(self):
        data = build_descriptor(Scene).to_dict()
        assert data["name"] == "Scene"
        description = next(f for f in data["fields"] if f["name"] == "description")
        assert description["kind"] == "optional_scalar"
        assert description["type"] == "str"
        assert description["constraints"][0]["type"] == "required"
        assert isinstance(description["constraints"][1], dict)

    def test_descriptor_is_immutable(self):
        schema = build_descriptor(Scene)
        with pytest.raises(AttributeError):
            schema.fields = ()

    @pytest.mark.parametrize(
        "record_type,match",
        [
            (WithSet, "Unsupported annotation"),
            (BadExtension, "must be a dict"),
            (CaseClash, "Duplicate field name"),
            (TwoExtensions, "more than one extension"),
            (NotARecord, "Not a record type"),
        ],
    )
    def test_definition_errors(self, record_type, match):
        with pytest.raises(SchemaDefinitionError, match=match):
            build_descriptor(record_type)

    def test_definition_error_context(self):
        with pytest.raises(SchemaDefinitionError) as exc_info:
            build_descriptor(WithSet)
        assert exc_info.value.context["field"] == "tags"
        assert exc_info.value.context["record"] == "WithSet"


class TestSchemaRegistry:
    """Test SchemaRegistry caching."""

    def test_get_returns_same_instance(self, registry):
        first = registry.get(Adventure)
        assert registry.get(Adventure) is first
        assert registry.has(Adventure)
        assert registry.count() == 1

    def test_get_compiles_lazily(self, registry):
        registry.get(Act)
        assert not registry.has(Scene)

    def test_resolve_all_covers_type_graph(self, registry):
        resolved = registry.resolve_all(Adventure)
        assert list(resolved)[0] is Adventure
        assert Scene in resolved
        assert NPC in resolved
        assert all(registry.get(t) is d for t, d in resolved.items())

    def test_resolve_all_twice_is_complete(self, registry):
        registry.resolve_all(Act)
        assert set(registry.resolve_all(Act)) == {Act, Scene}

    def test_self_reference_terminates(self, registry):
        assert set(registry.resolve_all(TreeNode)) == {TreeNode}

    def test_ensure_surfaces_nested_errors(self, registry):
        registry.get(HoldsBadChild)
        with pytest.raises(SchemaDefinitionError, match="Unsupported annotation"):
            registry.ensure(HoldsBadChild)

    def test_failed_build_is_not_cached(self, registry):
        with pytest.raises(SchemaDefinitionError):
            registry.get(WithSet)
        assert not registry.has(WithSet)

    def test_list_types_and_clear(self, registry):
        registry.ensure(Act)
        assert set(registry.list_types()) == {Act, Scene}
        registry.clear()
        assert registry.count() == 0

    def test_concurrent_first_use_publishes_one_instance(self, registry):
        workers = 8
        barrier = threading.Barrier(workers)
        results = []

        def compile_schema():
            barrier.wait()
            results.append(registry.get(Adventure))

        threads = [threading.Thread(target=compile_schema) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == workers
        assert all(r is results[0] for r in results)

    def test_default_registry(self):
        assert get_schema(Scene) is get_schema(Scene)

    def test_registries_are_independent(self, registry):
        other = SchemaRegistry("other")
        assert registry.get(Scene) is not other.get(Scene)
        assert registry.get(Scene) == other.get(Scene)


class TestStringLengthOnSchema:
    """Constraint parameters survive compilation."""

    def test_bounds_preserved(self):
        fd = build_descriptor(Act).field("title")
        assert StringLength(min=1, max=200, message="Title must be between 1 and 200 characters") in fd.constraints
