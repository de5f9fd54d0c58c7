"""Unit tests for domain models."""

import pytest
from pydantic import ValidationError

from miraveja_boot.domain import ImportKind, ImportRecord, InvalidConfigError, LogMessage, ObjectConfig, Registry


class TestImportRecord:
    """Test cases for ImportRecord."""

    def test_create_import_record(self):
        """Test creating an import record."""
        record = ImportRecord(identifier="@app/components/*", kind=ImportKind.DIRECTORY, result="/app/components")
        assert record.identifier == "@app/components/*"
        assert record.kind == ImportKind.DIRECTORY
        assert record.result == "/app/components"

    def test_import_record_is_frozen(self):
        """Test that import records cannot be modified."""
        record = ImportRecord(identifier="Foo", kind=ImportKind.CLASS, result="Foo")
        with pytest.raises(ValidationError):
            record.result = "Bar"


class TestObjectConfig:
    """Test cases for ObjectConfig."""

    def test_from_string(self):
        """Test that a bare identifier becomes a record without properties."""
        record = ObjectConfig.from_value("@app/components/GoogleMap")
        assert record.class_ == "@app/components/GoogleMap"
        assert record.properties == {}

    def test_from_class(self):
        """Test that a class object is accepted as identifier."""

        class Widget:
            pass

        record = ObjectConfig.from_value(Widget)
        assert record.class_ is Widget

    def test_from_mapping_strips_class_key(self):
        """Test that the class element is not part of the properties."""
        record = ObjectConfig.from_value({"class": "Widget", "color": "red", "size": 3})
        assert record.class_ == "Widget"
        assert record.properties == {"color": "red", "size": 3}
        assert "class" not in record.properties

    def test_properties_keep_order(self):
        """Test that properties keep the order of the mapping."""
        record = ObjectConfig.from_value({"class": "Widget", "b": 1, "a": 2, "c": 3})
        assert list(record.properties) == ["b", "a", "c"]

    def test_properties_values_are_kept_as_is(self):
        """Test that property values are not copied or coerced."""
        marker = object()
        record = ObjectConfig.from_value({"class": "Widget", "marker": marker})
        assert record.properties["marker"] is marker

    def test_mapping_without_class_raises(self):
        """Test that a mapping without the class element is rejected."""
        with pytest.raises(InvalidConfigError, match='"class" element'):
            ObjectConfig.from_value({"color": "red"})

    def test_non_mapping_raises(self):
        """Test that unsupported configuration types are rejected."""
        with pytest.raises(InvalidConfigError):
            ObjectConfig.from_value(42)

    def test_invalid_class_value_raises(self):
        """Test that a class element of the wrong type is rejected."""
        with pytest.raises(InvalidConfigError, match="Invalid object configuration"):
            ObjectConfig.from_value({"class": 42})

    def test_existing_record_is_returned(self):
        """Test that a record passes through unchanged."""
        record = ObjectConfig.from_value("Widget")
        assert ObjectConfig.from_value(record) is record


class TestLogMessage:
    """Test cases for LogMessage."""

    def test_defaults(self):
        """Test the default category and timestamp."""
        message = LogMessage(message="hello", level="info")
        assert message.category == "application"
        assert message.timestamp > 0


class TestRegistry:
    """Test cases for Registry."""

    def test_empty_registry(self):
        """Test that a new registry has empty tables."""
        registry = Registry()
        assert registry.aliases == {}
        assert registry.class_map == {}
        assert registry.class_path == []
        assert registry.imported == {}
        assert registry.classes == {}
        assert registry.loaded_files == {}

    def test_define_class(self):
        """Test defining a class in the class table."""
        registry = Registry()

        class Widget:
            pass

        registry.define_class("Widget", Widget)
        assert registry.is_defined("Widget")
        assert registry.classes["Widget"] is Widget

    def test_dynamic_decorator_uses_class_name(self):
        """Test that the decorator registers under the class name by default."""
        registry = Registry()

        @registry.dynamic()
        class Widget:
            pass

        assert registry.classes["Widget"] is Widget

    def test_dynamic_decorator_with_identifier(self):
        """Test that the decorator accepts an explicit identifier."""
        registry = Registry()

        @registry.dynamic("app.components.Widget")
        class Widget:
            pass

        assert registry.classes["app.components.Widget"] is Widget
        assert not registry.is_defined("Widget")

    def test_copy_state_is_independent(self):
        """Test that a copy does not share tables with the original."""
        registry = Registry()
        registry.aliases["@app"] = "/app"
        registry.class_path.append("/lib")

        copy = registry.copy_state()
        copy.aliases["@web"] = "/web"
        copy.class_path.insert(0, "/other")

        assert registry.aliases == {"@app": "/app"}
        assert registry.class_path == ["/lib"]

    def test_restore_state(self):
        """Test restoring tables from another registry."""
        registry = Registry()
        saved = registry.copy_state()
        registry.aliases["@app"] = "/app"
        registry.class_map["Foo"] = "/app/Foo.py"

        registry.restore_state(saved)

        assert registry.aliases == {}
        assert registry.class_map == {}

    def test_clear(self):
        """Test that clear empties every table."""
        registry = Registry()
        registry.aliases["@app"] = "/app"
        registry.class_map["Foo"] = "/app/Foo.py"
        registry.class_path.append("/app")
        registry.define_class("Foo", object)

        registry.clear()

        assert registry.aliases == {}
        assert registry.class_map == {}
        assert registry.class_path == []
        assert registry.classes == {}
