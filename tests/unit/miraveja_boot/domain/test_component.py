"""Unit tests for BaseObject properties and configure."""

from typing import Optional

import pytest

from miraveja_boot.domain import (
    BaseObject,
    Initializable,
    InvalidConfigError,
    ReadOnlyPropertyError,
    UnknownPropertyError,
    configure,
)


class Widget(BaseObject):
    """Widget with a read/write, a read-only and a write-only property."""

    color: Optional[str] = None

    def __init__(self):
        self._label = None
        self._secret = None

    def get_label(self):
        return self._label

    def set_label(self, value):
        self._label = value

    def get_size(self):
        return 42

    def set_secret(self, value):
        self._secret = value


class Gadget(Widget, Initializable):
    """Initializable widget recording what init observed."""

    args: tuple = ()
    seen_label: Optional[str] = None

    def __init__(self, *args):
        super().__init__()
        self.args = args
        self.seen_label = "not initialized"

    def init(self):
        self.seen_label = self.label


class TestPropertyRead:
    """Test cases for reading properties."""

    def test_read_calls_getter(self):
        """Test that reading a property calls its getter."""
        widget = Widget()
        widget._label = "abc"
        assert widget.label == "abc"

    def test_read_is_case_insensitive(self):
        """Test that property names are case-insensitive."""
        widget = Widget()
        widget._label = "abc"
        assert widget.LABEL == "abc"
        assert widget.read_property("Label") == "abc"

    def test_read_unknown_property_raises(self):
        """Test that reading an unknown property raises UnknownPropertyError."""
        widget = Widget()
        with pytest.raises(UnknownPropertyError, match="Getting unknown property: Widget.missing"):
            _ = widget.missing

    def test_read_write_only_property_raises(self):
        """Test that a property with only a setter cannot be read."""
        widget = Widget()
        with pytest.raises(UnknownPropertyError):
            _ = widget.secret

    def test_hasattr_is_false_for_unknown_property(self):
        """Test that hasattr keeps working thanks to AttributeError."""
        widget = Widget()
        assert not hasattr(widget, "missing")
        assert getattr(widget, "missing", "default") == "default"

    def test_private_names_raise_plain_attribute_error(self):
        """Test that underscored names never go through the accessor table."""
        widget = Widget()
        with pytest.raises(AttributeError) as exc_info:
            _ = widget._missing
        assert not isinstance(exc_info.value, UnknownPropertyError)


class TestPropertyWrite:
    """Test cases for writing properties."""

    def test_write_calls_setter(self):
        """Test that assigning a property calls its setter."""
        widget = Widget()
        widget.label = "abc"
        assert widget._label == "abc"

    def test_write_only_property(self):
        """Test that a property with only a setter can be written."""
        widget = Widget()
        widget.secret = "s3cr3t"
        assert widget._secret == "s3cr3t"

    def test_write_read_only_property_raises(self):
        """Test that assigning a getter-only property raises ReadOnlyPropertyError."""
        widget = Widget()
        with pytest.raises(ReadOnlyPropertyError, match="Setting read-only property: Widget.size"):
            widget.size = 1

    def test_write_unknown_property_raises(self):
        """Test that assigning an unknown property raises UnknownPropertyError."""
        widget = Widget()
        with pytest.raises(UnknownPropertyError, match="Setting unknown property: Widget.missing"):
            widget.missing = 1

    def test_declared_attribute_is_plain(self):
        """Test that declared attributes bypass the accessor table."""
        widget = Widget()
        assert widget.color is None
        widget.color = "red"
        assert widget.color == "red"
        assert widget.__dict__["color"] == "red"

    def test_write_property_method(self):
        """Test the explicit write entry point."""
        widget = Widget()
        widget.write_property("LABEL", "abc")
        assert widget.label == "abc"


class TestPropertyClear:
    """Test cases for clearing properties."""

    def test_clear_calls_setter_with_none(self):
        """Test that deleting a property sets it to None."""
        widget = Widget()
        widget.label = "abc"
        del widget.label
        assert widget.label is None

    def test_clear_read_only_property_raises(self):
        """Test that deleting a getter-only property raises ReadOnlyPropertyError."""
        widget = Widget()
        with pytest.raises(ReadOnlyPropertyError, match="Unsetting read-only property"):
            del widget.size

    def test_clear_unknown_property_is_noop(self):
        """Test that deleting an unknown property does nothing."""
        widget = Widget()
        del widget.missing
        widget.clear_property("missing")


class TestPropertyIntrospection:
    """Test cases for is_set and the has/can helpers."""

    def test_is_set_requires_non_none_value(self):
        """Test that is_set means readable and not None."""
        widget = Widget()
        assert not widget.is_set("label")
        widget.label = "abc"
        assert widget.is_set("label")
        widget.label = None
        assert not widget.is_set("label")

    def test_is_set_false_for_unknown_and_write_only(self):
        """Test that is_set is False without a getter."""
        widget = Widget()
        widget.secret = "x"
        assert not widget.is_set("missing")
        assert not widget.is_set("secret")

    def test_is_set_for_declared_attribute(self):
        """Test is_set on a declared attribute."""
        widget = Widget()
        assert not widget.is_set("color")
        widget.color = "red"
        assert widget.is_set("color")

    def test_has_and_can_property(self):
        """Test has_property, can_get_property and can_set_property."""
        widget = Widget()
        assert widget.has_property("label")
        assert widget.has_property("size")
        assert widget.has_property("secret")
        assert not widget.has_property("missing")
        assert widget.can_get_property("Size")
        assert not widget.can_set_property("size")
        assert widget.can_set_property("secret")
        assert not widget.can_get_property("secret")

    def test_accessors_are_inherited(self):
        """Test that subclasses inherit accessor pairs."""
        gadget = Gadget()
        gadget.label = "abc"
        assert gadget.label == "abc"
        assert gadget.can_get_property("size")


class TestClassLevelMethods:
    """Test cases for class and static methods next to properties."""

    class Tool(BaseObject):
        @classmethod
        def build(cls):
            return cls()

        @staticmethod
        def kind():
            return "tool"

    def test_methods_are_not_declared_attributes(self):
        """Test that class and static methods are not plain attributes."""
        assert "create" not in Widget._fields
        assert "build" not in self.Tool._fields
        assert "kind" not in self.Tool._fields

    def test_assigning_a_method_name_raises(self):
        """Test that configuring a method name is an unknown property."""
        with pytest.raises(UnknownPropertyError):
            Widget.create(create=1)
        with pytest.raises(UnknownPropertyError):
            self.Tool().kind = "other"

    def test_is_set_false_for_method_names(self):
        """Test that is_set ignores class and static methods."""
        tool = self.Tool()
        assert not tool.is_set("create")
        assert not tool.is_set("build")

    def test_methods_still_callable(self):
        """Test that class and static methods keep working."""
        assert isinstance(self.Tool.build(), self.Tool)
        assert self.Tool().kind() == "tool"


class TestEvaluateExpression:
    """Test cases for evaluate_expression."""

    def test_callback_receives_params_then_object(self):
        """Test that the object is passed after the parameters."""
        widget = Widget()
        result = widget.evaluate_expression(lambda a, b, obj: (a, b, obj), 1, 2)
        assert result == (1, 2, widget)

    def test_string_expression_is_rejected(self):
        """Test that non-callable expressions are rejected."""
        widget = Widget()
        with pytest.raises(InvalidConfigError, match="callable"):
            widget.evaluate_expression("1 + 1")


class TestConfigure:
    """Test cases for configure and BaseObject.create."""

    def test_configure_applies_properties_then_init(self):
        """Test that init observes the configured properties."""
        gadget = configure(Gadget(), {"label": "configured"})
        assert gadget.seen_label == "configured"

    def test_configure_plain_object(self):
        """Test that configure works on objects without accessors."""

        class Plain:
            pass

        plain = configure(Plain(), {"x": 1})
        assert plain.x == 1

    def test_create_forwards_args_and_properties(self):
        """Test the class-side create shortcut."""
        gadget = Gadget.create(1, 2, label="abc")
        assert gadget.args == (1, 2)
        assert gadget.label == "abc"
        assert gadget.seen_label == "abc"

    def test_create_with_read_only_property_raises(self):
        """Test that create rejects read-only properties."""
        with pytest.raises(ReadOnlyPropertyError):
            Widget.create(size=3)
