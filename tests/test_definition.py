import pytest
from core.definition import ControllerDefinition
from core.state import CircularConstraint, FloatRange


def _n64():
    d = ControllerDefinition("Nintendo 64 Controller")
    d.add_bool_button("P1 A")
    d.add_bool_button("P1 Start")
    d.add_float_control("P1 X Axis", [-128, 0, 127])
    d.add_float_control("P1 Y Axis", FloatRange(127, 0, -128))
    d.add_circular_constraint("Natural Circle", "P1 X Axis", "P1 Y Axis", 127)
    d.set_category_label("P1 A", "Face Buttons")
    return d


def test_population():
    d = _n64()
    assert d.bool_buttons == ("P1 A", "P1 Start")
    assert d.float_controls == ("P1 X Axis", "P1 Y Axis")
    assert d.float_ranges == (FloatRange(-128, 0, 127), FloatRange(127, 0, -128))
    assert d.axis_constraints == (CircularConstraint("Natural Circle", "P1 X Axis", "P1 Y Axis", 127),)
    assert dict(d.category_labels) == {"P1 A": "Face Buttons"}


def test_bad_range_literal_fails_fast():
    d = ControllerDefinition()
    with pytest.raises(ValueError):
        d.add_float_control("Dial", [0, 1])
    assert d.float_controls == ()
    assert d.float_ranges == ()


def test_has_any_controls():
    d = ControllerDefinition()
    assert not d.has_any_controls()
    d.add_float_control("Paddle", [0, 128, 255])
    assert d.has_any_controls()
    b = ControllerDefinition()
    b.add_bool_button("Reset")
    assert b.has_any_controls()


def test_copy_appends_without_aliasing():
    src = _n64()
    dup = ControllerDefinition.copy_of(src)
    assert dup.name == src.name
    assert dup.bool_buttons == src.bool_buttons
    assert dup.float_controls == src.float_controls
    assert dup.float_ranges == src.float_ranges
    assert dup.axis_constraints == src.axis_constraints
    assert dict(dup.category_labels) == dict(src.category_labels)

    dup.add_bool_button("P1 Z")
    dup.set_category_label("P1 Z", "Triggers")
    assert "P1 Z" not in src.bool_buttons
    assert "P1 Z" not in src.category_labels
    assert src.copy().bool_buttons == ("P1 A", "P1 Start")


def test_exposed_collections_are_read_only():
    d = _n64()
    with pytest.raises(TypeError):
        d.category_labels["P1 B"] = "Face Buttons"
    assert isinstance(d.bool_buttons, tuple)


def test_float_range_lookup():
    d = _n64()
    assert d.float_range("P1 Y Axis") == FloatRange(127, 0, -128)
    assert d.float_range("P1 A") is None


def test_category_label_lookup():
    d = _n64()
    assert d.category_label("P1 A") == "Face Buttons"
    assert d.category_label("P1 Start") is None
    assert d.category_label("P1 Start", "Misc") == "Misc"


def test_apply_axis_constraints_through_definition():
    d = _n64()
    values = {"P1 X Axis": 127.0, "P1 Y Axis": 127.0, "P1 A": 1.0}
    result = d.apply_axis_constraints("Natural Circle", values)
    assert result is values
    assert values["P1 X Axis"] == pytest.approx(127 / 2 ** 0.5)
    assert values["P1 Y Axis"] == pytest.approx(127 / 2 ** 0.5)
    assert values["P1 A"] == 1.0


def test_player_number_on_definition():
    assert ControllerDefinition.player_number("P4 B") == 4
    assert _n64().player_number("Reset") == 0
