"""
Tests for the absence messages feature
"""

import pytest
from src.features.absence_messages.code import (
    AbsenceNotice,
    ClassType,
    build_absence_message,
    build_integral_message,
    build_regular_message,
    describe_shift,
)
from src.features.absence_messages.config import JUSTIFICATION_FORM_URL, MessageSettings

@pytest.fixture
def integral_message():
    def _build(shift):
        return build_integral_message("João Silva", "João", "10/05/2024", shift, "Maria")
    return _build

def test_regular_message_content():
    """Test the regular notice names the student and the date."""
    message = build_regular_message("João Silva", "João", "10/05/2024", "Maria", "")

    assert message.startswith("Hello, family of *João Silva* !")
    assert "*João* was not at school on *10/05/2024*." in message
    assert JUSTIFICATION_FORM_URL in message
    assert "✓ Avoids further notices." in message
    assert message.endswith("*[Institution Name] Team*")

    # No shift phrasing for single-shift classes
    assert "period" not in message
    assert "shift" not in message

def test_regular_message_ignores_guardian_and_legacy_date():
    """Test unused parameters never change the output."""
    first = build_regular_message("João Silva", "João", "10/05/2024", "Maria", "01/01/2024")
    second = build_regular_message("João Silva", "João", "10/05/2024", "Ana", "")

    assert first == second
    assert "Maria" not in first
    assert "01/01/2024" not in first

def test_builders_are_deterministic(integral_message):
    """Test same inputs give byte-identical output."""
    args = ("Ana Souza", "Ana", "02/03/2024", "Paulo", "")
    assert build_regular_message(*args) == build_regular_message(*args)
    assert integral_message("tarde") == integral_message("tarde")

def test_empty_inputs_render_as_empty_text():
    """Test missing values degrade instead of failing."""
    message = build_regular_message("", None, "", None)
    assert "Hello, family of ** !" in message
    assert "on **." in message
    assert JUSTIFICATION_FORM_URL in message

    message = build_integral_message(None, None, None, None, None)
    assert JUSTIFICATION_FORM_URL in message
    assert "None" not in message

@pytest.mark.parametrize("descriptor,expected", [
    ("manhã", "in the *morning* period"),
    ("MANHÃ", "in the *morning* period"),
    ("Turno da Manhã", "in the *morning* period"),
    ("tarde", "in the *afternoon* period"),
    ("Tarde", "in the *afternoon* period"),
    ("integral", "in the *morning and afternoon* periods"),
    ("Ambos", "in the *morning and afternoon* periods"),
    ("Noturno", "in the *Noturno* shift"),
    ("", ""),
    ("   ", "in the *   * shift"),
    (0, ""),
    (None, ""),
])
def test_describe_shift(descriptor, expected):
    """Test shift phrase derivation."""
    assert describe_shift(descriptor) == expected

def test_describe_shift_priority():
    """Test the first matching keyword wins for overlapping descriptors."""
    assert describe_shift("manhã e tarde") == "in the *morning* period"
    assert describe_shift("tarde (integral)") == "in the *afternoon* period"

def test_integral_morning(integral_message):
    message = integral_message("manhã")
    assert "on *10/05/2024* in the *morning* period." in message
    assert "afternoon" not in message

def test_integral_afternoon(integral_message):
    message = integral_message("tarde")
    assert "in the *afternoon* period." in message
    assert "morning" not in message

def test_integral_both_periods(integral_message):
    message = integral_message("integral")
    assert "in the *morning and afternoon* periods." in message

def test_integral_unknown_shift_is_echoed(integral_message):
    message = integral_message("Noturno")
    assert "in the *Noturno* shift." in message

def test_integral_without_shift(integral_message):
    """Test an empty descriptor leaves no whitespace artifacts."""
    message = integral_message("")
    assert "on *10/05/2024*.\n" in message
    assert "*10/05/2024* ." not in message
    assert "  " not in message

def test_integral_message_content(integral_message):
    message = integral_message("tarde")
    assert message.startswith("Hello, family of *João Silva* !")
    assert JUSTIFICATION_FORM_URL in message
    assert "*Important for full-day students:*" in message
    assert "- Each period counts as an independent absence" in message
    assert "Maria" not in message

def test_settings_replace_placeholder():
    """Test configured institution name and form link are rendered."""
    settings = MessageSettings(institution_name="EE Monteiro Lobato", form_url="https://example.org/form")

    regular = build_regular_message("João Silva", "João", "10/05/2024", "Maria", settings=settings)
    integral = build_integral_message("João Silva", "João", "10/05/2024", "manhã", "Maria", settings=settings)

    for message in (regular, integral):
        assert message.endswith("*EE Monteiro Lobato Team*")
        assert "https://example.org/form" in message
        assert "[Institution Name]" not in message
        assert JUSTIFICATION_FORM_URL not in message

def test_build_absence_message_dispatch():
    """Test notices are routed to the template for their class type."""
    regular = AbsenceNotice(ClassType.REGULAR, "João Silva", "João", "10/05/2024", "Maria", "manhã")
    integral = AbsenceNotice(ClassType.INTEGRAL, "João Silva", "João", "10/05/2024", "Maria", "manhã")

    assert build_absence_message(regular) == build_regular_message("João Silva", "João", "10/05/2024", "Maria")
    assert build_absence_message(integral) == build_integral_message("João Silva", "João", "10/05/2024", "manhã", "Maria")

def test_class_type_from_label():
    assert ClassType.from_label("Regular") == ClassType.REGULAR
    assert ClassType.from_label(" INTEGRAL ") == ClassType.INTEGRAL
    with pytest.raises(ValueError, match="Unknown class type"):
        ClassType.from_label("noturno")
