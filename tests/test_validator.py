"""Tests para dynaform.core.validator."""

import pytest

from dynaform.config import FieldDescriptor, FieldKind
from dynaform.core.validator import (
    validate_field,
    parse_number,
    format_number,
    format_field_value,
)


def make_field(kind: FieldKind, **kwargs) -> FieldDescriptor:
    kwargs.setdefault("name", "field")
    if kind == FieldKind.RADIO:
        kwargs.setdefault("options", ["a", "b"])
    return FieldDescriptor(kind=kind, **kwargs)


class TestRequired:
    """Tests del chequeo de campo requerido."""

    @pytest.mark.parametrize("kind", list(FieldKind))
    def test_required_empty_fails(self, kind):
        """Test requerido con valor vacío falla para todos los tipos."""
        fld = make_field(kind, required=True)
        assert validate_field(fld, "") is not None
        assert validate_field(fld, None) is not None

    @pytest.mark.parametrize("kind", list(FieldKind))
    def test_optional_empty_passes(self, kind):
        """Test opcional sin restricciones acepta vacío."""
        fld = make_field(kind)
        assert validate_field(fld, "") is None

    def test_message_uses_label(self):
        """Test mensaje usa la etiqueta."""
        fld = make_field(FieldKind.TEXT, name="username", label="Username", required=True)
        assert validate_field(fld, "") == "Username is required"

    def test_message_falls_back_to_name(self):
        """Test sin etiqueta se usa el nombre."""
        fld = make_field(FieldKind.TEXT, name="username", required=True)
        assert validate_field(fld, "") == "username is required"

    def test_unchecked_checkbox_counts_as_value(self):
        """Test False no es un valor vacío."""
        fld = make_field(FieldKind.CHECKBOX, required=True)
        assert validate_field(fld, False) is None

    def test_required_wins_over_length(self):
        """Test el chequeo requerido se evalúa primero."""
        fld = make_field(FieldKind.TEXT, label="Name", required=True, min_length=3)
        assert validate_field(fld, "") == "Name is required"


class TestLength:
    """Tests de longitud para text y email."""

    @pytest.mark.parametrize("kind", [FieldKind.TEXT, FieldKind.EMAIL])
    def test_min_length_boundary(self, kind):
        """Test longitud mínima: en el límite pasa, uno menos falla."""
        fld = make_field(kind, label="Code", min_length=3)
        value = "a@b.c" if kind == FieldKind.EMAIL else "abc"
        assert validate_field(make_field(kind, label="Code", min_length=len(value)), value) is None
        assert validate_field(
            make_field(kind, label="Code", min_length=len(value) + 1), value
        ) == f"Code must be at least {len(value) + 1} characters"
        assert validate_field(fld, "ab") == "Code must be at least 3 characters"

    @pytest.mark.parametrize("kind", [FieldKind.TEXT, FieldKind.EMAIL])
    def test_max_length_boundary(self, kind):
        """Test longitud máxima: en el límite pasa, uno más falla."""
        value = "a@b.c" if kind == FieldKind.EMAIL else "abcde"
        fld = make_field(kind, label="Code", max_length=len(value))
        assert validate_field(fld, value) is None
        assert validate_field(fld, value + "x") == f"Code must be less than {len(value)} characters"

    @pytest.mark.parametrize("kind", [FieldKind.TEXT, FieldKind.EMAIL])
    def test_zero_length_bounds_are_unset(self, kind):
        """Test minLength/maxLength en 0 no restringen."""
        fld = make_field(kind, label="Code", min_length=0, max_length=0)
        value = "a@b.c" if kind == FieldKind.EMAIL else "abcde"
        assert validate_field(fld, value) is None
        assert validate_field(fld, "") is None

    def test_optional_with_min_length_rejects_empty(self):
        """Test campo opcional con longitud mínima también valida el vacío."""
        fld = make_field(FieldKind.TEXT, label="Nick", min_length=2)
        assert validate_field(fld, "") == "Nick must be at least 2 characters"

    def test_length_not_checked_for_number(self):
        """Test los límites de longitud no aplican a number."""
        fld = FieldDescriptor(name="n", kind="number", minLength=10)
        assert validate_field(fld, "5") is None


class TestEmail:
    """Tests de formato de email."""

    @pytest.fixture
    def email_field(self):
        return make_field(FieldKind.EMAIL, name="email")

    @pytest.mark.parametrize("value", ["a@b.c", "alice@example.com", "x.y+z@sub.domain.org"])
    def test_valid(self, email_field, value):
        """Test direcciones válidas."""
        assert validate_field(email_field, value) is None

    @pytest.mark.parametrize("value", ["not-an-email", "a@b", "@b.c", "a b@c.d", "a@@b.c", "a@b.c\n"])
    def test_invalid(self, email_field, value):
        """Test direcciones inválidas."""
        assert validate_field(email_field, value) == "Please enter a valid email address"

    def test_empty_optional_skips_format(self, email_field):
        """Test vacío opcional no valida formato."""
        assert validate_field(email_field, "") is None

    def test_length_checked_before_format(self):
        """Test la longitud se evalúa antes que el formato."""
        fld = make_field(FieldKind.EMAIL, label="Email", max_length=4)
        assert validate_field(fld, "not-an-email") == "Email must be less than 4 characters"


class TestNumber:
    """Tests de campos numéricos."""

    @pytest.fixture
    def age_field(self):
        return make_field(FieldKind.NUMBER, name="age", min=18, max=60)

    def test_below_min(self, age_field):
        """Test valor menor al mínimo."""
        assert validate_field(age_field, "17") == "Value must be at least 18"

    def test_at_bounds(self, age_field):
        """Test valores en los límites pasan."""
        assert validate_field(age_field, "18") is None
        assert validate_field(age_field, "60") is None

    def test_above_max(self, age_field):
        """Test valor mayor al máximo."""
        assert validate_field(age_field, "61") == "Value must be less than or equal to 60"

    @pytest.mark.parametrize("value", ["abc", "12abc", "1.2.3", "nan", "inf", "   "])
    def test_not_a_number(self, age_field, value):
        """Test texto no numérico falla sin importar el rango."""
        assert validate_field(age_field, value) == "Please enter a valid number"

    def test_empty_skips_numeric_checks(self, age_field):
        """Test vacío opcional no se valida como número."""
        assert validate_field(age_field, "") is None

    def test_decimal_and_exponent(self):
        """Test formatos decimales aceptados."""
        fld = make_field(FieldKind.NUMBER, max=1000)
        for value in ["1.5", "-2", "+3", ".5", "5.", "1e3", " 42 "]:
            assert validate_field(fld, value) is None

    def test_numeric_snapshot_values(self, age_field):
        """Test int/float se aceptan tal cual."""
        assert validate_field(age_field, 30) is None
        assert validate_field(age_field, 17.5) == "Value must be at least 18"

    def test_float_bounds_formatting(self):
        """Test límites decimales se muestran sin ceros extra."""
        fld = make_field(FieldKind.NUMBER, min=0.5, max=2.0)
        assert validate_field(fld, "0.1") == "Value must be at least 0.5"
        assert validate_field(fld, "3") == "Value must be less than or equal to 2"

    def test_zero_min_is_enforced(self):
        """Test mínimo 0 se respeta."""
        fld = make_field(FieldKind.NUMBER, min=0)
        assert validate_field(fld, "-1") == "Value must be at least 0"


class TestRadioCheckbox:
    """Tests de radio y checkbox (solo chequeo requerido)."""

    def test_radio_any_value(self):
        """Test radio no valida contra las opciones."""
        fld = make_field(FieldKind.RADIO, options=["Male", "Female"])
        assert validate_field(fld, "Male") is None

    def test_checkbox_values(self):
        """Test checkbox acepta True y False."""
        fld = make_field(FieldKind.CHECKBOX)
        assert validate_field(fld, True) is None
        assert validate_field(fld, False) is None


class TestHelpers:
    """Tests de funciones auxiliares."""

    def test_parse_number(self):
        assert parse_number("12") == 12.0
        assert parse_number(" -3.5 ") == -3.5
        assert parse_number("abc") is None
        assert parse_number(True) is None
        assert parse_number(None) is None

    def test_format_number(self):
        assert format_number(18) == "18"
        assert format_number(18.0) == "18"
        assert format_number(2.5) == "2.5"

    def test_format_field_value(self):
        text = make_field(FieldKind.TEXT)
        checkbox = make_field(FieldKind.CHECKBOX)
        assert format_field_value(text, "") == "-"
        assert format_field_value(text, "hola") == "hola"
        assert format_field_value(checkbox, True) == "yes"
        assert format_field_value(checkbox, False) == "no"
