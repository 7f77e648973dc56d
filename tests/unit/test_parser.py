"""Tests for the field parser and literal scanner."""

import pytest
from brace_fmt import (
    Align,
    ArgumentRef,
    Case,
    ConvType,
    FormatSpec,
    IntLiteral,
    MalformedField,
    ReplacementField,
    Sign,
    parse_field,
    scan_literal,
)


class TestParseFieldPosition:
    """Test the position part of a replacement field."""

    def test_empty_field(self):
        """{} has no position and the default spec."""
        field, consumed = parse_field("{}")

        assert field == ReplacementField(position=None, spec=FormatSpec.DEFAULT)
        assert consumed == 2

    def test_explicit_position(self):
        """Digits after { are the explicit position."""
        field, consumed = parse_field("{12}")

        assert field.position == 12
        assert consumed == 4

    def test_start_offset(self):
        """Parsing starts at the given offset; consumed is relative to it."""
        field, consumed = parse_field("x{0:>5}tail", 1)

        assert field.position == 0
        assert field.spec.width == IntLiteral(5)
        assert consumed == 6

    def test_empty_spec_after_colon(self):
        """{:} parses like {}."""
        field, consumed = parse_field("{:}")

        assert field.spec == FormatSpec()
        assert consumed == 3


class TestParseFieldSpec:
    """Test the option block after the colon."""

    def test_fill_and_align(self):
        """A fill is taken only when followed by an alignment."""
        spec = parse_field("{:*^10}")[0].spec

        assert spec.fill == "*"
        assert spec.align is Align.CENTER
        assert spec.width == IntLiteral(10)

    def test_align_without_fill(self):
        """A lone alignment keeps the space fill."""
        spec = parse_field("{:^}")[0].spec

        assert spec.fill == " "
        assert spec.align is Align.CENTER

    def test_alignment_char_as_fill(self):
        """An alignment symbol can itself be the fill."""
        spec = parse_field("{:<<4}")[0].spec

        assert spec.fill == "<"
        assert spec.align is Align.LEFT

    def test_letter_without_align_is_type_not_fill(self):
        """x not followed by an alignment is the hex type."""
        spec = parse_field("{:x}")[0].spec

        assert spec.fill == " "
        assert spec.align is None
        assert spec.type is ConvType.HEX

    def test_zero_fill_with_explicit_align(self):
        """0< is fill + align, not the zero-pad flag."""
        spec = parse_field("{:0<4}")[0].spec

        assert spec.fill == "0"
        assert spec.align is Align.LEFT
        assert spec.zero_pad is False

    def test_dash_fill(self):
        """-> is fill '-' with right alignment, not a sign."""
        spec = parse_field("{:->3}")[0].spec

        assert spec.fill == "-"
        assert spec.align is Align.RIGHT
        assert spec.sign is Sign.NONE

    @pytest.mark.parametrize("text, sign", [
        ("{:+}", Sign.PLUS),
        ("{:-}", Sign.MINUS),
        ("{: }", Sign.SPACE),
        ("{:}", Sign.NONE),
    ])
    def test_sign(self, text, sign):
        """Sign characters map to the Sign enum."""
        assert parse_field(text)[0].spec.sign is sign

    def test_alternate_flag(self):
        """# sets the alternate form."""
        spec = parse_field("{:+#x}")[0].spec

        assert spec.sign is Sign.PLUS
        assert spec.alternate is True
        assert spec.type is ConvType.HEX

    def test_zero_pad_normalisation(self):
        """0 before the width becomes fill '0' with after-sign alignment."""
        spec = parse_field("{:05d}")[0].spec

        assert spec.zero_pad is True
        assert spec.fill == "0"
        assert spec.align is Align.AFTER_SIGN
        assert spec.width == IntLiteral(5)
        assert spec.type is ConvType.DECIMAL

    def test_zero_pad_ignored_with_explicit_align(self):
        """An explicit alignment wins over the zero-pad shorthand."""
        spec = parse_field("{:<05}")[0].spec

        assert spec.zero_pad is True
        assert spec.fill == " "
        assert spec.align is Align.LEFT

    def test_literal_precision(self):
        """.N is a literal precision."""
        spec = parse_field("{:.3f}")[0].spec

        assert spec.precision == IntLiteral(3)
        assert spec.type is ConvType.FIXED

    def test_argument_references(self):
        """Width and precision can reference arguments."""
        spec = parse_field("{:{1}.{}}")[0].spec

        assert spec.width == ArgumentRef(1)
        assert spec.precision == ArgumentRef(None)

    def test_missing_precision_is_absent(self):
        """Without a dot the precision is absent."""
        spec = parse_field("{:8}")[0].spec

        assert spec.precision is None
        assert spec.width == IntLiteral(8)

    @pytest.mark.parametrize("letter, conv, case", [
        ("b", ConvType.BINARY, Case.LOWER),
        ("c", ConvType.CHAR, Case.LOWER),
        ("d", ConvType.DECIMAL, Case.LOWER),
        ("e", ConvType.SCIENTIFIC, Case.LOWER),
        ("E", ConvType.SCIENTIFIC, Case.UPPER),
        ("f", ConvType.FIXED, Case.LOWER),
        ("F", ConvType.FIXED, Case.UPPER),
        ("g", ConvType.GENERAL, Case.LOWER),
        ("G", ConvType.GENERAL, Case.UPPER),
        ("o", ConvType.OCTAL, Case.LOWER),
        ("s", ConvType.STRING, Case.LOWER),
        ("x", ConvType.HEX, Case.LOWER),
        ("X", ConvType.HEX, Case.UPPER),
        ("%", ConvType.PERCENT, Case.LOWER),
        ("?", ConvType.DEBUG, Case.LOWER),
    ])
    def test_type_letters(self, letter, conv, case):
        """Every type letter maps to a conversion and a case."""
        spec = parse_field("{:" + letter + "}")[0].spec

        assert spec.type is conv
        assert spec.case is case
        assert spec.type_letter == letter

    def test_full_spec(self):
        """All options together."""
        field, consumed = parse_field("{2:_>+#012.{0}E}")
        spec = field.spec

        assert field.position == 2
        assert spec.fill == "_"
        assert spec.align is Align.RIGHT
        assert spec.sign is Sign.PLUS
        assert spec.alternate is True
        assert spec.zero_pad is True
        assert spec.width == IntLiteral(12)
        assert spec.precision == ArgumentRef(0)
        assert spec.type is ConvType.SCIENTIFIC
        assert spec.case is Case.UPPER
        assert consumed == len("{2:_>+#012.{0}E}")

    def test_spec_is_immutable(self):
        """FormatSpec is frozen."""
        spec = parse_field("{:5}")[0].spec

        with pytest.raises(AttributeError):
            spec.width = IntLiteral(6)


class TestParseFieldErrors:
    """Test MalformedField reporting."""

    def test_unterminated_field(self):
        """A lone { reports the missing closing brace at end of text."""
        with pytest.raises(MalformedField) as exc:
            parse_field("{")

        assert exc.value.expected == "'}'"
        assert exc.value.found is None
        assert exc.value.offset == 1

    def test_unknown_type_letter(self):
        """An unknown letter is rejected where } was expected."""
        with pytest.raises(MalformedField) as exc:
            parse_field("{:q}")

        assert exc.value.expected == "'}'"
        assert exc.value.found == "q"
        assert exc.value.offset == 2

    def test_non_digit_position(self):
        """Letters are not positions."""
        with pytest.raises(MalformedField) as exc:
            parse_field("{a}")

        assert exc.value.found == "a"

    def test_dot_without_precision(self):
        """A dot must be followed by digits or a reference."""
        with pytest.raises(MalformedField) as exc:
            parse_field("{:.}")

        assert exc.value.found == "}"
        assert exc.value.offset == 3

    def test_bad_reference(self):
        """A reference must be digits closed by }."""
        with pytest.raises(MalformedField) as exc:
            parse_field("{:{x}}")

        assert exc.value.found == "x"
        assert exc.value.offset == 3

    def test_not_at_opening_brace(self):
        """Parsing must start at {."""
        with pytest.raises(MalformedField) as exc:
            parse_field("abc")

        assert exc.value.expected == "'{'"
        assert exc.value.found == "a"
        assert exc.value.offset == 0

    def test_offset_is_absolute(self):
        """Offsets are reported relative to the whole text."""
        with pytest.raises(MalformedField) as exc:
            parse_field("abc {0", 4)

        assert exc.value.offset == 6

    def test_message_names_expected_and_found(self):
        """The message is actionable."""
        with pytest.raises(MalformedField, match=r"expected '\}' at offset 2, found 'q'"):
            parse_field("{:q}")


class TestScanLiteral:
    """Test literal scanning between fields."""

    def test_plain_text(self):
        """Text without braces is returned whole."""
        assert scan_literal("abc") == ("abc", 3)

    def test_stops_at_field(self):
        """Scanning stops before a field opener."""
        assert scan_literal("ab{0}") == ("ab", 2)

    def test_at_field(self):
        """Nothing is consumed at a field opener."""
        assert scan_literal("{0}") == ("", 0)

    def test_doubled_braces(self):
        """{{ and }} collapse to single braces."""
        assert scan_literal("{{x}}") == ("{x}", 5)

    def test_lone_closing_brace(self):
        """A single } is copied as is."""
        assert scan_literal("a}b") == ("a}b", 3)

    def test_start_offset(self):
        """Scanning honours the start offset."""
        assert scan_literal("{0} tail", 3) == (" tail", 5)

    def test_end_of_text(self):
        """At end of text nothing is consumed."""
        assert scan_literal("abc", 3) == ("", 0)
