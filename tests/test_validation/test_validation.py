"""Tests for diagram validation rules and the validator."""

import pytest

from venn_dsl.model.diagnostic import Diagnostic, Severity
from venn_dsl.model.records import (
    Intersection,
    SetDecl,
    StyleAttribute,
    StyleDecl,
    Title,
)
from venn_dsl.parser import parse_venn
from venn_dsl.parser import VennSyntaxError
from venn_dsl.validation import (
    ValidationError,
    count_by_severity,
    validate,
    validate_or_raise,
    validate_source,
)
from venn_dsl.validation.rules import (
    check_duplicate_sets,
    check_intersection_repeats,
    check_intersection_sets_declared,
    check_negative_size,
    check_style_numbers,
    check_style_target,
)


def _style(set_id: str, **attrs) -> StyleDecl:
    return StyleDecl(
        id=set_id,
        attributes=tuple(StyleAttribute(k.replace("_", "-"), v) for k, v in attrs.items()),
    )


def _minimal() -> list:
    return [
        Title(text="T"),
        SetDecl(id="A", size=2),
        SetDecl(id="B"),
        Intersection(sets=("A", "B"), size=1),
        _style("A", fill="#fff", opacity=0.5),
    ]


class TestCheckNegativeSize:
    def test_negative_set(self):
        diags = check_negative_size([SetDecl(id="A", size=-1)])
        assert len(diags) == 1
        assert diags[0].severity is Severity.ERROR
        assert diags[0].set_id == "A"

    def test_negative_intersection(self):
        diags = check_negative_size([Intersection(sets=("A", "B"), size=-0.5)])
        assert len(diags) == 1
        assert diags[0].line is None
        assert "A & B" in diags[0].message

    def test_zero_is_fine(self):
        assert check_negative_size([SetDecl(id="A", size=0)]) == []


class TestCheckDuplicateSets:
    def test_duplicate(self):
        diags = check_duplicate_sets([SetDecl(id="A"), SetDecl(id="A", size=3)])
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING
        assert "2 times" in diags[0].message

    def test_unique(self):
        assert check_duplicate_sets(_minimal()) == []


class TestCheckIntersectionSetsDeclared:
    def test_undeclared_reported_once(self):
        records = [
            SetDecl(id="A"),
            Intersection(sets=("A", "B")),
            Intersection(sets=("B", "A")),
        ]
        diags = check_intersection_sets_declared(records)
        assert [d.set_id for d in diags] == ["B"]

    def test_declaration_after_use_counts(self):
        records = [Intersection(sets=("A", "B")), SetDecl(id="A"), SetDecl(id="B")]
        assert check_intersection_sets_declared(records) == []


class TestCheckIntersectionRepeats:
    def test_repeat(self):
        diags = check_intersection_repeats([Intersection(sets=("A", "B", "A"))])
        assert len(diags) == 1
        assert diags[0].set_id == "A"


class TestCheckStyleNumbers:
    def test_out_of_range(self):
        diags = check_style_numbers([_style("A", opacity=1.5)])
        assert len(diags) == 1
        assert diags[0].severity is Severity.WARNING

    def test_string_opacity(self):
        assert len(check_style_numbers([_style("A", fill_opacity="half")])) == 1

    def test_other_properties_ignored(self):
        assert check_style_numbers([_style("A", stroke_width=12)]) == []


class TestCheckStyleTarget:
    def test_unknown_target(self):
        diags = check_style_target([SetDecl(id="A"), _style("Z", fill="red")])
        assert len(diags) == 1
        assert diags[0].severity is Severity.INFO


class TestValidator:
    def test_clean(self):
        assert validate(_minimal()) == []

    def test_validate_parsed_source(self):
        records = parse_venn(
            "vennDiagram\nset A size:-4\nintersect A B\nstyle Z fill:#123456"
        )
        rules = {d.rule for d in validate(records)}
        assert rules == {
            "check_negative_size",
            "check_intersection_sets_declared",
            "check_style_target",
        }

    def test_extra_rules(self):
        def no_titles(records):
            return [
                Diagnostic(rule="no_titles", severity=Severity.WARNING, message="title")
                for r in records
                if isinstance(r, Title)
            ]

        diags = validate(_minimal(), extra_rules=[no_titles])
        assert [d.rule for d in diags] == ["no_titles"]

    def test_validate_or_raise(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_or_raise([SetDecl(id="A", size=-2)])
        assert len(exc_info.value.diagnostics) == 1
        assert str(exc_info.value).startswith("1 error\n")
        assert "negative size" in str(exc_info.value)

    def test_validate_or_raise_returns_warnings(self):
        diags = validate_or_raise([SetDecl(id="A"), SetDecl(id="A")])
        assert [d.rule for d in diags] == ["check_duplicate_sets"]


class TestSourceLines:
    SOURCE = (
        "vennDiagram\n"
        "    set A size:-4\n"
        "\n"
        "    %% B is never declared\n"
        "    intersect A B\n"
        "    set A\n"
        "    style Z fill:#123456\n"
    )

    def test_findings_carry_lines(self):
        found = {d.rule: d.line for d in validate_source(self.SOURCE)}
        assert found == {
            "check_negative_size": 2,
            "check_intersection_sets_declared": 5,
            "check_duplicate_sets": 6,
            "check_style_target": 7,
        }

    def test_sorted_by_line(self):
        lines = [d.line for d in validate_source(self.SOURCE)]
        assert lines == sorted(lines)

    def test_lineless_findings_last(self):
        def lineless(records):
            return [Diagnostic(rule="lineless", severity=Severity.INFO, message="m")]

        diags = validate_source(self.SOURCE, extra_rules=[lineless])
        assert diags[-1].rule == "lineless"

    def test_parse_error_propagates(self):
        with pytest.raises(VennSyntaxError):
            validate_source("vennDiagram\nintersect A")


class TestCountBySeverity:
    def test_empty(self):
        assert count_by_severity([]) == "no problems"

    def test_plurals_and_order(self):
        diags = validate_source(TestSourceLines.SOURCE)
        assert count_by_severity(diags) == "1 error, 2 warnings, 1 info"


class TestDiagnosticStr:
    def test_with_line(self):
        d = Diagnostic(rule="r", severity=Severity.WARNING, message="m", set_id="A", line=4)
        assert str(d) == "line 4: warning: m"

    def test_without_line(self):
        d = Diagnostic(rule="r", severity=Severity.ERROR, message="m")
        assert str(d) == "error: m"

    def test_fix_appended(self):
        d = Diagnostic(rule="r", severity=Severity.INFO, message="m", line=1, fix="do x")
        assert str(d) == "line 1: info: m (do x)"

    def test_is_error(self):
        assert Diagnostic(rule="r", severity=Severity.ERROR, message="m").is_error
        assert not Diagnostic(rule="r", severity=Severity.WARNING, message="m").is_error
