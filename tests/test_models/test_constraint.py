from __future__ import annotations

import json

import pytest

from depgrammar.models.constraint import (
    OPERATORS,
    EmptyConstraint,
    MultiConstraint,
    VersionConstraint,
)


@pytest.mark.unit
class TestEmptyConstraint:
    """Tests for EmptyConstraint."""

    def test_renders_as_empty_brackets(self) -> None:
        """Test the any-version node renders as []."""
        assert str(EmptyConstraint()) == "[]"

    def test_to_json(self) -> None:
        """Test the JSON form only names the node type."""
        assert EmptyConstraint().to_json() == {"type": "any"}

    def test_equality_ignores_pretty_string(self) -> None:
        """Test two any-version nodes are equal regardless of their text."""
        first = EmptyConstraint()
        first.set_pretty_string("*")

        assert first == EmptyConstraint()


@pytest.mark.unit
class TestVersionConstraint:
    """Tests for VersionConstraint."""

    @pytest.mark.parametrize("operator", sorted(OPERATORS))
    def test_accepts_known_operators(self, operator: str) -> None:
        """Test every supported operator is kept."""
        assert VersionConstraint(operator, "1.0.0.0").operator == operator

    def test_double_equals_is_stored_as_equals(self) -> None:
        """Test == is normalized to =."""
        constraint = VersionConstraint("==", "1.0.0.0")

        assert constraint.operator == "="
        assert constraint == VersionConstraint("=", "1.0.0.0")

    @pytest.mark.parametrize("operator", ["~", "^", "===", "=>", ""])
    def test_rejects_unknown_operators(self, operator: str) -> None:
        """Test unsupported operators raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported constraint operator"):
            VersionConstraint(operator, "1.0.0.0")

    def test_str(self) -> None:
        """Test the rendered form is operator, space, version."""
        assert str(VersionConstraint(">=", "1.2.0.0-dev")) == ">= 1.2.0.0-dev"

    def test_to_json(self) -> None:
        """Test the JSON form carries operator and version."""
        assert VersionConstraint("<", "2.0.0.0-dev").to_json() == {
            "type": "simple",
            "operator": "<",
            "version": "2.0.0.0-dev",
        }

    def test_repr_omits_pretty_string(self) -> None:
        """Test repr shows the operator and version only."""
        constraint = VersionConstraint("=", "1.0.0.0")
        constraint.set_pretty_string("1.0")

        assert "pretty_string" not in repr(constraint)


@pytest.mark.unit
class TestMultiConstraint:
    """Tests for MultiConstraint."""

    def _pair(self) -> tuple:
        return (
            VersionConstraint(">=", "1.0.0.0"),
            VersionConstraint("<", "2.0.0.0-dev"),
        )

    def test_conjunctive_by_default(self) -> None:
        """Test groups are AND groups unless told otherwise."""
        group = MultiConstraint(self._pair())

        assert group.is_conjunctive
        assert not group.is_disjunctive

    def test_disjunctive(self) -> None:
        """Test OR groups report themselves as disjunctive."""
        group = MultiConstraint(self._pair(), conjunctive=False)

        assert group.is_disjunctive
        assert not group.is_conjunctive

    def test_constraints_are_stored_as_tuple(self) -> None:
        """Test list input is frozen into a tuple."""
        group = MultiConstraint(list(self._pair()))  # type: ignore[arg-type]

        assert isinstance(group.constraints, tuple)

    @pytest.mark.parametrize("count", [0, 1])
    def test_requires_two_children(self, count: int) -> None:
        """Test groups with fewer than two children are rejected."""
        with pytest.raises(ValueError, match="at least two constraints"):
            MultiConstraint(self._pair()[:count])

    def test_str_and(self) -> None:
        """Test AND groups are space separated."""
        assert str(MultiConstraint(self._pair())) == "[>= 1.0.0.0 < 2.0.0.0-dev]"

    def test_str_or(self) -> None:
        """Test OR groups are pipe separated."""
        group = MultiConstraint(self._pair(), conjunctive=False)

        assert str(group) == "[>= 1.0.0.0 | < 2.0.0.0-dev]"

    def test_str_nested(self) -> None:
        """Test nested groups render recursively."""
        group = MultiConstraint(
            (MultiConstraint(self._pair()), EmptyConstraint()), conjunctive=False
        )

        assert str(group) == "[[>= 1.0.0.0 < 2.0.0.0-dev] | []]"

    def test_order_matters_for_equality(self) -> None:
        """Test children keep their order."""
        first, second = self._pair()

        assert MultiConstraint((first, second)) != MultiConstraint((second, first))

    def test_conjunction_matters_for_equality(self) -> None:
        """Test AND and OR groups of the same children differ."""
        assert MultiConstraint(self._pair()) != MultiConstraint(
            self._pair(), conjunctive=False
        )

    def test_to_json_is_serializable(self) -> None:
        """Test the JSON form nests children and survives json.dumps."""
        group = MultiConstraint(
            (MultiConstraint(self._pair()), EmptyConstraint()), conjunctive=False
        )

        data = group.to_json()

        assert data == {
            "type": "group",
            "conjunctive": False,
            "constraints": [
                {
                    "type": "group",
                    "conjunctive": True,
                    "constraints": [
                        {"type": "simple", "operator": ">=", "version": "1.0.0.0"},
                        {"type": "simple", "operator": "<", "version": "2.0.0.0-dev"},
                    ],
                },
                {"type": "any"},
            ],
        }
        assert json.loads(json.dumps(data)) == data


@pytest.mark.unit
class TestPrettyString:
    """Tests for pretty string handling shared by every node."""

    @pytest.mark.parametrize(
        "node",
        [
            EmptyConstraint(),
            VersionConstraint("=", "1.0.0.0"),
            MultiConstraint(
                (VersionConstraint(">", "1.0.0.0"), VersionConstraint("<", "2.0.0.0"))
            ),
        ],
        ids=["any", "simple", "group"],
    )
    def test_falls_back_to_rendered_form(self, node) -> None:
        """Test nodes without a pretty string use their rendered form."""
        assert node.pretty_string is None
        assert node.get_pretty_string() == str(node)

    def test_set_pretty_string(self) -> None:
        """Test the pretty string replaces the rendered form."""
        constraint = VersionConstraint("=", "1.0.0.0")
        constraint.set_pretty_string("1.0")

        assert constraint.get_pretty_string() == "1.0"
        assert str(constraint) == "= 1.0.0.0"

    def test_empty_pretty_string_is_kept(self) -> None:
        """Test an empty pretty string is not treated as unset."""
        constraint = EmptyConstraint()
        constraint.set_pretty_string("")

        assert constraint.get_pretty_string() == ""
