"""Unit tests for OrderValidator."""

from attribute_order_linter.domain.config import ConfigurationLoader
from attribute_order_linter.domain.entities import AttributeNode
from attribute_order_linter.domain.rules.validator import OrderValidator
from tests.template_test_utils import build_tag


def _inversions(snippet: str, **config: object) -> list[tuple[str, str]]:
    validator = OrderValidator(ConfigurationLoader(config).options)
    tag = build_tag(snippet)
    return [(i.node.key_text, i.previous.key_text) for i in validator.validate(tag.attributes)]


def _node(snippet: str) -> AttributeNode:
    return build_tag(f"<div {snippet}>").attributes[0]


class TestDefaultOrder:
    """Checks against the default category order."""

    def test_fully_ordered_tag_has_no_inversions(self) -> None:
        snippet = (
            '<div is="x" v-for="i in l" v-if="c" v-once id="a" ref="r" '
            'v-model="m" v-custom="q" foo="f" @click="h" v-text="t">'
        )
        assert _inversions(snippet) == []

    def test_single_inversion(self) -> None:
        assert _inversions('<div foo="1" v-if="a">') == [("v-if", "foo")]

    def test_invalid_node_does_not_replace_previous(self) -> None:
        """Every later node is compared to the last correctly placed one."""
        assert _inversions('<div foo="1" v-if="a" v-for="b">') == [
            ("v-if", "foo"),
            ("v-for", "foo"),
        ]

    def test_grouped_categories_share_a_rank(self) -> None:
        assert _inversions('<div slot="s" key="k" ref="r">') == []

    def test_fewer_than_two_ranked_attributes(self) -> None:
        assert _inversions("<div>") == []
        assert _inversions('<div v-if="a">') == []
        assert _inversions('<div @click="a" v-if="b">', order=["CONDITIONALS"]) == []


class TestCustomOrder:
    """Custom orders and absent categories."""

    def test_conditionals_before_global(self) -> None:
        assert _inversions(
            '<div id="x" v-if="y">', order=["CONDITIONALS", "GLOBAL", "OTHER_ATTR"]
        ) == [("v-if", "id")]

    def test_absent_categories_never_take_part(self) -> None:
        assert _inversions(
            '<div foo="1" @click="x" id="a" v-if="b">', order=["CONDITIONALS", "GLOBAL"]
        ) == [("v-if", "id")]


class TestAlphabetical:
    """Alphabetical ordering within one rank."""

    def test_descending_names_are_reported(self) -> None:
        assert _inversions('<div b="1" a="2">', alphabetical=True) == [("a", "b")]

    def test_not_checked_when_disabled(self) -> None:
        assert _inversions('<div b="1" a="2">') == []

    def test_applies_within_grouped_rank(self) -> None:
        assert _inversions('<div slot="s" key="k">', alphabetical=True) == [("key", "slot")]

    def test_bind_uses_its_argument_as_name(self) -> None:
        assert _inversions('<div :a="x" b="1">', alphabetical=True) == []
        assert _inversions('<div :b="x" a="1">', alphabetical=True) == [("a", ":b")]

    def test_bind_may_follow_plain_form_of_same_name(self) -> None:
        assert _inversions('<div foo="2" :foo="1">', alphabetical=True) == []
        assert _inversions('<div :foo="1" foo="2">', alphabetical=True) == [("foo", ":foo")]

    def test_dynamic_keys_are_not_compared(self) -> None:
        assert _inversions('<div :[name]="x" a="1">', alphabetical=True) == []

    def test_directives_compare_full_name(self) -> None:
        assert _inversions(
            '<div v-on:keyup="a" v-on:click="b">', alphabetical=True
        ) == [("v-on:click", "v-on:keyup")]

    def test_is_alphabetical_helper(self) -> None:
        assert OrderValidator.is_alphabetical(_node('a="1"'), _node('b="1"'))
        assert not OrderValidator.is_alphabetical(_node('b="1"'), _node('a="1"'))
        assert OrderValidator.is_alphabetical(_node('a="1"'), _node(':a="1"'))


class TestOtherAttrsBind:
    """Plain attributes before bound ones inside the other-attribute rank."""

    def test_plain_after_bind_is_reported(self) -> None:
        assert _inversions('<div :a="1" b="2">', otherAttrsBind=True) == [("b", ":a")]

    def test_plain_before_bind_is_valid(self) -> None:
        assert _inversions('<div b="2" :a="1">', otherAttrsBind=True) == []

    def test_combined_with_alphabetical(self) -> None:
        assert _inversions('<div b="2" :a="1">', otherAttrsBind=True, alphabetical=True) == []
        assert _inversions('<div b="2" a="1">', otherAttrsBind=True, alphabetical=True) == [
            ("a", "b")
        ]

    def test_other_ranks_are_unaffected(self) -> None:
        assert _inversions('<div :id="a" ref="r">', otherAttrsBind=True) == []


class TestOnTopExceptions:
    """otherAttrsExceptions.onTop pins attributes to the front of OTHER_ATTR."""

    def test_exception_after_regular_attribute(self) -> None:
        assert _inversions(
            '<div bar="1" foo="2">', otherAttrsExceptions={"onTop": ["foo"]}
        ) == [("foo", "bar")]

    def test_exception_first_is_valid(self) -> None:
        assert _inversions(
            '<div foo="2" bar="1">', otherAttrsExceptions={"onTop": ["foo"]}
        ) == []

    def test_exceptions_follow_declared_order(self) -> None:
        assert _inversions(
            '<div :bar="1" foo="2" baz="3">', otherAttrsExceptions={"onTop": ["foo", ":bar"]}
        ) == [("foo", ":bar")]

    def test_exceptions_override_alphabetical(self) -> None:
        assert _inversions(
            '<div z="1" a="2">', alphabetical=True, otherAttrsExceptions={"onTop": ["z"]}
        ) == []
