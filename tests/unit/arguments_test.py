"""Unit tests for argument normalization helpers."""

import pytest

from papyrus_codegen.core.arguments import (
    DEFAULT_EXPRESSIONS,
    first_argument,
    labeled_or_default,
    positional_or_default,
    second_argument,
    unquote,
)
from papyrus_codegen.core.classifier import classify
from papyrus_codegen.models import Converter, HttpRoute, RawAttribute


class TestUnquote:
    """Tests for unquote."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ('"x-api-key"', "x-api-key"),
            ('""', ""),
            ('"""multi"""', "multi"),
            ('""quoted""', '"quoted"'),
            ("Keys.token", "Keys.token"),
            ('"unterminated', '"unterminated'),
            ('"', '"'),
            ("", ""),
        ],
        ids=["quoted", "empty-literal", "multiline", "one-layer", "expression", "unterminated", "lone-quote", "empty"],
    )
    def test_strips_one_layer_of_quotes(self, text: str, expected: str) -> None:
        """Test that exactly one layer of quote delimiters is removed."""
        assert unquote(text) == expected

    def test_does_not_process_escapes(self) -> None:
        """Test that escape sequences inside the literal are left alone."""
        assert unquote('"a\\"b"') == 'a\\"b'


class TestPositionalArguments:
    """Tests for first/second argument resolution."""

    def test_first_and_second(self) -> None:
        """Test that unlabeled arguments resolve in order."""
        raw = RawAttribute(name="HTTP", positional_arguments=['"/a"', '"CUSTOM"'])
        assert first_argument(raw) == '"/a"'
        assert second_argument(raw) == '"CUSTOM"'

    def test_missing_arguments_are_none(self) -> None:
        """Test that absent arguments resolve to None."""
        raw = RawAttribute(name="Body")
        assert first_argument(raw) is None
        assert second_argument(raw) is None

    def test_labeled_arguments_count_in_source_order(self) -> None:
        """Test that a labeled argument still occupies its source position."""
        raw = RawAttribute.from_arguments("HTTP", [(None, '"/purge"'), ("method", '"PURGE"')])
        assert first_argument(raw) == '"/purge"'
        assert second_argument(raw) == '"PURGE"'

    def test_labeled_http_method(self) -> None:
        """Test that @HTTP with a labeled method classifies to a route."""
        raw = RawAttribute.from_arguments("HTTP", [(None, '"/purge"'), ("method", '"PURGE"')])
        assert classify(raw) == HttpRoute(method="PURGE", path='"/purge"')

    def test_labeled_converter(self) -> None:
        """Test that @Converter with labeled encoder and decoder classifies."""
        raw = RawAttribute.from_arguments("Converter", [("encoder", "MyEncoder()"), ("decoder", "MyDecoder()")])
        assert classify(raw) == Converter(encoder="MyEncoder()", decoder="MyDecoder()")

    def test_constructed_attribute_orders_positional_before_labeled(self) -> None:
        """Test the source order derived when only the split fields are given."""
        raw = RawAttribute(name="HTTP", positional_arguments=['"/a"'], labeled_arguments={"method": '"GET"'})
        assert raw.arguments == [(None, '"/a"'), ("method", '"GET"')]


class TestDefaults:
    """Tests for lookups that fall back to the default expression table."""

    def test_positional_default_comes_from_table(self) -> None:
        """Test that an omitted encoder uses the table default."""
        raw = RawAttribute(name="URLForm")
        assert positional_or_default(raw, 0, "encoder") == DEFAULT_EXPRESSIONS[("URLForm", "encoder")]

    def test_positional_value_wins_over_default(self) -> None:
        """Test that a supplied encoder overrides the default."""
        raw = RawAttribute(name="Multipart", positional_arguments=["MultipartEncoder(boundary: b)"])
        assert positional_or_default(raw, 0, "encoder") == "MultipartEncoder(boundary: b)"

    def test_labeled_default_comes_from_table(self) -> None:
        """Test labeled lookup with and without a supplied value."""
        raw = RawAttribute(name="JSON", labeled_arguments={"encoder": "enc"})
        assert labeled_or_default(raw, "encoder") == "enc"
        assert labeled_or_default(raw, "decoder") == "JSONDecoder()"

    def test_default_table_is_stable(self) -> None:
        """Test that the default expressions are exactly the expected constants."""
        assert DEFAULT_EXPRESSIONS == {
            ("JSON", "encoder"): "JSONEncoder()",
            ("JSON", "decoder"): "JSONDecoder()",
            ("URLForm", "encoder"): "URLEncodedFormEncoder()",
            ("Multipart", "encoder"): "MultipartEncoder()",
        }
