"""Parser-dump gateway: reads the JSON the template parser writes into domain entities."""

import json
from pathlib import Path

from attribute_order_linter.domain.entities import (
    AttributeNode,
    SourceDocument,
    SourceRange,
    StartTag,
)
from attribute_order_linter.domain.exceptions import ParseDumpError
from attribute_order_linter.domain.protocols import FileSystemProtocol, TemplateGatewayProtocol
from attribute_order_linter.domain.rules.fixer import RotationFixer


class ParsedTemplateGateway(TemplateGatewayProtocol):
    """
    Loads ``*.attrs.json`` dumps.

    A dump names its template source (relative to the dump's directory) and
    lists start tags with their attributes. Ranges are character offsets into
    the source; node text, key text, line and column are resolved here.
    """

    def __init__(self, filesystem: FileSystemProtocol) -> None:
        self._fs = filesystem

    def load_document(self, dump_path: str) -> SourceDocument:
        try:
            raw = json.loads(self._fs.read_text(dump_path))
        except OSError as exc:
            raise ParseDumpError(dump_path, f"cannot read dump ({exc})") from exc
        except json.JSONDecodeError as exc:
            raise ParseDumpError(dump_path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc
        if not isinstance(raw, dict):
            raise ParseDumpError(dump_path, "top level must be an object")

        source = raw.get("source")
        if not isinstance(source, str) or not source:
            raise ParseDumpError(dump_path, "'source' must name the template file")
        source_path = str(Path(dump_path).parent / source)
        try:
            text = self._fs.read_text(source_path)
        except OSError as exc:
            raise ParseDumpError(dump_path, f"cannot read source {source_path} ({exc})") from exc

        raw_tags = raw.get("tags", [])
        if not isinstance(raw_tags, list):
            raise ParseDumpError(dump_path, "'tags' must be a list")
        tags = tuple(
            self._parse_tag(dump_path, source_path, text, raw_tag) for raw_tag in raw_tags
        )
        return SourceDocument(path=source_path, text=text, tags=tags)

    def _parse_tag(
        self, dump_path: str, source_path: str, text: str, raw_tag: object
    ) -> StartTag:
        if not isinstance(raw_tag, dict):
            raise ParseDumpError(dump_path, "every tag must be an object")
        raw_attributes = raw_tag.get("attributes", [])
        if not isinstance(raw_attributes, list):
            raise ParseDumpError(dump_path, "'attributes' must be a list")
        return StartTag(
            name=str(raw_tag.get("name", "")),
            attributes=tuple(
                self._parse_attribute(dump_path, text, raw_attr) for raw_attr in raw_attributes
            ),
            path=source_path,
        )

    def _parse_attribute(self, dump_path: str, text: str, raw_attr: object) -> AttributeNode:
        if not isinstance(raw_attr, dict):
            raise ParseDumpError(dump_path, "every attribute must be an object")
        name = raw_attr.get("name")
        if not isinstance(name, str):
            raise ParseDumpError(dump_path, "attribute 'name' must be a string")
        node_range = self._parse_range(dump_path, text, raw_attr.get("range"))
        key_range = self._parse_range(dump_path, text, raw_attr.get("keyRange"))
        argument = raw_attr.get("argument")
        if argument is not None and not isinstance(argument, str):
            raise ParseDumpError(dump_path, f"argument of '{name}' must be a string or null")
        modifiers = raw_attr.get("modifiers", [])
        if not isinstance(modifiers, list):
            raise ParseDumpError(dump_path, f"modifiers of '{name}' must be a list")
        line, column = RotationFixer.position_of(text, node_range.start)
        return AttributeNode(
            is_directive=bool(raw_attr.get("directive", False)),
            name=name,
            range=node_range,
            key_range=key_range,
            text=text[node_range.start:node_range.end],
            key_text=text[key_range.start:key_range.end],
            argument=argument,
            argument_is_dynamic=bool(raw_attr.get("dynamic", False)),
            modifiers=tuple(str(m) for m in modifiers),
            line=line,
            column=column,
        )

    @staticmethod
    def _parse_range(dump_path: str, text: str, raw: object) -> SourceRange:
        if (
            not isinstance(raw, list)
            or len(raw) != 2
            or not all(isinstance(v, int) and not isinstance(v, bool) for v in raw)
        ):
            raise ParseDumpError(dump_path, f"ranges must be [start, end] pairs, got {raw!r}")
        start, end = raw
        if not 0 <= start <= end <= len(text):
            raise ParseDumpError(dump_path, f"range {raw!r} lies outside the source")
        return SourceRange(start, end)
