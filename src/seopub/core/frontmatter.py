"""YAML frontmatter codec: split and join a triple-dash header and Markdown body"""

import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

from seopub.core.models import ParsedMarkdown


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|$)', re.DOTALL)


# PyYAML emits these unquoted and reads them back as spaces
_YAML_LINE_BREAKS = ("\x85", "\u2028", "\u2029")


class _FrontmatterDumper(yaml.SafeDumper):
    pass


def _represent_str(dumper: yaml.SafeDumper, value: str) -> yaml.ScalarNode:
    style = '"' if any(ch in value for ch in _YAML_LINE_BREAKS) else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", value, style=style)


_FrontmatterDumper.add_representer(str, _represent_str)


def _iso_dates(value: Any) -> Any:
    """Recursively render date/datetime values (YAML timestamps) as ISO strings."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _iso_dates(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_iso_dates(v) for v in value]
    return value


def parse(text: str) -> ParsedMarkdown:
    """Return frontmatter and body; anything that is not a valid YAML mapping header counts as no frontmatter."""
    m = FRONTMATTER_RE.match(text)
    if not m:
        return ParsedMarkdown(frontmatter={}, content=text)
    try:
        fm = yaml.safe_load(m.group(1))
    except yaml.YAMLError as e:
        logger.debug("Ignoring invalid YAML frontmatter: %s", e)
        return ParsedMarkdown(frontmatter={}, content=text)
    if fm is None:
        fm = {}
    if not isinstance(fm, dict):
        logger.debug("Ignoring frontmatter that is not a mapping: %s", type(fm).__name__)
        return ParsedMarkdown(frontmatter={}, content=text)
    return ParsedMarkdown(frontmatter=_iso_dates(fm), content=text[m.end():])


def parse_file(path: Path) -> ParsedMarkdown:
    """Read a UTF-8 Markdown file and parse its frontmatter."""
    return parse(Path(path).read_text(encoding='utf-8'))


def serialize(content: str, frontmatter: dict[str, Any]) -> str:
    """Prepend a YAML frontmatter block (insertion order preserved) to content."""
    header = yaml.dump(frontmatter, Dumper=_FrontmatterDumper, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"---\n{header}---\n{content}"
