# curriculum/lessons/frontmatter.py
"""Split YAML frontmatter from the body of a markdown document."""

import re

import yaml


class FrontmatterError(Exception):
    """Raised when a frontmatter block is not valid YAML."""

    pass


_FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\n(.*?)^---[ \t]*$\n?", re.DOTALL | re.MULTILINE
)


def split_frontmatter(text: str) -> tuple[dict, str]:
    """
    Extract YAML frontmatter and return (metadata, remaining_content).

    Documents without a frontmatter block return an empty dict and the text
    unchanged. A block that parses to something other than a mapping (a bare
    string or list) is treated as empty metadata.

    Raises:
        FrontmatterError: If the block is not valid YAML
    """
    text = text.removeprefix("\ufeff")
    match = _FRONTMATTER_PATTERN.match(text)

    if not match:
        return {}, text

    try:
        metadata = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid frontmatter: {e}") from e

    if not isinstance(metadata, dict):
        metadata = {}

    return metadata, text[match.end() :]
