"""Fenced Markdown code blocks for rendered signatures."""

import re

_BACKTICK_RUN = re.compile(r"`+")


def md_codeblock(lang: str, code: str) -> str:
    """Wrap ``code`` in a fenced block.

    The fence is one backtick longer than the longest backtick run inside the
    code (at least three), so macro bodies and doc snippets containing
    backticks cannot close the block early.
    """
    longest = max((len(m) for m in _BACKTICK_RUN.findall(code)), default=0)
    fence = "`" * max(3, longest + 1)
    return f"{fence}{lang}\n{code.rstrip()}\n{fence}"
