"""Strict-dialect classification of component files.

The checks are single-line regex sniffs over the raw text, not a parse.
A ``<script>`` tag split across lines, or one using single-quoted
attributes, can be misclassified; that is the accepted behaviour.
"""

from __future__ import annotations

import re
from typing import Protocol

from vuecheck.config.schema import COMPONENT_EXT

_SCRIPT_TAG_RE = re.compile(r".*<script.*>")
_STRICT_LANG_RE = re.compile(r'.*<script.*lang="tsx?".*>')
_EXTERNAL_SRC_RE = re.compile(r'.*<script.*src=".*".*>')


class SourceClassifier(Protocol):
    def is_eligible(self, extension_tag: str, raw_text: str) -> bool:
        """Return True if the file should be checked in strict-only mode."""
        ...


def has_script_tag(src: str) -> bool:
    return _SCRIPT_TAG_RE.search(src) is not None


def is_strict_script(src: str) -> bool:
    return _STRICT_LANG_RE.search(src) is not None


def imports_external_script(src: str) -> bool:
    return _EXTERNAL_SRC_RE.search(src) is not None


class RegexScriptClassifier:
    """Default classifier: sniff the ``<script>`` tag of component files.

    Non-component files are strict by construction. A component is eligible
    when it has no script, declares ``lang="ts"``/``lang="tsx"``, or pulls its
    script from an external ``src`` (that file is classified on its own).
    """

    def is_eligible(self, extension_tag: str, raw_text: str) -> bool:
        if extension_tag != COMPONENT_EXT or not has_script_tag(raw_text):
            return True
        return is_strict_script(raw_text) or imports_external_script(raw_text)
