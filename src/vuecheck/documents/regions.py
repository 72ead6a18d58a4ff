"""Split a component document into its top-level template/script/style regions.

Blocks are located with textual patterns, not a parser: an opening tag must
start a line, and the block ends at its matching closing tag.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from vuecheck.config.schema import COMPONENT_EXT
from vuecheck.documents.models import Document

_BLOCK_OPEN_RE = re.compile(r"^<(template|script|style)\b([^>]*)>", re.MULTILINE)
_LANG_ATTR_RE = re.compile(r"""\blang\s*=\s*["']([\w-]+)["']""")

_LANGUAGE_IDS = {
    "ts": "typescript",
    "tsx": "tsx",
    "js": "javascript",
    "jsx": "jsx",
}

_DEFAULT_LANGUAGE = {
    "template": "vue-html",
    "script": "javascript",
    "style": "css",
}


@dataclass(frozen=True)
class EmbeddedRegion:
    kind: str  # template | script | style
    language_id: str
    start: int  # offset of the first character inside the block
    end: int  # offset of the closing tag


def _find_block_end(text: str, kind: str, content_start: int) -> int:
    """Return the offset of the closing tag of the block opened before *content_start*."""
    if kind != "template":
        close = text.find(f"</{kind}>", content_start)
        return close if close != -1 else len(text)

    # Templates nest; count depth until the outer one closes.
    depth = 1
    for m in re.finditer(r"<(/?)template\b[^>]*?(/?)>", text[content_start:]):
        if m.group(2):
            continue
        depth += -1 if m.group(1) else 1
        if depth == 0:
            return content_start + m.start()
    return len(text)


def _block_language(kind: str, attrs: str) -> str:
    m = _LANG_ATTR_RE.search(attrs)
    if m is None:
        return _DEFAULT_LANGUAGE[kind]
    lang = m.group(1)
    return _LANGUAGE_IDS.get(lang, lang)


class DocumentRegions:
    """The embedded regions of one document."""

    def __init__(self, document: Document, regions: List[EmbeddedRegion]) -> None:
        self.document = document
        self.regions = regions

    def regions_of(self, kind: str) -> List[EmbeddedRegion]:
        return [r for r in self.regions if r.kind == kind]

    def language_of(self, kind: str) -> Optional[str]:
        found = self.regions_of(kind)
        return found[0].language_id if found else None

    def single_type_document(self, kind: str) -> Document:
        """Return a same-shaped document holding only the *kind* regions.

        Everything outside those regions is blanked to spaces while line
        breaks are kept, so positions map one-to-one onto the original.
        """
        text = self.document.text
        chars = [c if c in "\r\n" else " " for c in text]
        for region in self.regions_of(kind):
            chars[region.start:region.end] = text[region.start:region.end]
        return Document(
            uri=self.document.uri,
            language_id=self.language_of(kind) or _DEFAULT_LANGUAGE.get(kind, kind),
            version=self.document.version,
            text="".join(chars),
        )


def extract_regions(document: Document) -> DocumentRegions:
    """Locate the top-level blocks of *document*.

    A non-component document (a plain ``.ts``/``.tsx`` file) is a single
    script region covering the whole text.
    """
    if document.language_id != COMPONENT_EXT:
        language = _LANGUAGE_IDS.get(document.language_id, document.language_id)
        return DocumentRegions(
            document, [EmbeddedRegion("script", language, 0, len(document.text))]
        )

    text = document.text
    regions: List[EmbeddedRegion] = []
    pos = 0
    while True:
        m = _BLOCK_OPEN_RE.search(text, pos)
        if m is None:
            break
        kind = m.group(1)
        end = _find_block_end(text, kind, m.end())
        regions.append(EmbeddedRegion(kind, _block_language(kind, m.group(2)), m.end(), end))
        pos = max(end, m.end())
    return DocumentRegions(document, regions)
