"""Shared test fixtures — component sources and temporary project trees."""

from __future__ import annotations

import io
import logging
import textwrap
from pathlib import Path

import pytest
from rich.console import Console

CLEAN_COMPONENT = textwrap.dedent("""\
    <template>
      <div>{{ title }}</div>
    </template>

    <script lang="ts">
    export default {
      data() {
        return { title: "hello" };
      },
    };
    </script>
""")

BROKEN_COMPONENT = textwrap.dedent("""\
    <template>
      <div>{{ missingValue }}</div>
    </template>

    <script lang="ts">
    export default {
      data() {
        return { title: "hello" };
      },
    };
    </script>
""")

PLAIN_SCRIPT_COMPONENT = textwrap.dedent("""\
    <template>
      <div>{{ title }}</div>
    </template>

    <script>
    export default {
      data() {
        return { title: "hello" };
      },
    };
    </script>
""")

TEMPLATE_ONLY_COMPONENT = textwrap.dedent("""\
    <template>
      <div>static</div>
    </template>
""")

EXTERNAL_SCRIPT_COMPONENT = textwrap.dedent("""\
    <template>
      <div>{{ title }}</div>
    </template>

    <script src="./external.ts"></script>
""")

@pytest.fixture(autouse=True)
def _reset_vuecheck_logger():
    """Drop handlers the CLI installs so later tests do not write to closed streams."""
    yield
    logger = logging.getLogger("vuecheck")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


TEMPLATE_PRODUCER = "fake_producers:template_producer"
SCRIPT_PRODUCER = "fake_producers:script_producer"


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Write *files* (relative path -> content) under *root*."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8", newline="")
    return root


@pytest.fixture
def console_buffer() -> tuple[Console, io.StringIO]:
    """A wide, colourless console writing into a buffer."""
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


@pytest.fixture
def three_components(tmp_path: Path) -> Path:
    """A workspace whose src/components holds three files; b.vue is broken."""
    return write_tree(
        tmp_path,
        {
            "src/components/a.vue": CLEAN_COMPONENT,
            "src/components/b.vue": BROKEN_COMPONENT,
            "src/components/c.vue": CLEAN_COMPONENT,
        },
    )


@pytest.fixture
def first_broken(tmp_path: Path) -> Path:
    """Three components where the first in discovery order is broken."""
    return write_tree(
        tmp_path,
        {
            "src/a.vue": BROKEN_COMPONENT,
            "src/b.vue": BROKEN_COMPONENT,
            "src/c.vue": CLEAN_COMPONENT,
        },
    )
