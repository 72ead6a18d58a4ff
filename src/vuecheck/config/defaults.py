"""Starter .vuecheck.toml template."""

DEFAULT_TOML = """\
# vuecheck configuration

[check]
# src_dir = "src"              # defaults to the workspace
only_template = false
only_typescript = false        # check only lang="ts" components plus .ts/.tsx files
# exclude_dirs = ["src/legacy"] # workspace-relative textual prefixes: "src/foo" also excludes "src/foobar"
fail_exit = false              # stop at the first file with errors

[producers]
# template = "my_tools.vls:template_producer"
# script = "my_tools.vls:script_producer"

[cache]
max_entries = 10
cleanup_interval_s = 60

[output]
context_lines = 2
show_progress = true
"""
