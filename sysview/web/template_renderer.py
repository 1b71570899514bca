"""Simple template renderer for the SysView dashboard."""

import re
import threading
from pathlib import Path
from typing import Any, Dict, Optional

_EXTENDS = re.compile(r"{% extends ['\"](.+?)['\"] %}")
_BLOCK = re.compile(r"{% block (\w+) %}(.*?){% endblock %}", re.DOTALL)
_INCLUDE = re.compile(r"{% include ['\"](.+?)['\"] %}")
_VARIABLE = re.compile(r"{{\s*(\w+)\s*}}")


class SimpleTemplateRenderer:
    """A basic template renderer that supports extends, includes and variables.

    Layout directives are resolved once per template and cached; ``{{ name }}``
    placeholders are filled on every render in a single pass, so substituted
    values are never interpreted as template syntax.
    """

    def __init__(self, templates_dir: Path):
        self.templates_dir = templates_dir
        self.cache: Dict[str, str] = {}
        self._lock = threading.Lock()

    def render(self, template_name: str, context: Optional[Dict[str, Any]] = None) -> str:
        """Render a template with optional context."""
        if context is None:
            context = {}
        layout = self._load(template_name)
        return _VARIABLE.sub(lambda match: str(context.get(match.group(1), "")), layout)

    def _load(self, template_name: str) -> str:
        with self._lock:
            cached = self.cache.get(template_name)
        if cached is not None:
            return cached
        layout = self._process_template(self._read(template_name))
        with self._lock:
            self.cache[template_name] = layout
        return layout

    def _read(self, template_name: str) -> str:
        template_path = self.templates_dir / template_name
        if not template_path.exists():
            raise FileNotFoundError(f"Template {template_name} not found")
        return template_path.read_text(encoding="utf-8")

    def _process_template(self, content: str) -> str:
        """Process template directives."""
        extends_match = _EXTENDS.search(content)
        if extends_match:
            base_content = self._load(extends_match.group(1))
            blocks = self._extract_blocks(content)
            for block_name, block_content in blocks.items():
                processed_block = self._process_includes(block_content)
                base_content = re.sub(
                    rf"{{% block {block_name} %}}.*?{{% endblock %}}",
                    lambda _match, text=processed_block: text,
                    base_content,
                    flags=re.DOTALL,
                )
            # Unfilled blocks keep their default content
            base_content = _BLOCK.sub(r"\2", base_content)
            return self._process_includes(base_content)

        return self._process_includes(content)

    def _extract_blocks(self, content: str) -> Dict[str, str]:
        """Extract blocks from template content."""
        return {match.group(1): match.group(2).strip() for match in _BLOCK.finditer(content)}

    def _process_includes(self, content: str) -> str:
        """Process include directives."""

        def replace_include(match):
            include_path = match.group(1)
            try:
                return self._load(include_path)
            except FileNotFoundError:
                return f"<!-- Template {include_path} not found -->"

        return _INCLUDE.sub(replace_include, content)
