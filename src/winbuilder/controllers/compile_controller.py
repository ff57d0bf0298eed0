# src/winbuilder/controllers/compile_controller.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from tqdm.auto import tqdm

from htmlbuilder import HTMLBuilder, to_html
from winbuilder.core.managers.config_manager import config_manager
from winbuilder.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


@dataclass
class CompileResult:
    """Outcome of compiling one template file."""
    source: Path
    html: str
    roots: int
    output: Optional[Path] = None
    diagnostics: List[str] = field(default_factory=list)


class CompileController:
    """
    Compiles template files to HTML.
    Every file gets a fresh `body` container, so files never see each other's elements.
    """

    def __init__(
            self,
            *,
            attribute_separator: Optional[str] = None,
            indent_marker: Optional[str] = None,
            pretty: Optional[bool] = None,
    ) -> None:
        self.attribute_separator = attribute_separator or config_manager.get_nested("builder.attribute_separator", ";")
        self.indent_marker = indent_marker or config_manager.get_nested("builder.indent_marker", ">")
        self.pretty = pretty if pretty is not None else bool(config_manager.get_nested("compile.pretty", False))
        self.output_suffix = config_manager.get_nested("compile.output_suffix", ".html")

    def _new_builder(self) -> HTMLBuilder:
        return HTMLBuilder(attribute_separator=self.attribute_separator, indent_marker=self.indent_marker)

    def compile_text(self, template: str, source: Path = Path("<string>")) -> CompileResult:
        """
        Compiles one template string.

        Raises:
            BuilderError: If the template contains a malformed line.
        """
        builder = self._new_builder()
        roots = builder.compile(template)
        return CompileResult(
            source=source,
            html=to_html(roots, pretty=self.pretty),
            roots=len(roots),
            diagnostics=list(builder.diagnostics),
        )

    def compile_file(self, path: Path, out_dir: Optional[Path] = None) -> CompileResult:
        """Compiles a template file, writing `<stem>.html` into `out_dir` when given."""
        template = path.read_text(encoding="utf-8")
        result = self.compile_text(template, source=path)

        if out_dir is not None:
            result.output = PathUtils.get_output_path(path, out_dir, self.output_suffix)
            result.output.write_text(result.html, encoding="utf-8")
            logger.info("Wrote %s (%d root element(s))", result.output, result.roots)
        return result

    def compile_files(
            self,
            paths: List[Path],
            out_dir: Optional[Path] = None,
            show_progress: bool = True,
    ) -> List[CompileResult]:
        """Compiles several template files in order. The first malformed file aborts the run."""
        iterator = paths
        if show_progress and len(paths) > 1:
            iterator = tqdm(paths, desc="Compiling templates", unit="file", leave=False)

        results: List[CompileResult] = []
        for path in iterator:
            results.append(self.compile_file(path, out_dir))
        return results
