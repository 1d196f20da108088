# webpart_scaffold/generator.py
"""
Web Part Generator

Renders the bundled web part template for one application module and writes
the resulting component class into a test tree:

    <output_dir>/components/<MODULE_DIR_NAME>/<MODULE_LOWERCASE_NAME>_web_part.py

- Rendering completes before anything touches the filesystem, so a
  substitution error never leaves a partial file behind
- Atomic UTF-8 writes (tmp file + replace)
- Package __init__.py files created alongside the component
- Existing files are kept unless overwrite is requested
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from webpart_scaffold.config import Settings, get_settings
from webpart_scaffold.substitution import module_tokens, substitute

logger = logging.getLogger(__name__)

# ==================== Configuration ====================

BUNDLED_TEMPLATES_DIR = Path(__file__).parent / "templates"
DEFAULT_TEMPLATE = "web_part.py.tmpl"
TARGET_PATH_TEMPLATE = "components/@@MODULE_DIR_NAME@@/@@MODULE_LOWERCASE_NAME@@_web_part.py"


def _atomic_write_text(path: Path, text: str) -> None:
    """Atomically write a UTF-8 text file"""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(text, encoding="utf-8")
        tmp.replace(path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


@dataclass
class GenerationResult:
    """Outcome of one generation request"""
    module_name: str
    path: Path
    tokens: Dict[str, str] = field(default_factory=dict)
    source: str = ""
    bytes_written: int = 0
    dry_run: bool = False


# ==================== Main Generator ====================

class WebPartGenerator:
    """Generates web part component classes from the bundled template."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.templates_dir = Path(self.settings.templates_dir) if self.settings.templates_dir else BUNDLED_TEMPLATES_DIR

    # ==================== Templates ====================

    def load_template(self, name: str = DEFAULT_TEMPLATE) -> str:
        """Load a template by name, or by path when name points at an existing file."""
        path = Path(name)
        if not path.is_file():
            path = self.templates_dir / name
        if not path.is_file():
            raise FileNotFoundError(f"Template not found: {name}")
        return path.read_text(encoding="utf-8")

    def render(self, tokens: Dict[str, str], template: Optional[str] = None, *, strict: Optional[bool] = None) -> str:
        if template is None:
            template = self.load_template()
        if strict is None:
            strict = self.settings.strict_substitution
        return substitute(template, tokens, strict=strict)

    def target_path(self, tokens: Dict[str, str], output_dir: Optional[str] = None) -> Path:
        base = Path(output_dir or self.settings.output_dir)
        # Path template uses a subset of the tokens
        return base / substitute(TARGET_PATH_TEMPLATE, tokens, strict=False)

    # ==================== Entry ====================

    def generate(
        self,
        module_name: str,
        *,
        dir_name: Optional[str] = None,
        year: Optional[str] = None,
        output_dir: Optional[str] = None,
        template_name: str = DEFAULT_TEMPLATE,
        strict: Optional[bool] = None,
        overwrite: bool = False,
        dry_run: bool = False,
    ) -> GenerationResult:
        """
        Generate the web part component for one module.

        Returns:
            GenerationResult: where the component was (or would be) written

        Raises:
            SubstitutionError: token values invalid or template/mapping mismatch
            FileExistsError: target exists and overwrite is False
        """
        tokens = module_tokens(module_name, dir_name=dir_name, year=year)
        source = self.render(tokens, self.load_template(template_name), strict=strict)
        target = self.target_path(tokens, output_dir)
        data = source.encode("utf-8")

        if dry_run:
            logger.info(f"Dry run: would write {target} ({len(data)} bytes)")
            return GenerationResult(module_name, target, tokens, source, dry_run=True)

        if target.exists() and not overwrite:
            raise FileExistsError(f"Refusing to overwrite existing component: {target}")

        base = Path(output_dir or self.settings.output_dir)
        self._ensure_packages(base, target.parent)
        _atomic_write_text(target, source)

        logger.info(f"✅ Generated {tokens['MODULE_NAME']}WebPart at {target}")
        return GenerationResult(module_name, target, tokens, source, len(data))

    def _ensure_packages(self, base: Path, package_dir: Path) -> None:
        """Create __init__.py files for every package below base down to package_dir."""
        package_dir.mkdir(parents=True, exist_ok=True)
        current = package_dir
        while current != base and current.parent != current:
            init = current / "__init__.py"
            if not init.exists():
                init.write_text("", encoding="utf-8")
                logger.debug(f"Created {init}")
            current = current.parent
