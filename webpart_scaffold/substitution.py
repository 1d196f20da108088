# webpart_scaffold/substitution.py
"""
Placeholder Substitution

Turns a template containing @@TOKEN@@ placeholders into final source text.

- Single pass: replacement values are never re-scanned for tokens
- Case-sensitive, whitespace-preserving, no escaping of values
- Every token must have a value and no token-shaped text may remain in
  the output (UnresolvedTokenError)
- Unused mapping keys are rejected in strict mode (UnknownTokenError),
  logged and ignored in lenient mode

Usage:
    from webpart_scaffold.substitution import substitute, module_tokens

    source = substitute(template, module_tokens("Wiki"))
"""

from __future__ import annotations

import keyword
import logging
import re
from datetime import datetime
from typing import Dict, List, Mapping, Optional

from webpart_scaffold.config import get_settings
from webpart_scaffold.errors import (
    InvalidTokenNameError,
    InvalidTokenValueError,
    UnknownTokenError,
    UnresolvedTokenError,
)

logger = logging.getLogger(__name__)

# ==================== Token Syntax ====================

TOKEN_DELIMITER = "@@"
TOKEN_PATTERN = re.compile(r"@@([A-Z_]+)@@")
_TOKEN_NAME = re.compile(r"[A-Z_]+")

MODULE_NAME = "MODULE_NAME"
MODULE_LOWERCASE_NAME = "MODULE_LOWERCASE_NAME"
MODULE_DIR_NAME = "MODULE_DIR_NAME"
CURRENT_YEAR = "CURRENT_YEAR"

RESERVED_TOKENS = (MODULE_NAME, MODULE_LOWERCASE_NAME, MODULE_DIR_NAME, CURRENT_YEAR)

_CLASS_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_PACKAGE_SEGMENT = re.compile(r"[a-z_][a-z0-9_]*")
_DIR_NAME = re.compile(r"[A-Za-z0-9_.\-]+")
_YEAR = re.compile(r"\d{4}")


def find_tokens(template: str) -> List[str]:
    """Token names referenced by the template, in order of first appearance."""
    seen: Dict[str, None] = {}
    for match in TOKEN_PATTERN.finditer(template):
        seen.setdefault(match.group(1), None)
    return list(seen)


def substitute(
    template: str,
    values: Mapping[str, str],
    *,
    strict: Optional[bool] = None,
) -> str:
    """
    Replace every @@KEY@@ in template with values[KEY].

    Args:
        template: Template text
        values: Token name (without delimiters) -> replacement text
        strict: Reject keys the template never uses. None -> configured default

    Returns:
        str: Fully substituted text

    Raises:
        InvalidTokenNameError: a key is not a valid token identifier
        UnresolvedTokenError: a token has no value, or token-shaped text
            remains in the output
        UnknownTokenError: strict mode and a key is never referenced
    """
    if strict is None:
        strict = get_settings().strict_substitution

    for name in values:
        if not isinstance(name, str) or not _TOKEN_NAME.fullmatch(name):
            raise InvalidTokenNameError(str(name))

    referenced = find_tokens(template)

    missing = [t for t in referenced if t not in values]
    if missing:
        raise UnresolvedTokenError(missing)

    unused = [k for k in values if k not in referenced]
    if unused:
        if strict:
            raise UnknownTokenError(unused)
        logger.warning(f"⚠️ Ignoring tokens not referenced by template: {', '.join(sorted(unused))}")

    def replace(match: re.Match) -> str:
        return str(values[match.group(1)])

    result = TOKEN_PATTERN.sub(replace, template)

    # Values are not re-scanned, but token-shaped text must not survive
    residual = TOKEN_PATTERN.findall(result)
    if residual:
        raise UnresolvedTokenError(residual)
    return result


# ==================== Reserved Tokens ====================

def module_tokens(
    module_name: str,
    *,
    dir_name: Optional[str] = None,
    lowercase_name: Optional[str] = None,
    year: Optional[str] = None,
) -> Dict[str, str]:
    """
    Build the reserved token mapping for one application module.

    Defaults: lowercase name is module_name.lower(), dir name is the lowercase
    name, year is the current year.
    """
    lowercase_name = lowercase_name if lowercase_name is not None else module_name.lower()
    dir_name = dir_name if dir_name is not None else lowercase_name
    year = str(year) if year is not None else str(datetime.now().year)

    if not _CLASS_NAME.fullmatch(module_name) or keyword.iskeyword(module_name):
        raise InvalidTokenValueError(MODULE_NAME, module_name, "not a valid class name")
    if not _PACKAGE_SEGMENT.fullmatch(lowercase_name) or keyword.iskeyword(lowercase_name):
        raise InvalidTokenValueError(MODULE_LOWERCASE_NAME, lowercase_name, "not a valid package segment")
    if not _DIR_NAME.fullmatch(dir_name) or dir_name in (".", ".."):
        raise InvalidTokenValueError(MODULE_DIR_NAME, dir_name, "not a safe directory name")
    if not _YEAR.fullmatch(year):
        raise InvalidTokenValueError(CURRENT_YEAR, year, "expected a four-digit year")

    return {
        MODULE_NAME: module_name,
        MODULE_LOWERCASE_NAME: lowercase_name,
        MODULE_DIR_NAME: dir_name,
        CURRENT_YEAR: year,
    }
