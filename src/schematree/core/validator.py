from __future__ import annotations

"""
Render Option Validation Service.

Gatekeeper between untrusted option dictionaries (CLI flags, keyword
arguments) and the immutable RenderConfig. Handles alias resolution,
type coercion and default injection, collecting human-readable warnings
instead of failing unless strict mode is requested.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from schematree.domain.config import RenderConfig, canonical_option_name, get_default_options

logger = logging.getLogger(__name__)

_STRING_FIELDS = [
    "root_prefix", "branch_char", "corner_char", "tee_char",
    "horizontal_char", "max_depth_indicator",
]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_options(
        options: Any,
        *,
        strict: bool = False,
) -> Tuple[RenderConfig, List[str]]:
    """
    Validate and normalise a rendering option dictionary.

    Args:
        options: Raw options (usually a dictionary; None means defaults).
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[RenderConfig, List[str]]: The resulting configuration and
                                        the list of warnings produced.
    """
    warnings: List[str] = []
    defaults = get_default_options()

    if options is None:
        return RenderConfig(), warnings

    # 1. Base Type Validation
    if not isinstance(options, Mapping):
        msg = f"Invalid options type: expected dict, received {type(options).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return RenderConfig(), warnings

    # 2. Alias resolution and unknown key pruning
    merged: Dict[str, Any] = dict(defaults)
    for raw_key, value in options.items():
        key = canonical_option_name(str(raw_key))
        if key not in defaults:
            msg = f"Unknown option '{raw_key}'."
            if strict:
                raise ValueError(msg)
            warnings.append(f"{msg} Ignored.")
            continue
        merged[key] = value

    # 3. Field Processing & Normalization
    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["indent_size"] = _as_int(
        merged.get("indent_size"), defaults["indent_size"], "indent_size",
        warnings, strict, minimum=1,
    )
    merged["max_depth"] = _as_optional_int(
        merged.get("max_depth"), "max_depth", warnings, strict,
    )

    for w in warnings:
        logger.debug(f"Option constraint: {w}")

    return RenderConfig(**merged), warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Accept strings verbatim (including empty ones); None means default."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return value

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_int(
        value: Any,
        fallback: int,
        field: str,
        warnings: List[str],
        strict: bool,
        minimum: int = 0,
) -> int:
    """Coerce integers and numeric strings, enforcing a lower bound."""
    if value is None:
        return fallback

    parsed = _parse_int(value)
    if parsed is None:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if parsed < minimum:
        msg = f"Invalid field '{field}': {parsed} is below the minimum of {minimum}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    return parsed


def _as_optional_int(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[int]:
    """Like _as_int, but None (unlimited) is both the fallback and a valid value."""
    if value is None:
        return None

    parsed = _parse_int(value)
    if parsed is None:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Ignored.")
        return None

    if parsed < 0:
        msg = f"Invalid field '{field}': must be non-negative, received {parsed}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Ignored.")
        return None

    return parsed


def _parse_int(value: Any) -> Optional[int]:
    # bool is an int subclass but never a meaningful width or depth
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None
