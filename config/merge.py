"""Config merging helpers."""

from __future__ import annotations

from typing import Any, Dict


def merge_sections(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Layer per-section overrides over the base config.

    Override values of None mean "not given" and leave the base value in
    place; nested dicts below a section are replaced, not merged.
    """
    merged = dict(base)
    for section, values in overrides.items():
        if values is None:
            continue
        current = merged.get(section)
        if isinstance(values, dict) and isinstance(current, dict):
            section_values = dict(current)
            section_values.update({k: v for k, v in values.items() if v is not None})
            merged[section] = section_values
        elif isinstance(values, dict):
            merged[section] = {k: v for k, v in values.items() if v is not None}
        else:
            merged[section] = values
    return merged
