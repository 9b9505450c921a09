"""Static splitting profile loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from docsplit.config.splitting.models import SplitConfiguration, SplitterType

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, SplitConfiguration] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict[str, Any]:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_split_profiles() -> dict[str, SplitConfiguration]:
    """Load splitting profiles from static.json. Keys are splitter type identifiers."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: SplitConfiguration.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_split_profile(profile_name: str) -> SplitConfiguration | None:
    """Return the default configuration for the given profile, or None if missing."""
    return load_split_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", SplitterType.RECURSIVE.value)
    return _active_profile


def resolve_split_config(inline_config: dict[str, Any] | None) -> SplitConfiguration:
    """
    Resolve a request's configuration against the defaults for its splitter type.
    Fields the caller set win; unset fields come from the profile of the same
    splitter type. With no inline config the active profile is returned.
    Raises ValueError (pydantic.ValidationError) on an unknown splitter type or bad field types.
    """
    if not inline_config:
        name = get_active_profile_name()
        cfg = get_split_profile(name)
        if cfg is None:
            raise ValueError(f"Active profile {name!r} not found in profiles")
        return cfg
    explicit = SplitConfiguration.model_validate(inline_config)
    base = get_split_profile(explicit.splitter_type.value)
    if base is None:
        return explicit
    overrides = explicit.model_dump(include=explicit.model_fields_set)
    return base.model_copy(update=overrides)
