# Analyzer settings: defaults < YAML file (--config / RECPROBE_CONFIG) < CLI flags.
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from . import patterns, search, strings

ENV_VAR = "RECPROBE_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "dump_bytes": 256,
    "offset": 0,
    "context": search.CONTEXT,
    "pattern_sizes": list(patterns.PATTERN_SIZES),
    "lookahead": patterns.LOOKAHEAD,
    "min_occurrences": patterns.MIN_OCCURRENCES,
    "max_patterns": patterns.MAX_PATTERNS,
    "max_examples": patterns.MAX_EXAMPLES,
    "min_string_length": strings.MIN_LENGTH,
    "max_strings": strings.MAX_RUNS,
    "flush_trailing": True,
}

# keys that must be >= 0 rather than > 0
NON_NEGATIVE = {"offset", "context", "dump_bytes"}


class ConfigError(ValueError):
    pass


def to_int(x):
    if isinstance(x, bool) or not isinstance(x, (int, str)):
        raise ValueError(f"expected an integer, got {x!r}")
    if isinstance(x, int): return x
    if isinstance(x, str) and x.lower().startswith("0x"): return int(x, 16)
    return int(x)


def _validate(key, value):
    default = DEFAULTS[key]
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ConfigError(f"{key}: expected true/false, got {value!r}")
        return value
    if isinstance(default, list):
        if not isinstance(value, (list, tuple)) or not value:
            raise ConfigError(f"{key}: expected a non-empty list, got {value!r}")
        return [_validate_int(key, v, 1) for v in value]
    return _validate_int(key, value, 0 if key in NON_NEGATIVE else 1)


def _validate_int(key, value, minimum):
    try:
        v = to_int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key}: expected an integer, got {value!r}") from None
    if v < minimum:
        raise ConfigError(f"{key}: must be >= {minimum}, got {v}")
    return v


def load_file(path) -> Dict[str, Any]:
    p = Path(path)
    try:
        with open(p, "r", encoding="utf-8") as f:
            obj = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"cannot read {p}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {p}: {e}") from e
    if not isinstance(obj, dict):
        raise ConfigError(f"{p}: top level must be a mapping")
    return obj


def merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in overrides.items():
        if v is None:
            continue
        if k not in DEFAULTS:
            raise ConfigError(f"unknown setting: {k}")
        out[k] = _validate(k, v)
    return out


def resolve(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None,
            environ=None) -> Dict[str, Any]:
    environ = os.environ if environ is None else environ
    path = path or environ.get(ENV_VAR) or None
    conf = dict(DEFAULTS)
    if path:
        print(f"[config] using {path}", file=sys.stderr)
        conf = merge(conf, load_file(path))
    return merge(conf, overrides or {})
