"""Color & style helpers for the transcript.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or project .env file.
- set_enabled() lets the CLI force color on or off after import.
"""
from __future__ import annotations
import logging
import os, re, sys
from pathlib import Path

logger = logging.getLogger(__name__)

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
PALETTE_KEYS = ('TASKMGR_PRIMARY', 'TASKMGR_PENDING', 'TASKMGR_INPROGRESS', 'TASKMGR_DONE')

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)

def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def load_env_overrides(env_path: Path) -> dict[str, str]:
    """Read palette overrides from a KEY=VALUE file; unknown keys and bad hex values are skipped."""
    overrides: dict[str, str] = {}
    if not env_path.exists():
        return overrides
    try:
        text = env_path.read_text()
    except OSError:
        logger.warning("could not read %s; using default palette", env_path)
        return overrides
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip()
        if k not in PALETTE_KEYS:
            continue
        if not _is_hex(v):
            logger.debug("ignoring %s=%r in %s: not a hex color", k, v, env_path)
            continue
        overrides[k] = '#' + v.lstrip('#')
    return overrides

RESET = '\033[0m'
BOLD = '\033[1m'
DIM = '\033[2m'

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_PENDING_DEFAULT = '#48B3AF'
HEX_INPROGRESS_DEFAULT = '#F6FF99'
HEX_DONE_DEFAULT = '#A7E399'

_ENV_OVERRIDES = load_env_overrides(Path(__file__).resolve().parent.parent / '.env')

def _resolve(key: str, default: str) -> str:
    """Priority: real env var > .env override > default."""
    value = os.environ.get(key)
    if value and _is_hex(value):
        return '#' + value.lstrip('#')
    return _ENV_OVERRIDES.get(key, default)

HEX_PRIMARY = _resolve('TASKMGR_PRIMARY', HEX_PRIMARY_DEFAULT)
HEX_PENDING = _resolve('TASKMGR_PENDING', HEX_PENDING_DEFAULT)
HEX_INPROGRESS = _resolve('TASKMGR_INPROGRESS', HEX_INPROGRESS_DEFAULT)
HEX_DONE = _resolve('TASKMGR_DONE', HEX_DONE_DEFAULT)

PRIMARY = _from_hex(HEX_PRIMARY)

# keyed by TaskStatus value
STATUS_COLOR = {
    'Pending': _from_hex(HEX_PENDING),
    'InProgress': _from_hex(HEX_INPROGRESS),
    'Done': _from_hex(HEX_DONE),
}

HEADER_COLOR = PRIMARY + BOLD
ID_COLOR = PRIMARY + BOLD
EMPTY_COLOR = DIM + PRIMARY

def set_enabled(enabled: bool) -> None:
    global _ENABLE
    _ENABLE = enabled

def is_enabled() -> bool:
    return _ENABLE

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE or not styles:
        return text
    return ''.join(styles) + text + RESET

def strip_ansi(text: str) -> str:
    return ANSI_RE.sub('', text)

__all__ = [
    'color','strip_ansi','set_enabled','is_enabled','load_env_overrides',
    'RESET','BOLD','DIM','STATUS_COLOR','HEADER_COLOR','ID_COLOR','EMPTY_COLOR',
    'HEX_PRIMARY','HEX_PENDING','HEX_INPROGRESS','HEX_DONE',
]
