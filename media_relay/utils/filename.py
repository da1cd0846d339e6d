import re
import unicodedata
from typing import Optional

WINDOWS_RESERVED = {
    'CON', 'PRN', 'AUX', 'NUL',
    'COM1', 'COM2', 'COM3', 'COM4', 'COM5', 'COM6', 'COM7', 'COM8', 'COM9',
    'LPT1', 'LPT2', 'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9'
}


def sanitize_filename(name: Optional[str], default: str = "audio.wav", max_length: int = 200) -> str:
    """
    Clean a client-supplied upload filename before it is forwarded.
    Directory parts are dropped; an empty result falls back to default.
    """
    name = unicodedata.normalize("NFKC", name or "")
    # Some browsers send the full client-side path
    name = re.split(r'[\\/]', name)[-1]
    name = re.sub(r'[:*?"<>|\x00-\x1f]', '_', name).strip()

    stem = name.split('.', 1)[0]
    if stem.upper() in WINDOWS_RESERVED:
        name = f"_{name}"

    return name[:max_length].strip() or default
