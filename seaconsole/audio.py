"""Sound effects for menu navigation."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

try:
    import winsound as _winsound
except ImportError:
    _winsound = None

SELECT_SOUND_PATH = Path("..") / "resources" / "Select.wav"


def play_select_sound(path: Optional[Union[str, Path]] = None) -> bool:
    """Start playing the selection sound asynchronously.

    Returns True if playback was started, False if the sound file is missing
    or the platform has no sound backend.
    """
    sound = Path(path) if path is not None else SELECT_SOUND_PATH
    if _winsound is None or not sound.is_file():
        return False
    _winsound.PlaySound(str(sound), _winsound.SND_FILENAME | _winsound.SND_ASYNC)
    return True