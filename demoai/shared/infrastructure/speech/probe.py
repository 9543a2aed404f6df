"""Voice-input capability probe.

The dashboard only uses the result to decide what to display; nothing in the
core depends on it.
"""

from __future__ import annotations

import logging
from importlib.util import find_spec
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

# Modules that can capture microphone audio, checked in order
AUDIO_CAPTURE_MODULES = ("sounddevice", "pyaudio", "speech_recognition")


def voice_input_available(
    override: Optional[bool] = None,
    modules: Sequence[str] = AUDIO_CAPTURE_MODULES,
) -> bool:
    if override is not None:
        return override

    for name in modules:
        try:
            if find_spec(name) is not None:
                logger.debug(f"Voice input available via '{name}'")
                return True
        except (ImportError, ValueError):
            continue

    logger.debug("No audio capture module found; voice input unavailable")
    return False
