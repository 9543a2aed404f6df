from .probe import AUDIO_CAPTURE_MODULES, voice_input_available

__all__ = ["AUDIO_CAPTURE_MODULES", "voice_input_available"]
