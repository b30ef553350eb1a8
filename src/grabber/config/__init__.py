from .loader import SoundConfig, load_sound_config

__all__ = ["SoundConfig", "load_sound_config"]
