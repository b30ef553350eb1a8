from .sfx import SFXEvent, SFXManager

__all__ = ["SFXEvent", "SFXManager"]
