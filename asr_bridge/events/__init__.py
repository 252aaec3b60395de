from .parser import decode_event
from .dispatch import EventDispatcher

__all__ = ["EventDispatcher", "decode_event"]
