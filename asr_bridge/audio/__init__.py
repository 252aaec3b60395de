from .relay import AudioChunk, AudioRelay

__all__ = ["AudioChunk", "AudioRelay"]
