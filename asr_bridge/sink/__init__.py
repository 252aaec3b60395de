from .result_sink import ResultSink
from .clipboard import ClipboardPublisher

__all__ = ["ClipboardPublisher", "ResultSink"]
