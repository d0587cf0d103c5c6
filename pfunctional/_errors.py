class EmptyCollectionError(ValueError):
    """
    Raised when a non-empty collection is created from a source without elements.
    """


class EmptySequenceError(IndexError):
    """
    Raised when the head or tail of an empty persistent sequence is requested.
    """


class StreamReuseError(RuntimeError):
    """
    Raised when a stream is forked or drained a second time.

    A stream wraps a one-shot sequence. Once a combinator or a terminal operation
    has taken the sequence the stream can not be used again, use the stream that
    the combinator returned instead.
    """
