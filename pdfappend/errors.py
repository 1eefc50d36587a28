# *-* coding: utf-8 *-*


class PdfAppendError(ValueError):
    pass


class UnusableTrailerError(PdfAppendError):
    pass


class InvalidReplacementError(PdfAppendError):
    pass


class ObjectNotFoundError(InvalidReplacementError):
    pass


class NotKeyedContainerError(PdfAppendError, TypeError):
    pass


class IncrementalWriteError(PdfAppendError, OSError):
    """Writing the updated document failed part way.

    `written` is the number of bytes emitted before the failure.
    """

    def __init__(self, written, *args):
        super(IncrementalWriteError, self).__init__(*args)
        self.written = written
        if len(args) >= 2:
            self.errno, self.strerror = args[:2]
