class DocumentIOError(OSError):
    """Base for failures at the document read/write boundary."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class InputUnreadable(DocumentIOError):
    pass


class OutputUnwritable(DocumentIOError):
    pass
