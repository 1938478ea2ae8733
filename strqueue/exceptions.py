class HandleSpaceExhausted(AssertionError):
    """No more handles can be issued. Not meant to be caught."""


class ScriptError(ValueError):
    def __init__(self, msg: str, lineno: int | None = None) -> None:
        self.lineno = lineno
        if lineno is not None:
            msg = f"line {lineno}: {msg}"
        super().__init__(msg)
