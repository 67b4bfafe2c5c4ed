class CodePromptError(Exception):
    pass


class ValidationError(CodePromptError):
    """Raised by strict option validation."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("; ".join(problems))


class ShareError(CodePromptError):
    pass


class ShareDecodeError(ShareError):
    pass


class PresetError(CodePromptError):
    pass
