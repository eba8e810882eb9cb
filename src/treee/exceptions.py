class PatternError(ValueError):
    """
    Exception raised when a glob pattern cannot be compiled.

    The message mirrors the usual glob parser wording: the character position at
    which parsing failed followed by the reason.

    Attributes:
        pattern (str): The offending pattern text.
        pos (int): Zero-based index of the character where parsing failed.
        msg (str): Short description of the problem.

    Example:
        >>> error = PatternError("[a-", 0, "invalid range pattern")
        >>> str(error)
        "Pattern syntax error near position 0 in '[a-': invalid range pattern"
    """

    def __init__(self, pattern: str, pos: int, msg: str) -> None:
        """
        Initialize the exception.

        Args:
            pattern (str): The pattern that failed to compile.
            pos (int): Position of the failing character.
            msg (str): Description of the failure.
        """
        self.pattern = pattern
        self.pos = pos
        self.msg = msg
        super().__init__(f"Pattern syntax error near position {pos} in '{pattern}': {msg}")
