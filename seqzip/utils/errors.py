# seqzip/utils/errors.py


class UserInputError(RuntimeError):
    """
    Raised for invalid caller-provided input (config values, predicates).
    Should NOT print traceback.
    """


class AbsentValueError(LookupError):
    """
    Raised when an absent Option is explicitly unwrapped.

    Absent results are ordinary return values everywhere in seqzip;
    this error only appears when the caller asks for the value anyway.
    """

    def __init__(self, reason) -> None:
        self.reason = reason
        super().__init__(f"no value present (reason={getattr(reason, 'value', reason)})")
