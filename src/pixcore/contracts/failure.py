"""Exception raised for contract violations."""


class ContractViolation(RuntimeError):
    """Raised when a caller breaks a precondition of a pixcore function.

    Key distinction:
    - ValueError: bad data (empty input, NaN where forbidden)
    - StatusError: recoverable operation outcome with a status code
    - ContractViolation: programmer error in the caller
    """
    pass
