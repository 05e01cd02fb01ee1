"""Base contract enforcement utility."""

from pixcore.contracts.failure import ContractViolation


def require(condition: bool, message: str) -> None:
    """Enforce a contract.

    Parameters
    ----------
    condition : bool
        The precondition that must hold. If False, ContractViolation is raised.

    message : str
        Error message explaining the violation.

    Raises
    ------
    ContractViolation
        If condition is False.

    Examples
    --------
    >>> require(values.ndim == 1, "median requires a 1-D array")
    """
    if not condition:
        raise ContractViolation(message)
