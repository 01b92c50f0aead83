from typing import Any, List, Sequence


class InvalidInput(ValueError):
    """Raised when query names cannot be matched (empty list, empty name)."""
    pass


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def validate_names(names: Sequence[Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    """
    errors: List[str] = []

    if isinstance(names, str):
        errors.append("Names must be a sequence of strings, not a single string")
        return errors

    if not names:
        errors.append("At least one name is required")
        return errors

    for i, name in enumerate(names):
        if not isinstance(name, str):
            errors.append(f"Name #{i + 1} must be a string")
        elif not _is_non_empty_str(name):
            errors.append(f"Name #{i + 1} must be a non-empty string")

    return errors


def require_valid_names(names: Sequence[Any]) -> None:
    errors = validate_names(names)
    if errors:
        raise InvalidInput("; ".join(errors))
