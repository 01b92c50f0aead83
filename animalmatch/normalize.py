def normalize_text(s: str) -> str:
    return s.strip().lower()


def normalize_name(name: str) -> str:
    # Inner whitespace is kept so multi-word names still match multi-word animals
    return normalize_text(name)


def normalize_candidate(line: str) -> str:
    return normalize_text(line)


def candidate_identity(label: str) -> str:
    """Case-insensitive key shared by a candidate and every annotated label derived from it."""
    return label.lower()
