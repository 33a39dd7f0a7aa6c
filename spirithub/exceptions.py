# spirithub/exceptions.py
# excepții proprii ale aplicației.


class ValidationError(ValueError):
    """Date de intrare invalide (dată, nume, număr numerologic)."""
    pass


class MissingContentError(LookupError):
    """Interpretarea sau simbolul cerut nu există în date."""
    pass


class DataValidationError(Exception):
    """Fișier de date (CSV/JSON) malformat sau incomplet."""
    pass
