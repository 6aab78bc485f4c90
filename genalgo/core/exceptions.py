"""
⚠️ Exceptions
Hiérarchie d'exceptions du moteur génétique
"""


class GenAlgoError(Exception):
    """Exception de base du moteur génétique"""
    pass


class ConfigurationError(GenAlgoError, ValueError):
    """Paramètre de construction invalide (taille, probabilité, ...)"""
    pass


class EmptyPopulationError(GenAlgoError, LookupError):
    """Accès au meilleur individu d'une population vide"""
    pass


def check_probability(name: str, value: float) -> float:
    """Valide qu'une probabilité est dans [0, 1] et la retourne en float"""
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{name} must be in [0, 1], got {value}")
    return value


def check_positive(name: str, value: int) -> int:
    """Valide qu'un entier est >= 1"""
    if int(value) != value or value < 1:
        raise ConfigurationError(f"{name} must be a positive integer, got {value}")
    return int(value)
