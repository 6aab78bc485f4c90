"""
📝 Logging System
Système de logging du moteur génétique (console rich, fichier JSON, structlog)
"""

import logging
import logging.handlers
import sys
import json
from typing import Optional, Dict, Any
from datetime import datetime, timezone

import structlog
from rich.logging import RichHandler
from rich.console import Console

from .config import Settings, get_settings

ROOT_LOGGER_NAME = "genalgo"

# Champs d'exécution remontés au premier niveau de chaque ligne JSON
RUN_FIELDS = ("generation", "top_rank", "best_rank", "improved", "population_size")


def _event_processors() -> list:
    """Processeurs structlog propres aux loggers d'événements genalgo"""
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(),
    ]


class JSONFormatter(logging.Formatter):
    """
    Formatter JSON pour les logs genalgo

    Les champs d'exécution (génération, rangs) passés via ``extra_data`` sont
    placés sous la clé ``run``, les autres champs au premier niveau.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_data = dict(getattr(record, "extra_data", None) or {})
        run = {key: extra_data.pop(key) for key in RUN_FIELDS if key in extra_data}
        if run:
            log_data["run"] = run
        log_data.update(extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure la hiérarchie de loggers "genalgo"

    Le logger racine de l'application hôte n'est jamais modifié : les
    handlers sont attachés au logger "genalgo" et la propagation reste active.

    Args:
        settings: Configuration à utiliser (par défaut: get_settings())

    Returns:
        Le logger "genalgo" configuré
    """
    if settings is None:
        settings = get_settings()

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(getattr(logging, settings.log_level))

    # Console handler : Rich ou JSON
    if settings.log_json:
        console_handler: logging.Handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=False,
            rich_tracebacks=True
        )
        console_handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    console_handler.setLevel(getattr(logging, settings.log_level))
    package_logger.addHandler(console_handler)

    # File handler optionnel avec rotation
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=settings.log_file,
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        package_logger.addHandler(file_handler)

    package_logger.debug("Logging system initialized", extra={
        "extra_data": {
            "log_level": settings.log_level,
            "log_file": str(settings.log_file) if settings.log_file else None,
            "environment": settings.environment,
        }
    })
    return package_logger


def get_logger(name: str, extra_data: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """
    Retourne un logger configuré avec des données extra optionnelles

    Args:
        name: Nom du logger (ex: "genalgo.genetic.solver")
        extra_data: Données supplémentaires à inclure dans tous les logs

    Returns:
        Logger configuré
    """
    logger = logging.getLogger(name)

    if extra_data:
        # Créer un adaptateur pour inclure les données extra
        logger = logging.LoggerAdapter(logger, {"extra_data": extra_data})

    return logger


def get_event_logger(name: str, **context: Any) -> structlog.stdlib.BoundLogger:
    """
    Retourne un logger structlog lié à un contexte

    Args:
        name: Nom du logger sous-jacent
        **context: Champs ajoutés à chaque événement

    Returns:
        BoundLogger structlog
    """
    # Chaîne de processeurs locale : la configuration structlog globale de
    # l'application hôte n'est jamais modifiée
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_event_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    ).bind(**context)


# Initialiser le logging au chargement du module
try:
    setup_logging()
except (OSError, ValueError) as e:
    # Fallback en cas d'erreur
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    logging.getLogger(ROOT_LOGGER_NAME).error(f"Failed to setup advanced logging: {e}")
