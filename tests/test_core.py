"""
🧪 Tests pour la configuration, le logging et les exceptions
"""

import json
import sys
import logging
import logging.handlers

import pytest
import structlog
from pydantic import ValidationError
from rich.logging import RichHandler

from genalgo.core.config import Settings, get_settings
from genalgo.core.exceptions import (
    ConfigurationError,
    EmptyPopulationError,
    GenAlgoError,
    check_positive,
    check_probability,
)
from genalgo.core.logger import (
    ROOT_LOGGER_NAME,
    JSONFormatter,
    get_event_logger,
    get_logger,
    setup_logging,
)


@pytest.fixture
def restore_logging():
    """Remet la configuration de logging par défaut après le test"""
    yield
    setup_logging(Settings(_env_file=None))


class TestSettings:
    """Tests pour la configuration"""

    def test_defaults(self, monkeypatch):
        """Test des valeurs par défaut"""
        monkeypatch.delenv("GENALGO_LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.log_file is None

    def test_env_override(self, monkeypatch):
        """Test surcharge par variables d'environnement"""
        monkeypatch.setenv("GENALGO_LOG_LEVEL", "debug")
        monkeypatch.setenv("GENALGO_ENVIRONMENT", "testing")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.is_testing()
        assert not settings.is_production()

    def test_invalid_log_level(self):
        """Test rejet d'un niveau de log invalide"""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="VERBOSE")

    def test_log_file_made_absolute(self, tmp_path, monkeypatch):
        """Test que le chemin du fichier de log est absolu"""
        monkeypatch.chdir(tmp_path)
        settings = Settings(_env_file=None, log_file="logs/run.log")

        assert settings.log_file.is_absolute()
        assert settings.log_file == tmp_path.resolve() / "logs" / "run.log"

    def test_get_settings_singleton(self):
        """Test singleton via lru_cache"""
        assert get_settings() is get_settings()


class TestLogging:
    """Tests pour le système de logging"""

    def test_default_setup_uses_rich(self, restore_logging):
        """Test handler console Rich par défaut"""
        package_logger = setup_logging(Settings(_env_file=None))

        assert package_logger.name == ROOT_LOGGER_NAME
        assert any(isinstance(h, RichHandler) for h in package_logger.handlers)
        assert not any(isinstance(h, logging.handlers.RotatingFileHandler)
                       for h in package_logger.handlers)

    def test_json_console(self, restore_logging):
        """Test sortie console JSON"""
        package_logger = setup_logging(Settings(_env_file=None, log_json=True))

        assert not any(isinstance(h, RichHandler) for h in package_logger.handlers)
        assert any(isinstance(h.formatter, JSONFormatter) for h in package_logger.handlers)

    def test_setup_is_idempotent(self, restore_logging):
        """Test que la reconfiguration ne duplique pas les handlers"""
        setup_logging(Settings(_env_file=None))
        package_logger = setup_logging(Settings(_env_file=None))

        assert len(package_logger.handlers) == 1

    def test_file_handler_writes_json(self, tmp_path, restore_logging):
        """Test écriture des logs JSON dans le fichier"""
        log_file = tmp_path / "logs" / "genalgo.log"
        package_logger = setup_logging(Settings(_env_file=None, log_file=log_file))

        get_logger("genalgo.tests").info("hello", extra={"extra_data": {"run_id": "r1", "generation": 4, "best_rank": 2.5}})
        for handler in package_logger.handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").strip().splitlines()
        record = json.loads(lines[-1])
        assert record["message"] == "hello"
        assert record["level"] == "INFO"
        assert record["logger"] == "genalgo.tests"
        assert record["run_id"] == "r1"
        assert record["run"] == {"generation": 4, "best_rank": 2.5}

    def test_root_logger_untouched(self, restore_logging):
        """Test que le logger racine n'est pas modifié"""
        root_handlers = list(logging.getLogger().handlers)

        setup_logging(Settings(_env_file=None))

        assert logging.getLogger().handlers == root_handlers

    def test_get_logger_with_extra_data(self):
        """Test adaptateur avec données extra"""
        logger = get_logger("genalgo.tests", {"run_id": "abc"})

        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra == {"extra_data": {"run_id": "abc"}}
        assert isinstance(get_logger("genalgo.tests"), logging.Logger)

    def test_json_formatter_exception(self):
        """Test formatage d'une exception"""
        try:
            raise ValueError("bad")
        except ValueError:
            record = logging.LogRecord("genalgo", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "failed"
        assert "ValueError: bad" in data["exception"]

    def test_event_logger_binds_context(self, caplog):
        """Test des événements structlog"""
        caplog.set_level(logging.DEBUG, logger="genalgo")

        get_event_logger("genalgo.tests", run="r1").info("something_happened", value=3)

        messages = [r.getMessage() for r in caplog.records if r.name == "genalgo.tests"]
        event = json.loads(messages[-1])
        assert event["event"] == "something_happened"
        assert event["run"] == "r1"
        assert event["value"] == 3


class TestStructlogIsolation:
    """Tests que la configuration structlog de l'application hôte est préservée"""

    @pytest.fixture
    def host_structlog(self):
        """Configuration structlog posée par une application hôte"""
        processors = [structlog.processors.KeyValueRenderer()]
        structlog.configure(processors=processors)
        yield processors
        structlog.reset_defaults()

    def test_setup_logging_keeps_host_processors(self, host_structlog, restore_logging):
        """Test que setup_logging ne reconfigure pas structlog"""
        setup_logging(Settings(_env_file=None))

        assert structlog.get_config()["processors"] == host_structlog

    def test_default_setup_keeps_host_processors(self, host_structlog, restore_logging):
        """Test de l'initialisation par défaut (celle exécutée à l'import)"""
        setup_logging()
        get_event_logger("genalgo.tests").debug("ignored")

        assert structlog.get_config()["processors"] == host_structlog

    def test_event_logger_uses_local_chain(self, host_structlog, caplog):
        """Test que les événements genalgo restent en JSON malgré la config hôte"""
        caplog.set_level(logging.DEBUG, logger="genalgo")

        get_event_logger("genalgo.tests", run="r2").info("isolated", value=1)

        messages = [r.getMessage() for r in caplog.records if r.name == "genalgo.tests"]
        event = json.loads(messages[-1])
        assert event["event"] == "isolated"
        assert event["run"] == "r2"
        assert structlog.get_config()["processors"] == host_structlog


class TestJSONFormatterRunFields:
    """Tests du regroupement des champs d'exécution"""

    def test_run_fields_grouped(self):
        record = logging.LogRecord("genalgo.genetic.solver", logging.INFO, __file__, 1, "Generation 3", None, None)
        record.extra_data = {"generation": 3, "top_rank": 5.0, "best_rank": 6.0, "improved": False, "seed": 7}

        data = json.loads(JSONFormatter().format(record))

        assert data["run"] == {"generation": 3, "top_rank": 5.0, "best_rank": 6.0, "improved": False}
        assert data["seed"] == 7
        assert "generation" not in data

    def test_no_run_key_without_run_fields(self):
        record = logging.LogRecord("genalgo", logging.INFO, __file__, 1, "plain", None, None)

        assert "run" not in json.loads(JSONFormatter().format(record))


class TestPackageExports:
    """Tests des exports explicites du paquet"""

    def test_all_names_resolve(self):
        import genalgo

        for name in genalgo.__all__:
            assert getattr(genalgo, name) is not None
        assert genalgo.solve is genalgo.genetic.solve
        assert "GeneticSolver" in genalgo.__all__


class TestExceptions:
    """Tests pour la hiérarchie d'exceptions"""

    def test_hierarchy(self):
        assert issubclass(ConfigurationError, GenAlgoError)
        assert issubclass(ConfigurationError, ValueError)
        assert issubclass(EmptyPopulationError, LookupError)

    def test_checks(self):
        assert check_probability("p", 1) == 1.0
        assert check_positive("n", 3) == 3
        with pytest.raises(ConfigurationError):
            check_probability("p", 1.01)
        with pytest.raises(ConfigurationError):
            check_positive("n", 0)
        with pytest.raises(ConfigurationError):
            check_positive("n", 2.5)
