"""Tests for environment helpers."""

import logging

import pytest

from slot_lru.config import CAPACITY_ENV_KEY, DEFAULT_CAPACITY, LOG_LEVEL_ENV_KEY
from slot_lru.exceptions import ConfigurationError
from slot_lru.utils.env import load_config, log_level_from_env, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoadConfig:
    """Test configuration loading from the environment."""
    
    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv(CAPACITY_ENV_KEY, raising=False)
        assert load_config().capacity == DEFAULT_CAPACITY
    
    def test_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv(CAPACITY_ENV_KEY, "  ")
        assert load_config().capacity == DEFAULT_CAPACITY
    
    def test_reads_capacity(self, monkeypatch):
        monkeypatch.setenv(CAPACITY_ENV_KEY, "16")
        assert load_config().capacity == 16
    
    @pytest.mark.parametrize("raw", ["zero", "1.5", "0", "-3"])
    def test_invalid_capacity(self, monkeypatch, raw):
        monkeypatch.setenv(CAPACITY_ENV_KEY, raw)
        with pytest.raises(ConfigurationError) as exc_info:
            load_config()
        assert exc_info.value.config_key == "capacity"
        assert str(exc_info.value).startswith("[CONFIG_ERROR]")


class TestLogLevel:
    """Test log level resolution."""
    
    def test_default_info(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV_KEY, raising=False)
        assert log_level_from_env() == logging.INFO
    
    def test_named_level(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_KEY, "debug")
        assert log_level_from_env() == logging.DEBUG
    
    def test_unknown_level(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_KEY, "chatty")
        assert log_level_from_env() == logging.INFO


class TestSetupLogging:
    """Test logging setup."""
    
    def test_console_and_file(self, tmp_path):
        log_file = tmp_path / "slot_lru.log"
        setup_logging(logging.DEBUG, log_file=str(log_file))
        
        logging.getLogger("slot_lru.test").debug("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()
        
        assert "hello" in log_file.read_text(encoding="utf-8")
        assert logging.getLogger().level == logging.DEBUG
    
    def test_unwritable_file_falls_back(self, tmp_path, capsys):
        setup_logging(logging.INFO, log_file=str(tmp_path / "missing" / "x.log"))
        assert "Could not open log file" in capsys.readouterr().err
        assert len(logging.getLogger().handlers) == 1


class TestStoreLogging:
    """Test store log output."""
    
    def test_eviction_logged(self, caplog):
        from slot_lru.core.store import LruStore
        
        store = LruStore(1)
        with caplog.at_level(logging.DEBUG, logger="slot_lru.core.store"):
            store.write("a", 1)
            store.write("b", 2)
        assert "Evicted key 'a'" in caplog.text
    
    def test_construction_logged(self, caplog):
        from slot_lru.core.store import LruStore
        
        with caplog.at_level(logging.DEBUG, logger="slot_lru.core.store"):
            LruStore(4)
        assert "Created LRU store (capacity=4)" in caplog.text
    
    def test_clear_logged(self, caplog):
        from slot_lru.core.store import LruStore
        
        store = LruStore(3)
        store.write("a", 1)
        with caplog.at_level(logging.DEBUG, logger="slot_lru.core.store"):
            store.clear()
        assert "Cleared LRU store (capacity=3)" in caplog.text
    
    def test_missing_delete_logged(self, caplog):
        from slot_lru.core.store import LruStore
        from slot_lru.exceptions import NotFoundError
        
        store = LruStore(2)
        with caplog.at_level(logging.DEBUG, logger="slot_lru.core.store"):
            with pytest.raises(NotFoundError):
                store.delete("ghost")
        assert "Delete of missing key 'ghost'" in caplog.text
    
    def test_key_repr_deferred_when_debug_off(self, caplog):
        from slot_lru.core.store import LruStore
        
        class Key:
            reprs = 0
            
            def __repr__(self):
                Key.reprs += 1
                return "Key()"
        
        store = LruStore(1)
        with caplog.at_level(logging.INFO, logger="slot_lru.core.store"):
            store.write(Key(), 1)
            store.write(Key(), 2)
        assert Key.reprs == 0
