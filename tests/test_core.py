"""Tests for logging setup, plugins and the plugin host."""

import json

import pytest
from loguru import logger

from texopt.config.materializer import ResolutionPolicy, ResolutionSource
from texopt.config.schema import LoggingSettings, Settings, encode_settings
from texopt.config.store import MemoryStore
from texopt.core.host import PluginHost
from texopt.core.logging import (
    disable_debug_logs,
    enable_debug_log,
    get_log_path,
    setup_logging,
)
from texopt.plugins.base import TexturePlugin
from texopt.plugins.texture_optimizer import TextureOptimizer
from texopt.plugins.texture_reapply import TextureReapply


@pytest.fixture(autouse=True)
def _drop_debug_sinks():
    yield
    disable_debug_logs()


def _debug_document(log_file: str) -> dict:
    doc = encode_settings(Settings())
    doc["textureSettings"]["logging"] = {"enableDebugLogs": True, "logFile": log_file}
    return doc


class TestLogging:
    def test_relative_log_path(self, tmp_path):
        path = get_log_path(LoggingSettings(), tmp_path)
        assert path == (tmp_path / "oxide" / "logs" / "texture_loader.log").resolve()

    def test_absolute_log_path(self, tmp_path):
        target = tmp_path / "abs.log"
        assert get_log_path(LoggingSettings(log_file=str(target)), "/elsewhere") == target.resolve()

    def test_disabled_adds_no_sink(self, tmp_path):
        assert enable_debug_log(LoggingSettings(), tmp_path) is None
        assert not (tmp_path / "oxide").exists()

    def test_debug_sink_writes_file(self, tmp_path):
        """Enabled debug logs go to the configured file."""
        settings = LoggingSettings(enable_debug_logs=True, log_file="logs/debug.log")
        path = enable_debug_log(settings, tmp_path)
        logger.debug("texture debug line")
        disable_debug_logs()
        assert path == (tmp_path / "logs" / "debug.log").resolve()
        assert "texture debug line" in path.read_text(encoding="utf-8")

    def test_same_path_added_once(self, tmp_path):
        settings = LoggingSettings(enable_debug_logs=True, log_file="once.log")
        enable_debug_log(settings, tmp_path)
        enable_debug_log(settings, tmp_path)
        logger.info("only once")
        disable_debug_logs()
        text = (tmp_path / "once.log").read_text(encoding="utf-8")
        assert text.count("only once") == 1

    def test_setup_logging_drops_debug_sinks(self, tmp_path):
        """Re-running setup removes file sinks added earlier."""
        settings = LoggingSettings(enable_debug_logs=True, log_file="reset.log")
        enable_debug_log(settings, tmp_path)
        logger.info("before reset")
        setup_logging(console_output=False)
        logger.info("after reset")
        text = (tmp_path / "reset.log").read_text(encoding="utf-8")
        assert "before reset" in text
        assert "after reset" not in text


class TestPlugins:
    def test_metadata(self):
        assert TextureOptimizer.title == "TextureOptimizer"
        assert TextureOptimizer.version == "0.2.0"
        assert TextureOptimizer.policy is ResolutionPolicy.SKIP_REWRITE_ON_VALID_LOAD
        assert TextureReapply.version == "0.1.0"
        assert TextureReapply.policy is ResolutionPolicy.TRUST_LOADED_ALWAYS

    def test_run_creates_and_reports(self, tmp_path, log_messages):
        """First start writes the default document and reports it."""
        store = MemoryStore()
        resolution = TextureOptimizer(store, tmp_path).run()
        assert resolution.source is ResolutionSource.CREATED
        assert store.read("texture_config") == encode_settings(Settings())
        assert "[TextureOptimizer] Max texture size: 1024px" in log_messages
        assert "[TextureOptimizer] MipBias: -1" in log_messages

    def test_report_lines_follow_resolution(self, tmp_path, log_messages):
        TextureReapply(MemoryStore(), tmp_path).on_ready()
        created = log_messages.index(
            "[TextureReapply] No texture_config.json found, creating default configuration..."
        )
        streaming = log_messages.index("[TextureReapply] Streaming enabled with priority balanced")
        assert created < streaming

    def test_run_enables_debug_log(self, tmp_path):
        """A document with debug logs on gets a file sink under the root."""
        store = MemoryStore({"texture_config": _debug_document("oxide/logs/texture_loader.log")})
        TextureOptimizer(store, tmp_path).run()
        disable_debug_logs()
        log_file = tmp_path / "oxide" / "logs" / "texture_loader.log"
        text = log_file.read_text(encoding="utf-8")
        assert "[TextureOptimizer] Detailed logs in oxide/logs/texture_loader.log" in text

    @pytest.mark.parametrize("log_file", ["", "logs_dir"])
    def test_unusable_log_file_still_reports(self, tmp_path, log_messages, log_file):
        """A debug log path that cannot be opened does not stop the report."""
        (tmp_path / "logs_dir").mkdir()
        store = MemoryStore({"texture_config": _debug_document(log_file)})
        TextureOptimizer(store, tmp_path).on_ready()
        assert any(m.startswith("[TextureOptimizer] Cannot open debug log") for m in log_messages)
        assert "[TextureOptimizer] MipBias: -1" in log_messages
        assert f"[TextureOptimizer] Detailed logs in {log_file}" in log_messages

    def test_repr(self, tmp_path):
        plugin = TextureReapply(MemoryStore(), tmp_path)
        assert repr(plugin) == "<TextureReapply TextureReapply v0.1.0>"


class TestPluginHost:
    def test_store_under_root(self, tmp_path):
        host = PluginHost(tmp_path)
        assert host.store.data_dir == tmp_path / "oxide" / "data"

    def test_server_initialized_runs_plugins(self, tmp_path, log_messages):
        """Both plugins share one document; the first start creates it."""
        host = PluginHost(tmp_path)
        host.load(TextureOptimizer)
        host.load(TextureReapply)
        host.server_initialized()

        path = tmp_path / "oxide" / "data" / "texture_config.json"
        assert json.loads(path.read_text(encoding="utf-8")) == encode_settings(Settings())
        assert any(m.startswith("[TextureOptimizer] No texture_config.json") for m in log_messages)
        assert "[TextureReapply] texture_config.json loaded successfully." in log_messages

    def test_server_initialized_once(self, tmp_path, log_messages):
        host = PluginHost(tmp_path)
        host.load(TextureOptimizer)
        host.server_initialized()
        count = len(log_messages)
        host.server_initialized()
        assert log_messages[count:] == ["Server already initialized, ignoring"]

    def test_failing_plugin_does_not_stop_others(self, tmp_path, log_messages):
        class Broken(TexturePlugin):
            title = "Broken"

            def on_ready(self):
                raise RuntimeError("boom")

        host = PluginHost(tmp_path)
        host.load(Broken)
        host.load(TextureOptimizer)
        host.server_initialized()
        assert "Broken failed during startup" in log_messages
        assert "[TextureOptimizer] MipBias: -1" in log_messages

    def test_shutdown_closes_debug_logs(self, tmp_path):
        """After shutdown the debug log file no longer receives lines."""
        store_doc = _debug_document("oxide/logs/texture_loader.log")
        host = PluginHost(tmp_path)
        host.store.write("texture_config", store_doc)
        host.load(TextureOptimizer)
        host.server_initialized()
        host.shutdown()
        logger.info("after shutdown")
        text = (tmp_path / "oxide" / "logs" / "texture_loader.log").read_text(encoding="utf-8")
        assert "[TextureOptimizer] MipBias: -1" in text
        assert "after shutdown" not in text

    def test_plugins_in_load_order(self, tmp_path):
        host = PluginHost(tmp_path)
        host.load(TextureReapply)
        host.load(TextureOptimizer)
        assert [p.title for p in host.plugins] == ["TextureReapply", "TextureOptimizer"]
