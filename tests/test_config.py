"""Tests for configuration and logging setup."""

import json
import logging

import pytest

from pipetrace.config import ClusterSettings, TraceConfig
from pipetrace.logging_config import JSONFormatter


class TestTraceConfig:
    """Tests for TraceConfig."""

    def test_defaults(self):
        config = TraceConfig()
        assert config.padding == 1_000_000
        assert config.offset_start_time is False
        assert config.include_pod_events is False
        assert config.include_containers is False
        assert config.fetch_concurrency == 1

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PIPETRACE_PADDING", "5")
        monkeypatch.setenv("PIPETRACE_OFFSET_START_TIME", "true")
        monkeypatch.setenv("PIPETRACE_INCLUDE_POD_EVENTS", "1")
        monkeypatch.delenv("PIPETRACE_INCLUDE_CONTAINERS", raising=False)
        monkeypatch.delenv("PIPETRACE_FETCH_CONCURRENCY", raising=False)

        config = TraceConfig.from_env()

        assert config.padding == 5
        assert config.offset_start_time is True
        assert config.include_pod_events is True
        assert config.include_containers is False

    def test_bad_env_integer(self, monkeypatch):
        monkeypatch.setenv("PIPETRACE_PADDING", "lots")
        with pytest.raises(ValueError):
            TraceConfig.from_env()

    def test_overrides_skip_none(self):
        config = TraceConfig(padding=9).with_overrides(padding=None, include_containers=True)
        assert config.padding == 9
        assert config.include_containers is True

    def test_rejects_negative_padding(self):
        with pytest.raises(ValueError):
            TraceConfig(padding=-1)


class TestClusterSettings:
    """Tests for ClusterSettings."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PIPETRACE_NAMESPACE", "ci")
        monkeypatch.setenv("PIPETRACE_REQUEST_TIMEOUT", "30")
        monkeypatch.delenv("PIPETRACE_TEKTON_VERSION", raising=False)
        monkeypatch.delenv("PIPETRACE_KUBE_CONTEXT", raising=False)

        settings = ClusterSettings.from_env()

        assert settings.namespace == "ci"
        assert settings.version == "v1beta1"
        assert settings.request_timeout == 30
        assert settings.context is None


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_formats_record(self):
        record = logging.LogRecord("pipetrace.test", logging.WARNING, __file__, 10, "lane %d", (2,), None)
        record.context = {"pipelinerun": "x"}

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "WARNING"
        assert data["logger"] == "pipetrace.test"
        assert data["message"] == "lane 2"
        assert data["context"] == {"pipelinerun": "x"}
