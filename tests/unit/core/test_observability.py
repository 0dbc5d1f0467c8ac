"""Unit tests for tracing setup and span helpers."""

import pytest
from pytest_mock import MockerFixture

from stratum.core.config import ObservabilityConfig, Settings
from stratum.core.context import RequestContext
from stratum.core.observability import (
    LoguruSpanExporter,
    add_correlation_id_to_span,
    get_span_exporter,
    setup_tracing,
    trace_operation,
)


def _settings(**observability: object) -> Settings:
    return Settings(observability_config=ObservabilityConfig(**observability))


@pytest.mark.unit
class TestSpanExporter:
    """Exporter selection."""

    def test_console_uses_loguru(self) -> None:
        """Development traces go through Loguru."""
        exporter = get_span_exporter(_settings(exporter_type="console"))

        assert isinstance(exporter, LoguruSpanExporter)

    def test_none_disables_export(self) -> None:
        """The ``none`` exporter disables span export."""
        assert get_span_exporter(_settings(exporter_type="none")) is None

    def test_gcp_without_project(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """GCP export needs a project ID."""
        monkeypatch.delenv("GOOGLE_CLOUD_PROJECT", raising=False)

        assert get_span_exporter(_settings(exporter_type="gcp")) is None


@pytest.mark.unit
class TestTracing:
    """Provider setup and span helpers."""

    def test_disabled_tracing_installs_nothing(self, mocker: MockerFixture) -> None:
        """No provider is installed when tracing is off."""
        set_provider = mocker.patch(
            "stratum.core.observability.trace.set_tracer_provider"
        )

        setup_tracing(_settings(enable_tracing=False))

        set_provider.assert_not_called()

    def test_trace_operation_sets_attributes(self, mocker: MockerFixture) -> None:
        """Attributes are stringified and the correlation ID attached."""
        span = mocker.MagicMock()
        tracer = mocker.MagicMock()
        tracer.start_as_current_span.return_value.__enter__.return_value = span
        mocker.patch("stratum.core.observability.get_tracer", return_value=tracer)
        RequestContext.set_correlation_id("corr-1")

        with trace_operation("users.create", user_id=7) as current:
            assert current is span

        span.set_attribute.assert_any_call("user_id", "7")
        span.set_attribute.assert_any_call("correlation_id", "corr-1")

    def test_request_hook_copies_ids(self, mocker: MockerFixture) -> None:
        """The server hook copies correlation and request IDs onto the span."""
        span = mocker.Mock()
        span.is_recording.return_value = True
        RequestContext.set_correlation_id("corr-2")

        add_correlation_id_to_span(
            span, {"headers": [(b"x-request-id", b"req-abc")]}
        )

        span.set_attribute.assert_any_call("correlation_id", "corr-2")
        span.set_attribute.assert_any_call("request_id", "req-abc")
