import datetime
import logging
import time
from logging import LogRecord
from logging.config import dictConfig
from os import getpid
from threading import get_ident as get_thread_ident
from typing import Any, cast

from flask import Flask, Response, current_app, request
from pythonjsonlogger.core import LogData
from pythonjsonlogger.json import JsonFormatter

_QUIET_PATHS = frozenset({"/healthcheck"})


def _request_log_context() -> dict[str, Any]:
    return {
        "method": request.method,
        "url": request.url,
        "endpoint": request.endpoint,
        # `process` and `thread` are reserved LogRecord attributes, hence the trailing underscores.
        "process_": getpid(),
        "thread_": str(get_thread_ident()),
    }


def get_default_logging_config(app: Flask) -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "scalar_values_only": {
                "()": "app.logging.ScalarValuesOnlyFilter",
            },
        },
        "formatters": {
            "plaintext": {
                "()": "logging.Formatter",
                "fmt": "%(asctime)s %(levelname)s - %(message)s - from %(funcName)s() in %(filename)s:%(lineno)d",
            },
            "json": {
                "()": "app.logging.ApplicationJSONFormatter",
                "fmt": "%(name)s %(levelname)s - %(message)s - from %(funcName)s in %(pathname)s:%(lineno)d",
            },
        },
        "handlers": {
            "null": {
                "class": "logging.NullHandler",
            },
            # Sentry reads the message template rather than the formatted string, so no formatter is attached here.
            "sentry": {
                "class": "sentry_sdk.integrations.logging.SentryLogsHandler",
            },
            "default": {
                "filters": ["scalar_values_only"],
                "formatter": app.config["LOG_FORMATTER"],
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {
                "handlers": ["null"],
            },
            "werkzeug": {
                "disabled": True,
            },
            app.name: {
                "handlers": ["default", "sentry"],
                "level": app.config["LOG_LEVEL"],
            },
        },
    }


def init_app(app: Flask, log_config: dict[str, Any] | None = None) -> None:
    dictConfig(log_config or get_default_logging_config(app))
    attach_request_loggers(app)


def attach_request_loggers(app: Flask) -> None:
    @app.before_request
    def log_request_start() -> None:
        request.started_real_time = time.perf_counter()  # type: ignore[attr-defined]
        request.started_process_time = time.process_time()  # type: ignore[attr-defined]

        if request.path not in _QUIET_PATHS:
            context = _request_log_context()
            current_app.logger.info("--- %(method)s %(url)s", context, extra=context)

    @app.after_request
    def log_request_end(response: Response) -> Response:
        if request.path in _QUIET_PATHS:
            return response

        log_data = {
            "status": response.status_code,
            "duration_real": (
                time.perf_counter() - cast(float, request.started_real_time)
                if hasattr(request, "started_real_time")
                else 0.0
            ),
            "duration_process": (
                time.process_time() - cast(float, request.started_process_time)
                if hasattr(request, "started_process_time")
                else 0.0
            ),
            **_request_log_context(),
        }
        current_app.logger.info(
            "%(status)s %(method)s %(url)s - [real:%(duration_real).2fs] [process:%(duration_process).2fs]",
            log_data,
            extra=log_data,
        )
        return response


class ScalarValuesOnlyFilter(logging.Filter):
    """Refuse to interpolate anything but plain scalars (and dates) into log messages."""

    def filter(self, record: LogRecord) -> bool:
        args: dict[str, Any] | None
        if isinstance(record.args, tuple):
            args = record.args[0] if record.args and isinstance(record.args[0], dict) else None
        else:
            args = cast(dict[str, Any] | None, record.args)

        for value in (args or {}).values():
            if not isinstance(value, str | int | float | bool | datetime.date | None):
                raise ValueError(f"Attempt to log data type `{type(value)}` rejected by security policy.")
        return True


class ApplicationJSONFormatter(JsonFormatter):
    def formatTime(self, record: LogRecord, datefmt: str | None = None) -> str:
        if datefmt:
            return time.strftime(datefmt, self.converter(record.created))
        return (
            datetime.datetime.fromtimestamp(record.created, datetime.timezone.utc)
            .astimezone()
            .isoformat(sep=" ", timespec="milliseconds")
        )

    def process_log_record(self, log_record: LogData) -> LogData:
        if "asctime" in log_record:
            log_record["time"] = log_record.pop("asctime")
        log_record["logType"] = "application"
        return log_record
