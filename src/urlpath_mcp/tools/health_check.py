"""Health check tool implementation.

Reports configuration, the effective OS family and per-operation metrics.
"""

from typing import Any

from ..codec import encode_path, get_default_context
from ..config import get_config
from ..logging_config import get_logger
from ..metrics import get_metrics_collector

logger = get_logger("tools.health_check")

# Input whose encoding exercises the safe table and scheme handling
_SELF_TEST_INPUT = "jar:file:/a b.jar!/c.class"
_SELF_TEST_EXPECTED = "jar:file:/a%20b.jar!/c.class"


async def health_check() -> dict[str, Any]:
    """
    Check server health.

    Returns:
        Healthy:
            {
                "status": "healthy",
                "os_family": "posix",
                "config": {
                    "log_level": "INFO",
                    "log_mode": "stderr",
                    "os_family": "auto",
                    "max_input_length": 65536,
                    "enable_health_check": true
                },
                "uptime_seconds": 12.3,
                "metrics": {"uptime_seconds": 12.3, "operations": [...]}
            }

        Degraded (codec self-test produced an unexpected result):
            {"status": "degraded", "diagnostics": ["..."], ...}

        Error:
            {"status": "error", "error_code": "execution_error", "message": "..."}
    """
    logger.info("health_check called")

    try:
        config = get_config()
        context = get_default_context()
        self_test = encode_path(_SELF_TEST_INPUT, context)
    except Exception as e:
        logger.error(f"Health check failed: {e}", exc_info=True)
        return {
            "status": "error",
            "error_code": "execution_error",
            "message": f"Health check failed: {e}",
        }

    diagnostics: list[str] = []
    if self_test != _SELF_TEST_EXPECTED:
        msg = f"Encoder self-test returned {self_test!r}, expected {_SELF_TEST_EXPECTED!r}"
        diagnostics.append(msg)
        logger.warning(msg)

    config_summary = {
        "log_level": config.log_level,
        "log_mode": config.log_mode,
        "os_family": config.os_family,
        "max_input_length": config.max_input_length,
        "enable_health_check": config.enable_health_check,
    }

    metrics_collector = get_metrics_collector()
    uptime_seconds = round(metrics_collector.uptime_seconds(), 2)
    response: dict[str, Any] = {
        "status": "degraded" if diagnostics else "healthy",
        "os_family": context.os_family.value,
        "config": config_summary,
        "uptime_seconds": uptime_seconds,
        "metrics": {
            "uptime_seconds": uptime_seconds,
            "operations": [m.to_dict() for m in metrics_collector.get_all_metrics()],
        },
    }
    if diagnostics:
        response["diagnostics"] = diagnostics

    logger.info("Health check completed")
    return response
