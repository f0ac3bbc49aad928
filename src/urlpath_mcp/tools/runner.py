"""Shared execution path for the codec tools.

Each tool call gets a request id, validated input, timing, a metrics record
and a discriminated-union response dict.
"""

import time
import uuid
from collections.abc import Callable
from typing import Any

from ..codec import PathContext
from ..config import get_config
from ..logging_config import get_logger, request_id_var
from ..metrics import get_metrics_collector
from ..validation import ValidationError, validate_os_family, validate_path_input

logger = get_logger("tools.runner")

Transform = Callable[[str, PathContext | None], str]


async def run_codec_tool(
    operation: str,
    value: Any,
    transform: Transform,
    *,
    os_family: str | None = None,
    context_aware: bool = True,
) -> dict[str, Any]:
    """
    Validate input, apply a codec transform and build the tool response.

    Args:
        operation: Metrics operation name (decode, encode, normalize)
        value: Raw tool argument
        transform: Function of (text, context) returning the result string
        os_family: Optional "windows"/"posix" override for the context
        context_aware: Whether the transform uses a PathContext; when False
                       os_family is ignored and context is None

    Returns:
        {"status": "success", "result": ..., ["os_family": ...]} or
        {"status": "error", "error_code": ..., "message": ...}
    """
    token = request_id_var.set(uuid.uuid4().hex[:12])
    start = time.perf_counter()
    success = False
    try:
        input_length = len(value) if isinstance(value, str) else None
        logger.info(
            f"{operation} called",
            extra={"operation": operation, "input_length": input_length},
        )

        config = get_config()
        try:
            text = validate_path_input(value, max_length=config.max_input_length)
            context = validate_os_family(os_family) if context_aware else None
        except ValidationError as e:
            logger.warning(
                f"Input validation failed: {e}",
                extra={"operation": operation, "error_code": "validation_error"},
            )
            return e.to_error_response()

        try:
            result = transform(text, context)
        except Exception as e:
            logger.error(
                f"Unexpected error during {operation}: {e}",
                exc_info=True,
                extra={"operation": operation, "error_code": "execution_error"},
            )
            return {
                "status": "error",
                "error_code": "execution_error",
                "message": f"Unexpected error during {operation}: {e}",
            }

        success = True
        response: dict[str, Any] = {"status": "success", "result": result}
        if context is not None:
            response["os_family"] = context.os_family.value
        return response
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        await get_metrics_collector().record(operation, duration_ms, success)
        logger.debug(
            f"{operation} finished: success={success}",
            extra={"operation": operation, "duration": round(duration_ms, 3)},
        )
        request_id_var.reset(token)
