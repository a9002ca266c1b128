"""Agent middleware for logging tool invocations.

A host agent can install this function middleware to get structured logs
for every Scribe Agent tool call.
"""

import logging
import time
from typing import Awaitable, Callable

from agent_framework import FunctionInvocationContext

logger = logging.getLogger(__name__)

SENSITIVE_ARGUMENTS = ("token", "api_key", "password", "secret")
RESULT_PREVIEW_CHARS = 200


def _safe_arguments(arguments) -> dict:
    if hasattr(arguments, "model_dump"):
        arguments = arguments.model_dump()
    if not isinstance(arguments, dict):
        return {}
    return {k: v for k, v in arguments.items() if k not in SENSITIVE_ARGUMENTS}


async def logging_function_middleware(
    context: FunctionInvocationContext,
    next: Callable[[FunctionInvocationContext], Awaitable[None]],
) -> None:
    """Function middleware that logs tool execution.

    Logs the tool name before the call, its arguments at debug level, the
    duration once it completes, and the error when it raises. Errors are
    re-raised unchanged.

    Args:
        context: Function invocation context containing tool name, arguments, and result
        next: Next middleware or the actual function execution
    """
    tool_name = context.function.name if hasattr(context.function, "name") else str(context.function)

    logger.info(f"[Tool Call] {tool_name}")

    safe_args = _safe_arguments(getattr(context, "arguments", None))
    if safe_args:
        logger.debug(f"[Tool Args] {safe_args}")

    start_time = time.time()

    try:
        await next(context)

    except Exception as e:
        logger.error(f"[Tool Error] {tool_name}: {str(e)}")
        raise

    finally:
        duration = time.time() - start_time
        logger.info(f"[Tool Complete] {tool_name} ({duration:.2f}s)")

        if getattr(context, "result", None):
            result_preview = str(context.result)[:RESULT_PREVIEW_CHARS]
            logger.debug(f"[Tool Result] {result_preview}...")
