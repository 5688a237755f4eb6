# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `Dispatcher`, which decides whether a command invocation runs, needs
more input, or is rejected, and then runs it.

`Dispatcher.exec()` builds a `Request` and checks its status:

- ERROR: the request is rejected without running the command.
- INCOMPLETE: the completion provider is awaited to collect the missing
  values, then the status is checked again. The command runs only if the
  request has become VALID.
- VALID: the command runs straight away.

A completion provider is any `async def provider(request) -> None`. It fills
in `request.args` and returns. It can give up by calling `request.cancel()`
or raising `CancelSignal`. Only one completion cycle may be in flight for a
request at a time.

Exceptions raised by a command body are logged, printed and recorded on the
request. They are not re-raised.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable

from rich.console import Console

from argline.command import Command
from argline.command_registry import CommandRegistry
from argline.console import console as default_console
from argline.exceptions import ReentrantRequestError
from argline.logger import logger
from argline.request import Request, RequestState
from argline.signals import CancelSignal
from argline.status import Status
from argline.themes import OneColors
from argline.utils import accepts_keyword, ensure_async

ArgsProvider = Callable[[Request], Awaitable[None]]


class Dispatcher:
    """
    Runs commands from a `CommandRegistry`.

    Args:
        registry (CommandRegistry): Where command names are looked up.
        args_provider (ArgsProvider | None): Default completion provider for
            INCOMPLETE requests. Without one, INCOMPLETE requests are rejected.
        console (Console | None): Where errors are reported.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        args_provider: ArgsProvider | None = None,
        console: Console | None = None,
    ) -> None:
        self.registry = registry
        self.args_provider = args_provider
        self.console: Console = console or default_console

    async def exec(
        self,
        command: Command | str,
        args: dict[str, Any] | None = None,
        typed: str | None = None,
        args_provider: ArgsProvider | None = None,
    ) -> Request | None:
        """
        Check, complete if needed, and run a command.

        Args:
            command: A Command or the name of a registered one.
            args: Raw argument text keyed by parameter name.
            typed: The command line as typed, for bookkeeping.
            args_provider: Overrides the dispatcher's completion provider.

        Returns:
            Request | None: The request, or None if the command is unknown.
        """
        if isinstance(command, str):
            name = command
            resolved = self.registry.get_command(name)
            if resolved is None:
                logger.warning("Unknown command '%s'", name)
                return None
            command = resolved

        request = Request(command, args, typed)
        status = request.get_status()
        logger.debug("[%s] Initial status: %s", command.name, status)

        if status is Status.ERROR:
            self._reject(request, "Invalid parameter(s)")
            return request

        if status is Status.INCOMPLETE:
            await self.complete(request, args_provider)
            return request

        await self._execute(request)
        return request

    async def complete(
        self, request: Request, args_provider: ArgsProvider | None = None
    ) -> Request:
        """
        Run one completion cycle on `request`, then execute it if it became VALID.

        Raises:
            ReentrantRequestError: If a completion cycle is already running for
                this request.
        """
        if request.collecting:
            raise ReentrantRequestError(
                f"Request for '{request.command.name}' is already collecting arguments"
            )
        provider = args_provider or self.args_provider
        if provider is None:
            self._reject(request, "Missing parameter(s) and no way to ask for them")
            return request

        try:
            with request.collecting_args():
                await provider(request)
        except CancelSignal:
            logger.info("[%s] Argument collection cancelled.", request.command.name)
            request.cancel()

        if request.cancelled:
            request.state = RequestState.CANCELLED
            request.done_with_error()
            return request

        status = request.get_status()
        if status is Status.VALID:
            await self._execute(request)
        else:
            self._reject(request, f"Parameter(s) still {status} after completion")
        return request

    def _reject(self, request: Request, reason: str) -> None:
        missing = ", ".join(param.name for param in request.missing_params())
        logger.error("[%s] %s: %s", request.command.name, reason, missing)
        self.console.print(
            f"[{OneColors.DARK_RED}]❌ {request.command.name}: {reason}[/] {missing}"
        )
        request.state = RequestState.REJECTED
        request.done_with_error()

    async def _execute(self, request: Request) -> None:
        command = request.command
        request.state = RequestState.EXECUTING
        if command.exec is None:
            logger.warning("[%s] Command has no exec function.", command.name)
            request.state = RequestState.DONE
            request.done()
            return

        kwargs = request.get_values()
        if accepts_keyword(command.exec, "request"):
            kwargs["request"] = request

        logger.info("[%s] Starting -> %r", command.name, kwargs)
        try:
            request.result = await ensure_async(command.exec)(**kwargs)
        except Exception as error:
            logger.error(
                "[%s] Error (%s): %s",
                command.name,
                type(error).__name__,
                error,
                exc_info=True,
            )
            self.console.print(
                f"[{OneColors.DARK_RED}]An error occurred while executing "
                f"{command.name}:[/] {error}"
            )
            request.exception = error
            request.state = RequestState.DONE
            request.done_with_error(error)
            return

        request.state = RequestState.DONE
        request.done()
        logger.debug("[%s] Finished in %.3fs", command.name, request.duration or 0.0)
