# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `Shell`, the interactive read-dispatch loop for an Argline
`CommandRegistry`.

Each line typed at the prompt is bound with `CommandLine` and handed to a
`Dispatcher`. Missing arguments are asked for with `prompt_args_provider`.

Built-in words:
- `help [command]`: List the commands, or describe one command's parameters.
- `exit` / `quit`: Leave the shell. Ctrl-C and Ctrl-D do the same.
"""
from __future__ import annotations

from functools import cached_property

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import AnyFormattedText, FormattedText
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout
from prompt_toolkit.shortcuts import CompleteStyle
from rich import box
from rich.console import Console
from rich.table import Table

from argline.args_provider import prompt_args_provider
from argline.command import Command
from argline.command_line import CommandLine
from argline.command_registry import CommandRegistry
from argline.completer import ArglineCompleter
from argline.console import console as default_console
from argline.dispatcher import Dispatcher
from argline.logger import logger
from argline.parameter import MISSING
from argline.request import Request
from argline.signals import CancelSignal, QuitSignal
from argline.themes import OneColors
from argline.validators import CommandLineValidator

EXIT_WORDS = ("exit", "quit")
HELP_WORD = "help"
BUILTINS = (HELP_WORD, *EXIT_WORDS)


class Shell:
    """
    Interactive shell over a CommandRegistry.

    Args:
        registry (CommandRegistry): The commands the shell can run.
        dispatcher (Dispatcher | None): Runs the commands. Defaults to one that
            prompts for missing arguments.
        prompt (AnyFormattedText): The prompt message.
        console (Console | None): Where help and errors are printed.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        dispatcher: Dispatcher | None = None,
        prompt: AnyFormattedText = FormattedText([(OneColors.BLUE_b, "argline > ")]),
        console: Console | None = None,
    ) -> None:
        self.registry = registry
        self.console: Console = console or default_console
        self.dispatcher: Dispatcher = dispatcher or Dispatcher(
            registry, args_provider=prompt_args_provider, console=self.console
        )
        self.prompt = prompt
        self.history = InMemoryHistory()
        self.last_request: Request | None = None

    @cached_property
    def prompt_session(self) -> PromptSession:
        """Returns the prompt session for the shell."""
        return PromptSession(
            message=self.prompt,
            history=self.history,
            multiline=False,
            completer=ArglineCompleter(self.registry, BUILTINS),
            complete_style=CompleteStyle.COLUMN,
            validator=CommandLineValidator(self.registry, BUILTINS),
            validate_while_typing=False,
            interrupt_exception=QuitSignal,
            eof_exception=QuitSignal,
        )

    def _command_table(self) -> Table:
        table = Table(title="Commands", box=box.SIMPLE, header_style=OneColors.CYAN_b)
        table.add_column("Command", style=OneColors.BLUE_b, no_wrap=True)
        table.add_column("Description")
        for command in self.registry.get_commands():
            table.add_row(command.name, command.get_description())
        table.add_row(HELP_WORD, "Show this help, or help for one command")
        table.add_row(" / ".join(EXIT_WORDS), "Leave the shell")
        return table

    def _parameter_table(self, command: Command) -> Table:
        table = Table(
            title=f"{command.name}: {command.get_description()}",
            box=box.SIMPLE,
            header_style=OneColors.CYAN_b,
        )
        table.add_column("Parameter", style=OneColors.BLUE_b, no_wrap=True)
        table.add_column("Flag", style=OneColors.GREEN)
        table.add_column("Type")
        table.add_column("Default")
        table.add_column("Description")
        for param in command.params:
            if param.default_value is MISSING:
                default = "(required)"
            else:
                default = param.type.stringify(param.default_value) or "-"
            table.add_row(
                param.name,
                f"--{param.name}",
                param.type.name,
                default,
                param.description,
            )
        return table

    def render_help(self, name: str | None = None) -> None:
        if name is None:
            self.console.print(self._command_table())
            return
        command = self.registry.get_command(name)
        if command is None:
            self.console.print(f"[{OneColors.DARK_RED}]❌ Unknown command '{name}'[/]")
            return
        self.console.print(self._parameter_table(command))

    async def run_line(self, text: str) -> bool:
        """
        Handle one line of input.

        Returns:
            bool: False when the shell should stop.
        """
        words = text.split()
        if not words:
            return True
        if words[0] in EXIT_WORDS:
            logger.info("Exit requested.")
            return False
        if words[0] == HELP_WORD and words[0] not in self.registry:
            self.render_help(words[1] if len(words) > 1 else None)
            return True

        line = CommandLine.parse(text, self.registry)
        if line.command is None:
            logger.info("Invalid command '%s'.", words[0])
            self.console.print(f"[{OneColors.DARK_RED}]❌ {line.get_message()}[/]")
            return True
        if line.unassigned:
            logger.info("[%s] %s", line.command.name, line.get_message())
            self.console.print(f"[{OneColors.DARK_RED}]❌ {line.get_message()}[/]")
            return True

        self.last_request = await self.dispatcher.exec(line.command, line.args, typed=text)
        request = self.last_request
        if request is not None and request.result is not None:
            self.console.print(request.result)
        return True

    async def run(self) -> None:
        """Runs the shell until the user quits."""
        logger.info("Starting shell with %d command(s).", len(self.registry))
        try:
            while True:
                try:
                    with patch_stdout(raw=True):
                        text = await self.prompt_session.prompt_async()
                    if not await self.run_line(text):
                        break
                except QuitSignal:
                    logger.info("[QuitSignal]. <- Exiting shell.")
                    break
                except CancelSignal:
                    logger.info("[CancelSignal]. <- Returning to the prompt.")
        finally:
            logger.info("Exiting shell.")
