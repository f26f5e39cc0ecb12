"""
Executor for SceneScript command text.

Drives the pipeline text -> tokens -> invocation -> registry lookup ->
validation -> defaults -> execute for single commands and semicolon-separated
batches. Every failure is reported as a failing CommandResult; no exception
escapes ``execute``, ``execute_batch`` or ``execute_parsed``.
"""

import logging

from scenescript.commands.base import CommandResult
from scenescript.commands.registry import CommandRegistry
from scenescript.commands.validation import check_parameters
from scenescript.exceptions.core import (
    ErrorKind,
    SceneScriptError,
    UnknownCommandError,
)
from scenescript.execution.config import ExecutorConfig
from scenescript.execution.context import CommandContext
from scenescript.parsing.parser import CommandParser, ParsedInvocation

logger = logging.getLogger(__name__)


class CommandExecutor:
    """Runs command text against a registry and an execution context.

    The registry is injected and only read; the context is supplied per call
    and is the only state commands mutate. No locking is done: a context must
    not be shared by concurrent calls.

    Params:
        registry: Commands available to invocations
        config: Executor behavior, defaults to ExecutorConfig()
    """

    def __init__(self, registry: CommandRegistry, config: ExecutorConfig | None = None):
        self.registry = registry
        self.config = config or ExecutorConfig()
        self.parser = CommandParser(lenient_values=self.config.lenient_values)

    def execute(self, text: str, context: CommandContext) -> CommandResult:
        """
        Parse and run a single command.

        Params:
            text: Command text
            context: Context the command runs against

        Returns:
            The command's result, or a failure describing why it did not run
        """
        return self.execute_parsed(self.parser.parse_command(text), context)

    def execute_batch(self, text: str, context: CommandContext) -> list[CommandResult]:
        """
        Parse and run a semicolon-separated batch in order.

        Every invocation runs against the same context; a failing invocation does
        not stop the ones after it.

        Returns:
            One result per invocation, in invocation order
        """
        results = []
        for index, invocation in enumerate(self.parser.parse_commands(text)):
            result = self.execute_parsed(invocation, context)
            if not result.success:
                logger.warning("Batch entry %d failed: %s", index, result.message)
            results.append(result)
        return results

    def execute_parsed(
        self, invocation: ParsedInvocation, context: CommandContext
    ) -> CommandResult:
        """
        Run an already parsed invocation.

        Params:
            invocation: Parsed command
            context: Context the command runs against

        Returns:
            The command's result, or a failure describing why it did not run
        """
        if not invocation.valid:
            kind = invocation.error_kind or ErrorKind.SYNTAX
            label = "Lexical error" if kind is ErrorKind.LEX else "Syntax error"
            return CommandResult.failure(f"{label}: {invocation.error}", kind)

        name = invocation.command_name
        command = self.registry.get(name)
        if command is None:
            return CommandResult.from_error(UnknownCommandError(name))

        params = invocation.parameters
        # Faults raised by any command hook become failure results
        try:
            validation = command.validate_parameters(params)
            if not validation.success:
                return validation

            if self.config.strict_parameters:
                check_parameters(name, command.get_parameters(), params, strict=True)

            logger.debug("Executing %s", invocation)
            return command.execute(command.apply_defaults(params), context)
        except SceneScriptError as e:
            return CommandResult.from_error(e)
        except Exception as e:
            logger.exception("Command '%s' raised an unexpected error", name)
            return CommandResult.failure(f"{name}: internal error: {e}", ErrorKind.EXECUTION)
