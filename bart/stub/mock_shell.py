from __future__ import annotations

from typing import Optional
from collections import deque
from dataclasses import dataclass
import logging

from bart.shell import Shell, ExecResult
from bart.utils import sub_logger

LOGGER = logging.getLogger('bart.stub')


@dataclass(frozen=True)
class _Expectation:
    method: str
    command: str
    result: object

    def __repr__(self) -> str:
        return f'{self.method}({self.command!r})'


class MockShell:
    """A scripted stand-in for ``Shell``.

    Command running methods (``execute``, ``shell_exec`` and ``passthru``) answer only the commands
    registered beforehand through the matching ``expect_*`` method. Expectations are matched by
    command, not by registration order, and each one is consumed by a single call.
    Every other ``Shell`` attribute is looked up on ``delegate``.

    Example::

        shell = MockShell()
        shell.expect_execute('ls', ['a.txt', 'b.txt']).expect_passthru('make', 2)
        ...
        shell.verify()
    """
    def __init__(self, delegate:Optional[Shell]=None, *, logger:Optional[logging.Logger]=None) -> None:
        self.delegate = delegate
        self.logger = logger if logger else LOGGER
        self._expectations:dict[tuple[str,str],deque[_Expectation]] = dict()

    def expect_execute(self, command:str, output:list[str], exit_code:int=0,
                       last_line:Optional[str]=None) -> MockShell:
        output = list(output)
        if last_line is None:
            last_line = output[-1] if output else ''
        return self._expect('execute', command, ExecResult(output, last_line, exit_code))

    def expect_shell_exec(self, command:str, output:str) -> MockShell:
        return self._expect('shell_exec', command, output)

    def expect_passthru(self, command:str, exit_code:int=0) -> MockShell:
        return self._expect('passthru', command, exit_code)

    def execute(self, command:str) -> ExecResult:
        result = self._consume('execute', command)
        return ExecResult(list(result.output), result.last_line, result.exit_code)

    def shell_exec(self, command:str) -> str:
        return self._consume('shell_exec', command)

    def passthru(self, command:str) -> int:
        return self._consume('passthru', command)

    def verify(self) -> None:
        """Checks that every registered expectation has been consumed.

        Raises:
            AssertionError: if some expectations were never met.
        """
        remains = [exp for exps in self._expectations.values() for exp in exps]
        if remains:
            raise AssertionError(f"Some MockShell commands not run: {remains}")

    def _expect(self, method:str, command:str, result:object) -> MockShell:
        exp = _Expectation(method, command, result)
        self._expectations.setdefault((method, command), deque()).append(exp)
        return self

    def _consume(self, method:str, command:str) -> object:
        exps = self._expectations.get((method, command))
        if not exps:
            self.logger.warning(f'unexpected command: {method}({command!r})')
            raise AssertionError(f"MockShell has no expectation for {method}({command!r})")

        exp = exps.popleft()
        if not exps:
            del self._expectations[(method, command)]
        sub_logger(self.logger, method).debug(f'consumed: {exp}')
        return exp.result

    def __getattr__(self, name:str) -> object:
        # only called for attributes not found on MockShell itself
        delegate = self.__dict__.get('delegate')
        if delegate is None:
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}' "
                                 f"and no delegate to forward it to")
        return getattr(delegate, name)
