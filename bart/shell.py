from __future__ import annotations

from typing import Union, Optional
from dataclasses import dataclass, field
from pathlib import Path
import logging
import subprocess
from subprocess import PIPE
import socket
import tempfile
import configparser

from omegaconf import OmegaConf

from bart import config
from bart.types import InvalidIniFileError

LOGGER = logging.getLogger('bart.shell')

_GLOBAL_SECTION = '__global__'
_NO_DEFAULT_SECTION = '\x00'


@dataclass(frozen=True)
class ExecResult:
    """Outcome of ``Shell.execute()``.

    Attributes:
        output (list[str]): lines written to stdout, trailing whitespace removed.
        last_line (str): the last line of ``output`` ('' if there is none).
        exit_code (int): exit status of the command.
    """
    output: list[str] = field(default_factory=list)
    last_line: str = ''
    exit_code: int = 0

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


def create_shell_from_conf(conf:OmegaConf) -> Shell:
    """Create a Shell from OmegaConf configuration.

    Recognized keys are 'executable', 'encoding', 'errors', 'temp_dir', 'temp_prefix' and 'timeout'.
    Every key is optional.

    Args:
        conf (OmegaConf): OmegaConf configuration.

    Returns:
        Shell: a Shell object.
    """
    conf = config.to_conf(conf)
    unknowns = set(conf.keys()) - set(Shell.OPTION_KEYS)
    if unknowns:
        raise ValueError(f"unknown shell options: {sorted(unknowns)}")
    options = {k:config.get(conf, k) for k in Shell.OPTION_KEYS if config.exists(conf, k)}
    return Shell(**options)


class Shell:
    """A thin wrapper around shell and file-system primitives of the OS.

    Code that talks to the OS through a ``Shell`` object can be tested with
    ``bart.stub.MockShell`` in its place.
    """
    OPTION_KEYS = ('executable', 'encoding', 'errors', 'temp_dir', 'temp_prefix', 'timeout')

    def __init__(self, *, executable:Optional[str]=None, encoding:str='utf-8', errors:str='replace',
                 temp_dir:Optional[Union[str,Path]]=None, temp_prefix:str='bart-',
                 timeout:Optional[float]=None, logger:Optional[logging.Logger]=None) -> None:
        self.executable = executable
        self.encoding = encoding
        self.errors = errors
        self.temp_dir = temp_dir
        self.temp_prefix = temp_prefix
        self.timeout = timeout
        self.logger = logger if logger else LOGGER

    @staticmethod
    def from_conf(conf:OmegaConf) -> Shell:
        return create_shell_from_conf(conf)

    def execute(self, command:str) -> ExecResult:
        """Runs the command through the shell and collects its standard output.

        A non-zero exit status is reported through ``ExecResult.exit_code``, not raised.

        Args:
            command (str): command line.

        Returns:
            ExecResult: output lines, the last output line and the exit status.
        """
        self.logger.debug(f'execute: command={command}')
        completed = subprocess.run(command, shell=True, executable=self.executable,
                                   stdout=PIPE, encoding=self.encoding, errors=self.errors,
                                   timeout=self.timeout)
        output = [line.rstrip() for line in completed.stdout.splitlines()]
        result = ExecResult(output=output, last_line=output[-1] if output else '',
                            exit_code=completed.returncode)
        self._log_exit_code(command, result.exit_code)
        return result

    def shell_exec(self, command:str) -> str:
        self.logger.debug(f'shell_exec: command={command}')
        completed = subprocess.run(command, shell=True, executable=self.executable,
                                   stdout=PIPE, encoding=self.encoding, errors=self.errors,
                                   timeout=self.timeout)
        self._log_exit_code(command, completed.returncode)
        return completed.stdout

    def passthru(self, command:str) -> int:
        """Runs the command with stdout and stderr inherited from this process.

        Returns:
            int: exit status of the command.
        """
        self.logger.debug(f'passthru: command={command}')
        completed = subprocess.run(command, shell=True, executable=self.executable, timeout=self.timeout)
        self._log_exit_code(command, completed.returncode)
        return completed.returncode

    def file_exists(self, path:Union[str,Path]) -> bool:
        return Path(path).exists()

    def write_file(self, path:Union[str,Path], data:Union[str,bytes], *, append:bool=False) -> int:
        """Writes ``data`` to the file, replacing its contents unless ``append`` is set.

        Returns:
            int: the number of bytes written.
        """
        if isinstance(data, str):
            data = data.encode(self.encoding)
        with open(path, 'ab' if append else 'wb') as f:
            f.write(data)
        return len(data)

    def make_directory(self, path:Union[str,Path], mode:int=0o777, recursive:bool=False, *,
                       exist_ok:bool=False) -> None:
        Path(path).mkdir(mode=mode, parents=recursive, exist_ok=exist_ok)

    def parse_ini_file(self, path:Union[str,Path], process_sections:bool=False) -> dict[str,object]:
        """Parses an ini file.

        Args:
            path (Union[str,Path]): ini file path.
            process_sections (bool): if True, the result maps each section name to the
                dictionary of its keys; keys placed before the first section stay at the top level.
                Otherwise, keys of every section are merged into a single dictionary.

        Raises:
            InvalidIniFileError: if the file is not a well-formed ini file.
        """
        parser = configparser.ConfigParser(interpolation=None, strict=False,
                                           comment_prefixes=(';', '#'), inline_comment_prefixes=(';',),
                                           default_section=_NO_DEFAULT_SECTION)
        parser.optionxform = str
        try:
            text = Path(path).read_text(encoding=self.encoding)
            parser.read_string(f'[{_GLOBAL_SECTION}]\n' + text, source=str(path))
        except (configparser.Error, UnicodeDecodeError) as e:
            raise InvalidIniFileError(str(path), str(e)) from e

        parsed = {}
        for section in parser.sections():
            values = {k:_unquote(v) for k, v in parser.items(section)}
            if section == _GLOBAL_SECTION or not process_sections:
                parsed.update(values)
            else:
                parsed[section] = values
        return parsed

    def hostname(self) -> str:
        return socket.gethostname()

    def remove_file(self, path:Union[str,Path], *, missing_ok:bool=False) -> None:
        Path(path).unlink(missing_ok=missing_ok)

    def touch(self, path:Union[str,Path]) -> None:
        Path(path).touch()

    def create_temp_directory(self) -> Path:
        return Path(tempfile.mkdtemp(prefix=self.temp_prefix, dir=self.temp_dir))

    def _log_exit_code(self, command:str, exit_code:int) -> None:
        if exit_code != 0 and self.logger.isEnabledFor(logging.INFO):
            self.logger.info(f'command failed: command={command}, exit_code={exit_code}')

    def __repr__(self) -> str:
        executable = self.executable if self.executable else 'sh'
        return f'{self.__class__.__name__}(executable={executable}, encoding={self.encoding})'


def _unquote(value:str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value
