"""The interactive shell: built-in commands, pipelines and the read loop."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Sequence
from contextlib import ExitStack
from typing import TextIO

from soshell.calc import format_bits, format_calc
from soshell.fileutils import (
    describe_larger,
    format_entry,
    list_directory,
    remove_read,
    set_executable,
)
from soshell.jpeg import is_jpeg_file
from soshell.neofetch import format_neofetch, gather_system_info
from soshell.parse import parse_line
from soshell.redirect import redirected, split_redirects
from soshell.socp import socp
from soshell.threads import CopyLog, copy_in_background, start_warning, warn

DEFAULT_PROMPT = "SOSHELL:"
VERSION_TEXT = "SO Shell 2025 versão 1.0"
ANSWER_TEXT = "42 is the answer to life the universe and everything"

BANNER = (
    "  ______  _    _   _____   _      _     \n"
    " / ____/ | |  | | |  ___| | |    | |     \n"
    "| (___   | |__| | | |__   | |    | |     \n"
    "   ___   |  __  | |  __|  | |    | |       \n"
    "  ___) | | |  | | | |___  | |__  | |__     \n"
    "/_____/  |_|  |_| |_____| |____| |____|     \n"
    "                                        2025     \n"
)

Executor = Callable[[list[str]], None]


def contains_pipe(args: Sequence[str]) -> int | None:
    """Return the index of the first word starting with ``|``, or None."""
    return next(
        (index for index, word in enumerate(args) if word.startswith("|")), None
    )


def split_pipeline(args: Sequence[str]) -> list[list[str]]:
    """Split *args* into commands at every ``|`` word."""
    commands: list[list[str]] = [[]]
    for word in args:
        if word == "|":
            commands.append([])
        else:
            commands[-1].append(word)
    return commands


def _flush_streams() -> None:
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()


def _arg(args: Sequence[str], index: int) -> str | None:
    return args[index] if len(args) > index else None


class Shell:
    """A small command shell with its own built-in commands."""

    def __init__(
        self,
        prompt: str = DEFAULT_PROMPT,
        executor: Executor | None = None,
        copy_log: CopyLog | None = None,
    ) -> None:
        self.prompt = prompt
        self.previous_directory: str | None = None
        self.copy_log = copy_log if copy_log is not None else CopyLog()
        self._executor: Executor = executor or self._execute_external
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "obterinfo": self._cmd_obterinfo,
            "avisoTeste": self._cmd_aviso_teste,
            "avisoMAU": self._cmd_aviso,
            "aviso": self._cmd_aviso,
            "quemsoueu": self._cmd_quemsoueu,
            "cd": self._cmd_cd,
            "socp": self._cmd_socp,
            "calc": self._cmd_calc,
            "bits": self._cmd_bits,
            "isjpg": self._cmd_isjpg,
            "socpthread": self._cmd_socpthread,
            "InfoCopias": self._cmd_info_copias,
            "maior": self._cmd_maior,
            "setx": self._cmd_setx,
            "removerl": self._cmd_removerl,
            "sols": self._cmd_sols,
            "neofetch": self._cmd_neofetch,
        }

    # output -----------------------------------------------------------------

    def _write(self, text: str, fd: int = 1) -> None:
        _flush_streams()
        data = text.encode("utf-8")
        while data:
            written = os.write(fd, data)
            data = data[written:]

    def _say(self, text: str) -> None:
        self._write(text + "\n")

    def _error(self, text: str) -> None:
        self._write(text + "\n", fd=2)

    def _execute_external(self, args: list[str]) -> None:
        _flush_streams()
        try:
            subprocess.run(args, check=False)
        except OSError as exc:
            self._error(f"{args[0]}: {exc.strerror}")

    # dispatch ---------------------------------------------------------------

    def builtin(self, args: Sequence[str]) -> bool:
        """Run *args* if it is a built-in command or a pipeline.

        Return whether it was handled; other commands are left alone.
        """
        if not args:
            return False
        if contains_pipe(args) is not None:
            return self.run_pipeline(args)
        return self._with_redirects(args, self._dispatch)

    def _with_redirects(
        self, args: Sequence[str], action: Callable[[list[str]], bool]
    ) -> bool:
        command, redirections = split_redirects(args)
        with ExitStack() as stack:
            try:
                stack.enter_context(redirected(redirections))
            except OSError as exc:
                self._error(f"erro ao abrir ficheiro: {exc.strerror}")
                return True
            return action(command)

    def _dispatch(self, args: list[str]) -> bool:
        name = args[0]
        if name == "sair":
            raise SystemExit(0)
        if name.startswith("42"):
            self._say(ANSWER_TEXT)
            return True
        handler = self._commands.get(name)
        if handler is not None:
            handler(args)
            return True
        if len(name) > 4 and name.startswith("PS1="):
            self.prompt = name[4:]
            return True
        return False

    def _dispatch_or_execute(self, args: list[str]) -> bool:
        if not self._dispatch(args):
            self._executor(args)
        return True

    def _run_command(self, args: Sequence[str]) -> None:
        if args:
            self._with_redirects(args, self._dispatch_or_execute)

    def run_pipeline(self, args: Sequence[str]) -> bool:
        """Run the commands of a pipeline one after another, joined by pipes."""
        commands = split_pipeline(args)
        previous: int | None = None
        for position, command in enumerate(commands):
            read_end, write_end = os.pipe()
            _flush_streams()
            pid = os.fork()
            if pid == 0:
                status = 0
                try:
                    if previous is not None:
                        os.dup2(previous, 0)
                        os.close(previous)
                    if position < len(commands) - 1:
                        os.dup2(write_end, 1)
                    os.close(read_end)
                    os.close(write_end)
                    self._run_command(command)
                    _flush_streams()
                except SystemExit as exc:
                    status = exc.code if isinstance(exc.code, int) else 0
                except BaseException:
                    status = 1
                finally:
                    os._exit(status)
            os.waitpid(pid, 0)
            os.close(write_end)
            if previous is not None:
                os.close(previous)
            previous = read_end
        if previous is not None:
            os.close(previous)
        return True

    def run_line(self, line: str) -> None:
        """Parse and run one command line."""
        args = parse_line(line)
        if not args:
            return
        if contains_pipe(args) is not None:
            self.run_pipeline(args)
        else:
            self._run_command(args)

    def change_directory(self, target: str | None) -> bool:
        """Change the working directory as ``cd`` does; return whether it moved."""
        current = os.getcwd()
        if target is None or target in ("~", "$HOME"):
            destination = os.environ.get("HOME")
            if destination is None:
                self._error("cd: HOME não definido")
                return False
        elif target == "-":
            if not self.previous_directory:
                self._error("cd: diretório anterior não definido")
                return False
            destination = self.previous_directory
            self._say(destination)
        else:
            destination = target
        try:
            os.chdir(destination)
        except OSError as exc:
            self._error(f"{target}: {exc.strerror}")
            return False
        self.previous_directory = current
        return True

    def loop(self, stdin: TextIO) -> int:
        """Read and run lines from *stdin* until end of input or ``sair``."""
        while True:
            self._write(self.prompt)
            line = stdin.readline()
            if not line:
                self._write("\n")
                return 0
            if len(line) == 1:
                continue
            if line.endswith("\n"):
                line = line[:-1]
            try:
                self.run_line(line)
            except SystemExit as exc:
                return exc.code if isinstance(exc.code, int) else 0

    # built-in commands ------------------------------------------------------

    def _cmd_obterinfo(self, args: list[str]) -> None:
        self._say(VERSION_TEXT)

    def _cmd_aviso_teste(self, args: list[str]) -> None:
        from soshell.calc import to_int

        if len(args) < 3:
            self._error("Uso: avisoTeste <mensagem> <tempo>")
            return
        warn(args[1], to_int(args[2]))

    def _cmd_aviso(self, args: list[str]) -> None:
        from soshell.calc import to_int

        if len(args) < 3:
            self._error(f"Uso: {args[0]} <mensagem> <tempo>")
            return
        start_warning(args[1], to_int(args[2]))

    def _cmd_quemsoueu(self, args: list[str]) -> None:
        self._executor(["id"])

    def _cmd_cd(self, args: list[str]) -> None:
        self.change_directory(_arg(args, 1))

    def _cmd_socp(self, args: list[str]) -> None:
        if len(args) < 3:
            self._error("Uso: socp <fonte> <destino>")
            return
        source, destination = args[1], args[2]
        try:
            socp(source, destination)
        except OSError as exc:
            if exc.filename == source:
                self._error(f"Erro ao abrir arquivo de origem: {exc.strerror}")
            else:
                self._error(f"Erro ao criar/abrir arquivo de destino: {exc.strerror}")

    def _cmd_calc(self, args: list[str]) -> None:
        if len(args) < 4:
            self._error("Uso: calc <valor1> <operador> <valor2>")
            return
        self._say(format_calc(args[1], args[2], args[3]))

    def _cmd_bits(self, args: list[str]) -> None:
        if len(args) < 4:
            self._error("Uso: bits <valor1> <operador> <valor2>")
            return
        self._say(format_bits(args[1], args[2], args[3]))

    def _cmd_isjpg(self, args: list[str]) -> None:
        path = _arg(args, 1)
        if path is None:
            self._error("Uso: isjpg <ficheiro>")
            return
        try:
            valid = is_jpeg_file(path)
        except OSError as exc:
            self._error(f"Erro ao abrir ficheiro: {exc.strerror}")
            return
        if valid:
            self._say(f"O ficheiro {path} é um JPG válido.")
        else:
            self._say(f"O ficheiro {path} NÃO é um JPG válido.")

    def _cmd_socpthread(self, args: list[str]) -> None:
        if len(args) < 3:
            self._error("Uso: socpthread <fonte> <destino>")
            return
        copy_in_background(args[1], args[2], self.copy_log)

    def _cmd_info_copias(self, args: list[str]) -> None:
        for entry in self.copy_log.entries():
            self._say(entry)

    def _cmd_maior(self, args: list[str]) -> None:
        if len(args) < 3:
            self._error("Uso: maior <arg1> <arg2> ")
            return
        try:
            self._say(describe_larger(args[1], args[2]))
        except OSError as exc:
            self._error(f"Erro ao aceder ao ficheiro {exc.filename}: {exc.strerror}")

    def _cmd_setx(self, args: list[str]) -> None:
        path = _arg(args, 1)
        if path is None:
            self._error("Uso: setx <arg1> ")
            return
        try:
            set_executable(path)
        except OSError as exc:
            self._error(f"Erro ao alterar permissões: {exc.strerror}")
            return
        self._say(f"Permissão de execução atribuída ao ficheiro '{path}'.")

    def _cmd_removerl(self, args: list[str]) -> None:
        path = _arg(args, 1)
        if path is None:
            self._error("Uso: removerl <arg1> ")
            return
        try:
            remove_read(path)
        except OSError as exc:
            self._error(f"Erro ao alterar permissões: {exc.strerror}")
            return
        self._say(f"Permisões de leitura removidas no ficheiro '{path}'.")

    def _cmd_sols(self, args: list[str]) -> None:
        folder = _arg(args, 1)
        if folder is None:
            self._error("Uso: sols <pasta> ")
            return
        try:
            entries = list_directory(folder)
        except OSError as exc:
            self._error(f"Erro ao abrir diretório: {exc.strerror}")
            return
        for entry in entries:
            if entry.error is not None:
                self._error(format_entry(entry))
            else:
                self._say(format_entry(entry))

    def _cmd_neofetch(self, args: list[str]) -> None:
        self._write(format_neofetch(gather_system_info()))


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive shell on standard input."""
    shell = Shell()
    shell._write(BANNER)
    return shell.loop(sys.stdin)