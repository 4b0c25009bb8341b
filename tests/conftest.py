import subprocess

import pytest

from hyperlanesetup.errors import SetupError
from hyperlanesetup.models import SetupContext


class DummyLogger:
    def __init__(self):
        self.messages = []

    def _record(self, msg, *args, **_kwargs):
        self.messages.append(msg % args if args else msg)

    info = _record
    debug = _record
    warning = _record
    error = _record


class DummyConsole:
    def __init__(self):
        self.lines = []

    def print(self, *args, **_kwargs):
        self.lines.append(" ".join(str(arg) for arg in args))

    def clear(self):
        self.lines.append("<clear>")


class FakeRunner:
    """Records commands and answers them from a list of (prefix, returncode, stdout) rules."""

    def __init__(self, available=(), rules=()):
        self.available = set(available)
        self.rules = list(rules)
        self.commands = []
        self.inputs = []
        self.streamed = []
        self.stream_returncode = 0
        self.env = {"PATH": "/usr/bin", "HOME": "/root"}

    def which(self, name):
        return f"/usr/bin/{name}" if name in self.available else None

    def prepend_path(self, directory):
        self.env["PATH"] = f"{directory}:{self.env['PATH']}"

    def add_rule(self, prefix, returncode=0, stdout=""):
        self.rules.insert(0, (list(prefix), returncode, stdout))

    def run(self, cmd, check=True, capture_output=False, timeout=None, input_text=None, redact=()):
        self.commands.append(list(cmd))
        self.inputs.append(input_text)
        returncode, stdout = 0, ""
        for prefix, rule_code, rule_stdout in self.rules:
            if cmd[: len(prefix)] == prefix:
                returncode, stdout = rule_code, rule_stdout
                break
        if returncode != 0 and check:
            raise SetupError(f"Command failed ({returncode}): {' '.join(cmd)}")
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr="")

    def stream(self, cmd):
        self.streamed.append(list(cmd))
        return self.stream_returncode

    def ran(self, prefix):
        return any(cmd[: len(prefix)] == list(prefix) for cmd in self.commands)


class ScriptedPrompter:
    def __init__(self, answers=(), confirmations=()):
        self.answers = list(answers)
        self.confirmations = list(confirmations)
        self.questions = []

    def ask(self, text, password=False):
        self.questions.append((text, password))
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {text}")
        return self.answers.pop(0)

    def confirm(self, text):
        self.questions.append((text, False))
        if not self.confirmations:
            raise AssertionError(f"Unexpected confirmation: {text}")
        return self.confirmations.pop(0)


@pytest.fixture
def logger():
    return DummyLogger()


@pytest.fixture
def console():
    return DummyConsole()


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def context(tmp_path):
    return SetupContext(
        log_file=str(tmp_path / "logs" / "hyperlane_setup.log"),
        db_dir=str(tmp_path / "db"),
        nvm_dir=str(tmp_path / "nvm"),
    )


@pytest.fixture
def make_prompter():
    return ScriptedPrompter
