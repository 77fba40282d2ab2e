import pytest

from hostsedit.exceptions import ElevationError
from hostsedit.file_handlers.hosts_file import HostsFileHandler
from hostsedit.security.privilege import PrivilegeGate

SAMPLE_LINES = ["# comment", "", "127.0.0.1 foo"]


class ElevatedGate(PrivilegeGate):
    def __init__(self):
        self.relaunches = []

    def is_elevated(self):
        return True

    def relaunch_elevated(self, argv):
        self.relaunches.append(list(argv))


class DeniedGate(ElevatedGate):
    """Never elevated; records relaunch requests instead of starting anything"""

    def is_elevated(self):
        return False


class FailingGate(DeniedGate):
    def relaunch_elevated(self, argv):
        self.relaunches.append(list(argv))
        raise ElevationError("user declined")


def write_lines(path, lines):
    path.write_text("\n".join(lines), encoding="utf-8")


@pytest.fixture
def hosts_path(tmp_path):
    path = tmp_path / "hosts"
    write_lines(path, SAMPLE_LINES)
    return path


@pytest.fixture
def handler(hosts_path):
    return HostsFileHandler(str(hosts_path))


@pytest.fixture
def elevated_gate():
    return ElevatedGate()


@pytest.fixture
def denied_gate():
    return DeniedGate()


@pytest.fixture
def failing_gate():
    return FailingGate()


@pytest.fixture
def notices():
    return []
