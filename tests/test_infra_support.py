import logging
from logging.handlers import RotatingFileHandler

import pytest

from infra.file_saver import DirectoryFileSaver
from infra.logging_config import setup_logging
from infra.path import user_data_dir


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_setup_logging_installs_rotating_file_and_console(tmp_path, restore_root_logger):
    log_file = setup_logging(tmp_path)

    root = logging.getLogger()
    rotating = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
    assert log_file == tmp_path / "govtrack.log"
    assert len(rotating) == 1
    assert rotating[0].maxBytes == 1_000_000
    assert rotating[0].backupCount == 5
    assert len(root.handlers) == 2

    setup_logging(tmp_path)
    assert len(logging.getLogger().handlers) == 2


def test_user_data_dir_override(monkeypatch, tmp_path):
    monkeypatch.setenv("GOVTRACK_DATA_DIR", str(tmp_path / "data"))
    path = user_data_dir()
    assert path == tmp_path / "data"
    assert path.is_dir()


def test_file_saver_writes_and_refuses_paths(tmp_path):
    saver = DirectoryFileSaver(tmp_path)

    target = saver.save("budgets-export.json", b"[]")
    assert target.read_bytes() == b"[]"

    with pytest.raises(OSError):
        saver.save("../escape.json", b"x")
