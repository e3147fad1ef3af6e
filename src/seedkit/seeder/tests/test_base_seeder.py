from unittest.mock import MagicMock

import pytest

from seedkit.exceptions import ExecutionFailedError
from seedkit.seeder import BaseSeeder, SeederItem, SeederRegistry
from seedkit.seeder.testing import SeederItemsBuilder, recording_action


class _CountingSeeder(BaseSeeder):
    name = "counting"

    def __init__(self, session, fake=None, fail=False):
        super().__init__(session, fake)
        self.calls = 0
        self.fail = fail

    def run(self):
        self.calls += 1
        if self.fail:
            raise RuntimeError("insert failed")


class _Unnamed(BaseSeeder):
    def run(self):
        pass


def test_seeder_call_commits_on_success():
    session = MagicMock()
    seeder = _CountingSeeder(session, fake=MagicMock())

    seeder()

    assert seeder.calls == 1
    session.commit.assert_called_once_with()
    session.rollback.assert_not_called()


def test_seeder_call_rolls_back_and_reraises():
    session = MagicMock()
    seeder = _CountingSeeder(session, fake=MagicMock(), fail=True)

    with pytest.raises(RuntimeError, match="insert failed"):
        seeder()

    session.rollback.assert_called_once_with()
    session.commit.assert_not_called()


def test_seeder_as_item_uses_name_or_class_name():
    session = MagicMock()

    assert _CountingSeeder(session, fake=MagicMock()).as_item().name == "counting"
    assert _Unnamed(session, fake=MagicMock()).as_item().name == "_Unnamed"


def test_seeder_instance_registers_as_action():
    session = MagicMock()
    seeder = _CountingSeeder(session, fake=MagicMock(), fail=True)
    registry = SeederRegistry()
    registry.register_many([seeder.as_item()])

    with pytest.raises(ExecutionFailedError) as excinfo:
        registry.run_by_name("counting")

    assert "insert failed" in str(excinfo.value)
    assert isinstance(excinfo.value.cause, RuntimeError)


def test_seeder_item_is_immutable():
    item = SeederItem("a", lambda: None)
    with pytest.raises(AttributeError):
        item.name = "b"


def test_recording_action_logs_then_raises():
    log = []
    err = ValueError("test error")
    action = recording_action("test", log, error=err)

    with pytest.raises(ValueError) as excinfo:
        action()

    assert excinfo.value is err
    assert log == ["test"]


def test_items_builder_keeps_order():
    items = (
        SeederItemsBuilder()
        .add("test1", lambda: None)
        .add_recording("test2")
        .build()
    )

    assert [item.name for item in items] == ["test1", "test2"]
