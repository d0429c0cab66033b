"""Contract tests shared by every storage adapter."""

from __future__ import annotations

import sys
import threading
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path
from uuid import uuid4

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from bank_notifications.domain.entities import (
    Notification,
    NotificationChannel,
    NotificationPriority,
    NotificationState,
)
from bank_notifications.infrastructure.repositories import InMemoryNotificationRepository
from bank_notifications.utils import AppClock


def _build_sql_repository(clock: AppClock | None = None):
    pytest.importorskip("sqlalchemy")

    from bank_notifications.infrastructure.database import (
        build_engine,
        build_session_factory,
        initialize_database,
    )
    from bank_notifications.infrastructure.repositories import NotificationRepository

    engine = build_engine("sqlite+pysqlite:///:memory:")
    initialize_database(engine)
    return NotificationRepository(build_session_factory(engine), clock)


@pytest.fixture(params=["memory", "database"])
def repository(request):
    if request.param == "memory":
        return InMemoryNotificationRepository()
    return _build_sql_repository()


def _notification(
    state: NotificationState = NotificationState.PENDING,
    *,
    cost: str = "0.10",
) -> Notification:
    created_at = datetime.now(timezone.utc).replace(microsecond=0)
    sent_at = created_at + timedelta(seconds=5) if state is NotificationState.SENT else None
    return Notification(
        id=uuid4(),
        recipient="juan@gmail.com",
        message="Deposit received",
        channel=NotificationChannel.EMAIL,
        priority=NotificationPriority.MEDIUM,
        state=state,
        cost=Decimal(cost),
        created_at=created_at,
        sent_at=sent_at,
    )


def test_save_then_find_returns_equal_value(repository):
    notification = _notification()

    stored = repository.save(notification)

    assert stored == notification
    assert repository.find_by_id(notification.id) == notification


def test_find_unknown_id_returns_none(repository):
    assert repository.find_by_id(uuid4()) is None


def test_save_upserts_by_id(repository):
    pending = _notification()
    repository.save(pending)
    sent = pending.mark_sent(sent_at=pending.created_at + timedelta(seconds=1), cost=pending.cost)

    repository.save(sent)

    assert repository.count_registries() == 1
    assert repository.find_by_id(pending.id).state is NotificationState.SENT


def test_filter_by_state_and_list_all(repository):
    pending = repository.save(_notification())
    sent = repository.save(_notification(NotificationState.SENT))

    assert repository.filter_by_state(NotificationState.PENDING) == [pending]
    assert repository.filter_by_state(NotificationState.SENT) == [sent]
    assert list(repository.filter_by_state(NotificationState.FAILED)) == []
    assert {item.id for item in repository.list_all()} == {pending.id, sent.id}


def test_cost_round_trips_exactly(repository):
    notification = repository.save(_notification(cost="0.05"))

    stored = repository.find_by_id(notification.id)

    assert isinstance(stored.cost, Decimal)
    assert stored.cost == Decimal("0.05")


def test_clear_removes_everything(repository):
    repository.save(_notification())
    repository.save(_notification())

    repository.clear()

    assert repository.count_registries() == 0
    assert list(repository.list_all()) == []


def test_in_memory_instances_do_not_share_storage():
    first = InMemoryNotificationRepository()
    second = InMemoryNotificationRepository()

    first.save(_notification())

    assert second.count_registries() == 0


def test_in_memory_repository_handles_concurrent_saves():
    repository = InMemoryNotificationRepository()
    notifications = [_notification() for _ in range(200)]

    def worker(chunk):
        for notification in chunk:
            repository.save(notification)
            assert repository.find_by_id(notification.id) == notification

    threads = [threading.Thread(target=worker, args=(notifications[i::4],)) for i in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert repository.count_registries() == 200


def test_database_keeps_sent_after_created_across_dst_fold():
    pytest.importorskip("sqlalchemy")
    from zoneinfo import ZoneInfo

    from bank_notifications.infrastructure.database import (
        build_engine,
        build_session_factory,
        initialize_database,
    )
    from bank_notifications.infrastructure.models import NotificationModel
    from bank_notifications.infrastructure.repositories import NotificationRepository

    new_york = ZoneInfo("America/New_York")
    engine = build_engine("sqlite+pysqlite:///:memory:")
    initialize_database(engine)
    session_factory = build_session_factory(engine)
    repository = NotificationRepository(session_factory, AppClock(new_york))

    # 2024-11-03 01:00-02:00 happens twice in New York; fold=1 is the second pass.
    created_at = datetime(2024, 11, 3, 1, 50, tzinfo=new_york)
    sent_at = datetime(2024, 11, 3, 1, 10, fold=1, tzinfo=new_york)
    pending = _notification()
    notification = Notification(
        id=pending.id,
        recipient=pending.recipient,
        message=pending.message,
        channel=pending.channel,
        priority=pending.priority,
        state=NotificationState.SENT,
        cost=pending.cost,
        created_at=created_at,
        sent_at=sent_at,
    )

    repository.save(notification)
    stored = repository.find_by_id(notification.id)

    assert stored.created_at.astimezone(timezone.utc) == datetime(
        2024, 11, 3, 5, 50, tzinfo=timezone.utc
    )
    assert stored.sent_at.astimezone(timezone.utc) == datetime(
        2024, 11, 3, 6, 10, tzinfo=timezone.utc
    )
    assert stored.sent_at.timestamp() > stored.created_at.timestamp()
    assert stored.sent_at.fold == 1

    with session_factory() as session:
        model = session.get(NotificationModel, str(notification.id))
        assert model.created_at == datetime(2024, 11, 3, 5, 50)
        assert model.sent_at == datetime(2024, 11, 3, 6, 10)


def test_database_reads_back_in_the_clock_timezone():
    repository = _build_sql_repository(AppClock(timezone(timedelta(hours=5))))
    notification = repository.save(_notification())

    stored = repository.find_by_id(notification.id)

    assert stored.created_at.utcoffset() == timedelta(hours=5)
    assert stored.created_at == notification.created_at
