import pytest
from PySide6.QtCore import QCoreApplication, QEvent, QObject

from exam_app.ui.countdown_timer import QtTickScheduler


@pytest.fixture(scope="module")
def qt_app():
    return QCoreApplication.instance() or QCoreApplication([])


def test_timer_is_owned_by_the_given_parent(qt_app):
    owner = QObject()

    scheduler = QtTickScheduler(owner)

    assert scheduler._timer.parent() is owner
    scheduler.dispose()


def test_dispose_stops_and_releases_the_timer(qt_app):
    owner = QObject()
    scheduler = QtTickScheduler(owner)
    scheduler.start(lambda: None)
    assert scheduler.is_running

    scheduler.dispose()
    QCoreApplication.sendPostedEvents(None, QEvent.Type.DeferredDelete)

    assert not scheduler.is_running
    assert owner.children() == []
    # The controller may still stop its scheduler after the quiz page let go of it.
    scheduler.stop()
    scheduler.dispose()
