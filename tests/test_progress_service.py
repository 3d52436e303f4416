from __future__ import annotations

from adaptlearn.services.data_service import DataService
from adaptlearn.services.progress_service import ProgressService
from adaptlearn.storage.document_store import InMemoryDocumentStore
from tests.utils import FIXED_NOW, create_course, create_progress, login_user


def _tracker(data_service, **kwargs) -> ProgressService:
    user = login_user(data_service)
    return ProgressService(data_service, user=user, clock=lambda: FIXED_NOW, **kwargs)


def test_completing_both_modules_reaches_one_hundred_percent(data_service):
    tracker = _tracker(data_service)

    tracker.record_completion("js-basics", "js-1")
    assert tracker.course_progress("js-basics") == 50
    tracker.record_completion("js-basics", "js-2")

    assert tracker.course_progress("js-basics") == 100


def test_record_completion_replaces_previous_score(data_service):
    tracker = _tracker(data_service)

    tracker.record_completion("js-basics", "js-1", score=55)
    tracker.record_completion("js-basics", "js-1", score=80)

    stored = [p for p in data_service.get_progress() if p.key == ("js-basics", "js-1")]
    assert len(stored) == 1
    assert stored[0].score == 80
    assert stored[0].completed_at == FIXED_NOW
    assert len(tracker.progress) == 1


def test_record_completion_flips_only_the_completed_module(data_service):
    tracker = _tracker(data_service)
    tracker.record_completion("js-basics", "js-1")

    course = next(c for c in tracker.courses if c.id == "js-basics")
    assert [m.completed for m in course.modules] == [True, False]
    other = next(c for c in tracker.courses if c.id == "ai-ml-basics")
    assert not any(m.completed for m in other.modules)


def test_record_completion_for_unknown_module_still_records(data_service):
    tracker = _tracker(data_service)
    tracker.record_completion("ghost-course", "ghost-module")

    assert data_service.get_progress()[0].course_id == "ghost-course"
    assert tracker.course_progress("ghost-course") == 0


def test_zero_module_course_has_zero_progress(data_service):
    empty = create_course("empty", module_count=0)
    tracker = _tracker(data_service, courses=[empty])
    tracker.record_completion("empty", "anything")

    assert tracker.course_progress("empty") == 0


def test_unknown_course_has_zero_progress(data_service):
    assert _tracker(data_service).course_progress("missing") == 0


def test_progress_is_not_capped():
    course = create_course("c", module_count=1)
    store = InMemoryDocumentStore({"courses": [course.to_document()]})
    data_service = DataService(store)
    tracker = _tracker(data_service)

    tracker.record_completion("c", "c-1")
    tracker.record_completion("c", "retired-module")

    assert tracker.course_progress("c") == 200


def test_progress_is_unrounded(data_service):
    course = create_course("thirds", module_count=3)
    tracker = _tracker(data_service, courses=[course])
    tracker.record_completion("thirds", "thirds-1")

    assert tracker.course_progress("thirds") == 1 / 3 * 100


def test_enrolled_courses_follow_catalogue_order(data_service):
    tracker = _tracker(data_service)
    tracker.record_completion("ai-ml-basics", "ai-1")
    tracker.record_completion("js-basics", "js-1")

    assert [c.id for c in tracker.enrolled_courses()] == ["js-basics", "ai-ml-basics"]


def test_enroll_records_first_module(data_service):
    tracker = _tracker(data_service)
    tracker.enroll_in_course("react-intro")

    records = data_service.get_progress()
    assert [(r.course_id, r.module_id, r.time_spent) for r in records] == [("react-intro", "react-1", 0)]
    assert tracker.course_progress("react-intro") == 50


def test_enroll_in_unknown_or_empty_course_is_a_noop(data_service):
    tracker = _tracker(data_service, courses=[create_course("empty", module_count=0)])
    tracker.enroll_in_course("empty")
    tracker.enroll_in_course("missing")

    assert data_service.get_progress() == []


def test_tracker_without_user_is_read_only(data_service):
    data_service.save_progress(create_progress("js-basics", "js-1"))
    tracker = ProgressService(data_service)

    tracker.record_completion("js-basics", "js-2")
    tracker.enroll_in_course("ai-ml-basics")

    assert len(data_service.get_progress()) == 1
    assert tracker.enrolled_courses() == []
    assert tracker.course_progress("js-basics") == 0


def test_tracker_reads_existing_progress(data_service):
    user = login_user(data_service)
    data_service.save_progress(create_progress("js-basics", "js-1"))

    tracker = ProgressService(data_service, user=user)
    assert tracker.course_progress("js-basics") == 50
    assert [c.id for c in tracker.enrolled_courses()] == ["js-basics"]


def test_dashboard_stats_over_enrolled_courses(data_service):
    tracker = _tracker(data_service)
    tracker.record_completion("js-basics", "js-1")
    tracker.record_completion("js-basics", "js-2")
    tracker.enroll_in_course("react-intro")

    assert tracker.average_progress() == 75
    assert tracker.completed_courses_count() == 1
    assert tracker.hours_learned() == 5


def test_average_progress_rounds_half_up(data_service):
    halves = create_course("halves", module_count=2)
    quarters = create_course("quarters", module_count=4)
    tracker = _tracker(data_service, courses=[halves, quarters])
    tracker.record_completion("halves", "halves-1")
    for index in range(1, 4):
        tracker.record_completion("quarters", f"quarters-{index}")

    assert tracker.average_progress() == 63


def test_dashboard_stats_without_enrolment(data_service):
    tracker = _tracker(data_service)

    assert tracker.average_progress() == 0
    assert tracker.completed_courses_count() == 0
    assert tracker.hours_learned() == 0


def test_over_complete_course_is_not_counted_as_completed():
    course = create_course("c", module_count=1)
    data_service = DataService(InMemoryDocumentStore({"courses": [course.to_document()]}))
    tracker = _tracker(data_service)
    tracker.record_completion("c", "c-1")
    tracker.record_completion("c", "retired-module")

    assert tracker.completed_courses_count() == 0
    assert tracker.average_progress() == 200
