import pytest

from apps.api.common.errors import ConflictError
from apps.domains.points.models import UserPoints
from apps.domains.tasks import services as task_services
from apps.domains.tasks.models import Task, TaskSubmission
from tests.support import hide_existing

pytestmark = pytest.mark.django_db

BASE = "/api/v1/tasks/"
DEADLINE = "2030-06-30T12:00:00Z"


@pytest.fixture
def task(classroom, teacher):
    return Task.objects.create(
        teacher=teacher,
        classroom=classroom,
        title="Read chapter 3",
        description="Summarize in 200 words",
        points=20,
        deadline="2030-06-30T12:00:00Z",
    )


def _publish(client, class_id, **overrides):
    data = {
        "class_id": class_id,
        "title": "Essay",
        "description": "Write about spring",
        "points": 20,
        "deadline": DEADLINE,
    }
    data.update(overrides)
    return client.post(BASE + "publish/", data, format="json")


class TestPublish:
    def test_owner_publishes(self, teacher_client, classroom):
        resp = _publish(teacher_client, classroom.id, attachment_url="/objects/uploads/a.pdf")

        assert resp.status_code == 201
        assert resp.data["class_id"] == classroom.id
        assert resp.data["attachment_url"] == "/objects/uploads/a.pdf"

    @pytest.mark.parametrize("points", [0, -5, "ten"])
    def test_points_must_be_positive(self, teacher_client, classroom, points):
        resp = _publish(teacher_client, classroom.id, points=points)

        assert resp.status_code == 400
        assert not Task.objects.exists()

    def test_bad_deadline(self, teacher_client, classroom):
        assert _publish(teacher_client, classroom.id, deadline="next week").status_code == 400

    def test_other_teacher_forbidden(self, client_for, make_user, classroom):
        client = client_for(make_user(role="teacher"))

        assert _publish(client, classroom.id).status_code == 403
        assert not Task.objects.exists()

    def test_student_forbidden(self, student_client, classroom):
        assert _publish(student_client, classroom.id).status_code == 403

    def test_unknown_class(self, teacher_client):
        assert _publish(teacher_client, 999999).status_code == 404


class TestVisibility:
    def test_member_lists_class_tasks_newest_first(self, student_client, classroom, membership, task, teacher):
        newer = Task.objects.create(
            teacher=teacher,
            classroom=classroom,
            title="Newer",
            description="d",
            points=5,
            deadline=DEADLINE,
        )

        resp = student_client.get(f"{BASE}class/{classroom.id}/")

        assert resp.status_code == 200
        assert [t["id"] for t in resp.data] == [newer.id, task.id]

    def test_outsider_cannot_list(self, other_student_client, classroom, task):
        assert other_student_client.get(f"{BASE}class/{classroom.id}/").status_code == 403

    def test_detail_for_member_and_owner(self, student_client, teacher_client, membership, task):
        assert student_client.get(f"{BASE}{task.id}/").status_code == 200
        assert teacher_client.get(f"{BASE}{task.id}/").status_code == 200

    def test_detail_for_outsider(self, other_student_client, task):
        assert other_student_client.get(f"{BASE}{task.id}/").status_code == 403

    def test_detail_unknown(self, teacher_client):
        assert teacher_client.get(f"{BASE}999999/").status_code == 404


class TestSubmit:
    def test_submit_awards_points(self, student_client, student, classroom, membership, task):
        resp = student_client.post(f"{BASE}{task.id}/submit/", {"description": "done"}, format="json")

        assert resp.status_code == 201
        assert UserPoints.objects.get(student=student, classroom=classroom).total_points == 20

    def test_second_submit_is_conflict_without_second_award(
        self, student_client, student, classroom, membership, task
    ):
        student_client.post(f"{BASE}{task.id}/submit/", {"description": "done"}, format="json")
        resp = student_client.post(f"{BASE}{task.id}/submit/", {"description": "again"}, format="json")

        assert resp.status_code == 409
        assert TaskSubmission.objects.filter(task=task, student=student).count() == 1
        assert UserPoints.objects.get(student=student, classroom=classroom).total_points == 20

    def test_concurrent_resubmit_rolls_back_without_second_award(self, student, classroom, membership, task):
        task_services.submit_task(student=student, task=task, description="first")

        with hide_existing(TaskSubmission), pytest.raises(ConflictError):
            task_services.submit_task(student=student, task=task, description="second")

        assert TaskSubmission.objects.filter(task=task, student=student).count() == 1
        assert TaskSubmission.objects.get(task=task, student=student).description == "first"
        assert UserPoints.objects.get(student=student, classroom=classroom).total_points == 20

    def test_non_member_cannot_submit(self, other_student_client, other_student, task):
        resp = other_student_client.post(f"{BASE}{task.id}/submit/", {"description": "x"}, format="json")

        assert resp.status_code == 403
        assert not UserPoints.objects.filter(student=other_student).exists()

    def test_description_required(self, student_client, membership, task):
        resp = student_client.post(f"{BASE}{task.id}/submit/", {}, format="json")
        assert resp.status_code == 400

    def test_teacher_cannot_submit(self, teacher_client, task):
        resp = teacher_client.post(f"{BASE}{task.id}/submit/", {"description": "x"}, format="json")
        assert resp.status_code == 403


class TestSubmissions:
    def test_owner_lists_submissions(self, teacher_client, student_client, membership, task, student):
        student_client.post(f"{BASE}{task.id}/submit/", {"description": "done"}, format="json")

        resp = teacher_client.get(f"{BASE}{task.id}/submissions/")

        assert resp.status_code == 200
        assert resp.data[0]["student_id"] == student.id
        assert resp.data[0]["student_name"] == "Student Li"

    def test_other_teacher_cannot_list(self, client_for, make_user, task):
        client = client_for(make_user(role="teacher"))
        assert client.get(f"{BASE}{task.id}/submissions/").status_code == 403

    def test_my_submission(self, student_client, membership, task):
        assert student_client.get(f"{BASE}{task.id}/my-submission/").status_code == 404

        student_client.post(f"{BASE}{task.id}/submit/", {"description": "done"}, format="json")
        resp = student_client.get(f"{BASE}{task.id}/my-submission/")

        assert resp.status_code == 200
        assert resp.data["description"] == "done"


def test_end_to_end_submission_scenario(teacher_client, student_client, student):
    created = teacher_client.post(
        "/api/v1/classes/create/",
        {"year": "2025", "class_name": "Grade 8 Class 3", "subject": "English"},
        format="json",
    )
    class_id = created.data["id"]

    joined = student_client.post("/api/v1/classes/join/", {"class_id": class_id}, format="json")
    assert joined.status_code == 201

    published = _publish(teacher_client, class_id, points=20)
    task_id = published.data["id"]

    first = student_client.post(f"{BASE}{task_id}/submit/", {"description": "v1"}, format="json")
    second = student_client.post(f"{BASE}{task_id}/submit/", {"description": "v2"}, format="json")

    assert first.status_code == 201
    assert second.status_code == 409
    assert UserPoints.objects.get(student=student, classroom_id=class_id).total_points == 20
