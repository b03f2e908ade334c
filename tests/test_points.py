import threading

import pytest
from django.db import connection

from apps.api.common.errors import DomainValidationError
from apps.domains.classes.models import ClassMembership
from apps.domains.points import services
from apps.domains.points.models import UserPoints
from apps.domains.points.services import InsufficientPointsError
from tests.support import miss_first_update

pytestmark = pytest.mark.django_db


class TestAward:
    def test_first_award_creates_row(self, student, classroom):
        services.award(student_id=student.id, class_id=classroom.id, delta=20)

        row = UserPoints.objects.get(student=student, classroom=classroom)
        assert row.total_points == 20
        assert row.spent_points == 0

    def test_award_increments_existing_row(self, student, classroom):
        services.award(student_id=student.id, class_id=classroom.id, delta=20)
        services.award(student_id=student.id, class_id=classroom.id, delta=5)

        assert UserPoints.objects.get(student=student, classroom=classroom).total_points == 25
        assert UserPoints.objects.count() == 1

    @pytest.mark.parametrize("delta", [0, -1, 1.5, "3", True])
    def test_award_rejects_non_positive_int(self, student, classroom, delta):
        with pytest.raises(DomainValidationError):
            services.award(student_id=student.id, class_id=classroom.id, delta=delta)
        assert not UserPoints.objects.exists()

    def test_award_that_loses_the_insert_race_still_increments(self, student, classroom):
        # 첫 갱신이 0 행인 사이 다른 요청이 행을 먼저 만들었다
        UserPoints.objects.create(student=student, classroom=classroom, total_points=5)

        with miss_first_update():
            services.award(student_id=student.id, class_id=classroom.id, delta=3)

        assert UserPoints.objects.filter(student=student, classroom=classroom).count() == 1
        assert UserPoints.objects.get(student=student, classroom=classroom).total_points == 8

    def test_sequential_awards_sum_exactly(self, student, classroom):
        for _ in range(20):
            services.award(student_id=student.id, class_id=classroom.id, delta=1)

        assert UserPoints.objects.get(student=student, classroom=classroom).total_points == 20


class TestSpend:
    def test_spend_reduces_remaining(self, student, classroom):
        services.award(student_id=student.id, class_id=classroom.id, delta=30)
        services.spend(student_id=student.id, class_id=classroom.id, amount=10)

        assert services.balance(student_id=student.id, class_id=classroom.id) == {
            "earned": 30,
            "spent": 10,
            "remaining": 20,
        }

    def test_spend_more_than_remaining(self, student, classroom):
        services.award(student_id=student.id, class_id=classroom.id, delta=10)

        with pytest.raises(InsufficientPointsError):
            services.spend(student_id=student.id, class_id=classroom.id, amount=11)

        row = UserPoints.objects.get(student=student, classroom=classroom)
        assert row.total_points == 10
        assert row.spent_points == 0

    def test_spend_without_ledger(self, student, classroom):
        with pytest.raises(InsufficientPointsError):
            services.spend(student_id=student.id, class_id=classroom.id, amount=1)

    def test_balance_defaults_to_zero(self, student, classroom):
        assert services.balance(student_id=student.id, class_id=classroom.id) == {
            "earned": 0,
            "spent": 0,
            "remaining": 0,
        }


class TestRankings:
    def test_members_without_points_rank_with_zero(self, classroom, make_user):
        a, b, c = make_user(name="A"), make_user(name="B"), make_user(name="C")
        for s in (a, b, c):
            ClassMembership.objects.create(classroom=classroom, student=s)

        services.award(student_id=b.id, class_id=classroom.id, delta=15)
        services.award(student_id=c.id, class_id=classroom.id, delta=40)

        ranking = services.rankings(classroom.id)

        assert [r["student_id"] for r in ranking] == [c.id, b.id, a.id]
        assert [r["total_points"] for r in ranking] == [40, 15, 0]
        assert ranking[0]["student_name"] == "C"

    def test_points_from_other_class_ignored(self, classroom, student, teacher):
        from apps.domains.classes.models import Class

        other = Class.objects.create(teacher=teacher, year="2025", class_name="Other", subject="Math")
        ClassMembership.objects.create(classroom=classroom, student=student)
        services.award(student_id=student.id, class_id=other.id, delta=99)

        assert services.rankings(classroom.id)[0]["total_points"] == 0


class TestMyPointsView:
    def test_member_sees_balance(self, student_client, student, classroom, membership):
        services.award(student_id=student.id, class_id=classroom.id, delta=12)

        resp = student_client.get(f"/api/v1/points/classes/{classroom.id}/me/")

        assert resp.status_code == 200
        assert resp.data["earned"] == 12
        assert resp.data["remaining"] == 12

    def test_non_member_forbidden(self, student_client, classroom):
        resp = student_client.get(f"/api/v1/points/classes/{classroom.id}/me/")
        assert resp.status_code == 403


@pytest.mark.django_db(transaction=True)
@pytest.mark.skipif(
    connection.vendor != "postgresql",
    reason="concurrent writes need PostgreSQL (SQLite serializes the whole database)",
)
def test_concurrent_awards_do_not_lose_updates(student, classroom):
    n = 20
    barrier = threading.Barrier(n)
    errors = []

    def worker():
        try:
            barrier.wait()
            services.award(student_id=student.id, class_id=classroom.id, delta=1)
        except Exception as e:
            errors.append(e)
        finally:
            connection.close()

    threads = [threading.Thread(target=worker) for _ in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert UserPoints.objects.get(student=student, classroom=classroom).total_points == n
