import pytest

from apps.domains.materials.models import LearningMaterial, MaterialTag
from apps.domains.materials.services import clean_tags, create_material, derive_extension

pytestmark = pytest.mark.django_db

BASE = "/api/v1/materials/"


class TestDeriveExtension:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("/objects/uploads/abc.PDF", ".pdf"),
            ("/objects/uploads/a.b.docx", ".docx"),
            ("/objects/uploads/abc", ""),
            ("/objects/uploads/abc.", ""),
            (".hidden", ""),
        ],
    )
    def test_derive(self, url, expected):
        assert derive_extension(url) == expected

    def test_clean_tags(self):
        assert clean_tags([" math ", "", "math", "physics"]) == ["math", "physics"]


class TestUpload:
    def test_teacher_uploads_with_tags(self, teacher_client, teacher):
        resp = teacher_client.post(
            BASE + "upload/",
            {
                "name": "Worksheet",
                "file_type": "document",
                "file_url": "/objects/uploads/ws.PDF",
                "tags": ["math", "grade8"],
            },
            format="json",
        )

        assert resp.status_code == 201
        assert resp.data["file_extension"] == ".pdf"
        assert sorted(resp.data["tags"]) == ["grade8", "math"]
        assert LearningMaterial.objects.get().teacher == teacher

    def test_client_extension_wins(self, teacher_client):
        resp = teacher_client.post(
            BASE + "upload/",
            {
                "name": "Slides",
                "file_type": "document",
                "file_url": "/objects/uploads/no-ext",
                "file_extension": ".pptx",
            },
            format="json",
        )
        assert resp.data["file_extension"] == ".pptx"

    def test_required_fields(self, teacher_client):
        resp = teacher_client.post(BASE + "upload/", {"name": "x"}, format="json")
        assert resp.status_code == 400

    def test_student_cannot_upload(self, student_client):
        resp = student_client.post(
            BASE + "upload/",
            {"name": "x", "file_type": "doc", "file_url": "/objects/uploads/x.pdf"},
            format="json",
        )
        assert resp.status_code == 403


class TestListAndFilter:
    def test_any_tag_match(self, student_client, teacher):
        create_material(teacher=teacher, name="A", file_type="doc", file_url="/a.pdf", tags=["math"])
        create_material(teacher=teacher, name="B", file_type="doc", file_url="/b.pdf", tags=["physics", "math"])
        create_material(teacher=teacher, name="C", file_type="doc", file_url="/c.pdf", tags=["art"])

        resp = student_client.get(BASE, {"tags": "math,physics"})

        assert resp.status_code == 200
        assert sorted(m["name"] for m in resp.data) == ["A", "B"]

    def test_list_without_filter(self, student_client, teacher):
        create_material(teacher=teacher, name="A", file_type="doc", file_url="/a.pdf")
        assert len(student_client.get(BASE).data) == 1

    def test_my_materials(self, teacher_client, teacher, make_user):
        other = make_user(role="teacher")
        create_material(teacher=teacher, name="Mine", file_type="doc", file_url="/a.pdf")
        create_material(teacher=other, name="Theirs", file_type="doc", file_url="/b.pdf")

        resp = teacher_client.get(BASE + "teacher/my-materials/")

        assert [m["name"] for m in resp.data] == ["Mine"]

    def test_detail(self, student_client, teacher):
        material = create_material(teacher=teacher, name="A", file_type="doc", file_url="/a.pdf", tags=["x"])

        resp = student_client.get(f"{BASE}{material.id}/")

        assert resp.status_code == 200
        assert resp.data["tags"] == ["x"]

    def test_anonymous_list(self, api_client):
        assert api_client.get(BASE).status_code == 401


class TestDelete:
    def test_owner_deletes(self, teacher_client, teacher):
        material = create_material(teacher=teacher, name="A", file_type="doc", file_url="/a.pdf", tags=["x"])

        resp = teacher_client.delete(f"{BASE}{material.id}/")

        assert resp.status_code == 200
        assert not LearningMaterial.objects.exists()
        assert not MaterialTag.objects.exists()

    def test_non_owner_gets_not_found(self, client_for, make_user, teacher):
        material = create_material(teacher=teacher, name="A", file_type="doc", file_url="/a.pdf")
        client = client_for(make_user(role="teacher"))

        assert client.delete(f"{BASE}{material.id}/").status_code == 404
        assert LearningMaterial.objects.filter(id=material.id).exists()

    def test_batch_delete(self, teacher_client, teacher):
        ids = [
            create_material(teacher=teacher, name=n, file_type="doc", file_url=f"/{n}.pdf").id
            for n in ("a", "b")
        ]

        resp = teacher_client.delete(BASE + "batch/delete/", {"ids": ids}, format="json")

        assert resp.status_code == 200
        assert resp.data["deleted_count"] == 2
        assert not LearningMaterial.objects.exists()

    def test_batch_delete_is_all_or_nothing(self, teacher_client, teacher, make_user):
        mine = create_material(teacher=teacher, name="mine", file_type="doc", file_url="/m.pdf")
        theirs = create_material(teacher=make_user(role="teacher"), name="theirs", file_type="doc", file_url="/t.pdf")

        resp = teacher_client.delete(BASE + "batch/delete/", {"ids": [mine.id, theirs.id]}, format="json")

        assert resp.status_code == 403
        assert LearningMaterial.objects.count() == 2

    def test_batch_delete_empty_ids(self, teacher_client):
        resp = teacher_client.delete(BASE + "batch/delete/", {"ids": []}, format="json")
        assert resp.status_code == 400
