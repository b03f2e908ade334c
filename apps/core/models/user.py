from django.db import models
from django.contrib.auth.models import AbstractUser, BaseUserManager, Group, Permission


# --------------------------------------------------
# Manager
# --------------------------------------------------

class UserManager(BaseUserManager):
    """phone 을 로그인 식별자로 사용하는 매니저"""

    use_in_migrations = True

    def _create_user(self, phone, password, **extra_fields):
        if not phone:
            raise ValueError("phone is required")
        user = self.model(phone=phone, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, phone, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(phone, password, **extra_fields)

    def create_superuser(self, phone, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", User.Role.TEACHER)
        return self._create_user(phone, password, **extra_fields)


# --------------------------------------------------
# Custom User (AUTH_USER_MODEL)
# --------------------------------------------------

class User(AbstractUser):
    """
    Custom User 모델
    - AUTH_USER_MODEL = core.User
    - 로그인 식별자: phone (unique)
    - role 은 가입 시 결정되며 이후 변경하지 않는다
    """

    class Role(models.TextChoices):
        TEACHER = "teacher", "Teacher"
        STUDENT = "student", "Student"

    username = None

    phone = models.CharField(max_length=20, unique=True)
    name = models.CharField(max_length=50)
    school = models.CharField(max_length=100)
    role = models.CharField(max_length=20, choices=Role.choices)

    # auth.User 와 reverse accessor 충돌 방지
    groups = models.ManyToManyField(
        Group,
        related_name="core_users",
        blank=True,
    )
    user_permissions = models.ManyToManyField(
        Permission,
        related_name="core_users",
        blank=True,
    )

    USERNAME_FIELD = "phone"
    REQUIRED_FIELDS = ["name", "school"]

    objects = UserManager()

    class Meta:
        app_label = "core"
        db_table = "accounts_user"
        ordering = ["-id"]

    def __str__(self):
        return f"{self.name}({self.phone})"

    @property
    def is_teacher(self) -> bool:
        return self.role == self.Role.TEACHER

    @property
    def is_student(self) -> bool:
        return self.role == self.Role.STUDENT
