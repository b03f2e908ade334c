import django_filters

from .models import LearningMaterial


class MaterialFilter(django_filters.FilterSet):
    """
    ?tags=math,physics → 태그 중 하나라도 일치
    """

    tags = django_filters.CharFilter(method="filter_tags")

    class Meta:
        model = LearningMaterial
        fields = ["file_type"]

    def filter_tags(self, queryset, name, value):
        names = [t.strip() for t in value.split(",") if t.strip()]
        if not names:
            return queryset
        return queryset.filter(tags__name__in=names).distinct()
