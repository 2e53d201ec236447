import django_filters

from .models import Blog


class BlogFilter(django_filters.FilterSet):
    published = django_filters.CharFilter(method="filter_published")

    class Meta:
        model = Blog
        fields = ["published"]

    def filter_published(self, queryset, name, value):
        # Only "true" narrows the list; any other value returns every blog.
        if value == "true":
            return queryset.filter(published=True)
        return queryset
