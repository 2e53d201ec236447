import math

from django.core.paginator import InvalidPage
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class BlogPagination(PageNumberPagination):
    page_size = 10
    page_size_query_param = "limit"
    max_page_size = 100

    def paginate_queryset(self, queryset, request, view=None):
        self.request = request
        page_size = self.get_page_size(request)
        paginator = self.django_paginator_class(queryset, page_size)
        page_number = self.get_page_number(request, paginator)

        try:
            self.page = paginator.page(page_number)
            self.page_number = self.page.number
            return list(self.page)
        except InvalidPage:
            # Past the last page (or a bad number): an empty page, not a 404.
            self.page = None
            self.paginator = paginator
            try:
                self.page_number = max(int(page_number), 1)
            except (TypeError, ValueError):
                self.page_number = 1
            return []

    def get_paginated_response(self, data):
        paginator = self.page.paginator if self.page is not None else self.paginator
        total = paginator.count
        limit = paginator.per_page
        return Response(
            {
                "blogs": data,
                "pagination": {
                    "page": self.page_number,
                    "limit": limit,
                    "total": total,
                    "pages": math.ceil(total / limit) if limit else 0,
                },
            }
        )
