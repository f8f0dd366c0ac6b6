from dataclasses import dataclass

from django.core.paginator import Paginator

ASC = 'ASC'
DESC = 'DESC'

# Sortable API field name -> ParkingSpot model field
SORTABLE_FIELDS = {
    'id': 'id',
    'spotNumber': 'spot_number',
    'licensePlate': 'license_plate',
    'brand': 'brand',
    'model': 'model',
    'color': 'color',
    'responsibleName': 'responsible_name',
    'apartment': 'apartment',
    'block': 'block',
    'registeredAt': 'registered_at',
}

DEFAULT_SORT = (('id', ASC),)


@dataclass(frozen=True)
class PageRequest:
    page: int = 0
    size: int = 10
    # Empty means the caller asked for no ordering; rows still come back by id
    sort: tuple = ()

    @property
    def offset(self):
        return self.page * self.size

    @property
    def is_sorted(self):
        return bool(self.sort)

    def order_by(self):
        """Django `order_by` arguments for the requested sort keys."""
        ordering = []
        for name, direction in self.sort or DEFAULT_SORT:
            model_field = SORTABLE_FIELDS[name]
            ordering.append(f"-{model_field}" if direction == DESC else model_field)
        # id breaks ties so pages never overlap
        if 'id' not in ordering and '-id' not in ordering:
            ordering.append('id')
        return ordering


@dataclass
class Page:
    """One 0-based page of rows out of a Django Paginator."""

    content: list
    page_request: PageRequest
    paginator: Paginator

    @classmethod
    def from_queryset(cls, queryset, page_request):
        paginator = Paginator(queryset, page_request.size)
        number = page_request.page + 1
        # Past the end: skip the slice query so huge offsets never reach the database
        if number > paginator.num_pages:
            return cls(content=[], page_request=page_request, paginator=paginator)
        return cls(
            content=list(paginator.page(number).object_list),
            page_request=page_request,
            paginator=paginator,
        )

    @property
    def total_elements(self):
        return self.paginator.count

    @property
    def total_pages(self):
        # Paginator reports one empty page for an empty table
        return self.paginator.num_pages if self.paginator.count else 0

    @property
    def number(self):
        return self.page_request.page

    @property
    def is_first(self):
        return self.number == 0

    @property
    def is_last(self):
        return self.number + 1 >= self.total_pages


def parse_sort(value):
    """
    Parse a `field[,asc|desc]` sort expression into a (field, direction) pair.
    Raises ValueError on an unknown field or direction.
    """
    name, _, direction = value.partition(',')
    name = name.strip()
    direction = (direction.strip() or ASC).upper()
    if name not in SORTABLE_FIELDS:
        raise ValueError(f"Unknown sort field '{name}'")
    if direction not in (ASC, DESC):
        raise ValueError(f"Unknown sort direction '{direction}'")
    return name, direction
