from django.conf import settings
from parking_spots.exceptions import ValidationError
from parking_spots.pagination import PageRequest, parse_sort


def _parse_int(errors, query_params, name, default, minimum, maximum=None):
    raw = query_params.get(name)
    if raw in (None, ''):
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        errors[name] = ['A valid integer is required.']
        return default
    if value < minimum:
        errors[name] = [f'Ensure this value is greater than or equal to {minimum}.']
    elif maximum is not None and value > maximum:
        errors[name] = [f'Ensure this value is less than or equal to {maximum}.']
    return value


def page_request_from_query(query_params):
    """Build a PageRequest from `page`, `size` and (repeatable) `sort` query parameters."""
    errors = {}
    page = _parse_int(errors, query_params, 'page', 0, 0)
    size = _parse_int(
        errors, query_params, 'size',
        settings.PARKING_SPOT_PAGE_SIZE, 1, settings.PARKING_SPOT_MAX_PAGE_SIZE
    )

    sort = []
    for value in query_params.getlist('sort'):
        if not value:
            continue
        try:
            sort.append(parse_sort(value))
        except ValueError as e:
            errors.setdefault('sort', []).append(str(e))

    if errors:
        raise ValidationError(errors)
    return PageRequest(page=page, size=size, sort=tuple(sort))


def _sort_info(page_request):
    return {
        'sorted': page_request.is_sorted,
        'unsorted': not page_request.is_sorted,
        'empty': not page_request.is_sorted,
    }


def page_envelope(page, content):
    """Wrap serialized page content with page and total metadata."""
    page_request = page.page_request
    return {
        'content': content,
        'pageable': {
            'pageNumber': page_request.page,
            'pageSize': page_request.size,
            'offset': page_request.offset,
            'paged': True,
            'unpaged': False,
            'sort': _sort_info(page_request),
        },
        'totalElements': page.total_elements,
        'totalPages': page.total_pages,
        'last': page.is_last,
        'first': page.is_first,
        'number': page.number,
        'size': page_request.size,
        'numberOfElements': len(content),
        'empty': not content,
        'sort': _sort_info(page_request),
    }
