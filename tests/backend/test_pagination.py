from backend.app.pagination import Pagination


def test_defaults_when_nothing_requested():
    paging = Pagination.create(None, None, 250)

    assert (paging.page, paging.per_page, paging.page_count) == (1, 100, 3)
    assert (paging.offset, paging.limit) == (0, 100)


def test_offset_follows_page():
    paging = Pagination.create(3, 20, 250)

    assert paging.offset == 40
    assert paging.limit == 20
    assert paging.page_count == 13


def test_page_is_clamped_to_last_page():
    paging = Pagination.create(10, 100, 250)

    assert paging.page == 3
    assert paging.offset == 200


def test_non_positive_values_fall_back_to_defaults():
    paging = Pagination.create(0, -5, 10)

    assert paging.page == 1
    assert paging.per_page == 100


def test_page_size_is_capped():
    assert Pagination.create(1, 5000, 10).per_page == 1000
    assert Pagination.create(1, 50, 10, default_page_size=20, max_page_size=30).per_page == 30


def test_unknown_total_keeps_requested_page():
    paging = Pagination.create(7, 10, -1)

    assert paging.page_count == -1
    assert paging.page == 7
    assert paging.offset == 60


def test_empty_collection():
    paging = Pagination.create(4, 10, 0)

    assert paging.page == 1
    assert paging.page_count == 0
    assert paging.offset == 0


def test_to_page_envelope():
    page = Pagination.create(2, 2, 5).to_page(["c", "d"])

    assert page.model_dump() == {
        "page": 2,
        "per_page": 2,
        "page_count": 3,
        "total_count": 5,
        "items": ["c", "d"],
    }
