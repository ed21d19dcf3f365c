import itertools

import pytest

from products.services import ProductNotFound, ProductService

pytestmark = pytest.mark.django_db

CATEGORY_OPTIONS = [None, 'electronics', 'books']
MIN_PRICE_OPTIONS = [None, 0, 50]
MAX_PRICE_OPTIONS = [None, 0, 100]
MIN_RATING_OPTIONS = [None, 4.5]
SEARCH_OPTIONS = [None, 'wireless', 'JACKET']


def satisfies(product, filters):
    if filters['category'] and product.category != filters['category']:
        return False
    if filters['minPrice'] is not None and product.price < filters['minPrice']:
        return False
    if filters['maxPrice'] is not None and product.price > filters['maxPrice']:
        return False
    if filters['minRating'] is not None and product.rating < filters['minRating']:
        return False
    if filters['search']:
        needle = filters['search'].lower()
        if needle not in product.name.lower() and needle not in product.description.lower():
            return False
    return True


@pytest.fixture
def service():
    return ProductService()


def test_every_filter_combination_is_an_exact_conjunctive_subset(service, catalog):
    for category, min_price, max_price, min_rating, search in itertools.product(
        CATEGORY_OPTIONS, MIN_PRICE_OPTIONS, MAX_PRICE_OPTIONS, MIN_RATING_OPTIONS, SEARCH_OPTIONS
    ):
        filters = {
            'category': category,
            'minPrice': min_price,
            'maxPrice': max_price,
            'minRating': min_rating,
            'search': search,
        }
        result = {p.id for p in service.find_all(filters)}
        expected = {p.id for p in catalog if satisfies(p, filters)}
        assert result == expected, filters


def test_no_filters_returns_everything(service, catalog):
    assert service.find_all().count() == len(catalog)
    assert service.find_all({}).count() == len(catalog)


def test_zero_max_price_is_a_real_bound(service, catalog):
    result = list(service.find_all({'maxPrice': 0}))

    assert [p.name for p in result] == ['Free Sample Book']


def test_update_by_non_owner_is_not_found_for_every_product(service, catalog, owner, other_user):
    for product in catalog:
        stranger = other_user if product.owner_id == owner.id else owner
        with pytest.raises(ProductNotFound):
            service.update(product.id, {'name': 'Hijacked'}, stranger)
        product.refresh_from_db()
        assert product.name != 'Hijacked'


def test_remove_by_non_owner_is_not_found(service, catalog, other_user):
    product = next(p for p in catalog if p.owner_id != other_user.id)

    with pytest.raises(ProductNotFound):
        service.remove(product.id, other_user)


def test_update_touches_only_supplied_fields(service, catalog, owner):
    product = catalog[0]
    before = product.updated_at

    updated = service.update(product.id, {'rating': 3.0}, owner)

    assert updated.rating == 3.0
    assert updated.name == product.name
    assert updated.updated_at >= before


def test_find_one_missing(service, db):
    with pytest.raises(ProductNotFound) as excinfo:
        service.find_one(12345)

    assert excinfo.value.product_id == 12345


def test_categories_are_sorted_and_distinct(service, catalog):
    assert service.categories() == ['books', 'clothing', 'electronics']
