import pytest

SWEET = {'name': 'Dark Chocolate Truffle', 'category': 'chocolate', 'price': 3.5, 'quantity': 50}


@pytest.fixture
def created_sweet(client, admin_headers) -> dict:
    response = client.post('/api/sweets', json=SWEET, headers=admin_headers)
    assert response.status_code == 201
    return response.json()


def test_admin_can_create_sweet(created_sweet) -> None:
    assert created_sweet['id']
    assert created_sweet['name'] == 'Dark Chocolate Truffle'
    assert created_sweet['price'] == 3.5
    assert created_sweet['quantity'] == 50


def test_regular_user_cannot_create_sweet(client, user_headers) -> None:
    response = client.post('/api/sweets', json=SWEET, headers=user_headers)

    assert response.status_code == 403
    assert response.json() == {'error': {'message': 'Admin access required', 'code': 'FORBIDDEN'}}


def test_listing_requires_authentication(client) -> None:
    assert client.get('/api/sweets').status_code == 401


def test_create_rejects_non_positive_price(client, admin_headers) -> None:
    response = client.post('/api/sweets', json={**SWEET, 'price': 0}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()['error']['message'] == 'Price must be a positive number'


def test_list_and_get_sweets(client, user_headers, created_sweet) -> None:
    listing = client.get('/api/sweets', headers=user_headers)
    single = client.get(f"/api/sweets/{created_sweet['id']}", headers=user_headers)

    assert [sweet['id'] for sweet in listing.json()] == [created_sweet['id']]
    assert single.json()['name'] == 'Dark Chocolate Truffle'


def test_get_unknown_sweet_returns_404(client, user_headers) -> None:
    response = client.get('/api/sweets/missing', headers=user_headers)

    assert response.status_code == 404
    assert response.json() == {'error': {'message': 'Sweet not found', 'code': 'NOT_FOUND'}}


def test_search_by_name_and_price(client, admin_headers, user_headers, created_sweet) -> None:
    client.post('/api/sweets', json={**SWEET, 'name': 'Sour Worms', 'category': 'gummy', 'price': 1.8}, headers=admin_headers)

    by_name = client.get('/api/sweets/search', params={'name': 'CHOC'}, headers=user_headers)
    by_price = client.get('/api/sweets/search', params={'minPrice': 1, 'maxPrice': 2}, headers=user_headers)

    assert [sweet['id'] for sweet in by_name.json()] == [created_sweet['id']]
    assert [sweet['name'] for sweet in by_price.json()] == ['Sour Worms']


def test_update_changes_supplied_fields(client, admin_headers, created_sweet) -> None:
    response = client.put(f"/api/sweets/{created_sweet['id']}", json={'price': 4.25}, headers=admin_headers)

    assert response.status_code == 200
    assert response.json()['price'] == 4.25
    assert response.json()['quantity'] == 50


def test_update_unknown_sweet_returns_404(client, admin_headers) -> None:
    response = client.put('/api/sweets/missing', json={'name': 'Nope'}, headers=admin_headers)

    assert response.status_code == 404


def test_delete_sweet(client, admin_headers, user_headers, created_sweet) -> None:
    response = client.delete(f"/api/sweets/{created_sweet['id']}", headers=admin_headers)

    assert response.status_code == 204
    assert client.get(f"/api/sweets/{created_sweet['id']}", headers=user_headers).status_code == 404
