from sqlalchemy import create_engine, inspect, text

from backend.database import ensure_sweet_schema


def test_ensure_sweet_schema_adds_search_indexes_to_legacy_table() -> None:
    engine = create_engine('sqlite:///:memory:')
    with engine.begin() as connection:
        connection.execute(text(
            'CREATE TABLE sweets (id VARCHAR(36) PRIMARY KEY, name VARCHAR, category VARCHAR, '
            'price NUMERIC(10, 2), quantity INTEGER)'
        ))

    ensure_sweet_schema(bind=engine)

    index_names = {index['name'] for index in inspect(engine).get_indexes('sweets')}
    assert {'ix_sweets_name', 'ix_sweets_category', 'ix_sweets_price'} <= index_names


def test_ensure_sweet_schema_ignores_missing_table() -> None:
    engine = create_engine('sqlite:///:memory:')

    ensure_sweet_schema(bind=engine)

    assert 'sweets' not in inspect(engine).get_table_names()
