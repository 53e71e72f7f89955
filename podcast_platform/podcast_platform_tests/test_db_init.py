"""Tests for database initialization."""
from sqlalchemy import inspect, create_engine

from podcast_platform.podcast_platform.podcast_service import db as db_module
from podcast_platform.podcast_platform.podcast_service.db import init_db, get_db


def _init_into(tmp_path):
    test_engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", connect_args={"check_same_thread": False})

    # Temporarily override the engine in the db module
    original_engine = db_module.engine
    db_module.engine = test_engine
    try:
        init_db()
    finally:
        db_module.engine = original_engine
    return test_engine


def test_init_db_creates_tables(tmp_path):
    inspector = inspect(_init_into(tmp_path))

    assert {"users", "podcasts", "episodes"} <= set(inspector.get_table_names())

    user_columns = {col['name']: col for col in inspector.get_columns('users')}
    for col_name in ['id', 'email', 'password', 'role', 'created_at', 'updated_at']:
        assert col_name in user_columns, f"Column {col_name} should exist in users table"
    assert user_columns['password']['nullable'] is False
    assert user_columns['role']['nullable'] is True

    podcast_columns = {col['name'] for col in inspector.get_columns('podcasts')}
    assert {'id', 'title', 'category', 'rating'} <= podcast_columns


def test_init_db_creates_episode_foreign_key(tmp_path):
    inspector = inspect(_init_into(tmp_path))

    foreign_keys = inspector.get_foreign_keys('episodes')
    podcast_fk = next((fk for fk in foreign_keys if fk['referred_table'] == 'podcasts'), None)
    assert podcast_fk is not None, "Foreign key to podcasts table should exist"
    assert podcast_fk['constrained_columns'] == ['podcast_id']

    episode_columns = {col['name']: col for col in inspector.get_columns('episodes')}
    assert episode_columns['podcast_id']['nullable'] is False


def test_get_db_yields_and_closes_session():
    gen = get_db()
    session = next(gen)
    assert session.is_active
    gen.close()
