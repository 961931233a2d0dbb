from db import database
from db.database import ScheduleStore
from utils.scheduler import DAY_MS, ReviewState


def test_save_and_load_round_trip(senderos_home):
    database.init_db()
    schedules = {
        "Greetings::hola::hello": ReviewState(ef=2.5, reps=1, interval=DAY_MS, due=10),
        "Numbers::dos::two": ReviewState(ef=1.3, reps=0, interval=60_000, due=20, lapses=9, is_leech=True),
    }
    with database.get_conn() as conn:
        ScheduleStore(conn).save(schedules)
    with database.get_conn() as conn:
        assert ScheduleStore(conn).load() == schedules


def test_save_replaces_the_whole_mapping(senderos_home):
    database.init_db()
    with database.get_conn() as conn:
        store = ScheduleStore(conn)
        store.save({"a": ReviewState(ef=2.5, reps=1, interval=DAY_MS, due=10)})
        store.save({"b": ReviewState(ef=2.5, reps=2, interval=6 * DAY_MS, due=10)})
        assert list(store.load()) == ["b"]
        store.save({})
        assert store.load() == {}


def test_missing_table_loads_as_empty(senderos_home):
    with database.get_conn() as conn:
        assert ScheduleStore(conn).load() == {}


def test_corrupt_rows_load_as_empty(senderos_home):
    database.init_db()
    with database.get_conn() as conn:
        conn.execute(
            "INSERT INTO schedules (card_id, ef, reps, interval_ms, due_ms) VALUES (?, ?, ?, ?, ?)",
            ("a", "not a number", 0, 0, 0),
        )
        conn.commit()
        assert ScheduleStore(conn).load() == {}


def test_corrupt_file_loads_as_empty(senderos_home):
    database.DB_PATH.write_bytes(b"this is not a sqlite database" * 100)
    with database.get_conn() as conn:
        assert ScheduleStore(conn).load() == {}


def test_init_db_sets_schema_version(senderos_home):
    database.init_db()
    with database.get_conn() as conn:
        assert database.get_schema_version(conn) == database.SCHEMA_VERSION
