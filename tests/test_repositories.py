"""Repository tests against a mocked cursor."""

from dataclasses import FrozenInstanceError, replace
from decimal import Decimal

import pytest

from conftest import make_log, utc
from schema import StatsSchema
from services.cache_manager import CacheManager
from services.calculators import ALL_SELLERS, InvalidTimeRange
from services.calculators.models import BonusTargets
from services.repositories import BonusTargetsRepository, SessionLogRepository, UserRepository


TARGETS_ROW = {
    "id": 1,
    "base_pay_per_hour": Decimal("100.00"),
    "daily_target_branded_items": 5,
    "daily_target_free_size_items": 8,
    "daily_target_duration_hours": Decimal("4.00"),
    "daily_bonus_amount": Decimal("500.00"),
    "weekly_target_branded_items": 25,
    "weekly_target_free_size_items": 40,
    "weekly_target_duration_hours": Decimal("20.00"),
    "weekly_bonus_amount": Decimal("2500.00"),
}


def log_row(log_id=1, seller_id=3, **overrides):
    row = {
        "id": log_id,
        "seller_id": seller_id,
        "start_time": utc(2025, 10, 15, 9),
        "end_time": utc(2025, 10, 15, 13),
        "branded_items_sold": 5,
        "free_size_items_sold": None,
    }
    row.update(overrides)
    return row


class TestSessionLogRepository:

    def test_create_returns_new_id(self, fake_db):
        fake_db.cursor.fetchone.return_value = {"id": 42}
        repo = SessionLogRepository(fake_db)

        log_id = repo.create(3, utc(2025, 10, 15, 9), utc(2025, 10, 15, 13), 5, 2)

        assert log_id == 42
        assert fake_db.commit_flags == [True]
        params = fake_db.cursor.execute.call_args.args[1]
        assert params == (3, utc(2025, 10, 15, 9), utc(2025, 10, 15, 13), 5, 2)

    def test_create_rejects_end_before_start(self, fake_db):
        repo = SessionLogRepository(fake_db)
        with pytest.raises(InvalidTimeRange):
            repo.create(3, utc(2025, 10, 15, 13), utc(2025, 10, 15, 9))
        fake_db.cursor.execute.assert_not_called()

    def test_create_allows_zero_duration(self, fake_db):
        fake_db.cursor.fetchone.return_value = {"id": 7}
        repo = SessionLogRepository(fake_db)
        assert repo.create(3, utc(2025, 10, 15, 9), utc(2025, 10, 15, 9)) == 7

    def test_create_rejects_negative_counts(self, fake_db):
        repo = SessionLogRepository(fake_db)
        with pytest.raises(ValueError):
            repo.create(3, utc(2025, 10, 15, 9), utc(2025, 10, 15, 10), branded_items_sold=-1)
        fake_db.cursor.execute.assert_not_called()

    def test_update_rejects_end_before_start(self, fake_db):
        repo = SessionLogRepository(fake_db)
        with pytest.raises(InvalidTimeRange) as exc_info:
            repo.update(9, utc(2025, 10, 15, 13), utc(2025, 10, 15, 9), 0, 0)
        assert exc_info.value.log_id == 9
        fake_db.cursor.execute.assert_not_called()

    def test_update_never_touches_seller(self, fake_db):
        repo = SessionLogRepository(fake_db)
        assert repo.update(9, utc(2025, 10, 15, 9), utc(2025, 10, 15, 10), 1, 2) is True
        assert "seller_id" not in fake_db.executed_sql()[0]

    def test_update_missing_row(self, fake_db):
        fake_db.cursor.rowcount = 0
        repo = SessionLogRepository(fake_db)
        assert repo.update(9, utc(2025, 10, 15, 9), utc(2025, 10, 15, 10), 1, 2) is False

    def test_get_by_id(self, fake_db):
        fake_db.cursor.fetchone.return_value = log_row()
        log = SessionLogRepository(fake_db).get_by_id(1)
        assert log == make_log(utc(2025, 10, 15, 9), hours=4, branded=5, seller_id=3, log_id=1)
        assert fake_db.commit_flags == [False]

    def test_get_by_id_missing(self, fake_db):
        assert SessionLogRepository(fake_db).get_by_id(1) is None

    def test_fetch_logs_for_seller(self, fake_db):
        fake_db.cursor.fetchall.return_value = [log_row(1), log_row(2)]
        start, end = utc(2025, 10, 15), utc(2025, 10, 22)

        logs = SessionLogRepository(fake_db).fetch_logs("3", start, end)

        assert [log.id for log in logs] == [1, 2]
        assert fake_db.cursor.execute.call_args.args[1] == (3, start, end)
        assert "seller_id = %s" in fake_db.executed_sql()[0]

    def test_fetch_logs_for_all_sellers(self, fake_db):
        start, end = utc(2025, 10, 15), utc(2025, 10, 22)

        assert SessionLogRepository(fake_db).fetch_logs(ALL_SELLERS, start, end) == []
        assert fake_db.cursor.execute.call_args.args[1] == (start, end)
        assert "seller_id" not in fake_db.executed_sql()[0]

    def test_get_by_seller_paging(self, fake_db):
        SessionLogRepository(fake_db).get_by_seller(3, limit=5, offset=10)
        assert fake_db.cursor.execute.call_args.args[1] == (3, 5, 10)


class TestBonusTargetsRepository:

    @pytest.fixture
    def repo(self, fake_db):
        return BonusTargetsRepository(fake_db, CacheManager())

    def test_fetch_from_row(self, repo, fake_db, targets):
        fake_db.cursor.fetchone.return_value = TARGETS_ROW
        assert repo.fetch_bonus_targets() == targets

    def test_second_fetch_hits_cache(self, repo, fake_db):
        fake_db.cursor.fetchone.return_value = TARGETS_ROW
        repo.fetch_bonus_targets()
        repo.fetch_bonus_targets()
        assert fake_db.cursor.execute.call_count == 1

    def test_cached_targets_cannot_be_mutated(self, repo, fake_db):
        fake_db.cursor.fetchone.return_value = TARGETS_ROW
        first = repo.fetch_bonus_targets()
        with pytest.raises(FrozenInstanceError):
            first.daily_bonus_amount = Decimal("0")
        assert repo.fetch_bonus_targets().daily_bonus_amount == Decimal("500")

    def test_missing_row_returns_none(self, repo):
        assert repo.fetch_bonus_targets() is None

    def test_missing_row_with_defaults(self, repo):
        assert repo.fetch_bonus_targets(use_defaults=True) == BonusTargets.defaults()

    def test_missing_row_is_not_cached(self, repo, fake_db):
        repo.fetch_bonus_targets(use_defaults=True)
        fake_db.cursor.fetchone.return_value = TARGETS_ROW
        assert repo.fetch_bonus_targets() is not None

    def test_save_invalidates_cache(self, repo, fake_db, targets):
        fake_db.cursor.fetchone.return_value = TARGETS_ROW
        repo.fetch_bonus_targets()

        repo.save(replace(targets, daily_bonus_amount=Decimal("750")))
        repo.fetch_bonus_targets()

        sql = fake_db.executed_sql()
        assert len(sql) == 3
        assert "ON CONFLICT (id) DO UPDATE" in sql[1]

    def test_save_rejects_negative_values(self, repo, fake_db, targets):
        with pytest.raises(ValueError):
            repo.save(replace(targets, weekly_bonus_amount=Decimal("-1")))
        fake_db.cursor.execute.assert_not_called()


class TestUserRepository:

    def test_is_admin(self, fake_db):
        fake_db.cursor.fetchone.return_value = {"id": 1, "role": UserRepository.ROLE_ADMIN}
        assert UserRepository(fake_db).is_admin(1)

    def test_seller_is_not_admin(self, fake_db):
        fake_db.cursor.fetchone.return_value = {"id": 2, "role": UserRepository.ROLE_SELLER}
        assert not UserRepository(fake_db).is_admin(2)

    def test_unknown_user_is_not_admin(self, fake_db):
        assert not UserRepository(fake_db).is_admin(99)

    def test_get_sellers_filters_by_role(self, fake_db):
        UserRepository(fake_db).get_sellers()
        assert fake_db.cursor.execute.call_args.args[1] == ("SELLER",)

    def test_update_profile_blanks_become_null(self, fake_db):
        assert UserRepository(fake_db).update_profile(2, "  Ana  ", phone=" ", gcash="0917 000 0000")
        assert fake_db.cursor.execute.call_args.args[1] == ("Ana", None, "0917 000 0000", 2)

    def test_update_profile_requires_name(self, fake_db):
        with pytest.raises(ValueError):
            UserRepository(fake_db).update_profile(2, "   ")
        fake_db.cursor.execute.assert_not_called()


class TestStatsSchema:

    def test_init_schema_creates_tables_and_seeds(self, fake_db):
        StatsSchema(fake_db).init_schema()

        sql = "\n".join(fake_db.executed_sql())
        for table in StatsSchema.TABLES:
            assert f"CREATE TABLE IF NOT EXISTS {table}" in sql
        assert "CHECK (end_time >= start_time)" in sql
        assert "INSERT INTO bonus_targets" in sql
        fake_db.conn.commit.assert_called_once()

    def test_init_schema_without_seed(self, fake_db):
        StatsSchema(fake_db).init_schema(seed_default_targets=False)
        assert "INSERT INTO bonus_targets" not in "\n".join(fake_db.executed_sql())

    def test_verify_schema(self, fake_db):
        fake_db.cursor.fetchone.return_value = {"exists": True}
        assert StatsSchema(fake_db).verify_schema() == {table: True for table in StatsSchema.TABLES}
