"""
Tests for column definitions that SQLite does not enforce.
"""
from sqlalchemy.dialects import mysql

from backpacker.models import Review, SavedTrip, User
from backpacker.models.review import location_key
from backpacker.models.user import USERNAME_MAX_LENGTH
from backpacker.schemas.common import RequiredText


def test_user_columns_hold_every_accepted_value():
    assert User.__table__.c.username.type.length >= USERNAME_MAX_LENGTH
    # RFC 5321 limit, also enforced by email-validator
    assert User.__table__.c.email.type.length >= 254


def test_location_columns_hold_every_accepted_value():
    text_limit = RequiredText.__metadata__[0].max_length
    for table in (Review.__table__, SavedTrip.__table__):
        assert table.c.city.type.length >= text_limit
        assert table.c.country.type.length >= text_limit


def test_timestamps_keep_microseconds_on_mysql():
    dialect = mysql.dialect()
    for table in (User.__table__, Review.__table__, SavedTrip.__table__):
        for column in ("created_at", "updated_at"):
            assert table.c[column].type.compile(dialect=dialect) == "DATETIME(6)"


def test_review_location_keys_follow_city_and_country():
    review = Review(city="ÉVORA", country="Portugal")
    assert review.city_key == location_key("évora")
    assert review.country_key == "portugal"
