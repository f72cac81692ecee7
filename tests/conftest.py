from __future__ import annotations

import itertools
from datetime import date, timedelta
from urllib.parse import urlsplit

import pytest

from app import create_app
from app.config import TestConfig
from app.extensions import db
from app.helpers.auth import issue_token, MANAGE_COMPETITIONS
from app.helpers.countries import seed_countries
from app.models import Competition, User


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        seed_countries()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


_seq = itertools.count(1)


@pytest.fixture
def make_user(app):
    def _make(name: str | None = None, is_admin: bool = False) -> User:
        n = next(_seq)
        user = User(
            name=name or f"User {n}",
            email=f"user{n}@example.com",
            is_admin=is_admin,
        )
        db.session.add(user)
        db.session.commit()
        return user
    return _make


@pytest.fixture
def make_competition(app):
    def _make(
        id: str | None = None,
        name: str | None = None,
        starts: date = date(2016, 1, 1),
        days: int = 1,
        country_id: str = "USA",
        visible: bool = True,
        confirmed: bool = True,
        delegates=(),
        organizers=(),
        **kwargs,
    ) -> Competition:
        n = next(_seq)
        comp = Competition(
            id=id or f"Comp{n:04d}{starts.year}",
            name=name or f"Competition {n} {starts.year}",
            country_id=country_id,
            start_date=starts,
            end_date=starts + timedelta(days=days - 1),
            show_at_all=visible,
            is_confirmed=confirmed,
            **kwargs,
        )
        comp.delegates = list(delegates)
        comp.organizers = list(organizers)
        db.session.add(comp)
        db.session.commit()
        return comp
    return _make


@pytest.fixture
def auth_headers(app):
    def _headers(user: User, scopes=(MANAGE_COMPETITIONS,)) -> dict:
        token = issue_token(user, scopes)
        return {"Authorization": f"Bearer {token}"}
    return _headers


def parse_link_header(header: str) -> dict:
    """'<url>; rel="next", ...' -> {"next": "/path?query"}"""
    links = {}
    for part in header.split(","):
        url, rel = part.strip().split(";")
        parts = urlsplit(url.strip()[1:-1])
        rel = rel.strip()[len('rel="'):-1]
        links[rel] = f"{parts.path}?{parts.query}" if parts.query else parts.path
    return links
